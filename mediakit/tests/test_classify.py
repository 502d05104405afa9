"""Tests for the media classify module."""

from __future__ import annotations

from mediakit.format import registry
from mediakit.media.classify import CATEGORIES, classify, classify_file_name


class TestClassify:
    def test_publication(self) -> None:
        assert classify("application/epub+zip") == "publication"

    def test_manifest_is_a_publication(self) -> None:
        assert classify("application/webpub+json") == "publication"

    def test_opds(self) -> None:
        assert classify("application/atom+xml;profile=opds-catalog") == "opds"
        assert classify("application/opds+json") == "opds"

    def test_html(self) -> None:
        assert classify("text/html;charset=utf-8") == "html"

    def test_bitmap(self) -> None:
        assert classify("IMAGE/PNG") == "bitmap"

    def test_audio_and_video(self) -> None:
        assert classify("audio/mpeg") == "audio"
        assert classify("video/mp4") == "video"

    def test_plain_json_and_zip(self) -> None:
        assert classify("application/json") == "json"
        assert classify("application/zip") == "zip"

    def test_unknown(self) -> None:
        assert classify("text/plain") == "file"

    def test_invalid_or_missing(self) -> None:
        assert classify("") == "file"
        assert classify("not a media type") == "file"
        assert classify(None) == "file"

    def test_accepts_media_type(self) -> None:
        assert classify(registry.CBZ) == "publication"

    def test_result_is_known_category(self) -> None:
        for media_type in registry.KNOWN_MEDIA_TYPES:
            assert classify(media_type) in CATEGORIES


class TestClassifyFileName:
    def test_by_extension(self) -> None:
        assert classify_file_name("book.epub") == "publication"
        assert classify_file_name("cover.JPG") == "bitmap"
        assert classify_file_name("track.mp3") == "audio"

    def test_no_extension(self) -> None:
        assert classify_file_name("README") == "file"

    def test_unknown_extension(self) -> None:
        assert classify_file_name("archive.7z") == "file"
