"""Tests for the known media type registry."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, fields

import pytest

from mediakit.format import registry
from mediakit.format.media_type import MediaType
from mediakit.format.registry import DEFAULT_TABLE, KNOWN_MEDIA_TYPES, for_extension


class TestKnownMediaTypes:
    def test_constants_are_normalized(self) -> None:
        for media_type in KNOWN_MEDIA_TYPES:
            assert str(media_type) == str(media_type).lower(), media_type

    def test_metadata(self) -> None:
        assert registry.EPUB.name == "EPUB"
        assert registry.EPUB.file_extension == "epub"
        assert registry.LCP_PROTECTED_PDF.name == "LCP Protected PDF"

    def test_opds_constants(self) -> None:
        assert str(registry.OPDS1) == "application/atom+xml;profile=opds-catalog"
        assert registry.OPDS1.contains(registry.OPDS1_ENTRY)
        assert not registry.OPDS1_ENTRY.contains(registry.OPDS1)

    def test_every_constant_is_listed(self) -> None:
        names = [n for n in dir(registry) if isinstance(getattr(registry, n), MediaType)]
        for name in names:
            assert getattr(registry, name) in KNOWN_MEDIA_TYPES, name


class TestForExtension:
    def test_lookup(self) -> None:
        assert for_extension("epub") is registry.EPUB
        assert for_extension(".PDF") is registry.PDF

    def test_aliases(self) -> None:
        assert for_extension("jpg") is registry.JPEG
        assert for_extension("htm") is registry.HTML
        assert for_extension("tif") is registry.TIFF

    def test_shared_extensions(self) -> None:
        assert for_extension("json") is registry.JSON
        assert for_extension("webm") is registry.WEBM_VIDEO

    def test_unknown(self) -> None:
        assert for_extension("nope") is None
        assert for_extension("") is None


class TestDefaultTable:
    def test_is_frozen(self) -> None:
        with pytest.raises(FrozenInstanceError):
            DEFAULT_TABLE.zip_types = ()  # type: ignore[misc]

    def test_every_category_populated(self) -> None:
        for field in fields(DEFAULT_TABLE):
            assert getattr(DEFAULT_TABLE, field.name), field.name

    def test_zip_exceptions(self) -> None:
        assert registry.LCP_PROTECTED_AUDIOBOOK in DEFAULT_TABLE.zip_types
        assert registry.LCP_PROTECTED_PDF in DEFAULT_TABLE.zip_types
