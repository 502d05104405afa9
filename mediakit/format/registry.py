"""Well-known media types and the table the classifier reads from."""

from __future__ import annotations

from dataclasses import dataclass

from .media_type import MediaType
from .text import ascii_lower

_of = MediaType.of

# -- known media types -------------------------------------------------------

AAC = _of("audio/aac", file_extension="aac")
ACSM = _of("application/vnd.adobe.adept+xml", name="Adobe Content Server Message", file_extension="acsm")
AIFF = _of("audio/aiff", file_extension="aiff")
AVI = _of("video/x-msvideo", file_extension="avi")
AVIF = _of("image/avif", file_extension="avif")
BINARY = _of("application/octet-stream")
BMP = _of("image/bmp", file_extension="bmp")
CBZ = _of("application/vnd.comicbook+zip", name="Comic Book Archive", file_extension="cbz")
CSS = _of("text/css", file_extension="css")
DIVINA = _of("application/divina+zip", name="Digital Visual Narratives", file_extension="divina")
DIVINA_MANIFEST = _of("application/divina+json", name="Digital Visual Narratives", file_extension="json")
EPUB = _of("application/epub+zip", name="EPUB", file_extension="epub")
GIF = _of("image/gif", file_extension="gif")
GZ = _of("application/gzip", file_extension="gz")
HTML = _of("text/html", file_extension="html")
JAVASCRIPT = _of("text/javascript", file_extension="js")
JPEG = _of("image/jpeg", file_extension="jpeg")
JSON = _of("application/json", file_extension="json")
LCP_LICENSE_DOCUMENT = _of("application/vnd.readium.lcp.license.v1.0+json", name="LCP License", file_extension="lcpl")
LCP_PROTECTED_AUDIOBOOK = _of("application/audiobook+lcp", name="LCP Protected Audiobook", file_extension="lcpa")
LCP_PROTECTED_PDF = _of("application/pdf+lcp", name="LCP Protected PDF", file_extension="lcpdf")
LCP_STATUS_DOCUMENT = _of("application/vnd.readium.license.status.v1.0+json")
LPF = _of("application/lpf+zip", file_extension="lpf")
MP3 = _of("audio/mpeg", file_extension="mp3")
MPEG = _of("video/mpeg", file_extension="mpeg")
NCX = _of("application/x-dtbncx+xml", file_extension="ncx")
OGG = _of("audio/ogg", file_extension="oga")
OGV = _of("video/ogg", file_extension="ogv")
OPDS1 = _of("application/atom+xml;profile=opds-catalog")
OPDS1_ENTRY = _of("application/atom+xml;type=entry;profile=opds-catalog")
OPDS2 = _of("application/opds+json")
OPDS2_PUBLICATION = _of("application/opds-publication+json")
OPDS_AUTHENTICATION = _of("application/opds-authentication+json")
OPUS = _of("audio/opus", file_extension="opus")
OTF = _of("font/otf", file_extension="otf")
PDF = _of("application/pdf", name="PDF", file_extension="pdf")
PNG = _of("image/png", file_extension="png")
READIUM_AUDIOBOOK = _of("application/audiobook+zip", name="Readium Audiobook", file_extension="audiobook")
READIUM_AUDIOBOOK_MANIFEST = _of("application/audiobook+json", name="Readium Audiobook", file_extension="json")
READIUM_WEBPUB = _of("application/webpub+zip", name="Readium Web Publication", file_extension="webpub")
READIUM_WEBPUB_MANIFEST = _of("application/webpub+json", name="Readium Web Publication", file_extension="json")
SMIL = _of("application/smil+xml", file_extension="smil")
SVG = _of("image/svg+xml", file_extension="svg")
TEXT = _of("text/plain", file_extension="txt")
TIFF = _of("image/tiff", file_extension="tiff")
TTF = _of("font/ttf", file_extension="ttf")
W3C_WPUB_MANIFEST = _of("application/x.readium.w3c.wpub+json", name="Web Publication", file_extension="json")
WAV = _of("audio/wav", file_extension="wav")
WEBM_AUDIO = _of("audio/webm", file_extension="webm")
WEBM_VIDEO = _of("video/webm", file_extension="webm")
WEBP = _of("image/webp", file_extension="webp")
WOFF = _of("font/woff", file_extension="woff")
WOFF2 = _of("font/woff2", file_extension="woff2")
XHTML = _of("application/xhtml+xml", file_extension="xhtml")
XML = _of("application/xml", file_extension="xml")
ZAB = _of("application/x.readium.zab+zip", name="Zipped Audio Book", file_extension="zab")
ZIP = _of("application/zip", file_extension="zip")

KNOWN_MEDIA_TYPES: tuple[MediaType, ...] = (
    AAC, ACSM, AIFF, AVI, AVIF, BINARY, BMP, CBZ, CSS, DIVINA, DIVINA_MANIFEST,
    EPUB, GIF, GZ, HTML, JAVASCRIPT, JPEG, JSON, LCP_LICENSE_DOCUMENT,
    LCP_PROTECTED_AUDIOBOOK, LCP_PROTECTED_PDF, LCP_STATUS_DOCUMENT, LPF, MP3,
    MPEG, NCX, OGG, OGV, OPDS1, OPDS1_ENTRY, OPDS2, OPDS2_PUBLICATION,
    OPDS_AUTHENTICATION, OPUS, OTF, PDF, PNG, READIUM_AUDIOBOOK,
    READIUM_AUDIOBOOK_MANIFEST, READIUM_WEBPUB, READIUM_WEBPUB_MANIFEST, SMIL,
    SVG, TEXT, TIFF, TTF, W3C_WPUB_MANIFEST, WAV, WEBM_AUDIO, WEBM_VIDEO, WEBP,
    WOFF, WOFF2, XHTML, XML, ZAB, ZIP,
)

# Extensions shared by several entries, or spelled more than one way.
_EXTENSION_OVERRIDES: dict[str, MediaType] = {
    "htm": HTML,
    "jpg": JPEG,
    "json": JSON,
    "tif": TIFF,
    "webm": WEBM_VIDEO,
    "xht": XHTML,
}


def _index_by_extension() -> dict[str, MediaType]:
    index = dict(_EXTENSION_OVERRIDES)
    for media_type in KNOWN_MEDIA_TYPES:
        if media_type.file_extension:
            index.setdefault(media_type.file_extension, media_type)
    return index


EXTENSION_TO_MEDIA_TYPE: dict[str, MediaType] = _index_by_extension()


def for_extension(extension: str) -> MediaType | None:
    """Return the known media type for a file extension (``".EPUB"`` or ``"epub"``)."""
    return EXTENSION_TO_MEDIA_TYPE.get(ascii_lower(extension.strip().lstrip(".")))


# -- classifier table --------------------------------------------------------


@dataclass(frozen=True)
class ClassifierTable:
    """Patterns and structured syntax suffixes answering each category.

    A media type falls in a category when its suffix is one of the listed
    suffixes or when one of the listed patterns contains it.
    """

    zip_suffixes: frozenset[str]
    zip_types: tuple[MediaType, ...]
    json_suffixes: frozenset[str]
    json_types: tuple[MediaType, ...]
    opds_types: tuple[MediaType, ...]
    html_types: tuple[MediaType, ...]
    bitmap_types: tuple[MediaType, ...]
    audio_types: tuple[MediaType, ...]
    video_types: tuple[MediaType, ...]
    rwpm_types: tuple[MediaType, ...]
    publication_types: tuple[MediaType, ...]


DEFAULT_TABLE = ClassifierTable(
    zip_suffixes=frozenset({"+zip"}),
    # LCP-protected packages are ZIP archives without the "+zip" hint.
    zip_types=(ZIP, LCP_PROTECTED_AUDIOBOOK, LCP_PROTECTED_PDF),
    json_suffixes=frozenset({"+json"}),
    json_types=(JSON,),
    opds_types=(OPDS1, OPDS1_ENTRY, OPDS2, OPDS2_PUBLICATION, OPDS_AUTHENTICATION),
    html_types=(HTML, XHTML),
    bitmap_types=(BMP, GIF, JPEG, PNG, TIFF),
    audio_types=(_of("audio/*"),),
    video_types=(_of("video/*"),),
    rwpm_types=(READIUM_AUDIOBOOK_MANIFEST, DIVINA_MANIFEST, READIUM_WEBPUB_MANIFEST),
    publication_types=(
        READIUM_AUDIOBOOK,
        READIUM_AUDIOBOOK_MANIFEST,
        CBZ,
        DIVINA,
        DIVINA_MANIFEST,
        EPUB,
        LCP_PROTECTED_AUDIOBOOK,
        LCP_PROTECTED_PDF,
        LPF,
        PDF,
        W3C_WPUB_MANIFEST,
        READIUM_WEBPUB,
        READIUM_WEBPUB_MANIFEST,
        ZAB,
    ),
)
