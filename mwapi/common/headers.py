from typing import Iterable, Mapping, Optional, Tuple, Union

from requests.structures import CaseInsensitiveDict

CONTENT_TYPE = "Content-Type"
MEDIAWIKI_API_ERROR = "MediaWiki-API-Error"
JSON_CONTENT_TYPE = "application/json"

HeaderValue = Union[str, Iterable[str]]


def normalize_headers(headers: Optional[Mapping[str, HeaderValue]]) -> CaseInsensitiveDict:
    """Case-insensitive header map with every value as a tuple of strings.

    A plain string is kept whole (no splitting on commas), so both
    ``{"Content-Type": "application/json"}`` and ``requests`` header
    structures end up as ``{"Content-Type": ("application/json",)}``.
    """
    out = CaseInsensitiveDict()
    for name, value in (headers or {}).items():
        if isinstance(value, (str, bytes)):
            values: Tuple[str, ...] = (_text(value),)
        else:
            values = tuple(_text(v) for v in value)
        out[name] = values
    return out


def first_header(headers: Mapping[str, Tuple[str, ...]], name: str) -> str:
    values = headers.get(name) or ()
    return values[0] if values else ""


def _text(value) -> str:
    # latin-1 is what http.client uses for raw header bytes
    return value.decode("latin-1") if isinstance(value, bytes) else str(value)
