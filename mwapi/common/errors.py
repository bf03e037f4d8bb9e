"""Error records and their categories for MediaWiki API responses."""

from enum import Enum
from http import HTTPStatus
from typing import Dict, List

INVALID_BODY = "invalidbody"
UNDEFINED_STATUS = "undefined"


class ErrorCategory(Enum):
    """Where an error record came from."""
    TRANSPORT = "transport"
    DECODE = "decode"
    API = "api"


def error_record(code: str, info: str = "") -> Dict[str, str]:
    return {"code": code, "info": info}


def status_phrase(status_code: int) -> str:
    """Standard reason phrase for an HTTP status code, or "undefined"."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return UNDEFINED_STATUS


_TRANSPORT_CODES = {s.phrase for s in HTTPStatus} | {UNDEFINED_STATUS}


def categorize_error(record: Dict[str, str]) -> ErrorCategory:
    code = record.get("code", "")
    if code == INVALID_BODY:
        return ErrorCategory.DECODE
    elif code in _TRANSPORT_CODES:
        return ErrorCategory.TRANSPORT
    else:
        return ErrorCategory.API


class MediaWikiApiError(Exception):
    """Raised on request by MediaWikiResponse.raise_for_errors()."""

    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        codes = ", ".join(str(e.get("code")) for e in errors) or "unknown"
        super().__init__(f"MediaWiki API error: {codes}")
