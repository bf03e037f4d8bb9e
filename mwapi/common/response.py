"""Normalized view over one MediaWiki Action API HTTP exchange.

A ``MediaWikiResponse`` is built once from a finished request and is
read-only afterwards. Anything that goes wrong while building it (the
transport reporting a non-200 status, a body that claims to be JSON but
isn't) is recorded as an error record instead of being raised, so callers
check ``has_errors()`` / ``successful()`` the same way for local and
server-side failures.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

import requests
from requests.structures import CaseInsensitiveDict

from mwapi.common.errors import INVALID_BODY, MediaWikiApiError, error_record, status_phrase
from mwapi.common.headers import (
    CONTENT_TYPE,
    JSON_CONTENT_TYPE,
    MEDIAWIKI_API_ERROR,
    HeaderValue,
    first_header,
    normalize_headers,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MediaWikiResponse:
    # fields hold dicts, so instances compare by value but are not hashable
    __hash__ = None

    raw_body: str
    status: int
    headers: CaseInsensitiveDict = field(default_factory=CaseInsensitiveDict)
    transport_status: Optional[int] = None
    body: Dict[str, Any] = field(default_factory=dict)
    local_errors: Tuple[Dict[str, str], ...] = ()

    @classmethod
    def from_raw(
        cls,
        raw_body: str,
        status: int,
        headers: Optional[Mapping[str, HeaderValue]] = None,
        transport: Any = None,
    ) -> "MediaWikiResponse":
        """Build a response; never raises on bad status or bad body.

        ``transport`` is the HTTP client's own response object. Its
        ``status_code`` is checked, and a ``MediaWiki-API-Error`` header
        it carries counts even when ``headers`` lacks one.
        """
        norm_headers = normalize_headers(headers)
        transport_status = getattr(transport, "status_code", None) if transport is not None else None

        transport_headers = normalize_headers(getattr(transport, "headers", None))
        if MEDIAWIKI_API_ERROR in transport_headers and MEDIAWIKI_API_ERROR not in norm_headers:
            norm_headers[MEDIAWIKI_API_ERROR] = transport_headers[MEDIAWIKI_API_ERROR]

        errors: List[Dict[str, str]] = []
        if transport_status is not None and transport_status != 200:
            errors.append(error_record(status_phrase(transport_status), raw_body))

        body: Dict[str, Any] = {}
        if JSON_CONTENT_TYPE in first_header(norm_headers, CONTENT_TYPE):
            body, decode_error = _decode_body(raw_body)
            if decode_error is not None:
                errors.append(decode_error)
        else:
            logger.debug("Skipping body parse, content type %r", first_header(norm_headers, CONTENT_TYPE))

        for err in errors:
            logger.warning("Recorded %s error: %s", err["code"], err["info"][:200])

        return cls(
            raw_body=raw_body,
            status=status,
            headers=norm_headers,
            transport_status=transport_status,
            body=body,
            local_errors=tuple(errors),
        )

    @classmethod
    def from_requests(cls, response: requests.Response) -> "MediaWikiResponse":
        return cls.from_raw(response.text, response.status_code, response.headers, response)

    def successful(self) -> bool:
        """No errors, no warnings and HTTP 200.

        Warnings alone fail this check; use ``not has_errors()`` for
        "nothing fatal".
        """
        return not self.has_errors() and not self.has_warnings() and self.status == 200

    def has_errors(self) -> bool:
        return (
            bool(self.local_errors)
            or self.body.get("error") is not None
            or self.body.get("errors") is not None
            or MEDIAWIKI_API_ERROR in self.headers
        )

    def get_errors(self) -> List[Dict[str, str]]:
        """All error records as one flat list.

        Order: errors recorded while building the response, the body's
        ``error`` (one record or several), the body's ``errors`` list
        (``errorformat`` other than ``bc``), then one record per
        ``MediaWiki-API-Error`` header value.
        """
        if not self.has_errors():
            return []

        errors = list(self.local_errors)
        for err in _as_list(self.body.get("error")):
            errors.append(_as_record(err))
        for err in _as_list(self.body.get("errors")):
            if isinstance(err, dict) and "info" not in err:
                info = err.get("text", err.get("html", ""))
                err = {**err, "info": info}
            errors.append(_as_record(err))
        for code in self.headers.get(MEDIAWIKI_API_ERROR, ()):
            errors.append(error_record(code))
        return errors

    def has_warnings(self) -> bool:
        return "warnings" in self.body

    def get_warnings(self) -> Any:
        return self.body.get("warnings", {})

    def get_query(self) -> Any:
        return self.body.get("query", {})

    def get_body(self) -> Dict[str, Any]:
        return dict(self.body)

    def raise_for_errors(self) -> None:
        if self.has_errors():
            raise MediaWikiApiError(self.get_errors())


def _decode_body(raw_body: str) -> Tuple[Dict[str, Any], Optional[Dict[str, str]]]:
    try:
        decoded = json.loads(raw_body)
    except ValueError as e:
        return {}, error_record(INVALID_BODY, str(e))
    if not isinstance(decoded, dict):
        return {}, error_record(INVALID_BODY, f"Expected a JSON object, got {type(decoded).__name__}")
    return decoded, None


def _as_record(err: Any) -> Dict[str, Any]:
    # {"error": "Service down"} and similar bare values
    if isinstance(err, dict):
        return err
    return error_record(str(err))


def _as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]
