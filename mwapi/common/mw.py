import logging
from typing import Dict, Optional

import requests

from mwapi.common import config
from mwapi.common.response import MediaWikiResponse

logger = logging.getLogger(__name__)

API_DEFAULTS = {"format": "json", "formatversion": "2"}


class MWClient:
    def __init__(self, url: Optional[str] = None, user_agent: Optional[str] = None,
                 timeout: Optional[float] = None):
        self.url = url or config.API_URL
        self.timeout = config.TIMEOUT if timeout is None else timeout
        self.session = requests.Session()
        self.session.headers.update({"User-Agent": user_agent or config.UA})

    def get(self, params: Dict) -> MediaWikiResponse:
        """One-shot GET (no continuation, no retries)."""
        params = {**API_DEFAULTS, **params}
        logger.debug("GET %s action=%s", self.url, params.get("action"))
        r = self.session.get(self.url, params=params, timeout=self.timeout)
        return MediaWikiResponse.from_requests(r)

    def post(self, params: Dict, data: Optional[Dict] = None) -> MediaWikiResponse:
        params = {**API_DEFAULTS, **params}
        logger.debug("POST %s action=%s", self.url, params.get("action"))
        r = self.session.post(self.url, params=params, data=data or {}, timeout=self.timeout)
        return MediaWikiResponse.from_requests(r)

    def query(self, params: Dict) -> MediaWikiResponse:
        return self.get({**params, "action": "query"})
