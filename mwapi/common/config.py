import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://en.wikipedia.org/w/api.php"
DEFAULT_UA = "MediaWikiResponseClient/1.0 (contact: example@example.com)"
DEFAULT_TIMEOUT = 30.0


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r, not a number; using %s", name, raw, default)
        return default


API_URL = os.environ.get("MW_API_URL", DEFAULT_API_URL)
UA = os.environ.get("MW_USER_AGENT", DEFAULT_UA)
TIMEOUT = _env_float("MW_TIMEOUT", DEFAULT_TIMEOUT)
