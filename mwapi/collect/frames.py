import pandas as pd

from mwapi.common.errors import categorize_error
from mwapi.common.response import MediaWikiResponse


def query_frame(response: MediaWikiResponse, key: str) -> pd.DataFrame:
    """Rows of ``query[key]`` (e.g. "recentchanges", "pages") as a DataFrame.

    formatversion=1 returns ``pages`` as a dict keyed by page id; those are
    flattened to their values.
    """
    rows = response.get_query().get(key) or []
    if isinstance(rows, dict):
        rows = list(rows.values())
    return pd.DataFrame(rows)


def errors_frame(response: MediaWikiResponse) -> pd.DataFrame:
    rows = []
    for err in response.get_errors():
        rows.append({
            "code": err.get("code", ""),
            "info": err.get("info", ""),
            "category": categorize_error(err).value,
        })
    return pd.DataFrame(rows, columns=["code", "info", "category"])
