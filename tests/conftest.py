# tests/conftest.py
import json
import logging

import pytest
import requests


JSON_HEADERS = {"Content-Type": ["application/json; charset=utf-8"]}


def make_requests_response(body="", status=200, headers=None) -> requests.Response:
    """A real requests.Response without touching the network."""
    resp = requests.Response()
    resp.status_code = status
    resp._content = body.encode("utf-8") if isinstance(body, str) else body
    resp.encoding = "utf-8"
    resp.headers.update(headers or {})
    resp.url = "https://example.org/w/api.php"
    return resp


@pytest.fixture
def json_headers():
    return dict(JSON_HEADERS)


@pytest.fixture
def query_body():
    return {
        "batchcomplete": True,
        "query": {
            "recentchanges": [
                {"type": "edit", "title": "Foo", "user": "Alice", "revid": 11},
                {"type": "new", "title": "Bar", "user": "Bob", "revid": 12},
            ]
        },
    }


@pytest.fixture
def query_json(query_body):
    return json.dumps(query_body)


@pytest.fixture
def requests_response():
    return make_requests_response


@pytest.fixture(autouse=True)
def reset_mwapi_logger():
    """run_query.main() installs a console handler; drop it between tests."""
    yield
    logger = logging.getLogger("mwapi")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
