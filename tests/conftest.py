import asyncio
import json
from pathlib import Path
from urllib.parse import parse_qs, urlsplit

import pytest

from bittrex_rest import BittrexApiOptions, RestClient

API_KEY = "an-api-key-should-go-here"
API_SECRET = "an-api-secret-should-go-here"
API_PREFIX = "/api/v1.1"

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    return json.loads((FIXTURES / name).read_text(encoding="utf-8"))


def run(coro):
    return asyncio.run(coro)


class FakeResponse:
    def __init__(self, status_code=200, body=None, reason="OK", headers=None, text=None):
        self.status_code = status_code
        self.reason = reason
        self.headers = headers or {"Content-Type": "application/json"}
        self._body = body
        if text is None:
            text = json.dumps(body) if body is not None else ""
        self.text = text

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Stands in for ``requests.Session``; answers by URL path."""

    def __init__(self):
        self.routes = {}
        self.calls = []
        self.error = None
        self.closed = False

    def reply(self, path, status_code=200, body=None, **kwargs):
        self.routes[API_PREFIX + path] = FakeResponse(status_code, body, **kwargs)
        return self

    def get(self, url, headers=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "headers": headers, "timeout": timeout, "kwargs": kwargs})
        if self.error is not None:
            raise self.error
        return self.routes[urlsplit(url).path]

    def close(self):
        self.closed = True

    @property
    def last_call(self):
        return self.calls[-1]

    @property
    def last_query(self):
        query = parse_qs(urlsplit(self.last_call["url"]).query, keep_blank_values=True)
        return {k: v[0] for k, v in query.items()}


def assert_default_query(query):
    assert query["apikey"] == API_KEY
    assert isinstance(query["nonce"], str)
    assert len(query["nonce"]) == 24


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def options():
    return BittrexApiOptions(api_key=API_KEY, api_secret=API_SECRET)


@pytest.fixture
def client(options, session):
    return RestClient(options, session=session)
