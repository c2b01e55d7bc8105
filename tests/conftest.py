# tests/conftest.py
import json

import pytest
import requests

from daily_news import NewsFetcher

BASE_URL = "https://news.example.com/feeds"


def make_record(hash_, title, source, published, categories=(), authors=(), description=""):
    return {
        "hash": hash_,
        "item": {
            "title": title,
            "description": description,
            "links": [f"https://example.com/{hash_}"],
            "categories": list(categories),
            "source": source,
            "authors": [{"name": a} for a in authors],
            "image": {"url": f"https://example.com/{hash_}.jpg"},
            "published": published,
        },
    }


SAMPLE_RECORDS = [
    make_record("h1", "Local team wins final", "BBC", "2024-11-12T08:00:00Z",
                categories=["Sports", "Local"], authors=["Jane Doe"],
                description="A thrilling match downtown."),
    make_record("h2", "Markets rally", "Reuters", "2024-11-12T10:30:00Z",
                categories=["Business"], authors=["John Smith"],
                description="Stocks climbed on Tuesday."),
    make_record("h3", "Election results", "BBC", "2024-11-12T12:00:00+00:00",
                categories=["Politics", "World"], authors=["Jane Roe", "Alan Key"],
                description="Counting continues."),
    make_record("h4", "Chip maker earnings", "Reuters", "2024-11-12T09:15:00Z",
                categories=["Business", "Technology"], authors=["Ann Lee"],
                description="Quarterly results beat forecasts."),
    make_record("h5", "Cup draw announced", "AP", "2024-11-12T07:00:00Z",
                categories=["sports"], authors=["john smithson"],
                description="Draw held in Zurich."),
    make_record("h6", "Tech stocks slide", "Reuters", "2024-11-12T11:45:00Z",
                categories=["business", "Technology"], authors=[],
                description="Markets close lower."),
]


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    def json(self):
        if self._text is not None:
            return json.loads(self._text)
        return self._payload


class FakeSession:
    """Stands in for requests.Session; records every requested URL."""

    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture()
def records():
    return [dict(r) for r in SAMPLE_RECORDS]


@pytest.fixture()
def session(records):
    return FakeSession(FakeResponse(200, records))


@pytest.fixture()
def fetcher(session):
    return NewsFetcher(BASE_URL, 12, 11, 2024, session=session)


@pytest.fixture(params=["http_500", "malformed_json", "not_a_list", "malformed_element", "network_error"])
def broken_fetcher(request):
    if request.param == "http_500":
        sess = FakeSession(FakeResponse(500, {"error": "boom"}))
    elif request.param == "malformed_json":
        sess = FakeSession(FakeResponse(200, text="[{not json"))
    elif request.param == "not_a_list":
        sess = FakeSession(FakeResponse(200, {"items": []}))
    elif request.param == "malformed_element":
        sess = FakeSession(FakeResponse(200, [1, {"hash": "x"}]))
    else:
        sess = FakeSession(exc=requests.ConnectionError("connection refused"))
    return NewsFetcher(BASE_URL, 12, 11, 2024, session=sess)
