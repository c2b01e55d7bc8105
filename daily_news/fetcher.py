from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests

from .exceptions import NewsFetchError
from .models import DateContext, FetchResult
from .parser import parse_item

logger = logging.getLogger(__name__)


def build_url(base_url: str, context: DateContext) -> str:
    """``{base_url}/{MonthName}-{YYYY}/{DD}-{MM}-{YYYY}.json``"""
    return f"{base_url}/{context.path()}"


def fetch_json(url: str, *, session: Optional[requests.Session] = None,
               timeout: Optional[float] = None) -> List[Any]:
    """
    GET a daily feed file and return its decoded JSON array.

    Raises NewsFetchError on network errors, non-2xx status, undecodable
    bodies, or a body that is not a JSON array.
    """
    getter = session.get if session is not None else requests.get
    try:
        resp = getter(url, timeout=timeout)
    except requests.RequestException as e:
        raise NewsFetchError(f"Failed to fetch news data: {url} ({e})", url=url) from e

    if not 200 <= resp.status_code < 300:
        raise NewsFetchError(
            f"HTTP error! status: {resp.status_code} ({url})",
            url=url,
            status_code=resp.status_code,
        )

    try:
        data = resp.json()
    except ValueError as e:
        raise NewsFetchError(f"Invalid JSON in news data: {url} ({e})", url=url,
                             status_code=resp.status_code) from e

    if not isinstance(data, list):
        raise NewsFetchError(f"News data is not a JSON array: {url}", url=url,
                             status_code=resp.status_code)
    return data


def fetch_news(url: str, *, session: Optional[requests.Session] = None,
               timeout: Optional[float] = None) -> FetchResult:
    """
    Fetch and parse one daily feed.

    Failures never propagate: they are logged and returned as an empty
    FetchResult carrying the error.
    """
    try:
        records = fetch_json(url, session=session, timeout=timeout)
        items = [parse_item(r) for r in records]
    except NewsFetchError as e:
        logger.error("Error fetching news data: %s", e)
        return FetchResult(url=url, error=e)
    except ValueError as e:
        # one malformed record fails the whole snapshot
        error = NewsFetchError(f"Malformed news data: {url} ({e})", url=url)
        logger.error("Error fetching news data: %s", error)
        return FetchResult(url=url, error=error)

    logger.debug("Fetched %d news items from %s", len(items), url)
    return FetchResult(url=url, items=items)
