from __future__ import annotations

import logging
from datetime import date as _date, datetime
from typing import Callable, List, Optional, Sequence, TypeVar, Union

import requests

from . import queries
from .fetcher import build_url, fetch_news
from .models import DateContext, FetchResult, NewsItem, SourceCount

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NewsFetcher:
    """
    High-level API: fetch one day's JSON news feed and query it.

    Every public query performs a fresh GET of
    ``{base_url}/{MonthName}-{YYYY}/{DD}-{MM}-{YYYY}.json``. Fetch and
    processing failures are logged and yield an empty list; only invalid
    dates raise (InvalidArgument).

    Use `snapshot()` to fetch once, see whether the fetch succeeded, and run
    several functions from `daily_news.queries` over the same items.
    """

    def __init__(
        self,
        base_url: str,
        date: int,
        month: int,
        year: int,
        *,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.base_url = base_url
        self._context = DateContext(date=date, month=month, year=year)
        self.session = session
        self.timeout = timeout

    @classmethod
    def for_day(cls, base_url: str, day: _date, **kwargs) -> "NewsFetcher":
        return cls(base_url, day.day, day.month, day.year, **kwargs)

    @property
    def date_context(self) -> DateContext:
        return self._context

    def create_url(self) -> str:
        return build_url(self.base_url, self._context)

    def set_date(self, date: int, month: int, year: int) -> None:
        """
        Point the fetcher at another day.
        Raises InvalidArgument ("Invalid date" / "Invalid month" / "Invalid year")
        and keeps the current day if any value is out of range.
        """
        self._context = self._context.with_date(date, month, year)

    def snapshot(self) -> FetchResult:
        return fetch_news(self.create_url(), session=self.session, timeout=self.timeout)

    def _fetch_news_data(self) -> List[NewsItem]:
        return self.snapshot().items

    def _query(self, what: str, transform: Callable[[List[NewsItem]], List[T]]) -> List[T]:
        data = self._fetch_news_data()
        try:
            return transform(data)
        except Exception:
            logger.exception("Error %s", what)
            return []

    def return_all_sources(self) -> List[str]:
        return self._query("processing sources", queries.all_sources)

    def return_all_topics(self) -> List[str]:
        """All categories, most frequent first."""
        return self._query("processing categories", queries.all_topics)

    def return_news_with_a_topic(self, category: str) -> List[NewsItem]:
        return self._query(
            "filtering news by category",
            lambda data: queries.with_topic(data, category),
        )

    def return_news_from_source(self, source: str) -> List[NewsItem]:
        return self._query(
            "filtering news by source",
            lambda data: queries.from_source(data, source),
        )

    def search_news_by_keyword(self, keyword: str) -> List[NewsItem]:
        """Items whose title or description contains `keyword`."""
        return self._query(
            "searching news",
            lambda data: queries.search_keyword(data, keyword),
        )

    def return_news_by_author(self, author_name: str) -> List[NewsItem]:
        """Items with an author whose name contains `author_name`."""
        return self._query(
            "filtering by author",
            lambda data: queries.by_author(data, author_name),
        )

    def return_latest_news(self, limit: int = 10) -> List[NewsItem]:
        return self._query(
            "fetching latest news",
            lambda data: queries.latest(data, limit),
        )

    def return_news_in_date_range(
        self,
        start_date: Union[datetime, str],
        end_date: Union[datetime, str],
    ) -> List[NewsItem]:
        """Items published between `start_date` and `end_date`, inclusive. Naive values are UTC."""
        return self._query(
            "filtering by date range",
            lambda data: queries.in_date_range(data, start_date, end_date),
        )

    def return_news_with_multiple_categories(self, categories: Sequence[str]) -> List[NewsItem]:
        """Items that carry every one of `categories`."""
        return self._query(
            "filtering by multiple categories",
            lambda data: queries.with_all_categories(data, categories),
        )

    def return_top_sources_by_article_count(self, limit: int = 5) -> List[SourceCount]:
        return self._query(
            "calculating top sources",
            lambda data: queries.top_sources(data, limit),
        )
