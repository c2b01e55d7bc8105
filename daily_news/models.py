from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from .exceptions import InvalidArgument


MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


@dataclass(frozen=True)
class Author:
    name: str


@dataclass(frozen=True)
class NewsContent:
    """Article payload, the ``item`` object of a feed record."""
    title: str = ""
    description: str = ""
    links: Tuple[str, ...] = ()
    categories: Tuple[str, ...] = ()
    source: str = ""
    authors: Tuple[Author, ...] = ()
    image_url: str = ""
    published: str = ""
    published_at: Optional[datetime] = None


@dataclass(frozen=True)
class NewsItem:
    """
    One article record from the daily feed.

    `raw` keeps the decoded JSON object the item was built from.
    """
    hash: str
    item: NewsContent
    raw: Dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "hash": self.hash,
            "item": {
                "title": self.item.title,
                "description": self.item.description,
                "links": list(self.item.links),
                "categories": list(self.item.categories),
                "source": self.item.source,
                "authors": [{"name": a.name} for a in self.item.authors],
                "image": {"url": self.item.image_url},
                "published": self.item.published,
            },
        }


def _check_range(value: Any, low: int, high: int, label: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"Invalid {label}")
    if value < low or value > high:
        raise InvalidArgument(f"Invalid {label}")


def validate_date(date: Any, month: Any, year: Any) -> None:
    """
    Check a (date, month, year) triple, raising InvalidArgument for the first bad field.

    Order: date (1-31) -> month (1-12) -> year (2000-2100).
    """
    _check_range(date, 1, 31, "date")
    _check_range(month, 1, 12, "month")
    _check_range(year, 2000, 2100, "year")


@dataclass(frozen=True)
class DateContext:
    """The day whose feed file is fetched."""
    date: int
    month: int
    year: int

    def __post_init__(self) -> None:
        validate_date(self.date, self.month, self.year)

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month - 1]

    def path(self) -> str:
        """Feed path relative to the base URL, e.g. ``November-2024/12-11-2024.json``."""
        return f"{self.month_name}-{self.year}/{self.date:02d}-{self.month:02d}-{self.year}.json"

    def with_date(self, date: int, month: int, year: int) -> "DateContext":
        return replace(self, date=date, month=month, year=year)


@dataclass(frozen=True)
class SourceCount:
    source: str
    count: int


@dataclass(frozen=True, eq=False)
class FetchResult:
    """
    Outcome of a single feed fetch.

    A failed fetch carries an empty `items` list and the error that caused it,
    so "nothing matched" and "nothing was fetched" can be told apart.
    """
    url: str
    items: List[NewsItem] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)
