"""
Pure query functions over a fetched snapshot.

Each function takes a sequence of NewsItem and returns a new list; the input
is never modified. String matching lowercases both sides.
"""
from __future__ import annotations

from collections import Counter
from datetime import datetime
from typing import Iterable, List, Sequence, Union

from .models import NewsItem, SourceCount
from .parser import parse_timestamp


def all_sources(items: Iterable[NewsItem]) -> List[str]:
    """Distinct sources in first-seen order."""
    return list(dict.fromkeys(it.item.source for it in items))


def all_topics(items: Iterable[NewsItem]) -> List[str]:
    """Distinct categories, most frequent first; ties keep first-seen order."""
    freq: Counter = Counter()
    for it in items:
        freq.update(it.item.categories)
    # Counter preserves insertion order and sorted() is stable
    return [cat for cat, _ in sorted(freq.items(), key=lambda kv: kv[1], reverse=True)]


def with_topic(items: Iterable[NewsItem], category: str) -> List[NewsItem]:
    wanted = category.lower()
    return [it for it in items if any(c.lower() == wanted for c in it.item.categories)]


def from_source(items: Iterable[NewsItem], source: str) -> List[NewsItem]:
    wanted = source.lower()
    return [it for it in items if it.item.source.lower() == wanted]


def search_keyword(items: Iterable[NewsItem], keyword: str) -> List[NewsItem]:
    term = keyword.lower()
    return [
        it for it in items
        if term in it.item.title.lower() or term in it.item.description.lower()
    ]


def by_author(items: Iterable[NewsItem], author_name: str) -> List[NewsItem]:
    name = author_name.lower()
    return [it for it in items if any(name in a.name.lower() for a in it.item.authors)]


def _published_key(it: NewsItem):
    ts = it.item.published_at
    return (ts is not None, ts.timestamp() if ts is not None else 0.0)


def latest(items: Iterable[NewsItem], limit: int = 10) -> List[NewsItem]:
    """Newest first. Items without a parseable timestamp sort last."""
    ordered = sorted(items, key=_published_key, reverse=True)
    return ordered[:limit]


def in_date_range(
    items: Iterable[NewsItem],
    start: Union[datetime, str],
    end: Union[datetime, str],
) -> List[NewsItem]:
    """Items published within [start, end], both ends inclusive."""
    lo = parse_timestamp(start)
    hi = parse_timestamp(end)
    if lo is None or hi is None:
        raise ValueError(f"Unparseable date range: {start!r} - {end!r}")
    out: List[NewsItem] = []
    for it in items:
        ts = it.item.published_at
        if ts is None:
            continue
        if lo <= ts <= hi:
            out.append(it)
    return out


def with_all_categories(items: Iterable[NewsItem], categories: Sequence[str]) -> List[NewsItem]:
    wanted = [c.lower() for c in categories]
    out: List[NewsItem] = []
    for it in items:
        have = {c.lower() for c in it.item.categories}
        if all(w in have for w in wanted):
            out.append(it)
    return out


def top_sources(items: Iterable[NewsItem], limit: int = 5) -> List[SourceCount]:
    """Sources by article count, descending; ties keep first-seen order."""
    counts = Counter(it.item.source for it in items)
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    return [SourceCount(source=s, count=n) for s, n in ranked[:limit]]
