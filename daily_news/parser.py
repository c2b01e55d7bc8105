from __future__ import annotations

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Dict, Optional, Tuple, Union

from .models import Author, NewsContent, NewsItem


def to_utc(dt: datetime) -> datetime:
    """Return `dt` as an aware datetime; naive values are taken as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt


def parse_timestamp(value: Union[str, datetime, None]) -> Optional[datetime]:
    """
    Convert a feed timestamp to a timezone-aware datetime.
    Tries ISO-8601 first (a trailing ``Z`` is accepted), then RFC 2822.
    Returns None when the value cannot be parsed.
    """
    if isinstance(value, datetime):
        return to_utc(value)
    if not isinstance(value, str):
        return None
    s = value.strip()
    if not s:
        return None
    if s.endswith(("Z", "z")):
        s = s[:-1] + "+00:00"
    try:
        return to_utc(datetime.fromisoformat(s))
    except ValueError:
        pass
    try:
        return to_utc(parsedate_to_datetime(value.strip()))
    except (TypeError, ValueError, IndexError):
        return None


def _str(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _str_list(value: Any) -> Tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(_str(v) for v in value if v is not None)


def _authors(value: Any) -> Tuple[Author, ...]:
    if not isinstance(value, list):
        return ()
    out = []
    for a in value:
        if isinstance(a, dict):
            out.append(Author(name=_str(a.get("name"))))
        elif isinstance(a, str):
            out.append(Author(name=a))
    return tuple(out)


def parse_item(record: Dict[str, Any]) -> NewsItem:
    """
    Map one decoded feed record to a NewsItem.

    Raises ValueError when the record is not an object or has no ``item``
    object. Missing or null fields inside ``item`` become empty values.
    """
    if not isinstance(record, dict):
        raise ValueError(f"News record is not an object: {record!r}")
    body = record.get("item")
    if not isinstance(body, dict):
        raise ValueError(f"News record has no item object: {record!r}")
    image = body.get("image") or {}
    published = _str(body.get("published"))

    content = NewsContent(
        title=_str(body.get("title")),
        description=_str(body.get("description")),
        links=_str_list(body.get("links")),
        categories=_str_list(body.get("categories")),
        source=_str(body.get("source")),
        authors=_authors(body.get("authors")),
        image_url=_str(image.get("url")) if isinstance(image, dict) else "",
        published=published,
        published_at=parse_timestamp(published),
    )
    return NewsItem(hash=_str(record.get("hash")), item=content, raw=record)
