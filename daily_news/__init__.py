"""
daily_news

A small library that fetches a day's JSON news feed and answers queries over it.

Core ideas:
- Input: a base URL and a day (date, month, year)
- Process: GET {base_url}/{MonthName}-{YYYY}/{DD}-{MM}-{YYYY}.json → parse → query
- Output: List[NewsItem], List[str] or List[SourceCount]

Example
-------
from daily_news import NewsFetcher

fetcher = NewsFetcher("https://example.com/news", 12, 11, 2024)

for item in fetcher.return_latest_news(5):
    print(item.item.published, item.item.source, item.item.title)

fetcher.set_date(13, 11, 2024)
print(fetcher.return_top_sources_by_article_count(3))
"""
from .models import Author, DateContext, FetchResult, NewsContent, NewsItem, SourceCount
from .exceptions import InvalidArgument, NewsFetchError
from .core import NewsFetcher

__all__ = [
    "Author",
    "DateContext",
    "FetchResult",
    "InvalidArgument",
    "NewsContent",
    "NewsFetchError",
    "NewsFetcher",
    "NewsItem",
    "SourceCount",
]
