# tests/test_date_context.py
from datetime import date

import pytest

from daily_news import DateContext, InvalidArgument, NewsFetcher

from conftest import BASE_URL


def test_create_url(fetcher):
    assert fetcher.create_url() == f"{BASE_URL}/November-2024/12-11-2024.json"


def test_set_date_then_create_url(fetcher):
    fetcher.set_date(15, 6, 2023)
    assert fetcher.create_url() == f"{BASE_URL}/June-2023/15-06-2023.json"


def test_single_digit_values_are_zero_padded():
    f = NewsFetcher(BASE_URL, 1, 1, 2025)
    assert f.create_url() == f"{BASE_URL}/January-2025/01-01-2025.json"


def test_base_url_kept_verbatim():
    f = NewsFetcher("https://x.test/", 31, 12, 2100)
    assert f.create_url() == "https://x.test//December-2100/31-12-2100.json"


@pytest.mark.parametrize("args, message", [
    ((32, 1, 2024), "Invalid date"),
    ((0, 1, 2024), "Invalid date"),
    ((1, 13, 2024), "Invalid month"),
    ((1, 0, 2024), "Invalid month"),
    ((1, 1, 1999), "Invalid year"),
    ((1, 1, 2101), "Invalid year"),
])
def test_set_date_rejects_out_of_range(fetcher, args, message):
    before = fetcher.date_context
    url = fetcher.create_url()
    with pytest.raises(InvalidArgument, match=message):
        fetcher.set_date(*args)
    assert fetcher.date_context == before
    assert fetcher.create_url() == url


def test_validation_stops_at_first_bad_field(fetcher):
    with pytest.raises(InvalidArgument, match="Invalid date"):
        fetcher.set_date(40, 20, 1800)
    with pytest.raises(InvalidArgument, match="Invalid month"):
        fetcher.set_date(10, 20, 1800)


def test_constructor_validates_like_set_date():
    with pytest.raises(InvalidArgument, match="Invalid month"):
        NewsFetcher(BASE_URL, 1, 13, 2024)


def test_non_integer_values_rejected():
    with pytest.raises(InvalidArgument, match="Invalid date"):
        DateContext("12", 11, 2024)
    with pytest.raises(InvalidArgument, match="Invalid year"):
        DateContext(12, 11, True)


def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        DateContext(1, 1, 3000)


def test_date_context_is_immutable():
    ctx = DateContext(12, 11, 2024)
    with pytest.raises(AttributeError):
        ctx.date = 13


def test_for_day():
    f = NewsFetcher.for_day(BASE_URL, date(2024, 2, 29))
    assert f.date_context == DateContext(29, 2, 2024)
    assert f.create_url().endswith("/February-2024/29-02-2024.json")
