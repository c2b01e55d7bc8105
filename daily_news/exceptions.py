from typing import Optional


class InvalidArgument(ValueError):
    """Raised when a date, month or year is outside its accepted range."""


class NewsFetchError(Exception):
    """Raised when a daily feed cannot be fetched or decoded."""

    def __init__(self, message: str, url: str = "", status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code
