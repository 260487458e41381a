"""AI news fetcher package initializer."""

from .config import FetcherConfig
from .exceptions import ConfigurationError, InternalError, NewsFetchError, ParseError, UpstreamError
from .fetcher import NewsFetcher
from .handler import handle_news_request
from .models import NewsItem

__all__ = [
    "FetcherConfig",
    "NewsFetcher",
    "NewsItem",
    "NewsFetchError",
    "ConfigurationError",
    "UpstreamError",
    "ParseError",
    "InternalError",
    "handle_news_request",
]
