"""
tvdbxml - client for the TheTVDB XML API
"""

from .client import TVDBClient
from .config import Config
from .exceptions import (
    FormatError,
    MalformedDocumentError,
    NotFoundError,
    TransportError,
    TVDBError,
)
from .models import ContentRating, Episode, Show, Status, Weekday
from .transport import BaseTransport, RequestsTransport

__all__ = [
    "TVDBClient",
    "Config",
    "BaseTransport",
    "RequestsTransport",
    "Show",
    "Episode",
    "Status",
    "Weekday",
    "ContentRating",
    "TVDBError",
    "TransportError",
    "NotFoundError",
    "FormatError",
    "MalformedDocumentError",
]
