"""
HTTP transport used by the client to download XML documents
"""

import logging
from abc import ABC, abstractmethod

import requests

from .exceptions import TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class BaseTransport(ABC):
    """Fetches the raw text body behind a URL"""

    @abstractmethod
    def fetch_text(self, url: str) -> str:
        """Return the response body, raising TransportError on failure"""
        pass


class RequestsTransport(BaseTransport):
    """Transport backed by a requests session"""

    def __init__(
        self, timeout: float = DEFAULT_TIMEOUT, session: requests.Session | None = None
    ):
        self.timeout = timeout
        if session is None:
            session = requests.Session()
            session.headers.update({"Accept": "application/xml, text/xml"})
        self.session = session

    def fetch_text(self, url: str) -> str:
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f"Request failed: {e}", url=url, original_exception=e
            ) from e

        # TheTVDB serves UTF-8 without always declaring a charset
        if "charset" not in response.headers.get("Content-Type", "").lower():
            response.encoding = "utf-8"
        return response.text
