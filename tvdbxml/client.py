"""
TheTVDB XML API client
"""

import logging
from typing import List
from urllib.parse import quote

from .builder import build_show
from .coercion import is_blank
from .config import Config
from .exceptions import MalformedDocumentError, NotFoundError
from .models import Show
from .transport import BaseTransport, RequestsTransport
from .xml_utils import extract, parse_document

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://thetvdb.com"
DEFAULT_MAX_RESULTS = 5


class TVDBClient:
    """Client to look up shows on TheTVDB"""

    def __init__(
        self,
        api_key: str,
        transport: BaseTransport | None = None,
        base_url: str = DEFAULT_BASE_URL,
    ):
        """
        Initialize the client

        Args:
            api_key: TheTVDB API key
            transport: Transport used to fetch documents (defaults to requests)
            base_url: Service root, e.g. http://thetvdb.com
        """
        if not api_key:
            raise ValueError("An API key is required")
        self._api_key = api_key
        self.url = base_url.rstrip("/")
        self.transport = transport or RequestsTransport()

    @classmethod
    def from_config(cls, config: Config) -> "TVDBClient":
        """Create a client and its HTTP transport from a Config"""
        return cls(
            config.api_key,
            transport=RequestsTransport(timeout=config.timeout),
            base_url=config.base_url,
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    def show_url(self, show_id: str) -> str:
        return f"{self.url}/api/{self._api_key}/series/{show_id}/all/"

    def imdb_lookup_url(self, imdb_id: str) -> str:
        return f"{self.url}/api/GetSeriesByRemoteID.php?imdbid={imdb_id}"

    def search_url(self, query: str) -> str:
        return f"{self.url}/api/GetSeries.php?seriesname={quote(query)}"

    def _get(self, url: str):
        """Fetch and parse a document"""
        logger.debug(f"GET {url.replace(self._api_key, '***')}")
        return parse_document(self.transport.fetch_text(url))

    def get_show(self, show_id: str) -> Show:
        """Fetch a show and all of its episodes by TheTVDB series id"""
        return build_show(self._get(self.show_url(show_id)))

    def get_show_by_imdb_id(self, imdb_id: str) -> Show:
        """
        Fetch a show by its IMDb id

        Raises:
            NotFoundError: if TheTVDB knows no series for this IMDb id
        """
        document = self._get(self.imdb_lookup_url(imdb_id))
        node = document.find(".//seriesid")
        if node is None or is_blank(node.text):
            raise NotFoundError(f"No series found for IMDb id {imdb_id}")

        show_id = node.text.strip()
        logger.info(f"IMDb id {imdb_id} resolved to series {show_id}")
        return self.get_show(show_id)

    def search(self, query: str, max_results: int = DEFAULT_MAX_RESULTS) -> List[Show]:
        """
        Search shows by name

        Each match is fetched in full, one request per result, in the order
        the service returned them. Any failure aborts the whole search.

        Args:
            query: Series name to search for
            max_results: Maximum number of shows to return

        Returns:
            List of shows
        """
        if max_results <= 0:
            return []

        document = self._get(self.search_url(query))
        entries = document.findall(".//Series")[:max_results]
        logger.info(f"Search '{query}' matched {len(entries)} series")

        shows = []
        for entry in entries:
            show_id = extract(entry, "seriesid").strip()
            if not show_id:
                raise MalformedDocumentError("Search result without a seriesid")
            shows.append(self.get_show(show_id))

        return shows
