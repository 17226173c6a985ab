"""HTTP client for the MBTA v3 API."""

import logging
from typing import Any

import requests
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from .config import TransitConfig
from .exceptions import MalformedDataError, NetworkError
from .models import FetchResult

logger = logging.getLogger(__name__)

TRANSIENT_ERRORS = (requests.exceptions.ConnectionError, requests.exceptions.Timeout)


class MBTAClient:
    """Fetches JSON documents from the MBTA API."""

    def __init__(self, config: TransitConfig | None = None):
        """Initialize the client.

        Args:
            config: Client settings; defaults to ``TransitConfig()``
        """
        self.config = config or TransitConfig()
        self.timeout = self.config.timeout
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.api+json",
                "User-Agent": "mbta-transit/0.1.0",
            }
        )

    def fetch(self, url: str, params: dict[str, str] | None = None) -> FetchResult:
        """Fetch a URL and decode its JSON body.

        Transport failures never raise; they come back as a failed
        ``FetchResult`` so each call site decides whether to skip or abort.

        Args:
            url: Endpoint URL
            params: Optional query parameters

        Returns:
            FetchResult carrying either the document or the failure reason
        """
        full_url = url
        try:
            full_url = requests.Request("GET", url, params=params).prepare().url or url
            response = self._get(url, params)
            response.raise_for_status()
            return FetchResult.success(full_url, response.json())
        except requests.exceptions.JSONDecodeError as e:
            logger.debug(f"Response from {full_url} is not JSON: {e}")
            return FetchResult.failure(full_url, f"Invalid JSON response: {e}")
        except requests.exceptions.RequestException as e:
            # also covers MissingSchema/InvalidURL raised while preparing the URL
            logger.debug(f"Request to {full_url} failed: {e}")
            return FetchResult.failure(full_url, str(e))

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
        reraise=True,
    )
    def _get(self, url: str, params: dict[str, str] | None) -> requests.Response:
        """Send a GET request, retrying connection errors and timeouts."""
        logger.debug(f"GET {url} params={params}")
        return self.session.get(url, params=params, timeout=self.timeout)

    def fetch_routes(self, route_types: list[int] | None = None) -> FetchResult:
        """Fetch the route catalog restricted to the given route types."""
        types = route_types if route_types is not None else self.config.route_types
        params = {"filter[type]": ",".join(str(t) for t in types)}
        return self.fetch(self.config.routes_url(), params)

    def fetch_route_stops(self, route_id: str) -> FetchResult:
        """Fetch the stops served by one route."""
        return self.fetch(self.config.stops_url(), {"filter[route]": route_id})


def extract_data(result: FetchResult) -> list[dict[str, Any]]:
    """Return the ``data`` list of a successful fetch.

    Raises:
        NetworkError: If the fetch failed
        MalformedDataError: If the document has no ``data`` list
    """
    if not result.ok:
        raise NetworkError(f"Failed to fetch {result.url}: {result.error}")

    document = result.data
    if not isinstance(document, dict) or "data" not in document:
        raise MalformedDataError(f"Response from {result.url} has no 'data' field")

    data = document["data"]
    if not isinstance(data, list):
        raise MalformedDataError(f"'data' field from {result.url} is not a list")
    return data
