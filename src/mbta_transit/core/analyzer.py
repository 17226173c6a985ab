"""Orchestrates fetching routes and stops into a transit report."""

import logging
from collections.abc import Iterator
from typing import Any

from .catalog import RouteCatalog
from .client import MBTAClient, extract_data
from .exceptions import NetworkError
from .models import TransitReport
from .network import TransitNetwork, build_network
from .resolver import ConnectionResolver

logger = logging.getLogger(__name__)


class TransitAnalyzer:
    """Builds the route catalog and stop network from the MBTA API."""

    def __init__(self, client: MBTAClient | None = None):
        self.client = client or MBTAClient()

    def load_catalog(self, route_types: list[int] | None = None) -> RouteCatalog:
        """Fetch the route catalog.

        Args:
            route_types: MBTA route types to request, defaults to the client config

        Returns:
            RouteCatalog in feed order

        Raises:
            NetworkError: If the catalog cannot be fetched
            MalformedDataError: If the response or a record is malformed
        """
        result = self.client.fetch_routes(route_types)
        if not result.ok:
            logger.error(f"Route catalog fetch failed for {result.url}: {result.error}")
            raise NetworkError(f"Failed to fetch route catalog: {result.error}")
        return RouteCatalog.from_records(extract_data(result))

    def build_network(
        self, catalog: RouteCatalog
    ) -> tuple[TransitNetwork, list[str]]:
        """Fetch every route's stops and build the network.

        A route whose stops cannot be fetched is skipped with a warning;
        a malformed stop payload aborts the whole build.

        Args:
            catalog: Route catalog to walk

        Returns:
            Tuple of the finalized network and the names of skipped routes
        """
        skipped: list[str] = []
        network = build_network(self._route_stops(catalog, skipped))
        return network, skipped

    def _route_stops(
        self, catalog: RouteCatalog, skipped: list[str]
    ) -> Iterator[tuple[str, list[dict[str, Any]]]]:
        """Yield ``(route_name, stop_records)`` per fetchable route."""
        for route in catalog:
            result = self.client.fetch_route_stops(route.id)
            if not result.ok:
                logger.warning(
                    f"Skipping route {route.long_name} ({route.id}): "
                    f"failed to fetch {result.url}: {result.error}"
                )
                skipped.append(route.long_name)
                continue
            yield route.long_name, extract_data(result)

    def build_report(
        self,
        route_types: list[int] | None = None,
        from_stop: str | None = None,
        to_stop: str | None = None,
        max_transfers: int | None = None,
    ) -> TransitReport:
        """Run the full analysis.

        The connection is only resolved when both stops are given.
        """
        catalog = self.load_catalog(route_types)
        network, skipped = self.build_network(catalog)

        connection = None
        if from_stop and to_stop:
            connection = ConnectionResolver(network).find_connection(
                from_stop, to_stop, max_transfers=max_transfers
            )

        return TransitReport(
            route_names=catalog.route_names(),
            max_stops=network.max_stops(),
            min_stops=network.min_stops(),
            multi_route_stops=network.multi_route_stops(),
            skipped_routes=skipped,
            connection=connection,
        )
