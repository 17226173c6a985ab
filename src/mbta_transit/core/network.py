"""Stop and line graph built from per-route stop lists."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .exceptions import MalformedDataError, StopNotFoundError, ValidationError
from .models import StopCountSummary, StopService

logger = logging.getLogger(__name__)


@dataclass
class TransitNetwork:
    """Stops, their serving routes and the route adjacency graph.

    Stops are identified by display name only, so two physical stops with
    the same name are merged into one.
    """

    # stop name -> route names serving it, in ingestion order
    stop_routes: dict[str, list[str]] = field(default_factory=dict)
    # distinct stop count -> route names with that count
    stop_count_histogram: dict[int, list[str]] = field(default_factory=dict)
    # route name -> route names sharing at least one stop, never itself
    adjacency: dict[str, list[str]] = field(default_factory=dict)
    route_stop_counts: dict[str, int] = field(default_factory=dict)

    def has_stop(self, stop_name: str) -> bool:
        return stop_name in self.stop_routes

    def routes_for_stop(self, stop_name: str) -> list[str]:
        """Get routes serving a stop.

        Raises:
            StopNotFoundError: If the stop is not in the network
        """
        if stop_name not in self.stop_routes:
            raise StopNotFoundError(stop_name)
        return list(self.stop_routes[stop_name])

    def neighbors(self, route_name: str) -> list[str]:
        """Routes a rider can switch to from ``route_name``."""
        return list(self.adjacency.get(route_name, []))

    def stop_count(self, route_name: str) -> int | None:
        return self.route_stop_counts.get(route_name)

    def route_names(self) -> list[str]:
        return list(self.route_stop_counts)

    def stop_names(self) -> list[str]:
        return list(self.stop_routes)

    def max_stops(self) -> StopCountSummary | None:
        """Routes with the most distinct stops, ties included."""
        if not self.stop_count_histogram:
            return None
        count = max(self.stop_count_histogram)
        return StopCountSummary(
            count=count, routes=list(self.stop_count_histogram[count])
        )

    def min_stops(self) -> StopCountSummary | None:
        """Routes with the fewest distinct stops, ties included."""
        if not self.stop_count_histogram:
            return None
        count = min(self.stop_count_histogram)
        return StopCountSummary(
            count=count, routes=list(self.stop_count_histogram[count])
        )

    def multi_route_stops(self) -> list[StopService]:
        """Stops served by more than one route."""
        return [
            StopService(name=name, routes=list(routes))
            for name, routes in self.stop_routes.items()
            if len(routes) > 1
        ]

    def search_stops(self, query: str, limit: int = 5) -> list[str]:
        """Find stop names containing ``query``, ignoring case."""
        needle = query.strip().casefold()
        if not needle:
            return []
        matches = [name for name in self.stop_routes if needle in name.casefold()]
        return matches[:limit]


class TransitNetworkBuilder:
    """Accumulates route stop lists into a TransitNetwork.

    Lifecycle: construct, call ``ingest_route_stops`` once per route, then
    ``finalize`` to derive the route adjacency graph.
    """

    def __init__(self) -> None:
        self._network = TransitNetwork()
        self._finalized = False

    def ingest_route_stops(
        self, route_name: str, stop_records: Iterable[Any]
    ) -> int:
        """Record the stops served by one route.

        Args:
            route_name: Route display name
            stop_records: Items of the ``data`` list of a ``/stops`` response

        Returns:
            Number of distinct stops recorded for the route

        Raises:
            MalformedDataError: If a stop record has no name
            ValidationError: If called after ``finalize``
        """
        if self._finalized:
            raise ValidationError("Cannot ingest stops after the network is finalized")

        network = self._network
        # dict keeps first-seen order while collapsing repeats
        stop_names = dict.fromkeys(
            _stop_name(record, route_name) for record in stop_records
        )

        added = 0
        for stop_name in stop_names:
            routes = network.stop_routes.setdefault(stop_name, [])
            if route_name not in routes:
                routes.append(route_name)
                added += 1

        previous = network.route_stop_counts.get(route_name)
        if previous is not None:
            logger.warning(
                f"Route {route_name} ingested again, merged {added} new stops"
            )
            bucket = network.stop_count_histogram[previous]
            bucket.remove(route_name)
            if not bucket:
                del network.stop_count_histogram[previous]

        count = (previous or 0) + added
        network.route_stop_counts[route_name] = count
        network.stop_count_histogram.setdefault(count, []).append(route_name)
        logger.debug(f"Route {route_name} has {count} distinct stops")
        return count

    def finalize(self) -> TransitNetwork:
        """Derive route adjacency and return the finished network."""
        if self._finalized:
            return self._network

        network = self._network
        for routes in network.stop_routes.values():
            if len(routes) < 2:
                continue
            for route in routes:
                connections = network.adjacency.setdefault(route, [])
                for other in routes:
                    if other not in connections:
                        connections.append(other)

        for route, connections in network.adjacency.items():
            if route in connections:
                connections.remove(route)

        self._finalized = True
        logger.info(
            f"Built network with {len(network.route_stop_counts)} routes "
            f"and {len(network.stop_routes)} stops"
        )
        return network


def _stop_name(record: Any, route_name: str) -> str:
    attributes = record.get("attributes") if isinstance(record, dict) else None
    name = attributes.get("name") if isinstance(attributes, dict) else None
    if not isinstance(name, str) or not name.strip():
        raise MalformedDataError(
            f"Stop record on route {route_name} has no name: {record!r}"
        )
    return name


def build_network(route_stops: Iterable[tuple[str, Iterable[Any]]]) -> TransitNetwork:
    """Build a finalized network from ``(route_name, stop_records)`` pairs."""
    builder = TransitNetworkBuilder()
    for route_name, stop_records in route_stops:
        builder.ingest_route_stops(route_name, stop_records)
    return builder.finalize()
