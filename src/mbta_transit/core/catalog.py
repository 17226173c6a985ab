"""Route catalog built from the MBTA route list."""

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from .exceptions import MalformedDataError
from .models import Route

logger = logging.getLogger(__name__)


class RouteCatalog:
    """Ordered mapping of route id to route.

    Route records are expected to be pre-filtered to the wanted route types;
    the catalog does not filter them again. A record whose id was already
    seen replaces the earlier one.
    """

    def __init__(self) -> None:
        self.routes: dict[str, Route] = {}

    @classmethod
    def from_records(cls, records: Iterable[Any]) -> "RouteCatalog":
        """Build a catalog from API route records.

        Args:
            records: Items of the ``data`` list of a ``/routes`` response

        Returns:
            Populated RouteCatalog

        Raises:
            MalformedDataError: If any record lacks an id or long name
        """
        catalog = cls()
        for record in records:
            catalog.add_record(record)
        logger.info(f"Loaded {len(catalog)} routes")
        return catalog

    def add_record(self, record: Any) -> Route:
        """Parse one route record and insert it."""
        if not isinstance(record, dict):
            raise MalformedDataError(f"Route record is not an object: {record!r}")

        route_id = record.get("id")
        if not isinstance(route_id, str) or not route_id.strip():
            raise MalformedDataError(f"Route record has no id: {record!r}")

        attributes = record.get("attributes")
        if not isinstance(attributes, dict):
            raise MalformedDataError(f"Route {route_id} has no attributes")

        long_name = attributes.get("long_name")
        if not isinstance(long_name, str) or not long_name.strip():
            raise MalformedDataError(f"Route {route_id} has no long_name")

        route_type = attributes.get("type")
        route = Route(
            id=route_id,
            long_name=long_name,
            route_type=route_type if isinstance(route_type, int) else None,
        )
        if route_id in self.routes:
            logger.debug(f"Route {route_id} appears twice, keeping the later record")
        self.routes[route_id] = route
        return route

    def route_names(self) -> list[str]:
        """Route display names in catalog order."""
        return [route.long_name for route in self.routes.values()]

    def joined_names(self) -> str:
        """Route display names joined for reporting."""
        return ", ".join(self.route_names())

    def __len__(self) -> int:
        return len(self.routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self.routes.values())
