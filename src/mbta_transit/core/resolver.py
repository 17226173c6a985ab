"""Line connection search between two stops."""

import logging
from collections import deque

from .exceptions import ValidationError
from .models import Connection, ConnectionStatus
from .network import TransitNetwork

logger = logging.getLogger(__name__)


class ConnectionResolver:
    """Finds the route lines to ride between two stops."""

    def __init__(self, network: TransitNetwork):
        self.network = network

    def find_connection(
        self, from_stop: str, to_stop: str, max_transfers: int | None = None
    ) -> Connection:
        """Find the line sequence with the fewest switches between two stops.

        Breadth-first search over the route adjacency graph, starting from
        every route serving ``from_stop``. A route is accepted as soon as it
        is discovered if it serves ``to_stop``; among equally short paths
        the first one discovered wins.

        Args:
            from_stop: Origin stop name
            to_stop: Destination stop name
            max_transfers: Maximum number of line switches, None for no limit

        Returns:
            Connection whose status is FOUND, NOT_FOUND or UNKNOWN_STOP
        """
        if max_transfers is not None and max_transfers < 0:
            raise ValidationError("max_transfers cannot be negative")

        missing = [
            stop for stop in (from_stop, to_stop) if not self.network.has_stop(stop)
        ]
        if missing:
            logger.debug(f"Unknown stop(s): {missing}")
            return Connection(
                from_stop=from_stop,
                to_stop=to_stop,
                status=ConnectionStatus.UNKNOWN_STOP,
                missing_stops=list(dict.fromkeys(missing)),
            )

        lines = self._search(from_stop, to_stop, max_transfers)
        if lines is None:
            return Connection(
                from_stop=from_stop, to_stop=to_stop, status=ConnectionStatus.NOT_FOUND
            )
        return Connection(
            from_stop=from_stop,
            to_stop=to_stop,
            status=ConnectionStatus.FOUND,
            lines=lines,
        )

    def _search(
        self, from_stop: str, to_stop: str, max_transfers: int | None
    ) -> list[str] | None:
        start_routes = self.network.routes_for_stop(from_stop)
        goal_routes = set(self.network.routes_for_stop(to_stop))

        for route in start_routes:
            if route in goal_routes:
                return [route]

        parents: dict[str, str | None] = {route: None for route in start_routes}
        queue = deque((route, 0) for route in start_routes)

        while queue:
            route, depth = queue.popleft()
            if max_transfers is not None and depth >= max_transfers:
                continue
            for neighbor in self.network.neighbors(route):
                if neighbor in parents:
                    continue
                parents[neighbor] = route
                if neighbor in goal_routes:
                    return _reconstruct_path(parents, neighbor)
                queue.append((neighbor, depth + 1))

        return None


def _reconstruct_path(parents: dict[str, str | None], last: str) -> list[str]:
    path = [last]
    parent = parents[last]
    while parent is not None:
        path.append(parent)
        parent = parents[parent]
    path.reverse()
    return path
