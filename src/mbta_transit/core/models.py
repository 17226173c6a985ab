"""Data models for MBTA transit line analysis."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Route(BaseModel):
    """Represents a subway or light-rail route from the route catalog."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Opaque MBTA route id")
    long_name: str = Field(..., description="Route display name")
    route_type: int | None = Field(
        None, description="MBTA route type (0 light rail, 1 subway)"
    )

    def __str__(self) -> str:
        return self.long_name


class FetchResult(BaseModel):
    """Outcome of a single API request.

    Either ``data`` holds the decoded JSON document, or ``error`` holds the
    reason the request failed.
    """

    url: str = Field(..., description="Requested URL including query string")
    data: Any = Field(None, description="Decoded JSON document")
    error: str | None = Field(None, description="Failure reason")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, url: str, data: Any) -> "FetchResult":
        return cls(url=url, data=data)

    @classmethod
    def failure(cls, url: str, error: str) -> "FetchResult":
        return cls(url=url, error=error)


class StopCountSummary(BaseModel):
    """Routes sharing an extremal distinct-stop count."""

    count: int = Field(..., description="Number of distinct stops")
    routes: list[str] = Field(default_factory=list, description="Tied route names")

    def __str__(self) -> str:
        return f"{', '.join(self.routes)} - {self.count}"


class StopService(BaseModel):
    """A stop together with the routes serving it."""

    name: str = Field(..., description="Stop display name")
    routes: list[str] = Field(default_factory=list, description="Serving routes")

    def __str__(self) -> str:
        return f"{self.name} - {', '.join(self.routes)}"


class ConnectionStatus(str, Enum):
    """Outcome of a connection lookup."""

    FOUND = "found"
    NOT_FOUND = "not_found"
    UNKNOWN_STOP = "unknown_stop"


class Connection(BaseModel):
    """Sequence of route lines linking two stops."""

    from_stop: str = Field(..., description="Origin stop name")
    to_stop: str = Field(..., description="Destination stop name")
    status: ConnectionStatus = Field(..., description="Lookup outcome")
    lines: list[str] = Field(
        default_factory=list, description="Route names to ride, in order"
    )
    missing_stops: list[str] = Field(
        default_factory=list, description="Stop names absent from the network"
    )

    @property
    def found(self) -> bool:
        return self.status == ConnectionStatus.FOUND

    @property
    def transfer_count(self) -> int | None:
        """Number of line switches, or None when no connection exists."""
        if not self.found:
            return None
        return len(self.lines) - 1

    def __str__(self) -> str:
        if self.status == ConnectionStatus.UNKNOWN_STOP:
            return f"No such stop: {', '.join(self.missing_stops)}"
        if self.status == ConnectionStatus.NOT_FOUND:
            return "No such connection"
        return ", ".join(self.lines)


class TransitReport(BaseModel):
    """Everything the report commands print."""

    route_names: list[str] = Field(default_factory=list)
    max_stops: StopCountSummary | None = None
    min_stops: StopCountSummary | None = None
    multi_route_stops: list[StopService] = Field(default_factory=list)
    skipped_routes: list[str] = Field(
        default_factory=list, description="Routes whose stops could not be fetched"
    )
    connection: Connection | None = None
