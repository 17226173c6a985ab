"""Runtime configuration for the MBTA API client."""

from pydantic import BaseModel, Field

DEFAULT_BASE_URL = "https://api-v3.mbta.com"

# MBTA route_type values
LIGHT_RAIL = 0
SUBWAY = 1

ROUTE_TYPE_NAMES = {
    LIGHT_RAIL: "Light Rail",
    SUBWAY: "Subway",
}


class TransitConfig(BaseModel):
    """Settings shared by the client and the CLI."""

    base_url: str = Field(DEFAULT_BASE_URL, description="MBTA v3 API root")
    timeout: int = Field(30, description="Request timeout in seconds", gt=0)
    route_types: list[int] = Field(
        default_factory=lambda: [LIGHT_RAIL, SUBWAY],
        description="Route types requested from the route catalog",
    )

    def routes_url(self) -> str:
        """URL of the route catalog endpoint."""
        return f"{self.base_url.rstrip('/')}/routes"

    def stops_url(self) -> str:
        """URL of the stops endpoint."""
        return f"{self.base_url.rstrip('/')}/stops"

    def describe_route_types(self) -> str:
        return ", ".join(
            ROUTE_TYPE_NAMES.get(route_type, str(route_type))
            for route_type in self.route_types
        )
