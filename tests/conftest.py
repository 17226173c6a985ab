"""Test configuration and fixtures."""

import pytest

from mbta_transit.core.network import build_network

# route id -> (long name, route type, stop names)
SAMPLE_ROUTES = {
    "Red": (
        "Red Line",
        1,
        ["Alewife", "Davis", "Park Street", "Downtown Crossing", "Ashmont"],
    ),
    "Orange": (
        "Orange Line",
        1,
        ["Oak Grove", "Downtown Crossing", "State", "Forest Hills"],
    ),
    "Green-B": (
        "Green Line B",
        0,
        ["Boston College", "Kenmore", "Park Street", "Government Center"],
    ),
    "Blue": (
        "Blue Line",
        1,
        ["Wonderland", "State", "Government Center", "Bowdoin"],
    ),
    "Mattapan": (
        "Mattapan Trolley",
        0,
        ["Ashmont", "Mattapan", "Cedar Grove"],
    ),
}


def route_record(route_id: str, long_name: str, route_type: int = 1) -> dict:
    return {
        "id": route_id,
        "type": "route",
        "attributes": {"long_name": long_name, "type": route_type},
    }


def stop_record(name: str) -> dict:
    return {"type": "stop", "attributes": {"name": name}}


@pytest.fixture
def route_records():
    """Route records as returned in the ``data`` list of ``/routes``."""
    return [
        route_record(route_id, long_name, route_type)
        for route_id, (long_name, route_type, _) in SAMPLE_ROUTES.items()
    ]


@pytest.fixture
def routes_payload(route_records):
    """Full ``/routes`` response document."""
    return {"data": route_records, "jsonapi": {"version": "1.0"}}


@pytest.fixture
def stops_payloads():
    """``/stops`` response documents keyed by route id."""
    return {
        route_id: {"data": [stop_record(name) for name in stops]}
        for route_id, (_, _, stops) in SAMPLE_ROUTES.items()
    }


@pytest.fixture
def sample_network():
    """Finalized network built from the sample routes."""
    return build_network(
        (long_name, [stop_record(name) for name in stops])
        for long_name, _, stops in SAMPLE_ROUTES.values()
    )
