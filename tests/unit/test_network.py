"""Unit tests for the stop and line network."""

import pytest

from conftest import SAMPLE_ROUTES, stop_record
from mbta_transit.core.exceptions import (
    MalformedDataError,
    StopNotFoundError,
    ValidationError,
)
from mbta_transit.core.network import TransitNetworkBuilder, build_network


def stops(*names):
    return [stop_record(name) for name in names]


class TestTransitNetworkBuilder:
    """Test TransitNetworkBuilder."""

    def test_ingest_returns_distinct_count(self):
        builder = TransitNetworkBuilder()
        count = builder.ingest_route_stops(
            "Red Line", stops("Alewife", "Davis", "Alewife", "Porter")
        )
        assert count == 3

    def test_duplicate_stops_collapse(self):
        """Test a stop listed twice on one route is recorded once."""
        builder = TransitNetworkBuilder()
        builder.ingest_route_stops("Red Line", stops("Davis", "Davis"))
        network = builder.finalize()

        assert network.routes_for_stop("Davis") == ["Red Line"]
        assert network.stop_count("Red Line") == 1
        assert network.stop_count_histogram == {1: ["Red Line"]}

    def test_missing_stop_name_raises(self):
        builder = TransitNetworkBuilder()
        with pytest.raises(MalformedDataError, match="Red Line"):
            builder.ingest_route_stops(
                "Red Line", [stop_record("Davis"), {"attributes": {}}]
            )

    def test_malformed_record_leaves_network_untouched(self):
        builder = TransitNetworkBuilder()
        with pytest.raises(MalformedDataError):
            builder.ingest_route_stops("Red Line", [stop_record("Davis"), "Porter"])

        network = builder.finalize()
        assert network.stop_names() == []
        assert network.route_names() == []

    def test_blank_stop_name_raises(self):
        builder = TransitNetworkBuilder()
        with pytest.raises(MalformedDataError):
            builder.ingest_route_stops("Red Line", [stop_record("   ")])

    def test_repeat_route_merges_stops(self):
        """Test a route ingested twice keeps the union of its stops."""
        builder = TransitNetworkBuilder()
        builder.ingest_route_stops("Green Line", stops("Kenmore"))
        count = builder.ingest_route_stops("Green Line", stops("Kenmore", "Lechmere"))
        network = builder.finalize()

        assert count == 2
        assert network.stop_count("Green Line") == 2
        assert network.has_stop("Lechmere")
        assert network.routes_for_stop("Kenmore") == ["Green Line"]
        assert network.routes_for_stop("Lechmere") == ["Green Line"]
        assert network.stop_count_histogram == {2: ["Green Line"]}

    def test_repeat_route_with_same_stops_keeps_count(self):
        builder = TransitNetworkBuilder()
        builder.ingest_route_stops("Red Line", stops("Davis", "Porter"))
        count = builder.ingest_route_stops("Red Line", stops("Davis", "Porter"))
        network = builder.finalize()

        assert count == 2
        assert network.routes_for_stop("Davis") == ["Red Line"]
        assert network.stop_count_histogram == {2: ["Red Line"]}

    def test_ingest_after_finalize_raises(self):
        builder = TransitNetworkBuilder()
        builder.finalize()
        with pytest.raises(ValidationError):
            builder.ingest_route_stops("Red Line", stops("Davis"))

    def test_finalize_is_idempotent(self):
        builder = TransitNetworkBuilder()
        builder.ingest_route_stops("Red Line", stops("Davis"))
        assert builder.finalize() is builder.finalize()


class TestTransitNetwork:
    """Test queries on a finalized network."""

    def test_every_stop_is_a_key(self, sample_network):
        """Test each stop maps to exactly the routes listing it."""
        expected: dict[str, set[str]] = {}
        for long_name, _, stop_names in SAMPLE_ROUTES.values():
            for name in stop_names:
                expected.setdefault(name, set()).add(long_name)

        assert set(sample_network.stop_names()) == set(expected)
        for name, routes in expected.items():
            assert set(sample_network.routes_for_stop(name)) == routes

    def test_routes_for_stop_keeps_ingestion_order(self, sample_network):
        assert sample_network.routes_for_stop("Park Street") == [
            "Red Line",
            "Green Line B",
        ]

    def test_unknown_stop_raises(self, sample_network):
        with pytest.raises(StopNotFoundError, match="NotARealStop"):
            sample_network.routes_for_stop("NotARealStop")
        assert not sample_network.has_stop("NotARealStop")

    def test_adjacency(self, sample_network):
        assert sample_network.adjacency == {
            "Red Line": ["Green Line B", "Orange Line", "Mattapan Trolley"],
            "Green Line B": ["Red Line", "Blue Line"],
            "Orange Line": ["Red Line", "Blue Line"],
            "Mattapan Trolley": ["Red Line"],
            "Blue Line": ["Orange Line", "Green Line B"],
        }

    def test_adjacency_is_irreflexive(self, sample_network):
        for route, connections in sample_network.adjacency.items():
            assert route not in connections

    def test_adjacency_is_symmetric(self, sample_network):
        for route, connections in sample_network.adjacency.items():
            for other in connections:
                assert route in sample_network.neighbors(other)

    def test_isolated_route_has_no_neighbors(self):
        network = build_network([("Silver Line", stops("South Station", "Airport"))])
        assert network.neighbors("Silver Line") == []
        assert network.adjacency == {}

    def test_max_stops(self, sample_network):
        summary = sample_network.max_stops()
        assert summary.count == 5
        assert summary.routes == ["Red Line"]

    def test_min_stops(self, sample_network):
        summary = sample_network.min_stops()
        assert summary.count == 3
        assert summary.routes == ["Mattapan Trolley"]

    def test_ties_report_every_route(self):
        network = build_network(
            [
                ("Orange Line", stops("Oak Grove", "State")),
                ("Blue Line", stops("Wonderland", "State")),
                ("Red Line", stops("Alewife", "Davis", "Porter")),
                ("Green Line E", stops("Heath Street", "Riverway", "Lechmere")),
            ]
        )

        assert network.max_stops().routes == ["Red Line", "Green Line E"]
        assert network.max_stops().count == 3
        assert network.min_stops().routes == ["Orange Line", "Blue Line"]
        assert network.min_stops().count == 2

    def test_empty_network_has_no_extremes(self):
        network = TransitNetworkBuilder().finalize()
        assert network.max_stops() is None
        assert network.min_stops() is None
        assert network.multi_route_stops() == []

    def test_multi_route_stops(self, sample_network):
        shared = {stop.name: stop.routes for stop in sample_network.multi_route_stops()}
        assert shared == {
            "Park Street": ["Red Line", "Green Line B"],
            "Downtown Crossing": ["Red Line", "Orange Line"],
            "Ashmont": ["Red Line", "Mattapan Trolley"],
            "State": ["Orange Line", "Blue Line"],
            "Government Center": ["Green Line B", "Blue Line"],
        }

    def test_search_stops(self, sample_network):
        assert sample_network.search_stops("park") == ["Park Street"]
        assert sample_network.search_stops("  ") == []
        assert sample_network.search_stops("O", limit=2) == [
            "Downtown Crossing",
            "Ashmont",
        ]
