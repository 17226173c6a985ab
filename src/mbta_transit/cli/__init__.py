"""Command line interface for MBTA transit line analysis."""
