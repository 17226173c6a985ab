"""MBTA Transit Lines Package

A Python package for analysing MBTA subway and light-rail routes, their
shared stops and the line connections between stops.
"""

__version__ = "0.1.0"

from .core.analyzer import TransitAnalyzer
from .core.models import Connection, Route, TransitReport
from .core.resolver import ConnectionResolver

__all__ = [
    "Connection",
    "ConnectionResolver",
    "Route",
    "TransitAnalyzer",
    "TransitReport",
]
