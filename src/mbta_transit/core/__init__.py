"""Core transit line analysis functionality."""

from .analyzer import TransitAnalyzer
from .catalog import RouteCatalog
from .client import MBTAClient
from .config import TransitConfig
from .exceptions import (
    MalformedDataError,
    NetworkError,
    StopNotFoundError,
    TransitError,
    ValidationError,
)
from .models import (
    Connection,
    ConnectionStatus,
    FetchResult,
    Route,
    StopCountSummary,
    StopService,
    TransitReport,
)
from .network import TransitNetwork, TransitNetworkBuilder
from .resolver import ConnectionResolver

__all__ = [
    "Connection",
    "ConnectionResolver",
    "ConnectionStatus",
    "FetchResult",
    "MBTAClient",
    "Route",
    "RouteCatalog",
    "StopCountSummary",
    "StopService",
    "TransitAnalyzer",
    "TransitConfig",
    "TransitNetwork",
    "TransitNetworkBuilder",
    "TransitReport",
    "TransitError",
    "StopNotFoundError",
    "MalformedDataError",
    "NetworkError",
    "ValidationError",
]
