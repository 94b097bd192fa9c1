from .endpoint import Batch, Endpoint
from .registry import RoutesRegistry
from .router import Route, Router

__all__ = [
    "Batch",
    "Route",
    "Router",
    "Endpoint",
    "RoutesRegistry",
]
