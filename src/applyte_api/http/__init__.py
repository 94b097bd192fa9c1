from .interceptors import InterceptorFactory
from .middleware import JsonExceptionHandler
from .request import DeclarativeAdapter, ModelParameter, RequestDescriber, RequestParameter, RouteParameter
from .response import ErrorInterceptor, Interceptor, ResponseDescriber
from .routing import Endpoint, Route, Router, RoutesRegistry
from .security import JwtAuthMiddleware

__all__ = [
    "DeclarativeAdapter",
    "Endpoint",
    "ErrorInterceptor",
    "Interceptor",
    "InterceptorFactory",
    "JsonExceptionHandler",
    "JwtAuthMiddleware",
    "ModelParameter",
    "RequestDescriber",
    "RequestParameter",
    "ResponseDescriber",
    "Route",
    "RouteParameter",
    "Router",
    "RoutesRegistry",
]
