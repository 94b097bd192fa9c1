import collections.abc
from typing import Any

import fastapi
import structlog

from ..contracts import (
    EndpointContract,
    PipelineRegistryContract,
    RouteContract,
)

logger = structlog.get_logger(__name__)


class Route:
    """
    One HTTP route. Gates are FastAPI dependencies that run before the endpoint and
    reject the request by raising.
    """

    def __init__(
        self,
        path: str,
        methods: list[str],
        tags: list[str],
        endpoint: EndpointContract,
        gates: collections.abc.Sequence[collections.abc.Callable[..., Any]] = (),
        **params: Any,
    ):
        self._path = path
        self._methods = methods
        self._tags = tags
        self._endpoint = endpoint
        self._gates = tuple(gates)
        self._params = params

    @property
    def path(self) -> str:
        return self._path

    @property
    def methods(self) -> list[str]:
        return self._methods

    @property
    def tags(self) -> list[str]:
        return self._tags

    @property
    def endpoint(self) -> EndpointContract:
        return self._endpoint

    @property
    def gates(self) -> tuple[collections.abc.Callable[..., Any], ...]:
        return self._gates

    @property
    def params(self) -> dict[str, Any]:
        if not self._gates:
            return self._params
        dependencies = [fastapi.Depends(gate) for gate in self._gates]
        return {**self._params, "dependencies": [*self._params.get("dependencies", []), *dependencies]}

    @property
    def responses(self) -> dict[int, dict[str, Any]]:
        return {
            status_code: {"model": response_model}
            for status_code, response_model in self._endpoint.response.get_schema()
        }


class Router:
    def __init__(
        self,
        router: fastapi.APIRouter,
        pipeline_registry: PipelineRegistryContract,
    ):
        self._router = router
        self._pipeline_registry = pipeline_registry

    def __call__(self, routes: collections.abc.Iterable[RouteContract]) -> fastapi.APIRouter:
        for route in routes:
            self._register_route(route)
        return self._router

    def _register_route(
        self,
        route: RouteContract,
    ) -> None:
        self._router.add_api_route(
            path=route.path,
            endpoint=route.endpoint(self._pipeline_registry),
            responses=route.responses,  # type: ignore
            methods=route.methods,
            tags=list(route.tags) if route.tags is not None else None,
            **route.params,
        )
        logger.debug("route_registered", path=route.path, methods=route.methods)
