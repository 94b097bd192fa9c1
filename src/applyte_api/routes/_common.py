from collections.abc import Callable, Sequence
from typing import Any

import pydantic

from ..http import (
    DeclarativeAdapter,
    Endpoint,
    InterceptorFactory,
    ModelParameter,
    RequestDescriber,
    RequestParameter,
    ResponseDescriber,
    Route,
    RouteParameter,
)
from ..http.request import read_caller, read_filters
from ..messages import CreateItem, DeleteItem, FetchItem, FetchPage, UpdateItem
from ..schema import IdentifierData

interceptors = InterceptorFactory()

Gates = Sequence[Callable[..., Any]]

# set by storage, never by clients
MANAGED_KEYS = ("id", "created", "modified")


def list_route(
    path: str,
    tag: str,
    model: type[pydantic.BaseModel],
    code: str,
    route_params: Sequence[str] = (),
    gates: Gates = (),
) -> Route:
    return Route(
        path=path,
        methods=["GET"],
        tags=[tag],
        endpoint=Endpoint(
            request=RequestDescriber(
                schema=[RequestParameter(read_filters, read_caller), *(RouteParameter(name) for name in route_params)],
                adapter=DeclarativeAdapter(FetchPage),
            ),
            response=ResponseDescriber(interceptors.page(model), interceptors.error()),
            pipeline_code=code,
        ),
        gates=gates,
    )


def item_route(
    path: str,
    tag: str,
    model: type[pydantic.BaseModel],
    code: str,
    route_params: Sequence[str] = ("id",),
    gates: Gates = (),
) -> Route:
    return Route(
        path=path,
        methods=["GET"],
        tags=[tag],
        endpoint=Endpoint(
            request=RequestDescriber(
                schema=[RequestParameter(), *(RouteParameter(name) for name in route_params)],
                adapter=DeclarativeAdapter(FetchItem),
            ),
            response=ResponseDescriber(interceptors.item(model), interceptors.error()),
            pipeline_code=code,
        ),
        gates=gates,
    )


def create_route(path: str, tag: str, model: type[pydantic.BaseModel], code: str, gates: Gates = ()) -> Route:
    return Route(
        path=path,
        methods=["POST"],
        tags=[tag],
        endpoint=Endpoint(
            request=RequestDescriber(
                schema=[RequestParameter(), ModelParameter(create_model(model), into="payload")],
                adapter=DeclarativeAdapter(CreateItem),
            ),
            response=ResponseDescriber(interceptors.created(), interceptors.error()),
            pipeline_code=code,
        ),
        status_code=201,
        gates=gates,
    )


def update_route(path: str, tag: str, model: type[pydantic.BaseModel], code: str, gates: Gates = ()) -> Route:
    return Route(
        path=path,
        methods=["PUT"],
        tags=[tag],
        endpoint=Endpoint(
            request=RequestDescriber(
                schema=[RequestParameter(), ModelParameter(update_model(model), into="payload")],
                adapter=DeclarativeAdapter(UpdateItem),
            ),
            response=ResponseDescriber(interceptors.updated(), interceptors.error()),
            pipeline_code=code,
        ),
        gates=gates,
    )


def delete_route(path: str, tag: str, code: str, gates: Gates = ()) -> Route:
    return Route(
        path=path,
        methods=["DELETE"],
        tags=[tag],
        endpoint=Endpoint(
            request=RequestDescriber(
                schema=[RequestParameter(), ModelParameter(IdentifierData)],
                adapter=DeclarativeAdapter(DeleteItem),
            ),
            response=ResponseDescriber(interceptors.deleted(), interceptors.error()),
            pipeline_code=code,
        ),
        status_code=204,
        gates=gates,
    )


def create_model(model: type[pydantic.BaseModel]) -> type[pydantic.BaseModel]:
    """
    The model plus the keys storage manages. They pass validation so that the service
    can refuse them with 400 instead of a schema error.
    """
    return pydantic.create_model(
        f"{_name(model)}Create",
        __base__=model,
        **{key: (Any, None) for key in MANAGED_KEYS},
    )


def update_model(model: type[pydantic.BaseModel]) -> type[pydantic.BaseModel]:
    """
    The model plus a required id, for bodies that name the object they change.
    The audit timestamps are accepted and dropped by the service.
    """
    return pydantic.create_model(
        f"{_name(model)}Update",
        __base__=model,
        id=(str, ...),
        **{key: (Any, None) for key in MANAGED_KEYS if key != "id"},
    )


def _name(model: type[pydantic.BaseModel]) -> str:
    return model.__name__.removesuffix("Data")


__all__ = [
    "create_route",
    "delete_route",
    "interceptors",
    "item_route",
    "list_route",
    "update_route",
]
