import abc
from collections.abc import Callable, Collection
from typing import Any, TypeAlias

import pydantic
from fastapi import Request
from zodchy.codex.cqea import Message

from ..query.uri import parse_query_string
from .contracts import RequestAdapterContract, RequestParameterContract

FieldName: TypeAlias = str
SerializationResultType: TypeAlias = dict[FieldName, Any]
SerializerType: TypeAlias = Callable[[Any], SerializationResultType]
RequestReader: TypeAlias = Callable[[Request], SerializationResultType]


class Parameter(abc.ABC):
    def __init__(
        self,
        type: type,
        name: str,
        serializer: SerializerType | None = None,
    ):
        self._name = name
        self._type = type
        self._value = ...
        self._serializer = serializer or self._default_serializer

    def set_value(self, value: Any) -> None:
        self._value = value

    def get_name(self) -> str:
        return self._name

    def get_type(self) -> type:
        return self._type

    def __call__(self) -> SerializationResultType:
        if self._value is ...:
            raise ValueError(f"No value set for parameter {self._name}")
        return self._serializer(self._value)

    @abc.abstractmethod
    def _default_serializer(self, value: Any) -> SerializationResultType:
        raise NotImplementedError


class ModelParameter(Parameter):
    """
    Request body. Only fields the client actually sent are kept, so that updates stay partial.
    The dump is spread into the message fields, or nested under `into`.
    """

    def __init__(
        self,
        type: type[pydantic.BaseModel],
        name: str = "model",
        into: str | None = None,
        exclude_none: bool = False,
        serializer: SerializerType | None = None,
    ):
        self._into = into
        self._exclude_none = exclude_none
        super().__init__(type, name, serializer)

    def _default_serializer(self, value: pydantic.BaseModel) -> SerializationResultType:
        data = value.model_dump(exclude_none=self._exclude_none, exclude_unset=True)
        return {self._into: data} if self._into else data


class RouteParameter(Parameter):
    def __init__(
        self,
        name: str,
        type: type = str,
        serializer: SerializerType | None = None,
    ):
        super().__init__(type, name, serializer)

    def _default_serializer(self, value: Any) -> SerializationResultType:
        return {self.get_name(): value}


def read_filters(request: Request) -> SerializationResultType:
    return {"filters": parse_query_string(request.url.query)}


def read_caller(request: Request) -> SerializationResultType:
    return {"caller": getattr(request.state, "caller", None)}


class RequestParameter(Parameter):
    """
    The raw starlette request, read by one or more readers.
    Without readers it only exposes the authenticated caller.
    """

    def __init__(
        self,
        *readers: RequestReader,
        name: str = "request",
    ):
        self._readers = readers or (read_caller,)
        super().__init__(Request, name)

    def _default_serializer(self, value: Request) -> SerializationResultType:
        data: SerializationResultType = {}
        for read in self._readers:
            data |= read(value)
        return data


class DeclarativeAdapter:
    def __init__(self, message_type: type[Message], **defaults: Any):
        self._message_type = message_type
        self._defaults = defaults

    def __call__(self, **parameters: Parameter) -> list[Message]:
        data = dict(self._defaults)
        for parameter in parameters.values():
            data |= parameter()
        return [self._message_type(**data)]


class RequestDescriber:
    def __init__(
        self,
        schema: Collection[RequestParameterContract],
        adapter: RequestAdapterContract,
    ):
        self._adapter = adapter
        self._schema = schema

    def get_adapter(self) -> RequestAdapterContract:
        return self._adapter

    def get_schema(self) -> Collection[RequestParameterContract]:
        return self._schema
