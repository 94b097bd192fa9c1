from collections.abc import Callable, Collection, Mapping
from typing import Any, Protocol, TypeAlias

from fastapi.responses import JSONResponse, Response
from zodchy.codex.cqea import Error, Message

from ..schema import ErrorResponse
from .contracts import ResponseModelType
from .serializing import ErrorMapping

StatusCodeType: TypeAlias = int
ResponseType: TypeAlias = type[Response]
HeadersType: TypeAlias = Callable[[Message], Mapping[str, str]]


class SerializerType(Protocol):
    def __call__(self, *messages: Message | Error) -> Any: ...


class Interceptor:
    def __init__(
        self,
        catch: type[Message],
        declare: tuple[StatusCodeType, ResponseModelType] | StatusCodeType | None = None,
        response: tuple[ResponseType, SerializerType] | None = None,
        headers: HeadersType | None = None,
    ):
        self._desired_type = catch
        self._status_code = declare[0] if isinstance(declare, tuple) else (declare or 204)
        self._model = declare[1] if declare and isinstance(declare, tuple) else None
        self._serializer = response[1] if response else None
        self._response_type = response[0] if response else None
        self._headers = headers

    def get_status_code(self) -> int:
        return self._status_code

    def get_desired_type(self) -> type[Message]:
        return self._desired_type

    def get_response_model(self) -> ResponseModelType | None:
        return self._model

    def __call__(self, *messages: Message) -> Response:
        headers = dict(self._headers(messages[0])) if self._headers and messages else None
        if not self._serializer or not self._response_type:
            return Response(status_code=self._status_code, headers=headers)
        return self._response_type(
            status_code=self._status_code,
            content=self._serializer(*messages),
            headers=headers,
        )


class ErrorInterceptor:
    """
    Catches every error message. The status comes from the error itself when it carries one,
    then from the type mapping, and falls back to 500.
    """

    def __init__(
        self,
        mapping: Mapping[type[Error], StatusCodeType] | None = None,
        response: tuple[ResponseType, SerializerType] = (JSONResponse, ErrorMapping()),
        declare: ResponseModelType = ErrorResponse,
    ):
        self._mapping = mapping or {}
        self._response_type = response[0]
        self._serializer = response[1]
        self._model = declare

    def get_status_code(self) -> int:
        return 500

    def get_desired_type(self) -> type[Error]:
        return Error

    def get_response_model(self) -> ResponseModelType:
        return self._model

    def __call__(self, *errors: Error) -> Response:
        status_code = self._search_for_status_code(errors[0])
        return self._response_type(status_code=status_code, content=self._serializer(*errors))

    def _search_for_status_code(self, error: Error) -> StatusCodeType:
        status_code = getattr(error, "status_code", None)
        if isinstance(status_code, int):
            return status_code
        for error_type, code in self._mapping.items():
            if isinstance(error, error_type):
                return code
        return 500


class ResponseDescriber:
    def __init__(
        self,
        *interceptors: Interceptor | ErrorInterceptor,
    ):
        self._interceptors = interceptors

    def get_interceptors(self) -> Collection[Interceptor | ErrorInterceptor]:
        return self._interceptors

    def get_schema(self) -> Collection[tuple[int, ResponseModelType | None]]:
        return [(interceptor.get_status_code(), interceptor.get_response_model()) for interceptor in self._interceptors]
