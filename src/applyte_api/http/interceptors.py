from collections.abc import Mapping

import pydantic
from fastapi.responses import JSONResponse, Response
from zodchy.codex.cqea import Error, Message

from ..messages import EntityCreated, EntityDeleted, EntityUpdated, ItemView, PageView
from ..schema import ChangelogResponse, CreatedResponse, ErrorResponse
from .factory import make_list_response_class, make_response_class
from .response import ErrorInterceptor, Interceptor
from .serializing import ErrorMapping, EventMapping, ViewMapping


def link_header(view: Message) -> Mapping[str, str]:
    return {"Link": view.link} if isinstance(view, PageView) else {}


class InterceptorFactory:
    def __init__(
        self,
        errors_map: Mapping[type[Error], int] | None = None,
        default_response_class: type[Response] = JSONResponse,
    ):
        self._errors_map = errors_map or {}
        self._default_response_class = default_response_class

    def error(self) -> ErrorInterceptor:
        return ErrorInterceptor(
            mapping=self._errors_map,
            response=(self._default_response_class, ErrorMapping()),
            declare=ErrorResponse,
        )

    def page(self, response_data: type[pydantic.BaseModel]) -> Interceptor:
        return Interceptor(
            catch=PageView,
            declare=(200, make_list_response_class(make_response_class(response_data))),
            response=(self._default_response_class, ViewMapping()),
            headers=link_header,
        )

    def item(self, response_data: type[pydantic.BaseModel]) -> Interceptor:
        return Interceptor(
            catch=ItemView,
            declare=(200, make_response_class(response_data)),
            response=(self._default_response_class, ViewMapping()),
        )

    def items(self, response_data: type[pydantic.BaseModel]) -> Interceptor:
        return Interceptor(
            catch=ItemView,
            declare=(200, make_list_response_class(response_data)),
            response=(self._default_response_class, ViewMapping()),
        )

    def created(self) -> Interceptor:
        return Interceptor(
            catch=EntityCreated,
            declare=(201, CreatedResponse),
            response=(
                self._default_response_class,
                EventMapping(lambda fields: {"success": "created", **fields}),
            ),
        )

    def updated(self) -> Interceptor:
        return Interceptor(
            catch=EntityUpdated,
            declare=(200, ChangelogResponse),
            response=(self._default_response_class, EventMapping()),
        )

    def deleted(self) -> Interceptor:
        return Interceptor(catch=EntityDeleted, declare=204)
