import abc
import collections.abc

import structlog
from fastapi import Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..errors import ApplyteError

logger = structlog.get_logger(__name__)


class ExceptionHandler(abc.ABC):
    def __init__(self, response_type: type[Response]) -> None:
        self._response_type = response_type

    @abc.abstractmethod
    def default_exception_handler(self, request: Request, exc: Exception) -> Response:
        raise NotImplementedError

    @abc.abstractmethod
    def application_exception_handler(self, request: Request, exc: ApplyteError) -> Response:
        raise NotImplementedError

    @abc.abstractmethod
    def validation_exception_handler(self, request: Request, exc: RequestValidationError) -> Response:
        raise NotImplementedError


class JsonExceptionHandler(ExceptionHandler):
    def __init__(self) -> None:
        super().__init__(JSONResponse)

    def default_exception_handler(self, request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "unhandled_exception",
            path=request.url.path,
            method=request.method,
            exc_info=exc,
        )
        return JSONResponse(status_code=500, content=self._build_data("Internal server error"))

    def application_exception_handler(self, request: Request, exc: ApplyteError) -> JSONResponse:
        logger.info("request_rejected", path=request.url.path, status_code=exc.status_code, reason=exc.message)
        return JSONResponse(status_code=exc.status_code, content=self._build_data(exc.message))

    def validation_exception_handler(self, request: Request, exc: RequestValidationError) -> JSONResponse:
        details: dict = {}
        for e in exc.errors():
            details = self._merge(details, self._nestify([str(part) for part in e["loc"]], e["msg"]))
        return JSONResponse(status_code=422, content=self._build_data("Validation Error", details))

    def _build_data(self, message: str, details: dict | None = None) -> dict:
        if details is None:
            return {"message": message}
        return {"message": message, "details": details}

    def _nestify(self, data: collections.abc.Sequence[str], value: dict | str) -> dict:
        if len(data) > 1:
            value = self._nestify(data[1:], value)
        return {data[0]: value}

    def _merge(self, d1: dict, d2: dict) -> dict:
        for k, v in d2.items():
            if isinstance(d1.get(k), dict) and isinstance(v, dict):
                d1[k] = self._merge(d1[k], v)
            else:
                d1[k] = v
        return d1
