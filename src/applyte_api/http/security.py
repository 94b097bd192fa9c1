import abc
import collections.abc
from typing import Any

import fastapi
import jwt
import structlog
from fastapi.responses import JSONResponse

logger = structlog.get_logger(__name__)

CallNext = collections.abc.Callable[[fastapi.Request], collections.abc.Awaitable[fastapi.Response]]
AccessDeniedAdapter = collections.abc.Callable[[fastapi.Request], fastapi.Response]


def default_access_denied_adapter(request: fastapi.Request) -> fastapi.Response:
    return JSONResponse(status_code=401, content={"message": "Access denied"})


def register_caller(request: fastapi.Request, claims: dict[str, Any]) -> bool:
    request.state.caller = claims
    return True


class AuthMiddleware(abc.ABC):
    def __init__(
        self,
        access_denied_response_adapter: AccessDeniedAdapter = default_access_denied_adapter,
        public_paths: collections.abc.Sequence[str] | None = None,
    ):
        self._public_paths = public_paths or ()
        self._access_denied_response_adapter = access_denied_response_adapter

    @abc.abstractmethod
    async def __call__(self, request: fastapi.Request, call_next: CallNext) -> fastapi.Response:
        raise NotImplementedError

    def _is_public_path(self, request: fastapi.Request) -> bool:
        return any(request.url.path.startswith(path) for path in self._public_paths)


class JwtAuthMiddleware(AuthMiddleware):
    """
    Identifies the caller from a bearer token. Requests without a token pass through
    anonymously and are left to the route gates; a token that fails verification is refused.
    """

    def __init__(
        self,
        secret: str,
        auth_context_registrator: collections.abc.Callable[[fastapi.Request, dict], bool] = register_caller,
        jwt_algorithm: str = "HS256",
        access_denied_response_adapter: AccessDeniedAdapter = default_access_denied_adapter,
        public_paths: collections.abc.Sequence[str] | None = None,
    ):
        super().__init__(access_denied_response_adapter, public_paths)
        self._secret = secret
        self._auth_context_registrator = auth_context_registrator
        self._jwt_algorithm = jwt_algorithm

    async def __call__(self, request: fastapi.Request, call_next: CallNext) -> fastapi.Response:
        request.state.caller = None
        if self._is_public_path(request):
            return await call_next(request)

        access_token = request.headers.get("Authorization", "").removeprefix("Bearer").strip()
        if not access_token:
            return await call_next(request)

        try:
            payload = jwt.decode(access_token, self._secret, algorithms=[self._jwt_algorithm])
        except jwt.exceptions.PyJWTError as e:
            logger.info("token_rejected", path=request.url.path, reason=str(e))
            return self._access_denied_response_adapter(request)

        if payload and self._auth_context_registrator(request, payload):
            return await call_next(request)

        return self._access_denied_response_adapter(request)
