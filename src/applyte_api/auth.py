import datetime
from collections.abc import Mapping
from typing import Any

import jwt
from fastapi import Request

from .errors import UserNotAuthorizedError

ADMIN = "admin"


def caller(request: Request) -> Mapping[str, Any] | None:
    return getattr(request.state, "caller", None)


def user(request: Request) -> None:
    if caller(request) is None:
        raise UserNotAuthorizedError("Authentication required")


def verified(request: Request) -> None:
    user(request)
    if not caller(request).get("verified"):  # type: ignore[union-attr]
        raise UserNotAuthorizedError("User not verified")


def admin(request: Request) -> None:
    user(request)
    if caller(request).get("accessRights") != ADMIN:  # type: ignore[union-attr]
        raise UserNotAuthorizedError("Administrator rights required")


def issue_token(
    subject: str,
    secret: str,
    *,
    access_rights: str = "user",
    verified: bool = False,
    expires_in: int = 3600,
    algorithm: str = "HS256",
) -> str:
    issued = datetime.datetime.now(datetime.timezone.utc)
    claims = {
        "sub": subject,
        "accessRights": access_rights,
        "verified": verified,
        "iat": issued,
        "exp": issued + datetime.timedelta(seconds=expires_in),
    }
    return jwt.encode(claims, secret, algorithm=algorithm)
