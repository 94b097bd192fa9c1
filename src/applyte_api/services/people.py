from collections.abc import Mapping
from typing import Any

from ..errors import UserExistedError, UserNotAuthorizedError
from ..messages import Caller
from ..storage.contracts import Document
from .base import EntityService

ADMIN = "admin"


class FacultiesService(EntityService):
    table = "faculties"
    endpoint = "faculties"
    sort_map = {"name": "name.last"}
    required = ("name.first", "name.last")


class UsersService(EntityService):
    """
    Users manage their own record; admins manage everyone.
    Credentials, verification state and access rights never change through this service.
    """

    table = "users"
    endpoint = "users"
    sort_map = {"name": "name.last", "username": "username"}
    paths = {"email": "contact.email"}
    required = ("name.first", "name.last", "contact.email")
    immutable = ("id", "created", "modified", "verified", "accessRights", "password")
    hidden = ("password",)

    def authorize(self, caller: Caller | None, identifier: str | None) -> None:
        if caller is None:
            raise UserNotAuthorizedError("Authentication required")
        if caller.get("accessRights") == ADMIN:
            return
        if identifier is None or caller.get("sub") != identifier:
            raise UserNotAuthorizedError()

    def prepare_patch(self, patch: dict[str, Any], current: Document) -> dict[str, Any]:
        email = (patch.get("contact") or {}).get("email")
        if email is not None and email != (current.get("contact") or {}).get("email"):
            patch["verified"] = False
        return patch

    async def validate(self, document: Mapping[str, Any], identifier: str | None) -> None:
        email = (document.get("contact") or {}).get("email")
        if email is None:
            return
        existing = await self._store.find_one(self.table, **{"contact.email": email})
        if existing is not None and existing["id"] != identifier:
            raise UserExistedError()
