from typing import Any

import pydantic


class RequestData(pydantic.BaseModel, extra="forbid"):
    pass


class ResponseData(pydantic.BaseModel, extra="allow"):
    pass


class AddressData(RequestData):
    recipient: str | None = None
    address: str | None = None
    city: str | None = None
    adminDivision: str | None = None
    postalCode: str | None = None
    country: str | None = None


class LinkData(RequestData):
    name: str | None = None
    url: str | None = None


class IdentifierData(RequestData):
    id: str


# ----------------------Responses----------------------


class CreatedResponse(ResponseData):
    success: str = "created"
    id: str


class ChangelogResponse(ResponseData):
    id: str
    new: dict[str, Any]
    old: dict[str, Any]


class ErrorResponse(ResponseData):
    message: str
    details: dict[str, Any] | None = None
