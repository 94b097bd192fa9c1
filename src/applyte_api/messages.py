import dataclasses
from collections.abc import Mapping
from typing import Any

from zodchy.codex.cqea import Command, Error, Event, Task, View

Caller = Mapping[str, Any]

# ----------------------Tasks----------------------


@dataclasses.dataclass
class FetchPage(Task):
    filters: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    id: str | None = None
    name: str | None = None
    campus: str | None = None
    caller: Caller | None = None


@dataclasses.dataclass
class FetchItem(Task):
    id: str | None = None
    name: str | None = None
    campus: str | None = None
    caller: Caller | None = None


@dataclasses.dataclass
class CreateItem(Command):
    payload: dict[str, Any]
    caller: Caller | None = None


@dataclasses.dataclass
class UpdateItem(Command):
    payload: dict[str, Any]
    caller: Caller | None = None


@dataclasses.dataclass
class DeleteItem(Command):
    id: str
    caller: Caller | None = None


# ----------------------Views----------------------


@dataclasses.dataclass
class PageView(View):
    rows: list[dict[str, Any]]
    link: str

    def data(self) -> list[dict[str, Any]]:
        return self.rows

    def meta(self) -> dict[str, Any]:
        return {"link": self.link}


@dataclasses.dataclass
class ItemView(View):
    item: Any

    def data(self) -> Any:
        return self.item


# ----------------------Events----------------------


@dataclasses.dataclass
class EntityCreated(Event):
    id: str


@dataclasses.dataclass
class EntityUpdated(Event):
    id: str
    new: dict[str, Any]
    old: dict[str, Any]


@dataclasses.dataclass
class EntityDeleted(Event):
    id: str


# ----------------------Errors----------------------


@dataclasses.dataclass
class InvalidRequest(Error):
    message: str
    status_code: int = 400


@dataclasses.dataclass
class NotFound(Error):
    message: str = "Not found"
    status_code: int = 404


@dataclasses.dataclass
class InternalFailure(Error):
    message: str = "Internal server error"
    status_code: int = 500
