import copy
import dataclasses
import uuid
from collections.abc import Iterable, Mapping
from typing import Any

import structlog
from zodchy.codex.operator import ASC, DESC, EQ, GE, GT, LE, LT, RANGE, SET, ClauseBit, Limit, Offset

from ..query.page import PageResult
from .contracts import Document, DocumentQuery

logger = structlog.get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class Table:
    name: str
    fields: frozenset[str] = frozenset()


class MemoryDocumentStore:
    """
    Dictionary backed document store. Documents are copied on the way in and out,
    so callers never share state with the store.
    """

    def __init__(self, *tables: Table):
        self._tables = {table.name: table for table in tables}
        self._documents: dict[str, dict[str, Document]] = {table.name: {} for table in tables}

    def seed(self, table: str, *documents: Document) -> list[str]:
        identifiers = []
        for document in documents:
            identifier = str(document.get("id") or uuid.uuid4().hex)
            self._collection(table)[identifier] = {**copy.deepcopy(document), "id": identifier}
            identifiers.append(identifier)
        return identifiers

    async def query(self, query: DocumentQuery) -> PageResult:
        conditions: list[tuple[str, ClauseBit]] = []
        ordering: list[tuple[int, str, bool]] = []
        offset, limit = 0, None
        for path, clause in query:
            if isinstance(clause, Offset):
                offset = clause.value
            elif isinstance(clause, Limit):
                limit = clause.value
            elif isinstance(clause, (ASC, DESC)):
                ordering.append((clause.value, path, isinstance(clause, DESC)))
            else:
                conditions.append((path, clause))

        rows = [
            document
            for document in self._collection(query.table).values()
            if all(_matches(resolve(document, path), clause) for path, clause in conditions)
        ]
        # least significant key first, relying on sort stability
        for _, path, descending in sorted(ordering, reverse=True):
            rows = _sorted(rows, path, descending)

        window = rows[offset : offset + limit] if limit is not None else rows[offset:]
        projected = [self._project(query.table, document, query.fields) for document in window]
        return PageResult.from_window(projected, query.pagination.limit)

    async def get(self, table: str, identifier: str) -> Document | None:
        document = self._collection(table).get(identifier)
        return copy.deepcopy(document) if document is not None else None

    async def find_one(self, table: str, **equals: Any) -> Document | None:
        for document in self._collection(table).values():
            if all(_matches(resolve(document, path), EQ(value)) for path, value in equals.items()):
                return copy.deepcopy(document)
        return None

    async def insert(self, table: str, document: Document) -> str:
        identifier = self.seed(table, document)[0]
        logger.info("document_inserted", table=table, id=identifier)
        return identifier

    async def replace(self, table: str, identifier: str, document: Document) -> None:
        collection = self._collection(table)
        if identifier not in collection:
            raise KeyError(f"{table}/{identifier}")
        collection[identifier] = {**copy.deepcopy(document), "id": identifier}
        logger.info("document_replaced", table=table, id=identifier)

    async def delete(self, table: str, identifier: str) -> bool:
        removed = self._collection(table).pop(identifier, None) is not None
        if removed:
            logger.info("document_deleted", table=table, id=identifier)
        return removed

    def _collection(self, table: str) -> dict[str, Document]:
        if table not in self._documents:
            raise LookupError(f"Unknown table: {table}")
        return self._documents[table]

    def _project(self, table: str, document: Document, fields: Iterable[str] | None) -> Document:
        if fields is None:
            return copy.deepcopy(document)
        allowed = self._tables[table].fields
        keep = {"id", *(field for field in fields if field in allowed)}
        return {key: copy.deepcopy(value) for key, value in document.items() if key in keep}


def resolve(document: Mapping[str, Any], path: str) -> list[Any]:
    """
    Values found under a dotted path. Lists met on the way are flattened,
    so 'areas.name' yields the name of every area.
    """
    values: list[Any] = [document]
    for part in path.split("."):
        found: list[Any] = []
        for value in values:
            if isinstance(value, Mapping) and part in value:
                item = value[part]
                found.extend(item if isinstance(item, list) else [item])
        values = found
    return [value for value in values if value is not None]


def _matches(values: list[Any], clause: ClauseBit) -> bool:
    if isinstance(clause, EQ):
        return any(_text(value) == _text(clause.value) for value in values)
    if isinstance(clause, SET):
        wanted = {_text(item) for item in clause.value}
        return any(_text(value) in wanted for value in values)
    if isinstance(clause, RANGE):
        return any(all(_within(value, bound) for bound in clause.value if bound is not None) for value in values)
    raise ValueError(f"Unsupported clause: {type(clause).__name__}")


def _within(value: Any, bound: ClauseBit) -> bool:
    target = bound.value
    try:
        candidate = float(value) if isinstance(target, (int, float)) else str(value)
    except (TypeError, ValueError):
        return False
    if isinstance(target, str):
        # compared at the bound's precision: a date bound covers the whole day of a stored timestamp
        candidate = candidate[: len(target)]
    if isinstance(bound, GE):
        return candidate >= target
    if isinstance(bound, GT):
        return candidate > target
    if isinstance(bound, LE):
        return candidate <= target
    if isinstance(bound, LT):
        return candidate < target
    raise ValueError(f"Unsupported bound: {type(bound).__name__}")


def _text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _sorted(rows: list[Document], path: str, descending: bool) -> list[Document]:
    present = [row for row in rows if resolve(row, path)]
    missing = [row for row in rows if not resolve(row, path)]
    present.sort(key=lambda row: _sort_key(resolve(row, path)[0]), reverse=descending)
    return present + missing


def _sort_key(value: Any) -> tuple[int, Any]:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return 0, value
    return 1, str(value).casefold()
