import dataclasses
from typing import Any, Protocol

from zodchy.codex.cqea import Query
from zodchy.codex.operator import ClauseStream

from ..query.clauses import compile_query
from ..query.filters import FilterSet, PaginationSpec
from ..query.page import PageResult

Document = dict[str, Any]


@dataclasses.dataclass
class DocumentQuery(Query):
    """
    A storage-side query: filters already translated to document paths.
    Iterating it yields the zodchy clause stream the store evaluates.
    """

    table: str
    filters: FilterSet = dataclasses.field(default_factory=FilterSet)
    pagination: PaginationSpec = dataclasses.field(default_factory=PaginationSpec)
    sort: tuple[str, ...] = ()
    fields: tuple[str, ...] | None = None

    def __iter__(self) -> ClauseStream:  # type: ignore[override]
        return compile_query(self.filters, self.pagination, self.sort)


class DocumentStoreContract(Protocol):
    async def query(self, query: DocumentQuery) -> PageResult: ...

    async def get(self, table: str, identifier: str) -> Document | None: ...

    async def find_one(self, table: str, **equals: Any) -> Document | None: ...

    async def insert(self, table: str, document: Document) -> str: ...

    async def replace(self, table: str, identifier: str, document: Document) -> None: ...

    async def delete(self, table: str, identifier: str) -> bool: ...
