import copy
import dataclasses
import datetime
import functools
from collections.abc import Mapping
from typing import Any

from ..errors import BadRequestError
from ..messages import Caller
from ..objects import assign_deep, diff
from ..query.filters import (
    RESERVED_KEYS,
    FilterPipeline,
    FilterSet,
    FilterValue,
    ListValue,
    PaginationConfig,
    RangeField,
    format_lists,
    format_pagination,
    format_ranges,
)
from ..query.links import DEFAULT_BASE_URL, compose_links
from ..storage.contracts import Document, DocumentQuery, DocumentStoreContract
from ..storage.memory import resolve


@dataclasses.dataclass
class Page:
    rows: list[Document]
    link: str


@dataclasses.dataclass
class Changelog:
    id: str
    new: dict[str, Any]
    old: dict[str, Any]


def now() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


class EntityService:
    """
    Query orchestration for one entity: normalizes the raw filters, hands a translated
    query to storage and composes the Link header from the normalized filters.
    Subclasses describe the entity through the class attributes below.
    """

    table: str
    endpoint: str
    # sortable request key -> document path
    sort_map: Mapping[str, str] = {"name": "name"}
    list_fields: tuple[str, ...] = ()
    range_fields: tuple[RangeField, ...] = ()
    # request key -> document path, for keys that differ
    paths: Mapping[str, str] = {}
    # keys that tune the response and never reach storage as filters
    options: tuple[str, ...] = ("fields",)
    required: tuple[str, ...] = ()
    immutable: tuple[str, ...] = ("id", "created", "modified")
    hidden: tuple[str, ...] = ()

    def __init__(
        self,
        store: DocumentStoreContract,
        link_base_url: str = DEFAULT_BASE_URL,
        pagination: PaginationConfig | None = None,
    ):
        self._store = store
        self._link_base_url = link_base_url
        self._pagination = dataclasses.replace(
            pagination or PaginationConfig(),
            sortable=tuple(self.sort_map),
            default_sort=next(iter(self.sort_map)),
        )

    @functools.cached_property
    def pipeline(self) -> FilterPipeline:
        return FilterPipeline(
            functools.partial(format_pagination, config=self._pagination),
            functools.partial(format_lists, names=("fields", *self.list_fields)),
            functools.partial(format_ranges, fields=self.range_fields),
            self.shape,
        )

    def shape(self, filter_set: FilterSet) -> FilterSet:
        return filter_set

    def to_storage(self, filter_set: FilterSet, scope: Mapping[str, FilterValue] | None = None) -> DocumentQuery:
        pagination = filter_set.pagination
        if pagination is None:
            raise ValueError("Filter set carries no pagination")
        filters: dict[str, FilterValue] = {
            self.paths.get(key, key): value
            for key, value in filter_set.items()
            if key not in RESERVED_KEYS and key not in self.options
        }
        fields = filter_set.get("fields")
        return DocumentQuery(
            table=self.table,
            filters=FilterSet({**filters, **(scope or {})}),
            pagination=pagination,
            sort=(self.sort_map[pagination.sort],),
            fields=fields.values if isinstance(fields, ListValue) else None,
        )

    async def query(
        self,
        raw: Mapping[str, Any],
        endpoint: str | None = None,
        scope: Mapping[str, FilterValue] | None = None,
    ) -> Page:
        filter_set = self.pipeline(FilterSet.from_mapping(raw))
        result = await self._store.query(self.to_storage(filter_set, scope))
        return Page(
            rows=await self.present(result.results, filter_set),
            link=compose_links(filter_set, endpoint or self.endpoint, result.has_more, self._link_base_url),
        )

    async def find(self, identifier: str) -> Document | None:
        document = await self._store.get(self.table, identifier)
        if document is None:
            return None
        return (await self.present([document], FilterSet()))[0]

    async def create(self, payload: Mapping[str, Any]) -> str:
        if any(key in payload for key in self.immutable):
            raise BadRequestError("Invalid request parameters")
        for path in self.required:
            if not resolve(payload, path):
                raise BadRequestError(f"Missing required field: {path}")
        await self.validate(payload, None)
        timestamp = now()
        document = {**copy.deepcopy(dict(payload)), "created": timestamp, "modified": timestamp}
        return await self._store.insert(self.table, document)

    async def update(self, payload: Mapping[str, Any]) -> Changelog | None:
        identifier = payload.get("id")
        if not identifier:
            raise BadRequestError("Missing required field: id")
        current = await self._store.get(self.table, identifier)
        if current is None:
            return None
        patch = self.prepare_patch({k: v for k, v in payload.items() if k not in self.immutable}, current)
        await self.validate(patch, identifier)
        changes = diff(patch, copy.deepcopy(current))
        assign_deep(current, patch)
        current["modified"] = now()
        await self._store.replace(self.table, identifier, current)
        return Changelog(identifier, changes.new, changes.old)

    async def delete(self, identifier: str) -> bool:
        return await self._store.delete(self.table, identifier)

    def authorize(self, caller: Caller | None, identifier: str | None) -> None:
        pass

    def prepare_patch(self, patch: dict[str, Any], current: Document) -> dict[str, Any]:
        return patch

    async def validate(self, document: Mapping[str, Any], identifier: str | None) -> None:
        pass

    async def present(self, rows: list[Document], filter_set: FilterSet) -> list[Document]:
        if not self.hidden:
            return rows
        return [{k: v for k, v in row.items() if k not in self.hidden} for row in rows]
