import dataclasses
import datetime
import functools
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Any, TypeAlias

from ..errors import BadRequestError
from .uri import LIST_DELIMITER, parse_query_string

RESERVED_KEYS = ("start", "limit", "sort", "order")
ORDERS = ("asc", "desc")
RANGE_BOUNDS = ("gt", "ge", "lt", "le")


# ----------------------Values----------------------


@dataclasses.dataclass(frozen=True)
class Scalar:
    value: str


@dataclasses.dataclass(frozen=True)
class ListValue:
    values: tuple[str, ...]

    @classmethod
    def split(cls, raw: str) -> "ListValue":
        return cls(tuple(raw.split(LIST_DELIMITER)))


@dataclasses.dataclass(frozen=True)
class RangeBounds:
    gt: Any = None
    ge: Any = None
    lt: Any = None
    le: Any = None

    def __bool__(self) -> bool:
        return any(value is not None for value in (self.gt, self.ge, self.lt, self.le))

    def bounds(self) -> Iterator[tuple[str, Any]]:
        """
        Present bounds in link emission order: le, ge, lt, gt.
        """
        for name in ("le", "ge", "lt", "gt"):
            value = getattr(self, name)
            if value is not None:
                yield name, value

    def collapse(self) -> "RangeBounds":
        """
        Keeps only the tighter bound of each side. On a tie the exclusive bound wins.
        """
        gt, ge, lt, le = self.gt, self.ge, self.lt, self.le
        if gt is not None and ge is not None:
            if ge > gt:
                gt = None
            else:
                ge = None
        if lt is not None and le is not None:
            if le < lt:
                lt = None
            else:
                le = None
        return RangeBounds(gt=gt, ge=ge, lt=lt, le=le)


FilterValue: TypeAlias = Scalar | ListValue | RangeBounds


def as_filter_value(value: Any) -> FilterValue:
    if isinstance(value, (Scalar, ListValue, RangeBounds)):
        return value
    if isinstance(value, (list, tuple)):
        return ListValue(tuple(str(item) for item in value))
    return Scalar(str(value))


# ----------------------Pagination----------------------


@dataclasses.dataclass(frozen=True)
class PaginationSpec:
    start: int = 0
    limit: int = 10
    sort: str = "name"
    order: str = "asc"

    @property
    def external_start(self) -> int:
        return self.start + 1

    @property
    def descending(self) -> bool:
        return self.order == "desc"


@dataclasses.dataclass(frozen=True)
class PaginationConfig:
    sortable: tuple[str, ...] = ("name",)
    default_sort: str = "name"
    default_limit: int = 10
    max_limit: int = 100


@dataclasses.dataclass(frozen=True)
class RangeField:
    name: str
    parser: Callable[[str], Any] | None = None

    def parse(self, raw: str) -> Any:
        return self.parser(raw) if self.parser else raw

    def keys(self) -> Iterator[tuple[str, str]]:
        for bound in RANGE_BOUNDS:
            yield bound, f"{self.name}.{bound}"


# ----------------------FilterSet----------------------


@dataclasses.dataclass(frozen=True)
class FilterSet(Mapping[str, FilterValue]):
    """
    Ordered, immutable view over request filters. Every transformation returns a new instance.
    """

    filters: Mapping[str, FilterValue] = dataclasses.field(default_factory=dict)
    pagination: PaginationSpec | None = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "FilterSet":
        return cls({str(key): as_filter_value(value) for key, value in raw.items()})

    @classmethod
    def from_query_string(cls, text: str) -> "FilterSet":
        return cls.from_mapping(parse_query_string(text))

    def __getitem__(self, key: str) -> FilterValue:
        return self.filters[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.filters)

    def __len__(self) -> int:
        return len(self.filters)

    def raw(self, key: str) -> str | None:
        value = self.filters.get(key)
        if isinstance(value, Scalar):
            return value.value
        if isinstance(value, ListValue):
            return LIST_DELIMITER.join(value.values)
        return None

    def with_filters(self, updates: Mapping[str, FilterValue]) -> "FilterSet":
        return dataclasses.replace(self, filters={**self.filters, **updates})

    def with_pagination(self, pagination: PaginationSpec) -> "FilterSet":
        return dataclasses.replace(self, pagination=pagination)

    def without(self, *keys: str) -> "FilterSet":
        return dataclasses.replace(self, filters={k: v for k, v in self.filters.items() if k not in keys})

    def reordered(self, *keys: str) -> "FilterSet":
        """
        Moves the given keys, when present, to the end in the order given.
        """
        tail = {key: self.filters[key] for key in keys if key in self.filters}
        return dataclasses.replace(self, filters={**self.without(*keys).filters, **tail})


Stage: TypeAlias = Callable[[FilterSet], FilterSet]


class FilterPipeline:
    def __init__(self, *stages: Stage):
        self._stages = stages

    def __call__(self, filter_set: FilterSet) -> FilterSet:
        return functools.reduce(lambda current, stage: stage(current), self._stages, filter_set)

    def then(self, *stages: Stage) -> "FilterPipeline":
        return FilterPipeline(*self._stages, *stages)


# ----------------------Stages----------------------


def format_pagination(filter_set: FilterSet, config: PaginationConfig = PaginationConfig()) -> FilterSet:
    """
    Validates and defaults start, limit, sort and order, checked in that order.
    The resulting start is 0-based; the raw keys stay in the filter set.
    @raise BadRequestError: 422 naming the first invalid field and its raw value
    """
    start = _integer(filter_set, "start", lambda value: value >= 1)
    limit = _integer(filter_set, "limit", lambda value: 1 <= value <= config.max_limit)

    sort = filter_set.raw("sort")
    if "sort" in filter_set and sort not in config.sortable:
        raise _invalid("sort", sort)

    order = filter_set.raw("order")
    if "order" in filter_set and order not in ORDERS:
        raise _invalid("order", order)

    return filter_set.with_pagination(
        PaginationSpec(
            start=(start if start is not None else 1) - 1,
            limit=limit if limit is not None else config.default_limit,
            sort=sort or config.default_sort,
            order=order or "asc",
        )
    )


def format_lists(filter_set: FilterSet, names: Iterable[str]) -> FilterSet:
    updates: dict[str, FilterValue] = {}
    for name in names:
        value = filter_set.get(name)
        if isinstance(value, Scalar):
            updates[name] = ListValue.split(value.value)
    return filter_set.with_filters(updates) if updates else filter_set


def format_ranges(filter_set: FilterSet, fields: Iterable[RangeField]) -> FilterSet:
    """
    Compiles 'name.gt/ge/lt/le' keys into one RangeBounds under 'name'.
    The dotted keys are dropped; the canonical key is only written when a bound survives.
    """
    consumed: list[str] = []
    updates: dict[str, FilterValue] = {}
    for field in fields:
        bounds: dict[str, Any] = {}
        for bound, key in field.keys():
            if key not in filter_set:
                continue
            consumed.append(key)
            raw = filter_set.raw(key)
            try:
                bounds[bound] = field.parse(raw)  # type: ignore[arg-type]
            except (TypeError, ValueError) as e:
                raise _invalid(key, raw) from e
        if condition := RangeBounds(**bounds).collapse():
            updates[field.name] = condition
    return filter_set.without(*consumed).with_filters(updates)


# ----------------------Parsers----------------------


def parse_number(raw: str) -> float:
    return float(raw)


def parse_date(raw: str) -> str:
    return datetime.date.fromisoformat(raw[:10]).isoformat()


def _integer(filter_set: FilterSet, key: str, valid: Callable[[int], bool]) -> int | None:
    if key not in filter_set:
        return None
    raw = filter_set.raw(key)
    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise _invalid(key, raw) from e
    if not valid(value):
        raise _invalid(key, raw)
    return value


def _invalid(key: str, raw: Any) -> BadRequestError:
    return BadRequestError(f"Invalid {key}: {raw}", 422)
