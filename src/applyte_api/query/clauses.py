from collections.abc import Iterator, Sequence

from zodchy.codex.operator import (
    ASC,
    DESC,
    EQ,
    GE,
    GT,
    LE,
    LT,
    RANGE,
    SET,
    ClauseBit,
    Limit,
    Offset,
)

from .filters import FilterSet, ListValue, PaginationSpec, RangeBounds, Scalar

OFFSET_KEY = "offset"
LIMIT_KEY = "limit"


def compile_filters(filter_set: FilterSet) -> Iterator[tuple[str, ClauseBit]]:
    for path, value in filter_set.items():
        if isinstance(value, Scalar):
            yield path, EQ(value.value)
        elif isinstance(value, ListValue):
            yield path, SET(*value.values)
        elif isinstance(value, RangeBounds):
            yield path, RANGE(_lower(value), _upper(value))


def compile_query(
    filter_set: FilterSet,
    pagination: PaginationSpec,
    sort: Sequence[str],
) -> Iterator[tuple[str, ClauseBit]]:
    """
    Clause stream handed to storage. The limit asks for one row past the page
    so that the caller can tell whether another page exists.
    """
    yield from compile_filters(filter_set)
    direction = DESC if pagination.descending else ASC
    for priority, path in enumerate(sort):
        yield path, direction(priority)
    yield OFFSET_KEY, Offset(pagination.start)
    yield LIMIT_KEY, Limit(pagination.limit + 1)


def _lower(bounds: RangeBounds) -> GE | GT | None:
    if bounds.gt is not None:
        return GT(bounds.gt)
    if bounds.ge is not None:
        return GE(bounds.ge)
    return None


def _upper(bounds: RangeBounds) -> LE | LT | None:
    if bounds.lt is not None:
        return LT(bounds.lt)
    if bounds.le is not None:
        return LE(bounds.le)
    return None
