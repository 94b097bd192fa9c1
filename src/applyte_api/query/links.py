from typing import Any
from urllib.parse import quote

from .filters import RESERVED_KEYS, FilterSet, ListValue, RangeBounds, Scalar
from .uri import LIST_DELIMITER, compose_link_header

DEFAULT_BASE_URL = "http://applyte.io/api"

# encodeURIComponent leaves these unescaped
_SAFE = "-_.!~*'()"


def compose_links(
    filter_set: FilterSet,
    endpoint: str,
    has_more: bool,
    base_url: str = DEFAULT_BASE_URL,
) -> str:
    """
    Builds the prev/self/next Link header for a paginated list.
    Every link repeats the filters of the current request so that clients can walk the
    result set without rebuilding the query themselves.
    @param filter_set: a filter set that went through format_pagination
    @param endpoint: path below the base url, e.g. 'schools'
    @param has_more: whether the storage window held a row past the current page
    """
    pagination = filter_set.pagination
    if pagination is None:
        raise ValueError("Filter set carries no pagination")

    base = f"{base_url.rstrip('/')}/{endpoint.strip('/')}?" + "".join(
        f"{key}={value}&" for key, value in _serialize(filter_set)
    )
    suffix = f"limit={pagination.limit}&sort={_encode(pagination.sort)}&order={pagination.order}"

    links: dict[str, str] = {}
    if pagination.external_start > 1:
        links["prev"] = f"{base}start={max(1, pagination.start - pagination.limit + 1)}&{suffix}"
    links["self"] = f"{base}start={pagination.external_start}&{suffix}"
    if has_more:
        links["next"] = f"{base}start={pagination.start + pagination.limit + 1}&{suffix}"
    return compose_link_header(links)


def _serialize(filter_set: FilterSet) -> list[tuple[str, str]]:
    params: list[tuple[str, str]] = []
    for key, value in filter_set.items():
        if key in RESERVED_KEYS:
            continue
        if isinstance(value, ListValue):
            params.append((_encode(key), _encode(LIST_DELIMITER.join(value.values))))
        elif isinstance(value, RangeBounds):
            params.extend((_encode(f"{key}.{bound}"), _encode(_format(limit))) for bound, limit in value.bounds())
        elif isinstance(value, Scalar):
            params.append((_encode(key), _encode(value.value)))
    return params


def _format(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _encode(value: str) -> str:
    return quote(value, safe=_SAFE)
