from .filters import (
    RESERVED_KEYS,
    FilterPipeline,
    FilterSet,
    FilterValue,
    ListValue,
    PaginationConfig,
    PaginationSpec,
    RangeBounds,
    RangeField,
    Scalar,
    format_lists,
    format_pagination,
    format_ranges,
    parse_date,
    parse_number,
)
from .links import DEFAULT_BASE_URL, compose_links
from .page import PageResult
from .uri import ParsedURI, compose_link_header, pagination_links, parse_query_string, parse_uri

__all__ = [
    "RESERVED_KEYS",
    "DEFAULT_BASE_URL",
    "FilterPipeline",
    "FilterSet",
    "FilterValue",
    "ListValue",
    "PageResult",
    "PaginationConfig",
    "PaginationSpec",
    "ParsedURI",
    "RangeBounds",
    "RangeField",
    "Scalar",
    "compose_link_header",
    "compose_links",
    "format_lists",
    "format_pagination",
    "format_ranges",
    "pagination_links",
    "parse_date",
    "parse_number",
    "parse_query_string",
    "parse_uri",
]
