import dataclasses
from collections.abc import Iterable
from typing import Any


@dataclasses.dataclass(frozen=True)
class PageResult:
    results: list[dict[str, Any]] = dataclasses.field(default_factory=list)
    has_more: bool = False

    @classmethod
    def from_window(cls, rows: Iterable[dict[str, Any]], limit: int) -> "PageResult":
        """
        Cuts a window fetched with limit + 1 rows down to the page; the extra row only signals has_more.
        """
        window = list(rows)
        return cls(results=window[:limit], has_more=len(window) > limit)
