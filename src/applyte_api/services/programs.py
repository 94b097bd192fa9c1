from collections.abc import Mapping
from typing import Any

from ..errors import BadRequestError
from ..query.filters import FilterSet, RangeField, parse_date, parse_number
from ..storage.contracts import Document
from .base import EntityService


class ProgramsService(EntityService):
    table = "programs"
    endpoint = "programs"
    sort_map = {"name": "name", "rank": "ranking.rank"}
    list_fields = ("areas",)
    range_fields = (
        RangeField("tuition", parse_number),
        RangeField("deadline", parse_date),
    )
    paths = {
        "areas": "areas.name",
        "tuition": "financials.tuition",
        "deadline": "deadlines.deadline",
    }
    options = ("fields", "school")
    required = ("name", "degree", "level", "schoolId")
    schools_table = "schools"

    async def validate(self, document: Mapping[str, Any], identifier: str | None) -> None:
        school_id = document.get("schoolId")
        if school_id is not None and await self._store.get(self.schools_table, school_id) is None:
            raise BadRequestError(f"Invalid schoolId: {school_id}")

    async def areas(self, identifier: str) -> list[dict[str, Any]] | None:
        program = await self._store.get(self.table, identifier)
        if program is None:
            return None
        return list(program.get("areas") or [])

    async def present(self, rows: list[Document], filter_set: FilterSet) -> list[Document]:
        if filter_set.raw("school") != "true":
            return rows
        schools: dict[str, Document | None] = {}
        for row in rows:
            school_id = row.get("schoolId")
            if school_id is None:
                continue
            if school_id not in schools:
                schools[school_id] = await self._store.get(self.schools_table, school_id)
            row["school"] = schools[school_id]
        return rows


class AreaCategoriesService(EntityService):
    table = "area_categories"
    endpoint = "area-categories"
    required = ("name",)
