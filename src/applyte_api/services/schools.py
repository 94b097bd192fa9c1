from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from ..errors import BadRequestError
from ..query.filters import FilterSet, Scalar
from ..storage.contracts import Document
from .base import EntityService, Page
from .programs import ProgramsService

LOCATION_KEYS = ("city", "state", "country")


class SchoolsService(EntityService):
    table = "schools"
    endpoint = "schools"
    paths = {
        "city": "address.city",
        "state": "address.adminDivision",
        "country": "address.country",
    }
    required = ("name",)

    def shape(self, filter_set: FilterSet) -> FilterSet:
        if "campus" in filter_set and "name" not in filter_set:
            raise BadRequestError("name required when campus specified")
        return filter_set.reordered(*LOCATION_KEYS)

    async def find_by_name_campus(self, name: str, campus: str) -> Document | None:
        return await self._store.find_one(self.table, name=name, campus=campus)

    async def programs(
        self,
        school: Document,
        raw: Mapping[str, Any],
        programs: ProgramsService,
        endpoint: str | None = None,
    ) -> Page:
        """
        Programs of one school, filtered and paginated like /programs itself.
        """
        endpoint = endpoint or f"{self.endpoint}/{quote(school['id'], safe='')}/programs"
        return await programs.query(raw, endpoint=endpoint, scope={"schoolId": Scalar(school["id"])})
