import dataclasses

from ..query.filters import PaginationConfig
from ..query.links import DEFAULT_BASE_URL
from ..storage.contracts import DocumentStoreContract
from .base import Changelog, EntityService, Page
from .geography import AdminDivisionsService, CitiesService, CountriesService
from .people import FacultiesService, UsersService
from .programs import AreaCategoriesService, ProgramsService
from .schools import SchoolsService


@dataclasses.dataclass
class Services:
    schools: SchoolsService
    programs: ProgramsService
    area_categories: AreaCategoriesService
    faculties: FacultiesService
    users: UsersService
    countries: CountriesService
    admin_divisions: AdminDivisionsService
    cities: CitiesService

    @classmethod
    def build(
        cls,
        store: DocumentStoreContract,
        link_base_url: str = DEFAULT_BASE_URL,
        pagination: PaginationConfig | None = None,
    ) -> "Services":
        return cls(
            **{
                field.name: field.type(store, link_base_url, pagination)  # type: ignore[operator]
                for field in dataclasses.fields(cls)
            }
        )


__all__ = [
    "AdminDivisionsService",
    "AreaCategoriesService",
    "Changelog",
    "CitiesService",
    "CountriesService",
    "EntityService",
    "FacultiesService",
    "Page",
    "ProgramsService",
    "SchoolsService",
    "Services",
    "UsersService",
]
