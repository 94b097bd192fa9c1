from ..schema import (
    AdminDivisionData,
    AreaCategoryData,
    CityData,
    CountryData,
    FacultyData,
    ProgramData,
    SchoolData,
    UserData,
)
from .memory import Table

AUDIT_FIELDS = frozenset({"id", "created", "modified"})

TABLES = (
    Table("schools", AUDIT_FIELDS | set(SchoolData.model_fields)),
    Table("programs", AUDIT_FIELDS | set(ProgramData.model_fields)),
    Table("area_categories", AUDIT_FIELDS | set(AreaCategoryData.model_fields)),
    Table("faculties", AUDIT_FIELDS | set(FacultyData.model_fields)),
    Table("users", AUDIT_FIELDS | set(UserData.model_fields) - {"password"}),
    Table("countries", AUDIT_FIELDS | set(CountryData.model_fields)),
    Table("admin_divisions", AUDIT_FIELDS | set(AdminDivisionData.model_fields)),
    Table("cities", AUDIT_FIELDS | set(CityData.model_fields)),
)
