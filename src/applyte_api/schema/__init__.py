from .common import (
    AddressData,
    ChangelogResponse,
    CreatedResponse,
    ErrorResponse,
    IdentifierData,
    LinkData,
    RequestData,
    ResponseData,
)
from .geography import AdminDivisionData, CityData, CountryData
from .people import FacultyData, UserData
from .program import AreaCategoryData, AreaData, ProgramData
from .school import SchoolData

__all__ = [
    "AddressData",
    "AdminDivisionData",
    "AreaCategoryData",
    "AreaData",
    "ChangelogResponse",
    "CityData",
    "CountryData",
    "CreatedResponse",
    "ErrorResponse",
    "FacultyData",
    "IdentifierData",
    "LinkData",
    "ProgramData",
    "RequestData",
    "ResponseData",
    "SchoolData",
    "UserData",
]
