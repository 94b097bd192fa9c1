from .common import RequestData


class CountryData(RequestData):
    name: str | None = None
    code: str | None = None


class AdminDivisionData(RequestData):
    name: str | None = None
    abbrev: str | None = None
    country: str | None = None


class CoordinatesData(RequestData):
    latitude: float | None = None
    longitude: float | None = None


class CityData(RequestData):
    name: str | None = None
    adminDivision: str | None = None
    adminDivisionId: str | None = None
    country: str | None = None
    coordinates: CoordinatesData | None = None
