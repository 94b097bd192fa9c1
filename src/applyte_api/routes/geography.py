from ..http import Route
from ..schema import AdminDivisionData, CityData, CountryData
from ._common import item_route, list_route


def list_countries() -> Route:
    return list_route("/api/countries", "geography", CountryData, "countries.list")


def get_country() -> Route:
    return item_route("/api/countries/{id}", "geography", CountryData, "countries.get")


def list_admin_divisions() -> Route:
    return list_route("/api/admin-divisions", "geography", AdminDivisionData, "admin_divisions.list")


def get_admin_division() -> Route:
    return item_route("/api/admin-divisions/{id}", "geography", AdminDivisionData, "admin_divisions.get")


def list_cities() -> Route:
    return list_route("/api/cities", "geography", CityData, "cities.list")


def get_city() -> Route:
    return item_route("/api/cities/{id}", "geography", CityData, "cities.get")
