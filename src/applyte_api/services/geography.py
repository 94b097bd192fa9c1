from .base import EntityService


class CountriesService(EntityService):
    table = "countries"
    endpoint = "countries"


class AdminDivisionsService(EntityService):
    table = "admin_divisions"
    endpoint = "admin-divisions"


class CitiesService(EntityService):
    table = "cities"
    endpoint = "cities"
