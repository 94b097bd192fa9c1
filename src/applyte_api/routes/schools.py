from .. import auth
from ..http import Route
from ..schema import ProgramData, SchoolData
from ._common import create_route, delete_route, item_route, list_route, update_route

TAG = "schools"


def list_schools() -> Route:
    return list_route("/api/schools", TAG, SchoolData, "schools.list")


def get_school() -> Route:
    return item_route("/api/schools/{id}", TAG, SchoolData, "schools.get")


def list_school_programs() -> Route:
    return list_route(
        "/api/schools/{id}/programs",
        TAG,
        ProgramData,
        "schools.programs",
        route_params=("id",),
    )


# declared after the programs route, which shares its two-segment shape
def get_school_by_name_campus() -> Route:
    return item_route(
        "/api/schools/{name}/{campus}",
        TAG,
        SchoolData,
        "schools.by_name_campus",
        route_params=("name", "campus"),
    )


def list_school_programs_by_name_campus() -> Route:
    return list_route(
        "/api/schools/{name}/{campus}/programs",
        TAG,
        ProgramData,
        "schools.programs_by_name_campus",
        route_params=("name", "campus"),
    )


def create_school() -> Route:
    return create_route("/api/schools", TAG, SchoolData, "schools.create", gates=[auth.admin])


def update_school() -> Route:
    return update_route("/api/schools", TAG, SchoolData, "schools.update", gates=[auth.admin])


def delete_school() -> Route:
    return delete_route("/api/schools", TAG, "schools.delete", gates=[auth.admin])
