from .. import auth
from ..http import DeclarativeAdapter, Endpoint, RequestDescriber, ResponseDescriber, Route, RouteParameter
from ..messages import FetchItem
from ..schema import AreaCategoryData, AreaData, ProgramData
from ._common import create_route, delete_route, interceptors, item_route, list_route, update_route

TAG = "programs"


def list_programs() -> Route:
    return list_route("/api/programs", TAG, ProgramData, "programs.list")


def get_program() -> Route:
    return item_route("/api/programs/{id}", TAG, ProgramData, "programs.get")


def list_program_areas() -> Route:
    return Route(
        path="/api/programs/{id}/areas",
        methods=["GET"],
        tags=[TAG],
        endpoint=Endpoint(
            request=RequestDescriber(schema=[RouteParameter("id")], adapter=DeclarativeAdapter(FetchItem)),
            response=ResponseDescriber(interceptors.items(AreaData), interceptors.error()),
            pipeline_code="programs.areas",
        ),
    )


def create_program() -> Route:
    return create_route("/api/programs", TAG, ProgramData, "programs.create", gates=[auth.admin])


def update_program() -> Route:
    return update_route("/api/programs", TAG, ProgramData, "programs.update", gates=[auth.admin])


def delete_program() -> Route:
    return delete_route("/api/programs", TAG, "programs.delete", gates=[auth.admin])


def list_area_categories() -> Route:
    return list_route("/api/area-categories", "area-categories", AreaCategoryData, "area_categories.list")


def get_area_category() -> Route:
    return item_route("/api/area-categories/{id}", "area-categories", AreaCategoryData, "area_categories.get")


def create_area_category() -> Route:
    return create_route(
        "/api/area-categories", "area-categories", AreaCategoryData, "area_categories.create", gates=[auth.admin]
    )


def update_area_category() -> Route:
    return update_route(
        "/api/area-categories", "area-categories", AreaCategoryData, "area_categories.update", gates=[auth.admin]
    )


def delete_area_category() -> Route:
    return delete_route("/api/area-categories", "area-categories", "area_categories.delete", gates=[auth.admin])
