from .. import auth
from ..http import Route
from ..schema import FacultyData, UserData
from ._common import create_route, delete_route, item_route, list_route, update_route


def list_users() -> Route:
    return list_route("/api/users", "users", UserData, "users.list", gates=[auth.admin])


def get_user() -> Route:
    return item_route("/api/users/{id}", "users", UserData, "users.get", gates=[auth.user])


def create_user() -> Route:
    return create_route("/api/users", "users", UserData, "users.create")


def update_user() -> Route:
    return update_route("/api/users", "users", UserData, "users.update", gates=[auth.user])


def delete_user() -> Route:
    return delete_route("/api/users", "users", "users.delete", gates=[auth.admin])


def list_faculties() -> Route:
    return list_route("/api/faculties", "faculties", FacultyData, "faculties.list")


def get_faculty() -> Route:
    return item_route("/api/faculties/{id}", "faculties", FacultyData, "faculties.get")


def create_faculty() -> Route:
    return create_route("/api/faculties", "faculties", FacultyData, "faculties.create", gates=[auth.admin])


def update_faculty() -> Route:
    return update_route("/api/faculties", "faculties", FacultyData, "faculties.update", gates=[auth.admin])


def delete_faculty() -> Route:
    return delete_route("/api/faculties", "faculties", "faculties.delete", gates=[auth.admin])
