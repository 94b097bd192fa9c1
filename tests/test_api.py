from collections.abc import Callable

import pytest
from fastapi.testclient import TestClient

from applyte_api.query import pagination_links
from applyte_api.storage import MemoryDocumentStore

Bearer = Callable[..., dict[str, str]]


@pytest.fixture
def schools(store: MemoryDocumentStore) -> list[str]:
    return store.seed(
        "schools",
        *(
            {"name": f"School {index:02d}", "campus": "Main", "address": {"city": "Boston", "country": "US"}}
            for index in range(1, 13)
        ),
    )


class TestListing:
    def test_first_page_with_links(self, client: TestClient, schools: list[str]) -> None:
        response = client.get("/api/schools", params={"limit": 5})

        assert response.status_code == 200
        assert [school["name"] for school in response.json()] == [f"School {i:02d}" for i in range(1, 6)]
        assert pagination_links(response.headers["Link"]) == {
            "self": "/api/schools?start=1&limit=5&sort=name&order=asc",
            "next": "/api/schools?start=6&limit=5&sort=name&order=asc",
        }

    def test_following_next_reaches_the_last_page(self, client: TestClient, schools: list[str]) -> None:
        response = client.get("/api/schools?start=11&limit=5&city=Boston")

        assert [school["name"] for school in response.json()] == ["School 11", "School 12"]
        assert pagination_links(response.headers["Link"]) == {
            "prev": "/api/schools?city=Boston&start=6&limit=5&sort=name&order=asc",
            "self": "/api/schools?city=Boston&start=11&limit=5&sort=name&order=asc",
        }

    def test_empty_page_is_an_empty_array(self, client: TestClient) -> None:
        response = client.get("/api/countries")

        assert response.status_code == 200
        assert response.json() == []
        assert 'rel="self"' in response.headers["Link"]

    @pytest.mark.parametrize(
        "query, message",
        [
            ("start=0", "Invalid start: 0"),
            ("limit=abc", "Invalid limit: abc"),
            ("sort=rank", "Invalid sort: rank"),
            ("order=up", "Invalid order: up"),
        ],
    )
    def test_invalid_pagination(self, client: TestClient, query: str, message: str) -> None:
        response = client.get(f"/api/schools?{query}")

        assert response.status_code == 422
        assert response.json() == {"message": message}

    def test_campus_without_name(self, client: TestClient) -> None:
        response = client.get("/api/schools?campus=Main")

        assert response.status_code == 400
        assert response.json() == {"message": "name required when campus specified"}


class TestSchoolRoutes:
    def test_get_by_id(self, client: TestClient, schools: list[str]) -> None:
        response = client.get(f"/api/schools/{schools[0]}")

        assert response.status_code == 200
        assert response.json()["name"] == "School 01"

    def test_unknown_id(self, client: TestClient) -> None:
        response = client.get("/api/schools/unknown")

        assert response.status_code == 404
        assert response.json() == {"message": "Not found"}

    def test_get_by_name_and_campus(self, client: TestClient, schools: list[str]) -> None:
        response = client.get("/api/schools/School 03/Main")

        assert response.status_code == 200
        assert response.json()["id"] == schools[2]

    def test_programs_by_id_and_by_name(self, client: TestClient, store: MemoryDocumentStore, schools: list[str]) -> None:
        store.seed(
            "programs",
            {"name": "History", "schoolId": schools[0]},
            {"name": "Physics", "schoolId": schools[1]},
        )

        by_id = client.get(f"/api/schools/{schools[0]}/programs")
        by_name = client.get("/api/schools/School 02/Main/programs")

        assert [program["name"] for program in by_id.json()] == ["History"]
        assert [program["name"] for program in by_name.json()] == ["Physics"]
        assert "/schools/School%2002/Main/programs?start=1" in by_name.headers["Link"]


class TestProgramRoutes:
    @pytest.fixture
    def program_id(self, store: MemoryDocumentStore, schools: list[str]) -> str:
        return store.seed(
            "programs",
            {
                "name": "Computer Science",
                "schoolId": schools[0],
                "areas": [{"name": "AI"}, {"name": "Systems"}],
                "financials": {"tuition": 30000},
            },
        )[0]

    def test_areas(self, client: TestClient, program_id: str) -> None:
        response = client.get(f"/api/programs/{program_id}/areas")

        assert response.status_code == 200
        assert response.json() == [{"name": "AI"}, {"name": "Systems"}]

    def test_range_and_list_filters(self, client: TestClient, program_id: str) -> None:
        response = client.get("/api/programs?tuition.le=30000&areas=AI||Robotics")

        assert [program["name"] for program in response.json()] == ["Computer Science"]
        assert "?areas=AI%7C%7CRobotics&tuition.le=30000&start=1" in response.headers["Link"]

    def test_embedded_school(self, client: TestClient, program_id: str) -> None:
        response = client.get("/api/programs?school=true")

        assert response.json()[0]["school"]["name"] == "School 01"


class TestWrites:
    def test_writes_need_an_administrator(self, client: TestClient, bearer: Bearer) -> None:
        anonymous = client.post("/api/schools", json={"name": "MIT"})
        user = client.post("/api/schools", json={"name": "MIT"}, headers=bearer("u1"))

        assert anonymous.status_code == 401
        assert anonymous.json() == {"message": "Authentication required"}
        assert user.status_code == 401
        assert user.json() == {"message": "Administrator rights required"}

    def test_invalid_token_is_refused(self, client: TestClient) -> None:
        response = client.get("/api/schools", headers={"Authorization": "Bearer not-a-token"})

        assert response.status_code == 401
        assert response.json() == {"message": "Access denied"}

    def test_create_update_delete(self, client: TestClient, admin_headers: dict[str, str]) -> None:
        created = client.post(
            "/api/schools",
            json={"name": "MIT", "address": {"city": "Cambridge", "country": "US"}},
            headers=admin_headers,
        )
        assert created.status_code == 201
        body = created.json()
        assert body["success"] == "created"
        identifier = body["id"]

        updated = client.put(
            "/api/schools",
            json={"id": identifier, "address": {"city": "Boston"}},
            headers=admin_headers,
        )
        assert updated.status_code == 200
        assert updated.json() == {
            "id": identifier,
            "new": {"address": {"city": "Boston"}},
            "old": {"address": {"city": "Cambridge"}},
        }
        assert client.get(f"/api/schools/{identifier}").json()["address"] == {"city": "Boston", "country": "US"}

        deleted = client.request("DELETE", "/api/schools", json={"id": identifier}, headers=admin_headers)
        assert deleted.status_code == 204
        assert client.get(f"/api/schools/{identifier}").status_code == 404

    @pytest.mark.parametrize("key", ["id", "created", "modified"])
    def test_create_refuses_storage_managed_keys(
        self, client: TestClient, admin_headers: dict[str, str], key: str
    ) -> None:
        response = client.post("/api/schools", json={key: "abc", "name": "X"}, headers=admin_headers)

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid request parameters"}
        assert client.get("/api/schools").json() == []

    def test_update_drops_audit_timestamps(
        self, client: TestClient, admin_headers: dict[str, str], schools: list[str]
    ) -> None:
        response = client.put(
            "/api/schools",
            json={"id": schools[0], "created": "2000-01-01", "name": "Renamed"},
            headers=admin_headers,
        )

        assert response.status_code == 200
        assert response.json()["new"] == {"name": "Renamed"}
        assert client.get(f"/api/schools/{schools[0]}").json().get("created") != "2000-01-01"

    def test_update_of_unknown_document(self, client: TestClient, admin_headers: dict[str, str]) -> None:
        response = client.put("/api/schools", json={"id": "missing", "name": "x"}, headers=admin_headers)

        assert response.status_code == 404

    def test_unknown_body_fields_fail_validation(self, client: TestClient, admin_headers: dict[str, str]) -> None:
        response = client.post("/api/schools", json={"name": "MIT", "color": "red"}, headers=admin_headers)

        assert response.status_code == 422
        assert response.json()["message"] == "Validation Error"
        assert "color" in response.json()["details"]["body"]

    def test_program_needs_an_existing_school(self, client: TestClient, admin_headers: dict[str, str]) -> None:
        response = client.post(
            "/api/programs",
            json={"name": "Law", "degree": "JD", "level": "graduate", "schoolId": "nope"},
            headers=admin_headers,
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid schoolId: nope"}


class TestUsers:
    @pytest.fixture
    def user_id(self, client: TestClient) -> str:
        response = client.post(
            "/api/users",
            json={"username": "ada", "name": {"first": "Ada", "last": "Lovelace"}, "contact": {"email": "ada@example.com"}},
        )
        assert response.status_code == 201
        return response.json()["id"]

    def test_signup_rejects_privileged_fields(self, client: TestClient) -> None:
        response = client.post(
            "/api/users",
            json={"name": {"first": "E", "last": "V"}, "contact": {"email": "eve@example.com"}, "accessRights": "admin"},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid request parameters"}

    def test_duplicate_signup(self, client: TestClient, user_id: str) -> None:
        response = client.post(
            "/api/users",
            json={"name": {"first": "A", "last": "L"}, "contact": {"email": "ada@example.com"}},
        )

        assert response.status_code == 400
        assert response.json() == {"message": "User already exists"}

    def test_user_reads_only_own_record(self, client: TestClient, user_id: str, bearer: Bearer) -> None:
        own = client.get(f"/api/users/{user_id}", headers=bearer(user_id))
        other = client.get(f"/api/users/{user_id}", headers=bearer("someone-else"))
        anonymous = client.get(f"/api/users/{user_id}")

        assert own.status_code == 200
        assert own.json()["username"] == "ada"
        assert "password" not in own.json()
        assert other.status_code == 401
        assert anonymous.status_code == 401

    def test_email_change_resets_verification(self, client: TestClient, user_id: str, bearer: Bearer) -> None:
        response = client.put(
            "/api/users",
            json={"id": user_id, "contact": {"email": "countess@example.com"}},
            headers=bearer(user_id),
        )

        assert response.status_code == 200
        assert response.json()["new"] == {"contact": {"email": "countess@example.com"}, "verified": False}

    def test_listing_is_for_administrators(
        self, client: TestClient, user_id: str, admin_headers: dict[str, str], bearer: Bearer
    ) -> None:
        assert client.get("/api/users", headers=bearer(user_id)).status_code == 401

        response = client.get("/api/users", headers=admin_headers)
        assert [user["username"] for user in response.json()] == ["ada"]
