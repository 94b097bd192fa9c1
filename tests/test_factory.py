import pydantic

from applyte_api.http.factory import make_list_response_class, make_response_class
from applyte_api.schema import SchoolData


def test_response_class_adds_identity_and_audit_fields() -> None:
    response_class = make_response_class(SchoolData)

    assert response_class.__name__ == "SchoolResponse"
    assert {"id", "created", "modified", "name", "address"} <= set(response_class.model_fields)

    instance = response_class.model_validate({"id": "1", "name": "MIT", "rank": 3})
    assert instance.model_dump(exclude_none=True) == {"id": "1", "name": "MIT", "rank": 3}


def test_list_response_class_is_a_bare_array() -> None:
    item_class = make_response_class(SchoolData)
    list_class = make_list_response_class(item_class)

    assert list_class.__name__ == "SchoolResponseList"
    assert issubclass(list_class, pydantic.RootModel)
    assert list_class.model_validate([{"id": "1"}]).model_dump(exclude_none=True) == [{"id": "1"}]
