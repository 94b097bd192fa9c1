import pydantic

from ..schema import ResponseData


def make_response_class(data_class: type[pydantic.BaseModel]) -> type[pydantic.BaseModel]:
    """
    Create the stored form of data_class: the same fields plus the storage id and audit timestamps.
    @param data_class: The request model describing the entity.
    @return: A new response model named after data_class.
    """
    class_name = f"{data_class.__name__.removesuffix('Data')}Response"
    annotations = {"id": str, "created": str | None, "modified": str | None}
    return type(
        class_name,
        (data_class, ResponseData),
        {
            "__annotations__": annotations,
            "created": None,
            "modified": None,
            "model_config": pydantic.ConfigDict(extra="allow"),
        },
    )


def make_list_response_class(item_class: type) -> type[pydantic.RootModel]:
    """
    Create a model whose body is a bare JSON array of item_class.
    @param item_class: The model of a single array element.
    """
    return type(f"{item_class.__name__}List", (pydantic.RootModel[list[item_class]],), {})  # type: ignore[valid-type]
