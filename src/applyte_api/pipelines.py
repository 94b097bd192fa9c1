from collections.abc import Awaitable, Callable
from typing import Any
from urllib.parse import quote

import structlog
from zodchy.codex.cqea import Message
from zodchy.toolbox.processing import AsyncMessageStreamContract, AsyncPipelineContract

from .errors import BadRequestError, UserNotAuthorizedError
from .messages import (
    CreateItem,
    DeleteItem,
    EntityCreated,
    EntityDeleted,
    EntityUpdated,
    FetchItem,
    FetchPage,
    InternalFailure,
    InvalidRequest,
    ItemView,
    NotFound,
    PageView,
    UpdateItem,
)
from .services import EntityService, Services

logger = structlog.get_logger(__name__)

Handler = Callable[[Any], Awaitable[Message]]

CRUD_ENTITIES = ("schools", "programs", "area_categories", "faculties", "users")
READ_ONLY_ENTITIES = ("countries", "admin_divisions", "cities")


def pipeline(handler: Handler) -> AsyncPipelineContract:
    """
    Runs every message through the handler and turns failures into error messages.
    Authorization failures leave the pipeline untouched so the application answers them.
    """

    async def run(*messages: Message, **_: Any) -> AsyncMessageStreamContract:
        for message in messages:
            try:
                yield await handler(message)
            except UserNotAuthorizedError:
                raise
            except BadRequestError as e:
                yield InvalidRequest(e.message, e.status_code)
            except Exception:
                logger.exception("pipeline_failed", message=type(message).__name__)
                yield InternalFailure()

    return run  # type: ignore[return-value]


def list_items(service: EntityService) -> Handler:
    async def handle(message: FetchPage) -> Message:
        page = await service.query(message.filters)
        return PageView(page.rows, page.link)

    return handle


def get_item(service: EntityService) -> Handler:
    async def handle(message: FetchItem) -> Message:
        service.authorize(message.caller, message.id)
        item = await service.find(message.id)  # type: ignore[arg-type]
        return ItemView(item) if item is not None else NotFound()

    return handle


def create_item(service: EntityService) -> Handler:
    async def handle(message: CreateItem) -> Message:
        return EntityCreated(await service.create(message.payload))

    return handle


def update_item(service: EntityService) -> Handler:
    async def handle(message: UpdateItem) -> Message:
        service.authorize(message.caller, message.payload.get("id"))
        changelog = await service.update(message.payload)
        if changelog is None:
            return NotFound()
        return EntityUpdated(changelog.id, changelog.new, changelog.old)

    return handle


def delete_item(service: EntityService) -> Handler:
    async def handle(message: DeleteItem) -> Message:
        service.authorize(message.caller, message.id)
        return EntityDeleted(message.id) if await service.delete(message.id) else NotFound()

    return handle


def school_by_name_campus(services: Services) -> Handler:
    async def handle(message: FetchItem) -> Message:
        school = await services.schools.find_by_name_campus(message.name, message.campus)  # type: ignore[arg-type]
        return ItemView(school) if school is not None else NotFound()

    return handle


def school_programs(services: Services) -> Handler:
    async def handle(message: FetchPage) -> Message:
        school = await services.schools.find(message.id)  # type: ignore[arg-type]
        if school is None:
            return NotFound()
        page = await services.schools.programs(school, message.filters, services.programs)
        return PageView(page.rows, page.link)

    return handle


def school_programs_by_name_campus(services: Services) -> Handler:
    async def handle(message: FetchPage) -> Message:
        school = await services.schools.find_by_name_campus(message.name, message.campus)  # type: ignore[arg-type]
        if school is None:
            return NotFound()
        endpoint = f"schools/{quote(message.name, safe='')}/{quote(message.campus, safe='')}/programs"  # type: ignore[arg-type]
        page = await services.schools.programs(school, message.filters, services.programs, endpoint)
        return PageView(page.rows, page.link)

    return handle


def program_areas(services: Services) -> Handler:
    async def handle(message: FetchItem) -> Message:
        areas = await services.programs.areas(message.id)  # type: ignore[arg-type]
        return ItemView(areas) if areas is not None else NotFound()

    return handle


def build_registry(services: Services) -> dict[str, AsyncPipelineContract]:
    """
    Pipelines keyed by '<entity>.<operation>', the codes routes refer to.
    """
    registry: dict[str, AsyncPipelineContract] = {}
    for name in CRUD_ENTITIES + READ_ONLY_ENTITIES:
        service = getattr(services, name)
        registry[f"{name}.list"] = pipeline(list_items(service))
        registry[f"{name}.get"] = pipeline(get_item(service))
    for name in CRUD_ENTITIES:
        service = getattr(services, name)
        registry[f"{name}.create"] = pipeline(create_item(service))
        registry[f"{name}.update"] = pipeline(update_item(service))
        registry[f"{name}.delete"] = pipeline(delete_item(service))
    registry["schools.by_name_campus"] = pipeline(school_by_name_campus(services))
    registry["schools.programs"] = pipeline(school_programs(services))
    registry["schools.programs_by_name_campus"] = pipeline(school_programs_by_name_campus(services))
    registry["programs.areas"] = pipeline(program_areas(services))
    return registry
