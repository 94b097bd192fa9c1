import fastapi
import structlog
import uvicorn
from fastapi.exceptions import RequestValidationError

from . import routes
from .errors import ApplyteError
from .http import JsonExceptionHandler, JwtAuthMiddleware, Router, RoutesRegistry
from .log import configure_logging
from .pipelines import build_registry
from .services import Services
from .settings import Settings, get_settings
from .storage import TABLES, DocumentStoreContract, MemoryDocumentStore

logger = structlog.get_logger(__name__)


def create_app(settings: Settings | None = None, store: DocumentStoreContract | None = None) -> fastapi.FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_format)

    services = Services.build(
        store or MemoryDocumentStore(*TABLES),
        link_base_url=settings.link_base_url,
        pagination=settings.pagination,
    )
    registry = RoutesRegistry()
    registry.register_module(routes)

    app = fastapi.FastAPI(title="Applyte API")
    app.include_router(Router(fastapi.APIRouter(), build_registry(services))(registry))

    handler = JsonExceptionHandler()
    app.add_exception_handler(RequestValidationError, handler.validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ApplyteError, handler.application_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handler.default_exception_handler)
    app.middleware("http")(JwtAuthMiddleware(settings.jwt_secret, jwt_algorithm=settings.jwt_algorithm))

    app.state.services = services
    logger.info("application_created", routes=len(registry))
    return app


def main() -> None:
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
