import importlib
import inspect
import os
from collections.abc import Callable, Generator
from types import ModuleType

import structlog

from .router import Route

logger = structlog.get_logger(__name__)


class RoutesRegistry:
    """
    Collects routes from route functions: public module-level functions annotated to return Route.
    Modules are visited in name order and, within a module, functions in the order they are written,
    so a route declared earlier wins when two paths overlap.
    """

    def __init__(self) -> None:
        self._registry: list[Route] = []
        self._ignore_list = ["__pycache__", ".pytest_cache", ".git", "venv", "env"]

    def register_module(self, package: ModuleType) -> None:
        """
        registers the routes of the given package and its subpackages, or of a single module.
        @param package: The package or module to collect route functions from
        """
        package_path = getattr(package, "__path__", None)
        file_path = getattr(package, "__file__", None)

        if package_path:
            base_path = list(package_path)[0]
            self._walk_filesystem(base_path, package.__name__)
        elif file_path:
            self._collect_module_routes(package)
        else:
            raise ValueError(f"Module {package.__name__} has no __path__ or __file__ attribute")

    def register_route(self, route: Route) -> None:
        self._registry.append(route)

    def register_route_function(self, route_function: Callable[[], Route]) -> None:
        self._registry.append(route_function())

    def __iter__(self) -> Generator[Route, None, None]:
        yield from self._registry

    def __len__(self) -> int:
        return len(self._registry)

    def _walk_filesystem(self, dir_path: str, package_name: str) -> None:
        for item in sorted(os.listdir(dir_path)):
            item_path = os.path.join(dir_path, item)

            if item.startswith("."):
                continue

            if os.path.isdir(item_path):
                if item in self._ignore_list:
                    continue
                self._walk_filesystem(item_path, f"{package_name}.{item}")

            # private modules hold shared helpers, not routes
            elif item.endswith(".py") and not item.startswith("_"):
                full_module_name = f"{package_name}.{item[:-3]}"
                try:
                    module = importlib.import_module(full_module_name)
                except ImportError as e:
                    logger.warning("route_module_skipped", module=full_module_name, error=str(e))
                    continue
                self._collect_module_routes(module)

    def _collect_module_routes(self, module: ModuleType) -> None:
        functions = [
            obj
            for name, obj in vars(module).items()
            if not name.startswith("_")
            and inspect.isfunction(obj)
            and obj.__module__ == module.__name__
            and inspect.signature(obj).return_annotation is Route
        ]
        for function in sorted(functions, key=lambda f: f.__code__.co_firstlineno):
            self.register_route_function(function)
