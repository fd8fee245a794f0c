"""Minimal service locator and well known service ids."""

import logging
from typing import Any, Callable, Dict, Iterable, Optional, Protocol

from viewrender.exceptions import ServiceNotFoundError

log = logging.getLogger(__name__)

#: Application configuration (mapping or ApplicationConfig).
CONFIG = "config"
#: Configured ViewRenderer.
TEMPLATE_RENDERER = "viewrender.TemplateRenderer"
#: Helper registry, current and legacy ids.
HELPER_PLUGIN_MANAGER = "viewrender.HelperPluginManager"
LEGACY_HELPER_PLUGIN_MANAGER = "view.HelperPluginManager"
#: Upstream URL helper (route based), current and legacy ids.
URL_HELPER = "viewrender.helper.UrlHelper"
LEGACY_URL_HELPER = "expressive.helper.UrlHelper"
#: Upstream server URL helper, current and legacy ids.
SERVER_URL_HELPER = "viewrender.helper.ServerUrlHelper"
LEGACY_SERVER_URL_HELPER = "expressive.helper.ServerUrlHelper"


class ServiceLocator(Protocol):
    """Anything with ``has`` and ``get`` can be used as a container."""

    def has(self, id: str) -> bool: ...

    def get(self, id: str) -> Any: ...


class _NotFound:
    def __repr__(self):
        return "NOT_FOUND"

    def __bool__(self):
        return False


#: Returned by :func:`resolve_first` when none of the ids is registered.
NOT_FOUND = _NotFound()


def resolve_first(container: ServiceLocator, ids: Iterable[str]) -> Any:
    """Get first service registered under one of ``ids``.

    Ids are checked in order, so put the current id before legacy ones.

    :param container: service locator
    :param ids: service ids in priority order
    :return: service instance or ``NOT_FOUND``
    """
    for service_id in ids:
        if container.has(service_id):
            return container.get(service_id)
    return NOT_FOUND


class Container:
    """Dictionary backed service locator.

    Factories are called with the container on first ``get`` and the result
    replaces the factory.
    """

    def __init__(self, services: Optional[Dict[str, Any]] = None):
        self._services: Dict[str, Any] = dict(services or {})
        self._factories: Dict[str, Callable[["Container"], Any]] = {}

    def set(self, id: str, service: Any) -> None:
        self._factories.pop(id, None)
        self._services[id] = service

    def set_factory(self, id: str, factory: Callable[["Container"], Any]) -> None:
        self._services.pop(id, None)
        self._factories[id] = factory

    def has(self, id: str) -> bool:
        return id in self._services or id in self._factories

    def get(self, id: str) -> Any:
        if id in self._services:
            return self._services[id]
        if id in self._factories:
            log.debug(f"Creating service {id}")
            service = self._factories[id](self)
            del self._factories[id]
            self._services[id] = service
            return service
        raise ServiceNotFoundError(id)

    @classmethod
    def from_config(cls, config: Any) -> "Container":
        """Create container with configuration and renderer factory registered.

        :param config: application configuration, mapping or ApplicationConfig
        :return: container
        """
        from viewrender.factory import ViewRendererFactory

        container = cls({CONFIG: config})
        container.set_factory(TEMPLATE_RENDERER, ViewRendererFactory())
        return container
