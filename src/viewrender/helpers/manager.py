"""
Helper registry - Named, lazily created view helpers.

Each name maps either to helper instance or to :class:`PendingFactory`.
Factory is called on first ``get`` and its result replaces it, so every
helper is created at most once per registry. Aliases (case variants and
such) point to canonical names.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional
import logging

from viewrender.container import Container, ServiceLocator
from viewrender.exceptions import HelperNotFoundError, ViewRenderError
from viewrender.helpers.escape import EscapeHtml

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PendingFactory:
    """Helper not created yet.

    ``factory`` is called with ``container`` when given, otherwise with the
    container registry was created with.
    """

    factory: Callable[[ServiceLocator], Any]
    container: Optional[ServiceLocator] = None


class HelperPluginManager:
    def __init__(self, container: Optional[ServiceLocator] = None):
        #: Service locator passed to helper factories.
        self.container = container if container is not None else Container()
        self._aliases: Dict[str, str] = {}
        self._services: Dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        self.set_service("escape_html", EscapeHtml())
        self.set_alias("escapeHtml", "escape_html")
        self.set_alias("EscapeHtml", "escape_html")

    def set_alias(self, alias: str, target: str) -> None:
        self._aliases[alias] = target

    def set_factory(
        self,
        name: str,
        factory: Callable[[ServiceLocator], Any],
        container: Optional[ServiceLocator] = None,
    ) -> None:
        log.debug(f"Registering view helper factory {name}")
        self._services[name] = PendingFactory(factory, container)

    def set_service(self, name: str, helper: Any) -> None:
        self._services[name] = helper

    def canonical_name(self, name: str) -> str:
        seen = set()
        while name in self._aliases:
            if name in seen:
                raise ViewRenderError(f"Circular alias for view helper {name!r}")
            seen.add(name)
            name = self._aliases[name]
        return name

    def has(self, name: str) -> bool:
        return self.canonical_name(name) in self._services

    def is_resolved(self, name: str) -> bool:
        """True if helper exists and its factory (if any) was already called."""
        canonical = self.canonical_name(name)
        return canonical in self._services and not isinstance(self._services[canonical], PendingFactory)

    def get(self, name: str) -> Any:
        canonical = self.canonical_name(name)
        if canonical not in self._services:
            raise HelperNotFoundError(name)
        entry = self._services[canonical]
        if isinstance(entry, PendingFactory):
            log.debug(f"Creating view helper {canonical}")
            container = entry.container if entry.container is not None else self.container
            entry = entry.factory(container)
            self._services[canonical] = entry
        return entry
