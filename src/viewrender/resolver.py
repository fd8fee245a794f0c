"""
Template resolvers - Map template names to files.

A resolver has one method, ``resolve(name)``, returning file path or None.
:class:`AggregateResolver` asks its resolvers in priority order, so explicit
template map entries can win over directory lookups.
"""

from dataclasses import dataclass
from itertools import count
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Tuple
import logging

log = logging.getLogger(__name__)


class TemplateResolver(Protocol):
    """Resolver interface."""

    def resolve(self, name: str) -> Optional[str]: ...


@dataclass(frozen=True)
class TemplatePath:
    """Directory registered for template lookups."""

    path: str
    namespace: Optional[str] = None

    def __str__(self):
        return self.path


class TemplateMapResolver:
    """Resolve template names using explicit name to file table."""

    def __init__(self, template_map: Optional[Dict[str, str]] = None):
        self._map: Dict[str, str] = dict(template_map or {})

    @property
    def map(self) -> Dict[str, str]:
        return dict(self._map)

    def add(self, name: str, path: str) -> None:
        self._map[name] = path

    def has(self, name: str) -> bool:
        return name in self._map

    def resolve(self, name: str) -> Optional[str]:
        return self._map.get(name)


class AggregateResolver:
    """Ordered collection of resolvers.

    Higher priority resolvers are asked first. Resolvers with same priority
    are asked in order of attaching.
    """

    def __init__(self):
        self._queue: List[Tuple[int, int, TemplateResolver]] = []
        self._sequence = count()

    def attach(self, resolver: TemplateResolver, priority: int = 1) -> None:
        self._queue.append((priority, next(self._sequence), resolver))
        self._queue.sort(key=lambda item: (-item[0], item[1]))

    @property
    def resolvers(self) -> List[TemplateResolver]:
        return [resolver for _, _, resolver in self._queue]

    def __len__(self):
        return len(self._queue)

    def resolve(self, name: str) -> Optional[str]:
        for _, _, resolver in self._queue:
            resolved = resolver.resolve(name)
            if resolved is not None:
                return resolved
        log.debug(f"Unable to resolve template {name}")
        return None


class TemplatePathStack:
    """Namespaced stack of template directories.

    Names are ``namespace::template`` or just ``template`` (default namespace).
    Directories added later are searched first. Lookups in a namespace fall
    back to default namespace directories.
    """

    NAMESPACE_SEPARATOR = "::"
    DEFAULT_SUFFIX = "html"

    def __init__(self, default_suffix: str = DEFAULT_SUFFIX):
        self.default_suffix = default_suffix
        self._paths: Dict[Optional[str], List[str]] = {}

    def add_path(self, path: str, namespace: Optional[str] = None) -> None:
        self._paths.setdefault(namespace, []).append(str(path))

    def get_paths(self) -> Dict[Optional[str], List[str]]:
        return {namespace: list(paths) for namespace, paths in self._paths.items()}

    def split_name(self, name: str) -> Tuple[Optional[str], str]:
        if self.NAMESPACE_SEPARATOR in name:
            namespace, template = name.split(self.NAMESPACE_SEPARATOR, 1)
            return namespace or None, template
        return None, name

    def resolve(self, name: str) -> Optional[str]:
        namespace, template = self.split_name(name)
        if ".." in Path(template).parts or Path(template).anchor:
            log.warning(f"Refusing to resolve template outside of template paths: {name}")
            return None
        if not Path(template).suffix and self.default_suffix:
            template = f"{template}.{self.default_suffix}"

        directories = list(reversed(self._paths.get(namespace, [])))
        if namespace is not None:
            directories += list(reversed(self._paths.get(None, [])))
        for directory in directories:
            candidate = Path(directory) / template
            if candidate.is_file() and candidate.resolve().is_relative_to(Path(directory).resolve()):
                return str(candidate)
        return None
