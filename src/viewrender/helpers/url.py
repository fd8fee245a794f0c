"""
URL view helpers.

Both wrap upstream helpers registered in the container, which know about
routes and the current request. Here we only adapt their ``generate``
methods to callables usable from templates.
"""

from typing import Any, Dict, Optional, Protocol


class RouteUrlGenerator(Protocol):
    """Upstream URL helper, generates URL for named route."""

    def generate(
        self,
        route: Optional[str],
        params: Dict[str, Any],
        query_params: Dict[str, Any],
        fragment: Optional[str],
        options: Dict[str, Any],
    ) -> str: ...


class ServerUrlGenerator(Protocol):
    """Upstream server URL helper, generates absolute URL for path."""

    def generate(self, path: Optional[str] = None) -> str: ...


class UrlHelper:
    """``url`` view helper.

    Called without route, upstream helper uses currently matched route.
    """

    def __init__(self, helper: RouteUrlGenerator):
        self.helper = helper

    def __call__(
        self,
        route: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        query_params: Optional[Dict[str, Any]] = None,
        fragment: Optional[str] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> str:
        return self.helper.generate(route, params or {}, query_params or {}, fragment, options or {})


class ServerUrlHelper:
    """``server-url`` view helper."""

    def __init__(self, helper: ServerUrlGenerator):
        self.helper = helper

    def __call__(self, path: Optional[str] = None) -> str:
        return self.helper.generate(path)
