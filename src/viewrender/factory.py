"""
Renderer factory - Assembles ViewRenderer from container services.

Uses ``config`` service, which may hold following structure:

.. code-block:: python

    {
        "templates": {
            "layout": "name of layout template to use, if any",
            "map": {
                # template name => file name pairs
            },
            "paths": {
                # namespace => path or list of paths
                # numeric namespaces mean the default namespace
            },
        },
    }

If helper registry is registered in the container it is used (and
modified), otherwise new one is created. In both cases ``url`` and
``server-url`` helpers are registered. They need upstream URL helpers from
the container, but only when templates actually use them.
"""

from typing import Callable, Sequence
import logging

from viewrender.config import TemplatesConfig
from viewrender.container import (
    CONFIG,
    HELPER_PLUGIN_MANAGER,
    LEGACY_HELPER_PLUGIN_MANAGER,
    LEGACY_SERVER_URL_HELPER,
    LEGACY_URL_HELPER,
    NOT_FOUND,
    SERVER_URL_HELPER,
    URL_HELPER,
    ServiceLocator,
    resolve_first,
)
from viewrender.engine import TemplateEngine
from viewrender.exceptions import MissingHelperError
from viewrender.helpers.manager import HelperPluginManager
from viewrender.helpers.url import ServerUrlHelper, UrlHelper
from viewrender.renderer import ViewRenderer
from viewrender.resolver import AggregateResolver, TemplateMapResolver

log = logging.getLogger(__name__)

#: Template map is asked before template paths.
MAP_RESOLVER_PRIORITY = 100

URL_HELPER_ALIASES = ["url", "Url"]
SERVER_URL_HELPER_ALIASES = ["serverurl", "serverUrl", "ServerUrl", "server_url", "server-url"]


def _upstream_helper_factory(helper_name: str, ids: Sequence[str], adapter: Callable) -> Callable:
    def factory(container: ServiceLocator):
        upstream = resolve_first(container, ids)
        if upstream is NOT_FOUND:
            raise MissingHelperError(ids[0], helper_name)
        return adapter(upstream)

    return factory


create_url_helper = _upstream_helper_factory("url", [URL_HELPER, LEGACY_URL_HELPER], UrlHelper)
create_server_url_helper = _upstream_helper_factory(
    "server-url", [SERVER_URL_HELPER, LEGACY_SERVER_URL_HELPER], ServerUrlHelper
)


class ViewRendererFactory:
    """Create :class:`ViewRenderer` from container."""

    def __call__(self, container: ServiceLocator) -> ViewRenderer:
        config = TemplatesConfig.from_config(container.get(CONFIG) if container.has(CONFIG) else {})

        resolver = AggregateResolver()
        resolver.attach(TemplateMapResolver(config.map), MAP_RESOLVER_PRIORITY)

        engine = TemplateEngine()
        engine.set_resolver(resolver)

        self.inject_helpers(engine, container)

        view = ViewRenderer(engine, config.layout)

        for namespace, paths in config.paths.items():
            for path in paths:
                view.add_path(path, namespace)

        log.debug(f"Created view renderer with {len(config.map)} mapped templates and layout {config.layout}")
        return view

    def inject_helpers(self, engine: TemplateEngine, container: ServiceLocator) -> None:
        """Inject helper registry with url and server-url helpers into engine.

        :param engine: template engine
        :param container: service locator, used for registry lookup and by helper factories
        """
        helpers = resolve_first(container, [HELPER_PLUGIN_MANAGER, LEGACY_HELPER_PLUGIN_MANAGER])
        if helpers is NOT_FOUND:
            helpers = HelperPluginManager(container)

        for alias in URL_HELPER_ALIASES:
            helpers.set_alias(alias, URL_HELPER)
        helpers.set_factory(URL_HELPER, create_url_helper, container)

        for alias in SERVER_URL_HELPER_ALIASES:
            helpers.set_alias(alias, SERVER_URL_HELPER)
        helpers.set_factory(SERVER_URL_HELPER, create_server_url_helper, container)

        engine.set_helper_manager(helpers)


def create_renderer(container: ServiceLocator) -> ViewRenderer:
    """Shortcut for ``ViewRendererFactory()(container)``."""
    return ViewRendererFactory()(container)
