"""
Template engine - Jinja2 environment bound to resolver and helper registry.

Templates are looked up through the resolver (not Jinja2 search path), and
view helpers are available in every template through ``view`` global::

    <a href="{{ view.url('home') }}">Home</a>
    <link rel="canonical" href="{{ view.serverUrl('/about') }}">
"""

from pathlib import Path
from typing import Any, Dict, Optional
import logging

from jinja2 import BaseLoader, Environment, TemplateNotFound, select_autoescape

from viewrender.helpers.manager import HelperPluginManager
from viewrender.resolver import TemplateResolver

log = logging.getLogger(__name__)


class ResolverLoader(BaseLoader):
    """Jinja2 loader asking engine's resolver for template files."""

    def __init__(self, engine: "TemplateEngine"):
        self.engine = engine

    def get_source(self, environment: Environment, template: str):
        resolver = self.engine.resolver
        resolved = resolver.resolve(template) if resolver is not None else None
        if resolved is None:
            raise TemplateNotFound(template)
        path = Path(resolved)
        try:
            source = path.read_text(encoding="utf-8")
        except OSError as error:
            raise TemplateNotFound(template) from error
        mtime = path.stat().st_mtime
        log.debug(f"Loaded template {template} from {path}")
        return source, str(path), lambda: path.exists() and path.stat().st_mtime == mtime


class HelperProxy:
    """Attribute access to view helpers, exposed to templates as ``view``."""

    def __init__(self, engine: "TemplateEngine"):
        self._engine = engine

    def __getattr__(self, name: str) -> Any:
        # AttributeError lets Jinja2 treat unknown helpers as undefined.
        if name.startswith("_") or not self._engine.helpers.has(name):
            raise AttributeError(name)
        return self._engine.helper(name)


class TemplateEngine:
    """Renders single template by name, without layouts or default parameters."""

    def __init__(
        self,
        resolver: Optional[TemplateResolver] = None,
        helpers: Optional[HelperPluginManager] = None,
    ):
        self.resolver = resolver
        self._helpers = helpers
        self.env = Environment(
            loader=ResolverLoader(self),
            autoescape=select_autoescape(["html", "htm", "xml", "phtml"], default=True),
            trim_blocks=True,
            lstrip_blocks=True,
            # Resolution may change when paths are added, so never cache.
            cache_size=0,
        )
        self.env.globals["view"] = HelperProxy(self)

    def set_resolver(self, resolver: TemplateResolver) -> None:
        self.resolver = resolver

    def set_helper_manager(self, helpers: HelperPluginManager) -> None:
        self._helpers = helpers

    @property
    def helpers(self) -> HelperPluginManager:
        if self._helpers is None:
            self._helpers = HelperPluginManager()
        return self._helpers

    def helper(self, name: str) -> Any:
        return self.helpers.get(name)

    def render(self, name: str, variables: Optional[Dict[str, Any]] = None) -> str:
        template = self.env.get_template(name)
        return template.render(**(variables or {}))
