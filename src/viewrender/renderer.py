"""
View renderer - What application code talks to.

Wraps :class:`TemplateEngine` and adds namespaced template paths, layout
handling and default template parameters.
"""

from typing import Any, Dict, List, Optional
import logging

from markupsafe import Markup

from viewrender.engine import TemplateEngine
from viewrender.resolver import AggregateResolver, TemplatePath, TemplatePathStack

log = logging.getLogger(__name__)

#: Template name for default parameters applied to all templates.
TEMPLATE_ALL = "*"
#: Priority of path stack in aggregate resolver, below template map.
PATH_STACK_PRIORITY = 0


class ViewRenderer:
    """Render templates, optionally wrapped in layout.

    Layout template receives rendered template as ``content`` together with
    all parameters. ``layout`` parameter overrides configured layout for
    single render, ``False`` disables it.
    """

    def __init__(self, engine: Optional[TemplateEngine] = None, layout: Optional[str] = None):
        self.engine = engine if engine is not None else TemplateEngine()
        self.layout = layout
        self._path_stack = TemplatePathStack()
        self._default_params: Dict[str, Dict[str, Any]] = {}
        self._attach_path_stack()

    def _attach_path_stack(self) -> None:
        resolver = self.engine.resolver
        if not isinstance(resolver, AggregateResolver):
            aggregate = AggregateResolver()
            if resolver is not None:
                aggregate.attach(resolver)
            self.engine.set_resolver(aggregate)
            resolver = aggregate
        resolver.attach(self._path_stack, PATH_STACK_PRIORITY)

    def add_path(self, path: str, namespace: Optional[str] = None) -> None:
        log.debug(f"Adding template path {path} to namespace {namespace}")
        self._path_stack.add_path(path, namespace)

    def get_paths(self) -> List[TemplatePath]:
        return [
            TemplatePath(path=path, namespace=namespace)
            for namespace, paths in self._path_stack.get_paths().items()
            for path in paths
        ]

    def add_default_param(self, template_name: str, param: str, value: Any) -> None:
        """Add parameter passed to template on every render.

        :param template_name: template name or ``TEMPLATE_ALL``
        :param param: parameter name
        :param value: parameter value
        :raises ValueError: on empty template or parameter name
        """
        if not isinstance(template_name, str) or not template_name:
            raise ValueError("Template name must be a non-empty string")
        if not isinstance(param, str) or not param:
            raise ValueError("Parameter name must be a non-empty string")
        self._default_params.setdefault(template_name, {})[param] = value

    def _merge_params(self, name: str, params: Dict[str, Any]) -> Dict[str, Any]:
        return {
            **self._default_params.get(TEMPLATE_ALL, {}),
            **self._default_params.get(name, {}),
            **params,
        }

    def render(self, name: str, params: Optional[Dict[str, Any]] = None) -> str:
        params = self._merge_params(name, dict(params or {}))
        layout = params.pop("layout", self.layout)
        content = self.engine.render(name, params)
        if not layout:
            return content

        layout_params = self._merge_params(layout, params)
        layout_params.pop("layout", None)
        # Already rendered, must not be escaped again.
        layout_params["content"] = Markup(content)
        return self.engine.render(layout, layout_params)
