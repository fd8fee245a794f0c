"""Stuff related to template configuration.

Raw configuration is a mapping, usually loaded from YAML. Its ``templates``
section looks like this:

.. code-block:: yaml

    templates:
      layout: layout/default
      map:
        home: templates/home.html
      paths:
        app: templates/app
        0: templates/shared

Numeric keys in ``paths`` mean the default namespace. Values may be a single
path or a list of paths. All of that is normalized once, here, so the rest of
the code works with plain typed structures.
"""

import logging
import re
from collections.abc import Mapping
from pathlib import PurePath
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

log = logging.getLogger(__name__)

NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def is_numeric(value: Any) -> bool:
    """Check if namespace key is numeric (int, float, bool or numeric string).

    Bools count as numbers, YAML loads keys like ``on:`` as True.

    :param value: key to check
    :return: True for numeric keys
    """
    if isinstance(value, (int, float)):
        return True
    if isinstance(value, str):
        return bool(NUMERIC_RE.match(value))
    return False


def normalize_namespace(key: Any) -> Optional[str]:
    if key is None or is_numeric(key):
        return None
    return str(key)


def as_path_list(value: Any) -> List[str]:
    """Coerce single path, list of paths or mapping of paths to a list.

    :param value: raw value from configuration
    :return: list of paths, possibly empty
    """
    if value is None:
        return []
    if isinstance(value, (str, PurePath)):
        return [str(value)]
    if isinstance(value, Mapping):
        return [str(item) for item in value.values()]
    if isinstance(value, (list, tuple, set)):
        return [str(item) for item in value]
    return [str(value)]


class TemplatesConfig(BaseModel):
    """Normalized ``templates`` section."""

    model_config = ConfigDict(extra="ignore", validate_assignment=True)
    #: Name of layout template wrapping every rendered template, if any.
    layout: Optional[str] = None
    #: Template name to file name pairs.
    map: Dict[str, str] = {}
    #: Namespace to paths. ``None`` is the default namespace.
    paths: Dict[Optional[str], List[str]] = {}

    @field_validator("layout", mode="before")
    @classmethod
    def coerce_layout(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        log.warning(f"Layout should be a string, got {type(value).__name__}; converting")
        return str(value)

    @field_validator("map", mode="before")
    @classmethod
    def coerce_map(cls, value: Any) -> Dict[str, str]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            log.warning(f"Template map should be a mapping, got {type(value).__name__}; ignoring")
            return {}
        return {str(name): str(path) for name, path in value.items()}

    @field_validator("paths", mode="before")
    @classmethod
    def coerce_paths(cls, value: Any) -> Dict[Optional[str], List[str]]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            log.warning(f"Template paths should be a mapping, got {type(value).__name__}; ignoring")
            return {}
        paths: Dict[Optional[str], List[str]] = {}
        for key, entries in value.items():
            # Several numeric keys all land in the default namespace.
            paths.setdefault(normalize_namespace(key), []).extend(as_path_list(entries))
        return paths

    @classmethod
    def from_config(cls, config: Any) -> "TemplatesConfig":
        """Extract ``templates`` section from application configuration.

        Accepts :class:`ApplicationConfig` or any mapping. Anything else
        (including missing section) gives empty configuration.

        :param config: application configuration
        :return: normalized templates configuration
        """
        if isinstance(config, ApplicationConfig):
            return config.templates
        if isinstance(config, TemplatesConfig):
            return config
        if not isinstance(config, Mapping):
            return cls()
        templates = config.get("templates")
        if isinstance(templates, TemplatesConfig):
            return templates
        if not isinstance(templates, Mapping):
            return cls()
        return cls.model_validate(dict(templates))


class ApplicationConfig(BaseModel):
    """Application configuration file.

    Only ``templates`` is interpreted, other sections are kept as they are
    for services that need them.
    """

    model_config = ConfigDict(extra="allow")
    templates: TemplatesConfig = TemplatesConfig()
