"""View helpers and their registry."""

from viewrender.helpers.manager import HelperPluginManager, PendingFactory
from viewrender.helpers.url import ServerUrlHelper, UrlHelper
from viewrender.helpers.escape import EscapeHtml

__all__ = ["HelperPluginManager", "PendingFactory", "UrlHelper", "ServerUrlHelper", "EscapeHtml"]
