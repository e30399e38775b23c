"""Host plugins that shape the autoload manifest before generation."""

from .autoload_exclude import AutoloadExcludePlugin
from .base_plugin import BasePlugin
from .exclude_folder import ExcludeFolderPlugin

__all__ = [
    "AutoloadExcludePlugin",
    "BasePlugin",
    "ExcludeFolderPlugin",
]
