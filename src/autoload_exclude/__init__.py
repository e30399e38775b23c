"""Autoload manifest exclusion for dependency managers.

This package provides plugins that filter installed packages' autoload
declarations, or temporarily relocate whole package directories, before a
dependency manager generates its autoloader.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for programmatic use
try:
    __version__ = version("autoload-exclude")
except PackageNotFoundError:
    __version__ = "unknown"
