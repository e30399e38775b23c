"""Path normalization for exclusion patterns and install paths.

Every path compared by the exclusion rules goes through this module, so that
patterns written with back slashes, stray leading or trailing slashes, or
doubled separators end up in the same canonical form as the paths recorded by
the host: forward slashes only, anchored at the resolved install root.
"""

import os
import re
from typing import List, Optional, Sequence

from autoload_exclude.types import PathType

_REPEATED_SLASHES = re.compile(r"/+")
_DRIVE_ROOT = re.compile(r"^[A-Za-z]:/$")


def normalize_path(path: PathType) -> str:
    """Convert a path to forward slashes with no repeated or trailing separators.

    The filesystem root (``/`` or a drive root such as ``C:/``) keeps its slash.

    Args:
        path: The path to normalize.

    Returns:
        The normalized path string.

    Example:
        >>> normalize_path("C:\\\\project\\\\vendor\\\\")
        'C:/project/vendor'
        >>> normalize_path("/srv//app/vendor/")
        '/srv/app/vendor'
        >>> normalize_path("/")
        '/'
    """
    normalized = _REPEATED_SLASHES.sub("/", os.fspath(path).replace("\\", "/"))
    if len(normalized) > 1 and normalized.endswith("/") and not _DRIVE_ROOT.match(normalized):
        normalized = normalized.rstrip("/")
    return normalized


def resolve_install_root(vendor_dir: PathType) -> str:
    """Resolve the install root to a canonical absolute path.

    ``realpath`` is applied twice. On some platforms a single pass can return a
    stale path for directories reached through junctions or substituted drives.

    Args:
        vendor_dir: The configured dependency install directory.

    Returns:
        The absolute, normalized install root.
    """
    return normalize_path(os.path.realpath(os.path.realpath(vendor_dir)))


def normalize_pattern(pattern: str) -> str:
    """Normalize an exclusion pattern relative to the install root.

    Back slashes become forward slashes, leading and trailing slashes are
    stripped, and runs of slashes collapse to one. Wildcard markers are kept.

    Example:
        >>> normalize_pattern("\\\\acme//lib\\\\bootstrap.php")
        'acme/lib/bootstrap.php'
        >>> normalize_pattern("/acme/lib/src/*")
        'acme/lib/src/*'
    """
    return _REPEATED_SLASHES.sub("/", pattern.replace("\\", "/").strip("/"))


def anchor_pattern(pattern: str, install_root: str) -> str:
    """Join a normalized pattern onto the install root.

    Example:
        >>> anchor_pattern("acme/lib/*", "/srv/app/vendor")
        '/srv/app/vendor/acme/lib/*'
        >>> anchor_pattern("acme/lib", "/")
        '/acme/lib'
    """
    return f"{install_root.rstrip('/')}/{normalize_pattern(pattern)}"


def anchor_patterns(patterns: Sequence[str], install_root: str) -> List[str]:
    """Anchor every pattern of a sequence at the install root, preserving order."""
    return [anchor_pattern(pattern, install_root) for pattern in patterns]


def strip_target_dir(install_path: str, target_dir: Optional[str]) -> str:
    """Remove a legacy target-dir suffix from a package install path.

    Packages using the legacy target-dir layout report an install path that
    already ends with the target dir, while the file paths in their manifest
    are relative to the directory above it.

    Args:
        install_path: The install path reported by the host.
        target_dir: The package's target dir, if any.

    Returns:
        The package root. Unchanged when there is no target dir or the install
        path does not end with it.

    Example:
        >>> strip_target_dir("/srv/app/vendor/acme/legacy/Acme/Legacy", "Acme/Legacy")
        '/srv/app/vendor/acme/legacy'
        >>> strip_target_dir("/srv/app/vendor/acme/lib", None)
        '/srv/app/vendor/acme/lib'
    """
    if not target_dir:
        return install_path
    suffix = "/" + normalize_pattern(target_dir)
    normalized = normalize_path(install_path)
    if normalized.endswith(suffix):
        return normalized[: -len(suffix)]
    return install_path


def join_path(root: str, path: str) -> str:
    """Join a manifest path onto a package root using forward slashes only.

    Example:
        >>> join_path("/srv/app/vendor/acme/lib", "src\\\\functions.php")
        '/srv/app/vendor/acme/lib/src/functions.php'
    """
    return f"{root}/{path}".replace("\\", "/")
