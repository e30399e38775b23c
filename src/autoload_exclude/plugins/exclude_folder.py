"""Plugin moving excluded package directories out of the install root during generation."""

import logging
import os
import posixpath
from pathlib import Path
from typing import Dict, List, Sequence

from humanfriendly import Timer
from humanfriendly.text import pluralize

from autoload_exclude import filesystem
from autoload_exclude.config import get_paths_to_exclude
from autoload_exclude.paths import normalize_pattern, resolve_install_root
from autoload_exclude.types import ScriptEvent

from .base_plugin import BasePlugin

logger = logging.getLogger(__name__)

TMP_IGNORED_PACKAGES_FOLDER_NAME = "tmp-ignored-packages"


def get_staging_path(install_root: str) -> str:
    """Return the staging directory used for one generation cycle."""
    return f"{install_root}/{TMP_IGNORED_PACKAGES_FOLDER_NAME}"


def resolve_folders_to_exclude(paths: Sequence[str], install_root: str) -> List[str]:
    """Resolve configured paths to existing directories under the install root.

    Wildcard markers are stripped from both ends, so ``acme/*`` names the
    ``acme`` directory itself. ``.`` and ``..`` segments are collapsed before
    any comparison. Entries that resolve to the install root itself or
    outside it are dropped, as are entries inside the staging directory,
    entries inside a directory listed earlier, and entries that are not
    existing directories.

    Args:
        paths: Paths relative to the install root, as configured.
        install_root: The resolved install root.

    Returns:
        Absolute directory paths without trailing slashes, in configured order
        and without duplicates.
    """
    root_prefix = install_root.rstrip("/") + "/"
    staging_path = get_staging_path(install_root.rstrip("/"))
    folders: List[str] = []

    for path in paths:
        relative_path = normalize_pattern(normalize_pattern(path).strip("*"))
        if not relative_path:
            continue
        folder = posixpath.normpath(root_prefix + relative_path)
        # Only directories strictly below the install root, outside staging
        if not folder.startswith(root_prefix):
            continue
        if folder == staging_path or folder.startswith(staging_path + "/") or folder in folders:
            continue
        # Already moved along with a parent listed earlier
        if any(folder.startswith(parent + "/") for parent in folders):
            continue
        if os.path.isdir(folder):
            folders.append(folder)

    return folders


class ExcludeFolderPlugin(BasePlugin):
    """Keeps whole package directories out of autoload generation.

    Directories listed in ``extra.paths-to-exclude-from-autoload`` are moved
    into a staging directory under the install root before the autoloader is
    generated, and copied back afterward. The staging directory is removed at
    the end of every cycle, whether or not anything was staged.

    Directories are staged under their path relative to the install root, so a
    top-level directory ``sandbox`` is staged as ``tmp-ignored-packages/sandbox``
    and a nested ``acme/sandbox`` as ``tmp-ignored-packages/acme/sandbox``.
    Copying the staging directory's top-level entries back then restores each
    directory where it came from.
    """

    @classmethod
    def get_subscribed_events(cls) -> Dict[ScriptEvent, str]:
        return {
            ScriptEvent.PRE_AUTOLOAD_DUMP: "ignore_packages",
            ScriptEvent.POST_AUTOLOAD_DUMP: "add_packages",
        }

    def get_install_root(self) -> str:
        return resolve_install_root(self.require_host().get_vendor_dir())

    def ignore_packages(self) -> None:
        """Move every configured directory into the staging directory.

        Does nothing when there is no root package, no configured path, or no
        configured path that is an existing directory.
        """
        host = self.require_host()

        root_package = host.get_root_package()
        if root_package is None:
            return

        paths_to_exclude = get_paths_to_exclude(root_package.extra)
        if not paths_to_exclude:
            return

        install_root = self.get_install_root()
        folders_to_exclude = resolve_folders_to_exclude(paths_to_exclude, install_root)
        if not folders_to_exclude:
            return

        staging_path = filesystem.ensure_directory(get_staging_path(install_root))

        with Timer(resumable=True) as timer:
            for folder in folders_to_exclude:
                relative_path = folder[len(install_root) + 1 :]
                logger.info('Excluding folder "%s"', folder)
                filesystem.copy_then_remove(folder, staging_path / relative_path)

        logger.info("Moved %s out of the install root in %s.", pluralize(len(folders_to_exclude), "folder"), timer)

    def add_packages(self) -> None:
        """Copy staged directories back into the install root and remove the staging directory."""
        install_root = self.get_install_root()
        staging_path = Path(get_staging_path(install_root))

        if not filesystem.is_dir_empty(staging_path):
            restored = 0
            for entry in sorted(staging_path.iterdir()):
                if not (entry.is_dir() or entry.is_symlink()):
                    continue
                logger.debug('Restoring folder "%s"', entry.name)
                filesystem.copy(entry, f"{install_root}/{entry.name}")
                restored += 1
            logger.info("Restored %s into the install root.", pluralize(restored, "folder"))

        filesystem.remove_directory(staging_path)
