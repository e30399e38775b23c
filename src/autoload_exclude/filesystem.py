"""Directory operations used to relocate package folders.

None of these helpers catch filesystem errors. A failed copy or removal
propagates so that the host can abort the run.
"""

import os
import shutil
from pathlib import Path

from autoload_exclude.types import PathType


def ensure_directory(path: PathType) -> Path:
    """Create a directory, including parents, tolerating one that already exists."""
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def is_dir_empty(path: PathType) -> bool:
    """Check whether a directory has no entries.

    A path that does not exist counts as empty.

    Raises:
        NotADirectoryError: If the path exists but is not a directory.
    """
    directory = Path(path)
    if not directory.exists():
        return True
    return not any(directory.iterdir())


def copy(source: PathType, target: PathType) -> None:
    """Copy a directory tree into ``target``, merging with what is already there.

    Files that exist on both sides are overwritten by the source. Symbolic links
    are copied as links, including a ``source`` that is itself a link.
    """
    if Path(source).is_symlink():
        _copy_link(Path(source), Path(target))
        return
    shutil.copytree(source, target, symlinks=True, dirs_exist_ok=True)


def copy_then_remove(source: PathType, target: PathType) -> None:
    """Move a directory tree by copying it to ``target`` and deleting the source.

    The source is only removed once the copy has completed.
    """
    copy(source, target)
    if Path(source).is_symlink():
        Path(source).unlink()
    else:
        shutil.rmtree(source)


def remove_directory(path: PathType) -> bool:
    """Remove a directory and everything in it.

    Returns:
        True if something was removed, False if the directory did not exist.
    """
    directory = Path(path)
    if not directory.exists() and not directory.is_symlink():
        return False
    if directory.is_symlink():
        directory.unlink()
    else:
        shutil.rmtree(directory)
    return True


def _copy_link(source: Path, target: Path) -> None:
    # The link text is copied verbatim, relative targets included
    if target.is_symlink() or target.is_file():
        target.unlink()
    elif target.exists():
        shutil.rmtree(target)
    target.parent.mkdir(parents=True, exist_ok=True)
    os.symlink(os.readlink(source), target)
