from enum import Enum
from os import PathLike
from typing import Any, Dict, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# A package's autoload declarations, keyed by section kind
AutoloadManifest = Dict[str, Any]


class AutoloadType(str, Enum):
    """Section kinds of an autoload manifest that the filter knows about.

    Attributes:
        FILES: Ordered list of files required eagerly.
        PSR4: Mapping of namespace prefix to base directory or directories.
        CLASSMAP: Paths scanned for class declarations. Never filtered.
    """

    FILES = "files"
    PSR4 = "psr-4"
    CLASSMAP = "classmap"


class ScriptEvent(str, Enum):
    """Host events a plugin can subscribe to.

    Values:
        PRE_AUTOLOAD_DUMP: Fired before the autoloader is generated.
        POST_AUTOLOAD_DUMP: Fired after the autoloader is generated.
    """

    PRE_AUTOLOAD_DUMP = "pre-autoload-dump"
    POST_AUTOLOAD_DUMP = "post-autoload-dump"
