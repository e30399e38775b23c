"""Plugin configuration read from the root package's ``extra`` metadata.

The root package configures both plugins through its ``extra`` mapping::

    {
        "autoload-exclude": {
            "exclude-from-files": ["acme/lib/src/helpers.php", "acme/debug/*"],
            "exclude-from-psr4": ["Acme\\\\Legacy\\\\*"],
            "exclude-from-classmap": []
        },
        "paths-to-exclude-from-autoload": ["acme/sandbox"]
    }

Anything missing or of the wrong type reads as an empty list.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Tuple

PLUGIN_SETTINGS_PROPERTY = "autoload-exclude"
EXCLUDE_FILES_PROPERTY = "exclude-from-files"
EXCLUDE_PSR4_PROPERTY = "exclude-from-psr4"
EXCLUDE_CLASSMAP_PROPERTY = "exclude-from-classmap"
EXCLUDE_PATHS_PROPERTY = "paths-to-exclude-from-autoload"


def _string_list(value: Any) -> Tuple[str, ...]:
    """Return the string items of a list or tuple, or an empty tuple for anything else."""
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(item for item in value if isinstance(item, str))


def _plugin_settings(extra: Optional[Mapping]) -> Mapping:
    if not isinstance(extra, Mapping):
        return {}
    settings = extra.get(PLUGIN_SETTINGS_PROPERTY)
    if isinstance(settings, Mapping):
        return settings
    return {}


@dataclass(frozen=True)
class ExclusionConfig:
    """Exclusion lists configured by the root package.

    Attributes:
        files: File patterns relative to the install root. A trailing ``*``
            makes a prefix wildcard.
        psr4: Namespace patterns. A trailing ``*`` makes a prefix wildcard.
        classmap: Classmap patterns. Parsed but not applied.

    Example:
        >>> config = ExclusionConfig.from_extra({
        ...     "autoload-exclude": {"exclude-from-files": ["acme/lib/helpers.php"]}
        ... })
        >>> config.files
        ('acme/lib/helpers.php',)
        >>> config.psr4
        ()
        >>> ExclusionConfig.from_extra(None).is_empty()
        True
    """

    files: Tuple[str, ...] = ()
    psr4: Tuple[str, ...] = ()
    classmap: Tuple[str, ...] = ()

    @classmethod
    def from_extra(cls, extra: Optional[Mapping]) -> "ExclusionConfig":
        """Parse the three exclusion lists from a root package's ``extra`` mapping."""
        settings = _plugin_settings(extra)
        return cls(
            files=_string_list(settings.get(EXCLUDE_FILES_PROPERTY)),
            psr4=_string_list(settings.get(EXCLUDE_PSR4_PROPERTY)),
            classmap=_string_list(settings.get(EXCLUDE_CLASSMAP_PROPERTY)),
        )

    def is_empty(self) -> bool:
        """True when none of the three lists holds a pattern."""
        return not (self.files or self.psr4 or self.classmap)


def get_paths_to_exclude(extra: Optional[Mapping]) -> Tuple[str, ...]:
    """Read the directories the folder plugin should relocate during generation.

    Example:
        >>> get_paths_to_exclude({"paths-to-exclude-from-autoload": ["acme/sandbox", 42]})
        ('acme/sandbox',)
        >>> get_paths_to_exclude({"paths-to-exclude-from-autoload": "acme/sandbox"})
        ()
    """
    if not isinstance(extra, Mapping):
        return ()
    return _string_list(extra.get(EXCLUDE_PATHS_PROPERTY))
