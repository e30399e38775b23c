"""Exclusion rules matching resolved autoload file paths."""

from typing import List, Optional, Sequence, Set

from .base_rules import BaseExclusionRules

WILDCARD = "*"


class FileExclusionRules(BaseExclusionRules):
    """Exclusion rules for entries of the ``files`` autoload section.

    Rules are absolute, slash-normalized paths (see
    :func:`autoload_exclude.paths.anchor_patterns`). A rule ending in ``*`` is a
    prefix wildcard: the marker is stripped and any path starting with the
    remaining text is excluded, whatever follows. Any other rule must equal the
    path exactly. Comparison is case-sensitive on every platform.

    Rules are partitioned into the exact set and the prefix list when they are
    added, so ``exclude()`` does no parsing.

    Attributes:
        exact_paths (Set[str]): Rules matched by exact equality.
        prefixes (List[str]): Wildcard rules with the trailing ``*`` removed.

    Example:
        >>> rules = FileExclusionRules([
        ...     "/srv/vendor/acme/lib/helpers.php",
        ...     "/srv/vendor/acme/lib/some/folder/*",
        ... ])
        >>> rules.exclude("/srv/vendor/acme/lib/helpers.php")
        True
        >>> rules.exclude("/srv/vendor/acme/lib/some/folder/bootstrap.php")
        True
        >>> rules.exclude("/srv/vendor/acme/lib/some/other/bootstrap.php")
        False
    """

    def __init__(self, patterns: Optional[Sequence[str]] = None):
        self.exact_paths: Set[str] = set()
        self.prefixes: List[str] = []

        if patterns is not None:
            for pattern in patterns:
                self.add_rule(pattern)

    def exclude(self, candidate: str) -> bool:
        """Check a resolved file path against the exact rules, then the prefixes.

        Args:
            candidate: Absolute file path using forward slashes.

        Returns:
            bool: True if the path equals an exact rule or starts with a prefix rule.
        """
        if candidate in self.exact_paths:
            return True
        return any(candidate.startswith(prefix) for prefix in self.prefixes)

    def add_rule(self, rule: str) -> None:
        """Add one anchored file pattern.

        Args:
            rule: Absolute path, optionally ending in ``*``.
        """
        if rule.endswith(WILDCARD):
            self.prefixes.append(rule.rstrip(WILDCARD))
        else:
            self.exact_paths.add(rule)

    def has_rules(self) -> bool:
        return bool(self.exact_paths or self.prefixes)
