"""Exclusion rules matching PSR-4 namespace prefixes."""

import re
from typing import List, Optional, Pattern, Sequence, Tuple, Union

from .base_rules import BaseExclusionRules


class NamespaceExclusionRules(BaseExclusionRules):
    """Exclusion rules for keys of the ``psr-4`` autoload section.

    Rules are evaluated in the order they were added and the first match wins.
    A rule containing ``*`` has its trailing ``*`` stripped and matches any
    namespace that starts with what is left; the remainder is taken literally,
    so namespace separators need no escaping. A rule without ``*`` must equal
    the namespace exactly.

    Example:
        >>> rules = NamespaceExclusionRules(["Acme\\\\Legacy\\\\*", "Acme\\\\Debug\\\\"])
        >>> rules.exclude("Acme\\\\Legacy\\\\Sub\\\\")
        True
        >>> rules.exclude("Acme\\\\Modern\\\\Sub\\\\")
        False
        >>> rules.exclude("Acme\\\\Debug\\\\")
        True
    """

    def __init__(self, patterns: Optional[Sequence[str]] = None):
        # Each rule is kept as either a literal namespace or a compiled prefix
        self._rules: List[Tuple[str, Union[str, Pattern[str]]]] = []

        if patterns is not None:
            for pattern in patterns:
                self.add_rule(pattern)

    @property
    def patterns(self) -> List[str]:
        """The rules as they were added, in evaluation order."""
        return [pattern for pattern, _ in self._rules]

    def exclude(self, candidate: str) -> bool:
        for _, matcher in self._rules:
            if isinstance(matcher, str):
                if candidate == matcher:
                    return True
            elif matcher.match(candidate):
                return True
        return False

    def add_rule(self, rule: str) -> None:
        """Add one namespace pattern.

        Args:
            rule: A namespace prefix, optionally ending in ``*``.
        """
        if "*" in rule:
            self._rules.append((rule, re.compile(re.escape(rule.rstrip("*")))))
        else:
            self._rules.append((rule, rule))

    def has_rules(self) -> bool:
        return bool(self._rules)
