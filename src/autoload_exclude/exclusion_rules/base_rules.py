from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for autoload exclusion rules.

    This class serves as a contract for the rule types that decide whether an
    autoload manifest entry should be dropped: file rules match resolved file
    paths, namespace rules match namespace prefixes. Every implementation answers
    ``exclude()`` for a single candidate and reports whether it holds any rules
    at all, so callers can skip work entirely when nothing is configured.

    Example:
        >>> from autoload_exclude.exclusion_rules.file_rules import FileExclusionRules
        >>> rules = FileExclusionRules(["/vendor/acme/lib/helpers.php"])
        >>> rules.exclude("/vendor/acme/lib/helpers.php")
        True
        >>> rules.add_rule("/vendor/acme/lib/legacy/*")
        >>> rules.exclude("/vendor/acme/lib/legacy/bootstrap.php")
        True
        >>> rules.exclude("/vendor/acme/lib/src/Client.php")
        False
    """

    @abstractmethod
    def exclude(self, candidate: str) -> bool:
        """
        Determine if a candidate should be excluded based on the loaded rules.

        Args:
            candidate (str): The value to check. Its meaning depends on the rule
                type: an absolute, slash-normalized file path or a namespace prefix.

        Returns:
            bool: True if the candidate should be excluded, False if it should be kept.
        """
        pass

    @abstractmethod
    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add, in the same form the
                constructor accepts.
        """
        pass

    @abstractmethod
    def has_rules(self) -> bool:
        """
        Check whether any rules are configured.

        Returns:
            bool: True if at least one rule is configured, False otherwise.
        """
        pass
