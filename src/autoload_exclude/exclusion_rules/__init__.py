"""Exclusion rules for filtering autoload manifest entries."""

from .base_rules import BaseExclusionRules
from .file_rules import FileExclusionRules
from .namespace_rules import NamespaceExclusionRules

__all__ = [
    "BaseExclusionRules",
    "FileExclusionRules",
    "NamespaceExclusionRules",
]
