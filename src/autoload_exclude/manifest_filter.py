"""Filtering of a single package's autoload manifest.

The filter works on a copy of the manifest and never touches the package it
reads from. Writing the result back is left to the caller, which owns the
package for the duration of the run.
"""

import logging
import os
from collections.abc import Mapping
from typing import Any, Dict, List, Sequence

from autoload_exclude.exclusion_rules.base_rules import BaseExclusionRules
from autoload_exclude.host import Package
from autoload_exclude.paths import join_path, strip_target_dir
from autoload_exclude.types import AutoloadManifest, AutoloadType

logger = logging.getLogger(__name__)


def filter_autoload(
    package: Package,
    install_path: str,
    file_rules: BaseExclusionRules,
    namespace_rules: BaseExclusionRules,
) -> AutoloadManifest:
    """Return the package's autoload manifest without the excluded entries.

    ``files`` entries are resolved against the package root and checked with
    ``file_rules``; ``psr-4`` keys are checked with ``namespace_rules``.
    ``classmap`` and unknown sections pass through unchanged. Sections left
    empty are dropped, so the result may be an empty dict.

    Args:
        package: The package whose manifest is filtered. Not modified.
        install_path: Where the host installed the package. For legacy
            target-dir packages this includes the target dir.
        file_rules: Rules for resolved ``files`` paths.
        namespace_rules: Rules for ``psr-4`` namespace prefixes.

    Returns:
        A new manifest holding only non-empty sections.

    Example:
        >>> from autoload_exclude.exclusion_rules import FileExclusionRules, NamespaceExclusionRules
        >>> package = Package("acme/lib", autoload={
        ...     "files": ["src/helpers.php", "src/debug.php"],
        ...     "psr-4": {"Acme\\\\Lib\\\\": "src/"},
        ... })
        >>> filter_autoload(
        ...     package,
        ...     "/srv/vendor/acme/lib",
        ...     FileExclusionRules(["/srv/vendor/acme/lib/src/debug.php"]),
        ...     NamespaceExclusionRules(["Acme\\\\*"]),
        ... )
        {'files': ['src/helpers.php']}
    """
    autoload: AutoloadManifest = dict(package.autoload)

    for section in list(autoload):
        if section == AutoloadType.FILES.value:
            logger.debug("Checking package autoload - files")
            autoload[section] = _filter_files(autoload[section], package, install_path, file_rules)
        elif section == AutoloadType.PSR4.value:
            logger.debug("Checking package autoload - PSR-4")
            autoload[section] = _filter_namespaces(autoload[section], namespace_rules)
        elif section == AutoloadType.CLASSMAP.value:
            # Classmap exclusion is parsed from the configuration but not applied
            logger.debug("Skipping package autoload - classmap")

    return remove_empty_sections(autoload)


def remove_empty_sections(autoload: AutoloadManifest) -> AutoloadManifest:
    """Drop every section whose value is empty.

    Example:
        >>> remove_empty_sections({"files": [], "psr-4": {"Acme\\\\": "src/"}, "classmap": []})
        {'psr-4': {'Acme\\\\': 'src/'}}
    """
    return {section: value for section, value in autoload.items() if value}


def _filter_files(
    files: Any,
    package: Package,
    install_path: str,
    file_rules: BaseExclusionRules,
) -> Any:
    if not file_rules.has_rules() or not isinstance(files, Sequence) or isinstance(files, str):
        return files

    target_dir = package.target_dir
    package_root = strip_target_dir(install_path, target_dir)

    kept: List[str] = []
    for path in files:
        relative_path = path
        # Manifests recorded before the target-dir convention omit it from file paths
        if target_dir and not os.access(join_path(package_root, path), os.R_OK):
            relative_path = f"{target_dir}/{path}"

        resolved_path = join_path(package_root, relative_path)
        if file_rules.exclude(resolved_path):
            logger.info('Excluding file "%s"', resolved_path)
            continue
        kept.append(path)

    return kept


def _filter_namespaces(namespaces: Any, namespace_rules: BaseExclusionRules) -> Any:
    if not namespace_rules.has_rules() or not isinstance(namespaces, Mapping):
        return namespaces

    kept: Dict[str, Any] = {}
    for namespace, directories in namespaces.items():
        if namespace_rules.exclude(namespace):
            logger.info('Excluding namespace "%s"', namespace)
            continue
        kept[namespace] = directories

    return kept
