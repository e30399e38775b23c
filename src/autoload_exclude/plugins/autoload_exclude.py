"""Plugin removing excluded entries from installed packages' autoload manifests."""

import logging
from typing import Dict

from humanfriendly import Timer
from humanfriendly.text import pluralize

from autoload_exclude.config import ExclusionConfig
from autoload_exclude.exclusion_rules.base_rules import BaseExclusionRules
from autoload_exclude.exclusion_rules.file_rules import FileExclusionRules
from autoload_exclude.exclusion_rules.namespace_rules import NamespaceExclusionRules
from autoload_exclude.host import Package, PackageMap
from autoload_exclude.manifest_filter import filter_autoload
from autoload_exclude.paths import anchor_patterns, resolve_install_root
from autoload_exclude.types import ScriptEvent

from .base_plugin import BasePlugin

logger = logging.getLogger(__name__)


class AutoloadExcludePlugin(BasePlugin):
    """Drops configured ``files`` and ``psr-4`` entries before the autoloader is generated.

    The root package configures the exclusions under ``extra.autoload-exclude``
    (see :mod:`autoload_exclude.config`). On the pre-autoload event every
    installed package except the root is filtered and its manifest replaced
    with the result, so the host's generator only sees what survived.

    Example:
        >>> from autoload_exclude.host import LocalHost
        >>> root = Package("acme/project", extra={
        ...     "autoload-exclude": {"exclude-from-psr4": ["Acme\\\\Legacy\\\\*"]},
        ... })
        >>> lib = Package("acme/lib", autoload={"psr-4": {
        ...     "Acme\\\\Legacy\\\\Sub\\\\": "legacy/",
        ...     "Acme\\\\Modern\\\\Sub\\\\": "src/",
        ... }})
        >>> host = LocalHost(root, "/srv/app/vendor", [lib])
        >>> host.add_plugin(AutoloadExcludePlugin())
        >>> host.event_dispatcher.dispatch(ScriptEvent.PRE_AUTOLOAD_DUMP)
        1
        >>> list(lib.autoload["psr-4"])
        ['Acme\\\\Modern\\\\Sub\\\\']
    """

    @classmethod
    def get_subscribed_events(cls) -> Dict[ScriptEvent, str]:
        return {ScriptEvent.PRE_AUTOLOAD_DUMP: "parse_autoloads"}

    def parse_autoloads(self) -> None:
        """Filter every installed package's autoload manifest.

        Does nothing when the host has no root package or when the root package
        configures no exclusions. In the latter case the package map is never
        built.
        """
        host = self.require_host()

        root_package = host.get_root_package()
        if root_package is None:
            return

        config = ExclusionConfig.from_extra(root_package.extra)
        if config.is_empty():
            logger.info("No configuration, aborting autoload exclude procedure.")
            return

        file_rules = FileExclusionRules()
        if config.files:
            install_root = resolve_install_root(host.get_vendor_dir())
            file_rules = FileExclusionRules(anchor_patterns(config.files, install_root))
        namespace_rules = NamespaceExclusionRules(config.psr4)

        logger.info("Parsing packages for autoload exclusion...")

        with Timer(resumable=True) as timer:
            package_map = host.build_package_map(root_package, host.get_packages())
            changed = self.filter_autoloads(package_map, root_package, file_rules, namespace_rules)

        logger.info(
            "Done parsing packages for autoload exclusion (%s changed in %s).",
            pluralize(changed, "package"),
            timer,
        )

    def filter_autoloads(
        self,
        package_map: PackageMap,
        root_package: Package,
        file_rules: BaseExclusionRules,
        namespace_rules: BaseExclusionRules,
    ) -> int:
        """Replace each non-root package's manifest with its filtered version.

        Args:
            package_map: ``(package, install_path)`` pairs from the host.
            root_package: The root package. Skipped.
            file_rules: Anchored file exclusion rules.
            namespace_rules: Namespace exclusion rules.

        Returns:
            int: How many packages ended up with a different manifest.
        """
        changed = 0
        for package, install_path in package_map:
            if package is root_package:
                continue

            logger.debug("Examining package %s", package.name)

            autoload = filter_autoload(package, install_path, file_rules, namespace_rules)
            if autoload != package.autoload:
                changed += 1
            package.autoload = autoload

        return changed
