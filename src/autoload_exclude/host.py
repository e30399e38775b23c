"""Collaborators supplied by the dependency manager that hosts the plugins.

The plugins never resolve or install packages themselves. They read the root
package's configuration, ask the host for the installed packages and where they
live, and mutate the packages' autoload manifests before the host generates its
autoloader. This module defines that contract (:class:`BaseHost`), the package
entity, the event dispatch that fires the plugins' hooks, and an in-memory host
(:class:`LocalHost`) for embedding and tests.
"""

import logging
import os
from abc import ABC, abstractmethod
from collections import defaultdict
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Callable, DefaultDict, Dict, List, Optional, Sequence, Tuple, Union

from autoload_exclude.paths import resolve_install_root
from autoload_exclude.types import AutoloadManifest, PathType, ScriptEvent

if TYPE_CHECKING:
    from autoload_exclude.plugins.base_plugin import BasePlugin

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Package:
    """A package known to the host.

    Packages compare by identity, so the root package is recognised as the same
    object the host handed out, never by an equal-looking copy.

    Attributes:
        name: Package name, for example ``acme/lib``.
        autoload: The autoload manifest, keyed by section kind.
        extra: Free-form metadata. The root package's ``extra`` holds the plugin
            configuration.
        target_dir: Legacy target-dir layout marker, or None.

    Example:
        >>> package = Package.from_mapping({
        ...     "name": "acme/lib",
        ...     "autoload": {"files": ["src/helpers.php"]},
        ... })
        >>> package.name, package.autoload, package.target_dir
        ('acme/lib', {'files': ['src/helpers.php']}, None)
    """

    name: str
    autoload: AutoloadManifest = field(default_factory=dict)
    extra: Dict[str, Any] = field(default_factory=dict)
    target_dir: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping) -> "Package":
        """Build a package from package metadata (``name``, ``autoload``, ``extra``, ``target-dir``).

        Raises:
            ValueError: If the metadata has no string ``name``.
        """
        name = data.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError("Package metadata must contain a non-empty 'name'")

        autoload = data.get("autoload")
        extra = data.get("extra")
        target_dir = data.get("target-dir")
        return cls(
            name=name,
            autoload=dict(autoload) if isinstance(autoload, Mapping) else {},
            extra=dict(extra) if isinstance(extra, Mapping) else {},
            target_dir=target_dir if isinstance(target_dir, str) and target_dir else None,
        )


PackageMap = List[Tuple[Package, str]]


class EventDispatcher:
    """Dispatches host events to the plugin methods subscribed to them.

    Listeners run synchronously in registration order.
    """

    def __init__(self) -> None:
        self._listeners: DefaultDict[ScriptEvent, List[Callable[[], Any]]] = defaultdict(list)

    def add_subscriber(self, subscriber: "BasePlugin") -> None:
        """Register the methods a plugin names in ``get_subscribed_events()``.

        Raises:
            ValueError: If an event name is unknown.
            AttributeError: If the plugin lacks a named method.
        """
        for event, method_name in subscriber.get_subscribed_events().items():
            self._listeners[ScriptEvent(event)].append(getattr(subscriber, method_name))

    def remove_subscriber(self, subscriber: "BasePlugin") -> None:
        for event, method_name in subscriber.get_subscribed_events().items():
            listener = getattr(subscriber, method_name)
            listeners = self._listeners[ScriptEvent(event)]
            if listener in listeners:
                listeners.remove(listener)

    def dispatch(self, event: Union[ScriptEvent, str]) -> int:
        """Run every listener of an event.

        Returns:
            The number of listeners that ran.
        """
        listeners = list(self._listeners[ScriptEvent(event)])
        logger.debug("Dispatching %s to %d listener(s)", ScriptEvent(event).value, len(listeners))
        for listener in listeners:
            listener()
        return len(listeners)


class BaseHost(ABC):
    """Contract between the plugins and the dependency manager hosting them.

    Subclasses answer four questions: which package is the root, where packages
    are installed, which packages are installed, and where each of them lives.
    The concrete :meth:`dump_autoload` brackets the host's own autoloader
    generation with the pre and post events.
    """

    def __init__(self) -> None:
        self.event_dispatcher = EventDispatcher()

    @abstractmethod
    def get_root_package(self) -> Optional[Package]:
        """Return the root package, or None if the host has none."""
        pass

    @abstractmethod
    def get_vendor_dir(self) -> PathType:
        """Return the dependency install directory."""
        pass

    @abstractmethod
    def get_packages(self) -> Sequence[Package]:
        """Return the installed packages, excluding the root."""
        pass

    @abstractmethod
    def build_package_map(self, root_package: Package, packages: Sequence[Package]) -> PackageMap:
        """Pair the root package and every installed package with its install path."""
        pass

    def add_plugin(self, plugin: "BasePlugin") -> None:
        """Activate a plugin and subscribe it to this host's events."""
        plugin.activate(self)
        self.event_dispatcher.add_subscriber(plugin)

    def remove_plugin(self, plugin: "BasePlugin") -> None:
        """Unsubscribe a plugin and deactivate it."""
        self.event_dispatcher.remove_subscriber(plugin)
        plugin.deactivate(self)

    def dump_autoload(self, generate: Callable[[PackageMap], Any]) -> Any:
        """Run autoloader generation between the pre and post autoload events.

        The post event fires even when a pre-event listener or ``generate``
        raises, so that directories already relocated are put back. That first
        exception is then re-raised. A post-event failure during this cleanup is
        logged and does not replace it.

        Args:
            generate: The host's generator. Receives the package map built after
                the pre event ran.

        Returns:
            Whatever ``generate`` returns.
        """
        try:
            self.event_dispatcher.dispatch(ScriptEvent.PRE_AUTOLOAD_DUMP)
            root_package = self.get_root_package()
            package_map: PackageMap = []
            if root_package is not None:
                package_map = self.build_package_map(root_package, self.get_packages())
            result = generate(package_map)
        except BaseException:
            try:
                self.event_dispatcher.dispatch(ScriptEvent.POST_AUTOLOAD_DUMP)
            except Exception:
                logger.exception("Post autoload dump listeners failed after an earlier error")
            raise
        self.event_dispatcher.dispatch(ScriptEvent.POST_AUTOLOAD_DUMP)
        return result


class LocalHost(BaseHost):
    """In-memory host over a fixed set of packages.

    Packages are installed at ``<vendor_dir>/<name>``, with ``/<target_dir>``
    appended for legacy target-dir packages. The root package lives in the
    vendor dir's parent. Install paths are built from the resolved vendor dir,
    like the paths a package manager reports.

    Attributes:
        root_package (Optional[Package]): The project's own package.
        vendor_dir (Path): The install root.
        packages (List[Package]): Installed packages, excluding the root.

    Example:
        >>> root = Package("acme/project")
        >>> lib = Package("acme/lib", target_dir="Acme/Lib")
        >>> host = LocalHost(root, "/srv/app/vendor", [lib])
        >>> [(package.name, path) for package, path in host.build_package_map(root, host.get_packages())]
        [('acme/project', '/srv/app'), ('acme/lib', '/srv/app/vendor/acme/lib/Acme/Lib')]
    """

    def __init__(
        self,
        root_package: Optional[Package],
        vendor_dir: PathType,
        packages: Optional[Sequence[Package]] = None,
    ) -> None:
        super().__init__()
        self.root_package = root_package
        self.vendor_dir = Path(vendor_dir)
        self.packages: List[Package] = list(packages) if packages is not None else []

    def get_root_package(self) -> Optional[Package]:
        return self.root_package

    def get_vendor_dir(self) -> PathType:
        return self.vendor_dir

    def get_packages(self) -> Sequence[Package]:
        return list(self.packages)

    def get_install_path(self, package: Package) -> str:
        install_path = f"{resolve_install_root(self.vendor_dir)}/{package.name}"
        if package.target_dir:
            install_path = f"{install_path}/{package.target_dir}"
        return install_path

    def build_package_map(self, root_package: Package, packages: Sequence[Package]) -> PackageMap:
        package_map: PackageMap = [(root_package, os.path.dirname(resolve_install_root(self.vendor_dir)))]
        for package in packages:
            package_map.append((package, self.get_install_path(package)))
        return package_map
