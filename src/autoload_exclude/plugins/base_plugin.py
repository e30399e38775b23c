from abc import ABC, abstractmethod
from typing import Dict, Optional

from autoload_exclude.exceptions import PluginNotActivatedError
from autoload_exclude.host import BaseHost
from autoload_exclude.types import ScriptEvent


class BasePlugin(ABC):
    """
    Abstract base class defining the interface for host plugins.

    A plugin is activated with the host it runs in, then receives the events it
    names in ``get_subscribed_events()``. The host is the only state a plugin
    keeps between hooks; everything else is computed per hook call.

    Example:
        >>> from autoload_exclude.host import LocalHost, Package
        >>> class CountingPlugin(BasePlugin):
        ...     calls = 0
        ...     @classmethod
        ...     def get_subscribed_events(cls):
        ...         return {ScriptEvent.PRE_AUTOLOAD_DUMP: "count"}
        ...     def count(self):
        ...         self.require_host()
        ...         CountingPlugin.calls += 1
        >>> host = LocalHost(Package("acme/project"), "vendor")
        >>> host.add_plugin(CountingPlugin())
        >>> host.event_dispatcher.dispatch(ScriptEvent.PRE_AUTOLOAD_DUMP)
        1
        >>> CountingPlugin.calls
        1
    """

    def __init__(self) -> None:
        self._host: Optional[BaseHost] = None

    def activate(self, host: BaseHost) -> None:
        """
        Apply the plugin to a host.

        Args:
            host (BaseHost): The host the plugin's hooks will read from.
        """
        self._host = host

    def deactivate(self, host: BaseHost) -> None:
        """
        Detach the plugin from its host. Hooks called afterwards raise.

        Args:
            host (BaseHost): The host the plugin is removed from.
        """
        self._host = None

    def uninstall(self, host: BaseHost) -> None:
        """
        Prepare the plugin to be uninstalled. Nothing is persisted, so there is
        nothing to clean up.

        Args:
            host (BaseHost): The host the plugin is uninstalled from.
        """
        pass

    @classmethod
    @abstractmethod
    def get_subscribed_events(cls) -> Dict[ScriptEvent, str]:
        """
        Name the events this plugin listens to.

        Returns:
            Dict[ScriptEvent, str]: Mapping of event to the name of the method to call.
        """
        pass

    def require_host(self) -> BaseHost:
        """
        Return the host the plugin was activated with.

        Raises:
            PluginNotActivatedError: If the plugin is not active.
        """
        if self._host is None:
            raise PluginNotActivatedError(self.__class__.__name__)
        return self._host
