class PluginNotActivatedError(RuntimeError):
    """
    Exception raised when a plugin hook runs before the plugin was activated.

    Hooks need the host handed to ``activate()`` to find the root package and the
    install root. Calling one on a fresh or deactivated plugin is a programming
    error in the host integration.

    Attributes:
        plugin_name (str): Class name of the plugin whose hook was called.

    Example:
        >>> error = PluginNotActivatedError("AutoloadExcludePlugin")
        >>> str(error)
        'AutoloadExcludePlugin has not been activated with a host.'
    """

    def __init__(self, plugin_name: str) -> None:
        """
        Initialize the exception with the offending plugin's name.

        Args:
            plugin_name (str): Class name of the plugin.
        """
        self.plugin_name = plugin_name
        super().__init__(f"{plugin_name} has not been activated with a host.")
