"""Tests for custom exceptions."""

from autoload_exclude.exceptions import PluginNotActivatedError


class TestPluginNotActivatedError:
    """Test PluginNotActivatedError exception."""

    def test_message(self):
        error = PluginNotActivatedError("ExcludeFolderPlugin")
        assert error.plugin_name == "ExcludeFolderPlugin"
        assert str(error) == "ExcludeFolderPlugin has not been activated with a host."

    def test_is_runtime_error(self):
        assert isinstance(PluginNotActivatedError("AutoloadExcludePlugin"), RuntimeError)
