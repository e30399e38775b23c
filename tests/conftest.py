"""Test configuration and fixtures for autoload_exclude."""

from pathlib import Path

import pytest

from autoload_exclude.host import LocalHost, Package
from autoload_exclude.paths import resolve_install_root


def write_file(path: Path, content: str = "<?php\n") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def vendor_dir(tmp_path):
    """A vendor directory holding a few installed packages on disk."""
    vendor = tmp_path / "project" / "vendor"
    write_file(vendor / "acme" / "lib" / "src" / "helpers.php")
    write_file(vendor / "acme" / "lib" / "some" / "folder" / "bootstrap.php")
    write_file(vendor / "acme" / "lib" / "some" / "other" / "bootstrap.php")
    write_file(vendor / "acme" / "legacy" / "Acme" / "Legacy" / "functions.php")
    write_file(vendor / "acme" / "sandbox" / "src" / "Sandbox.php", "<?php // sandbox\n")
    write_file(vendor / "other" / "tools" / "bin" / "tool.php")
    return vendor


@pytest.fixture
def install_root(vendor_dir):
    return resolve_install_root(vendor_dir)


@pytest.fixture
def make_host(vendor_dir):
    """Build a LocalHost over ``vendor_dir`` with the given root extra and packages."""

    def _make_host(extra=None, packages=None):
        root = Package("acme/project", extra=extra or {})
        return LocalHost(root, vendor_dir, packages or [])

    return _make_host
