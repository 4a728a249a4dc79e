"""Shared fixtures for scaffold engine tests."""

import os
import sys

import pytest

# Ensure tests/scaffold-engine/ is on sys.path so test files can import
# fake_reporter unambiguously (avoids conftest module name collisions).
sys.path.insert(0, os.path.dirname(__file__))

from tree_helpers import write_file  # noqa: E402


def pytest_collection_modifyitems(items):
    for item in items:
        if "scaffold-engine" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def template_dir(tmp_path):
    """Template tree matching the demo scenario, plus a few nested exclusions."""
    root = tmp_path / "template"
    root.mkdir()
    write_file(root, "src/app.ts", "0123456789")
    write_file(root, "node_modules/x/y.js", "module")
    write_file(root, "gitignore", "dist\n")
    write_file(root, ".env.example", "PORT=3000\n")
    write_file(root, "src/lib/dist/bundle.js", "bundled")
    write_file(root, "src/.DS_Store", "meta")
    write_file(root, "yarn.lock", "lock")
    return str(root)


@pytest.fixture
def workdir(tmp_path):
    """Working directory the scaffold resolves project names against."""
    root = tmp_path / "work"
    root.mkdir()
    return str(root)
