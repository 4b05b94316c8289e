"""
Smoke test: verify that the package is installable and importable.

This test intentionally does NOT modify sys.path.
It should pass only if the project is installed (e.g., `pip install -e .`).
"""

from __future__ import annotations

import importlib
from importlib import metadata

PACKAGE_NAME = "foogle_charts"
DIST_NAME = "foogle-charts"


def test_import_package() -> None:
    module = importlib.import_module(PACKAGE_NAME)
    assert module is not None


def test_distribution_version_available() -> None:
    version = metadata.version(DIST_NAME)
    assert isinstance(version, str)
    assert version.strip() != ""


def test_package_version_attribute_optional() -> None:
    """Namespace package: __version__ is optional, metadata is the source of truth."""
    module = importlib.import_module(PACKAGE_NAME)
    if not hasattr(module, "__version__"):
        return
    assert module.__version__ == metadata.version(DIST_NAME)


def test_public_modules_import() -> None:
    for name in (
        "foogle_charts.core.values",
        "foogle_charts.data.table",
        "foogle_charts.data.frames",
        "foogle_charts.options.common",
        "foogle_charts.viz.chart_kinds",
        "foogle_charts.viz.foogle_chart",
        "foogle_charts.viz.payload",
        "foogle_charts.viz.definition_loader",
    ):
        assert importlib.import_module(name) is not None
