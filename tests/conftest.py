from pathlib import Path

import pytest


@pytest.fixture
def write_definition(tmp_path: Path):
    """Write YAML text to a chart definition file and return its path."""

    def _write(text: str, name: str = "chart.yaml") -> Path:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p

    return _write


@pytest.fixture
def sales_pairs() -> list[tuple[str, float]]:
    return [("North", 1.5), ("South", 2.0), ("East", 0.25)]
