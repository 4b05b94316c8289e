"""Load a FoogleChart from a YAML chart definition."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError as PydanticValidationError

from foogle_charts.core.constants import Engine
from foogle_charts.core.errors import ConfigError
from foogle_charts.core.values import to_value
from foogle_charts.data.table import (
    DeferredRows,
    Table,
    from_key_2_values,
    from_key_seq,
    from_key_value,
)
from foogle_charts.options.common import Options
from foogle_charts.viz.chart_kinds import chart_kind_adapter
from foogle_charts.viz.foogle_chart import FoogleChart

logger = logging.getLogger(__name__)

DATA_SHAPES = ("key_value", "key_2_values", "key_seq", "table")


def _load_yaml(path: str | Path) -> Dict:
    p = Path(path)
    if not p.is_file():
        raise ConfigError(f"Chart definition not found (or not a file): {path}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in chart definition: {path}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Chart definition must be a mapping: {path}")
    return data


def _pairs(values: Any, width: int, shape: str) -> list[tuple]:
    if not isinstance(values, list):
        raise ConfigError(f"data.values must be a list for shape '{shape}'.")
    out = []
    for i, item in enumerate(values):
        if not isinstance(item, (list, tuple)) or len(item) != width:
            raise ConfigError(
                f"data.values[{i}] must be a list of {width} items for shape '{shape}', got {item!r}"
            )
        out.append(tuple(item))
    return out


def _labels(data: Dict, shape: str, required: bool = False) -> list[str] | None:
    labels = data.get("labels")
    if labels is None and not required:
        return None
    if not isinstance(labels, list) or not all(isinstance(x, str) for x in labels):
        raise ConfigError(f"data.labels must be a list of strings for shape '{shape}', got {labels!r}")
    return labels


def build_table(data: Dict) -> Table:
    """
    Dispatch a `data` block to the matching table builder.

    Shapes:
      - key_value:    label, values: [[key, v], ...]
      - key_2_values: labels, values: [[key, v1, v2], ...]
      - key_seq:      labels, values: [[key, [v, ...]], ...]
      - table:        labels, rows: [[...], ...] (used as-is)
    """
    shape = data.get("shape", "key_value")
    if shape not in DATA_SHAPES:
        raise ConfigError(f"Unknown data shape '{shape}'. Expected one of: {list(DATA_SHAPES)}")

    if shape == "key_value":
        label = data.get("label")
        if label is not None and not isinstance(label, str):
            raise ConfigError(f"data.label must be a string, got {label!r}")
        return from_key_value(label, _pairs(data.get("values", []), 2, shape))
    if shape == "key_2_values":
        return from_key_2_values(_labels(data, shape), _pairs(data.get("values", []), 3, shape))
    if shape == "key_seq":
        pairs = _pairs(data.get("values", []), 2, shape)
        for i, (_, seq) in enumerate(pairs):
            if not isinstance(seq, list):
                raise ConfigError(
                    f"data.values[{i}] for shape 'key_seq' must be [key, [v, ...]], got {seq!r} as values"
                )
        return from_key_seq(_labels(data, shape, required=True), pairs)

    labels = data.get("labels")
    rows = data.get("rows", [])
    if not isinstance(labels, list) or not isinstance(rows, list):
        raise ConfigError("Shape 'table' requires 'labels' and 'rows' lists.")
    if not all(isinstance(r, list) for r in rows):
        raise ConfigError("Shape 'table' rows must be lists.")
    # Used as-is: row width is not compared with labels
    return Table(
        labels=tuple(str(x) for x in labels),
        rows=DeferredRows(rows, lambda r: [to_value(v) for v in r]),
    )


def load_chart_definition(
    path: str | Path,
    default_engine: Engine | None = None,
) -> FoogleChart:
    """
    Read a YAML chart definition.

    `default_engine` fills `options.engine` only when the file leaves it out.
    """
    cfg = _load_yaml(path)

    if "chart" not in cfg:
        raise ConfigError(f"Chart definition has no 'chart' section: {path}")
    data = cfg.get("data") or {}
    if not isinstance(data, dict):
        raise ConfigError("'data' must be a mapping.")

    try:
        kind = chart_kind_adapter.validate_python(cfg["chart"])
        options = Options.model_validate(cfg.get("options") or {})
    except PydanticValidationError as e:
        raise ConfigError(f"Invalid chart definition {path}: {e}") from e

    if options.engine is None and default_engine is not None:
        options = options.model_copy(update={"engine": default_engine})

    table = build_table(data)
    logger.debug("Loaded %s chart from %s (labels=%s)", kind.kind, path, table.labels)
    return FoogleChart(chart=kind, data=table, options=options)
