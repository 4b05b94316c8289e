"""
JSON-compatible payload for a FoogleChart.

Layout:

    {
      "chart":   {"kind": "bar", "options": {"is_stacked": true}},
      "data":    {"labels": ["", "Value"],
                  "rows": [[{"type": "text", "value": "A"},
                            {"type": "number", "value": 1.0}]]},
      "options": {"title": "Sales"}
    }

Absent option fields are omitted. Rows are enumerated once while encoding.
"""

from __future__ import annotations

import json
import logging
from datetime import date, datetime
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from foogle_charts.core.errors import PayloadError
from foogle_charts.core.values import Boolean, DateValue, Number, Text, Value
from foogle_charts.data.table import Table
from foogle_charts.options.common import Options
from foogle_charts.viz.chart_kinds import chart_kind_adapter
from foogle_charts.viz.foogle_chart import FoogleChart

logger = logging.getLogger(__name__)


def encode_value(v: Value) -> dict[str, Any]:
    if isinstance(v, Boolean):
        return {"type": "boolean", "value": v.value}
    if isinstance(v, Number):
        return {"type": "number", "value": v.value}
    if isinstance(v, Text):
        return {"type": "text", "value": v.value}
    if isinstance(v, DateValue):
        kind = "datetime" if isinstance(v.value, datetime) else "date"
        return {"type": kind, "value": v.value.isoformat()}
    raise PayloadError(f"Not a Value: {v!r}")


def decode_value(obj: Any) -> Value:
    if not isinstance(obj, dict) or "type" not in obj or "value" not in obj:
        raise PayloadError(f"Malformed value entry: {obj!r}")

    t, raw = obj["type"], obj["value"]
    try:
        if t == "number" and isinstance(raw, (int, float)) and not isinstance(raw, bool):
            return Number(raw)
        if t == "text" and isinstance(raw, str):
            return Text(raw)
        if t == "boolean" and isinstance(raw, bool):
            return Boolean(raw)
        if t == "date":
            return DateValue(date.fromisoformat(raw))
        if t == "datetime":
            return DateValue(datetime.fromisoformat(raw))
    except (TypeError, ValueError) as e:
        raise PayloadError(f"Invalid {t} value: {raw!r}") from e

    raise PayloadError(f"Unsupported value entry: {obj!r}")


def chart_to_payload(chart: FoogleChart) -> dict[str, Any]:
    rows = [[encode_value(v) for v in row] for row in chart.data.rows]
    logger.debug("Encoded %s chart with %d rows", chart.chart.kind, len(rows))
    return {
        "chart": chart.chart.model_dump(mode="json", exclude_none=True),
        "data": {"labels": list(chart.data.labels), "rows": rows},
        "options": chart.options.model_dump(mode="json", exclude_none=True),
    }


def chart_from_payload(payload: dict[str, Any]) -> FoogleChart:
    if not isinstance(payload, dict):
        raise PayloadError(f"Payload must be an object, got {type(payload).__name__}")

    missing = [k for k in ("chart", "data") if k not in payload]
    if missing:
        raise PayloadError(f"Payload is missing keys: {missing}")

    data = payload["data"]
    if not isinstance(data, dict) or not isinstance(data.get("labels"), list):
        raise PayloadError("Payload 'data' must hold a 'labels' list.")
    raw_rows = data.get("rows", [])
    if not isinstance(raw_rows, list) or not all(isinstance(r, list) for r in raw_rows):
        raise PayloadError("Payload 'data.rows' must be a list of lists.")

    try:
        kind = chart_kind_adapter.validate_python(payload["chart"])
        options = Options.model_validate(payload.get("options") or {})
    except PydanticValidationError as e:
        raise PayloadError(f"Invalid chart options: {e}") from e

    rows = tuple([decode_value(v) for v in r] for r in raw_rows)
    table = Table(labels=tuple(str(x) for x in data["labels"]), rows=rows)
    return FoogleChart(chart=kind, data=table, options=options)


def to_json(chart: FoogleChart, indent: int | None = None) -> str:
    return json.dumps(chart_to_payload(chart), indent=indent, ensure_ascii=False)


def from_json(text: str) -> FoogleChart:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise PayloadError(f"Payload is not valid JSON: {e}") from e
    return chart_from_payload(payload)
