"""CLI command: load a YAML chart definition and emit its JSON payload."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from foogle_charts.core.constants import Engine
from foogle_charts.core.errors import FoogleError
from foogle_charts.core.settings import default_engine_from_env
from foogle_charts.viz.definition_loader import load_chart_definition
from foogle_charts.viz.payload import to_json

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="foogle_charts describe",
        description="Load a YAML chart definition and print its JSON payload.",
    )
    p.add_argument("definition", help="Path to the chart definition (.yaml).")
    p.add_argument(
        "--engine",
        choices=[e.value for e in Engine],
        default=None,
        help="Engine to use when the definition sets none. Default: $FOOGLE_DEFAULT_ENGINE",
    )
    p.add_argument(
        "--out",
        default=None,
        help="Write the payload to this file instead of stdout.",
    )
    p.add_argument("--indent", type=int, default=2, help="JSON indent. Default: 2")
    return p


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        engine = Engine(args.engine) if args.engine else default_engine_from_env()
        chart = load_chart_definition(args.definition, default_engine=engine)
        text = to_json(chart, indent=args.indent)
    except FoogleError as exc:
        logger.error("Failed to describe %s: %s", args.definition, exc)
        return 1

    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text + "\n", encoding="utf-8")
        print(f"payload: {out.resolve()}")
    else:
        sys.stdout.write(text + "\n")
    return 0
