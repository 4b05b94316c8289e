from __future__ import annotations

import logging
import sys

from foogle_charts.cli.describe import main as describe_main


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=logging.INFO)

    if not argv or argv[0] in {"-h", "--help"}:
        print("Usage: python -m foogle_charts.cli <command>\n")
        print("Commands:")
        print("  describe   Load a YAML chart definition and print its JSON payload\n")
        return 0

    cmd = argv[0]
    if cmd == "describe":
        return describe_main(argv[1:])

    print(f"Unknown command: {cmd}", file=sys.stderr)
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
