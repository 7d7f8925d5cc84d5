"""
Venn layout — entry point.

Usage:
    python -m venn_layout layout data.json --out layout.json
    python -m venn_layout solve formula.cnf
    python -m venn_layout serve --port 3000
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from venn_layout.pipeline.config import LAYOUT_RULES, ConfigError, load_layout_rules
from venn_layout.pipeline.data import DataError, load_venn_data, validate_venn_data
from venn_layout.pipeline.placer import optimize_layout, layout_to_dict
from venn_layout.pipeline.sat import DimacsError, read_dimacs, solver_from_dimacs, format_result


log = logging.getLogger("venn_layout")


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(levelname)s:%(name)s:%(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="venn_layout", description="SAT-based Venn diagram layout")
    p.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    sub = p.add_subparsers(dest="cmd", required=True)

    lay = sub.add_parser("layout", help="Lay out a data.json document")
    lay.add_argument("data", help="Path to data.json")
    lay.add_argument("--out", default=None, help="Write layout JSON here (default: stdout)")
    lay.add_argument("--rules", default=None, help="JSON file of layout rule overrides")
    lay.add_argument("--width", type=float, default=None, help="Canvas width")
    lay.add_argument("--height", type=float, default=None, help="Canvas height")

    sol = sub.add_parser("solve", help="Decide a DIMACS CNF formula")
    sol.add_argument("cnf", help="Path to a .cnf file")

    sv = sub.add_parser("serve", help="Start the JSON API server")
    sv.add_argument("--host", default="127.0.0.1", help="Host to bind")
    sv.add_argument("--port", type=int, default=8000, help="Port to bind")

    return p


def _cmd_layout(args: argparse.Namespace) -> int:
    try:
        rules = load_layout_rules(args.rules) if args.rules else LAYOUT_RULES
        data = load_venn_data(args.data)
    except (ConfigError, DataError) as exc:
        log.error("%s", exc)
        return 2

    errors = validate_venn_data(data)
    if errors:
        for err in errors:
            log.error("Invalid data: %s", err)
        return 2

    layout = optimize_layout(data, rules=rules, width=args.width, height=args.height)
    text = json.dumps(layout_to_dict(layout), indent=2)

    if args.out:
        out = Path(args.out)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
        log.info("Wrote %s layout to %s", layout.method, out)
    else:
        print(text)
    return 0


def _cmd_solve(args: argparse.Namespace) -> int:
    try:
        doc = read_dimacs(Path(args.cnf).read_text(encoding="utf-8"))
    except (OSError, DimacsError) as exc:
        log.error("%s", exc)
        return 2

    result = solver_from_dimacs(doc).decide()
    sys.stdout.write(format_result(result))
    log.info("%d decision(s), %d backtrack(s), %.3fs",
             result.stats.decisions, result.stats.backtracks, result.stats.elapsed_s)
    # SAT-competition exit codes
    return 10 if result.ok else 20


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _configure_logging(args.log_level)

    if args.cmd == "layout":
        return _cmd_layout(args)
    if args.cmd == "solve":
        return _cmd_solve(args)
    if args.cmd == "serve":
        from venn_layout.web.server import main as serve_main
        serve_main(host=args.host, port=args.port)
        return 0
    return 1


if __name__ == "__main__":
    sys.exit(main())
