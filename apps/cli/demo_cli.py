"""Command-line demo: read a puzzle, run the deduction loop to a fixed point, and print a JSON report (or a board)."""

# demo_cli.py
# Usage (from the repo root):
#   python -m apps.cli.demo_cli --puzzle 530070000600195000098000060800060003400803001700020006060000280000419005000080079
#   python -m apps.cli.demo_cli --file puzzle.txt --config solver.yaml --json report.json
#   python -m apps.cli.demo_cli --puzzle ... --pretty --log_level DEBUG
import argparse
import json
import sys
from pathlib import Path

import yaml
from loguru import logger

from notesolver.config import load_config
from notesolver.grid import Grid
from notesolver.solver_core import board_to_text, values_to_text

DEMO_PUZZLE = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Solve a Sudoku by pure deduction (no guessing).")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--puzzle", type=str, default=None, help="81 characters, 0 or . for blanks")
    src.add_argument("--file", type=str, default=None, help="Text file holding the puzzle")
    ap.add_argument("--config", type=str, default=None, help="YAML solver config")
    ap.add_argument("--techniques", type=str, default=None, help="Comma separated pass order (overrides config)")
    ap.add_argument("--no_moves", action="store_true", help="Do not record the applied moves")
    ap.add_argument("--json", type=str, default=None, help="Write the report here instead of stdout")
    ap.add_argument("--pretty", action="store_true", help="Print the boards instead of JSON")
    ap.add_argument("--log_level", type=str.upper, default="WARNING", choices=LOG_LEVELS)
    return ap


def read_puzzle(args) -> str:
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    return args.puzzle or DEMO_PUZZLE


def main(args=None) -> int:
    if args is None:
        args = build_parser().parse_args()

    logger.remove()
    logger.add(sys.stderr, level=args.log_level)

    try:
        config = load_config(
            args.config,
            techniques=args.techniques,
            record_moves=False if args.no_moves else None,
        )
        grid = Grid.from_string(read_puzzle(args), config=config)
    except (ValueError, OSError, yaml.YAMLError) as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return 2

    before = grid.values()
    status = grid.solve()
    report = grid.report(status)

    if args.pretty:
        print(board_to_text(before))
        print()
        print(board_to_text(report["values"]))
        print(f"\nstatus: {report['status']}  rounds: {report['rounds']}  moves: {len(report['moves'])}")
        return 0

    payload = {"puzzle": values_to_text(before), "config": config.to_dict(), **report}
    if args.json:
        Path(args.json).write_text(json.dumps(payload, indent=2), encoding="utf-8")
    else:
        print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())  # <- no args passed; main() will parse
