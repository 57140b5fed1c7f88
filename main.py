"""
PolySolver — Entry point.

Solve a polynomial equation of degree ≤ 2 from the command line:

    python main.py "5 * X^2 + 2 = 6 * X^2 + 1 * X^1"
"""

import argparse
import logging
import sys

from polysolver import engine, storage
from polysolver.polynomial import ParseError

EXAMPLE = "5 * X^2 + 2 = 6 * X^2 + 1 * X^1"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polysolver",
        description="Compute 2nd degree polynomial equations",
        epilog=f'Example: polysolver "{EXAMPLE}"',
    )
    parser.add_argument("equation", help="Equation to solve, quoted")
    parser.add_argument("--variable", default=None,
                        help="Letter of the unknown (default from settings, X)")
    parser.add_argument("--mode", choices=engine.MODES, default=None,
                        help="Root computation: closed-form formula or NumPy")
    parser.add_argument("--verify", action="store_true",
                        help="Print the substitution check of every root")
    parser.add_argument("--plot", metavar="FILE", default=None,
                        help="Save a graph of the reduced polynomial to FILE")
    parser.add_argument("--history", action="store_true",
                        help="Record the equation and answer in the local history")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = storage.get_settings()
    variable = args.variable or settings["variable"]
    mode = args.mode or settings["mode"]

    try:
        result = engine.solve_equation(args.equation, variable=variable, mode=mode)
    except ParseError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    for line in engine.report_lines(result):
        print(line)

    if args.verify or settings["show_verification"]:
        for step in result["verification_steps"]:
            print(f"  {step['description']}: {step['expression']}")
        print(f"Verification: {result['summary']['validation_status']}")

    if args.plot:
        from polysolver.graph import save_figure
        save_figure(result, args.plot)
        print(f"Graph saved to {args.plot}")

    if args.history:
        storage.add_history(args.equation, result["final_answer"])

    return 1 if result["error"] else 0


if __name__ == "__main__":
    sys.exit(main())
