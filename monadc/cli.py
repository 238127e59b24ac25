"""Command-line entry point: optimize a MONAD program and report the savings."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from . import constants
from .config import OptimizerConfig
from .errors import MonadError
from .ir_stats import ReductionReport
from .optimizer import optimize_traced
from .parser import parse_program, render_program
from .trace_types import OptimizationTrace


def _read_source(path: str) -> str:
    if path == constants.STDIN_PATH:
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def _identity_start(raw: str) -> int:
    try:
        start = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {raw!r}") from None
    if not 0 <= start <= constants.DEFAULT_IDENTITY_LIMIT:
        raise argparse.ArgumentTypeError(
            f"must be between 0 and {constants.DEFAULT_IDENTITY_LIMIT}, got {start}"
        )
    return start


def _print_trace(trace: OptimizationTrace) -> None:
    print("═══ Trace ═══")
    for step in trace.steps:
        tag = "keep" if step.retained else "drop"
        instruction = str(step.instruction)
        print(
            f"  [{tag}] {step.instruction_index:>4}  {instruction:<12}"
            f" {step.before} → {step.after}"
        )
    final = ", ".join(
        f"{name}={value}"
        for name, value in zip(constants.REGISTER_NAMES, trace.final_registers)
    )
    print(f"  final: {final}")
    print()


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monadc", description="Remove no-op instructions from a MONAD program")
    parser.add_argument("file",
                        help="MONAD source file ('-' reads stdin)")
    parser.add_argument("--emit", action="store_true",
                        help="Print the optimized program")
    parser.add_argument("--trace", action="store_true",
                        help="Print the keep/drop decision for every instruction")
    parser.add_argument("--json", action="store_true",
                        help="Print the report as JSON")
    parser.add_argument("--identity-start", type=_identity_start,
                        default=constants.DEFAULT_IDENTITY_START,
                        help="First identity handed to abstract values (default: 0)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log optimizer decisions to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    config = OptimizerConfig(identity_start=args.identity_start)
    try:
        program = parse_program(_read_source(args.file))
        optimized, trace = optimize_traced(program, config)
    except (MonadError, OSError, UnicodeDecodeError) as exc:
        print(f"monadc: {exc}", file=sys.stderr)
        return 1

    report = ReductionReport.from_programs(program, optimized)

    if args.json:
        payload = report.to_dict()
        if args.trace:
            payload["trace"] = trace.to_dict()
        if args.emit:
            payload["optimized"] = [str(inst) for inst in optimized]
        print(json.dumps(payload, indent=2, default=str, allow_nan=False))
        return 0

    if args.trace:
        _print_trace(trace)
    if args.emit:
        print("═══ Optimized ═══")
        print(render_program(optimized))
        print()
    print(report.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
