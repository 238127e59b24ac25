"""Composable API functions for the MONAD optimizer.

Each function corresponds to a CLI workflow but is callable programmatically
without argparse.
"""

from __future__ import annotations

import logging

from .config import OptimizerConfig
from .ir import Instruction
from .ir_stats import ReductionReport, count_opcodes
from .optimizer import optimize_traced, remove_no_op_redundancies
from .parser import parse_program, render_program
from .trace_types import OptimizationTrace

logger = logging.getLogger(__name__)


def parse_source(source: str) -> list[Instruction]:
    """Decode MONAD source text into instructions.

    Raises:
        ParseError: If any line is malformed.
    """
    return parse_program(source)


def optimize_source(
    source: str, config: OptimizerConfig = OptimizerConfig()
) -> list[Instruction]:
    """Parse MONAD source and return the optimized instruction list."""
    return remove_no_op_redundancies(parse_source(source), config)


def dump_optimized(source: str, config: OptimizerConfig = OptimizerConfig()) -> str:
    """Parse, optimize and render back to MONAD text."""
    return render_program(optimize_source(source, config))


def trace_source(
    source: str, config: OptimizerConfig = OptimizerConfig()
) -> OptimizationTrace:
    """Parse and optimize with a full per-instruction trace."""
    _optimized, trace = optimize_traced(parse_source(source), config)
    return trace


def analyze_source(
    source: str, config: OptimizerConfig = OptimizerConfig()
) -> ReductionReport:
    """Parse and optimize, returning before/after size statistics.

    Args:
        source: MONAD program text.
        config: Optimizer configuration.

    Returns:
        A ReductionReport comparing the original and optimized programs.
    """
    original = parse_source(source)
    optimized = remove_no_op_redundancies(original, config)
    logger.info("analyze_source: %d -> %d", len(original), len(optimized))
    return ReductionReport.from_programs(original, optimized)


def ir_stats(source: str) -> dict[str, int]:
    """Parse MONAD source and return opcode frequency counts."""
    return count_opcodes(parse_source(source))
