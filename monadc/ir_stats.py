"""Pure functions and report types for statistics over MONAD instruction lists."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from .ir import Instruction


def count_opcodes(instructions: list[Instruction]) -> dict[str, int]:
    """Return a frequency map of opcode names in the given instruction list.

    Args:
        instructions: A list of MONAD instructions.

    Returns:
        A dict mapping opcode name strings to their occurrence counts.
        Empty dict for an empty input list.
    """
    return dict(Counter(inst.opcode.value for inst in instructions))


def percent_difference(original_len: int, optimized_len: int) -> float:
    """How much shorter the optimized program is, relative to its own length.

    ``(original / optimized - 1) * 100``; an empty optimized program of a
    non-empty original is infinitely better, two empty programs are equal.
    """
    if optimized_len == 0:
        return math.inf if original_len else 0.0
    return (original_len / optimized_len - 1.0) * 100.0


@dataclass
class ReductionReport:
    """Before/after sizes of one optimization run."""

    original_count: int = 0
    optimized_count: int = 0
    original_opcodes: dict[str, int] = field(default_factory=dict)
    optimized_opcodes: dict[str, int] = field(default_factory=dict)

    @classmethod
    def from_programs(
        cls, original: list[Instruction], optimized: list[Instruction]
    ) -> ReductionReport:
        return cls(
            original_count=len(original),
            optimized_count=len(optimized),
            original_opcodes=count_opcodes(original),
            optimized_opcodes=count_opcodes(optimized),
        )

    @property
    def percent_difference(self) -> float:
        return percent_difference(self.original_count, self.optimized_count)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready form; an unbounded percentage becomes ``None``."""
        percent = self.percent_difference
        return {
            "original_count": self.original_count,
            "optimized_count": self.optimized_count,
            "percent_difference": percent if math.isfinite(percent) else None,
            "original_opcodes": self.original_opcodes,
            "optimized_opcodes": self.optimized_opcodes,
        }

    def report(self) -> str:
        lines = [
            f"Original vs. Optimized Length:\t{self.original_count} vs {self.optimized_count}",
            f"Optimization is {self.percent_difference:.2f}% more efficient.",
        ]
        opcodes = sorted(set(self.original_opcodes) | set(self.optimized_opcodes))
        if opcodes:
            lines.append("")
            lines.append(f"  {'Opcode':<8} {'Before':>8} {'After':>8}")
            lines.append(f"  {'─' * 8} {'─' * 8} {'─' * 8}")
            for name in opcodes:
                lines.append(
                    f"  {name:<8} {self.original_opcodes.get(name, 0):>8}"
                    f" {self.optimized_opcodes.get(name, 0):>8}"
                )
        return "\n".join(lines)
