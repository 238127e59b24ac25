"""Trace data types for step-by-step optimization replay."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .ir import Instruction
from .values import Value


@dataclass(frozen=True)
class TraceStep:
    """A single instruction's abstract evaluation.

    ``before`` is the destination register's value prior to the instruction,
    ``after`` the value written back.  ``retained`` is False for no-ops.
    """

    instruction_index: int
    instruction: Instruction
    before: Value
    after: Value
    retained: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.instruction_index,
            "instruction": str(self.instruction),
            "before": self.before.to_dict(),
            "after": self.after.to_dict(),
            "retained": self.retained,
        }


@dataclass
class OptimizationStats:
    """Returned metrics from a single optimizer invocation."""

    original_count: int = 0
    optimized_count: int = 0
    inputs_consumed: int = 0

    @property
    def removed_count(self) -> int:
        return self.original_count - self.optimized_count


@dataclass(frozen=True)
class OptimizationTrace:
    """Complete record of an optimizer invocation.

    Holds the register bank before the first instruction, one ``TraceStep``
    per input instruction, and the register bank after the last one.
    """

    steps: list[TraceStep] = field(default_factory=list)
    stats: OptimizationStats = field(default_factory=OptimizationStats)
    initial_registers: tuple[Value, ...] = ()
    final_registers: tuple[Value, ...] = ()

    @property
    def removed(self) -> list[TraceStep]:
        return [step for step in self.steps if not step.retained]

    def to_dict(self) -> dict[str, Any]:
        return {
            "steps": [step.to_dict() for step in self.steps],
            "initial_registers": [v.to_dict() for v in self.initial_registers],
            "final_registers": [v.to_dict() for v in self.final_registers],
            "original_count": self.stats.original_count,
            "optimized_count": self.stats.optimized_count,
            "inputs_consumed": self.stats.inputs_consumed,
        }
