"""Abstract interpreter that removes no-op instructions from MONAD programs.

A single forward pass folds the program over a four-slot bank of abstract
values.  Each binary instruction is evaluated with algebraic identities; when
the result is the same value the destination already held, the instruction
cannot change the machine state and is dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Callable

from .config import OptimizerConfig
from .errors import ConstantDivisionByZeroError
from .identity import IdentityGenerator
from .ir import Instruction, Literal, Opcode, Operand, destination, operand
from .program import Program
from .trace_types import OptimizationStats, OptimizationTrace, TraceStep
from .values import ExactValue, Value, is_exact, same_value

logger = logging.getLogger(__name__)


def truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def truncating_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    remainder = abs(a) % abs(b)
    return remainder if a >= 0 else -remainder


def _both_exact(left: Value, right: Value) -> bool:
    return isinstance(left, ExactValue) and isinstance(right, ExactValue)


def _reject_zero_divisor(opcode: Opcode, right: Value) -> None:
    if is_exact(right, 0):
        raise ConstantDivisionByZeroError(
            f"{opcode.mnemonic} by a right operand that is always 0"
        )


# ── Evaluation rules ─────────────────────────────────────────────
# "Return left/right" hands back the very same value object so the
# caller's identity check recognises the instruction as a no-op.


def _eval_add(left: Value, right: Value, program: Program) -> Value:
    if _both_exact(left, right):
        return program.new_exact_value(left.value + right.value)
    if is_exact(right, 0):
        return left
    if is_exact(left, 0):
        return right
    return program.new_unknown_value()


def _eval_mul(left: Value, right: Value, program: Program) -> Value:
    if _both_exact(left, right):
        return program.new_exact_value(left.value * right.value)
    if is_exact(left, 0) or is_exact(right, 0):
        return program.new_exact_value(0)
    if is_exact(right, 1):
        return left
    if is_exact(left, 1):
        return right
    return program.new_unknown_value()


def _eval_div(left: Value, right: Value, program: Program) -> Value:
    _reject_zero_divisor(Opcode.DIV, right)
    if _both_exact(left, right):
        return program.new_exact_value(truncating_div(left.value, right.value))
    if is_exact(left, 0) or is_exact(right, 1):
        return left
    return program.new_unknown_value()


def _eval_mod(left: Value, right: Value, program: Program) -> Value:
    _reject_zero_divisor(Opcode.MOD, right)
    if _both_exact(left, right):
        return program.new_exact_value(truncating_mod(left.value, right.value))
    if is_exact(left, 0) or is_exact(right, 1):
        return program.new_exact_value(0)
    return program.new_unknown_value()


def _eval_eql(left: Value, right: Value, program: Program) -> Value:
    if same_value(left, right):
        return program.new_exact_value(1)
    if _both_exact(left, right):
        return program.new_exact_value(0)
    return program.new_unknown_value()


_EVALUATORS: dict[Opcode, Callable[[Value, Value, Program], Value]] = {
    Opcode.ADD: _eval_add,
    Opcode.MUL: _eval_mul,
    Opcode.DIV: _eval_div,
    Opcode.MOD: _eval_mod,
    Opcode.EQL: _eval_eql,
}


def evaluate(opcode: Opcode, left: Value, right: Value, program: Program) -> Value:
    """Abstractly evaluate ``left <opcode> right``, minting results from *program*.

    Raises:
        ConstantDivisionByZeroError: div/mod whose right operand is exactly 0.
        ValueError: *opcode* is not a binary opcode.
    """
    evaluator = _EVALUATORS.get(opcode)
    if evaluator is None:
        raise ValueError(f"{opcode.mnemonic} is not a binary opcode")
    return evaluator(left, right, program)


# ── The pass ─────────────────────────────────────────────────────


def _resolve_operand(source: Operand, registers: list[Value], program: Program) -> Value:
    if isinstance(source, Literal):
        return program.new_exact_value(source.value)
    return registers[source.reg]


def _fold(
    instructions: list[Instruction], program: Program, registers: list[Value]
) -> Iterator[TraceStep]:
    for index, instruction in enumerate(instructions):
        dest = destination(instruction)
        before = registers[dest]

        if instruction.opcode == Opcode.INP:
            # Consumes external data, so never a no-op.
            after = program.new_input_value()
            retained = True
        else:
            right = _resolve_operand(operand(instruction), registers, program)
            after = evaluate(instruction.opcode, before, right, program)
            retained = not same_value(after, before)

        registers[dest] = after
        if retained:
            logger.debug("#%d %s: %s -> %s", index, instruction, before, after)
        else:
            logger.debug("#%d %s: no-op on %s, dropped", index, instruction, before)

        yield TraceStep(
            instruction_index=index,
            instruction=instruction,
            before=before,
            after=after,
            retained=retained,
        )


def optimize_traced(
    instructions: list[Instruction],
    config: OptimizerConfig = OptimizerConfig(),
) -> tuple[list[Instruction], OptimizationTrace]:
    """Remove no-op instructions and record every decision.

    Args:
        instructions: The program to optimize.  It is not modified.
        config: Identity range for the invocation's value factory.

    Returns:
        Tuple of (optimized instructions, OptimizationTrace).

    Raises:
        ConstantDivisionByZeroError: The program divides by a constant zero.
        IdentityExhaustedError: The configured identity range ran out.
    """
    program = Program(IdentityGenerator(config.identity_start, config.identity_limit))
    registers = program.initial_registers()
    initial = tuple(registers)

    steps = list(_fold(instructions, program, registers))
    optimized = [step.instruction for step in steps if step.retained]

    stats = OptimizationStats(
        original_count=len(instructions),
        optimized_count=len(optimized),
        inputs_consumed=program.inputs_consumed,
    )
    logger.info(
        "Optimized %d instructions to %d (%d removed)",
        stats.original_count,
        stats.optimized_count,
        stats.removed_count,
    )
    trace = OptimizationTrace(
        steps=steps,
        stats=stats,
        initial_registers=initial,
        final_registers=tuple(registers),
    )
    return optimized, trace


def remove_no_op_redundancies(
    instructions: list[Instruction],
    config: OptimizerConfig = OptimizerConfig(),
) -> list[Instruction]:
    """Return a new instruction list with every provable no-op removed."""
    optimized, _trace = optimize_traced(instructions, config)
    return optimized
