"""MONAD text parsing and rendering.

Grammar, one instruction per line::

    inp <reg>
    <op> <reg> <operand>     op in add, mul, div, mod, eql

where ``<reg>`` is one of w, x, y, z and ``<operand>`` is a register letter
or a signed decimal integer.
"""

from __future__ import annotations

import logging
import re

from . import constants
from .errors import ParseError
from .ir import (
    BINARY_OPCODES,
    Instruction,
    Opcode,
    Register,
    make_binary,
    make_input,
)

logger = logging.getLogger(__name__)

_REGISTER_PATTERN = "[" + "".join(constants.REGISTER_NAMES) + "]"
_BINARY_PATTERN = "|".join(sorted(op.mnemonic for op in BINARY_OPCODES))
_MNEMONICS: frozenset[str] = frozenset(op.mnemonic for op in Opcode)

_INPUT_LINE = re.compile(rf"inp[ \t]+(?P<reg>{_REGISTER_PATTERN})")
_BINARY_LINE = re.compile(
    rf"(?P<op>{_BINARY_PATTERN})[ \t]+(?P<reg>{_REGISTER_PATTERN})"
    rf"[ \t]+(?P<operand>{_REGISTER_PATTERN}|-?[0-9]+)"
)


def _parse_operand(raw: str) -> Register | int:
    if raw in constants.REGISTER_NAMES:
        return Register.from_letter(raw)
    return int(raw)


def parse_line(line: str, line_number: int = 1) -> Instruction:
    """Decode a single non-blank line into an Instruction.

    Raises:
        ParseError: The line does not match the grammar.
    """
    text = line.strip()
    match = _INPUT_LINE.fullmatch(text)
    if match:
        return make_input(Register.from_letter(match["reg"]))

    match = _BINARY_LINE.fullmatch(text)
    if match:
        return make_binary(
            Opcode(match["op"].upper()),
            Register.from_letter(match["reg"]),
            _parse_operand(match["operand"]),
        )

    mnemonic = text.split(maxsplit=1)[0] if text else ""
    reason = "malformed" if mnemonic in _MNEMONICS else "unknown"
    raise ParseError(line_number, line, reason)


def parse_program(source: str) -> list[Instruction]:
    """Decode MONAD source text; blank lines are skipped.

    Raises:
        ParseError: On the first line that does not match the grammar.
    """
    instructions = [
        parse_line(line, number)
        for number, line in enumerate(source.splitlines(), start=1)
        if line.strip()
    ]
    logger.info("Parsed %d instructions", len(instructions))
    return instructions


def render_program(instructions: list[Instruction]) -> str:
    """Render instructions back to MONAD text, one per line."""
    return "\n".join(str(inst) for inst in instructions)
