"""Instruction model for the MONAD four-register instruction set."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Union

from pydantic import BaseModel, ConfigDict, model_validator

from . import constants


class Opcode(str, Enum):
    INP = "INP"
    ADD = "ADD"
    MUL = "MUL"
    DIV = "DIV"
    MOD = "MOD"
    EQL = "EQL"

    @property
    def mnemonic(self) -> str:
        return self.value.lower()


BINARY_OPCODES: frozenset[Opcode] = frozenset(
    {Opcode.ADD, Opcode.MUL, Opcode.DIV, Opcode.MOD, Opcode.EQL}
)


class Register(IntEnum):
    """One of the four MONAD registers, indexed 0..3."""

    W = 0
    X = 1
    Y = 2
    Z = 3

    @property
    def letter(self) -> str:
        return constants.REGISTER_NAMES[self.value]

    @classmethod
    def from_letter(cls, letter: str) -> Register:
        try:
            return cls(constants.REGISTER_NAMES.index(letter))
        except ValueError:
            raise ValueError(f"Unknown register: {letter!r}") from None

    def __str__(self) -> str:
        return self.letter


class Literal(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: int

    def __str__(self) -> str:
        return str(self.value)


class RegisterOperand(BaseModel):
    model_config = ConfigDict(frozen=True)

    reg: Register

    def __str__(self) -> str:
        return self.reg.letter


Operand = Union[Literal, RegisterOperand]


class Instruction(BaseModel):
    model_config = ConfigDict(frozen=True)

    opcode: Opcode
    dest: Register
    source: Operand | None = None

    @model_validator(mode="after")
    def _check_arity(self) -> Instruction:
        if self.opcode == Opcode.INP and self.source is not None:
            raise ValueError("inp takes no operand")
        if self.opcode in BINARY_OPCODES and self.source is None:
            raise ValueError(f"{self.opcode.mnemonic} requires an operand")
        return self

    def __str__(self) -> str:
        parts = [self.opcode.mnemonic, self.dest.letter]
        if self.source is not None:
            parts.append(str(self.source))
        return " ".join(parts)


def destination(instruction: Instruction) -> Register:
    """Return the register written by *instruction* (every variant writes one)."""
    return instruction.dest


def operand(instruction: Instruction) -> Operand | None:
    """Return the second argument of a binary instruction, or None for inp."""
    return instruction.source


def make_input(register: Register) -> Instruction:
    return Instruction(opcode=Opcode.INP, dest=register)


def make_binary(
    opcode: Opcode, register: Register, source: Register | int | Operand
) -> Instruction:
    """Build a binary instruction, wrapping a bare register or int operand.

    ``Register`` is checked before ``int`` since it is an ``IntEnum``.
    """
    if isinstance(source, Register):
        source = RegisterOperand(reg=source)
    elif isinstance(source, int):
        source = Literal(value=source)
    return Instruction(opcode=opcode, dest=register, source=source)
