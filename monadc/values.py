"""Abstract values — the lattice the optimizer interprets programs over.

Every value carries an ``identity`` handed out by its ``Program``.  Field-wise
equality is disabled on purpose: ``same_value`` is the only equality rule.
Two exact values are the same when their payloads match; input and unknown
values are the same only when they are literally the same value (same
identity), so two independently unknown quantities are never conflated.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, eq=False)
class ExactValue:
    identity: int
    value: int

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "exact", "identity": self.identity, "value": self.value}

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, eq=False)
class InputValue:
    identity: int
    index: int  # position of the inp instruction among all inputs

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "input", "identity": self.identity, "index": self.index}

    def __str__(self) -> str:
        return f"input[{self.index}]#{self.identity}"


@dataclass(frozen=True, eq=False)
class UnknownValue:
    identity: int

    def to_dict(self) -> dict[str, Any]:
        return {"kind": "unknown", "identity": self.identity}

    def __str__(self) -> str:
        return f"unknown#{self.identity}"


Value = Union[ExactValue, InputValue, UnknownValue]


def same_value(left: Value, right: Value) -> bool:
    """Two-tier equality over abstract values."""
    if isinstance(left, ExactValue) and isinstance(right, ExactValue):
        return left.value == right.value
    if isinstance(left, ExactValue) or isinstance(right, ExactValue):
        return False
    return type(left) is type(right) and left.identity == right.identity


def is_exact(value: Value, n: int) -> bool:
    return isinstance(value, ExactValue) and value.value == n
