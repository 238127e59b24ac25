"""Optimizer context — owns identities, the initial register bank and input count."""

from __future__ import annotations

from . import constants
from .identity import IdentityGenerator
from .values import ExactValue, InputValue, UnknownValue, Value


class Program:
    """Factory for abstract values within a single optimizer invocation.

    The four initial registers are minted once, at construction, so they
    take the first four identities of the generator.
    """

    def __init__(self, identities: IdentityGenerator | None = None):
        self._identities = identities if identities is not None else IdentityGenerator()
        self._initial_registers: tuple[Value, ...] = tuple(
            ExactValue(identity=self._identities.make_new_id(), value=0)
            for _ in range(constants.REGISTER_COUNT)
        )
        self._next_input_index = 0

    @property
    def inputs_consumed(self) -> int:
        return self._next_input_index

    def initial_registers(self) -> list[Value]:
        return list(self._initial_registers)

    def new_exact_value(self, value: int) -> ExactValue:
        return ExactValue(identity=self._identities.make_new_id(), value=value)

    def new_unknown_value(self) -> UnknownValue:
        return UnknownValue(identity=self._identities.make_new_id())

    def new_input_value(self) -> InputValue:
        value = InputValue(
            identity=self._identities.make_new_id(), index=self._next_input_index
        )
        self._next_input_index += 1
        return value
