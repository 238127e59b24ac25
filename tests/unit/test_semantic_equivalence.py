"""The optimized program must compute the same registers as the original."""

import random

import pytest

from monadc.ir import Opcode, Register
from monadc.optimizer import remove_no_op_redundancies
from monadc.parser import parse_program
from tests.unit.conftest import DIGIT_BLOCK, POPPING_BLOCK, _inst, run_machine

_BINARY = [Opcode.ADD, Opcode.MUL, Opcode.DIV, Opcode.MOD, Opcode.EQL]


def _random_program(rng: random.Random, length: int):
    """Random straight-line program; div/mod only ever use non-zero literals."""
    instructions = []
    for _ in range(length):
        dest = rng.choice(list(Register))
        if rng.random() < 0.15:
            instructions.append(_inst(Opcode.INP, dest))
            continue
        opcode = rng.choice(_BINARY)
        if opcode in (Opcode.DIV, Opcode.MOD):
            source = rng.choice([1, 1, 2, 3, -3, 26])
        elif rng.random() < 0.5:
            source = rng.choice(list(Register))
        else:
            source = rng.choice([0, 0, 1, 1, -1, 2, 5, 26])
        instructions.append(_inst(opcode, dest, source))
    return instructions


def _input_count(instructions):
    return sum(1 for inst in instructions if inst.opcode == Opcode.INP)


def _assert_equivalent(original, optimized, rng, trials=20):
    needed = _input_count(original)
    for _ in range(trials):
        inputs = [rng.randint(-9, 9) for _ in range(needed)]
        assert run_machine(optimized, inputs) == run_machine(original, inputs)


class TestRandomPrograms:
    @pytest.mark.parametrize("seed", range(40))
    def test_optimized_matches_original(self, seed):
        rng = random.Random(seed)
        original = _random_program(rng, rng.randint(1, 40))
        optimized = remove_no_op_redundancies(original)
        _assert_equivalent(original, optimized, rng)

    @pytest.mark.parametrize("seed", range(10))
    def test_inputs_preserved_in_order(self, seed):
        rng = random.Random(seed)
        original = _random_program(rng, 30)
        optimized = remove_no_op_redundancies(original)
        assert [i for i in optimized if i.opcode == Opcode.INP] == [
            i for i in original if i.opcode == Opcode.INP
        ]

    @pytest.mark.parametrize("seed", range(10))
    def test_output_is_a_subsequence(self, seed):
        rng = random.Random(seed)
        original = _random_program(rng, 30)
        optimized = remove_no_op_redundancies(original)
        remaining = iter(original)
        assert all(any(inst == candidate for candidate in remaining) for inst in optimized)

    @pytest.mark.parametrize("seed", range(10))
    def test_second_pass_removes_nothing(self, seed):
        rng = random.Random(seed)
        once = remove_no_op_redundancies(_random_program(rng, 40))
        assert remove_no_op_redundancies(once) == once


class TestDigitCheckProgram:
    def test_fourteen_digit_validator(self):
        source = (DIGIT_BLOCK + POPPING_BLOCK) * 7
        original = parse_program(source)
        optimized = remove_no_op_redundancies(original)
        assert len(optimized) < len(original)
        rng = random.Random(2021)
        for _ in range(25):
            digits = [rng.randint(1, 9) for _ in range(14)]
            assert run_machine(optimized, digits) == run_machine(original, digits)
