"""Tests for the MONAD instruction model."""

import pytest
from pydantic import BaseModel, ValidationError

from monadc.ir import (
    Instruction,
    Literal,
    Opcode,
    Register,
    RegisterOperand,
    destination,
    make_binary,
    make_input,
    operand,
)


class TestRegister:
    def test_letters_follow_index_order(self):
        assert [r.letter for r in Register] == ["w", "x", "y", "z"]

    def test_from_letter(self):
        assert Register.from_letter("y") is Register.Y

    def test_from_unknown_letter_raises(self):
        with pytest.raises(ValueError, match="Unknown register"):
            Register.from_letter("q")

    def test_indexes_a_four_slot_list(self):
        bank = ["a", "b", "c", "d"]
        assert bank[Register.Z] == "d"


class TestInstructionQueries:
    def test_destination_of_input(self):
        assert destination(make_input(Register.X)) is Register.X

    def test_destination_of_binary(self):
        assert destination(make_binary(Opcode.MOD, Register.Z, 26)) is Register.Z

    def test_operand_of_input_is_none(self):
        assert operand(make_input(Register.W)) is None

    def test_operand_literal(self):
        assert operand(make_binary(Opcode.ADD, Register.W, -3)) == Literal(value=-3)

    def test_operand_register(self):
        inst = make_binary(Opcode.EQL, Register.X, Register.W)
        assert operand(inst) == RegisterOperand(reg=Register.W)

    def test_register_is_not_mistaken_for_literal(self):
        inst = make_binary(Opcode.MUL, Register.Y, Register.X)
        assert isinstance(operand(inst), RegisterOperand)


class TestInstructionValidation:
    def test_inp_with_operand_rejected(self):
        with pytest.raises(ValidationError):
            Instruction(opcode=Opcode.INP, dest=Register.W, source=Literal(value=1))

    def test_binary_without_operand_rejected(self):
        with pytest.raises(ValidationError):
            Instruction(opcode=Opcode.ADD, dest=Register.W)

    def test_out_of_range_register_rejected(self):
        with pytest.raises(ValidationError):
            Instruction(opcode=Opcode.INP, dest=4)

    def test_instructions_are_immutable(self):
        inst = make_input(Register.W)
        with pytest.raises(ValidationError):
            inst.dest = Register.X

    def test_structural_equality(self):
        assert make_binary(Opcode.ADD, Register.X, 5) == make_binary(
            Opcode.ADD, Register.X, 5
        )


class TestRendering:
    def test_input(self):
        assert str(make_input(Register.Z)) == "inp z"

    def test_binary_literal(self):
        assert str(make_binary(Opcode.DIV, Register.Z, -26)) == "div z -26"

    def test_binary_register(self):
        assert str(make_binary(Opcode.EQL, Register.X, Register.W)) == "eql x w"

    def test_mnemonic(self):
        assert Opcode.EQL.mnemonic == "eql"


class TestModelFields:
    def test_register_operand_field_is_reg(self):
        assert list(RegisterOperand.model_fields) == ["reg"]
        assert RegisterOperand(reg=Register.Z).reg is Register.Z

    @pytest.mark.parametrize("model", [Literal, RegisterOperand, Instruction])
    def test_no_field_shadows_base_model_attribute(self, model):
        assert not [name for name in model.model_fields if hasattr(BaseModel, name)]
