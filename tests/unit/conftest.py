"""Shared helpers: a concrete reference MONAD machine and sample programs."""

from monadc.ir import Instruction, Literal, Opcode, Register, make_binary, make_input

W, X, Y, Z = Register.W, Register.X, Register.Y, Register.Z

# One digit-check block of the classic MONAD model-number validator.
DIGIT_BLOCK = """\
inp w
mul x 0
add x z
mod x 26
div z 1
add x 11
eql x w
eql x 0
mul y 0
add y 25
mul y x
add y 1
mul z y
mul y 0
add y w
add y 6
mul y x
add z y
"""

POPPING_BLOCK = """\
inp w
mul x 0
add x z
mod x 26
div z 26
add x -8
eql x w
eql x 0
mul y 0
add y 25
mul y x
add y 1
mul z y
mul y 0
add y w
add y 3
mul y x
add z y
"""


def _inst(opcode, register, source=None):
    """Build an Instruction concisely; ``source`` may be a Register or int."""
    if opcode == Opcode.INP:
        return make_input(register)
    return make_binary(opcode, register, source)


def _truncating_div(a, b):
    q = abs(a) // abs(b)
    return -q if (a < 0) != (b < 0) else q


def _truncating_mod(a, b):
    r = abs(a) % abs(b)
    return -r if a < 0 else r


def run_machine(instructions: list[Instruction], inputs: list[int]) -> list[int]:
    """Concretely execute *instructions*, returning the final w, x, y, z."""
    registers = [0, 0, 0, 0]
    feed = iter(inputs)
    for inst in instructions:
        if inst.opcode == Opcode.INP:
            registers[inst.dest] = next(feed)
            continue
        left = registers[inst.dest]
        if isinstance(inst.source, Literal):
            right = inst.source.value
        else:
            right = registers[inst.source.reg]
        if inst.opcode == Opcode.ADD:
            result = left + right
        elif inst.opcode == Opcode.MUL:
            result = left * right
        elif inst.opcode == Opcode.DIV:
            result = _truncating_div(left, right)
        elif inst.opcode == Opcode.MOD:
            result = _truncating_mod(left, right)
        else:
            result = 1 if left == right else 0
        registers[inst.dest] = result
    return registers
