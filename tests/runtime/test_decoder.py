import pytest

import synvm.common.ops as ops
from synvm.runtime.memory import Memory
from synvm.runtime.decoder import Instruction, decode
from synvm.runtime.faults import InvalidOpcode, OutOfBounds


def test_decode_add():
    instr = decode(Memory([9, 32768, 32768, 1, 0]), 0)

    assert instr == Instruction(0, ops.ADD, (32768, 32768, 1))
    assert instr.next_ip == 4
    assert str(instr) == 'add 32768 32768 1'


def test_decode_at_offset():
    instr = decode(Memory([21, 19, 65, 0]), 1)

    assert instr.op == ops.OUT
    assert instr.args == (65,)
    assert instr.next_ip == 3


@pytest.mark.parametrize('op', sorted(ops.ARITY))
def test_arity(op):
    instr = decode(Memory([op, 1, 2, 3]), 0)

    assert len(instr.args) == ops.ARITY[op]
    assert instr.next_ip == 1 + ops.ARITY[op]


def test_arity_table():
    assert [ops.ARITY[op] for op in range(22)] == [
        0, 2, 1, 1, 3, 3, 1, 2, 2, 3, 3, 3, 3, 3, 2, 2, 2, 1, 0, 1, 1, 0
    ]


@pytest.mark.parametrize('op', [22, 100, 32768, 0xFFFF])
def test_invalid_opcode(op):
    with pytest.raises(InvalidOpcode):
        decode(Memory([op, 0, 0, 0]), 0)


def test_operands_are_not_validated():
    instr = decode(Memory([19, 40000]), 0)

    assert instr.args == (40000,)


def test_truncated_instruction():
    with pytest.raises(OutOfBounds):
        decode(Memory([9, 32768, 1]), 0)


def test_decode_past_end():
    with pytest.raises(OutOfBounds):
        decode(Memory([0]), 1)


def test_decode_sees_writes():
    memory = Memory([21, 0])
    memory.write(0, 19)
    memory.write(1, 65)

    assert decode(memory, 0) == Instruction(0, ops.OUT, (65,))
