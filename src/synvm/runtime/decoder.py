from dataclasses import dataclass

import synvm.common.ops as ops
from synvm.runtime.memory import Memory
from synvm.runtime.faults import InvalidOpcode


@dataclass(frozen=True)
class Instruction:
    addr: int               # Where the opcode word was read
    op: int
    args: tuple[int, ...]   # Raw operand words, not resolved

    @property
    def next_ip(self) -> int:
        return self.addr + 1 + len(self.args)

    def __str__(self):
        return ' '.join([ops.NAMES[self.op]] + [str(arg) for arg in self.args])


def decode(memory: Memory, ip: int) -> Instruction:
    '''
    Reads the instruction at ip straight from memory.
    Nothing is cached, so rewritten code is seen on the next decode.
    '''
    op = memory.read(ip)

    if op not in ops.ARITY:
        raise InvalidOpcode(f'Unknown opcode {op}')

    args = tuple(memory.read(ip + 1 + i) for i in range(ops.ARITY[op]))
    return Instruction(ip, op, args)
