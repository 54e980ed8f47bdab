import logging as lg
from typing import Callable, Sequence

import synvm.common.ops as ops
from synvm.common.hwconf import MODULUS, MAX_LITERAL, REG_BASE, REG_COUNT, MAX_OPERAND
from synvm.runtime.memory import Memory
from synvm.runtime.decoder import Instruction, decode
from synvm.runtime.terminal import Terminal
from synvm.runtime.faults import (  # noqa: F401
    Halt,
    HaltReason,
    Fault,
    InvalidOpcode,
    InvalidOperand,
    OutOfBounds,
    DivisionByZero,
    StackUnderflow
)


def resolve(word: int, regs: Sequence[int]) -> int:
    ''' Effective value of an operand: a literal or a register's contents '''
    if 0 <= word <= MAX_LITERAL:
        return word

    if REG_BASE <= word <= MAX_OPERAND:
        return regs[word - REG_BASE]

    raise InvalidOperand(f'Operand {word} is neither a literal nor a register')


class CPU():
    ip: int             # Instruction pointer
    gp: list[int]       # General purpose registers
    stack: list[int]
    input: bytearray    # Pending input bytes of the current line

    def __init__(self, memory: Memory, terminal: Terminal):
        self.memory = memory        # Ref. to memory
        self.terminal = terminal    # Ref. to terminal

        self.ip = 0
        self.gp = [0] * REG_COUNT
        self.stack = []
        self.input = bytearray()

    # - Helpers - #

    def debug_dump(self):
        state = [f'IP:{self.ip:X}', f'SP:{len(self.stack)}']
        state.extend([f'{i}:{self.gp[i]:X}' for i in range(len(self.gp))])

        lg.debug(' '.join(state))

    def value(self, word: int) -> int:
        return resolve(word, self.gp)

    def set_reg(self, reg: int, val: int):
        # Destination operands are register indices, never resolved
        index = reg % MODULUS

        if index >= REG_COUNT:
            raise InvalidOperand(f'Operand {reg} does not name a register')

        self.gp[index] = val % MODULUS

    def arithm(self, a: int, b: int, c: int, op: Callable[[int, int], int]):
        self.set_reg(a, op(self.value(b), self.value(c)))

    def do_pop(self) -> int:
        if not self.stack:
            raise StackUnderflow('Pop from an empty stack')

        return self.stack.pop()

    # - Operations - #

    def hlt(self):
        raise Halt(HaltReason.HLT)

    def set(self, a: int, b: int):
        self.set_reg(a, self.value(b))

    def psh(self, a: int):
        self.stack.append(self.value(a))

    def pop(self, a: int):
        self.set_reg(a, self.do_pop())

    def eq(self, a: int, b: int, c: int):
        self.arithm(a, b, c, lambda x, y: int(x == y))

    def gt(self, a: int, b: int, c: int):
        self.arithm(a, b, c, lambda x, y: int(x > y))

    def jmp(self, a: int):
        self.ip = self.value(a)

    def jt(self, a: int, b: int):
        if self.value(a) != 0:
            self.ip = self.value(b)

    def jf(self, a: int, b: int):
        if self.value(a) == 0:
            self.ip = self.value(b)

    # - Arithmetic - #

    def add(self, a: int, b: int, c: int):
        self.arithm(a, b, c, lambda x, y: x + y)

    def mul(self, a: int, b: int, c: int):
        self.arithm(a, b, c, lambda x, y: x * y)

    def mod(self, a: int, b: int, c: int):
        divisor = self.value(c)

        if divisor == 0:
            raise DivisionByZero(f'Remainder of {self.value(b)} by zero')

        self.set_reg(a, self.value(b) % divisor)

    def band(self, a: int, b: int, c: int):
        self.arithm(a, b, c, lambda x, y: x & y)

    def bor(self, a: int, b: int, c: int):
        self.arithm(a, b, c, lambda x, y: x | y)

    def inv(self, a: int, b: int):
        self.set_reg(a, ~self.value(b) & MAX_LITERAL)

    # - Memory - #

    def rmem(self, a: int, b: int):
        self.set_reg(a, self.memory.read(self.value(b)))

    def wmem(self, a: int, b: int):
        self.memory.write(self.value(a), self.value(b))

    def cll(self, a: int):
        target = self.value(a)
        self.stack.append(self.ip)
        self.ip = target

    def ret(self):
        if not self.stack:
            raise Halt(HaltReason.RET)

        self.ip = self.stack.pop()

    # - Terminal - #

    def out(self, a: int):
        self.terminal.write(self.value(a) % 256)

    def inp(self, a: int):
        if not self.input:
            self.input.extend(self.terminal.read_line())

        if not self.input:
            raise Halt(HaltReason.EOF)

        self.set_reg(a, self.input.pop(0))

    def nop(self):
        pass

    HANDLERS = {
        ops.HLT: hlt,
        ops.SET: set,
        ops.PUSH: psh,
        ops.POP: pop,
        ops.EQ: eq,
        ops.GT: gt,
        ops.JMP: jmp,
        ops.JT: jt,
        ops.JF: jf,

        ops.ADD: add,
        ops.MULT: mul,
        ops.MOD: mod,
        ops.AND: band,
        ops.OR: bor,
        ops.NOT: inv,

        ops.RMEM: rmem,
        ops.WMEM: wmem,
        ops.CALL: cll,
        ops.RET: ret,

        ops.OUT: out,
        ops.IN: inp,
        ops.NOOP: nop
    }

    # -- Implementation -- #

    def fetch(self) -> Instruction:
        instr = decode(self.memory, self.ip)
        # Jumps below overwrite this fall-through address
        self.ip = instr.next_ip
        return instr

    def exec_next(self):
        addr = self.ip
        instr = None

        try:
            instr = self.fetch()
            handler = self.HANDLERS[instr.op]
            handler(self, *instr.args)

        except Fault as e:
            e.locate(addr, None if instr is None else str(instr))
            raise
