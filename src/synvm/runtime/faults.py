from enum import Enum


class HaltReason(Enum):
    HLT = 'halt instruction'
    RET = 'return with empty stack'
    EOF = 'input exhausted'


class Halt(Exception):
    ''' Graceful end of execution, not an error '''

    def __init__(self, reason: HaltReason):
        super().__init__(reason.value)
        self.reason = reason


class Fault(Exception):
    ''' Fatal machine condition, aborts the run '''

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.addr: int | None = None
        self.instr: str | None = None

    def locate(self, addr: int, instr: str | None = None):
        # First recorded location is kept
        if self.addr is None:
            self.addr = addr
            self.instr = instr

    def __str__(self):
        if self.addr is None:
            return self.message

        where = f'0x{self.addr:04X}'

        if self.instr is not None:
            where = f'{where} ({self.instr})'

        return f'{self.message} at {where}'


class InvalidOpcode(Fault):
    pass


class InvalidOperand(Fault):
    pass


class OutOfBounds(Fault):
    pass


class DivisionByZero(Fault):
    pass


class StackUnderflow(Fault):
    pass
