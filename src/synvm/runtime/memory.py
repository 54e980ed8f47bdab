from array import array
from typing import Sequence

from synvm.common.hwconf import WORD_MASK
from synvm.runtime.faults import OutOfBounds


class Memory():
    ''' Flat word store shared by code and data '''

    def __init__(self, words: Sequence[int], size: int | None = None):
        if size is None:
            size = len(words)

        if size < len(words):
            raise ValueError(f'Memory of {size} words cannot hold an image of {len(words)}')

        self.cells = array('H', words)
        self.cells.extend([0] * (size - len(words)))

    def __len__(self):
        return len(self.cells)

    def check(self, addr: int):
        if not 0 <= addr < len(self.cells):
            raise OutOfBounds(f'Address {addr} is outside memory of {len(self.cells)} words')

    def read(self, addr: int) -> int:
        self.check(addr)
        return self.cells[addr]

    def write(self, addr: int, value: int):
        self.check(addr)
        self.cells[addr] = value & WORD_MASK
