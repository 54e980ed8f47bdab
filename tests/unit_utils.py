import io
from pathlib import Path
from typing import Sequence

import pytest

from synvm.runtime.memory import Memory
from synvm.runtime.terminal import Terminal
import synvm.runtime.cpu as cpu
import synvm.runtime.emulator as emulator
import synvm.sasm.asm as asm


def find_file(filename: str) -> Path:
    return Path(__file__).parent / filename


def load_file(filename: str) -> str:
    return find_file(filename).read_text()


def make_terminal(stdin: bytes = b'') -> Terminal:
    return Terminal(io.BytesIO(stdin), io.BytesIO())


def output_of(terminal: Terminal) -> bytes:
    return terminal.outstream.getvalue()  # type: ignore


def make_cpu(words: Sequence[int], stdin: bytes = b'', size: int | None = None) -> cpu.CPU:
    return cpu.CPU(Memory(words, size), make_terminal(stdin))


def run_to_halt(proc: cpu.CPU) -> cpu.HaltReason:
    with pytest.raises(cpu.Halt) as e:
        while True:
            proc.exec_next()

    return e.value.reason


def execute_source(source: str, stdin: bytes = b'') -> tuple[emulator.RunResult, bytes]:
    terminal = make_terminal(stdin)
    result = emulator.execute(asm.assemble(source), terminal)
    return result, output_of(terminal)


def execute_program(name: str, stdin: bytes = b'') -> tuple[emulator.RunResult, bytes]:
    return execute_source(load_file(f'testdata/programs/{name}.sasm'), stdin)
