import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
import logging as lg
from typing import Sequence

import click

from synvm.common.hwconf import DEFAULT_IMAGE
from synvm.common.image import ImageError, load_image
from synvm.runtime.memory import Memory
from synvm.runtime.terminal import Terminal
import synvm.runtime.cpu as cpu


EXIT_HALT = 0
EXIT_FAULT = 1
EXIT_KEYBOARD = 3
EXIT_EXEC_ERROR = 100


class RunStatus(Enum):
    HALTED = 'halted'
    FAULTED = 'faulted'


@dataclass
class RunResult:
    status: RunStatus
    steps: int
    reason: cpu.HaltReason | None = None
    fault: cpu.Fault | None = None

    @property
    def halted(self) -> bool:
        return self.status == RunStatus.HALTED

    @property
    def faulted(self) -> bool:
        return self.status == RunStatus.FAULTED


def execute(image: Sequence[int], terminal: Terminal, mem_words: int | None = None) -> RunResult:
    memory = Memory(image, mem_words)
    proc = cpu.CPU(memory, terminal)
    steps = 0

    try:
        while True:
            proc.exec_next()
            steps += 1

    except cpu.Halt as e:
        lg.info(f'Execution halted: {e.reason.value}')
        return RunResult(RunStatus.HALTED, steps + 1, reason=e.reason)

    except cpu.Fault as e:
        lg.error(f'Execution aborted: {e}')
        proc.debug_dump()
        return RunResult(RunStatus.FAULTED, steps, fault=e)

    finally:
        terminal.flush()


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--mem-words', type=click.IntRange(min=0), help='Memory size in words, image size by default')
@click.argument('image_filename', type=Path, default=DEFAULT_IMAGE)
def run(verbose: bool, mem_words: int | None, image_filename: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('SYNVM')

    try:
        image = load_image(image_filename.read_bytes())

    except (OSError, ImageError) as e:
        lg.error(f'Cannot load {image_filename}: {e}')
        sys.exit(EXIT_EXEC_ERROR)

    if mem_words is not None and mem_words < len(image):
        raise click.BadParameter(
            f'{mem_words} is smaller than the image ({len(image)} words)',
            param_hint='--mem-words'
        )

    try:
        terminal = Terminal(sys.stdin.buffer, sys.stdout.buffer)
        result = execute(image, terminal, mem_words)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        sys.exit(EXIT_KEYBOARD)

    sys.exit(EXIT_HALT if result.halted else EXIT_FAULT)


if __name__ == '__main__':
    run()
