from pathlib import Path
import logging as lg

import click
import pyparsing as pp

from synvm.common.image import dump_image
from synvm.sasm.fpp import FPP, AsmError
import synvm.sasm.grammar as grammar


def assemble(contents: str) -> list[int]:
    # First pass
    first_pass = FPP()

    try:
        actions = grammar.program.parse_string(contents, parse_all=True)

    except pp.ParseBaseException as e:
        raise AsmError(f'Syntax error at line {e.lineno}, column {e.col}: {e.line.strip()}') from e

    for (func, arg) in actions:  # type: ignore
        func(first_pass, arg)

    # Second pass
    words = list(first_pass.words)

    for (ref_offset, labelname) in first_pass.refs:
        if labelname not in first_pass.label_dict:
            raise AsmError(f'Undefined label {labelname}')

        words[ref_offset] = first_pass.label_dict[labelname]

    return words


def compile_source(contents: str) -> bytes:
    return dump_image(assemble(contents))


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.argument('source', type=Path)
@click.argument('binary', type=Path)
def compile(verbose: bool, source: Path, binary: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info("SYNVM ASM")

    bytestr = compile_source(source.read_text())
    binary.parent.mkdir(parents=True, exist_ok=True)
    binary.write_bytes(bytestr)

    lg.info(f'{len(bytestr) // 2} words written to {binary}')


if __name__ == "__main__":
    compile()
