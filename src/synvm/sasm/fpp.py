import logging as lg
from typing import List, Tuple, Dict

from synvm.common.hwconf import MAX_LITERAL, REG_BASE


class AsmError(Exception):
    pass


class FPP:
    ''' First pass processor '''
    words: List[int]
    refs: List[Tuple[int, str]]
    label_dict: Dict[str, int]

    def __init__(self):
        self.words = list()
        self.refs = list()
        self.label_dict = dict()

    @property
    def offset(self) -> int:
        return len(self.words)

    # Handlers
    def issue_word(self, word: int):
        self.words.append(word)

    def issue_op(self, op: int):
        lg.debug(f'Issuing command {op} @ 0x{self.offset:X}')
        self.issue_word(op)

    def on_const(self, word: int):
        if word > MAX_LITERAL:
            raise AsmError(f'Literal {word} is out of range 0..{MAX_LITERAL}')

        self.issue_word(word)

    def on_char(self, text: str):
        if len(text) != 1:
            raise AsmError(f'Character literal {text!r} must be exactly one character')

        self.on_const(ord(text))

    def on_text(self, text: str):
        for ch in text:
            self.on_char(ch)

    def on_reg(self, index: int):
        self.issue_word(REG_BASE + index)

    def on_label(self, labelname: str):
        if labelname in self.label_dict:
            raise AsmError(f'Label {labelname} is already defined')

        self.label_dict[labelname] = self.offset
        lg.debug(f'Label {labelname} @ 0x{self.offset:X}')

    def on_ref(self, labelname: str):
        lg.debug(f'Ref {labelname}')

        self.refs.append((self.offset, labelname))
        self.issue_word(0)  # placeholder
