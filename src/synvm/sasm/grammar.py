''' Assembly grammar, parse actions yield (handler, argument) pairs '''

import pyparsing as pp

import synvm.common.ops as ops
from synvm.sasm.fpp import FPP


id = pp.Word(pp.alphas + '_', pp.alphanums + '_')
comment = pp.Regex(r'//.*')

label = (id + pp.Suppress(':')).set_parse_action(lambda r: (FPP.on_label, r[0]))

reg_op = pp.Regex(r'r[0-7]\b').set_parse_action(lambda r: (FPP.on_reg, int(r[0][1])))
const_op = pp.Regex(r'[0-9]+').set_parse_action(lambda r: (FPP.on_const, int(r[0])))
char_op = pp.QuotedString("'", esc_char='\\').set_parse_action(lambda r: (FPP.on_char, r[0]))
ref_op = (pp.Suppress('&') + id).set_parse_action(lambda r: (FPP.on_ref, r[0]))

operand = reg_op | const_op | char_op | ref_op


def g_cmd(literal: str, op: int):
    cmd = pp.Keyword(literal).set_parse_action(lambda _: (FPP.issue_op, op))

    for _ in range(ops.ARITY[op]):
        cmd = cmd + operand

    return cmd


asm_cmd = pp.MatchFirst([g_cmd(name, op) for op, name in ops.NAMES.items()])

# Directives
word_dir = pp.Suppress(pp.Keyword('.word')) + pp.OneOrMore(operand)
text_dir = (
    pp.Suppress(pp.Keyword('.text')) + pp.QuotedString('"', esc_char='\\')
).set_parse_action(lambda r: (FPP.on_text, r[0]))

statement = label | word_dir | text_dir | asm_cmd
program = pp.ZeroOrMore(statement)
program.ignore(comment)
