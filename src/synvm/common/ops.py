HLT = 0     # stop
SET = 1     # a <- b
PUSH = 2    # a -> [stack]
POP = 3     # [stack] -> a
EQ = 4      # a <- b == c
GT = 5      # a <- b > c
JMP = 6     # jmp a
JT = 7      # if a != 0 jmp b
JF = 8      # if a == 0 jmp b
ADD = 9     # a <- b + c
MULT = 10   # a <- b * c
MOD = 11    # a <- b % c
AND = 12    # a <- b & c
OR = 13     # a <- b | c
NOT = 14    # a <- ~b (15 bit)
RMEM = 15   # a <- M[b]
WMEM = 16   # M[a] <- b
CALL = 17   # push next; jmp a
RET = 18    # jmp [stack], halt on empty stack
OUT = 19    # a -> terminal
IN = 20     # terminal -> a
NOOP = 21

ARITY = {
    HLT: 0,
    SET: 2,
    PUSH: 1,
    POP: 1,
    EQ: 3,
    GT: 3,
    JMP: 1,
    JT: 2,
    JF: 2,
    ADD: 3,
    MULT: 3,
    MOD: 3,
    AND: 3,
    OR: 3,
    NOT: 2,
    RMEM: 2,
    WMEM: 2,
    CALL: 1,
    RET: 0,
    OUT: 1,
    IN: 1,
    NOOP: 0
}

NAMES = {
    HLT: 'halt',
    SET: 'set',
    PUSH: 'push',
    POP: 'pop',
    EQ: 'eq',
    GT: 'gt',
    JMP: 'jmp',
    JT: 'jt',
    JF: 'jf',
    ADD: 'add',
    MULT: 'mult',
    MOD: 'mod',
    AND: 'and',
    OR: 'or',
    NOT: 'not',
    RMEM: 'rmem',
    WMEM: 'wmem',
    CALL: 'call',
    RET: 'ret',
    OUT: 'out',
    IN: 'in',
    NOOP: 'noop'
}
