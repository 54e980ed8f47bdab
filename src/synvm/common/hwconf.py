WORD_SIZE = 2               # Bytes per word in a program image
WORD_MASK = 0xFFFF          # Anything stored in memory fits 16 bits

MODULUS = 32768             # Arithmetic and register writes are reduced by this
MAX_LITERAL = MODULUS - 1   # Largest value that denotes itself

REG_BASE = MODULUS          # Operand 32768 + r refers to register r
REG_COUNT = 8
MAX_OPERAND = REG_BASE + REG_COUNT - 1

DEFAULT_IMAGE = 'challenge.bin'
