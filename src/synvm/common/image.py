''' Program image codec: a flat run of 16-bit little-endian words '''

import struct
from typing import Sequence

from synvm.common.hwconf import WORD_SIZE, WORD_MASK


class ImageError(ValueError):
    pass


def load_image(data: bytes) -> list[int]:
    if len(data) % WORD_SIZE != 0:
        raise ImageError(f'Image length {len(data)} is not a whole number of words')

    count = len(data) // WORD_SIZE
    return list(struct.unpack(f'<{count}H', data))


def dump_image(words: Sequence[int]) -> bytes:
    for offset, word in enumerate(words):
        if not 0 <= word <= WORD_MASK:
            raise ImageError(f'Word {word} at offset {offset} does not fit 16 bits')

    return struct.pack(f'<{len(words)}H', *words)
