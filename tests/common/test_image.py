import pytest

from synvm.common.image import ImageError, load_image, dump_image


def test_load_little_endian():
    assert load_image(b'\x09\x00\x00\x80\xff\x7f') == [9, 32768, 32767]


def test_load_empty():
    assert load_image(b'') == []


def test_load_odd_length():
    with pytest.raises(ImageError):
        load_image(b'\x13\x00\x41')


def test_dump():
    assert dump_image([19, 65, 0]) == b'\x13\x00\x41\x00\x00\x00'


@pytest.mark.parametrize('word', [-1, 0x10000])
def test_dump_rejects_wide_words(word):
    with pytest.raises(ImageError):
        dump_image([0, word])
