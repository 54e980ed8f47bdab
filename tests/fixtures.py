# type: ignore
import pytest

from synvm.common.image import dump_image
import unit_utils


@pytest.fixture
def with_terminal():
    yield unit_utils.make_terminal()


@pytest.fixture
def with_image(tmp_path):
    def write(words):
        path = tmp_path / 'program.bin'
        path.write_bytes(dump_image(words))
        return path

    yield write
