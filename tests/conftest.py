import importlib
import io

import pytest

@pytest.fixture(scope="session")
def logic():
    return importlib.import_module("hex_dumper.logic")

@pytest.fixture(scope="session")
def dump():
    return importlib.import_module("hex_dumper.dump")


class Pipe:
    """Read-only, unseekable byte stream that hands out at most ``step`` bytes per read."""
    def __init__(self, data: bytes, step: int = 1 << 20):
        self._buf = io.BytesIO(data)
        self._step = step

    def read(self, n: int = -1) -> bytes:
        if n < 0:
            n = self._step
        return self._buf.read(min(n, self._step))

    def seekable(self) -> bool:
        return False

@pytest.fixture
def pipe():
    return Pipe
