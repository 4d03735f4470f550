import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from encloop.config import LoopConfig


class SpyStream:
    """Wraps a real text stream and records write/read/close calls."""

    def __init__(self, stream, path, calls):
        self._stream = stream
        self._path = path
        self.calls = calls

    def write(self, s):
        self.calls.append(("write", len(s)))
        return self._stream.write(s)

    def read(self, size=-1):
        self.calls.append(("read", size))
        return self._stream.read(size)

    def close(self):
        self.calls.append(("close", os.path.exists(self._path)))
        self._stream.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


@pytest.fixture
def calls():
    return []


@pytest.fixture
def spy_opener(calls):
    def _open(path, mode, **kwargs):
        return SpyStream(open(path, mode, **kwargs), path, calls)
    return _open


@pytest.fixture
def make_cfg(tmp_path):
    def _make(**overrides):
        params = {"temp_dir": str(tmp_path)}
        params.update(overrides)
        return LoopConfig(**params)
    return _make
