"""Shared fixtures: scripted streams for partial, interrupted and failing reads."""
import pytest


class ScriptedStream:
    """
    In-memory stream whose ``readinto`` follows a script.

    Each script entry is either an int (cap on bytes returned by that call)
    or an exception instance (raised by that call). Once the script runs
    out, reads return as much as fits.
    """

    def __init__(self, data: bytes, script=None):
        self.data = data
        self.pos = 0
        self.script = list(script or [])
        self.calls = 0

    def readinto(self, buffer) -> int:
        self.calls += 1
        limit = len(buffer)
        if self.script:
            step = self.script.pop(0)
            if isinstance(step, BaseException):
                raise step
            limit = min(limit, step)
        chunk = self.data[self.pos:self.pos + limit]
        buffer[:len(chunk)] = chunk
        self.pos += len(chunk)
        return len(chunk)


@pytest.fixture
def scripted_stream():
    """Factory for ScriptedStream instances."""
    return ScriptedStream
