"""Buffer filling on top of partial, interruptible reads."""
import logging
from typing import Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Readable(Protocol):
    """Anything with a single-shot ``readinto`` (files, BytesIO, raw sockets)."""

    def readinto(self, buffer) -> Optional[int]:
        ...


def fill(stream: Readable, buffer) -> int:
    """
    Fill the given buffer from a stream.

    Calls ``stream.readinto`` on the unfilled suffix of ``buffer`` until it
    reports 0 bytes, raises an error other than ``InterruptedError``, or the
    buffer is full. ``InterruptedError`` is retried immediately with no limit.

    Args:
        stream: Object implementing ``readinto``
        buffer: Writable buffer (bytearray, memoryview, ...) of any length

    Returns:
        Number of bytes written, never more than ``len(buffer)``. A smaller
        count means the stream had no more data available.

    Raises:
        ValueError: If the stream reports more bytes than it was offered
        Exception: Anything else ``readinto`` raises, unchanged
    """
    view = memoryview(buffer).cast("B")
    total = len(view)
    bytes_read = 0
    try:
        while bytes_read < total:
            remaining = total - bytes_read
            try:
                n = stream.readinto(view[bytes_read:])
            except InterruptedError:
                logger.debug(f"Interrupted read at offset {bytes_read}, retrying")
                continue

            # None: non-blocking stream with nothing ready
            if not n:
                break
            if n > remaining:
                raise ValueError(
                    f"readinto reported {n} bytes for a {remaining}-byte buffer"
                )
            bytes_read += n
    finally:
        view.release()

    return bytes_read


class FillMixin:
    """
    Adds ``fill`` and ``chunked`` to any class that defines ``readinto``.

    Example:
        class Source(FillMixin, io.RawIOBase): ...
    """

    def fill(self, buffer) -> int:
        """Fill ``buffer`` from ``self``. See :func:`fill`."""
        return fill(self, buffer)

    def chunked(self, size: int):
        """Return a ChunkedReader over ``self``. See :func:`utils.chunked.chunked`."""
        from utils.chunked import ChunkedReader
        return ChunkedReader(self, size)
