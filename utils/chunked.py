"""Fixed-size chunk iteration over readable streams."""
import logging
from typing import Iterator, Optional

from utils.fill import Readable, fill

logger = logging.getLogger(__name__)


def validate_chunk_size(size: int) -> int:
    """
    Check that a chunk size is a positive integer.

    Raises:
        ValueError: If size is zero, negative or not an int
    """
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ValueError(f"Chunk size must be a positive integer, got {size!r}")
    return size


class ChunkedReader:
    """
    Iterator yielding successive ``size``-byte chunks of a stream.

    Every chunk is exactly ``size`` bytes except possibly the last one.
    Errors raised while reading propagate out of ``__next__`` unchanged; the
    reader itself stays usable, so what happens on the following call is up
    to the wrapped stream. Not safe to share between threads.
    """

    def __init__(self, stream: Readable, size: int):
        """
        Wrap a stream.

        Args:
            stream: Object implementing ``readinto``; the reader assumes
                exclusive use of it until ``into_inner`` is called
            size: Chunk size in bytes, must be positive

        Raises:
            ValueError: If size is not a positive integer
        """
        validate_chunk_size(size)

        self._stream: Optional[Readable] = stream
        self._size = size

    @property
    def size(self) -> int:
        """Chunk size in bytes."""
        return self._size

    def __iter__(self) -> Iterator[bytes]:
        return self

    def __next__(self) -> bytes:
        if self._stream is None:
            raise ValueError("ChunkedReader has been detached from its stream")

        buf = bytearray(self._size)
        n = fill(self._stream, buf)
        if n == 0:
            logger.debug("Stream exhausted")
            raise StopIteration

        logger.debug(f"Read chunk of {n} bytes")
        # Copy out: the stream may still hold a view of buf
        return bytes(memoryview(buf)[:n])

    def into_inner(self) -> Readable:
        """
        Detach and return the wrapped stream.

        The stream is positioned right after the last chunk returned. The
        reader cannot be used afterwards.

        Returns:
            The stream originally passed in

        Raises:
            ValueError: If the stream was already detached
        """
        if self._stream is None:
            raise ValueError("ChunkedReader has been detached from its stream")

        stream, self._stream = self._stream, None
        return stream

    def __repr__(self) -> str:
        return f"ChunkedReader(stream={self._stream!r}, size={self._size})"


def chunked(stream: Readable, size: int) -> ChunkedReader:
    """
    Split a stream into chunks of ``size`` bytes.

    Nothing is read until the first chunk is requested.

    Args:
        stream: Object implementing ``readinto``
        size: Chunk size in bytes, must be positive

    Returns:
        ChunkedReader over the stream

    Raises:
        ValueError: If size is not a positive integer
    """
    return ChunkedReader(stream, size)
