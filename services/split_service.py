"""Split service writing a stream out as numbered chunk files."""
from pathlib import Path
from typing import List, Optional

from utils.chunked import chunked, validate_chunk_size
from utils.fill import Readable
from utils.file_stream import chunk_filename, safe_filename
from utils.logger import ChunkLogger


class SplitResult:
    """Result of a split operation."""

    def __init__(self, name: str):
        self.name = name
        self.chunks_written: int = 0
        self.bytes_written: int = 0
        self.files: List[Path] = []
        self.success: bool = False
        self.error_message: Optional[str] = None


class SplitService:
    """Service for splitting streams into fixed-size chunk files."""

    def __init__(
        self,
        chunk_size: int,
        output_dir: str,
        logger: ChunkLogger,
        dry_run: bool = False,
    ):
        """
        Initialize split service.

        Args:
            chunk_size: Size of each chunk file in bytes
            output_dir: Directory receiving the chunk files
            logger: Chunk logger
            dry_run: If True, read and count chunks but write no files

        Raises:
            ValueError: If chunk_size is not a positive integer
        """
        self.chunk_size = validate_chunk_size(chunk_size)
        self.output_dir = Path(output_dir)
        self.logger = logger
        self.dry_run = dry_run

    def split(self, stream: Readable, name: str) -> SplitResult:
        """
        Split a stream into chunk files named ``<name>.00000``, ``<name>.00001``, ...

        Earlier chunk files for the same name are removed first. The stream
        is read to exhaustion but not closed.

        Args:
            stream: Object implementing ``readinto``
            name: Base name for the chunk files

        Returns:
            SplitResult with outcome details
        """
        base = safe_filename(name)
        result = SplitResult(base)

        self.logger.log_split_start(base, self.chunk_size, str(self.output_dir))

        try:
            if not self.dry_run:
                self.output_dir.mkdir(parents=True, exist_ok=True)
                self._remove_stale_chunks(base)

            for index, chunk in enumerate(chunked(stream, self.chunk_size)):
                path = self.output_dir / chunk_filename(base, index)
                if self.dry_run:
                    self.logger.log_info(
                        f"DRY-RUN: Would write {len(chunk)} bytes to {path}"
                    )
                else:
                    path.write_bytes(chunk)
                    result.files.append(path)

                result.chunks_written += 1
                result.bytes_written += len(chunk)
                self.logger.log_chunk_written(
                    base, index, len(chunk), None if self.dry_run else str(path)
                )

            result.success = True

        except Exception as e:
            result.error_message = str(e)
            self.logger.log_split_failure(base, result.chunks_written, str(e))
            self.logger.log_error(f"Error splitting {base}: {e}", exc_info=True)

        self.logger.log_split_complete(
            name=base,
            success=result.success,
            chunks_written=result.chunks_written,
            bytes_written=result.bytes_written,
        )

        return result

    def _remove_stale_chunks(self, base: str):
        """
        Delete chunk files left in the output directory by an earlier split of ``base``.

        Only names of the form ``<base>.<digits>`` are touched.

        Args:
            base: Sanitized base name
        """
        prefix = f"{base}."
        for path in sorted(self.output_dir.iterdir()):
            suffix = path.name[len(prefix):]
            if path.name.startswith(prefix) and suffix.isdigit() and path.is_file():
                self.logger.log_warning(f"Removing stale chunk {path}")
                path.unlink()
