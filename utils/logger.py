"""Structured logging for the chunk splitter."""
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional


class ChunkLogger:
    """Structured logger for split operations."""

    def __init__(self, log_dir: str = "logs"):
        """
        Initialize logger with file and console handlers.

        Args:
            log_dir: Directory for log files
        """
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.logger = logging.getLogger("chunker")
        self.logger.setLevel(logging.INFO)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        self.logger.addHandler(console_handler)

        log_file = self.log_dir / f"chunker_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        ))
        self.logger.addHandler(file_handler)

    def log_split_start(self, name: str, chunk_size: int, output_dir: str):
        """Log start of splitting a source."""
        self.logger.info(
            f"SPLIT_START Name={name} | ChunkSize={chunk_size} | OutputDir={output_dir}"
        )

    def log_chunk_written(self, name: str, index: int, size: int, path: Optional[str] = None):
        """Log a single chunk being produced."""
        path_str = f" | Path={path}" if path else ""
        self.logger.info(
            f"CHUNK_WRITTEN Name={name} | Index={index} | Size={size}{path_str}"
        )

    def log_split_failure(self, name: str, chunks_written: int, error: str):
        """Log a split aborted by a read or write error."""
        self.logger.error(
            f"SPLIT_FAILURE Name={name} | ChunksWritten={chunks_written} | Error={error}"
        )

    def log_split_complete(self, name: str, success: bool, chunks_written: int, bytes_written: int):
        """Log completion of a split."""
        status = "SUCCESS" if success else "FAILED"
        self.logger.info(
            f"SPLIT_COMPLETE Name={name} | Status={status} | "
            f"Chunks={chunks_written} | Bytes={bytes_written}"
        )

    def log_error(self, message: str, exc_info: bool = False):
        """Log general error."""
        self.logger.error(message, exc_info=exc_info)

    def log_warning(self, message: str):
        """Log warning."""
        self.logger.warning(message)

    def log_info(self, message: str):
        """Log info message."""
        self.logger.info(message)
