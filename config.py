"""Configuration management for the chunk splitter."""
import os
from dataclasses import dataclass
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_CHUNK_SIZE = 1024 * 1024


@dataclass
class Config:
    """Main configuration container."""
    chunk_size: int
    output_dir: str
    log_dir: str
    http_timeout: float  # Seconds, applies to HTTP sources only

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        raw_chunk_size = os.getenv("CHUNK_SIZE", str(DEFAULT_CHUNK_SIZE))
        try:
            chunk_size = int(raw_chunk_size)
        except ValueError:
            chunk_size = 0
        if chunk_size <= 0:
            raise ValueError(
                f"Invalid CHUNK_SIZE {raw_chunk_size!r}: must be a positive integer"
            )

        raw_timeout = os.getenv("CHUNK_HTTP_TIMEOUT", "300")
        try:
            http_timeout = float(raw_timeout)
        except ValueError:
            http_timeout = 0.0
        if http_timeout <= 0:
            raise ValueError(
                f"Invalid CHUNK_HTTP_TIMEOUT {raw_timeout!r}: must be a positive number"
            )

        return cls(
            chunk_size=chunk_size,
            output_dir=os.getenv("CHUNK_OUTPUT_DIR", "chunks"),
            log_dir=os.getenv("CHUNK_LOG_DIR", "logs"),
            http_timeout=http_timeout,
        )
