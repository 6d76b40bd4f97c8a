"""Main CLI entrypoint for splitting files, stdin or URLs into fixed-size chunks."""
import sys
import argparse
from pathlib import Path
from urllib.parse import urlparse

from config import Config
from services.split_service import SplitService
from sources.http_source import HttpSource
from utils.file_stream import format_file_size
from utils.logger import ChunkLogger


def default_name(source: str) -> str:
    """Derive the chunk base name from a SOURCE argument."""
    if source == "-":
        return "stdin"
    if HttpSource.is_url(source):
        return Path(urlparse(source).path).name or urlparse(source).netloc or "download"
    return Path(source).name


def positive_int(value: str) -> int:
    """argparse type for positive integers."""
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value!r}")
    return number


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Split a file, stdin or HTTP(S) URL into fixed-size chunk files"
    )
    parser.add_argument(
        "source",
        help="Path to read, '-' for stdin, or an http(s):// URL",
    )
    parser.add_argument(
        "--chunk-size",
        type=positive_int,
        help="Chunk size in bytes (default: CHUNK_SIZE or 1048576)",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        help="Directory for chunk files (default: CHUNK_OUTPUT_DIR or ./chunks)",
    )
    parser.add_argument(
        "--name",
        type=str,
        help="Base name for chunk files (default: derived from SOURCE)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Read and count chunks without writing any files",
    )

    args = parser.parse_args(argv)

    try:
        config = Config.from_env()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    chunk_size = args.chunk_size or config.chunk_size
    output_dir = args.output_dir or config.output_dir
    name = args.name or default_name(args.source)

    try:
        logger = ChunkLogger(config.log_dir)
        logger.log_info("=" * 60)
        logger.log_info("Chunk Splitter Starting")
        logger.log_info(f"Source: {args.source}")
        logger.log_info(f"Chunk size: {chunk_size} ({format_file_size(chunk_size)})")
        logger.log_info(f"Dry-run mode: {args.dry_run}")
        logger.log_info("=" * 60)

        service = SplitService(
            chunk_size=chunk_size,
            output_dir=output_dir,
            logger=logger,
            dry_run=args.dry_run,
        )

        if args.source == "-":
            result = service.split(sys.stdin.buffer, name)
        elif HttpSource.is_url(args.source):
            stream = HttpSource(timeout=config.http_timeout).open(args.source)
            try:
                result = service.split(stream, name)
            finally:
                stream.close()
        else:
            with open(args.source, "rb") as stream:
                result = service.split(stream, name)

        logger.log_info("=" * 60)
        logger.log_info("Split Summary")
        logger.log_info("=" * 60)
        logger.log_info(f"Chunks: {result.chunks_written}")
        logger.log_info(f"Bytes: {result.bytes_written} ({format_file_size(result.bytes_written)})")
        if result.error_message:
            logger.log_info(f"Error: {result.error_message}")
        logger.log_info("=" * 60)

        return 0 if result.success else 1

    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
