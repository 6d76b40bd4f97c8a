"""Tests for chunk file naming helpers."""
from utils.file_stream import chunk_filename, safe_filename, format_file_size


def test_chunk_filename():
    """Test numbered chunk names."""
    assert chunk_filename("archive.tar", 0) == "archive.tar.00000"
    assert chunk_filename("archive.tar", 42) == "archive.tar.00042"
    assert chunk_filename("data", 7, width=2) == "data.07"
    assert chunk_filename("data", 123456) == "data.123456"


def test_safe_filename():
    """Test filename sanitization."""
    assert safe_filename("test/file.txt") == "test_file.txt"
    assert safe_filename("test\\file.txt") == "test_file.txt"
    assert safe_filename("test:file.txt") == "test_file.txt"
    assert safe_filename("test*file.txt") == "test_file.txt"

    long_name = "x" * 300 + ".txt"
    result = safe_filename(long_name, max_length=255)
    assert len(result) <= 255
    assert result.endswith(".txt")

    assert safe_filename("normal_file.txt") == "normal_file.txt"
    assert safe_filename("") == "chunk"


def test_format_file_size():
    """Test file size formatting."""
    assert format_file_size(0) == "0.0 B"
    assert format_file_size(1024) == "1.0 KB"
    assert format_file_size(1024 * 1024) == "1.0 MB"
    assert format_file_size(500) == "500.0 B"
    assert format_file_size(1536) == "1.5 KB"
