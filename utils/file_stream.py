"""File naming and size helpers for chunk output."""


def chunk_filename(base: str, index: int, width: int = 5) -> str:
    """
    Build the file name of a numbered chunk.

    Args:
        base: Base name of the split source
        index: Zero-based chunk index
        width: Minimum number of digits in the suffix

    Returns:
        Name such as "archive.tar.00003"
    """
    return f"{base}.{index:0{width}d}"


def safe_filename(filename: str, max_length: int = 255) -> str:
    """
    Ensure filename is safe and within length limits.

    Args:
        filename: Original filename
        max_length: Maximum filename length

    Returns:
        Safe filename
    """
    # Remove or replace problematic characters
    safe = filename
    for char in '\\/:*?"<>|':
        safe = safe.replace(char, "_")

    # Truncate if too long (preserve extension)
    if len(safe) > max_length:
        parts = safe.rsplit(".", 1)
        if len(parts) == 2:
            name, ext = parts
            max_name_length = max_length - len(ext) - 1
            safe = name[:max_name_length] + "." + ext
        else:
            safe = safe[:max_length]

    return safe or "chunk"


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB")
    """
    for unit in ["B", "KB", "MB", "GB", "TB"]:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"
