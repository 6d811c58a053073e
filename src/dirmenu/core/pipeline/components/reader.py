from __future__ import annotations

"""
Resilient File Reading Component.

Streams file content with encoding resilience so that menu generation is
not interrupted by binary artifacts or corrupted UTF-8 sequences.
"""

from typing import Iterator

# -----------------------------------------------------------------------------
# STREAM READING OPERATIONS
# -----------------------------------------------------------------------------

def stream_file_content(file_path: str) -> Iterator[str]:
    """
    Generate a line-by-line stream of file content.

    Unrecognized byte sequences are replaced with placeholder characters
    instead of raising UnicodeDecodeError.

    Args:
        file_path: Path to the target file.

    Yields:
        str: Decoded lines from the file.
    """
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            yield line


def read_file_content(file_path: str) -> str:
    """
    Read a whole file through the resilient stream.

    Raises:
        OSError: If the file cannot be opened.
    """
    return "".join(stream_file_content(file_path))
