"""
Binary file reading with an optional byte cap.
"""

from pathlib import Path
from typing import BinaryIO, Optional

READ_BLOCK_SIZE = 64 * 1024


class BinaryReader:
    """Reads raw bytes from a file, optionally stopping after a limit."""

    def __init__(self, file_path: Path):
        """
        Initialize binary reader.

        Args:
            file_path: Path to the file to read
        """
        self.file_path = Path(file_path)
        self.file: Optional[BinaryIO] = None

    def __enter__(self):
        """Context manager entry."""
        self.file = open(self.file_path, 'rb')
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        if self.file:
            self.file.close()
            self.file = None

    def _require_open(self) -> BinaryIO:
        if not self.file:
            raise RuntimeError("File not open. Use as context manager.")
        return self.file

    def read_all(self) -> bytes:
        """Read everything from the current position to end of file."""
        return self._require_open().read()

    def read_at_most(self, limit: int) -> bytes:
        """
        Read until `limit` bytes have been collected or EOF is reached.

        The underlying file is never asked for more than the bytes still
        missing, so a large file is not pulled into memory past the limit.

        Args:
            limit: Maximum number of bytes to return

        Returns:
            Up to `limit` bytes; fewer only if the file ended first
        """
        if limit < 0:
            raise ValueError(f"Byte limit must be non-negative, got {limit}")
        f = self._require_open()
        data = bytearray()
        while len(data) < limit:
            block = f.read(min(READ_BLOCK_SIZE, limit - len(data)))
            if not block:
                break
            data.extend(block)
        return bytes(data)


def read_file(file_path: Path, max_bytes: Optional[int] = None) -> bytes:
    """
    Read a file into memory, truncated to `max_bytes` when given.

    OSError from opening or reading is left to the caller.
    """
    with BinaryReader(file_path) as reader:
        if max_bytes is None:
            return reader.read_all()
        return reader.read_at_most(max_bytes)
