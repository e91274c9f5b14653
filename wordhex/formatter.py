"""
Hex dump formatting.

Each output line covers 16 bytes: an 8-digit offset followed by 2-byte
groups shown as little-endian words, e.g.

    00000000 0100 0302 0504 0706 0908 0b0a 0d0c 0f0e
    00000010 1110 1312
"""

from typing import BinaryIO, Iterator

LINE_WIDTH = 16
GROUP_SIZE = 2
OFFSET_DIGITS = 8


def chunks(data: bytes, size: int) -> Iterator[bytes]:
    """Split data into consecutive pieces of at most `size` bytes."""
    for i in range(0, len(data), size):
        yield data[i:i + size]


def format_group(group: bytes) -> str:
    """Render a 2-byte group with its bytes swapped, or a lone trailing byte."""
    if len(group) == 2:
        return f'{group[1]:02x}{group[0]:02x}'
    if len(group) == 1:
        return f'{group[0]:02x}'
    raise ValueError(f"Group must be 1 or 2 bytes, got {len(group)}")


def format_line(offset: int, chunk: bytes) -> str:
    """Render one dump line (without the trailing newline)."""
    parts = [f'{offset:0{OFFSET_DIGITS}x}']
    for group in chunks(chunk, GROUP_SIZE):
        parts.append(format_group(group))
    return ' '.join(parts)


def hex_dump(data: bytes) -> str:
    """
    Format bytes as a hex dump.

    Args:
        data: Bytes to dump; empty input gives an empty string

    Returns:
        Dump text, one newline-terminated line per 16-byte chunk
    """
    lines = []
    for index, chunk in enumerate(chunks(data, LINE_WIDTH)):
        lines.append(format_line(index * LINE_WIDTH, chunk) + '\n')
    return ''.join(lines)


def dump_stream(stream: BinaryIO) -> str:
    """Read a binary stream to the end and format it."""
    return hex_dump(stream.read())
