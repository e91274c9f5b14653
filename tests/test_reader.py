"""
Tests for binary reader.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from wordhex import binary_reader
from wordhex.binary_reader import BinaryReader, read_file


def test_binary_reader_context_manager(tmp_path):
    """Test that BinaryReader works as context manager."""
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(b'\x01\x02\x03\x04')

    with BinaryReader(test_file) as reader:
        assert reader.read_all() == b'\x01\x02\x03\x04'
    assert reader.file is None


def test_read_requires_open(tmp_path):
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(b'\x01')

    reader = BinaryReader(test_file)
    with pytest.raises(RuntimeError):
        reader.read_all()
    with pytest.raises(RuntimeError):
        reader.read_at_most(1)


def test_read_at_most_truncates(tmp_path):
    """Test that the byte limit is honoured."""
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(bytes(range(100)))

    with BinaryReader(test_file) as reader:
        assert reader.read_at_most(10) == bytes(range(10))


def test_read_at_most_past_eof(tmp_path):
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(b'abc')

    with BinaryReader(test_file) as reader:
        assert reader.read_at_most(1000) == b'abc'


def test_read_at_most_zero(tmp_path):
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(b'abc')

    with BinaryReader(test_file) as reader:
        assert reader.read_at_most(0) == b''


def test_read_at_most_negative(tmp_path):
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(b'abc')

    with BinaryReader(test_file) as reader:
        with pytest.raises(ValueError):
            reader.read_at_most(-1)


def test_read_at_most_spans_blocks(tmp_path, monkeypatch):
    """Test reading a limit larger than one block."""
    monkeypatch.setattr(binary_reader, 'READ_BLOCK_SIZE', 4)
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(bytes(range(50)))

    with BinaryReader(test_file) as reader:
        assert reader.read_at_most(13) == bytes(range(13))


def test_read_file(tmp_path):
    test_file = tmp_path / "test.bin"
    test_file.write_bytes(bytes(range(20)))

    assert read_file(test_file) == bytes(range(20))
    assert read_file(test_file, 5) == bytes(range(5))
    assert read_file(str(test_file), 0) == b''


def test_read_file_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.bin")


if __name__ == '__main__':
    pytest.main([__file__])
