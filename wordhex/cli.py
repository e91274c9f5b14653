#!/usr/bin/env python3
"""
Command-line interface for wordhex.

Usage:
    wordhex FILE
    wordhex -n LEN FILE
"""

import sys
from pathlib import Path
from typing import List, Optional

# Handle imports for both module and direct execution
try:
    from .arguments import ArgumentError, parse_args
    from .binary_reader import read_file
    from .formatter import hex_dump
except ImportError:
    sys.path.insert(0, str(Path(__file__).parent.parent))
    from wordhex.arguments import ArgumentError, parse_args
    from wordhex.binary_reader import read_file
    from wordhex.formatter import hex_dump

DEFAULT_PROGRAM = 'wordhex'


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the dump for one invocation.

    Returns the process exit code. File errors are not caught.
    """
    if argv is None:
        argv = sys.argv
    program = argv[0] if argv else DEFAULT_PROGRAM

    try:
        args = parse_args(argv)
    except ArgumentError as err:
        print(err.message(program), file=sys.stderr)
        return 1

    data = read_file(args.filename, args.max_bytes)
    sys.stdout.write(hex_dump(data))
    return 0


def run():
    """Console script entry point."""
    sys.exit(main())


if __name__ == '__main__':
    run()
