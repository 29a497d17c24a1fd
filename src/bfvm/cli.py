from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, TextIO

from . import __version__
from .api import RunOptions, run_file
from .errors import BFVMError
from .repl import Repl
from .snapshot import format_snapshot


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bfvm",
        description="Brainfuck virtual machine. Runs FILE, or starts a REPL when no file is given.",
    )
    parser.add_argument("file", nargs="?", help="Program to run")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    parser.add_argument("--encoding", default="utf-8", help="Source file encoding (default utf-8)")
    parser.add_argument("--no-newline", action="store_true", help="Do not print a newline after the program finishes")
    parser.add_argument("--dump", action="store_true", help="Print a memory snapshot to stderr after the run")
    parser.add_argument("--radius", type=int, default=5, help="Cells shown either side of the pointer (default 5)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: Optional[List[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Entry point. The text streams default to sys.std*; file mode uses their
    ``buffer`` for program I/O."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stderr = stderr if stderr is not None else sys.stderr

    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=stderr,
    )

    radius = max(0, args.radius)

    if args.file is None:
        return Repl(stdin, stdout, stderr, snapshot_radius=radius).run()

    options = RunOptions(
        encoding=args.encoding,
        trailing_newline=not args.no_newline,
        snapshot_radius=radius,
    )
    try:
        engine = run_file(
            args.file,
            input_stream=stdin.buffer,
            output_stream=stdout.buffer,
            options=options,
        )
    except BFVMError as e:
        stdout.flush()
        print(e, file=stderr)
        return 1

    if args.dump:
        print(format_snapshot(engine.snapshot(options.snapshot_radius)), file=stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
