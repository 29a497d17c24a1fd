from __future__ import annotations

import sys
from typing import Optional, TextIO

from .engine import Engine
from .errors import BFRuntimeError, BFSyntaxError
from .program import build_program
from .snapshot import format_snapshot
from .streams import TextSink, TextSource

BANNER = (
    "Brainfuck REPL\n"
    "Type 'exit' to exit, 'mem' to show memory snapshot, 'reset' to clear the tape."
)


class Repl:
    """Line shell over one engine. The tape survives between lines until 'reset'."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        *,
        snapshot_radius: int = 5,
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.snapshot_radius = snapshot_radius
        self.engine = Engine(
            (),
            {},
            input_stream=TextSource(self.stdin),
            output_stream=TextSink(self.stdout),
            flush_output=True,
        )

    def run(self) -> int:
        """Read lines until EOF or exit. Returns the process exit code."""
        print(BANNER, file=self.stdout)
        while True:
            self.stdout.write("> ")
            self.stdout.flush()

            try:
                line = self.stdin.readline()
            except (OSError, UnicodeDecodeError) as e:
                print(file=self.stdout)
                print(f"Cannot read input: {e}", file=self.stderr)
                return 1
            if not line:
                print(file=self.stdout)
                return 0

            if not self.handle(line.strip()):
                return 0

    def handle(self, line: str) -> bool:
        """Process one input line. Returns False when the shell should stop."""
        if not line:
            return True
        if line in ('exit', 'quit'):
            return False
        if line in ('mem', 'memory'):
            print(format_snapshot(self.engine.snapshot(self.snapshot_radius)), file=self.stdout)
            return True
        if line == 'reset':
            self.engine.reset()
            print("Tape reset.", file=self.stdout)
            return True

        try:
            program = build_program(line)
        except BFSyntaxError as e:
            print(e, file=self.stderr)
            return True

        if not len(program):
            return True

        self.engine.load(program.instructions, program.jump_table)
        try:
            self.engine.run()
        except BFRuntimeError as e:
            print(e, file=self.stderr)
            return True

        print(f"Cell[DP={self.engine.data_pointer}] = {self.engine.current_cell}", file=self.stdout)
        return True
