from __future__ import annotations

import logging
import sys
from typing import BinaryIO, Optional, Sequence

from .errors import (
    BFIOError,
    JumpTableError,
    PointerOutOfBoundsError,
    make_runtime_error,
)
from .lexer import Instruction
from .loops import JumpTable
from .snapshot import MemorySnapshot
from .state import TAPE_SIZE, MachineState

logger = logging.getLogger(__name__)


class Engine:
    """Executes one instruction sequence against a fixed byte tape.

    The engine owns its tape and both pointers. ``load()`` swaps in a new
    program but keeps the tape, so a shell can feed it successive fragments.
    """

    def __init__(
        self,
        sequence: Sequence[Instruction],
        jump_table: JumpTable,
        *,
        input_stream: Optional[BinaryIO] = None,
        output_stream: Optional[BinaryIO] = None,
        flush_output: bool = False,
    ):
        self.state = MachineState()
        self.input_stream = input_stream if input_stream is not None else sys.stdin.buffer
        self.output_stream = output_stream if output_stream is not None else sys.stdout.buffer
        self.flush_output = flush_output
        self.load(sequence, jump_table)

    @classmethod
    def from_program(cls, program, **kwargs) -> "Engine":
        return cls(program.instructions, program.jump_table, **kwargs)

    def load(self, sequence: Sequence[Instruction], jump_table: JumpTable) -> None:
        self.sequence = tuple(sequence)
        self.jump_table = jump_table
        self.state.instruction_pointer = 0
        self.fault = None

    def reset(self) -> None:
        self.state.reset()
        self.fault = None
        logger.debug("engine reset")

    @property
    def halted(self) -> bool:
        return self.state.instruction_pointer >= len(self.sequence)

    @property
    def faulted(self) -> bool:
        return self.fault is not None

    @property
    def data_pointer(self) -> int:
        return self.state.data_pointer

    @property
    def instruction_pointer(self) -> int:
        return self.state.instruction_pointer

    @property
    def tape(self):
        return self.state.tape

    @property
    def current_cell(self) -> int:
        return self.state.cell

    @property
    def steps(self) -> int:
        return self.state.steps

    def run(self) -> None:
        while self.step():
            pass
        logger.debug("halted after %d steps (dp=%d)", self.state.steps, self.state.data_pointer)

    def step(self) -> bool:
        """Execute one instruction. Returns False once the program has halted.

        A faulted engine stays faulted: every further step re-raises the same
        error until load() or reset().
        """
        if self.fault is not None:
            raise self.fault
        st = self.state
        if st.instruction_pointer >= len(self.sequence):
            return False

        op = self.sequence[st.instruction_pointer]

        if op is Instruction.MOVE_RIGHT:
            if st.data_pointer + 1 >= TAPE_SIZE:
                raise self._error(
                    PointerOutOfBoundsError, "Data pointer out of bounds (right)", direction='right'
                )
            st.data_pointer += 1
        elif op is Instruction.MOVE_LEFT:
            if st.data_pointer == 0:
                raise self._error(
                    PointerOutOfBoundsError, "Data pointer out of bounds (left)", direction='left'
                )
            st.data_pointer -= 1
        elif op is Instruction.INCREMENT:
            st.cell = st.cell + 1
        elif op is Instruction.DECREMENT:
            st.cell = st.cell - 1
        elif op is Instruction.OUTPUT:
            self._write(st.cell)
        elif op is Instruction.INPUT:
            st.cell = self._read()
        elif op is Instruction.LOOP_OPEN:
            if st.cell == 0:
                st.instruction_pointer = self._jump('[')
        elif op is Instruction.LOOP_CLOSE:
            if st.cell != 0:
                st.instruction_pointer = self._jump(']')

        st.instruction_pointer += 1
        st.steps += 1
        return st.instruction_pointer < len(self.sequence)

    def snapshot(self, radius: int = 5) -> MemorySnapshot:
        dp = self.state.data_pointer
        start = max(0, dp - radius)
        end = min(TAPE_SIZE, dp + radius + 1)
        cells = tuple(int(v) for v in self.state.tape[start:end])
        return MemorySnapshot(start=start, cells=cells, data_pointer=dp)

    def _jump(self, symbol: str) -> int:
        ip = self.state.instruction_pointer
        try:
            return self.jump_table[ip]
        except KeyError:
            raise self._error(JumpTableError, f"Jump table missing entry for '{symbol}' at {ip}") from None

    def _write(self, value: int) -> None:
        try:
            self.output_stream.write(bytes((value,)))
            if self.flush_output:
                self.output_stream.flush()
        except (OSError, ValueError) as exc:
            raise self._error(BFIOError, f"Output failed: {exc}") from exc

    def _read(self) -> int:
        try:
            data = self.input_stream.read(1)
        except (OSError, ValueError) as exc:
            raise self._error(BFIOError, f"Input failed: {exc}") from exc
        if not data:
            return 0
        return data[0]

    def _error(self, cls, message: str, **extra):
        self.fault = make_runtime_error(
            cls,
            message=message,
            instruction_pointer=self.state.instruction_pointer,
            data_pointer=self.state.data_pointer,
            **extra,
        )
        return self.fault
