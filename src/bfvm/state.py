from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

TAPE_SIZE = 30000


def _blank_tape() -> np.ndarray:
    return np.zeros(TAPE_SIZE, dtype=np.uint8)


@dataclass
class MachineState:
    tape: np.ndarray = field(default_factory=_blank_tape)
    data_pointer: int = TAPE_SIZE // 2
    instruction_pointer: int = 0
    steps: int = 0

    @property
    def cell(self) -> int:
        return int(self.tape[self.data_pointer])

    @cell.setter
    def cell(self, value: int) -> None:
        self.tape[self.data_pointer] = np.uint8(value & 0xFF)

    def reset(self) -> None:
        self.tape.fill(0)
        self.data_pointer = TAPE_SIZE // 2
        self.instruction_pointer = 0
        self.steps = 0
