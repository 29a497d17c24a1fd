from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Tuple

from .lexer import Instruction, tokenize
from .loops import JumpTable, resolve_loops

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Program:
    source: str
    instructions: Tuple[Instruction, ...]
    jump_table: JumpTable

    @property
    def loop_count(self) -> int:
        return len(self.jump_table) // 2

    def __len__(self) -> int:
        return len(self.instructions)


def build_program(source: str) -> Program:
    instructions = tokenize(source)
    jump_table = resolve_loops(instructions)
    program = Program(source=source, instructions=instructions, jump_table=jump_table)
    logger.debug("built program: %d instructions, %d loops", len(program), program.loop_count)
    return program
