from __future__ import annotations

from enum import Enum
from typing import Tuple


class Instruction(Enum):
    MOVE_RIGHT = '>'
    MOVE_LEFT = '<'
    INCREMENT = '+'
    DECREMENT = '-'
    OUTPUT = '.'
    INPUT = ','
    LOOP_OPEN = '['
    LOOP_CLOSE = ']'

    def __repr__(self) -> str:
        return f"Instruction.{self.name}"


_SYMBOLS = {ins.value: ins for ins in Instruction}


def tokenize(source: str) -> Tuple[Instruction, ...]:
    """Convert source text to instructions. Anything that is not one of the
    eight symbols is a comment and is dropped."""
    return tuple(_SYMBOLS[ch] for ch in source if ch in _SYMBOLS)


def to_symbols(sequence) -> str:
    return ''.join(ins.value for ins in sequence)
