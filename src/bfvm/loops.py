from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Sequence

from .errors import UnmatchedLoopCloseError, UnmatchedLoopOpenError, make_syntax_error
from .lexer import Instruction, to_symbols

JumpTable = Mapping[int, int]


def resolve_loops(sequence: Sequence[Instruction]) -> JumpTable:
    """Match brackets and return a read-only, two-way address map.

    Raises UnmatchedLoopCloseError at the first ']' with nothing open, or
    UnmatchedLoopOpenError listing every '[' still open at the end.
    """
    jump_table: Dict[int, int] = {}
    stack: List[int] = []

    for pos, ins in enumerate(sequence):
        if ins is Instruction.LOOP_OPEN:
            stack.append(pos)
        elif ins is Instruction.LOOP_CLOSE:
            if not stack:
                raise make_syntax_error(
                    UnmatchedLoopCloseError,
                    message=f"Unmatched ']' at index {pos}",
                    symbols=to_symbols(sequence),
                    addresses=[pos],
                )
            start = stack.pop()
            jump_table[start] = pos
            jump_table[pos] = start

    if stack:
        message = f"Unmatched '[' at index {stack[0]}"
        if len(stack) > 1:
            message += f" (open loops at {', '.join(str(p) for p in stack)})"
        raise make_syntax_error(
            UnmatchedLoopOpenError,
            message=message,
            symbols=to_symbols(sequence),
            addresses=stack,
        )

    return MappingProxyType(jump_table)
