from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


def _build_context(symbols: str, address: int, *, context: int = 20) -> str:
    start = max(0, address - context)
    end = min(len(symbols), address + context + 1)

    snippet = symbols[start:end]
    prefix = '...' if start > 0 else ''
    suffix = '...' if end < len(symbols) else ''
    caret = ' ' * (len(prefix) + address - start) + '^'
    return f"  {prefix}{snippet}{suffix}\n  {caret}"


def _hint_for(message: str, *, kind: str) -> Optional[str]:
    msg = message.lower()
    if kind == 'syntax':
        if "unmatched ']'" in msg:
            return "Every ']' needs an earlier '[' to close. Remove it or add the missing '['."
        if "unmatched '['" in msg:
            return "Every '[' needs a later ']'. Check for a loop that is never closed."
        return None
    if kind == 'runtime':
        if 'out of bounds (left)' in msg:
            return 'The data pointer starts in the middle of the tape; the program moved it past cell 0.'
        if 'out of bounds (right)' in msg:
            return 'The tape does not grow or wrap. Check for a runaway [>] scan.'
        if 'jump table' in msg:
            return 'The jump table does not describe this instruction sequence. Rebuild it with resolve_loops().'
        return None
    return None


@dataclass
class BFVMError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class SourceError(BFVMError):
    path: str = ''


@dataclass
class BFSyntaxError(BFVMError):
    addresses: Tuple[int, ...] = ()
    context: str = ''

    @property
    def address(self) -> int:
        return self.addresses[0]


@dataclass
class UnmatchedLoopOpenError(BFSyntaxError):
    pass


@dataclass
class UnmatchedLoopCloseError(BFSyntaxError):
    pass


@dataclass
class BFRuntimeError(BFVMError):
    instruction_pointer: int = 0
    data_pointer: int = 0


@dataclass
class PointerOutOfBoundsError(BFRuntimeError):
    direction: str = ''


@dataclass
class BFIOError(BFRuntimeError):
    pass


@dataclass
class JumpTableError(BFRuntimeError):
    pass


def make_syntax_error(
    cls: type,
    *,
    message: str,
    symbols: str,
    addresses: Sequence[int],
) -> BFSyntaxError:
    addresses = tuple(addresses)
    ctx = _build_context(symbols, addresses[0])
    hint = _hint_for(message, kind='syntax')
    hint_block = f"\nHint: {hint}" if hint else ""
    return cls(
        message=f"{message}\n{ctx}{hint_block}",
        addresses=addresses,
        context=ctx,
    )


def make_runtime_error(
    cls: type,
    *,
    message: str,
    instruction_pointer: int,
    data_pointer: int,
    **extra,
) -> BFRuntimeError:
    hint = _hint_for(message, kind='runtime')
    hint_block = f"\nHint: {hint}" if hint else ""
    return cls(
        message=f"{message} (ip={instruction_pointer}, dp={data_pointer}){hint_block}",
        instruction_pointer=instruction_pointer,
        data_pointer=data_pointer,
        **extra,
    )
