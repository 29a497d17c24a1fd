__version__ = "0.1.0"

from .lexer import Instruction, tokenize
from .loops import JumpTable, resolve_loops
from .program import Program, build_program
from .engine import Engine
from .state import TAPE_SIZE, MachineState
from .snapshot import MemorySnapshot, format_snapshot
from .errors import (
    BFIOError,
    BFRuntimeError,
    BFSyntaxError,
    BFVMError,
    JumpTableError,
    PointerOutOfBoundsError,
    SourceError,
    UnmatchedLoopCloseError,
    UnmatchedLoopOpenError,
)
from .api import RunOptions, RunResult, run_file, run_string

__all__ = [
    'Instruction',
    'tokenize',
    'JumpTable',
    'resolve_loops',
    'Program',
    'build_program',
    'Engine',
    'TAPE_SIZE',
    'MachineState',
    'MemorySnapshot',
    'format_snapshot',
    'BFVMError',
    'BFSyntaxError',
    'UnmatchedLoopOpenError',
    'UnmatchedLoopCloseError',
    'BFRuntimeError',
    'PointerOutOfBoundsError',
    'BFIOError',
    'JumpTableError',
    'SourceError',
    'RunOptions',
    'RunResult',
    'run_string',
    'run_file',
]
