from __future__ import annotations

import io
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .engine import Engine
from .errors import BFIOError, SourceError, make_runtime_error
from .program import build_program
from .snapshot import MemorySnapshot


@dataclass(frozen=True)
class RunOptions:
    encoding: str = "utf-8"
    flush_output: bool = True
    trailing_newline: bool = True
    snapshot_radius: int = 5


@dataclass(frozen=True)
class RunResult:
    output: bytes
    data_pointer: int
    steps: int
    tape: bytes
    snapshot: MemorySnapshot


def run_string(
    source: str,
    *,
    input_data: Union[bytes, str] = b"",
    options: Optional[RunOptions] = None,
) -> RunResult:
    """Build and run a program entirely in memory.

    Text input is encoded with ``options.encoding``. The snapshot in the result
    covers ``options.snapshot_radius`` cells either side of the pointer.
    ``trailing_newline`` applies to run_file only; the output here is exactly
    what the program wrote.
    """
    opts = options or RunOptions()
    if isinstance(input_data, str):
        input_data = input_data.encode(opts.encoding)
    program = build_program(source)
    out = io.BytesIO()
    engine = Engine.from_program(
        program,
        input_stream=io.BytesIO(input_data),
        output_stream=out,
        flush_output=opts.flush_output,
    )
    engine.run()
    return RunResult(
        output=out.getvalue(),
        data_pointer=engine.data_pointer,
        steps=engine.steps,
        tape=engine.tape.tobytes(),
        snapshot=engine.snapshot(opts.snapshot_radius),
    )


def run_file(
    path: str | Path,
    *,
    input_stream: Optional[BinaryIO] = None,
    output_stream: Optional[BinaryIO] = None,
    options: Optional[RunOptions] = None,
) -> Engine:
    opts = options or RunOptions()
    p = Path(path)
    try:
        source = p.read_text(encoding=opts.encoding)
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        reason = getattr(exc, 'strerror', None) or str(exc)
        raise SourceError(message=f"Cannot read {path}: {reason}", path=str(path)) from exc
    program = build_program(source)
    engine = Engine.from_program(
        program,
        input_stream=input_stream,
        output_stream=output_stream,
        flush_output=opts.flush_output,
    )
    engine.run()
    if opts.trailing_newline:
        try:
            engine.output_stream.write(b"\n")
            engine.output_stream.flush()
        except (OSError, ValueError) as exc:
            raise make_runtime_error(
                BFIOError,
                message=f"Output failed: {exc}",
                instruction_pointer=engine.instruction_pointer,
                data_pointer=engine.data_pointer,
            ) from exc
    return engine
