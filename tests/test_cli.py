#!/usr/bin/env python3
"""
Command line entry point: exit codes and stream usage.
"""

import io

import pytest

from bfvm import __version__
from bfvm.cli import main


class _Std(io.StringIO):
    """Text stream with a binary buffer, like sys.stdout."""

    def __init__(self, data=b""):
        super().__init__()
        self.buffer = io.BytesIO(data)


def run_main(argv, input_data=b"x"):
    stdin, stdout, stderr = _Std(input_data), _Std(), _Std()
    code = main(argv, stdin=stdin, stdout=stdout, stderr=stderr)
    return code, stdout, stderr


def test_run_file_success(tmp_path):
    path = tmp_path / "p.bf"
    path.write_text(",+.")
    code, stdout, stderr = run_main([str(path)])
    assert code == 0
    assert stdout.buffer.getvalue() == b"y\n"
    assert stderr.getvalue() == ""


def test_no_newline_and_dump(tmp_path):
    path = tmp_path / "p.bf"
    path.write_text("+++")
    code, stdout, stderr = run_main([str(path), "--no-newline", "--dump", "--radius", "1"])
    assert code == 0
    assert stdout.buffer.getvalue() == b""
    assert "Data:      0      3      0" in stderr.getvalue()


def test_syntax_error_exit_code(tmp_path):
    path = tmp_path / "bad.bf"
    path.write_text("[<>]++[]]")
    code, stdout, stderr = run_main([str(path)])
    assert code == 1
    assert "Unmatched ']' at index 8" in stderr.getvalue()
    assert stdout.buffer.getvalue() == b""


def test_runtime_error_exit_code(tmp_path):
    path = tmp_path / "left.bf"
    path.write_text("<" * 15001)
    code, _, stderr = run_main([str(path)])
    assert code == 1
    assert "out of bounds (left)" in stderr.getvalue()


def test_missing_file(tmp_path):
    code, _, stderr = run_main([str(tmp_path / "missing.bf")])
    assert code == 1
    assert "Cannot read" in stderr.getvalue()


def test_unknown_encoding(tmp_path):
    path = tmp_path / "p.bf"
    path.write_text("+")
    code, _, stderr = run_main([str(path), "--encoding", "bogus"])
    assert code == 1
    assert stderr.getvalue().startswith(f"Cannot read {path}: unknown encoding")


def test_no_file_starts_repl():
    stdin, stdout, stderr = _Std(), _Std(), _Std()
    stdin.write("+++\nexit\n")
    stdin.seek(0)
    assert main([], stdin=stdin, stdout=stdout, stderr=stderr) == 0
    assert "Brainfuck REPL" in stdout.getvalue()
    assert "Cell[DP=15000] = 3" in stdout.getvalue()


def test_repl_read_error_exit_code():
    stdin = io.TextIOWrapper(io.BytesIO(b"\xff\xfe+\n"), encoding="utf-8")
    stdout, stderr = _Std(), _Std()
    assert main([], stdin=stdin, stdout=stdout, stderr=stderr) == 1
    assert "Cannot read input" in stderr.getvalue()


def test_version(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--version"])
    assert info.value.code == 0
    assert __version__ in capsys.readouterr().out
