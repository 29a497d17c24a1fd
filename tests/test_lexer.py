#!/usr/bin/env python3
"""
Tokenizer: symbol mapping, comment stripping and ordering.
"""

from bfvm import Instruction, tokenize


def test_tokenize_all_symbols():
    assert tokenize("+-><.,[]") == (
        Instruction.INCREMENT,
        Instruction.DECREMENT,
        Instruction.MOVE_RIGHT,
        Instruction.MOVE_LEFT,
        Instruction.OUTPUT,
        Instruction.INPUT,
        Instruction.LOOP_OPEN,
        Instruction.LOOP_CLOSE,
    )


def test_tokenize_with_comments():
    assert tokenize("++ Hello [<]") == (
        Instruction.INCREMENT,
        Instruction.INCREMENT,
        Instruction.LOOP_OPEN,
        Instruction.MOVE_LEFT,
        Instruction.LOOP_CLOSE,
    )


def test_tokenize_empty():
    assert tokenize("") == ()
    assert tokenize("no instructions here\n\t") == ()


def test_tokenize_keeps_count_and_order():
    source = "a+b>c\n[d-e]f,g.h<  +++ é ]["
    tokens = tokenize(source)
    symbols = [ch for ch in source if ch in "+-<>.,[]"]
    assert len(tokens) == len(symbols)
    assert [t.value for t in tokens] == symbols


def test_tokenize_does_not_collapse_runs():
    assert tokenize(">>>>") == (Instruction.MOVE_RIGHT,) * 4
