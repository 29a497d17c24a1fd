#!/usr/bin/env python3
"""
Memory snapshot rendering.
"""

from bfvm import MemorySnapshot, format_snapshot


def test_format_snapshot_rows():
    snap = MemorySnapshot(start=14999, cells=(0, 7, 255), data_pointer=15000)
    lines = format_snapshot(snap).splitlines()
    assert lines[0] == "Addr:  14999  15000  15001"
    assert lines[1] == "Data:      0      7    255"
    assert lines[2] == "Ptrs:         ^^^^^       "


def test_pointer_marker_at_first_column():
    snap = MemorySnapshot(start=0, cells=(1, 2), data_pointer=0)
    assert format_snapshot(snap).splitlines()[2] == "Ptrs:  ^^^^^       "
