from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

_COL = 7


@dataclass(frozen=True)
class MemorySnapshot:
    start: int
    cells: Tuple[int, ...]
    data_pointer: int

    @property
    def addresses(self) -> range:
        return range(self.start, self.start + len(self.cells))


def format_snapshot(snapshot: MemorySnapshot) -> str:
    """Three aligned rows: addresses, cell values, and a marker under the data pointer."""
    addr_row = "Addr:" + "".join(f"{a:>{_COL}}" for a in snapshot.addresses)
    data_row = "Data:" + "".join(f"{v:>{_COL}}" for v in snapshot.cells)
    ptr_row = "Ptrs:" + "".join(
        "  ^^^^^" if a == snapshot.data_pointer else " " * _COL for a in snapshot.addresses
    )
    return "\n".join([addr_row, data_row, ptr_row])
