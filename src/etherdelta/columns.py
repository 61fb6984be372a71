"""Columnar buffer for decoded actions and events.

- Base columns are always present and strongly typed.
- Every record field (see `record_values`) becomes a dynamic column, created
  lazily the first time a record carrying it is appended.
- Dynamic values are stored as strings (or None) so uint256 amounts survive
  the trip to Arrow exactly.
- `to_arrow_table` sorts on (block_number, tx_hash, log_index).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

import pyarrow as pa

from etherdelta.core.actions import Action
from etherdelta.core.events import Event
from etherdelta.core.models import Meta, record_values

Kind = Literal["action", "event"]

_BASE_FIELDS: list[tuple[str, pa.DataType]] = [
    ("block_number", pa.uint64()),
    ("block_timestamp", pa.uint64()),
    ("tx_hash", pa.string()),
    ("log_index", pa.uint64()),
    ("kind", pa.string()),
    ("name", pa.string()),
]


@dataclass(slots=True)
class DecodedColumns:
    block_number: list[int] = field(default_factory=list)
    block_timestamp: list[int] = field(default_factory=list)
    tx_hash: list[str] = field(default_factory=list)
    log_index: list[int | None] = field(default_factory=list)
    kind: list[Kind] = field(default_factory=list)
    name: list[str] = field(default_factory=list)

    dyn: dict[str, list[str | None]] = field(default_factory=dict)
    _rows: int = 0

    def size(self) -> int:
        """Number of rows currently stored."""
        return self._rows

    def _ensure_dyn_col(self, name: str) -> list[str | None]:
        col = self.dyn.get(name)
        if col is None:
            col = [None] * self._rows
            self.dyn[name] = col
        return col

    def append(self, meta: Meta, record: Action | Event) -> None:
        """Append one decoded record; its fields become (or fill) dynamic columns."""
        self.block_number.append(meta.block_number)
        self.block_timestamp.append(int(meta.block_timestamp or 0))
        self.tx_hash.append(meta.tx_hash)
        self.log_index.append(meta.log_index)
        self.kind.append("event" if isinstance(record, Event) else "action")
        self.name.append(record.name)
        self._rows += 1
        for col in self.dyn.values():
            col.append(None)
        for k, v in record_values(record).items():
            self._ensure_dyn_col(k)[-1] = None if v is None else str(v)

    def extend(self, other: DecodedColumns) -> int:
        """Merge `other` into self; align dynamic columns by name."""
        n = other.size()
        if n == 0:
            return 0

        old_rows = self._rows
        self.block_number.extend(other.block_number)
        self.block_timestamp.extend(other.block_timestamp)
        self.tx_hash.extend(other.tx_hash)
        self.log_index.extend(other.log_index)
        self.kind.extend(other.kind)
        self.name.extend(other.name)
        self._rows += n

        for k in set(self.dyn) | set(other.dyn):
            if k not in self.dyn:
                self.dyn[k] = [None] * old_rows
            ocol = other.dyn.get(k)
            self.dyn[k].extend(ocol if ocol is not None else [None] * n)
        return n

    def to_arrow_table(self) -> pa.Table:
        """Convert the buffer to a sorted Arrow table with deterministic schema."""
        fields = [pa.field(n, t) for n, t in _BASE_FIELDS]
        arrays: dict[str, pa.Array] = {
            "block_number": pa.array(self.block_number, type=pa.uint64()),
            "block_timestamp": pa.array(self.block_timestamp, type=pa.uint64()),
            "tx_hash": pa.array(self.tx_hash, type=pa.string()),
            "log_index": pa.array(self.log_index, type=pa.uint64()),
            "kind": pa.array(self.kind, type=pa.string()),
            "name": pa.array(self.name, type=pa.string()),
        }
        for name in sorted(self.dyn):
            fields.append(pa.field(name, pa.string()))
            arrays[name] = pa.array(self.dyn[name], type=pa.string())
        return pa.Table.from_pydict(arrays, schema=pa.schema(fields)).sort_by(
            [("block_number", "ascending"), ("tx_hash", "ascending"), ("log_index", "ascending")]
        )
