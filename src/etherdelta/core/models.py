"""Core payload records shared by actions and events.

This module defines:
- `Order`: order terms plus raw signature components, as found in call data.
- `OrderLog`: order terms plus the maker, as emitted by an `Order` log.
- `TradeLog`: an executed trade as emitted by a `Trade` log.
- `Meta`: where a decoded record was observed (block / tx / log index).

Design notes
------------
- Addresses are lowercase 0x-prefixed strings (low 20 bytes of a word).
- Amounts are plain Python ints (uint256, never truncated).
- Words (`r`, `s`) are kept as the raw 64-char hex slot.
- Records are frozen; derived values (e.g. `TradeLog.price`) are set by
  building a new record.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass
from typing import Any

Address = str
Amount = int
Word = str


@dataclass(slots=True, frozen=True)
class Order:
    token_get: Address
    amount_get: Amount
    token_give: Address
    amount_give: Amount
    expires: Amount
    nonce: Amount
    v: Amount
    r: Word
    s: Word


@dataclass(slots=True, frozen=True)
class OrderLog:
    token_get: Address
    amount_get: Amount
    token_give: Address
    amount_give: Amount
    expires: Amount
    nonce: Amount
    user: Address


@dataclass(slots=True, frozen=True)
class TradeLog:
    """Executed trade. `price` is 0.0 until token decimals are known."""

    token_get: Address
    amount_get: Amount
    token_give: Address
    amount_give: Amount
    maker: Address
    taker: Address
    price: float = 0.0


@dataclass(slots=True, frozen=True)
class Meta:
    """Lightweight metadata for a single decoded observation."""

    block_number: int
    block_timestamp: int | None
    tx_hash: str
    log_index: int | None = None


def record_values(record: Any) -> dict[str, Any]:
    """Flatten an action/event into `{field: value}`; nested records are inlined."""
    out: dict[str, Any] = {}
    for f in fields(record):
        value = getattr(record, f.name)
        if is_dataclass(value):
            out.update(record_values(value))
        else:
            out[f.name] = value
    return out
