"""Deduplication fingerprints for orders, trades and trace calls.

Each fingerprint is the 64-bit xxHash of a `|`-joined canonical string built
from selected fields. Addresses and hashes are lowercased, integers are
written in decimal. These are dedup keys, not security primitives.
"""

from __future__ import annotations

from collections.abc import Iterable

import xxhash

from etherdelta.core.actions import Trade
from etherdelta.core.constants import ETHERDELTA_ADDRESS
from etherdelta.core.models import Address, Amount, Order, OrderLog, TradeLog


def _canonical(parts: Iterable[object]) -> str:
    return "|".join(p.lower() if isinstance(p, str) else str(p) for p in parts)


def fingerprint(parts: Iterable[object]) -> int:
    """xxHash64 of the canonical join of `parts`."""
    return xxhash.xxh64_intdigest(_canonical(parts).encode())


def order_fingerprint(
    order: Order | OrderLog,
    *,
    user: Address | None = None,
    contract_address: Address = ETHERDELTA_ADDRESS,
) -> int:
    """Fingerprint an order's terms and maker.

    `OrderLog` carries its maker; for an `Order` (call data) pass it as `user`.
    Signature words are left out so a relayed order and its on-chain `Order`
    log agree.
    """
    maker = order.user if isinstance(order, OrderLog) else (user or "")
    return fingerprint((
        contract_address,
        order.token_get,
        order.amount_get,
        order.token_give,
        order.amount_give,
        order.expires,
        order.nonce,
        maker,
    ))


def trade_fingerprint(
    *,
    token_get: Address,
    token_give: Address,
    amount: Amount,
    maker: Address,
    taker: Address,
    tx_hash: str,
) -> int:
    return fingerprint((token_get, token_give, amount, maker, taker, tx_hash))


def trade_action_fingerprint(trade: Trade, *, taker: Address, tx_hash: str) -> int:
    """Fingerprint a `trade()` call; `taker` is the sender of the call."""
    return trade_fingerprint(
        token_get=trade.order.token_get,
        token_give=trade.order.token_give,
        amount=trade.amount,
        maker=trade.user,
        taker=taker,
        tx_hash=tx_hash,
    )


def trade_log_fingerprint(trade: TradeLog, *, tx_hash: str) -> int:
    """Fingerprint a `Trade` log; matches `trade_action_fingerprint` for the same fill."""
    return trade_fingerprint(
        token_get=trade.token_get,
        token_give=trade.token_give,
        amount=trade.amount_get,
        maker=trade.maker,
        taker=trade.taker,
        tx_hash=tx_hash,
    )


def trace_fingerprint(
    transaction_hash: str,
    subtraces: int,
    trace_address: Iterable[int],
    input: str,
) -> int:
    """Fingerprint one traced call by position in its transaction and call data."""
    position = ",".join(str(i) for i in trace_address)
    return fingerprint((transaction_hash, subtraces, position, input))
