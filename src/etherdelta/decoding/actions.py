"""Method decoder: call data (from a transaction or a trace action) → `Action`.

The selector (first 10 chars) picks a `Method`; the remaining payload is split
into that method's word count and assembled in ABI slot order. Order-bearing
calls share the first six slots; calls with a `user` argument put it in slot 6,
which pushes the signature to slots 7-9.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import assert_never

from etherdelta.core.actions import (
    Action,
    AmountFilled,
    AvailableVolume,
    BalanceOf,
    CancelOrder,
    Deposit,
    DepositToken,
    TestTrade,
    Trade,
    Withdraw,
    WithdrawToken,
)
from etherdelta.core.constants import SELECTOR_LENGTH
from etherdelta.core.errors import MissingValueError, TooShortError
from etherdelta.core.interfaces import TraceActionLike, TransactionLike
from etherdelta.core.methods import Method
from etherdelta.core.models import Amount, Order, Word
from etherdelta.decoding.words import as_address, as_amount, as_raw, normalize


def _order(words: Sequence[Word], *, signature_at: int) -> Order:
    """Order terms from slots 0-5, signature (v, r, s) from `signature_at`."""
    return Order(
        token_get=as_address(words[0]),
        amount_get=as_amount(words[1]),
        token_give=as_address(words[2]),
        amount_give=as_amount(words[3]),
        expires=as_amount(words[4]),
        nonce=as_amount(words[5]),
        v=as_amount(words[signature_at]),
        r=as_raw(words[signature_at + 1]),
        s=as_raw(words[signature_at + 2]),
    )


def _assemble(method: Method, words: Sequence[Word], value: Amount | None) -> Action:
    match method:
        case Method.CANCEL_ORDER:
            return CancelOrder(order=_order(words, signature_at=6))
        case Method.DEPOSIT:
            if value is None:
                raise MissingValueError(method.selector)
            return Deposit(amount=value)
        case Method.DEPOSIT_TOKEN:
            return DepositToken(token=as_address(words[0]), amount=as_amount(words[1]))
        case Method.TRADE:
            return Trade(
                order=_order(words, signature_at=7),
                user=as_address(words[6]),
                amount=as_amount(words[10]),
            )
        case Method.WITHDRAW:
            return Withdraw(amount=as_amount(words[0]))
        case Method.WITHDRAW_TOKEN:
            return WithdrawToken(token=as_address(words[0]), amount=as_amount(words[1]))
        case Method.AMOUNT_FILLED:
            return AmountFilled(order=_order(words, signature_at=7), user=as_address(words[6]))
        case Method.AVAILABLE_VOLUME:
            return AvailableVolume(order=_order(words, signature_at=7), user=as_address(words[6]))
        case Method.TEST_TRADE:
            return TestTrade(
                order=_order(words, signature_at=7),
                user=as_address(words[6]),
                amount=as_amount(words[10]),
                sender=as_address(words[11]),
            )
        case Method.BALANCE_OF:
            return BalanceOf(token=as_address(words[0]), user=as_address(words[1]))
        case _:
            assert_never(method)


# ---------- main entry points ----------


def decode_action(call_data: str, value: Amount | None = None) -> Action:
    """Decode contract call data into an `Action`.

    `value` is the wei amount of the enclosing envelope; only `deposit()`
    reads it. Raises a `DecodeError` subclass on any failure.
    """
    if len(call_data) < SELECTOR_LENGTH:
        raise TooShortError(call_data)
    method = Method.from_selector(call_data[:SELECTOR_LENGTH])
    words = normalize(call_data, method.word_count)
    return _assemble(method, words, value)


def decode_transaction_action(tx: TransactionLike) -> Action:
    """Decode the call carried by a transaction envelope."""
    return decode_action(tx.input, tx.value)


def decode_trace_action(action: TraceActionLike) -> Action:
    """Decode the call re-observed in an execution trace action."""
    return decode_action(action.input, action.value)
