"""Event decoder: raw log (topics + data) → `Event`.

topic0 picks a `Topic`; `data` must hold exactly that event's word count.
Deposit and Withdraw share one layout and one routine.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import assert_never

from eth_utils import encode_hex

from etherdelta.core.errors import MissingTopicError
from etherdelta.core.events import CancelEvent, DepositEvent, Event, OrderEvent, TradeEvent, WithdrawEvent
from etherdelta.core.interfaces import LogLike
from etherdelta.core.methods import ORDER_LOG_WORDS, Topic
from etherdelta.core.models import Order, OrderLog, TradeLog, Word
from etherdelta.decoding.words import as_address, as_amount, as_raw, normalize


def topic_hex(topic: str | bytes) -> str:
    """Return a topic as lowercase 0x-hex, whatever form the RPC layer gave it."""
    if isinstance(topic, (bytes, bytearray)):
        return encode_hex(topic)
    return topic.lower()


# ---------- per-event routines ----------


def _decode_cancel(words: Sequence[Word]) -> CancelEvent:
    # get, amtGet, give, amtGive, expires, nonce, user, v, r, s
    return CancelEvent(
        order=Order(
            token_get=as_address(words[0]),
            amount_get=as_amount(words[1]),
            token_give=as_address(words[2]),
            amount_give=as_amount(words[3]),
            expires=as_amount(words[4]),
            nonce=as_amount(words[5]),
            v=as_amount(words[7]),
            r=as_raw(words[8]),
            s=as_raw(words[9]),
        ),
        user=as_address(words[6]),
    )


def _decode_trade(words: Sequence[Word]) -> TradeEvent:
    return TradeEvent(
        trade=TradeLog(
            token_get=as_address(words[0]),
            amount_get=as_amount(words[1]),
            token_give=as_address(words[2]),
            amount_give=as_amount(words[3]),
            maker=as_address(words[4]),
            taker=as_address(words[5]),
        )
    )


def _decode_transfer(topic: Topic, words: Sequence[Word]) -> DepositEvent | WithdrawEvent:
    token = as_address(words[0])
    user = as_address(words[1])
    amount = as_amount(words[2])
    balance = as_amount(words[3])
    if topic is Topic.DEPOSIT:
        return DepositEvent(token=token, user=user, amount=amount, balance=balance)
    return WithdrawEvent(token=token, user=user, amount=amount, balance=balance)


def decode_order_log(data: str) -> OrderEvent:
    """Decode a standalone `Order` log payload (7 words).

    No topic in the dispatch table leads here; callers that know a log is an
    order registration may call it directly.
    """
    words = normalize(data, ORDER_LOG_WORDS)
    return OrderEvent(
        order=OrderLog(
            token_get=as_address(words[0]),
            amount_get=as_amount(words[1]),
            token_give=as_address(words[2]),
            amount_give=as_amount(words[3]),
            expires=as_amount(words[4]),
            nonce=as_amount(words[5]),
            user=as_address(words[6]),
        )
    )


# ---------- main entry points ----------


def decode_log(topics: Sequence[str | bytes], data: str) -> Event:
    """Decode a log given as its topics and data. Raises `DecodeError` subclasses."""
    if not topics:
        raise MissingTopicError()
    topic = Topic.from_topic(topic_hex(topics[0]))
    words = normalize(data, topic.word_count)
    match topic:
        case Topic.CANCEL:
            return _decode_cancel(words)
        case Topic.TRADE:
            return _decode_trade(words)
        case Topic.DEPOSIT | Topic.WITHDRAW:
            return _decode_transfer(topic, words)
        case _:
            assert_never(topic)


def decode_event(log: LogLike) -> Event:
    """Decode an exchange event log."""
    return decode_log(log.topics, log.data)
