"""Closed dispatch enumerations for method selectors and log topics.

- `Method`: the ten contract methods, keyed by their 4-byte selector
- `Topic`: the four dispatchable events, keyed by topic0
- `METHOD_SPECS` / `EVENT_SPECS`: read-only metadata (word count, names)

Both enumerations are looked up by exact value; anything outside the set raises
`UnknownMethodError` / `UnknownTopicError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from etherdelta.core.constants import (
    AMOUNT_FILLED_ID,
    AVAILABLE_VOLUME_ID,
    BALANCE_OF_ID,
    CANCEL_ORDER_ID,
    CANCEL_T0,
    DEPOSIT_ID,
    DEPOSIT_T0,
    DEPOSIT_TOKEN_ID,
    TEST_TRADE_ID,
    TRADE_ID,
    TRADE_T0,
    WITHDRAW_ID,
    WITHDRAW_T0,
    WITHDRAW_TOKEN_ID,
)
from etherdelta.core.errors import UnknownMethodError, UnknownTopicError

CONTRACT_NAME = "EtherDelta"

# Standalone `Order` log payload. No topic maps to it.
ORDER_LOG_WORDS = 7


class Mutability(str, Enum):
    MUTABLE = "mutable"
    IMMUTABLE = "immutable"


@dataclass(frozen=True, slots=True)
class ContractFunction:
    """Qualified contract function name plus whether calling it changes state."""

    name: str
    mutability: Mutability

    @property
    def is_mutable(self) -> bool:
        return self.mutability is Mutability.MUTABLE


@dataclass(frozen=True, slots=True)
class MethodSpec:
    name: str
    word_count: int
    mutability: Mutability


@dataclass(frozen=True, slots=True)
class EventSpec:
    name: str
    word_count: int


class Method(str, Enum):
    CANCEL_ORDER = CANCEL_ORDER_ID
    DEPOSIT = DEPOSIT_ID
    DEPOSIT_TOKEN = DEPOSIT_TOKEN_ID
    TRADE = TRADE_ID
    WITHDRAW = WITHDRAW_ID
    WITHDRAW_TOKEN = WITHDRAW_TOKEN_ID
    AMOUNT_FILLED = AMOUNT_FILLED_ID
    AVAILABLE_VOLUME = AVAILABLE_VOLUME_ID
    TEST_TRADE = TEST_TRADE_ID
    BALANCE_OF = BALANCE_OF_ID

    @classmethod
    def from_selector(cls, selector: str) -> Method:
        try:
            return cls(selector.lower())
        except ValueError:
            raise UnknownMethodError(selector) from None

    @property
    def selector(self) -> str:
        return self.value

    @property
    def word_count(self) -> int:
        return METHOD_SPECS[self].word_count

    @property
    def function(self) -> ContractFunction:
        spec = METHOD_SPECS[self]
        return ContractFunction(f"{CONTRACT_NAME}.{spec.name}", spec.mutability)


class Topic(str, Enum):
    CANCEL = CANCEL_T0
    TRADE = TRADE_T0
    DEPOSIT = DEPOSIT_T0
    WITHDRAW = WITHDRAW_T0

    @classmethod
    def from_topic(cls, topic: str) -> Topic:
        try:
            return cls(topic.lower())
        except ValueError:
            raise UnknownTopicError(topic) from None

    @property
    def topic0(self) -> str:
        return self.value

    @property
    def word_count(self) -> int:
        return EVENT_SPECS[self].word_count

    @property
    def event_name(self) -> str:
        return EVENT_SPECS[self].name


_M, _I = Mutability.MUTABLE, Mutability.IMMUTABLE

# Word counts exclude the selector. `deposit` reads its amount from the envelope.
METHOD_SPECS: MappingProxyType[Method, MethodSpec] = MappingProxyType({
    Method.CANCEL_ORDER:     MethodSpec("cancelOrder", 9, _M),
    Method.DEPOSIT:          MethodSpec("deposit", 0, _M),
    Method.DEPOSIT_TOKEN:    MethodSpec("depositToken", 2, _M),
    Method.TRADE:            MethodSpec("trade", 11, _M),
    Method.WITHDRAW:         MethodSpec("withdraw", 1, _M),
    Method.WITHDRAW_TOKEN:   MethodSpec("withdrawToken", 2, _M),
    Method.AMOUNT_FILLED:    MethodSpec("amountFilled", 10, _I),
    Method.AVAILABLE_VOLUME: MethodSpec("availableVolume", 10, _I),
    Method.TEST_TRADE:       MethodSpec("testTrade", 12, _I),
    Method.BALANCE_OF:       MethodSpec("balanceOf", 2, _I),
})

EVENT_SPECS: MappingProxyType[Topic, EventSpec] = MappingProxyType({
    Topic.CANCEL:   EventSpec("Cancel", 10),
    Topic.TRADE:    EventSpec("Trade", 6),
    Topic.DEPOSIT:  EventSpec("Deposit", 4),
    Topic.WITHDRAW: EventSpec("Withdraw", 4),
})
