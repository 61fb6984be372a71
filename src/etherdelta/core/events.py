"""Event variants, one per exchange log family."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from etherdelta.core.methods import Topic
from etherdelta.core.models import Address, Amount, Order, OrderLog, TradeLog


class _EventBase:
    __slots__ = ()

    # None for the standalone Order log, which has no dispatchable topic.
    topic: ClassVar[Topic | None]
    event_name: ClassVar[str]

    @property
    def name(self) -> str:
        return self.event_name


@dataclass(slots=True, frozen=True)
class CancelEvent(_EventBase):
    topic: ClassVar[Topic | None] = Topic.CANCEL
    event_name: ClassVar[str] = "Cancel"

    order: Order
    user: Address


@dataclass(slots=True, frozen=True)
class DepositEvent(_EventBase):
    topic: ClassVar[Topic | None] = Topic.DEPOSIT
    event_name: ClassVar[str] = "Deposit"

    token: Address
    user: Address
    amount: Amount
    balance: Amount


@dataclass(slots=True, frozen=True)
class OrderEvent(_EventBase):
    topic: ClassVar[Topic | None] = None
    event_name: ClassVar[str] = "Order"

    order: OrderLog


@dataclass(slots=True, frozen=True)
class TradeEvent(_EventBase):
    topic: ClassVar[Topic | None] = Topic.TRADE
    event_name: ClassVar[str] = "Trade"

    trade: TradeLog


@dataclass(slots=True, frozen=True)
class WithdrawEvent(_EventBase):
    topic: ClassVar[Topic | None] = Topic.WITHDRAW
    event_name: ClassVar[str] = "Withdraw"

    token: Address
    user: Address
    amount: Amount
    balance: Amount


Event = CancelEvent | DepositEvent | OrderEvent | TradeEvent | WithdrawEvent
