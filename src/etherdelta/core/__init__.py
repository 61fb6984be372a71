"""Core data models, error kinds, configuration and protocol constants.

This package provides:
- Payload records (Order, OrderLog, TradeLog, Meta)
- Action and Event variants
- Method / Topic dispatch enumerations
- DecodeError hierarchy
- DecoderConfig
"""

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
from etherdelta.core.config import DecoderConfig
from etherdelta.core.errors import (
    DecodeError,
    InvalidAddressError,
    InvalidIntegerError,
    LengthMismatchError,
    MissingTopicError,
    MissingValueError,
    TooShortError,
    UnknownMethodError,
    UnknownTopicError,
)
from etherdelta.core.events import CancelEvent, DepositEvent, Event, OrderEvent, TradeEvent, WithdrawEvent
from etherdelta.core.methods import ContractFunction, Method, Mutability, Topic
from etherdelta.core.models import Meta, Order, OrderLog, TradeLog

__all__ = [
    "Action",
    "AmountFilled",
    "AvailableVolume",
    "BalanceOf",
    "CancelOrder",
    "Deposit",
    "DepositToken",
    "TestTrade",
    "Trade",
    "Withdraw",
    "WithdrawToken",
    "DecoderConfig",
    "DecodeError",
    "InvalidAddressError",
    "InvalidIntegerError",
    "LengthMismatchError",
    "MissingTopicError",
    "MissingValueError",
    "TooShortError",
    "UnknownMethodError",
    "UnknownTopicError",
    "CancelEvent",
    "DepositEvent",
    "Event",
    "OrderEvent",
    "TradeEvent",
    "WithdrawEvent",
    "ContractFunction",
    "Method",
    "Mutability",
    "Topic",
    "Meta",
    "Order",
    "OrderLog",
    "TradeLog",
]
