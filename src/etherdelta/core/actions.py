"""Action variants, one per contract method.

Each variant knows the `Method` it was decoded from, so `action.method.selector`
gives back the 4-byte selector of the call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from etherdelta.core.methods import ContractFunction, Method
from etherdelta.core.models import Address, Amount, Order


class _ActionBase:
    __slots__ = ()

    method: ClassVar[Method]

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def function(self) -> ContractFunction:
        return self.method.function

    @property
    def is_mutable(self) -> bool:
        return self.function.is_mutable


# ---- state-changing calls ----


@dataclass(slots=True, frozen=True)
class CancelOrder(_ActionBase):
    method: ClassVar[Method] = Method.CANCEL_ORDER

    order: Order


@dataclass(slots=True, frozen=True)
class Deposit(_ActionBase):
    method: ClassVar[Method] = Method.DEPOSIT

    amount: Amount


@dataclass(slots=True, frozen=True)
class DepositToken(_ActionBase):
    method: ClassVar[Method] = Method.DEPOSIT_TOKEN

    token: Address
    amount: Amount


@dataclass(slots=True, frozen=True)
class Trade(_ActionBase):
    """`user` is the order's maker; the taker is whoever sent the call."""

    method: ClassVar[Method] = Method.TRADE

    order: Order
    user: Address
    amount: Amount


@dataclass(slots=True, frozen=True)
class Withdraw(_ActionBase):
    method: ClassVar[Method] = Method.WITHDRAW

    amount: Amount


@dataclass(slots=True, frozen=True)
class WithdrawToken(_ActionBase):
    method: ClassVar[Method] = Method.WITHDRAW_TOKEN

    token: Address
    amount: Amount


# ---- constant calls ----


@dataclass(slots=True, frozen=True)
class AmountFilled(_ActionBase):
    method: ClassVar[Method] = Method.AMOUNT_FILLED

    order: Order
    user: Address


@dataclass(slots=True, frozen=True)
class AvailableVolume(_ActionBase):
    method: ClassVar[Method] = Method.AVAILABLE_VOLUME

    order: Order
    user: Address


@dataclass(slots=True, frozen=True)
class TestTrade(_ActionBase):
    __test__ = False  # not a pytest class

    method: ClassVar[Method] = Method.TEST_TRADE

    order: Order
    user: Address
    amount: Amount
    sender: Address


@dataclass(slots=True, frozen=True)
class BalanceOf(_ActionBase):
    method: ClassVar[Method] = Method.BALANCE_OF

    token: Address
    user: Address


Action = (
    CancelOrder
    | Deposit
    | DepositToken
    | Trade
    | Withdraw
    | WithdrawToken
    | AmountFilled
    | AvailableVolume
    | TestTrade
    | BalanceOf
)
