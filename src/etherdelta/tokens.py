"""ERC20 token metadata and trade pricing.

`TradeLog.price` is not on-chain; it is filled in here once both tokens'
decimals are known.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from etherdelta.core.models import Address, TradeLog


@dataclass(slots=True, frozen=True)
class Token:
    """ERC20 token metadata. `icon_url` is not part of the standard."""

    address: Address
    name: str
    symbol: str
    decimals: int
    total_supply: int = 0
    icon_url: str | None = None

    def to_units(self, amount: int) -> float:
        """Convert a raw integer amount into whole token units."""
        return amount / 10**self.decimals


def price_trade(trade: TradeLog, *, token_get: Token, token_give: Token) -> TradeLog:
    """Return `trade` with `price` = give units per get unit (0.0 if nothing was got)."""
    got = token_get.to_units(trade.amount_get)
    if got == 0:
        return replace(trade, price=0.0)
    return replace(trade, price=token_give.to_units(trade.amount_give) / got)
