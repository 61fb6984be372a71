import pytest
from helpers import ETH, MAKER, TAKER, ZRX

from etherdelta.core.models import TradeLog
from etherdelta.tokens import Token, price_trade

ETHER = Token(address=ETH, name="Ether", symbol="ETH", decimals=18)
ZRX_TOKEN = Token(address=ZRX, name="0x Protocol Token", symbol="ZRX", decimals=18, total_supply=10**27)
USDC = Token(address=TAKER, name="USD Coin", symbol="USDC", decimals=6)


def _trade(amount_get: int, amount_give: int) -> TradeLog:
    return TradeLog(
        token_get=ETH,
        amount_get=amount_get,
        token_give=ZRX,
        amount_give=amount_give,
        maker=MAKER,
        taker=TAKER,
    )


def test_price_trade_fills_price() -> None:
    trade = _trade(2 * 10**17, 100 * 10**18)
    priced = price_trade(trade, token_get=ETHER, token_give=ZRX_TOKEN)

    assert priced.price == pytest.approx(500.0)
    assert trade.price == 0.0  # input record untouched
    assert priced.amount_get == trade.amount_get


def test_price_trade_uses_each_tokens_decimals() -> None:
    priced = price_trade(_trade(10**18, 2_000 * 10**6), token_get=ETHER, token_give=USDC)
    assert priced.price == pytest.approx(2_000.0)


def test_price_trade_zero_amount() -> None:
    assert price_trade(_trade(0, 10), token_get=ETHER, token_give=ZRX_TOKEN).price == 0.0


def test_to_units() -> None:
    assert USDC.to_units(1_500_000) == pytest.approx(1.5)
