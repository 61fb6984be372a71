from types import SimpleNamespace

import pytest
from helpers import ETH, MAKER, R_WORD, S_WORD, TAKER, ZRX, addr_word, call_data, log_data, order_terms, uint_word

from etherdelta.core.constants import DEPOSIT_T0, TRADE_ID, TRADE_T0


@pytest.fixture
def trade_call() -> str:
    """trade(): order terms, maker, v, r, s, amount."""
    return call_data(
        TRADE_ID,
        order_terms() + [addr_word(MAKER), uint_word(27), R_WORD, S_WORD, uint_word(2 * 10**17)],
    )


@pytest.fixture
def trade_log() -> SimpleNamespace:
    """Trade log for the same fill as `trade_call`."""
    words = [
        addr_word(ETH),
        uint_word(2 * 10**17),
        addr_word(ZRX),
        uint_word(100 * 10**18),
        addr_word(MAKER),
        addr_word(TAKER),
    ]
    return SimpleNamespace(topics=[TRADE_T0], data=log_data(words))


@pytest.fixture
def deposit_log() -> SimpleNamespace:
    words = [addr_word(ZRX), addr_word(MAKER), uint_word(1_000), uint_word(5_000)]
    return SimpleNamespace(topics=[DEPOSIT_T0, "0x" + "0" * 64], data=log_data(words))
