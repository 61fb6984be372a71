import logging
from types import SimpleNamespace

import pytest
from helpers import ERC20_TRANSFER_T0, MAKER, TAKER, addr_word, uint_word

from etherdelta.core.actions import Deposit, Trade, Withdraw
from etherdelta.core.config import DecoderConfig
from etherdelta.core.constants import ETHERDELTA_ADDRESS
from etherdelta.core.errors import UnknownMethodError, UnknownTopicError
from etherdelta.core.events import DepositEvent, TradeEvent
from etherdelta.core.models import OrderLog
from etherdelta.fingerprint import order_fingerprint
from etherdelta.objects import Log
from etherdelta.service import ExchangeDecoder

TX_HASH = "0x" + "3c" * 32


@pytest.fixture
def transfer_log() -> SimpleNamespace:
    return SimpleNamespace(topics=[ERC20_TRANSFER_T0], data="0x" + uint_word(1))


def _tx(input: str, value: int = 0) -> SimpleNamespace:
    return SimpleNamespace(to_address=ETHERDELTA_ADDRESS, value=value, input=input)


def _trace(input: str, value: int | None = None) -> SimpleNamespace:
    return SimpleNamespace(action=SimpleNamespace(input=input, value=value))


def test_decode_transaction_skips_foreign_logs(
    trade_call: str, trade_log: SimpleNamespace, transfer_log: SimpleNamespace
) -> None:
    result = ExchangeDecoder().decode_transaction(_tx(trade_call), [transfer_log, trade_log])

    assert isinstance(result.action, Trade)
    assert len(result.events) == 1
    assert isinstance(result.events[0], TradeEvent)
    assert result.is_success


def test_reverted_transaction_has_no_events() -> None:
    result = ExchangeDecoder().decode_transaction(_tx("0xd0e30db0", value=10**18))
    assert result.action == Deposit(amount=10**18)
    assert not result.is_success


def test_undecodable_call_raises() -> None:
    with pytest.raises(UnknownMethodError):
        ExchangeDecoder().decode_transaction(_tx("0xa9059cbb" + addr_word(MAKER) + uint_word(1)))


def test_strict_mode_raises_on_foreign_logs(transfer_log: SimpleNamespace) -> None:
    decoder = ExchangeDecoder(DecoderConfig(strict=True))
    with pytest.raises(UnknownTopicError):
        decoder.decode_events([transfer_log])


def test_skipped_logs_are_logged(transfer_log: SimpleNamespace, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="etherdelta.service"):
        assert ExchangeDecoder().decode_events([transfer_log]) == []
    assert "Skipping undecodable log" in caplog.text


def test_proxy_transaction_keeps_one_entry_per_trace(deposit_log: SimpleNamespace) -> None:
    traces = [
        _trace("0xa9059cbb" + addr_word(TAKER) + uint_word(5)),
        _trace("0x2e1a7d4d" + uint_word(1000)),
        _trace("0xd0e30db0", value=7),
    ]
    result = ExchangeDecoder().decode_proxy_transaction(_tx("0x"), traces, [deposit_log])

    assert [action for _, action in result.actions] == [None, Withdraw(amount=1000), Deposit(amount=7)]
    assert result.actions[0][0] is traces[0]
    assert isinstance(result.events[0], DepositEvent)


def test_collect_builds_columns(deposit_log: SimpleNamespace) -> None:
    logs = [
        Log(
            address=ETHERDELTA_ADDRESS,
            topics=deposit_log.topics,
            data=deposit_log.data,
            block_number=11,
            transaction_hash=TX_HASH,
            log_index=4,
        ),
        Log(address=MAKER, topics=[ERC20_TRANSFER_T0], data="0x", block_number=11, transaction_hash=TX_HASH, log_index=5),
    ]
    buf = ExchangeDecoder().collect(logs)

    assert buf.size() == 1
    assert buf.name == ["Deposit"]
    assert buf.log_index == [4]
    assert buf.to_arrow_table().column("balance").to_pylist() == ["5000"]


def test_order_fingerprint_uses_configured_contract() -> None:
    order = OrderLog(
        token_get=MAKER, amount_get=1, token_give=TAKER, amount_give=2, expires=3, nonce=4, user=MAKER
    )
    other = ExchangeDecoder(DecoderConfig(contract_address=TAKER))

    assert ExchangeDecoder().order_fingerprint(order) == order_fingerprint(order)
    assert other.order_fingerprint(order) != order_fingerprint(order)
