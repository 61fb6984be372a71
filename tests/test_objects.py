from helpers import MAKER, addr_word, uint_word

from etherdelta.core.actions import Deposit, Withdraw
from etherdelta.core.constants import DEPOSIT_T0, ETHERDELTA_ADDRESS
from etherdelta.core.events import DepositEvent
from etherdelta.core.interfaces import LogLike, TraceLike, TransactionLike
from etherdelta.decoding.actions import decode_trace_action, decode_transaction_action
from etherdelta.decoding.events import decode_event
from etherdelta.objects import Log, Trace, Transaction

TX_HASH = "0x" + "3c" * 32


def test_transaction_from_rpc_dict() -> None:
    tx = Transaction.model_validate(
        {
            "hash": TX_HASH,
            "from": MAKER,
            "to": ETHERDELTA_ADDRESS,
            "value": "0xde0b6b3a7640000",
            "input": "0xd0e30db0",
            "blockNumber": "0x4c4b40",
            "transactionIndex": "0x3",
            "gasPrice": "0x4a817c800",
        }
    )

    assert tx.value == 10**18
    assert tx.block_number == 5_000_000
    assert tx.transaction_index == 3
    assert tx.from_address == MAKER
    assert tx.to_address == ETHERDELTA_ADDRESS
    assert isinstance(tx, TransactionLike)
    assert decode_transaction_action(tx) == Deposit(amount=10**18)


def test_trace_from_rpc_dict() -> None:
    trace = Trace.model_validate(
        {
            "action": {
                "callType": "call",
                "from": MAKER,
                "to": ETHERDELTA_ADDRESS,
                "input": "0x2e1a7d4d" + uint_word(1000),
                "gas": "0x1d4c0",
            },
            "blockNumber": 5_000_000,
            "transactionHash": TX_HASH,
            "transactionPosition": 12,
            "subtraces": 0,
            "traceAddress": [0, 2],
            "type": "call",
        }
    )

    assert trace.action.value is None
    assert trace.action.call_type == "call"
    assert trace.trace_address == (0, 2)
    assert isinstance(trace, TraceLike)
    assert decode_trace_action(trace.action) == Withdraw(amount=1000)


def test_log_from_rpc_dict() -> None:
    data = "0x" + addr_word(MAKER) + addr_word(MAKER) + uint_word(1) + uint_word(2)
    log = Log.model_validate(
        {
            "address": ETHERDELTA_ADDRESS,
            "topics": ["0x" + DEPOSIT_T0[2:].upper()],
            "data": data,
            "blockNumber": "0x10",
            "transactionHash": TX_HASH.upper().replace("0X", "0x"),
            "logIndex": "0x2",
        }
    )

    assert log.topics == (DEPOSIT_T0,)
    assert isinstance(log, LogLike)
    assert decode_event(log) == DepositEvent(token=MAKER, user=MAKER, amount=1, balance=2)

    meta = log.meta()
    assert meta.block_number == 16
    assert meta.log_index == 2
    assert meta.tx_hash == TX_HASH
    assert meta.block_timestamp is None


def test_log_accepts_raw_topic_bytes() -> None:
    log = Log(address=ETHERDELTA_ADDRESS, topics=[bytes.fromhex(DEPOSIT_T0[2:])], data="0x")
    assert log.topics == (DEPOSIT_T0,)
