from __future__ import annotations

from .columns import DecodedColumns
from .core.actions import Action
from .core.config import DecoderConfig
from .core.constants import ETHERDELTA_ADDRESS, ETHERDELTA_CREATION_BLOCK
from .core.errors import DecodeError
from .core.events import Event
from .core.methods import Method, Topic
from .core.models import Meta, Order, OrderLog, TradeLog
from .decoding.actions import decode_action, decode_trace_action, decode_transaction_action
from .decoding.events import decode_event, decode_log, decode_order_log
from .fingerprint import order_fingerprint, trade_action_fingerprint, trade_log_fingerprint
from .service import ExchangeDecoder, ExchangeProxyTransaction, ExchangeTransaction

__all__ = [
    "decode_action",
    "decode_trace_action",
    "decode_transaction_action",
    "decode_event",
    "decode_log",
    "decode_order_log",
    "order_fingerprint",
    "trade_action_fingerprint",
    "trade_log_fingerprint",
    "ExchangeDecoder",
    "ExchangeTransaction",
    "ExchangeProxyTransaction",
    "DecodedColumns",
    "DecoderConfig",
    "DecodeError",
    "Action",
    "Event",
    "Method",
    "Topic",
    "Meta",
    "Order",
    "OrderLog",
    "TradeLog",
    "ETHERDELTA_ADDRESS",
    "ETHERDELTA_CREATION_BLOCK",
]
