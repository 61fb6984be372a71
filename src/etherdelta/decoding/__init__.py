"""Call-data and log decoding for the EtherDelta exchange contract.

This package provides:
- Payload framing and typed word parsers (normalize, as_address, as_amount)
- Method decoder: call data → Action (transactions and trace actions)
- Event decoder: log topics + data → Event
"""

from etherdelta.decoding.actions import decode_action, decode_trace_action, decode_transaction_action
from etherdelta.decoding.events import decode_event, decode_log, decode_order_log
from etherdelta.decoding.words import as_address, as_amount, as_raw, normalize

__all__ = [
    "decode_action",
    "decode_trace_action",
    "decode_transaction_action",
    "decode_event",
    "decode_log",
    "decode_order_log",
    "as_address",
    "as_amount",
    "as_raw",
    "normalize",
]
