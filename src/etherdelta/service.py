"""Transaction-level decoding on top of the pure decoders.

`ExchangeDecoder` pairs a transaction (or its traces) with the logs of its
receipt and decodes both. A failure is local to one input: in non-strict mode
the input is logged at DEBUG and skipped (or kept as `None` for traces), other
inputs are unaffected.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from etherdelta.columns import DecodedColumns
from etherdelta.core.actions import Action
from etherdelta.core.config import DecoderConfig
from etherdelta.core.errors import DecodeError
from etherdelta.core.events import Event
from etherdelta.core.interfaces import LogLike, TraceLike, TransactionLike
from etherdelta.core.models import Address, Order, OrderLog
from etherdelta.decoding.actions import decode_trace_action, decode_transaction_action
from etherdelta.decoding.events import decode_event
from etherdelta.fingerprint import order_fingerprint
from etherdelta.objects import Log

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ExchangeTransaction:
    """A direct call to the exchange plus the events its receipt emitted."""

    tx: TransactionLike
    action: Action
    events: tuple[Event, ...] = ()

    @property
    def is_success(self) -> bool:
        # A reverted call emits nothing.
        return bool(self.events)


@dataclass(slots=True, frozen=True)
class ExchangeProxyTransaction:
    """A transaction that reached the exchange through other contracts."""

    tx: TransactionLike
    actions: tuple[tuple[TraceLike, Action | None], ...]
    events: tuple[Event, ...] = ()


class ExchangeDecoder:
    """Batch decoder bound to a `DecoderConfig`."""

    def __init__(self, config: DecoderConfig | None = None) -> None:
        self.config = config or DecoderConfig()

    def _skip(self, what: str, exc: DecodeError, **extra: object) -> None:
        if self.config.strict:
            raise exc
        logger.debug("Skipping undecodable %s: %s", what, exc, extra=extra, exc_info=True)

    def decode_events(self, logs: Iterable[LogLike]) -> list[Event]:
        """Decode every exchange event among `logs`, skipping foreign/invalid logs."""
        out: list[Event] = []
        for log in logs:
            try:
                out.append(decode_event(log))
            except DecodeError as e:
                self._skip("log", e, topics=list(log.topics))
        return out

    def decode_transaction(self, tx: TransactionLike, logs: Sequence[LogLike] = ()) -> ExchangeTransaction:
        """Decode a direct call. Raises `DecodeError` if the call itself is undecodable."""
        action = decode_transaction_action(tx)
        return ExchangeTransaction(tx=tx, action=action, events=tuple(self.decode_events(logs)))

    def decode_proxy_transaction(
        self,
        tx: TransactionLike,
        traces: Iterable[TraceLike],
        logs: Sequence[LogLike] = (),
    ) -> ExchangeProxyTransaction:
        """Decode every traced call; calls that are not exchange calls map to None."""
        actions: list[tuple[TraceLike, Action | None]] = []
        for trace in traces:
            try:
                action: Action | None = decode_trace_action(trace.action)
            except DecodeError as e:
                self._skip("trace action", e, input=trace.action.input[:10])
                action = None
            actions.append((trace, action))
        return ExchangeProxyTransaction(tx=tx, actions=tuple(actions), events=tuple(self.decode_events(logs)))

    def collect(self, logs: Iterable[Log]) -> DecodedColumns:
        """Decode RPC logs straight into a columnar buffer."""
        buf = DecodedColumns()
        for log in logs:
            try:
                event = decode_event(log)
            except DecodeError as e:
                self._skip("log", e, tx_hash=log.transaction_hash, log_index=log.log_index)
                continue
            buf.append(log.meta(), event)
        return buf

    def order_fingerprint(self, order: Order | OrderLog, user: Address | None = None) -> int:
        return order_fingerprint(order, user=user, contract_address=self.config.contract_address)
