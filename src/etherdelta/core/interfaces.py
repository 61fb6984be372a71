from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# TransactionLike
# ---------------------------------------------------------------------------

@runtime_checkable
class TransactionLike(Protocol):
    """
    Any already-deserialized transaction envelope.

    Domain expectations:
    - `input` is the 0x-prefixed call data.
    - `value` is the wei amount sent with the call (needed for `deposit()`).
    - `to_address` is the callee; decoding never routes on it.
    """

    @property
    def to_address(self) -> str | None: ...

    @property
    def value(self) -> int: ...

    @property
    def input(self) -> str: ...


# ---------------------------------------------------------------------------
# TraceActionLike
# ---------------------------------------------------------------------------

@runtime_checkable
class TraceActionLike(Protocol):
    """
    The `action` part of an execution trace (internal call).

    `value` is optional: some trace sources omit it for constant calls.
    """

    @property
    def input(self) -> str: ...

    @property
    def value(self) -> int | None: ...


# ---------------------------------------------------------------------------
# TraceLike
# ---------------------------------------------------------------------------

@runtime_checkable
class TraceLike(Protocol):
    @property
    def action(self) -> TraceActionLike: ...


# ---------------------------------------------------------------------------
# LogLike
# ---------------------------------------------------------------------------

@runtime_checkable
class LogLike(Protocol):
    """
    An event log. `topics[0]` selects the event, `data` holds the ABI words.

    Topics may be 0x-hex strings or raw 32-byte values.
    """

    @property
    def topics(self) -> Sequence[str | bytes]: ...

    @property
    def data(self) -> str: ...
