"""JSON-RPC envelope models (transactions, traces, logs).

These are thin pydantic models over the dicts returned by `eth_getTransactionByHash`,
`trace_transaction` and `eth_getLogs`. They only normalize what the decoders read:
hex quantities become ints, topics become lowercase 0x-hex. They satisfy the
protocols in `etherdelta.core.interfaces`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated, Any

from eth_utils import encode_hex
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from etherdelta.core.models import Meta


def _quantity(value: Any) -> Any:
    """Parse a JSON-RPC quantity ("0x1a" or decimal) into an int."""
    if isinstance(value, str):
        return int(value, 16) if value[:2].lower() == "0x" else int(value)
    return value


HexInt = Annotated[int, BeforeValidator(_quantity)]
OptHexInt = Annotated[int | None, BeforeValidator(_quantity)]


class _RpcModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class Transaction(_RpcModel):
    hash: str
    from_address: str = Field(alias="from")
    to_address: str | None = Field(default=None, alias="to")
    value: HexInt = 0
    input: str = "0x"
    block_number: OptHexInt = None
    transaction_index: OptHexInt = None


class TraceAction(_RpcModel):
    call_type: str | None = None
    from_address: str | None = Field(default=None, alias="from")
    to_address: str | None = Field(default=None, alias="to")
    value: OptHexInt = None
    input: str = "0x"
    gas: OptHexInt = None


class Trace(_RpcModel):
    action: TraceAction
    block_number: HexInt
    transaction_hash: str | None = None
    transaction_position: int | None = None
    subtraces: int = 0
    trace_address: tuple[int, ...] = ()
    type: str = "call"


class Log(_RpcModel):
    address: str
    topics: tuple[str, ...]
    data: str = "0x"
    block_number: OptHexInt = None
    transaction_hash: str | None = None
    log_index: OptHexInt = None
    block_timestamp: OptHexInt = None

    @field_validator("topics", mode="before")
    @classmethod
    def _lower_topics(cls, value: Sequence[str | bytes]) -> tuple[str, ...]:
        return tuple(encode_hex(t) if isinstance(t, bytes) else t.lower() for t in value)

    def meta(self) -> Meta:
        return Meta(
            block_number=self.block_number or 0,
            block_timestamp=self.block_timestamp,
            tx_hash=(self.transaction_hash or "").lower(),
            log_index=self.log_index,
        )
