from __future__ import annotations

from dataclasses import dataclass

from etherdelta.core.constants import ETHERDELTA_ADDRESS


@dataclass(frozen=True)
class DecoderConfig:
    """Configuration for the batch-level `ExchangeDecoder`."""

    contract_address: str = ETHERDELTA_ADDRESS  # folded into order fingerprints
    strict: bool = False  # re-raise DecodeError instead of logging and skipping the input
