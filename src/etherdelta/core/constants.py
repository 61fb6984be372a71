from __future__ import annotations

# Exchange contract (lowercase, 0x-prefixed). Used for fingerprinting only.
ETHERDELTA_ADDRESS = "0x8d12a197cb00d4747a1fe03395095ce2a5cc6819"
ETHERDELTA_CREATION_BLOCK = 3_154_196

WORD_SIZE = 64  # hex chars per 32-byte ABI word
SELECTOR_LENGTH = 10  # "0x" + 4 bytes

# method selectors (lowercase, 0x-prefixed)
CANCEL_ORDER_ID     = "0x278b8c0e"
DEPOSIT_ID          = "0xd0e30db0"
DEPOSIT_TOKEN_ID    = "0x338b5dea"
TRADE_ID            = "0x0a19b14a"
WITHDRAW_ID         = "0x2e1a7d4d"
WITHDRAW_TOKEN_ID   = "0x9e281a98"

# constant (read-only) methods, only seen in traces
AMOUNT_FILLED_ID    = "0x46be96c3"
AVAILABLE_VOLUME_ID = "0xfb6e155f"
TEST_TRADE_ID       = "0x6c86888b"
BALANCE_OF_ID       = "0xf7888aec"

# topic0 constants (lowercase, 0x-prefixed)
CANCEL_T0   = "0x1e0b760c386003e9cb9bcf4fcf3997886042859d9b6ed6320e804597fcdb28b0"
TRADE_T0    = "0x6effdda786735d5033bfad5f53e5131abcced9e52be6c507b62d639685fbed6d"
DEPOSIT_T0  = "0xdcbc1c05240f31ff3ad067ef1ee35ce4997762752e3a095284754544f4c709d7"
WITHDRAW_T0 = "0xf341246adaac6f497bc2a656f546ab9e182111d630394f0c57c710a59a2cb567"
