"""ABI word builders shared by the test modules."""

ETH = "0x0000000000000000000000000000000000000000"
ZRX = "0xe41d2489571d322189246dafa5ebde1f4699f498"
MAKER = "0xa94f5374fce5edbc8e2a8697c15331677e6ebf0b"
TAKER = "0x1234567890123456789012345678901234567890"

R_WORD = "a1" * 32
S_WORD = "b2" * 32

ERC20_TRANSFER_T0 = "0xddf252ad1be2c89b69c2b068fc378daa952ba7f163c4a11628f55a4df523b3ef"


def addr_word(address: str, pad: str = "0" * 24) -> str:
    return pad + address[2:].lower()


def uint_word(n: int) -> str:
    return f"{n:064x}"


def order_terms(
    *,
    amount_get: int = 10**18,
    amount_give: int = 500 * 10**18,
    expires: int = 4_000_000,
    nonce: int = 42,
) -> list[str]:
    """The six leading order slots: ETH wanted, ZRX offered."""
    return [
        addr_word(ETH),
        uint_word(amount_get),
        addr_word(ZRX),
        uint_word(amount_give),
        uint_word(expires),
        uint_word(nonce),
    ]


def call_data(selector: str, words: list[str]) -> str:
    return selector + "".join(words)


def log_data(words: list[str]) -> str:
    return "0x" + "".join(words)
