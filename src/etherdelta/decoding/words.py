"""Decoding utilities: payload framing, word splitting and typed word parsers."""

from __future__ import annotations

from eth_utils import decode_hex, remove_0x_prefix

from etherdelta.core.constants import WORD_SIZE
from etherdelta.core.errors import InvalidAddressError, InvalidIntegerError, LengthMismatchError
from etherdelta.core.models import Address, Amount, Word

SELECTOR_CHARS = 8  # 4-byte selector without "0x"
ADDRESS_OFFSET = 24  # high 12 bytes of an address slot are padding


def normalize(raw: str, word_count: int) -> list[Word]:
    """Strip framing from `raw` and split it into exactly `word_count` words.

    A leading selector is dropped purely by length: if what remains after the
    optional "0x" is one selector longer than expected, the first 8 chars go.
    Hex content is not validated here.
    """
    body = remove_0x_prefix(raw)
    expected = word_count * WORD_SIZE
    if len(body) == expected + SELECTOR_CHARS:
        body = body[SELECTOR_CHARS:]
    if len(body) != expected:
        raise LengthMismatchError(word_count, len(body))
    return [body[i : i + WORD_SIZE] for i in range(0, expected, WORD_SIZE)]


def _unhex(chunk: str, n_bytes: int) -> bytes | None:
    """Parse `chunk` as exactly `n_bytes` of hex, or None."""
    try:
        raw = decode_hex(chunk)
    except ValueError:
        return None
    return raw if len(raw) == n_bytes else None


def as_address(word: Word) -> Address:
    """Return the low 20 bytes of a word as a lowercase 0x address."""
    if len(word) != WORD_SIZE:
        raise InvalidAddressError(word)
    raw = _unhex(word[ADDRESS_OFFSET:], 20)
    if raw is None:
        raise InvalidAddressError(word)
    return "0x" + raw.hex()


def as_amount(word: Word) -> Amount:
    """Parse a full word as a big-endian uint256."""
    if len(word) != WORD_SIZE:
        raise InvalidIntegerError(word)
    raw = _unhex(word, 32)
    if raw is None:
        raise InvalidIntegerError(word)
    return int.from_bytes(raw, "big", signed=False)


def as_raw(word: Word) -> Word:
    """Signature components (`r`, `s`) are kept verbatim."""
    return word
