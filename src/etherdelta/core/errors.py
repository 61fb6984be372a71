"""Decoding error kinds.

Every decode function either returns a complete record or raises one of the
`DecodeError` subclasses below. The offending selector / topic / length is kept
on the exception and repeated in its message.
"""

from __future__ import annotations


class DecodeError(ValueError):
    """Base class for all call-data and log decoding failures."""


class TooShortError(DecodeError):
    def __init__(self, call_data: str) -> None:
        self.call_data = call_data
        super().__init__(f"Call data too short for a method selector ({len(call_data)} < 10): {call_data!r}")


class UnknownMethodError(DecodeError):
    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f"Unknown method selector: {selector}")


class UnknownTopicError(DecodeError):
    def __init__(self, topic: str) -> None:
        self.topic = topic
        super().__init__(f"Unknown log topic: {topic}")


class MissingTopicError(DecodeError):
    def __init__(self) -> None:
        super().__init__("Log has no topics")


class MissingValueError(DecodeError):
    """A value-carrying call (deposit) was decoded without an envelope value."""

    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f"Method {selector} requires the envelope value, got None")


class LengthMismatchError(DecodeError):
    def __init__(self, expected_words: int, actual_length: int) -> None:
        self.expected_words = expected_words
        self.actual_length = actual_length
        super().__init__(
            f"Expected {expected_words} words ({expected_words * 64} hex chars), got {actual_length} hex chars"
        )


class InvalidAddressError(DecodeError):
    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f"Word is not a valid address slot: {word!r}")


class InvalidIntegerError(DecodeError):
    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(f"Word is not a valid uint256: {word!r}")
