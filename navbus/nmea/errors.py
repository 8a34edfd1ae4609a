"""NMEA decoding errors.

Every failure raised while framing or decoding a sentence derives from
NmeaError. The exceptions carry the values that caused them as attributes so
callers can decide whether to discard, log, or request retransmission without
parsing the message text.

Hierarchy:
    NmeaError
    ├── WrongSentenceTypeError   decoder invoked with another sentence type
    ├── MalformedFieldError      bad code, bad number, or missing separator
    ├── TextLengthError          text field longer than the shared maximum
    ├── FramingError             line is not a $TTSSS,...*hh sentence
    ├── UnknownSentenceTypeError formatter is not a known sentence type
    ├── ChecksumMismatchError    transmitted and calculated checksums differ
    └── UnsupportedSentenceError known type without a decoder
"""


class NmeaError(ValueError):
    """Base class for all sentence framing and decoding errors."""


class WrongSentenceTypeError(NmeaError):
    """A sentence decoder received a sentence of another type."""

    def __init__(self, expected: str, found: str) -> None:
        self.expected = expected
        self.found = found
        super().__init__(f"expected {expected} sentence, found {found}")


class MalformedFieldError(NmeaError):
    """A field does not match its declared grammar.

    Args:
        name: Name of the field being decoded.
        text: Remaining input at the point of failure.
        reason: Short description of what was expected.
    """

    def __init__(self, name: str, text: str, reason: str) -> None:
        self.name = name
        self.text = text
        self.reason = reason
        super().__init__(f"malformed {name}: {reason} (at {text!r})")


class TextLengthError(NmeaError):
    """A bounded text field exceeds the maximum parameter length."""

    def __init__(self, max_length: int, actual_length: int) -> None:
        self.max_length = max_length
        self.actual_length = actual_length
        super().__init__(
            f"text parameter is {actual_length} bytes long, "
            f"maximum is {max_length}"
        )


class FramingError(NmeaError):
    """A raw line could not be split into talker, type, data and checksum."""

    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"{reason}: {line!r}")


class UnknownSentenceTypeError(NmeaError):
    """The sentence formatter is not in the known sentence type set."""

    def __init__(self, message_type: str) -> None:
        self.message_type = message_type
        super().__init__(f"unknown sentence type {message_type!r}")


class ChecksumMismatchError(NmeaError):
    """The transmitted checksum does not match the sentence content."""

    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"checksum mismatch: calculated {expected:02X}, found {found:02X}"
        )


class UnsupportedSentenceError(NmeaError):
    """The sentence type is known but no decoder is registered for it."""

    def __init__(self, message_type: str) -> None:
        self.message_type = message_type
        super().__init__(f"no decoder for {message_type} sentences")
