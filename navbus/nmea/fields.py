"""NMEA field decoding utilities.

This module provides the decoders every sentence module is built from. NMEA
fields are comma-separated and may be empty (consecutive commas indicate
missing data). Each decoder consumes one field from the front of the remaining
input and returns ``(value, rest)``, so a sentence decoder is a fixed sequence
of calls threading ``rest`` from one field to the next:

    >>> warning, rest = decode_status("A,0.10,R", "status_warning")
    >>> rest = decode_separator(rest)
    >>> decode_float(rest, "cross_track_error_magnitude")
    (0.1, ',R')

Empty optional fields decode to None. Non-empty fields that do not match their
grammar raise MalformedFieldError, so "no data" and "bad data" never look alike.
"""

import datetime
import re
from enum import Enum
from typing import TypeVar

from navbus.nmea.errors import (
    MalformedFieldError,
    TextLengthError,
    WrongSentenceTypeError,
)
from navbus.nmea.types import NmeaSentence, SentenceType

FIELD_SEPARATOR = ","
CHECKSUM_MARKER = "*"

# Maximum length of free-text fields such as waypoint identifiers, in UTF-8
# bytes. Shared by every sentence type.
TEXT_PARAMETER_MAX_LENGTH = 64

_FIELD_DELIMITERS = FIELD_SEPARATOR + CHECKSUM_MARKER

# Decimal numbers as talkers send them: "011", "-2", "0.10", ".5", "1.5E3".
# Stricter than float(), which would also accept "nan", " 1" or "1_0".
_FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# hhmmss.ss
_HMS_PATTERN = re.compile(r"([0-9]{2})([0-9]{2})([0-9]{2}(?:\.[0-9]*)?)")
_MICROSECONDS_PER_MINUTE = 60_000_000

# Status fields: A = valid / active, V = invalid / void
_STATUS_VALUES = {"A": True, "V": False}

_CodeT = TypeVar("_CodeT", bound=Enum)


def _split_token(text: str, delimiters: str = _FIELD_DELIMITERS) -> tuple[str, str]:
    """Split off everything before the first delimiter.

    Example:
        >>> _split_token("0.10,R,N")
        ('0.10', ',R,N')
        >>> _split_token("DEST,011,M", "*")
        ('DEST,011,M', '')
    """
    for index, character in enumerate(text):
        if character in delimiters:
            return text[:index], text[index:]
    return text, ""


def ensure_message_type(sentence: NmeaSentence, expected: SentenceType) -> None:
    """Reject a sentence handed to the decoder of another sentence type.

    Raises:
        WrongSentenceTypeError: If ``sentence.message_type`` is not ``expected``.
    """
    if sentence.message_type != expected:
        raise WrongSentenceTypeError(expected, sentence.message_type)


def decode_separator(text: str) -> str:
    """Consume exactly one field separator.

    A missing separator means the previous field carried extra characters
    or the sentence was truncated.

    Raises:
        MalformedFieldError: If ``text`` does not start with a comma.
    """
    if not text.startswith(FIELD_SEPARATOR):
        raise MalformedFieldError(
            "separator", text, f"expected {FIELD_SEPARATOR!r}"
        )
    return text[len(FIELD_SEPARATOR) :]


def decode_float(text: str, name: str) -> tuple[float | None, str]:
    """Decode an optional decimal number.

    Args:
        text: Remaining sentence data, starting at the field.
        name: Field name used in error messages.

    Returns:
        ``(value, rest)``; value is None if the field is empty.

    Raises:
        MalformedFieldError: If the field is not empty and is not a decimal
            number in full (e.g., "12a", "1.2.3").

    Example:
        >>> decode_float("-1200.5,-45.0,A", "speed")
        (-1200.5, ',-45.0,A')
        >>> decode_float(",A", "speed")
        (None, ',A')
    """
    token, rest = _split_token(text)
    if not token:
        return None, rest
    if _FLOAT_PATTERN.fullmatch(token) is None:
        raise MalformedFieldError(name, text, "expected a decimal number")
    return float(token), rest


def decode_int(
    text: str,
    name: str,
    minimum: int = -128,
    maximum: int = 127,
) -> tuple[int | None, str]:
    """Decode an optional signed integer within ``[minimum, maximum]``.

    The default bounds are those of a signed byte, which is what the
    engine and shaft numbers of RPM sentences fit in.

    Raises:
        MalformedFieldError: If the field is not empty and is not an integer,
            or is outside the bounds.
    """
    token, rest = _split_token(text)
    if not token:
        return None, rest
    if _INT_PATTERN.fullmatch(token) is None:
        raise MalformedFieldError(name, text, "expected an integer")
    value = int(token)
    if not minimum <= value <= maximum:
        raise MalformedFieldError(
            name, text, f"expected an integer in [{minimum}, {maximum}]"
        )
    return value, rest


def decode_code(
    text: str, codes: type[_CodeT], name: str
) -> tuple[_CodeT, str]:
    """Decode a mandatory single-character code from a closed set.

    Args:
        text: Remaining sentence data, starting at the field.
        codes: Enum whose member values are the accepted characters.
        name: Field name used in error messages.

    Returns:
        ``(member, rest)``.

    Raises:
        MalformedFieldError: If the field is empty or the character is not
            a value of ``codes``.

    Example:
        >>> decode_code("N,V", CrossTrackUnits, "cross_track_units")
        (<CrossTrackUnits.NAUTICAL_MILES: 'N'>, ',V')
    """
    try:
        return codes(text[:1]), text[1:]
    except ValueError:
        allowed = "/".join(str(member.value) for member in codes)
        raise MalformedFieldError(name, text, f"expected one of {allowed}") from None


def decode_optional_code(
    text: str, codes: type[_CodeT], name: str
) -> tuple[_CodeT | None, str]:
    """Decode a single-character code that may be left empty.

    An empty field yields None; any other character outside ``codes`` is
    still an error.
    """
    if not text or text[0] in _FIELD_DELIMITERS:
        return None, text
    return decode_code(text, codes, name)


def decode_status(text: str, name: str) -> tuple[bool, str]:
    """Decode a mandatory A/V status field.

    Raises:
        MalformedFieldError: If the field is anything but "A" or "V",
            including empty.

    Example:
        >>> decode_status("V,V,011", "status_arrived")
        (False, ',V,011')
    """
    character = text[:1]
    if character not in _STATUS_VALUES:
        raise MalformedFieldError(name, text, "expected A or V")
    return _STATUS_VALUES[character], text[1:]


def bounded_text(value: str) -> str:
    """Return ``value`` if it fits in a text parameter.

    Raises:
        TextLengthError: If ``value`` is longer than
            TEXT_PARAMETER_MAX_LENGTH bytes once UTF-8 encoded.
    """
    length = len(value.encode("utf-8"))
    if length > TEXT_PARAMETER_MAX_LENGTH:
        raise TextLengthError(TEXT_PARAMETER_MAX_LENGTH, length)
    return value


def decode_text(
    text: str, delimiters: str = _FIELD_DELIMITERS
) -> tuple[str | None, str]:
    """Decode an optional bounded text field.

    The field runs up to the first character in ``delimiters``. Sentences whose
    last field is free text pass ``CHECKSUM_MARKER`` alone so that commas
    become part of the value.

    Returns:
        ``(value, rest)``; value is None if the field is empty.

    Raises:
        TextLengthError: If the text exceeds TEXT_PARAMETER_MAX_LENGTH.
    """
    token, rest = _split_token(text, delimiters)
    if not token:
        return None, rest
    return bounded_text(token), rest


def _decode_hms(text: str, name: str) -> tuple[tuple[int, int, int] | None, str]:
    """Split an optional hhmmss.ss field into hours, minutes and microseconds.

    Seconds are rounded to the nearest microsecond and must stay below 60.
    """
    token, rest = _split_token(text)
    if not token:
        return None, rest

    match = _HMS_PATTERN.fullmatch(token)
    if match is None:
        raise MalformedFieldError(name, text, "expected hhmmss.ss")

    hours = int(match.group(1))
    minutes = int(match.group(2))
    microseconds = round(float(match.group(3)) * 1_000_000)
    if minutes >= 60 or microseconds >= _MICROSECONDS_PER_MINUTE:
        raise MalformedFieldError(name, text, "minutes and seconds must be below 60")

    return (hours, minutes, microseconds), rest


def decode_time(text: str, name: str) -> tuple[datetime.time | None, str]:
    """Decode an optional UTC time of day in hhmmss.ss format.

    Raises:
        MalformedFieldError: If the field is not empty and is not a valid
            time of day.

    Example:
        >>> decode_time("145832.12,042359.17", "fix_time")
        (datetime.time(14, 58, 32, 120000), ',042359.17')
    """
    parts, rest = _decode_hms(text, name)
    if parts is None:
        return None, rest

    hours, minutes, microseconds = parts
    if hours >= 24:
        raise MalformedFieldError(name, text, "hours must be below 24")
    seconds, microseconds = divmod(microseconds, 1_000_000)
    return datetime.time(hours, minutes, seconds, microseconds), rest


def decode_duration(
    text: str, name: str
) -> tuple[datetime.timedelta | None, str]:
    """Decode an optional duration written as hhmmss.ss.

    Unlike a time of day, the hour count is not limited to 23.
    """
    parts, rest = _decode_hms(text, name)
    if parts is None:
        return None, rest

    hours, minutes, microseconds = parts
    return (
        datetime.timedelta(hours=hours, minutes=minutes, microseconds=microseconds),
        rest,
    )
