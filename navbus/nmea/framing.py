"""NMEA sentence framing and checksum calculation.

NMEA 0183 sentences use a simple XOR checksum for data integrity verification.
The checksum is calculated over all characters between '$' and '*' (exclusive),
then represented as a two-digit uppercase hexadecimal number after the '*'.

Example sentence structure:
    $GPAPA,A,A,0.10,R,N,V,V,011,M,DEST,011,M*42
     ^^^^^ ^                               ^ ^^
     |     +-------- data ----------------+ checksum (0x42 = 66)
     +-- talker ID "GP" + sentence formatter "APA"

The framer only splits a line into those parts. Checking the checksum is left
to the caller (see ``navbus.nmea.registry.parse_nmea``), and the data is
decoded by the sentence modules.
"""

import re

from navbus.nmea.errors import FramingError, UnknownSentenceTypeError
from navbus.nmea.types import NmeaSentence, SentenceType

# '$' starts ordinary sentences, '!' encapsulated ones (AIS)
_START_DELIMITERS = ("$", "!")

_HEADER_LENGTH = 5  # 2 talker + 3 sentence formatter
_CHECKSUM_PATTERN = re.compile(r"[0-9A-Fa-f]{2}")


def _extract_checksum_parts(sentence: str) -> tuple[str, str] | None:
    """Extract the payload content and provided checksum from an NMEA sentence.

    NMEA sentences follow the format: $<content>*<checksum>
    This function separates these components for validation.

    Args:
        sentence: Stripped NMEA sentence string (e.g., "$GPAPA,...*42")

    Returns:
        A tuple of (content, checksum_hex) if the sentence has valid structure,
        or None if:
        - Missing '$' (or '!') start delimiter
        - Missing '*' checksum delimiter
        - Checksum is not exactly 2 hexadecimal characters

    Example:
        >>> _extract_checksum_parts("$GPZTG,,,*72")
        ('GPZTG,,,', '72')
    """
    if not sentence.startswith(_START_DELIMITERS) or "*" not in sentence:
        return None

    end = sentence.index("*")
    content = sentence[1:end]
    provided = sentence[end + 1 :]

    if _CHECKSUM_PATTERN.fullmatch(provided) is None:
        return None

    return content, provided


def calculate_checksum(content: str) -> int:
    """Calculate the XOR checksum of a content string.

    The NMEA checksum algorithm XORs the ASCII value of each character
    in the content.

    Args:
        content: The string between '$' and '*' (exclusive)

    Returns:
        Integer checksum value (0-255)
    """
    result = 0
    for character in content:
        result ^= ord(character)
    return result


def validate_checksum(sentence: str) -> bool:
    """Validate the checksum of an NMEA sentence.

    Args:
        sentence: Complete NMEA sentence including '$', '*', and checksum.
                  May include trailing whitespace/newlines (will be stripped).

    Returns:
        True if the checksum is valid, False if the sentence is malformed
        or the calculated checksum doesn't match the provided one.

    Example:
        >>> validate_checksum("$GPZTG,,,*72")
        True
        >>> validate_checksum("$GPZTG,,,*FF")  # wrong checksum
        False
    """
    parts = _extract_checksum_parts(sentence.strip())
    if parts is None:
        return False

    content, provided = parts
    return calculate_checksum(content) == int(provided, 16)


def parse_nmea_sentence(line: str) -> NmeaSentence:
    """Split a raw line into talker ID, sentence type, data and checksum.

    Args:
        line: Raw NMEA sentence, optionally followed by CR/LF.

    Returns:
        NmeaSentence whose ``data`` holds the text between the comma after
        the sentence formatter and the '*'. The checksum is parsed but not
        verified.

    Raises:
        FramingError: If the line does not have the $TTSSS,...*hh shape.
        UnknownSentenceTypeError: If SSS is not a known sentence formatter.

    Example:
        >>> parse_nmea_sentence("$GPZTG,145832.12,042359.17,WPT*24\\r\\n")
        NmeaSentence(talker_id='GP', message_type=<SentenceType.ZTG: 'ZTG'>,
                     data='145832.12,042359.17,WPT', checksum=36)
    """
    line = line.strip()

    parts = _extract_checksum_parts(line)
    if parts is None:
        raise FramingError(line, "expected $<content>*hh")

    content, provided = parts
    header, separator, data = content.partition(",")
    if not separator:
        raise FramingError(line, "missing field separator after the header")
    if len(header) != _HEADER_LENGTH:
        raise FramingError(line, "expected a talker ID and a sentence formatter")

    talker_id, formatter = header[:2], header[2:]
    try:
        message_type = SentenceType(formatter)
    except ValueError:
        raise UnknownSentenceTypeError(formatter) from None

    return NmeaSentence(
        talker_id=talker_id,
        message_type=message_type,
        data=data,
        checksum=int(provided, 16),
    )


def calculate_sentence_checksum(sentence: NmeaSentence) -> int:
    """Recompute the checksum a framed sentence should have been sent with."""
    return calculate_checksum(
        f"{sentence.talker_id}{sentence.message_type.value},{sentence.data}"
    )
