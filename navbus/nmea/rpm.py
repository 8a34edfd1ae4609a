"""RPM sentence parser.

RPM (Revolutions) reports the revolution rate of a shaft or an engine and the
pitch of the propeller it drives.

RPM Sentence Format:
    $IIRPM,S,1,31,100,A*73
           | | |  |   |
           | | |  |   +-- Status (A=valid, V=invalid)
           | | |  +-- Propeller pitch, % of maximum ("-" means astern)
           | | +-- Speed, revolutions per minute ("-" means counter-clockwise)
           | +-- Engine or shaft number (odd=starboard, even=port, 0=centre-line)
           +-- Source (S=shaft, E=engine)

Every field but the status may be empty.
"""

from navbus.nmea.fields import (
    decode_float,
    decode_int,
    decode_optional_code,
    decode_separator,
    decode_status,
    ensure_message_type,
)
from navbus.nmea.types import NmeaSentence, RpmData, RpmSource, SentenceType


def _decode_rpm(data: str) -> RpmData:
    source, rest = decode_optional_code(data, RpmSource, "source")
    rest = decode_separator(rest)

    engine_or_shaft_number, rest = decode_int(rest, "engine_or_shaft_number")
    rest = decode_separator(rest)

    speed, rest = decode_float(rest, "speed_revolutions_per_minute")
    rest = decode_separator(rest)

    propeller_pitch, rest = decode_float(rest, "propeller_pitch_percent")
    rest = decode_separator(rest)

    valid, _ = decode_status(rest, "valid")

    return RpmData(
        source=source,
        engine_or_shaft_number=engine_or_shaft_number,
        speed_revolutions_per_minute=speed,
        propeller_pitch_percent=propeller_pitch,
        valid=valid,
    )


def parse_rpm(sentence: NmeaSentence) -> RpmData:
    """Parse a framed RPM sentence into structured data.

    Raises:
        WrongSentenceTypeError: If the sentence is not an RPM sentence.
        MalformedFieldError: If a field is invalid or a separator is missing.

    Example:
        >>> result = parse_rpm(NmeaSentence("II", SentenceType.RPM, "E,2,-1200.5,-45.0,A", 0x52))
        >>> result.speed_revolutions_per_minute
        -1200.5
    """
    ensure_message_type(sentence, SentenceType.RPM)
    return _decode_rpm(sentence.data)
