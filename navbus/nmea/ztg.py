"""ZTG sentence parser.

ZTG (UTC and Time to Destination Waypoint) reports when the observation was
made and how long it will take to reach the destination waypoint.

ZTG Sentence Format:
    $GPZTG,145832.12,042359.17,WPT*24
           |         |         |
           |         |         +-- Destination waypoint ID
           |         +-- Time remaining (hhmmss.ss, hours may exceed 23)
           +-- UTC of observation (hhmmss.ss)

All three fields may be empty: "$GPZTG,,,*72" is a valid sentence.
"""

from navbus.nmea.fields import (
    decode_duration,
    decode_separator,
    decode_text,
    decode_time,
    ensure_message_type,
)
from navbus.nmea.types import NmeaSentence, SentenceType, ZtgData


def _decode_ztg(data: str) -> ZtgData:
    fix_time, rest = decode_time(data, "fix_time")
    rest = decode_separator(rest)

    time_remaining, rest = decode_duration(rest, "time_remaining")
    rest = decode_separator(rest)

    waypoint_id, _ = decode_text(rest)

    return ZtgData(
        fix_time=fix_time,
        time_remaining=time_remaining,
        waypoint_id=waypoint_id,
    )


def parse_ztg(sentence: NmeaSentence) -> ZtgData:
    """Parse a framed ZTG sentence into structured data.

    Args:
        sentence: Framed sentence from ``parse_nmea_sentence``.

    Returns:
        ZtgData; empty fields are None.

    Raises:
        WrongSentenceTypeError: If the sentence is not a ZTG sentence.
        MalformedFieldError: If a time field is invalid or a separator
            is missing.
        TextLengthError: If the waypoint ID is too long.

    Example:
        >>> result = parse_ztg(parse_nmea_sentence("$GPZTG,145832.12,042359.17,WPT*24"))
        >>> result.time_remaining
        datetime.timedelta(seconds=15839, microseconds=170000)
    """
    ensure_message_type(sentence, SentenceType.ZTG)
    return _decode_ztg(sentence.data)
