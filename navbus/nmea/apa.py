"""APA sentence parser.

APA (Autopilot Sentence "A") is sent by some navigation receivers so they can
steer an autopilot towards the active waypoint. It reports the cross-track
error, the steering direction, arrival status and the bearing to the
destination.

APA Sentence Format:
    $GPAPA,A,A,0.10,R,N,V,V,011,M,DEST,011,M*42
           | | |    | | | | |   | |
           | | |    | | | | |   | +-- Destination waypoint ID (up to '*')
           | | |    | | | | |   +-- Bearing reference (M=magnetic, T=true)
           | | |    | | | | +-- Bearing origin to destination (degrees)
           | | |    | | | +-- Perpendicular passed at waypoint (A/V)
           | | |    | | +-- Arrival circle entered (A/V)
           | | |    | +-- Cross-track units (N=nautical miles, K=kilometers)
           | | |    +-- Direction to steer (L/R)
           | | +-- Cross-track error magnitude
           | +-- Cycle lock warning (V=warning, A=OK or not used)
           +-- General warning (V=blink or SNR warning, A=OK)

The waypoint ID is the last field and takes everything up to the checksum
marker, commas included: the example above carries "DEST,011,M".
"""

from navbus.nmea.fields import (
    CHECKSUM_MARKER,
    decode_code,
    decode_float,
    decode_separator,
    decode_status,
    decode_text,
    ensure_message_type,
)
from navbus.nmea.types import (
    ApaData,
    BearingReference,
    CrossTrackUnits,
    NmeaSentence,
    SentenceType,
    SteerDirection,
)


def _decode_apa(data: str) -> ApaData:
    """Decode the APA fields in order, failing on the first bad field."""
    status_warning, rest = decode_status(data, "status_warning")
    rest = decode_separator(rest)

    status_cycle_warning, rest = decode_status(rest, "status_cycle_warning")
    rest = decode_separator(rest)

    cross_track_error_magnitude, rest = decode_float(
        rest, "cross_track_error_magnitude"
    )
    rest = decode_separator(rest)

    steer_direction, rest = decode_code(rest, SteerDirection, "steer_direction")
    rest = decode_separator(rest)

    cross_track_units, rest = decode_code(rest, CrossTrackUnits, "cross_track_units")
    rest = decode_separator(rest)

    status_arrived, rest = decode_status(rest, "status_arrived")
    rest = decode_separator(rest)

    status_passed, rest = decode_status(rest, "status_passed")
    rest = decode_separator(rest)

    bearing, rest = decode_float(rest, "bearing_origin_to_destination")
    rest = decode_separator(rest)

    bearing_reference, rest = decode_code(rest, BearingReference, "bearing_reference")
    rest = decode_separator(rest)

    waypoint_id, _ = decode_text(rest, CHECKSUM_MARKER)

    return ApaData(
        status_warning=status_warning,
        status_cycle_warning=status_cycle_warning,
        cross_track_error_magnitude=cross_track_error_magnitude,
        steer_left=steer_direction is SteerDirection.LEFT,
        cross_track_units=cross_track_units,
        status_arrived=status_arrived,
        status_passed=status_passed,
        bearing_origin_to_destination=bearing,
        bearing_reference=bearing_reference,
        waypoint_id=waypoint_id,
    )


def parse_apa(sentence: NmeaSentence) -> ApaData:
    """Parse a framed APA sentence into structured data.

    Args:
        sentence: Framed sentence from ``parse_nmea_sentence``. Its checksum
            is not looked at.

    Returns:
        ApaData with every field decoded.

    Raises:
        WrongSentenceTypeError: If the sentence is not an APA sentence.
            No field is parsed in that case.
        MalformedFieldError: If a status, code or number is invalid, or
            a separator is missing.
        TextLengthError: If the waypoint ID is too long.

    Example:
        >>> result = parse_apa(NmeaSentence(
        ...     "GP", SentenceType.APA, "A,A,0.10,R,N,V,V,011,M,DEST,011,M", 0x42))
        >>> result.cross_track_units
        <CrossTrackUnits.NAUTICAL_MILES: 'N'>
        >>> result.steer_left
        False
    """
    ensure_message_type(sentence, SentenceType.APA)
    return _decode_apa(sentence.data)
