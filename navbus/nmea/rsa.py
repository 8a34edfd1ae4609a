"""RSA sentence parser.

RSA (Rudder Sensor Angle) carries up to two rudder sensor readings, each with
its own status flag.

RSA Sentence Format:
    $IIRSA,8.0,A,-2,A*79
           |   | |  |
           |   | |  +-- Port sensor status (A=valid, V=invalid)
           |   | +-- Port rudder sensor
           |   +-- Starboard sensor status (A=valid, V=invalid)
           +-- Starboard (or single) rudder sensor ("-" means turn to port)
"""

from navbus.nmea.fields import (
    decode_float,
    decode_separator,
    decode_status,
    ensure_message_type,
)
from navbus.nmea.types import NmeaSentence, RsaData, SentenceType


def _decode_rsa(data: str) -> RsaData:
    starboard_rudder_sensor, rest = decode_float(data, "starboard_rudder_sensor")
    rest = decode_separator(rest)

    starboard_rudder_valid, rest = decode_status(rest, "starboard_rudder_valid")
    rest = decode_separator(rest)

    port_rudder_sensor, rest = decode_float(rest, "port_rudder_sensor")
    rest = decode_separator(rest)

    port_rudder_valid, _ = decode_status(rest, "port_rudder_valid")

    return RsaData(
        starboard_rudder_sensor=starboard_rudder_sensor,
        starboard_rudder_valid=starboard_rudder_valid,
        port_rudder_sensor=port_rudder_sensor,
        port_rudder_valid=port_rudder_valid,
    )


def parse_rsa(sentence: NmeaSentence) -> RsaData:
    """Parse a framed RSA sentence into structured data.

    Raises:
        WrongSentenceTypeError: If the sentence is not an RSA sentence.
        MalformedFieldError: If a field is invalid or a separator is missing.
    """
    ensure_message_type(sentence, SentenceType.RSA)
    return _decode_rsa(sentence.data)
