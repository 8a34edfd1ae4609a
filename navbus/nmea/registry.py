"""Routing of framed sentences to their decoders.

``decode_sentence`` looks the sentence type up in a fixed table and calls the
matching ``parse_*`` function. ``parse_nmea`` adds framing and checksum
verification in front of it, for callers that start from raw lines.
"""

from collections.abc import Callable

from navbus.nmea.apa import parse_apa
from navbus.nmea.errors import ChecksumMismatchError, UnsupportedSentenceError
from navbus.nmea.framing import calculate_sentence_checksum, parse_nmea_sentence
from navbus.nmea.rpm import parse_rpm
from navbus.nmea.rsa import parse_rsa
from navbus.nmea.types import NmeaSentence, SentenceData, SentenceType
from navbus.nmea.ztg import parse_ztg

_DECODERS: dict[SentenceType, Callable[[NmeaSentence], SentenceData]] = {
    SentenceType.APA: parse_apa,
    SentenceType.RPM: parse_rpm,
    SentenceType.RSA: parse_rsa,
    SentenceType.ZTG: parse_ztg,
}

SUPPORTED_SENTENCE_TYPES = frozenset(_DECODERS)


def decode_sentence(sentence: NmeaSentence) -> SentenceData:
    """Decode a framed sentence with the decoder registered for its type.

    Raises:
        UnsupportedSentenceError: If no decoder handles ``sentence.message_type``.
        NmeaError: Any error raised by the decoder itself.
    """
    decoder = _DECODERS.get(sentence.message_type)
    if decoder is None:
        raise UnsupportedSentenceError(sentence.message_type)
    return decoder(sentence)


def parse_nmea(line: str) -> SentenceData:
    """Frame, verify and decode one raw NMEA line.

    Args:
        line: Raw sentence such as "$IIRSA,8.0,A,-2,A*79\\r\\n".

    Returns:
        The decoded record (ApaData, RpmData, RsaData or ZtgData).

    Raises:
        FramingError: If the line is not a framed sentence.
        UnknownSentenceTypeError: If the sentence formatter is unknown.
        ChecksumMismatchError: If the checksum does not match the content.
        UnsupportedSentenceError: If the sentence type has no decoder.
        NmeaError: Any field decoding error.

    Example:
        >>> parse_nmea("$IIRSA,8.0,A,-2,A*79")
        RsaData(starboard_rudder_sensor=8.0, starboard_rudder_valid=True,
                port_rudder_sensor=-2.0, port_rudder_valid=True)
    """
    sentence = parse_nmea_sentence(line)

    calculated = calculate_sentence_checksum(sentence)
    if calculated != sentence.checksum:
        raise ChecksumMismatchError(calculated, sentence.checksum)

    return decode_sentence(sentence)
