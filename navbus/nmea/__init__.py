"""NMEA 0183 decoders for autopilot, engine and rudder sentences."""

from navbus.nmea.apa import parse_apa
from navbus.nmea.errors import (
    ChecksumMismatchError,
    FramingError,
    MalformedFieldError,
    NmeaError,
    TextLengthError,
    UnknownSentenceTypeError,
    UnsupportedSentenceError,
    WrongSentenceTypeError,
)
from navbus.nmea.fields import TEXT_PARAMETER_MAX_LENGTH
from navbus.nmea.framing import parse_nmea_sentence, validate_checksum
from navbus.nmea.registry import (
    SUPPORTED_SENTENCE_TYPES,
    decode_sentence,
    parse_nmea,
)
from navbus.nmea.rpm import parse_rpm
from navbus.nmea.rsa import parse_rsa
from navbus.nmea.types import (
    ApaData,
    BearingReference,
    CrossTrackUnits,
    NmeaSentence,
    RpmData,
    RpmSource,
    RsaData,
    SentenceData,
    SentenceType,
    SteerDirection,
    ZtgData,
)
from navbus.nmea.ztg import parse_ztg

__all__ = [
    "SUPPORTED_SENTENCE_TYPES",
    "TEXT_PARAMETER_MAX_LENGTH",
    "ApaData",
    "BearingReference",
    "ChecksumMismatchError",
    "CrossTrackUnits",
    "FramingError",
    "MalformedFieldError",
    "NmeaError",
    "NmeaSentence",
    "RpmData",
    "RpmSource",
    "RsaData",
    "SentenceData",
    "SentenceType",
    "SteerDirection",
    "TextLengthError",
    "UnknownSentenceTypeError",
    "UnsupportedSentenceError",
    "WrongSentenceTypeError",
    "ZtgData",
    "decode_sentence",
    "parse_apa",
    "parse_nmea",
    "parse_nmea_sentence",
    "parse_rpm",
    "parse_rsa",
    "parse_ztg",
    "validate_checksum",
]
