"""navbus package for decoding marine instrument bus sentences."""

from navbus.bus import SentenceReader
from navbus.nmea import (
    ApaData,
    NmeaError,
    NmeaSentence,
    RpmData,
    RsaData,
    SentenceType,
    ZtgData,
    decode_sentence,
    parse_apa,
    parse_nmea,
    parse_nmea_sentence,
    parse_rpm,
    parse_rsa,
    parse_ztg,
    validate_checksum,
)

__all__ = [
    "ApaData",
    "NmeaError",
    "NmeaSentence",
    "RpmData",
    "RsaData",
    "SentenceReader",
    "SentenceType",
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
