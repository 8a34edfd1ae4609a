"""Tests for RSA sentence parsing."""

import pytest

from navbus import parse_nmea_sentence, parse_rsa
from navbus.nmea import (
    MalformedFieldError,
    NmeaSentence,
    RsaData,
    SentenceType,
    WrongSentenceTypeError,
)


def _rsa(data: str) -> NmeaSentence:
    return NmeaSentence("II", SentenceType.RSA, data, 0x0)


class TestParseRSA:
    """Tests for parse_rsa function."""

    def test_valid_rsa_full(self):
        result = parse_rsa(parse_nmea_sentence("$IIRSA,8.0,A,-2,A*79"))
        assert result == RsaData(
            starboard_rudder_sensor=8.0,
            starboard_rudder_valid=True,
            port_rudder_sensor=-2.0,
            port_rudder_valid=True,
        )

    def test_single_sensor(self):
        result = parse_rsa(_rsa("-12.5,A,,V"))
        assert result.starboard_rudder_sensor == pytest.approx(-12.5)
        assert result.port_rudder_sensor is None
        assert result.port_rudder_valid is False

    def test_all_empty(self):
        result = parse_rsa(parse_nmea_sentence("$IIRSA,,V,,V*40"))
        assert result == RsaData(None, False, None, False)

    def test_invalid_status(self):
        with pytest.raises(MalformedFieldError) as excinfo:
            parse_rsa(_rsa("8.0,X,-2,A"))
        assert excinfo.value.name == "starboard_rudder_valid"

    def test_malformed_angle(self):
        with pytest.raises(MalformedFieldError):
            parse_rsa(_rsa("8.0deg,A,-2,A"))

    def test_missing_port_status(self):
        with pytest.raises(MalformedFieldError):
            parse_rsa(_rsa("8.0,A,-2"))

    def test_wrong_sentence_type(self):
        with pytest.raises(WrongSentenceTypeError) as excinfo:
            parse_rsa(NmeaSentence("II", SentenceType.RPM, "8.0,A,-2,A", 0x79))
        assert excinfo.value.expected is SentenceType.RSA

    def test_decoding_twice_gives_equal_records(self):
        assert parse_rsa(_rsa("8.0,A,-2,A")) == parse_rsa(_rsa("8.0,A,-2,A"))
