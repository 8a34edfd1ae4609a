"""Tests for RPM sentence parsing."""

import pytest

from navbus import parse_nmea_sentence, parse_rpm
from navbus.nmea import (
    MalformedFieldError,
    NmeaSentence,
    RpmData,
    RpmSource,
    SentenceType,
    WrongSentenceTypeError,
)


def _rpm(data: str) -> NmeaSentence:
    return NmeaSentence("II", SentenceType.RPM, data, 0x0)


class TestParseRPM:
    """Tests for parse_rpm function."""

    def test_valid_rpm_full(self):
        result = parse_rpm(parse_nmea_sentence("$IIRPM,S,1,31,100,A*73"))
        assert result == RpmData(
            source=RpmSource.SHAFT,
            engine_or_shaft_number=1,
            speed_revolutions_per_minute=31.0,
            propeller_pitch_percent=100.0,
            valid=True,
        )

    def test_negative_speed_and_pitch_keep_sign(self):
        result = parse_rpm(_rpm("E,2,-1200.5,-45.0,A"))
        assert result.source is RpmSource.ENGINE
        assert result.engine_or_shaft_number == 2
        assert result.speed_revolutions_per_minute == pytest.approx(-1200.5)
        assert result.propeller_pitch_percent == pytest.approx(-45.0)

    def test_all_optional_fields_empty(self):
        result = parse_rpm(_rpm(",,,,V"))
        assert result.source is None
        assert result.engine_or_shaft_number is None
        assert result.speed_revolutions_per_minute is None
        assert result.propeller_pitch_percent is None
        assert result.valid is False

    def test_invalid_source(self):
        with pytest.raises(MalformedFieldError) as excinfo:
            parse_rpm(_rpm("X,1,31,100,A"))
        assert excinfo.value.name == "source"

    def test_engine_number_out_of_range(self):
        with pytest.raises(MalformedFieldError):
            parse_rpm(_rpm("S,128,31,100,A"))

    def test_malformed_speed(self):
        with pytest.raises(MalformedFieldError) as excinfo:
            parse_rpm(_rpm("S,1,fast,100,A"))
        assert excinfo.value.name == "speed_revolutions_per_minute"

    def test_empty_status_is_malformed(self):
        with pytest.raises(MalformedFieldError):
            parse_rpm(_rpm("S,1,31,100,"))

    def test_missing_status_field(self):
        with pytest.raises(MalformedFieldError):
            parse_rpm(_rpm("S,1,31,100"))

    def test_content_after_status_is_ignored(self):
        assert parse_rpm(_rpm("S,1,31,100,A,X")) == parse_rpm(_rpm("S,1,31,100,A"))

    def test_wrong_sentence_type(self):
        with pytest.raises(WrongSentenceTypeError) as excinfo:
            parse_rpm(NmeaSentence("II", SentenceType.RSA, "S,1,31,100,A", 0x73))
        assert excinfo.value.expected is SentenceType.RPM
        assert excinfo.value.found is SentenceType.RSA

    def test_decoding_twice_gives_equal_records(self):
        data = "E,2,-1200.5,-45.0,A"
        assert parse_rpm(_rpm(data)) == parse_rpm(_rpm(data))
