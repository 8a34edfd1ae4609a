"""Tests for ZTG sentence parsing."""

import datetime

import pytest

from navbus import parse_nmea_sentence, parse_ztg
from navbus.nmea import (
    MalformedFieldError,
    NmeaSentence,
    SentenceType,
    TextLengthError,
    WrongSentenceTypeError,
    ZtgData,
)


def _run_parse_ztg(line: str) -> ZtgData:
    return parse_ztg(parse_nmea_sentence(line))


def _ztg(data: str) -> NmeaSentence:
    return NmeaSentence("GP", SentenceType.ZTG, data, 0x0)


_REMAINING = datetime.timedelta(hours=4, minutes=23, seconds=59, milliseconds=170)


class TestParseZTG:
    """Tests for parse_ztg function."""

    def test_valid_ztg(self):
        assert _run_parse_ztg("$GPZTG,145832.12,042359.17,WPT*24") == ZtgData(
            fix_time=datetime.time(14, 58, 32, 120000),
            time_remaining=_REMAINING,
            waypoint_id="WPT",
        )

    def test_all_fields_empty(self):
        assert _run_parse_ztg("$GPZTG,,,*72") == ZtgData(
            fix_time=None,
            time_remaining=None,
            waypoint_id=None,
        )

    def test_only_duration(self):
        assert _run_parse_ztg("$GPZTG,,042359.17,*53") == ZtgData(
            fix_time=None,
            time_remaining=_REMAINING,
            waypoint_id=None,
        )

    def test_too_long_waypoint(self):
        waypoint = "ABCDEFGHIJKLMNOPRSTUWXYZ" * 3
        with pytest.raises(TextLengthError) as excinfo:
            parse_ztg(_ztg(f"145832.12,042359.17,{waypoint}"))
        assert excinfo.value.max_length == 64
        assert excinfo.value.actual_length == 72

    def test_waypoint_stops_at_separator(self):
        assert parse_ztg(_ztg("145832.12,042359.17,WPT,extra")).waypoint_id == "WPT"

    def test_invalid_hour(self):
        with pytest.raises(MalformedFieldError) as excinfo:
            parse_ztg(_ztg("250000.00,042359.17,WPT"))
        assert excinfo.value.name == "fix_time"

    def test_malformed_duration(self):
        with pytest.raises(MalformedFieldError) as excinfo:
            parse_ztg(_ztg("145832.12,04:23,WPT"))
        assert excinfo.value.name == "time_remaining"

    def test_missing_waypoint_separator(self):
        with pytest.raises(MalformedFieldError):
            parse_ztg(_ztg("145832.12,042359.17"))

    def test_wrong_sentence_type(self):
        with pytest.raises(WrongSentenceTypeError) as excinfo:
            parse_ztg(NmeaSentence("GP", SentenceType.APA, ",,", 0x72))
        assert excinfo.value.expected is SentenceType.ZTG
        assert excinfo.value.found is SentenceType.APA

    def test_decoding_twice_gives_equal_records(self):
        line = "$GPZTG,145832.12,042359.17,WPT*24"
        assert _run_parse_ztg(line) == _run_parse_ztg(line)
