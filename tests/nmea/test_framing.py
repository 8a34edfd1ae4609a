"""Tests for NMEA framing and checksum validation."""

import pytest

from navbus import validate_checksum
from navbus.nmea import (
    FramingError,
    SentenceType,
    UnknownSentenceTypeError,
    parse_nmea_sentence,
)
from navbus.nmea.framing import calculate_checksum, calculate_sentence_checksum

APA_VALID = "$GPAPA,A,A,0.10,R,N,V,V,011,M,DEST,011,M*42"
ZTG_VALID = "$GPZTG,145832.12,042359.17,WPT*24"


class TestValidateChecksum:
    """Tests for validate_checksum function."""

    def test_valid_apa_checksum(self):
        assert validate_checksum(APA_VALID) is True

    def test_valid_checksum_with_newline(self):
        assert validate_checksum(APA_VALID + "\r\n") is True

    def test_lowercase_hex_is_accepted(self):
        assert validate_checksum("$IIRPM,E,2,-1200.5,-45.0,A*52") is True
        assert validate_checksum("$GPABK,1,2*5c") is True

    def test_invalid_checksum(self):
        assert validate_checksum(APA_VALID[:-2] + "FF") is False

    def test_missing_dollar_sign(self):
        assert validate_checksum(APA_VALID[1:]) is False

    def test_missing_asterisk(self):
        assert validate_checksum(APA_VALID.replace("*", "")) is False

    def test_empty_string(self):
        assert validate_checksum("") is False

    def test_truncated_checksum(self):
        assert validate_checksum(APA_VALID[:-1]) is False

    def test_non_hex_checksum(self):
        assert validate_checksum(APA_VALID[:-2] + "ZZ") is False

    def test_calculate_checksum(self):
        assert calculate_checksum("GPZTG,,,") == 0x72


class TestParseNmeaSentence:
    """Tests for parse_nmea_sentence function."""

    def test_splits_header_data_and_checksum(self):
        sentence = parse_nmea_sentence(APA_VALID)
        assert sentence.talker_id == "GP"
        assert sentence.message_type is SentenceType.APA
        assert sentence.data == "A,A,0.10,R,N,V,V,011,M,DEST,011,M"
        assert sentence.checksum == 0x42

    def test_strips_line_ending(self):
        assert parse_nmea_sentence(ZTG_VALID + "\r\n").data == "145832.12,042359.17,WPT"

    def test_empty_data(self):
        assert parse_nmea_sentence("$GPZTG,,,*72").data == ",,"

    def test_checksum_is_not_verified(self):
        assert parse_nmea_sentence(APA_VALID[:-2] + "00").checksum == 0

    def test_sentence_checksum_matches_transmitted(self):
        sentence = parse_nmea_sentence(APA_VALID)
        assert calculate_sentence_checksum(sentence) == sentence.checksum

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "GPAPA,A*42",
            "$GPAPA,A",
            "$GPAPA,A*4",
            "$GPAPA,A*4G",
            "$GPAPA,A*42X",
            "$GPAPA*42",
            "$GPAPAX,A*42",
            "$APA,A*42",
        ],
    )
    def test_malformed_framing(self, line):
        with pytest.raises(FramingError):
            parse_nmea_sentence(line)

    def test_unknown_sentence_type(self):
        with pytest.raises(UnknownSentenceTypeError) as excinfo:
            parse_nmea_sentence("$IIXXX,1*45")
        assert excinfo.value.message_type == "XXX"
