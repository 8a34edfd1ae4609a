"""NMEA data types for framed and decoded sentences.

This module defines the closed enumerations and the dataclasses produced by
the sentence decoders.

Design Decisions:
    1. Optional fields (float | None): NMEA fields may be empty, indicated by
       consecutive commas. Using None distinguishes "no data received" from
       "measured zero". A present but unparseable value is never None; the
       decoder raises instead.

    2. Frozen records: decoded sentences are values. They cannot be mutated
       after construction and compare equal field by field.

    3. Code enums with a str mixin: every single-letter code field has a closed
       set of members. Members compare equal to the letter on the wire
       (CrossTrackUnits.NAUTICAL_MILES == "N"), while a letter outside the set
       has no member at all.
"""

import datetime
from dataclasses import dataclass
from enum import Enum


class _Code(str, Enum):
    def __str__(self) -> str:
        return self.value


class SentenceType(_Code):
    """NMEA 0183 sentence formatters known to the framer.

    Only some of them have decoders; see ``navbus.nmea.registry``.
    """

    AAM = "AAM"
    ABK = "ABK"
    ACA = "ACA"
    ACK = "ACK"
    ACS = "ACS"
    AIR = "AIR"
    AKD = "AKD"
    ALA = "ALA"
    ALM = "ALM"
    ALR = "ALR"
    APA = "APA"
    APB = "APB"
    ASD = "ASD"
    BEC = "BEC"
    BOD = "BOD"
    BWC = "BWC"
    BWR = "BWR"
    BWW = "BWW"
    CUR = "CUR"
    DBK = "DBK"
    DBS = "DBS"
    DBT = "DBT"
    DPT = "DPT"
    DSC = "DSC"
    DTM = "DTM"
    GBS = "GBS"
    GGA = "GGA"
    GLL = "GLL"
    GNS = "GNS"
    GRS = "GRS"
    GSA = "GSA"
    GST = "GST"
    GSV = "GSV"
    HDG = "HDG"
    HDM = "HDM"
    HDT = "HDT"
    HSC = "HSC"
    MDA = "MDA"
    MTW = "MTW"
    MWD = "MWD"
    MWV = "MWV"
    OSD = "OSD"
    RMA = "RMA"
    RMB = "RMB"
    RMC = "RMC"
    ROT = "ROT"
    RPM = "RPM"
    RSA = "RSA"
    RSD = "RSD"
    RTE = "RTE"
    TLL = "TLL"
    TTM = "TTM"
    TXT = "TXT"
    VBW = "VBW"
    VDM = "VDM"
    VDO = "VDO"
    VHW = "VHW"
    VLW = "VLW"
    VPW = "VPW"
    VTG = "VTG"
    WCV = "WCV"
    WNC = "WNC"
    WPL = "WPL"
    XDR = "XDR"
    XTE = "XTE"
    XTR = "XTR"
    ZDA = "ZDA"
    ZFO = "ZFO"
    ZTG = "ZTG"


class SteerDirection(_Code):
    """Direction to steer to correct the cross-track error."""

    LEFT = "L"
    RIGHT = "R"


class CrossTrackUnits(_Code):
    """Units of the cross-track error magnitude."""

    NAUTICAL_MILES = "N"
    KILOMETERS = "K"


class BearingReference(_Code):
    """Reference of a bearing: magnetic or true north."""

    MAGNETIC = "M"
    TRUE = "T"


class RpmSource(_Code):
    """Origin of a revolution rate reading."""

    SHAFT = "S"
    ENGINE = "E"


@dataclass(frozen=True)
class NmeaSentence:
    """A framed sentence as handed over by the framer.

    Attributes:
        talker_id: Two-character talker identifier (e.g., "GP", "II").
            Not interpreted by the decoders.

        message_type: Sentence formatter, e.g. SentenceType.APA.

        data: Field text between the formatter and the checksum marker,
            without the leading comma and without "*hh".

        checksum: Transmitted checksum value (0-255). The decoders never
            verify it.
    """

    talker_id: str
    message_type: SentenceType
    data: str
    checksum: int


@dataclass(frozen=True)
class ApaData:
    """Parsed APA (Autopilot Sentence "A") sentence.

    Attributes:
        status_warning: False for a Loran-C blink or SNR warning, True for a
            general warning flag when a reliable fix is not available.

        status_cycle_warning: False for a Loran-C cycle lock warning,
            True when OK or not used.

        cross_track_error_magnitude: Distance off the intended track in
            ``cross_track_units``. None if field was empty.

        steer_left: True to steer left, False to steer right.

        cross_track_units: Nautical miles or kilometers.

        status_arrived: True once the arrival circle was entered.

        status_passed: True once the perpendicular at the waypoint
            was passed.

        bearing_origin_to_destination: Bearing from origin to destination in
            degrees. None if field was empty.

        bearing_reference: Whether the bearing is magnetic or true.

        waypoint_id: Destination waypoint identifier. May contain commas;
            it runs up to the checksum marker. None if empty.

    Example:
        >>> apa = parse_apa(parse_nmea_sentence(
        ...     "$GPAPA,A,A,0.10,R,N,V,V,011,M,DEST,011,M*42"))
        >>> apa.bearing_origin_to_destination
        11.0
        >>> apa.waypoint_id
        'DEST,011,M'
    """

    status_warning: bool
    status_cycle_warning: bool
    cross_track_error_magnitude: float | None
    steer_left: bool
    cross_track_units: CrossTrackUnits
    status_arrived: bool
    status_passed: bool
    bearing_origin_to_destination: float | None
    bearing_reference: BearingReference
    waypoint_id: str | None


@dataclass(frozen=True)
class RpmData:
    """Parsed RPM (Revolutions) sentence.

    Attributes:
        source: Shaft or engine. None if field was empty.

        engine_or_shaft_number: Numbered from the centre-line; odd is
            starboard, even is port, 0 is single or on the centre-line.
            None if field was empty.

        speed_revolutions_per_minute: Rotation speed. Negative values mean
            counter-clockwise rotation. None if field was empty.

        propeller_pitch_percent: Pitch as a percentage of maximum. Negative
            values mean pitch towards astern. None if field was empty.

        valid: True if the talker flagged the data as valid.
    """

    source: RpmSource | None
    engine_or_shaft_number: int | None
    speed_revolutions_per_minute: float | None
    propeller_pitch_percent: float | None
    valid: bool


@dataclass(frozen=True)
class RsaData:
    """Parsed RSA (Rudder Sensor Angle) sentence.

    Sensor values are proportional to the rudder angle but not necessarily
    equal to it. Negative values mean turn to port.

    Attributes:
        starboard_rudder_sensor: Starboard (or single) rudder sensor.
            None if field was empty.
        starboard_rudder_valid: Status of the starboard sensor.
        port_rudder_sensor: Port rudder sensor. None if field was empty.
        port_rudder_valid: Status of the port sensor.
    """

    starboard_rudder_sensor: float | None
    starboard_rudder_valid: bool
    port_rudder_sensor: float | None
    port_rudder_valid: bool


@dataclass(frozen=True)
class ZtgData:
    """Parsed ZTG (UTC and Time to Destination Waypoint) sentence.

    Attributes:
        fix_time: UTC time of observation. None if field was empty.
        time_remaining: Time left to reach the waypoint. None if empty.
        waypoint_id: Destination waypoint identifier. None if empty.
    """

    fix_time: datetime.time | None
    time_remaining: datetime.timedelta | None
    waypoint_id: str | None


SentenceData = ApaData | RpmData | RsaData | ZtgData
