"""Instrument bus client yielding decoded NMEA 0183 records."""

from navbus.bus.reader import SentenceReader

__all__ = ["SentenceReader"]
