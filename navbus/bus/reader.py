"""SentenceReader: NMEA 0183 client for an instrument bus gateway.

Multiplexers and Wi-Fi gateways forward the instrument bus as a plain TCP
byte stream (port 10110 is registered for NMEA-0183 over TCP). The stream is
cut into CR/LF terminated sentences here; each sentence is framed, its
checksum verified and its data decoded through ``navbus.nmea.parse_nmea``.

Line framing:
    Bytes are received into a buffer and split on LF; a trailing CR is
    dropped. A sentence on the wire is at most 82 characters including the
    terminator, so a line longer than ``max_line_length`` is discarded and
    the reader resynchronises at the next LF. Bytes left over when the
    stream ends are an incomplete sentence and are dropped.

Skipping:
    Lines that fail to frame or decode, overlong lines and sentence types
    without a decoder are counted in ``discarded`` and logged at DEBUG
    level. Blank lines are ignored without counting.

Cancellation:
    Reads block on the socket with no timeout. ``cancel()`` shuts the socket
    down, which wakes a blocked ``recv`` with end of stream; the reader then
    raises ``EOFError``.
"""

import contextlib
import logging
import socket
from collections.abc import Iterator
from types import TracebackType

from navbus.nmea.errors import NmeaError
from navbus.nmea.registry import parse_nmea
from navbus.nmea.types import SentenceData

__all__ = ["SentenceReader"]

_logger = logging.getLogger(__name__)

# --- connection defaults ------------------------------------------------------

_HOST = "localhost"
_PORT = 10110
_CONNECT_TIMEOUT = 5.0

# --- line framing -------------------------------------------------------------

_MAX_LINE_LENGTH = 80  # 82 on the wire, less CR/LF
_RECV_SIZE = 4096


class SentenceReader:
    """Context manager yielding decoded records from an NMEA TCP stream.

    Iterate for a continuous feed::

        with SentenceReader() as bus:
            for record in bus:
                process(record)

    or call ``read()`` for the next record only. Records are ``ApaData``,
    ``RpmData``, ``RsaData`` or ``ZtgData``.

    Args:
        host: Gateway host.
        port: Gateway TCP port.
        connect_timeout: Seconds to wait for the connection to be accepted.
            Reads afterwards block until data arrives or ``cancel()``.
        max_line_length: Longest accepted line in bytes, terminator excluded.
    """

    def __init__(
        self,
        host: str = _HOST,
        port: int = _PORT,
        connect_timeout: float = _CONNECT_TIMEOUT,
        max_line_length: int = _MAX_LINE_LENGTH,
    ) -> None:
        self._host = host
        self._port = port
        self._connect_timeout = connect_timeout
        self._max_line_length = max_line_length
        self._sock: socket.socket | None = None
        self._buffer = bytearray()
        self._overflowed = False
        self._cancelled = False
        self.discarded = 0

    def __enter__(self) -> "SentenceReader":
        sock = socket.create_connection(
            (self._host, self._port), self._connect_timeout
        )
        try:
            sock.settimeout(None)
        except OSError:
            sock.close()
            raise
        self._sock = sock
        self._buffer.clear()
        self._overflowed = False
        self._cancelled = False
        self.discarded = 0
        _logger.info("Connected to NMEA gateway at %s:%d", self._host, self._port)
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if self._sock is not None:
            self._sock.close()
            self._sock = None

    def cancel(self) -> None:
        """Make a pending or later ``read()`` raise ``EOFError``.

        Safe to call from another thread.
        """
        self._cancelled = True
        if self._sock is not None:
            with contextlib.suppress(OSError):
                self._sock.shutdown(socket.SHUT_RDWR)

    def _receive(self, sock: socket.socket) -> bytes:
        """Receive the next chunk of the stream.

        Raises:
            EOFError: If cancelled, or the connection ended or failed.
        """
        try:
            chunk = sock.recv(_RECV_SIZE)
        except OSError as e:
            if self._cancelled:
                raise EOFError("NMEA read cancelled.") from e
            raise EOFError("NMEA connection closed.") from e
        if not chunk:
            if self._cancelled:
                raise EOFError("NMEA read cancelled.")
            if self._buffer:
                _logger.debug("Dropping incomplete line %r", bytes(self._buffer))
            raise EOFError("NMEA stream ended.")
        return chunk

    def _discard(self, line: object, reason: object) -> None:
        self.discarded += 1
        _logger.debug("Discarding %r: %s", line, reason)

    def _next_line(self, sock: socket.socket) -> str:
        """Return the next complete line without its CR/LF terminator."""
        while True:
            end = self._buffer.find(b"\n")
            if end < 0:
                if len(self._buffer) > self._max_line_length + 1:
                    if not self._overflowed:
                        head = bytes(self._buffer[:16]) + b"..."
                        self._discard(head, "line too long")
                    self._overflowed = True
                    self._buffer.clear()
                self._buffer += self._receive(sock)
                continue

            raw = bytes(self._buffer[:end]).rstrip(b"\r")
            del self._buffer[: end + 1]
            if self._overflowed:
                # tail of a line already counted as too long
                self._overflowed = False
                continue
            if len(raw) > self._max_line_length:
                self._discard(raw, "line too long")
                continue
            return raw.decode("utf-8", errors="replace")

    def _decode(self, line: str) -> SentenceData | None:
        if not line.strip():
            return None
        try:
            return parse_nmea(line)
        except NmeaError as e:
            self._discard(line, e)
            return None

    def read(self) -> SentenceData:
        """Block until the next decodable sentence and return its record.

        Raises:
            RuntimeError: If called outside a ``with`` block.
            EOFError: If the read is cancelled or the stream ends.
        """
        if self._sock is None:
            raise RuntimeError("SentenceReader must be used as a context manager.")
        while True:
            record = self._decode(self._next_line(self._sock))
            if record is not None:
                return record

    def __iter__(self) -> Iterator[SentenceData]:
        """Yield records until the stream ends or ``cancel()`` is called.

        The end is signalled by ``EOFError`` from the underlying ``read()``.
        """
        while True:
            yield self.read()
