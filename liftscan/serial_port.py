"""Synchronous access to the serial port the barcode scanner is attached to."""

from __future__ import annotations

import time
from types import TracebackType

import serial

from liftscan.port_discovery import first_port_number, list_serial_ports
from liftscan.serial_settings import DEFAULT_DEVICE_NAME, PortSettings, device_path

__all__ = ["ComPort"]

_POLL_INTERVAL = 0.05
_WORD_ENDS = (b" ", b"\0", b"\n")


class ComPort:
    """A serial port opened with :class:`PortSettings`.

    The port is opened by :meth:`open` or by entering it as a context
    manager. Without a port number the first port found on the system is
    used. Operations on a port that is not open raise
    :class:`serial.SerialException`.
    """

    def __init__(
        self,
        number: int | None = None,
        settings: PortSettings | None = None,
        device_name: str = DEFAULT_DEVICE_NAME,
    ) -> None:
        self.settings = settings if settings is not None else PortSettings()
        self.device_name = device_name
        self._requested_number = number
        self._url: str | None = None
        self._port: serial.SerialBase | None = None
        self.number: int | None = None

    @classmethod
    def from_url(cls, url: str, settings: PortSettings | None = None) -> ComPort:
        """Return a port that opens a serial URL such as ``loop://``."""
        port = cls(None, settings)
        port._url = url
        return port

    @property
    def is_open(self) -> bool:
        """Whether the port is open."""
        return self._port is not None and self._port.is_open

    def _serial_options(self) -> dict[str, object]:
        settings = self.settings.validate()
        return {
            "baudrate": settings.baud_rate,
            "bytesize": settings.data_bits,
            "parity": settings.parity.value,
            "stopbits": settings.stop_bits.value,
            "timeout": _POLL_INTERVAL,
            "xonxoff": False,
            "rtscts": False,
            "dsrdtr": False,
        }

    def open(self) -> ComPort:
        """Open the port, closing it first if it is already open."""
        self.close()
        options = self._serial_options()
        if self._url is not None:
            self._port = serial.serial_for_url(self._url, **options)
            self.number = None
            return self

        number = self._requested_number
        if number is None:
            number = first_port_number(list_serial_ports())
            if number is None:
                raise serial.SerialException("port is not found")
        path = device_path(number, self.device_name)
        self._port = serial.Serial(port=path, **options)
        self.number = number
        return self

    def close(self) -> None:
        """Close the port if it is open."""
        if self._port is not None:
            self._port.close()
            self._port = None

    def _require_open(self) -> serial.SerialBase:
        if self._port is None or not self._port.is_open:
            raise serial.SerialException("com port is not open")
        return self._port

    def write(self, data: bytes | bytearray | memoryview | str | int | float) -> int:
        """Send data and return the number of bytes written.

        Text is sent as UTF-8; integers and floats are sent in decimal,
        floats with six digits after the point.
        """
        port = self._require_open()
        if isinstance(data, bool):
            raise TypeError("cannot write a bool to the port")
        if isinstance(data, str):
            payload = data.encode("utf-8")
        elif isinstance(data, int):
            payload = str(data).encode("ascii")
        elif isinstance(data, float):
            payload = f"{data:f}".encode("ascii")
        elif isinstance(data, (bytes, bytearray, memoryview)):
            payload = bytes(data)
        else:
            raise TypeError(f"cannot write {type(data).__name__} to the port")
        written = port.write(payload)
        port.flush()
        return len(payload) if written is None else written

    def read(self, max_bytes: int) -> bytes:
        """Return up to ``max_bytes`` of the bytes already received."""
        port = self._require_open()
        if max_bytes < 0:
            raise ValueError("max_bytes must not be negative")
        available = port.in_waiting
        if not available or not max_bytes:
            return b""
        return port.read(min(max_bytes, available))

    def bytes_to_read(self) -> int:
        """Return the number of received bytes waiting to be read."""
        return self._require_open().in_waiting

    def read_byte(self) -> bytes:
        """Wait for one byte and return it."""
        port = self._require_open()
        while True:
            chunk = port.read(1)
            if chunk:
                return chunk

    def _deadline(self) -> float | None:
        timeout = self.settings.timeout
        return time.monotonic() + timeout if timeout else None

    @staticmethod
    def _check_deadline(deadline: float | None) -> None:
        if deadline is not None and time.monotonic() > deadline:
            raise TimeoutError("timeout while reading a line from the port")

    def get_line(self) -> str:
        """Read up to the next ``\\n`` and return the text before it.

        With a non-zero timeout in the settings, :class:`TimeoutError` is
        raised when the line is not complete in time.
        """
        port = self._require_open()
        deadline = self._deadline()
        line = bytearray()
        while True:
            chunk = port.read(1)
            self._check_deadline(deadline)
            if not chunk:
                continue
            if chunk == b"\n":
                break
            line += chunk
        return line.decode("utf-8", errors="replace")

    def get_word(self) -> str:
        """Skip leading spaces and read up to a space, NUL or ``\\n``."""
        port = self._require_open()
        word = bytearray()
        started = False
        while True:
            chunk = port.read(1)
            if not chunk:
                continue
            if not started and chunk != b" ":
                started = True
            if not started:
                continue
            if chunk in _WORD_ENDS:
                break
            word += chunk
        return word.decode("utf-8", errors="replace")

    def flush_rx(self) -> None:
        """Discard received bytes not yet read."""
        if self.is_open:
            self._port.reset_input_buffer()

    def flush_tx(self) -> None:
        """Discard bytes not yet sent."""
        if self.is_open:
            self._port.reset_output_buffer()

    def flush_rx_and_tx(self) -> None:
        """Discard both received and unsent bytes."""
        self.flush_rx()
        self.flush_tx()

    def __enter__(self) -> ComPort:
        if not self.is_open:
            self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()