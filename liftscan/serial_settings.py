"""Serial line settings for the barcode scanner port and their checks."""

from __future__ import annotations

import enum
from dataclasses import dataclass

__all__ = [
    "SerialSettingsError",
    "Parity",
    "StopBits",
    "Mode",
    "PortSettings",
    "device_path",
    "STANDARD_BAUD_RATES",
    "DEFAULT_DEVICE_NAME",
]

DEFAULT_DEVICE_NAME = "ttyUSB"
_MAX_PORT_NUMBER = 0xFFFF

STANDARD_BAUD_RATES = frozenset(
    {
        0, 50, 110, 134, 150, 200, 300, 600, 1200, 1800, 2400, 4800, 9600,
        19200, 38400, 57600, 115200, 230400, 460800, 500000, 576000, 921600,
        1000000, 1152000, 1500000, 2000000, 2500000, 3000000, 3500000, 4000000,
    }
)


class SerialSettingsError(ValueError):
    """Raised when serial port settings cannot be applied."""


class Parity(enum.Enum):
    """Parity checking; the values are the letters serial libraries use."""

    EVEN = "E"
    MARK = "M"
    NONE = "N"
    ODD = "O"
    SPACE = "S"


class StopBits(enum.Enum):
    """Number of stop bits."""

    ONE = 1
    ONE_POINT_FIVE = 1.5
    TWO = 2


class Mode(enum.Enum):
    """How the port is used; only synchronous access is implemented."""

    SYNCHRONOUS = "synchronous"
    ASYNCHRONOUS = "asynchronous"


@dataclass(frozen=True)
class PortSettings:
    """Line settings: 9600 baud, 8 data bits, no parity, one stop bit by default.

    ``timeout`` is in whole seconds and bounds how long a line read may take;
    zero means wait without limit.
    """

    baud_rate: int = 9600
    parity: Parity = Parity.NONE
    data_bits: int = 8
    stop_bits: StopBits = StopBits.ONE
    mode: Mode = Mode.SYNCHRONOUS
    timeout: int = 0

    def validate(self) -> PortSettings:
        """Check that the settings can be applied and return them unchanged."""
        if not 5 <= self.data_bits <= 8:
            raise SerialSettingsError(
                "the number of data bits should be from 5 to 8 bits"
            )
        if self.baud_rate not in STANDARD_BAUD_RATES:
            raise SerialSettingsError(
                f"invalid baud rate {self.baud_rate}: non-standard value"
            )
        if self.parity in (Parity.MARK, Parity.SPACE):
            raise SerialSettingsError(
                f"parity {self.parity.name} is not supported"
            )
        if self.stop_bits is StopBits.ONE_POINT_FIVE and self.data_bits >= 6:
            raise SerialSettingsError(
                "1.5 stop bits can only be used with 5 data bits"
            )
        return self


def device_path(number: int, name: str = DEFAULT_DEVICE_NAME) -> str:
    """Return the device file of port ``number``, such as ``/dev/ttyUSB0``."""
    if not 0 <= number <= _MAX_PORT_NUMBER:
        raise SerialSettingsError(f"invalid port number {number}")
    return f"/dev/{name}{number}"