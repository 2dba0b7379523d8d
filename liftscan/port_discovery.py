"""Discovery of serial ports through the kernel's tty class directory."""

from __future__ import annotations

import os
import re
import struct
from pathlib import Path

try:
    import fcntl
    import termios
except ImportError:  # not a POSIX system
    fcntl = None  # type: ignore[assignment]
    termios = None  # type: ignore[assignment]

__all__ = ["driver_name", "list_serial_ports", "first_port_number", "SYS_TTY_DIR"]

SYS_TTY_DIR = "/sys/class/tty/"
_SERIAL8250 = "serial8250"
_PORT_UNKNOWN = 0
_TIOCGSERIAL_FALLBACK = 0x541E
_SERIAL_STRUCT_SIZE = 128
_LEADING_DIGITS = re.compile(r"\d+")


def driver_name(tty_dir: str | os.PathLike[str]) -> str:
    """Return the name of the driver behind a tty class entry, or ``""``.

    The entry must have a ``device`` symlink whose ``driver`` link points
    at the driver directory.
    """
    device = Path(tty_dir) / "device"
    if not device.is_symlink():
        return ""
    try:
        target = os.readlink(device / "driver")
    except OSError:
        return ""
    return os.path.basename(target.rstrip("/"))


def _is_live_8250(device: str) -> bool:
    """Whether a serial8250 device reports a known UART type."""
    if fcntl is None or termios is None:
        return False
    flags = os.O_RDWR | getattr(os, "O_NONBLOCK", 0) | getattr(os, "O_NOCTTY", 0)
    try:
        fd = os.open(device, flags)
    except OSError:
        return False
    try:
        request = getattr(termios, "TIOCGSERIAL", _TIOCGSERIAL_FALLBACK)
        buffer = bytearray(_SERIAL_STRUCT_SIZE)
        try:
            fcntl.ioctl(fd, request, buffer, True)
        except OSError:
            return False
        (port_type,) = struct.unpack_from("i", buffer)
        return port_type != _PORT_UNKNOWN
    finally:
        os.close(fd)


def list_serial_ports(sys_dir: str | os.PathLike[str] = SYS_TTY_DIR) -> list[str]:
    """Return the device files of the serial ports found under ``sys_dir``.

    Entries without a driver are skipped. Ports on the ``serial8250`` driver
    are probed and listed after the others only if they answer as a UART.
    """
    try:
        names = sorted(os.listdir(sys_dir))
    except OSError:
        return []

    ports: list[str] = []
    candidates_8250: list[str] = []
    for name in names:
        driver = driver_name(Path(sys_dir) / name)
        if not driver:
            continue
        device = f"/dev/{name}"
        if driver == _SERIAL8250:
            candidates_8250.append(device)
        else:
            ports.append(device)

    ports.extend(device for device in candidates_8250 if _is_live_8250(device))
    return ports


def first_port_number(ports: list[str]) -> int | None:
    """Return the number of the first port in ``ports``, or ``None`` if empty.

    The number is read from the first run of digits in the device name.
    """
    if not ports:
        return None
    name = ports[0]
    match = _LEADING_DIGITS.search(name)
    if match is None:
        raise ValueError(f"port name {name!r} carries no number")
    return int(match.group())