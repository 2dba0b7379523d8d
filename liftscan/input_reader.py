"""Extraction of a 13-digit barcode from a scanned line."""

from __future__ import annotations

__all__ = ["BarcodeError", "parse_line"]

_BARCODE_LENGTH = 13
_PREFIX_LENGTH = 2


class BarcodeError(ValueError):
    """Raised when a scanned line does not hold a barcode."""


def parse_line(line: str) -> str:
    """Return the 13-character barcode held in a scanned line.

    A line starting with ``2`` holds the barcode in its first 13 characters;
    a line starting with ``0`` holds it after a two-character prefix.
    """
    if len(line) < _BARCODE_LENGTH:
        raise BarcodeError("input line is not a barcode")
    if line[0] == "2":
        return line[:_BARCODE_LENGTH]
    if line[0] == "0":
        end = _PREFIX_LENGTH + _BARCODE_LENGTH
        if len(line) < end:
            raise BarcodeError("input line is not a barcode")
        return line[_PREFIX_LENGTH:end]
    raise BarcodeError("wrong barcode format")