"""Reading the barcode catalogue and writing transport packages as JSON."""

from __future__ import annotations

import os
import time
from pathlib import Path
from typing import Any

from liftscan import jsonio
from liftscan.builder import Builder
from liftscan.elevator import ElevatorControl, TransportPacket

__all__ = ["fill_barcodes", "save_transport_package"]


def _as_string(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"value of {key!r} must be a string")
    return value


def fill_barcodes(path: str | os.PathLike[str], control: ElevatorControl) -> None:
    """Load ``barcode``/``name_product`` pairs from a JSON array into ``control``.

    An entry missing one of the keys reuses the value of the previous entry.
    """
    with open(path, encoding="utf-8") as stream:
        root = jsonio.load(stream)
    if not isinstance(root, list):
        raise TypeError("the barcode list must be a JSON array")

    barcode = ""
    name_product = ""
    for entry in root:
        if not isinstance(entry, dict):
            raise TypeError("each barcode entry must be a JSON object")
        if "barcode" in entry:
            barcode = _as_string(entry["barcode"], "barcode")
        if "name_product" in entry:
            name_product = _as_string(entry["name_product"], "name_product")
        control.add_barcode(name_product, barcode)


def save_transport_package(
    control: ElevatorControl,
    directory: str | os.PathLike[str] = ".",
    now: int | None = None,
) -> str:
    """Write the queued barcodes to a new package file and return its name."""
    timestamp = int(time.time()) if now is None else int(now)
    packet = TransportPacket(
        id=control.packet_id,
        time_point=str(timestamp),
        array_barcodes=control.barcodes_to_send(),
    )
    document = (
        Builder()
        .start_dict()
        .key("id")
        .value(packet.id)
        .key("time_point")
        .value(packet.time_point)
        .key("array_barcodes")
        .value(packet.array_barcodes)
        .end_dict()
        .build()
    )
    name = f"tranport_package_{packet.id}_{timestamp}.json"
    with open(Path(directory) / name, "w", encoding="utf-8") as out:
        jsonio.dump(document, out)
    return name