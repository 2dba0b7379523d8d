"""State of the scanning station: known products and barcodes queued to send."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["TransportPacket", "ElevatorControl"]


@dataclass
class TransportPacket:
    """One package of scanned barcodes ready to be written out."""

    id: int
    time_point: str
    array_barcodes: list[str] = field(default_factory=list)


class ElevatorControl:
    """Maps barcodes to product names and collects barcodes to send."""

    def __init__(self) -> None:
        self._products: dict[str, str] = {}
        self._to_send: list[str] = []
        self.packet_id = 0

    def add_barcode(self, name_product: str, barcode: str) -> None:
        """Register the product name for a barcode."""
        self._products[barcode] = name_product

    def product_name(self, barcode: str) -> str | None:
        """Return the product name for a barcode, or ``None`` if unknown."""
        if not barcode:
            return None
        return self._products.get(barcode)

    def add_barcode_to_send(self, barcode: str) -> None:
        """Queue a scanned barcode for the next transport package."""
        self._to_send.append(barcode)

    def increment_packet_id(self) -> None:
        """Advance the transport packet number."""
        self.packet_id += 1

    def has_barcodes_to_send(self) -> bool:
        """Whether any barcodes are queued."""
        return bool(self._to_send)

    def barcodes_to_send(self) -> list[str]:
        """Return a copy of the queued barcodes, in scanning order."""
        return list(self._to_send)