"""Barcode scanning station that collects products into JSON transport packages."""

__version__ = "0.1.0"

__all__ = [
    "builder",
    "cli",
    "elevator",
    "input_reader",
    "json_reader",
    "jsonio",
    "port_discovery",
    "serial_port",
    "serial_settings",
]