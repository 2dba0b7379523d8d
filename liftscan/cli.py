"""Interactive scanning loop: look up scanned barcodes and write packages."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from liftscan.elevator import ElevatorControl
from liftscan.input_reader import BarcodeError, parse_line
from liftscan.json_reader import fill_barcodes, save_transport_package

__all__ = ["run", "main"]

READY = "Ready"
EMPTY_LIST = "List is empty, nothing to send."
PACKAGE_WRITTEN = "Transport package written. Package name: "
PACKAGE_FAILED = "Error writing the transport package to file"
LOAD_FAILED = "Cannot read barcodes, the encoding of {} may be wrong"
SEND_BARCODE = "0000000000000"


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def run(
    control: ElevatorControl,
    lines: Iterable[str],
    directory: str | os.PathLike[str] = ".",
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> None:
    """Process scanned words from ``lines`` until the input ends."""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err
    tokens = _tokens(lines)
    while True:
        print(READY, file=out)
        token = next(tokens, None)
        if token is None:
            return
        try:
            barcode = parse_line(token)
        except BarcodeError as exc:
            print(exc, file=err)
            continue

        if barcode == SEND_BARCODE:
            if not control.has_barcodes_to_send():
                print(EMPTY_LIST, file=out)
                continue
            try:
                name = save_transport_package(control, directory)
            except OSError:
                print(PACKAGE_FAILED, file=err)
            else:
                print(f"{PACKAGE_WRITTEN}{name}", file=out)
            continue

        name_product = control.product_name(barcode)
        if name_product is not None:
            print(name_product, file=out)
            control.add_barcode_to_send(barcode)


def main(argv: list[str] | None = None) -> int:
    """Load the barcode catalogue and scan barcodes from standard input."""
    parser = argparse.ArgumentParser(prog="liftscan", description=main.__doc__)
    parser.add_argument("--barcodes", default="barcode.json", help="barcode catalogue")
    parser.add_argument("--output-dir", default=".", help="where packages are written")
    args = parser.parse_args(argv)

    control = ElevatorControl()
    try:
        fill_barcodes(args.barcodes, control)
    except (OSError, ValueError, TypeError):
        print(LOAD_FAILED.format(args.barcodes), file=sys.stderr)
        return 1

    run(control, sys.stdin, args.output_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())