# liftscan

A small console station for scanning product barcodes and collecting them
into JSON transport packages.

## How it works

At start-up `liftscan` reads a barcode catalogue, `barcode.json` in the
current directory by default. The file holds a JSON array of objects, each
with a `barcode` and a `name_product`:

```json
[
  { "barcode": "2000000000015", "name_product": "Sample product" }
]
```

An entry that lacks one of the two keys reuses the value from the entry
before it. If the catalogue cannot be read, an error is printed to standard
error and the command exits with status 1.

The station then prints `Ready` and reads whitespace-separated words from
standard input, one scan at a time:

- A word beginning with `2` is taken as a barcode: its first 13 characters.
- A word beginning with `0` is taken as the 13 characters after the first two.
- Any other word, or one too short to hold a barcode, is reported on
  standard error and skipped.

When a scanned barcode is in the catalogue, its product name is printed and
the barcode is queued. Barcodes that are not in the catalogue are ignored
without a message.

Scanning `0000000000000` writes the queued barcodes to a new file named
`tranport_package_<id>_<unix time>.json` and prints
`Transport package written. Package name: <name>`. The file looks like:

```json
{ "array_barcodes": ["2000000000015"], "id": 0, "time_point": "1700000000" }
```

If nothing has been queued, the station prints
`List is empty, nothing to send.` instead. A file that cannot be written is
reported on standard error and the station carries on.

The loop ends when standard input ends.

## Installation

```
pip install .
```

## Usage

```
liftscan [--barcodes PATH] [--output-dir DIR]
```

- `--barcodes` — the catalogue file (default `barcode.json`).
- `--output-dir` — where transport packages are written (default `.`).

## Library use

The pieces are usable on their own:

- `liftscan.jsonio` — `load`, `loads`, `dump`, `dumps` and `ParsingError`.
  Integers outside the 32-bit range are read as floats; dictionaries are
  written with sorted keys.
- `liftscan.builder.Builder` — chained construction of JSON values
  (`start_dict`, `key`, `value`, `end_dict`, `start_array`, `end_array`,
  `build`), raising `BuilderError` on calls out of place.
- `liftscan.input_reader.parse_line` — turns a scanned word into a barcode,
  raising `BarcodeError` on bad input.
- `liftscan.elevator.ElevatorControl` — the barcode catalogue, the queue of
  barcodes to send and the `packet_id`; `TransportPacket` holds one package.
- `liftscan.json_reader` — `fill_barcodes(path, control)` and
  `save_transport_package(control, directory=".", now=None)`.
- `liftscan.cli.run(control, lines, directory, out, err)` — the scanning loop
  over any iterable of lines.
- `liftscan.serial_settings` — `PortSettings` (9600 baud, 8 data bits, no
  parity, one stop bit by default), `Parity`, `StopBits`, `Mode`,
  `SerialSettingsError` and `device_path`.
- `liftscan.port_discovery` — `list_serial_ports`, `driver_name` and
  `first_port_number`, reading `/sys/class/tty/`.
- `liftscan.serial_port.ComPort` — a serial port built on pyserial, usable as
  a context manager, with `write`, `read`, `read_byte`, `bytes_to_read`,
  `get_line`, `get_word` and the `flush_*` methods:

```python
from liftscan.serial_port import ComPort

with ComPort.from_url("loop://") as port:
    port.write("2000000000015\n")
    print(port.get_line())
```

## What it does not do

- The `liftscan` command reads scans from standard input only; it does not
  read from a serial port. `ComPort` is there for programs that want to.
- The queue of scanned barcodes is never cleared and the packet id is never
  advanced by the command, so every package written holds all barcodes
  scanned since start-up under id `0`.
- Packages are only written to files; nothing sends them anywhere.

## Running the tests

```
pip install .[test]
pytest
```