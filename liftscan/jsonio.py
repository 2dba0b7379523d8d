"""A small JSON reader and writer for barcode lists and transport packages.

Values are plain Python objects: ``None``, ``bool``, ``int``, ``float``,
``str``, ``list`` and ``dict``.  Integers that do not fit in 32 bits are read
as floats, dictionaries are written with their keys in sorted order, and
floats are written in the shortest ``%g`` form.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from typing import Any, TextIO

__all__ = ["ParsingError", "load", "loads", "dump", "dumps"]

_WHITESPACE = " \t\n\r\v\f"
_WORD_SKIP = " \t\n\r"
_WORD_END = ",]}"
_DIGITS = "0123456789"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_ESCAPES_IN = {"n": "\n", "t": "\t", "r": "\r", '"': '"', "\\": "\\"}
_ESCAPES_OUT = str.maketrans(
    {'"': '\\"', "\n": "\\n", "\t": "\\t", "\r": "\\r", "\\": "\\\\"}
)


class ParsingError(ValueError):
    """Raised when the input is not a valid JSON document."""


class _Parser:
    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _next_token(self) -> str:
        """Return the next non-blank character, or an empty string at the end."""
        text = self._text
        while self._pos < len(text) and text[self._pos] in _WHITESPACE:
            self._pos += 1
        if self._pos >= len(text):
            return ""
        ch = text[self._pos]
        self._pos += 1
        return ch

    def parse_node(self) -> Any:
        c = self._next_token()
        if not c:
            return None
        c1 = self._peek()
        if c == "[":
            return self._parse_array()
        if c == "{":
            return self._parse_dict()
        if c == '"':
            return self._parse_string()
        if c == "n" and c1 == "u":
            if self._read_word(c) != "null":
                raise ParsingError("invalid null value")
            return None
        if (c == "t" and c1 == "r") or (c == "f" and c1 == "a"):
            word = self._read_word(c)
            if word == "true":
                return True
            if word == "false":
                return False
            raise ParsingError("invalid boolean value")
        self._pos -= 1
        return self._parse_number()

    def _read_word(self, first: str) -> str:
        chars = [first]
        text = self._text
        while self._pos < len(text):
            ch = text[self._pos]
            if ch not in _WORD_SKIP:
                if ch in _WORD_END:
                    break
                chars.append(ch)
            self._pos += 1
        return "".join(chars)

    def _parse_array(self) -> list[Any]:
        result: list[Any] = []
        while True:
            c = self._next_token()
            if not c:
                raise ParsingError("missing closing bracket in array")
            if c == "]":
                return result
            if c != ",":
                self._pos -= 1
            result.append(self.parse_node())

    def _parse_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        while True:
            c = self._next_token()
            if not c:
                raise ParsingError("missing closing brace in dictionary")
            if c == "}":
                return result
            if c == ",":
                c = self._next_token()
            if c != '"':
                raise ParsingError("dictionary key must be a string")
            key = self._parse_string()
            if self._next_token() != ":":
                raise ParsingError(f"missing ':' after key {key!r}")
            result.setdefault(key, self.parse_node())

    def _parse_string(self) -> str:
        chars: list[str] = []
        text = self._text
        while True:
            if self._pos >= len(text):
                raise ParsingError("String parsing error")
            ch = text[self._pos]
            self._pos += 1
            if ch == '"':
                return "".join(chars)
            if ch == "\\":
                if self._pos >= len(text):
                    raise ParsingError("String parsing error")
                escaped = text[self._pos]
                self._pos += 1
                try:
                    chars.append(_ESCAPES_IN[escaped])
                except KeyError:
                    raise ParsingError(
                        f"Unrecognized escape sequence \\{escaped}"
                    ) from None
            elif ch in "\n\r":
                raise ParsingError("Unexpected end of line")
            else:
                chars.append(ch)

    def _read_digits(self) -> None:
        if self._peek() == "" or self._peek() not in _DIGITS:
            raise ParsingError("A digit is expected")
        while self._peek() != "" and self._peek() in _DIGITS:
            self._pos += 1

    def _parse_number(self) -> int | float:
        start = self._pos
        if self._peek() == "-":
            self._pos += 1
        if self._peek() == "0":
            self._pos += 1
        else:
            self._read_digits()

        is_int = True
        if self._peek() == ".":
            self._pos += 1
            self._read_digits()
            is_int = False

        if self._peek() in ("e", "E") and self._peek():
            self._pos += 1
            if self._peek() in ("+", "-") and self._peek():
                self._pos += 1
            self._read_digits()
            is_int = False

        literal = self._text[start:self._pos]
        if is_int:
            value = int(literal)
            if _INT_MIN <= value <= _INT_MAX:
                return value
        number = float(literal)
        if math.isinf(number):
            raise ParsingError(f"Failed to convert {literal} to number")
        return number


def loads(text: str) -> Any:
    """Parse the first JSON value in ``text``; empty input gives ``None``."""
    return _Parser(text).parse_node()


def load(stream: TextIO) -> Any:
    """Parse the first JSON value read from a text stream."""
    return loads(stream.read())


def _chunks(value: Any) -> Iterator[str]:
    if value is None:
        yield "null"
    elif isinstance(value, bool):
        yield "true" if value else "false"
    elif isinstance(value, int):
        yield str(value)
    elif isinstance(value, float):
        yield format(value, "g")
    elif isinstance(value, str):
        yield '"' + value.translate(_ESCAPES_OUT) + '"'
    elif isinstance(value, (list, tuple)):
        yield "["
        for index, item in enumerate(value):
            if index:
                yield ","
            yield from _chunks(item)
        yield "]"
    elif isinstance(value, dict):
        if any(not isinstance(key, str) for key in value):
            raise TypeError("dictionary keys must be strings")
        yield "{"
        for index, key in enumerate(sorted(value)):
            if index:
                yield ","
            yield f' "{key}": '
            yield from _chunks(value[key])
        yield " }"
    else:
        raise TypeError(f"cannot serialise {type(value).__name__} to JSON")


def dumps(value: Any) -> str:
    """Return the JSON text for ``value``."""
    return "".join(_chunks(value))


def dump(value: Any, stream: TextIO) -> None:
    """Write the JSON text for ``value`` to a text stream."""
    stream.write(dumps(value))