"""Step-by-step construction of JSON values with structural checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["BuilderError", "Builder"]


class BuilderError(RuntimeError):
    """Raised when a builder method is called where it makes no sense."""


@dataclass(frozen=True)
class _PendingKey:
    name: str


class Builder:
    """Builds a JSON value from a chain of calls.

    Every method except :meth:`build` returns the builder itself, so calls
    can be chained::

        Builder().start_dict().key("id").value(1).end_dict().build()
    """

    def __init__(self) -> None:
        self._root: Any = None
        self._stack: list[list[Any] | dict[str, Any] | _PendingKey] = []

    def _ensure_unfinished(self, method: str) -> None:
        if self._root is not None:
            raise BuilderError(f"the value is already complete, cannot call {method}")

    def _attach(self, item: Any) -> None:
        """Place a finished item into the innermost open container."""
        top = self._stack[-1]
        if isinstance(top, list):
            top.append(item)
        elif isinstance(top, _PendingKey):
            self._stack.pop()
            container = self._stack[-1]
            assert isinstance(container, dict)
            container.setdefault(top.name, item)
        else:
            raise BuilderError("a value inside a dictionary needs a key first")

    def key(self, key: str) -> Builder:
        """Start a dictionary entry with the given key."""
        self._ensure_unfinished("key")
        if not isinstance(key, str):
            raise TypeError("dictionary keys must be strings")
        if not self._stack or not isinstance(self._stack[-1], dict):
            raise BuilderError("key can only be called inside a dictionary")
        self._stack.append(_PendingKey(key))
        return self

    def value(self, value: Any) -> Builder:
        """Add a complete value: the root, an array item or a dictionary entry."""
        self._ensure_unfinished("value")
        if not self._stack:
            self._root = value
            return self
        if isinstance(self._stack[-1], dict):
            raise BuilderError("value cannot be called here")
        self._attach(value)
        return self

    def _start(self, container: list[Any] | dict[str, Any], kind: str) -> Builder:
        self._ensure_unfinished(f"start_{kind}")
        if self._stack and isinstance(self._stack[-1], dict):
            raise BuilderError(f"starting a {kind} here is not supported")
        self._stack.append(container)
        return self

    def start_dict(self) -> Builder:
        """Open a new dictionary."""
        return self._start({}, "dict")

    def start_array(self) -> Builder:
        """Open a new array."""
        return self._start([], "array")

    def _end(self) -> None:
        finished = self._stack.pop()
        if self._stack:
            self._attach(finished)
        else:
            self._root = finished

    def end_dict(self) -> Builder:
        """Close the innermost dictionary."""
        if not self._stack:
            raise BuilderError("there is no open dictionary to end")
        if not isinstance(self._stack[-1], dict):
            raise BuilderError("end_dict called while a dictionary is not open")
        self._end()
        return self

    def end_array(self) -> Builder:
        """Close the innermost array."""
        if not self._stack:
            raise BuilderError("there is no open array to end")
        if not isinstance(self._stack[-1], list):
            raise BuilderError("end_array called while an array is not open")
        self._end()
        return self

    def build(self) -> Any:
        """Return the finished value."""
        if self._stack or self._root is None:
            raise BuilderError("the value is not complete, cannot build it")
        return self._root