"""Exceptions raised by node operations."""

from __future__ import annotations

from typing import Any

from .kinds import Mark


class YamlError(Exception):
    """Base class for every error raised by the package."""

    def __init__(self, message: str, mark: Mark | None = None) -> None:
        self.mark = mark if mark is not None else Mark.null_mark()
        self.msg = message
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.mark.is_null():
            return self.msg
        return f"line {self.mark.line + 1}, column {self.mark.column + 1}: {self.msg}"


class InvalidNode(YamlError):
    """Raised when a node obtained from a missing key is used."""

    def __init__(self, key: str = "") -> None:
        self.key = key
        if key:
            message = f'invalid node; first invalid key: "{key}"'
        else:
            message = "invalid node; this may result from using a map iterator as a sequence iterator, or vice-versa"
        super().__init__(message)


class BadSubscript(YamlError):
    """Raised when a scalar node is indexed."""

    def __init__(self, mark: Mark | None, key: Any) -> None:
        self.key = key
        super().__init__(f'operator[] call on a scalar (key: "{key}")', mark)


class BadPushback(YamlError):
    """Raised when appending to a node that is not a sequence."""

    def __init__(self) -> None:
        super().__init__("appending to a non-sequence")


class BadInsert(YamlError):
    """Raised when inserting a pair into a node that cannot become a map."""

    def __init__(self) -> None:
        super().__init__("inserting in a non-convertible-to-map")


class BadConversion(YamlError):
    """Raised when a node cannot be converted to the requested kind."""

    def __init__(self, mark: Mark | None = None, kind: Any = None) -> None:
        self.kind = kind
        message = "bad conversion"
        if kind is not None:
            name = getattr(kind, "__name__", str(kind))
            message = f"bad conversion to {name}"
        super().__init__(message, mark)