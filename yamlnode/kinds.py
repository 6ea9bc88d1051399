"""Basic value kinds shared across the package: positions and node types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


@dataclass(frozen=True)
class Mark:
    """A position in the input: character offset, line and column (0-based)."""

    pos: int = 0
    line: int = 0
    column: int = 0

    @classmethod
    def null_mark(cls) -> "Mark":
        """Return the mark that stands for "no position"."""
        return cls(-1, -1, -1)

    def is_null(self) -> bool:
        """Whether this is the "no position" mark."""
        return self.pos == -1 and self.line == -1 and self.column == -1


class NodeType(Enum):
    """The kind of value a node holds."""

    UNDEFINED = auto()
    NULL = auto()
    SCALAR = auto()
    SEQUENCE = auto()
    MAP = auto()


class EmitterNodeType(Enum):
    """The kind of node an emitter is currently writing."""

    NO_TYPE = auto()
    PROPERTY = auto()
    SCALAR = auto()
    FLOW_SEQ = auto()
    BLOCK_SEQ = auto()
    FLOW_MAP = auto()
    BLOCK_MAP = auto()