"""The shared payload behind a graph node: its kind, scalar, items and pairs."""

from __future__ import annotations

from typing import Any, Iterator, Protocol, runtime_checkable

from .errors import BadInsert, BadPushback, BadSubscript
from .kinds import Mark, NodeType


@runtime_checkable
class _NodeLike(Protocol):
    """What the payload needs from the nodes it holds."""

    def is_same(self, other: Any) -> bool: ...

    def equals(self, value: Any) -> bool: ...


def _is_index(key: Any) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


class NodeData:
    """The data of a node: null, a scalar, a sequence or a mapping.

    Sequence items and mapping keys and values are graph nodes, which must
    offer ``is_defined`` (a property), ``is_same``, ``equals`` and
    ``set_scalar``. The memory passed to the mutating methods must offer
    ``create_node()`` and ``node_for(value)``.
    """

    def __init__(self) -> None:
        self._defined = False
        self._type = NodeType.NULL
        self.mark: Mark = Mark.null_mark()
        self.tag = ""
        self.style: Any = None
        self.scalar = ""
        self._sequence: list[Any] = []
        self._seq_size = 0
        self._map: list[tuple[Any, Any]] = []
        self._undefined_pairs: list[tuple[Any, Any]] = []

    # state

    @property
    def is_defined(self) -> bool:
        """Whether this data has been given a value."""
        return self._defined

    @property
    def type(self) -> NodeType:
        """The kind of value held; UNDEFINED until the data is defined."""
        return self._type if self._defined else NodeType.UNDEFINED

    def mark_defined(self) -> None:
        """Mark the data as defined, turning an undefined kind into null."""
        if self._type is NodeType.UNDEFINED:
            self._type = NodeType.NULL
        self._defined = True

    def set_type(self, kind: NodeType) -> None:
        """Change the kind, clearing the contents when it changes."""
        if kind is NodeType.UNDEFINED:
            self._type = kind
            self._defined = False
            return

        self._defined = True
        if kind is self._type:
            return

        self._type = kind
        if kind is NodeType.SCALAR:
            self.scalar = ""
        elif kind is NodeType.SEQUENCE:
            self._reset_sequence()
        elif kind is NodeType.MAP:
            self._reset_map()

    def set_null(self) -> None:
        """Make this a defined null."""
        self._defined = True
        self._type = NodeType.NULL

    def set_scalar(self, scalar: str) -> None:
        """Make this a defined scalar with the given text."""
        self._defined = True
        self._type = NodeType.SCALAR
        self.scalar = scalar

    # size and iteration

    def size(self) -> int:
        """Number of defined items (sequence) or fully defined pairs (map)."""
        if not self._defined:
            return 0
        if self._type is NodeType.SEQUENCE:
            self._compute_seq_size()
            return self._seq_size
        if self._type is NodeType.MAP:
            self._compute_map_size()
            return len(self._map) - len(self._undefined_pairs)
        return 0

    def _compute_seq_size(self) -> None:
        while (
            self._seq_size < len(self._sequence)
            and self._sequence[self._seq_size].is_defined
        ):
            self._seq_size += 1

    def _compute_map_size(self) -> None:
        self._undefined_pairs = [
            pair
            for pair in self._undefined_pairs
            if not (pair[0].is_defined and pair[1].is_defined)
        ]

    def __iter__(self) -> Iterator[Any]:
        """Yield sequence items, or (key, value) pairs that are both defined."""
        if not self._defined:
            return
        if self._type is NodeType.SEQUENCE:
            yield from list(self._sequence)
        elif self._type is NodeType.MAP:
            for key, value in list(self._map):
                if key.is_defined and value.is_defined:
                    yield key, value

    # sequence

    def push_back(self, node: Any, memory: Any) -> None:
        """Append a node, turning undefined or null data into a sequence."""
        if self._type in (NodeType.UNDEFINED, NodeType.NULL):
            self._type = NodeType.SEQUENCE
            self._reset_sequence()
        if self._type is not NodeType.SEQUENCE:
            raise BadPushback()
        self._sequence.append(node)

    def insert(self, key: Any, value: Any, memory: Any) -> None:
        """Add a key/value pair of nodes, turning the data into a map."""
        if self._type is NodeType.SCALAR:
            raise BadSubscript(self.mark, key)
        if self._type is not NodeType.MAP:
            self._convert_to_map(memory)
        self._insert_map_pair(key, value)

    # indexing

    def lookup(self, key: Any, memory: Any) -> Any | None:
        """Find the node for a key without changing anything; None if absent."""
        if isinstance(key, _NodeLike):
            if self._type is not NodeType.MAP:
                return None
            for k, v in self._map:
                if k.is_same(key):
                    return v
            return None

        if self._type in (NodeType.UNDEFINED, NodeType.NULL):
            return None
        if self._type is NodeType.SEQUENCE:
            if _is_index(key) and 0 <= key < len(self._sequence):
                return self._sequence[key]
            return None
        if self._type is NodeType.SCALAR:
            raise BadSubscript(self.mark, key)

        for k, v in self._map:
            if k.equals(key):
                return v
        return None

    def get(self, key: Any, memory: Any) -> Any:
        """Find the node for a key, creating an entry when there is none."""
        if isinstance(key, _NodeLike):
            return self._get_by_node(key, memory)

        if self._type is NodeType.SCALAR:
            raise BadSubscript(self.mark, key)
        if self._type is not NodeType.MAP:
            item = self._index_for_write(key, memory)
            if item is not None:
                self._type = NodeType.SEQUENCE
                return item
            self._convert_to_map(memory)

        for k, v in self._map:
            if k.equals(key):
                return v

        key_node = memory.node_for(key)
        value_node = memory.create_node()
        self._insert_map_pair(key_node, value_node)
        return value_node

    def _index_for_write(self, key: Any, memory: Any) -> Any | None:
        if not _is_index(key) or key < 0:
            return None
        if key > len(self._sequence):
            return None
        if key > 0 and not self._sequence[key - 1].is_defined:
            return None
        if key == len(self._sequence):
            self._sequence.append(memory.create_node())
        return self._sequence[key]

    def _get_by_node(self, key: Any, memory: Any) -> Any:
        if self._type is NodeType.SCALAR:
            raise BadSubscript(self.mark, key)
        if self._type is not NodeType.MAP:
            self._convert_to_map(memory)

        for k, v in self._map:
            if k.is_same(key):
                return v

        value_node = memory.create_node()
        self._insert_map_pair(key, value_node)
        return value_node

    def remove(self, key: Any, memory: Any) -> bool:
        """Remove the entry for a key or index; return whether one was removed."""
        if isinstance(key, _NodeLike):
            if self._type is not NodeType.MAP:
                return False
            return self._remove_pair(lambda k: k.is_same(key))

        if self._type is NodeType.SEQUENCE:
            if not _is_index(key) or key < 0 or key >= len(self._sequence):
                return False
            del self._sequence[key]
            if self._seq_size > key:
                self._seq_size -= 1
            return True

        if self._type is NodeType.MAP:
            return self._remove_pair(lambda k: k.equals(key))

        return False

    def _remove_pair(self, matches: Any) -> bool:
        self._undefined_pairs = [
            pair for pair in self._undefined_pairs if not matches(pair[0])
        ]
        for index, (k, _) in enumerate(self._map):
            if matches(k):
                del self._map[index]
                return True
        return False

    # map

    def force_insert(self, key: Any, value: Any, memory: Any) -> None:
        """Add a pair built from plain values, even if the key already exists."""
        if self._type is NodeType.SCALAR:
            raise BadInsert()
        if self._type is not NodeType.MAP:
            self._convert_to_map(memory)
        self._insert_map_pair(memory.node_for(key), memory.node_for(value))

    # internals

    def _reset_sequence(self) -> None:
        self._sequence = []
        self._seq_size = 0

    def _reset_map(self) -> None:
        self._map = []
        self._undefined_pairs = []

    def _insert_map_pair(self, key: Any, value: Any) -> None:
        self._map.append((key, value))
        if not key.is_defined or not value.is_defined:
            self._undefined_pairs.append((key, value))

    def _convert_to_map(self, memory: Any) -> None:
        if self._type in (NodeType.UNDEFINED, NodeType.NULL):
            self._reset_map()
            self._type = NodeType.MAP
        elif self._type is NodeType.SEQUENCE:
            self._convert_sequence_to_map(memory)

    def _convert_sequence_to_map(self, memory: Any) -> None:
        self._reset_map()
        for index, item in enumerate(self._sequence):
            key = memory.create_node()
            key.set_scalar(str(index))
            self._insert_map_pair(key, item)
        self._reset_sequence()
        self._type = NodeType.MAP