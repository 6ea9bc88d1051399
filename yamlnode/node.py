"""The user-facing node handle: a value that may be null, scalar, sequence or map."""

from __future__ import annotations

from typing import Any, Iterator

from .errors import BadConversion, InvalidNode
from .graph import GraphNode, Memory
from .kinds import Mark, NodeType

_MISSING = object()


class Node:
    """A handle on a node in a document graph.

    Copies of a handle share the underlying node. A handle obtained by
    looking up a missing key is invalid: it reports itself as undefined and
    raises InvalidNode when used.
    """

    def __init__(self, value: Any = _MISSING) -> None:
        self._valid = True
        self._invalid_key = ""
        self._memory: Memory | None = None
        self._node: GraphNode | None = None

        if value is _MISSING:
            return
        if isinstance(value, Node):
            self._valid = value._valid
            self._invalid_key = value._invalid_key
            self._memory = value._memory
            self._node = value._node
            return

        self._memory = Memory()
        self._node = self._memory.create_node()
        if isinstance(value, NodeType):
            self._node.set_type(value)
        else:
            self.assign(value)

    # construction helpers

    @classmethod
    def _wrap(cls, node: GraphNode, memory: Memory) -> "Node":
        handle = cls.__new__(cls)
        handle._valid = True
        handle._invalid_key = ""
        handle._memory = memory
        handle._node = node
        return handle

    @classmethod
    def _zombie(cls, key: str = "") -> "Node":
        handle = cls.__new__(cls)
        handle._valid = False
        handle._invalid_key = key
        handle._memory = None
        handle._node = None
        return handle

    @staticmethod
    def _encode(value: Any) -> "Node":
        memory = Memory()
        return Node._wrap(memory.node_for(value), memory)

    def _check_valid(self) -> None:
        if not self._valid:
            raise InvalidNode(self._invalid_key)

    def _ensure_exists(self) -> None:
        self._check_valid()
        if self._node is None:
            self._memory = Memory()
            self._node = self._memory.create_node()
            self._node.set_null()

    # state

    def __bool__(self) -> bool:
        return self.is_defined()

    def __repr__(self) -> str:
        if not self._valid:
            return f"Node(<invalid key {self._invalid_key!r}>)"
        kind = self.type()
        if kind is NodeType.SCALAR:
            return f"Node({self.scalar()!r})"
        return f"Node(<{kind.name.lower()}>)"

    def mark(self) -> Mark:
        """The position the node was read from, or the null mark."""
        self._check_valid()
        return self._node.mark if self._node is not None else Mark.null_mark()

    def type(self) -> NodeType:
        """The kind of value the node holds."""
        self._check_valid()
        return self._node.type if self._node is not None else NodeType.NULL

    def is_defined(self) -> bool:
        """Whether the node holds a value; invalid nodes are never defined."""
        if not self._valid:
            return False
        return self._node.is_defined if self._node is not None else True

    def is_null(self) -> bool:
        return self.type() is NodeType.NULL

    def is_scalar(self) -> bool:
        return self.type() is NodeType.SCALAR

    def is_sequence(self) -> bool:
        return self.type() is NodeType.SEQUENCE

    def is_map(self) -> bool:
        return self.type() is NodeType.MAP

    # access

    def as_(self, kind: Any, default: Any = _MISSING) -> Any:
        """Convert the node to ``kind``; return ``default`` if given and it fails.

        Supported kinds: str, int, float, bool, bytes, NoneType, Node,
        list (of Nodes) and dict (str keys to Nodes).
        """
        has_default = default is not _MISSING
        if not self._valid:
            if has_default:
                return default
            raise InvalidNode(self._invalid_key)

        if kind is str:
            current = self.type()
            if current is NodeType.NULL:
                return "null"
            if current is not NodeType.SCALAR:
                if has_default:
                    return default
                raise BadConversion(self.mark(), str)
            return self.scalar()

        if self._node is None:
            if has_default:
                return default
            raise BadConversion(self.mark(), kind)

        try:
            return self._decode(kind)
        except ValueError:
            if has_default:
                return default
            raise BadConversion(self.mark(), kind) from None

    def _decode(self, kind: Any) -> Any:
        if kind is Node:
            return Node(self)
        if kind is type(None):
            if self.is_null():
                return None
            raise ValueError("not null")
        if kind is list:
            if not self.is_sequence():
                raise ValueError("not a sequence")
            return list(self)
        if kind is dict:
            if not self.is_map():
                raise ValueError("not a map")
            return {key.as_(str): value for key, value in self}
        if not self.is_scalar():
            raise ValueError("not a scalar")
        from .convert import decode_scalar

        return decode_scalar(self.scalar(), kind)

    def scalar(self) -> str:
        """The scalar text; empty for non-scalars."""
        self._check_valid()
        return self._node.scalar if self._node is not None else ""

    def tag(self) -> str:
        self._check_valid()
        return self._node.tag if self._node is not None else ""

    def set_tag(self, tag: str) -> None:
        self._ensure_exists()
        self._node.set_tag(tag)

    def style(self) -> Any:
        """The emitter style; None stands for the default style."""
        self._check_valid()
        return self._node.style if self._node is not None else None

    def set_style(self, style: Any) -> None:
        self._ensure_exists()
        self._node.set_style(style)

    # assignment

    def is_(self, other: "Node") -> bool:
        """Whether both handles refer to the same node."""
        if not self._valid or not other._valid:
            raise InvalidNode(self._invalid_key)
        if self._node is None or other._node is None:
            return False
        return self._node.is_same(other._node)

    def assign(self, value: Any) -> "Node":
        """Replace the node's value; a Node value makes this the same node."""
        if isinstance(value, Node):
            if not self.is_(value):
                self._assign_node(value)
            return self
        if isinstance(value, str):
            self._ensure_exists()
            self._node.set_scalar(value)
            return self
        self._check_valid()
        self._assign_data(self._encode(value))
        return self

    def _assign_data(self, other: "Node") -> None:
        self._ensure_exists()
        other._ensure_exists()
        self._node.set_data(other._node)
        self._memory.merge(other._memory)

    def _assign_node(self, other: "Node") -> None:
        self._check_valid()
        other._ensure_exists()
        if self._node is None:
            self._node = other._node
            self._memory = other._memory
            return
        self._node.set_ref(other._node)
        self._memory.merge(other._memory)
        self._node = other._node

    def reset(self, other: "Node | None" = None) -> None:
        """Point this handle at the node of ``other`` (or at nothing)."""
        if other is None:
            other = Node()
        if not self._valid or not other._valid:
            raise InvalidNode(self._invalid_key)
        self._memory = other._memory
        self._node = other._node

    # size and iteration

    def __len__(self) -> int:
        self._check_valid()
        return self._node.size() if self._node is not None else 0

    def __iter__(self) -> Iterator[Any]:
        """Yield item Nodes of a sequence, or (key, value) Node pairs of a map."""
        if not self._valid or self._node is None:
            return
        memory = self._memory
        for entry in self._node:
            if isinstance(entry, tuple):
                key, value = entry
                yield Node._wrap(key, memory), Node._wrap(value, memory)
            else:
                yield Node._wrap(entry, memory)

    # sequence

    def append(self, value: Any) -> None:
        """Append a value, turning a null node into a sequence."""
        self._check_valid()
        other = value if isinstance(value, Node) else Node(value)
        self._ensure_exists()
        other._ensure_exists()
        self._node.push_back(other._node, self._memory)
        self._memory.merge(other._memory)

    # indexing

    def _key_arg(self, key: Any) -> Any:
        if isinstance(key, Node):
            key._ensure_exists()
            self._memory.merge(key._memory)
            return key._node
        return key

    @staticmethod
    def _key_string(key: Any) -> str:
        if isinstance(key, Node):
            return key.scalar() if key._valid else ""
        return str(key)

    def __getitem__(self, key: Any) -> "Node":
        """Return the node for a key or index, adding an undefined entry if missing."""
        self._ensure_exists()
        value = self._node.get(self._key_arg(key), self._memory)
        return Node._wrap(value, self._memory)

    def __setitem__(self, key: Any, value: Any) -> None:
        self[key].assign(value)

    def lookup(self, key: Any) -> "Node":
        """Return the node for a key or index without adding anything.

        A missing key gives an invalid node.
        """
        self._ensure_exists()
        value = self._node.lookup(self._key_arg(key), self._memory)
        if value is None:
            return Node._zombie(self._key_string(key))
        return Node._wrap(value, self._memory)

    def remove(self, key: Any) -> bool:
        """Remove the entry for a key or index; return whether one was removed."""
        self._ensure_exists()
        if isinstance(key, Node):
            key._ensure_exists()
            return self._node.remove(key._node, self._memory)
        return self._node.remove(key, self._memory)

    # map

    def force_insert(self, key: Any, value: Any) -> None:
        """Add a key/value pair even if the key is already present."""
        self._ensure_exists()
        self._node.force_insert(
            self._key_arg(key), self._key_arg(value), self._memory
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.is_(other)

    __hash__ = None  # type: ignore[assignment]