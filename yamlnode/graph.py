"""Graph nodes: identity, shared data, definedness tracking and node storage."""

from __future__ import annotations

import itertools
from typing import Any, Iterator

from .convert import decode_scalar, encode_scalar
from .data import NodeData
from .kinds import Mark, NodeType

_push_counter = itertools.count()


class NodeRef:
    """A handle on node data; several refs may share the same data."""

    def __init__(self) -> None:
        self._data = NodeData()

    @property
    def is_defined(self) -> bool:
        return self._data.is_defined

    @property
    def mark(self) -> Mark:
        return self._data.mark

    @property
    def type(self) -> NodeType:
        return self._data.type

    @property
    def scalar(self) -> str:
        return self._data.scalar

    @property
    def tag(self) -> str:
        return self._data.tag

    @property
    def style(self) -> Any:
        return self._data.style

    def mark_defined(self) -> None:
        self._data.mark_defined()

    def set_data(self, other: "NodeRef") -> None:
        """Share the data of another ref."""
        self._data = other._data

    def set_mark(self, mark: Mark) -> None:
        self._data.mark = mark

    def set_type(self, kind: NodeType) -> None:
        self._data.set_type(kind)

    def set_tag(self, tag: str) -> None:
        self._data.tag = tag

    def set_null(self) -> None:
        self._data.set_null()

    def set_scalar(self, scalar: str) -> None:
        self._data.set_scalar(scalar)

    def set_style(self, style: Any) -> None:
        self._data.style = style

    def size(self) -> int:
        return self._data.size()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def push_back(self, node: "GraphNode", memory: "Memory") -> None:
        self._data.push_back(node, memory)

    def insert(self, key: "GraphNode", value: "GraphNode", memory: "Memory") -> None:
        self._data.insert(key, value, memory)

    def get(self, key: Any, memory: "Memory") -> "GraphNode":
        return self._data.get(key, memory)

    def lookup(self, key: Any, memory: "Memory") -> "GraphNode | None":
        return self._data.lookup(key, memory)

    def remove(self, key: Any, memory: "Memory") -> bool:
        return self._data.remove(key, memory)

    def force_insert(self, key: Any, value: Any, memory: "Memory") -> None:
        self._data.force_insert(key, value, memory)


class Memory:
    """Owns a set of graph nodes and builds nodes from plain values."""

    def __init__(self) -> None:
        self._nodes: set[GraphNode] = set()

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def create_node(self) -> "GraphNode":
        """Make a new, undefined node owned by this memory."""
        node = GraphNode()
        self._nodes.add(node)
        return node

    def merge(self, other: "Memory") -> None:
        """Take over the nodes of another memory; both then share one store."""
        if other._nodes is self._nodes:
            return
        self._nodes |= other._nodes
        other._nodes = self._nodes

    def node_for(self, value: Any) -> "GraphNode":
        """Build a node from a plain value (or adopt an existing node)."""
        if isinstance(value, GraphNode):
            self._nodes.add(value)
            return value
        node = self.create_node()
        if value is None:
            node.set_null()
        elif isinstance(value, dict):
            node.set_type(NodeType.MAP)
            for key, item in value.items():
                node.force_insert(key, item, self)
        elif isinstance(value, (list, tuple)):
            node.set_type(NodeType.SEQUENCE)
            for item in value:
                node.push_back(self.node_for(item), self)
        else:
            node.set_scalar(encode_scalar(value))
        return node


class GraphNode:
    """A node in the document graph.

    A node's identity is its ref: two nodes are the same when they share a
    ref. Nodes that are not yet defined remember the collections they belong
    to, and define them when they become defined themselves.
    """

    def __init__(self) -> None:
        self._ref = NodeRef()
        self._dependencies: list[GraphNode] = []
        self._index = 0

    @property
    def ref(self) -> NodeRef:
        return self._ref

    @property
    def is_defined(self) -> bool:
        return self._ref.is_defined

    @property
    def mark(self) -> Mark:
        return self._ref.mark

    @property
    def type(self) -> NodeType:
        return self._ref.type

    @property
    def scalar(self) -> str:
        return self._ref.scalar

    @property
    def tag(self) -> str:
        return self._ref.tag

    @property
    def style(self) -> Any:
        return self._ref.style

    def is_same(self, other: Any) -> bool:
        """Whether both nodes share the same ref."""
        return isinstance(other, GraphNode) and self._ref is other._ref

    def equals(self, value: Any) -> bool:
        """Whether this node converts to a value equal to the given one."""
        if value is None:
            return self.type is NodeType.NULL
        if self.type is not NodeType.SCALAR:
            return False
        if isinstance(value, str):
            return self.scalar == value
        try:
            decoded = decode_scalar(self.scalar, type(value))
        except (ValueError, TypeError):
            return False
        return decoded == value

    def mark_defined(self) -> None:
        """Define this node and every collection waiting on it."""
        if self.is_defined:
            return
        self._ref.mark_defined()
        waiting = sorted(self._dependencies, key=lambda node: node._index)
        self._dependencies = []
        for dependency in waiting:
            dependency.mark_defined()

    def add_dependency(self, other: "GraphNode") -> None:
        """Define ``other`` now if this node is defined, else when it becomes so."""
        if self.is_defined:
            other.mark_defined()
        elif not any(node is other for node in self._dependencies):
            self._dependencies.append(other)

    def set_ref(self, other: "GraphNode") -> None:
        """Become the same node as ``other``."""
        if other.is_defined:
            self.mark_defined()
        self._ref = other._ref

    def set_data(self, other: "GraphNode") -> None:
        """Share the data of ``other`` while keeping a separate identity."""
        if other.is_defined:
            self.mark_defined()
        self._ref.set_data(other._ref)

    def set_mark(self, mark: Mark) -> None:
        self._ref.set_mark(mark)

    def set_type(self, kind: NodeType) -> None:
        if kind is not NodeType.UNDEFINED:
            self.mark_defined()
        self._ref.set_type(kind)

    def set_null(self) -> None:
        self.mark_defined()
        self._ref.set_null()

    def set_scalar(self, scalar: str) -> None:
        self.mark_defined()
        self._ref.set_scalar(scalar)

    def set_tag(self, tag: str) -> None:
        self.mark_defined()
        self._ref.set_tag(tag)

    def set_style(self, style: Any) -> None:
        self.mark_defined()
        self._ref.set_style(style)

    def size(self) -> int:
        return self._ref.size()

    def __iter__(self) -> Iterator[Any]:
        return iter(self._ref)

    def push_back(self, node: "GraphNode", memory: Memory) -> None:
        """Append a node to this sequence."""
        self._ref.push_back(node, memory)
        node.add_dependency(self)
        self._index = next(_push_counter)

    def insert(self, key: "GraphNode", value: "GraphNode", memory: Memory) -> None:
        """Add a key/value pair of nodes to this map."""
        self._ref.insert(key, value, memory)
        key.add_dependency(self)
        value.add_dependency(self)

    def get(self, key: Any, memory: Memory) -> "GraphNode":
        """Find or create the node for a key or index."""
        value = self._ref.get(key, memory)
        if isinstance(key, GraphNode):
            key.add_dependency(self)
        value.add_dependency(self)
        return value

    def lookup(self, key: Any, memory: Memory) -> "GraphNode | None":
        """Find the node for a key or index without changing anything."""
        return self._ref.lookup(key, memory)

    def remove(self, key: Any, memory: Memory) -> bool:
        return self._ref.remove(key, memory)

    def force_insert(self, key: Any, value: Any, memory: Memory) -> None:
        self._ref.force_insert(key, value, memory)