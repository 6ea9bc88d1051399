"""Builds a node graph from a stream of document events."""

from __future__ import annotations

from typing import Any

from .events import EventHandler
from .graph import GraphNode, Memory
from .kinds import Mark, NodeType
from .node import Node


class NodeBuilder(EventHandler):
    """An event handler that assembles the events of one document into a Node."""

    def __init__(self) -> None:
        self._memory = Memory()
        self._root: GraphNode | None = None
        self._stack: list[GraphNode] = []
        # Anchors are numbered from 1, so slot 0 is never used.
        self._anchors: list[GraphNode | None] = [None]
        # Each entry is [key node, whether the key itself is complete].
        self._keys: list[list[Any]] = []
        self._map_depth = 0

    def root(self) -> Node:
        """The document built so far; a null Node if nothing was built."""
        if self._root is None:
            return Node()
        return Node._wrap(self._root, self._memory)

    def on_document_start(self, mark: Mark) -> None:
        return None

    def on_document_end(self) -> None:
        return None

    def on_null(self, mark: Mark, anchor: int) -> None:
        node = self._push_new(mark, anchor)
        node.set_null()
        self._pop()

    def on_alias(self, mark: Mark, anchor: int) -> None:
        if anchor <= 0 or anchor >= len(self._anchors):
            raise KeyError(f"unknown anchor: {anchor}")
        node = self._anchors[anchor]
        self._push(node)
        self._pop()

    def on_scalar(self, mark: Mark, tag: str, anchor: int, value: str) -> None:
        node = self._push_new(mark, anchor)
        node.set_scalar(value)
        node.set_tag(tag)
        self._pop()

    def on_sequence_start(self, mark: Mark, tag: str, anchor: int, style: Any) -> None:
        node = self._push_new(mark, anchor)
        node.set_tag(tag)
        node.set_type(NodeType.SEQUENCE)
        node.set_style(style)

    def on_sequence_end(self) -> None:
        self._pop()

    def on_map_start(self, mark: Mark, tag: str, anchor: int, style: Any) -> None:
        node = self._push_new(mark, anchor)
        node.set_type(NodeType.MAP)
        node.set_tag(tag)
        node.set_style(style)
        self._map_depth += 1

    def on_map_end(self) -> None:
        if self._map_depth <= 0:
            raise ValueError("map end without a matching map start")
        self._map_depth -= 1
        self._pop()

    # internals

    def _push_new(self, mark: Mark, anchor: int) -> GraphNode:
        node = self._memory.create_node()
        node.set_mark(mark)
        self._register_anchor(anchor, node)
        self._push(node)
        return node

    def _push(self, node: GraphNode) -> None:
        needs_key = (
            bool(self._stack)
            and self._stack[-1].type is NodeType.MAP
            and len(self._keys) < self._map_depth
        )
        self._stack.append(node)
        if needs_key:
            self._keys.append([node, False])

    def _pop(self) -> None:
        if not self._stack:
            raise ValueError("end of a node that was never started")
        if len(self._stack) == 1:
            self._root = self._stack.pop()
            return

        node = self._stack.pop()
        collection = self._stack[-1]

        if collection.type is NodeType.SEQUENCE:
            collection.push_back(node, self._memory)
        elif collection.type is NodeType.MAP:
            if not self._keys:
                raise ValueError("map value without a key")
            key = self._keys[-1]
            if key[1]:
                collection.insert(key[0], node, self._memory)
                self._keys.pop()
            else:
                key[1] = True
        else:
            self._stack.clear()

    def _register_anchor(self, anchor: int, node: GraphNode) -> None:
        if anchor:
            if anchor != len(self._anchors):
                raise ValueError(
                    f"anchor {anchor} out of order; expected {len(self._anchors)}"
                )
            self._anchors.append(node)