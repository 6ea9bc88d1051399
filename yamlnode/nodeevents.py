"""Replays a node graph as a stream of document events."""

from __future__ import annotations

from collections import Counter
from typing import Any

from .events import NULL_ANCHOR, EventHandler
from .graph import GraphNode, NodeRef
from .kinds import Mark, NodeType
from .node import Node


class _AliasManager:
    """Hands out anchor numbers to nodes that are referenced more than once."""

    def __init__(self) -> None:
        self._anchor_by_identity: dict[NodeRef, int] = {}
        self._current = 0

    def register(self, node: GraphNode) -> None:
        self._current += 1
        self._anchor_by_identity.setdefault(node.ref, self._current)

    def lookup(self, node: GraphNode) -> int:
        return self._anchor_by_identity.get(node.ref, NULL_ANCHOR)


class NodeEvents:
    """Walks a Node and reports it to an event handler.

    Nodes reached more than once get an anchor the first time and are
    reported as aliases afterwards.
    """

    def __init__(self, node: Node) -> None:
        self._memory = node._memory
        self._root: GraphNode | None = node._node
        self._ref_count: Counter[NodeRef] = Counter()
        if self._root is not None:
            self._setup(self._root)

    def _setup(self, node: GraphNode) -> None:
        self._ref_count[node.ref] += 1
        if self._ref_count[node.ref] > 1:
            return
        if node.type is NodeType.SEQUENCE:
            for item in node:
                self._setup(item)
        elif node.type is NodeType.MAP:
            for key, value in node:
                self._setup(key)
                self._setup(value)

    def emit(self, handler: EventHandler) -> None:
        """Send the events of one document describing the node to ``handler``."""
        aliases = _AliasManager()
        handler.on_document_start(Mark())
        if self._root is not None:
            self._emit(self._root, handler, aliases)
        handler.on_document_end()

    def _emit(self, node: GraphNode, handler: EventHandler, aliases: _AliasManager) -> None:
        anchor: Any = NULL_ANCHOR
        if self._is_aliased(node):
            anchor = aliases.lookup(node)
            if anchor:
                handler.on_alias(Mark(), anchor)
                return
            aliases.register(node)
            anchor = aliases.lookup(node)

        kind = node.type
        if kind is NodeType.NULL:
            handler.on_null(Mark(), anchor)
        elif kind is NodeType.SCALAR:
            handler.on_scalar(Mark(), node.tag, anchor, node.scalar)
        elif kind is NodeType.SEQUENCE:
            handler.on_sequence_start(Mark(), node.tag, anchor, node.style)
            for item in node:
                self._emit(item, handler, aliases)
            handler.on_sequence_end()
        elif kind is NodeType.MAP:
            handler.on_map_start(Mark(), node.tag, anchor, node.style)
            for key, value in node:
                self._emit(key, handler, aliases)
                self._emit(value, handler, aliases)
            handler.on_map_end()

    def _is_aliased(self, node: GraphNode) -> bool:
        return self._ref_count.get(node.ref, 0) > 1