"""The interface for receiving a stream of document events."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .kinds import Mark

#: Anchor number meaning "no anchor"; real anchors are numbered from 1.
NULL_ANCHOR = 0


class EventHandler(ABC):
    """Receives the events that describe one document."""

    @abstractmethod
    def on_document_start(self, mark: Mark) -> None:
        """A document begins."""

    @abstractmethod
    def on_document_end(self) -> None:
        """The current document ends."""

    @abstractmethod
    def on_null(self, mark: Mark, anchor: int) -> None:
        """A null value."""

    @abstractmethod
    def on_alias(self, mark: Mark, anchor: int) -> None:
        """A reference to a previously anchored node."""

    @abstractmethod
    def on_scalar(self, mark: Mark, tag: str, anchor: int, value: str) -> None:
        """A scalar value."""

    @abstractmethod
    def on_sequence_start(self, mark: Mark, tag: str, anchor: int, style: Any) -> None:
        """A sequence begins."""

    @abstractmethod
    def on_sequence_end(self) -> None:
        """The current sequence ends."""

    @abstractmethod
    def on_map_start(self, mark: Mark, tag: str, anchor: int, style: Any) -> None:
        """A mapping begins."""

    @abstractmethod
    def on_map_end(self) -> None:
        """The current mapping ends."""

    def on_anchor(self, mark: Mark, anchor_name: str) -> None:
        """An anchor name was seen; ignored unless overridden."""
        return None