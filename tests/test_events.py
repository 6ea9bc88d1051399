import pytest

from yamlnode.events import NULL_ANCHOR, EventHandler
from yamlnode.kinds import Mark


class Recorder(EventHandler):
    def __init__(self):
        self.events = []

    def on_document_start(self, mark):
        self.events.append(("doc_start", mark))

    def on_document_end(self):
        self.events.append(("doc_end",))

    def on_null(self, mark, anchor):
        self.events.append(("null", anchor))

    def on_alias(self, mark, anchor):
        self.events.append(("alias", anchor))

    def on_scalar(self, mark, tag, anchor, value):
        self.events.append(("scalar", tag, anchor, value))

    def on_sequence_start(self, mark, tag, anchor, style):
        self.events.append(("seq_start", tag, anchor, style))

    def on_sequence_end(self):
        self.events.append(("seq_end",))

    def on_map_start(self, mark, tag, anchor, style):
        self.events.append(("map_start", tag, anchor, style))

    def on_map_end(self):
        self.events.append(("map_end",))


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        EventHandler()


def test_on_anchor_default_does_nothing():
    handler = Recorder()
    assert handler.on_anchor(Mark(), "anchor") is None
    assert handler.events == []


def test_events_dispatch_to_subclass():
    handler = Recorder()
    handler.on_document_start(Mark())
    handler.on_sequence_start(Mark(), "?", NULL_ANCHOR, None)
    handler.on_scalar(Mark(), "!", 1, "value")
    handler.on_alias(Mark(), 1)
    handler.on_sequence_end()
    handler.on_document_end()
    assert [e[0] for e in handler.events] == [
        "doc_start",
        "seq_start",
        "scalar",
        "alias",
        "seq_end",
        "doc_end",
    ]
    assert handler.events[2] == ("scalar", "!", 1, "value")