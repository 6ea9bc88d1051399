from yamlnode.builder import NodeBuilder
from yamlnode.events import EventHandler
from yamlnode.kinds import Mark, NodeType
from yamlnode.node import Node
from yamlnode.nodeevents import NodeEvents


class Recorder(EventHandler):
    def __init__(self):
        self.events = []
        self.marks = []

    def on_document_start(self, mark):
        self.marks.append(mark)
        self.events.append(("doc_start",))

    def on_document_end(self):
        self.events.append(("doc_end",))

    def on_null(self, mark, anchor):
        self.marks.append(mark)
        self.events.append(("null", anchor))

    def on_alias(self, mark, anchor):
        self.marks.append(mark)
        self.events.append(("alias", anchor))

    def on_scalar(self, mark, tag, anchor, value):
        self.marks.append(mark)
        self.events.append(("scalar", tag, anchor, value))

    def on_sequence_start(self, mark, tag, anchor, style):
        self.marks.append(mark)
        self.events.append(("seq_start", tag, anchor, style))

    def on_sequence_end(self):
        self.events.append(("seq_end",))

    def on_map_start(self, mark, tag, anchor, style):
        self.marks.append(mark)
        self.events.append(("map_start", tag, anchor, style))

    def on_map_end(self):
        self.events.append(("map_end",))


def _record(node):
    recorder = Recorder()
    NodeEvents(node).emit(recorder)
    return recorder


def test_empty_node_emits_only_document():
    assert _record(Node()).events == [("doc_start",), ("doc_end",)]


def test_null_node():
    assert _record(Node(None)).events == [("doc_start",), ("null", 0), ("doc_end",)]


def test_scalar_node():
    events = _record(Node("text")).events
    assert events == [("doc_start",), ("scalar", "", 0, "text"), ("doc_end",)]


def test_map_node():
    events = _record(Node({"a": "b"})).events
    assert events == [
        ("doc_start",),
        ("map_start", "", 0, None),
        ("scalar", "", 0, "a"),
        ("scalar", "", 0, "b"),
        ("map_end",),
        ("doc_end",),
    ]


def test_shared_node_becomes_anchor_and_alias():
    seq = Node(NodeType.SEQUENCE)
    shared = Node("x")
    seq.append(shared)
    seq.append(shared)
    events = _record(seq).events
    assert events == [
        ("doc_start",),
        ("seq_start", "", 0, None),
        ("scalar", "", 1, "x"),
        ("alias", 1),
        ("seq_end",),
        ("doc_end",),
    ]


def test_tag_and_style_are_reported():
    node = Node(NodeType.MAP)
    node.set_tag("!x")
    node.set_style("flow")
    events = _record(node).events
    assert events[1] == ("map_start", "!x", 0, "flow")


def test_undefined_entries_are_skipped():
    node = Node(NodeType.MAP)
    node["a"] = "1"
    node["b"]  # creates an undefined entry
    events = _record(node).events
    assert events == [
        ("doc_start",),
        ("map_start", "", 0, None),
        ("scalar", "", 0, "a"),
        ("scalar", "", 0, "1"),
        ("map_end",),
        ("doc_end",),
    ]


def test_emitted_marks_are_default():
    recorder = _record(Node({"a": ["b", None]}))
    assert recorder.marks
    assert all(mark == Mark() for mark in recorder.marks)


def test_round_trip_through_builder():
    original = Node({"name": "value", "list": ["x", "y"]})
    builder = NodeBuilder()
    NodeEvents(original).emit(builder)
    rebuilt = builder.root()
    assert rebuilt.is_map()
    assert rebuilt.lookup("name").scalar() == "value"
    assert [item.scalar() for item in rebuilt.lookup("list")] == ["x", "y"]
    assert _record(rebuilt).events == _record(original).events


def test_round_trip_keeps_aliases():
    seq = Node(NodeType.SEQUENCE)
    shared = Node("x")
    seq.append(shared)
    seq.append(shared)
    builder = NodeBuilder()
    NodeEvents(seq).emit(builder)
    first, second = list(builder.root())
    assert first.is_(second)
    assert first.scalar() == "x"