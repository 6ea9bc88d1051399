import pytest

from yamlnode.errors import BadConversion, BadPushback, BadSubscript, InvalidNode
from yamlnode.kinds import NodeType
from yamlnode.node import Node


def test_empty_node_is_defined_null():
    node = Node()
    assert node.is_defined()
    assert node.type() is NodeType.NULL
    assert len(node) == 0
    assert node.mark().is_null()


def test_scalar_round_trip():
    node = Node("hello")
    assert node.is_scalar()
    assert node.scalar() == "hello"
    assert node.as_(str) == "hello"


def test_bool_scalar_text():
    assert Node(True).scalar() == "true"
    assert Node(False).as_(bool) is False


def test_number_round_trip():
    assert Node(42).as_(int) == 42
    assert Node(1.5).as_(float) == 1.5


def test_null_as_string():
    assert Node().as_(str) == "null"
    assert Node(None).as_(str) == "null"
    assert Node(None).as_(type(None)) is None


def test_bad_conversion_and_default():
    node = Node("abc")
    with pytest.raises(BadConversion):
        node.as_(int)
    assert node.as_(int, 7) == 7
    with pytest.raises(BadConversion):
        Node().as_(int)
    assert Node().as_(int, 3) == 3


def test_construct_from_type():
    node = Node(NodeType.SEQUENCE)
    assert node.is_sequence()
    assert len(node) == 0
    assert Node(NodeType.MAP).is_map()


def test_append_builds_sequence():
    node = Node()
    node.append("a")
    node.append(2)
    assert node.is_sequence()
    assert len(node) == 2
    assert [item.scalar() for item in node] == ["a", "2"]
    assert node.lookup(1).as_(int) == 2


def test_list_value():
    node = Node([1, 2, 3])
    assert len(node) == 3
    assert [item.as_(int) for item in node.as_(list)] == [1, 2, 3]


def test_index_write_grows_sequence():
    node = Node()
    node[0] = "a"
    node[1] = "b"
    assert node.is_sequence()
    assert [item.scalar() for item in node] == ["a", "b"]


def test_sequence_converts_to_map_on_key():
    node = Node()
    node.append("a")
    node.append("b")
    node["key"] = "v"
    assert node.is_map()
    assert len(node) == 3
    assert node.lookup("0").scalar() == "a"
    assert node.lookup("1").scalar() == "b"
    assert node.lookup("key").scalar() == "v"


def test_map_iteration_order():
    node = Node({"x": 1, "y": 2})
    pairs = [(k.scalar(), v.as_(int)) for k, v in node]
    assert pairs == [("x", 1), ("y", 2)]
    decoded = node.as_(dict)
    assert sorted(decoded) == ["x", "y"]
    assert decoded["y"].as_(int) == 2


def test_undefined_entry_not_counted():
    node = Node({"a": 1})
    entry = node["b"]
    assert not entry.is_defined()
    assert len(node) == 1
    assert [k.scalar() for k, _ in node] == ["a"]
    node["b"] = 2
    assert len(node) == 2
    assert node.lookup("b").as_(int) == 2


def test_lookup_missing_gives_invalid_node():
    node = Node({"a": 1})
    missing = node.lookup("zz")
    assert not missing
    assert not missing.is_defined()
    assert missing.as_(int, 5) == 5
    with pytest.raises(InvalidNode) as info:
        missing.scalar()
    assert info.value.key == "zz"
    with pytest.raises(InvalidNode):
        missing.assign(1)
    with pytest.raises(InvalidNode):
        missing["x"]


def test_scalar_subscript_raises():
    with pytest.raises(BadSubscript):
        Node("x")["k"]
    with pytest.raises(BadSubscript):
        Node("x").lookup("k")


def test_append_to_map_raises():
    with pytest.raises(BadPushback):
        Node({"a": 1}).append(1)


def test_identity_and_reset():
    first = Node("x")
    second = Node()
    assert not second.is_(first)
    second.reset(first)
    assert second.is_(first)
    assert second == first
    second.reset()
    assert not second.is_(first)


def test_copy_shares_node():
    original = Node("x")
    copy = Node(original)
    assert copy.is_(original)
    copy.assign("y")
    assert original.scalar() == "y"


def test_assign_node_links_identity():
    target = Node("shared")
    root = Node()
    root["k"] = target
    assert root.lookup("k").is_(target)
    assert root.lookup("k").scalar() == "shared"


def test_remove_entries():
    node = Node({"a": 1, "b": 2})
    assert node.remove("a") is True
    assert node.remove("a") is False
    assert len(node) == 1
    seq = Node(["p", "q"])
    assert seq.remove(0) is True
    assert [item.scalar() for item in seq] == ["q"]


def test_force_insert_keeps_duplicates():
    node = Node(NodeType.MAP)
    node.force_insert("k", 1)
    node.force_insert("k", 2)
    assert len(node) == 2
    assert [v.as_(int) for _, v in node] == [1, 2]


def test_node_key_lookup():
    node = Node()
    key = Node("name")
    node[key] = "value"
    assert node.lookup(key).scalar() == "value"
    assert node.remove(key) is True
    assert len(node) == 0


def test_tag_round_trip():
    node = Node("x")
    node.set_tag("!custom")
    assert node.tag() == "!custom"
    assert Node().tag() == ""


def test_as_node_returns_same():
    node = Node("x")
    assert node.as_(Node).is_(node)