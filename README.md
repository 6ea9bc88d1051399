# yamlnode

`yamlnode` is a mutable YAML node graph. It works with values that are
already in memory. It does not read or write YAML text itself.

- `yamlnode.node.Node` is a handle on a YAML value, which can be a null,
  a scalar, a sequence or a map. You can index it, append to it and assign
  to it, and you can read its scalar as a typed value.
- `yamlnode.builder.NodeBuilder` is an event handler. It turns a stream of
  document events into a `Node` tree. Anchored nodes become shared nodes,
  and aliases point back at them.
- `yamlnode.nodeevents.NodeEvents` walks a `Node` and replays it as the
  same kind of events.

## Installation

```
pip install .
```

## Building and editing nodes

```python
from yamlnode.node import Node

doc = Node()
doc["name"] = "example"
doc["ports"].append(80)
doc["ports"].append(443)

assert doc.is_map()
assert doc["name"].scalar() == "example"
assert doc["ports"][1].as_(int) == 443
assert len(doc["ports"]) == 2

# lookup() never adds an entry; a missing key gives an invalid, undefined node
assert not doc.lookup("missing")

# as_() returns the default when the conversion fails
assert doc["ports"].as_(str, "fallback") == "fallback"
```

### Indexing and assignment

- `node[key]` finds or creates the entry for a key.
  - Indexing a null or undefined node with a string key turns it into a map.
  - An integer index into a sequence can reach an existing item, or the
    position just past the end. That position is filled only once the new
    item gets a value.
  - Any other key turns a sequence into a map whose keys are `"0"`, `"1"`
    and so on.
  - Indexing a scalar raises `BadSubscript`.
- `node[key] = value` assigns to that entry.
- `assign(value)` replaces a node's value.
  - A `Node` argument makes the two handles refer to the same node.
  - A plain value (`None`, `bool`, `int`, `float`, `str`, `bytes`, `list`,
    `tuple` or `dict`) is encoded into a fresh node, and its data is shared.
- `is_(other)` and `==` compare identity. They are true when both handles
  refer to the same node.

### Other operations

- `append(value)` adds an item to a sequence. A null node turns into a
  sequence first. Appending to a scalar or a map raises `BadPushback`.
- `remove(key)` deletes a map entry or a sequence item. It returns whether
  something was removed.
- `force_insert(key, value)` adds a pair to a map even when the key is
  already there. Using it on a scalar raises `BadInsert`.
- `reset(other)` makes this handle point at the node of `other`. With no
  argument, it points at nothing.
- `len(node)` counts the defined items of a sequence, or the fully defined
  pairs of a map.
- Iterating a sequence yields item `Node`s. Iterating a map yields
  `(key, value)` pairs of `Node`s.
- These return details about the node:
  - `type()` returns a `NodeType`.
  - `is_null()`, `is_scalar()`, `is_sequence()` and `is_map()` test the kind.
  - `is_defined()` tells whether the node has a value.
  - `mark()` returns the node's `Mark`.
  - `tag()` returns the tag, and `set_tag()` sets it.
  - `style()` returns the style, and `set_style()` sets it.

### Typed access

`as_(kind, default)` converts a node. The kind can be `str`, `int`,
`float`, `bool`, `bytes`, `type(None)`, `Node`, `list` or `dict`:

- `list` gives a list of item `Node`s.
- `dict` maps key text to value `Node`s.
- `as_(str)` on a null node gives `"null"`.

When the conversion fails, `as_` raises `BadConversion`, or returns
`default` if you gave one. Using an invalid node raises `InvalidNode`,
unless you gave a default.

## Scalar text rules

`yamlnode.convert` holds the text rules:

- `is_null_string(text)` is true for `""`, `~`, `null`, `Null` and `NULL`.
- `is_infinity(text)`, `is_negative_infinity(text)` and `is_nan(text)`
  recognise `.inf`/`+.inf`, `-.inf` and `.nan`, in their usual
  capitalisations.
- `encode_scalar(value)` renders a value as text:
  - `bool` becomes `true` or `false`.
  - `int` becomes decimal digits.
  - `float` is written with 17 significant digits, and infinities and NaN
    use the forms above.
  - `str` is kept as it is.
  - `bytes` becomes base64.
- `decode_scalar(text, kind)` reads text back as `str`, `int`, `float`,
  `bool` or `bytes`.
  - Integers accept hex (`0x…`) and octal (leading `0`) and must fit in a
    signed 64-bit range.
  - Booleans accept only `true` and `false`.
  - Failures raise `ValueError`. An unsupported kind raises `TypeError`.

## Building from events

```python
from yamlnode.builder import NodeBuilder
from yamlnode.kinds import Mark

builder = NodeBuilder()
mark = Mark()
builder.on_document_start(mark)
builder.on_map_start(mark, "?", 0, None)
builder.on_scalar(mark, "?", 0, "key")
builder.on_scalar(mark, "?", 0, "value")
builder.on_map_end()
builder.on_document_end()

root = builder.root()
assert root["key"].scalar() == "value"
```

Anchors are numbered from 1 in the order they appear. `0` means no anchor.
An anchor that arrives out of order raises `ValueError`, and
`on_alias` with an unknown anchor raises `KeyError`.

## Replaying a node as events

Subclass `yamlnode.events.EventHandler` and implement its `on_*` methods.
Then call `NodeEvents(node).emit(handler)`. The handler receives:

1. one `on_document_start`,
2. the events for the node and its children,
3. one `on_document_end`.

A node that is reached more than once gets an anchor number the first
time. After that it is reported with `on_alias`.

## Other pieces

- `yamlnode.kinds` defines `Mark`, `NodeType` and `EmitterNodeType`.
  - `Mark` is a position with `pos`, `line` and `column`.
  - `Mark.null_mark()` and `is_null()` stand for "no position".
- `yamlnode.writer.OutputWriter` writes text to a stream, or to an internal
  buffer that `getvalue()` returns. It keeps `pos`, `row` and `col`
  counters as it goes.

## What this package does not do

There is no YAML text parser and no emitter here:

- Nothing turns a YAML string or file into events or nodes.
- Nothing turns a node back into YAML text.

Pair `NodeBuilder` and `NodeEvents` with your own event source and sink.

## Errors

Every error is a subclass of `yamlnode.errors.YamlError`. The subclasses
are `InvalidNode`, `BadSubscript`, `BadPushback`, `BadInsert` and
`BadConversion`.