# confnode

`confnode` holds configuration data in one tree of `Node` values. It reads and writes
that tree as JSON or YAML, and it can load and save files by their extension.

A node holds exactly one of these: null, a string, a boolean, an integer, a
floating-point number, a sequence of nodes, or an object that maps string field names to
nodes. `Node.type()` returns the matching `NodeType` member (`NULL`, `STRING`,
`BOOLEAN`, `INTEGER`, `FLOATING`, `SEQUENCE`, `OBJECT`).

## Installation

```
pip install confnode
```

Install the `test` extra to run the test suite:

```
pip install "confnode[test]"
```

## Building a tree

```python
from confnode.node import Node
from confnode.nodetype import NodeType

config = Node(None)
config["name"] = "service"          # a null node turns into an object
config["port"] = 8080
config["ratio"] = 0.5
config["tags"].push("alpha")        # a null field turns into a sequence
config["tags"].push("beta")

assert config.type() is NodeType.OBJECT
assert config["port"].as_integer() == 8080
assert config["tags"][1].as_string() == "beta"
assert len(config["tags"]) == 2
assert config.contains("name")
```

`Node(value)` and `Node.from_value(value)` build a whole tree from plain Python data
(`None`, `str`, `bool`, `int`, `float`, lists and other sequences, dicts and other
mappings). `set(value)` replaces the content of a node. Reading a missing field with
`node["field"]` creates it as a null node.

These operations raise `NodeError`:

- calling an `as_*` method (`as_string`, `as_boolean`, `as_integer`, `as_floating`,
  `as_sequence`, `as_object`) on a node of a different type;
- indexing with a position when the node is not a sequence, or when the position is out
  of range;
- using a field name on a node that is neither an object nor null;
- calling `push` on a node that is neither a sequence nor null.

`is_(kind)` and `to(kind)` take either a `NodeType` or a Python type such as `int`.
`value_or(default)` returns the stored value when it has the same type as `default`, and
`default` otherwise:

```python
port = config["port"].value_or(80)       # 8080
name = config["port"].value_or("none")   # "none"
```

Your own classes can take part. An object with a `to_node()` method can be stored in a
node. A class with a `from_node(node)` class method can be read back with
`node.to(MyClass)`.

## JSON and YAML

```python
from confnode import json_format, yaml_format

text = json_format.dump(config)   # four-space indent, keys sorted
again = json_format.parse(text)
assert again == config

yaml_text = yaml_format.dump(config)
assert yaml_format.parse(yaml_text)["port"].as_string() == "8080"
```

Some behaviour to be aware of:

- JSON: `dump` writes non-finite floats as `null`. `parse` rejects `NaN` and
  `Infinity`. Integers that do not fit in 64 bits come back as floats. Empty arrays and
  objects come back as null nodes.
- YAML: `dump` writes block style, keeps the order of fields and writes null as `~`.
  `parse` reads only the first document. Every scalar comes back as a **string**, so
  `8080` and `true` are both read as text. Null scalars, empty documents and empty
  collections come back as null nodes.

`json_format` and `yaml_format` each have their own `ParseError` and `DumpError`. These
derive from the module's `JsonError` or `YamlError` respectively.

## Files

```python
from confnode.files import load, save

save(config, "settings.json")
config = load("settings.json")
```

The file extension chooses the format. `.json` is JSON, and `.yml` or `.yaml` is YAML.
Files are read and written as UTF-8. Any other extension makes `load` raise `OpenError`
and makes `save` raise `SaveError` without writing anything. Both derive from
`IoError`.

## Errors

Every error the package raises itself derives from `confnode.errors.ConfigError`, which
is a `RuntimeError`. The message names the error classes involved, for example
`Config::NodeError: Cannot push to non-sequence node.` or
`Config::JsonError::ParseError: ...`. Failures reading or writing the file itself, such
as a missing file, surface as the usual `OSError`.

## What it does not do

`confnode` is a library only. It provides no command-line tool. It does not validate
configuration against a schema, and it has no formats other than JSON and YAML.