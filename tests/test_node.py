import pytest

from confnode.errors import ConfigError
from confnode.node import Node
from confnode.nodetype import NodeError, NodeType


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y

    def to_node(self):
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_node(cls, node):
        return cls(node["x"].as_integer(), node["y"].as_integer())


def test_default_is_null():
    node = Node()
    assert node.type() is NodeType.NULL
    assert node.is_(NodeType.NULL)


@pytest.mark.parametrize(
    "value, kind",
    [
        ("text", NodeType.STRING),
        (True, NodeType.BOOLEAN),
        (7, NodeType.INTEGER),
        (2.5, NodeType.FLOATING),
        ([1, 2], NodeType.SEQUENCE),
        ({"a": 1}, NodeType.OBJECT),
    ],
)
def test_type_of_constructed_node(value, kind):
    assert Node(value).type() is kind


def test_is_with_python_types():
    assert Node(True).is_(bool)
    assert not Node(True).is_(int)
    assert Node(3).is_(int)
    assert not Node(3).is_(float)
    assert Node("s").is_(str)
    assert Node([]).is_(list)
    assert Node({}).is_(dict)
    assert not Node(3).is_(bytes)


def test_as_accessors_return_values():
    assert Node("abc").as_string() == "abc"
    assert Node(False).as_boolean() is False
    assert Node(42).as_integer() == 42
    assert Node(1.5).as_floating() == 1.5


def test_as_wrong_kind_raises_with_message():
    with pytest.raises(NodeError) as info:
        Node().as_string()
    assert str(info.value) == "Config::NodeError: Conversion Null -> String failed."


def test_node_error_is_config_error():
    with pytest.raises(ConfigError):
        Node(1).as_sequence()


def test_from_value_builds_nested_tree():
    node = Node.from_value({"list": [1, "two", None], "flag": True})
    assert node["list"][1].as_string() == "two"
    assert node["list"][2].type() is NodeType.NULL
    assert node["flag"].as_boolean() is True
    assert len(node["list"]) == 3


def test_object_keys_must_be_strings():
    with pytest.raises(NodeError):
        Node({1: "a"})


def test_unsupported_value_raises():
    with pytest.raises(NodeError):
        Node(object())


def test_set_replaces_content():
    node = Node(1)
    node.set("now a string")
    assert node.as_string() == "now a string"
    assert node.type() is NodeType.STRING


def test_field_access_creates_object_on_null():
    node = Node()
    node["a"]["b"] = 5
    assert node.type() is NodeType.OBJECT
    assert node["a"]["b"].as_integer() == 5
    assert node.contains("a")


def test_field_access_on_scalar_raises():
    with pytest.raises(NodeError) as info:
        Node(3)["key"]
    assert "Cannot access field 'key' on non-object node." in str(info.value)


def test_index_access_on_non_sequence_raises():
    with pytest.raises(NodeError) as info:
        Node({})[0]
    assert "Node is not a sequence" in str(info.value)


@pytest.mark.parametrize("index", [3, -1, 100])
def test_index_out_of_bounds(index):
    with pytest.raises(NodeError) as info:
        Node([1, 2, 3])[index]
    message = str(info.value)
    assert message.startswith("Config::NodeError: Index out of bounds")
    assert "3" in message


def test_setitem_by_index():
    node = Node([1, 2, 3])
    node[1] = "changed"
    assert node[1].as_string() == "changed"
    assert len(node) == 3


def test_bad_key_type_raises_type_error():
    with pytest.raises(TypeError):
        Node([1])[1.0]


def test_contains_on_non_object_is_false():
    assert not Node([1]).contains("a")
    assert not Node({"b": 1}).contains("a")


def test_push_turns_null_into_sequence():
    node = Node()
    node.push(1)
    node.push(Node("x"))
    assert node.type() is NodeType.SEQUENCE
    assert node == Node([1, "x"])


def test_push_to_scalar_raises():
    with pytest.raises(NodeError) as info:
        Node("s").push(1)
    assert str(info.value) == "Config::NodeError: Cannot push to non-sequence node."


def test_length_of_scalars_is_zero():
    assert len(Node(5)) == 0
    assert len(Node()) == 0
    assert len(Node({"a": 1, "b": 2})) == 2


def test_to_numeric_kinds():
    assert Node(4).to(int) == 4
    assert Node(0.25).to(float) == 0.25
    assert Node(True).to(bool) is True
    with pytest.raises(NodeError):
        Node(4).to(float)


def test_to_node_type():
    assert Node("v").to(NodeType.STRING) == "v"


def test_custom_serialiser_and_deserialiser_round_trip():
    node = Node(Point(3, 4))
    assert node.type() is NodeType.OBJECT
    point = node.to(Point)
    assert (point.x, point.y) == (3, 4)


def test_value_or_returns_value_when_kind_matches():
    assert Node(10).value_or(0) == 10
    assert Node("s").value_or("d") == "s"


def test_value_or_returns_default_on_mismatch():
    assert Node("s").value_or(0) == 0
    assert Node().value_or(1.5) == 1.5


def test_equality_distinguishes_bool_and_int():
    assert Node(True) != Node(1)
    assert Node(1.0) != Node(1)
    assert Node({"a": [1]}) == Node({"a": [1]})
    assert Node(7) == 7


def test_copy_on_construction_is_independent():
    original = Node({"a": 1})
    clone = Node(original)
    clone["a"] = 2
    assert original["a"].as_integer() == 1
    assert clone["a"].as_integer() == 2


def test_iteration_over_sequence_and_object():
    assert [n.as_integer() for n in Node([1, 2])] == [1, 2]
    assert sorted(Node({"x": 1, "y": 2})) == ["x", "y"]
    assert list(Node(3)) == []


def test_repr_round_trips_content():
    node = Node([1])
    assert repr(node) == "Node([Node(1)])"