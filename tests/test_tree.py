import pytest

from jsonexplorer.exceptions import NotFoundNodeError
from jsonexplorer.tree import ExpansionState, JsonTree
from tests.testing_utils import get_rich_document, get_sample_document


def to_key_id(nodes):
    return [(n.key, n.identifier) for n in nodes]


def test_expansion_state():
    state = ExpansionState()
    assert len(state) == 0
    assert not state.is_expanded(("a",))
    assert ("a",) not in state

    assert state.toggle(["a"]) is True
    assert state.is_expanded(("a",))
    assert ["a"] in state
    assert state.toggle(("a",)) is False
    assert not state.is_expanded(["a"])
    # collapsed flag is still recorded
    assert ("a",) in state

    state.set((), True)
    assert state.snapshot() == {("a",): False, (): True}
    state.clear()
    assert len(state) == 0


def test_expansion_state_keys_do_not_collide():
    # with concatenated identifiers "a_b" + "c" and "a" + "b_c" would collide
    state = ExpansionState()
    state.set(("a_b", "c"), True)
    assert not state.is_expanded(("a", "b_c"))


def test_get():
    t = JsonTree(get_sample_document())
    root = t.root
    assert root.identifier == ()
    assert root.key is None
    assert root.data == get_sample_document()
    assert not root.expanded

    node = t.get(("a",))
    assert node.key == "a"
    assert node.data == [1, 2, {"b": "x"}]

    node = t.get(("a", "2"))
    assert node.key == "[2]"
    assert node.data == {"b": "x"}

    node = t.get(["a", "2", "b"])
    assert node.key == "b"
    assert node.data == "x"

    for missing in (("b",), ("a", "3"), ("a", "02"), ("a", "2", "b", "c")):
        with pytest.raises(NotFoundNodeError):
            t.get(missing)


def test_get_below_displayed_root():
    d = get_sample_document()
    t = JsonTree(d["a"], root_path=("a",))
    assert t.root.identifier == ("a",)
    assert t.root.key is None
    assert t.get(("a", "1")).data == 2
    assert t.get(("a", "2", "b")).key == "b"
    # nodes outside displayed subtree
    with pytest.raises(NotFoundNodeError):
        t.get(())
    with pytest.raises(NotFoundNodeError):
        t.get(("1",))


def test_children():
    t = JsonTree({"z": 1, "a": [True, None], "m": {}})
    assert to_key_id(t.children(())) == [
        ("z", ("z",)),
        ("a", ("a",)),
        ("m", ("m",)),
    ]
    assert to_key_id(t.children(("a",))) == [
        ("[0]", ("a", "0")),
        ("[1]", ("a", "1")),
    ]
    assert t.children(("m",)) == []
    assert t.children(("z",)) == []


def test_toggle():
    t = JsonTree(get_sample_document())
    assert t.toggle(()) is True
    assert t.expansion.is_expanded(())
    assert t.toggle(("a",)) is True
    assert t.toggle(("a",)) is False
    assert t.expansion.snapshot() == {(): True, ("a",): False}

    with pytest.raises(ValueError):
        t.toggle(("a", "0"))
    with pytest.raises(NotFoundNodeError):
        t.toggle(("z",))


def test_expansion_shared_with_subtree():
    d = get_sample_document()
    expansion = ExpansionState()
    JsonTree(d, expansion=expansion).toggle(("a", "2"))
    sub = JsonTree(d["a"], root_path=("a",), expansion=expansion)
    assert sub.expansion.is_expanded(("a", "2"))
    assert not sub.expansion.is_expanded(("a",))


def test_show_collapsed():
    t = JsonTree(get_sample_document())
    assert t.show() == "▶ Root\n"
    assert t.show(show_types=True) == "▶ Root (object, 1 items)\n"
    assert t.__str__() == "▶ Root\n"


def test_show():
    t = JsonTree(get_sample_document())
    t.toggle(())
    assert t.show() == "▼ Root\n└── ▶ a\n"

    t.toggle(("a",))
    assert (
        t.show()
        == """▼ Root
└── ▼ a
    ├── [0]
    ├── [1]
    └── ▶ [2]
"""
    )

    t.toggle(("a", "2"))
    assert (
        t.show(show_types=True, show_values=True)
        == """▼ Root (object, 1 items)
└── ▼ a (array, 3 items)
    ├── [0] (number) 1
    ├── [1] (number) 2
    └── ▼ [2] (object, 1 items)
        └── b (string) "x"
"""
    )
    assert (
        t.show(show_values=True)
        == """▼ Root
└── ▼ a
    ├── [0] 1
    ├── [1] 2
    └── ▼ [2]
        └── b "x"
"""
    )


def test_show_limit_and_line_length():
    t = JsonTree(get_sample_document())
    t.set_all(True)
    assert (
        t.show(limit=2)
        == """▼ Root
└── ▼ a
...
(truncated, total number of visible nodes: 6)
"""
    )
    assert t.show(limit=6) == t.show()
    assert t.show(line_max_length=10).splitlines()[2] == "    ├──..."


def test_show_line_types():
    t = JsonTree({"a": 1, "b": [2]})
    t.set_all(True)
    assert (
        t.show(line_type="ascii")
        == """▼ Root
|-- a
+-- ▼ b
    +-- [0]
"""
    )
    with pytest.raises(ValueError):
        t.show(line_type="unknown")


def test_prefix_repr():
    assert JsonTree._line_prefix_repr(line_type="ascii-ex", is_last_list=()) == ""
    assert JsonTree._line_prefix_repr(line_type="ascii-ex", is_last_list=(True,)) == "└── "
    assert JsonTree._line_prefix_repr(line_type="ascii-ex", is_last_list=(False,)) == "├── "
    assert (
        JsonTree._line_prefix_repr(line_type="ascii-ex", is_last_list=(True, False, True))
        == "    │   └── "
    )
    assert (
        JsonTree._line_prefix_repr(line_type="ascii-ex", is_last_list=(False, False, False))
        == "│   │   ├── "
    )


def test_show_scalar_and_empty_documents():
    assert JsonTree("x").show(show_types=True, show_values=True) == 'Root (string) "x"\n'
    assert JsonTree(None).show(show_values=True) == "Root null\n"

    t = JsonTree({"e": {}, "l": []})
    t.set_all(True)
    assert (
        t.show(show_types=True)
        == """▼ Root (object, 2 items)
├── ▼ e (object, 0 items)
└── ▼ l (array, 0 items)
"""
    )


def test_rows():
    t = JsonTree(get_sample_document())
    assert [(depth, n.identifier) for depth, n in t.rows()] == [(0, ())]
    t.set_all(True)
    assert [(depth, n.identifier) for depth, n in t.rows()] == [
        (0, ()),
        (1, ("a",)),
        (2, ("a", "0")),
        (2, ("a", "1")),
        (2, ("a", "2")),
        (3, ("a", "2", "b")),
    ]
    assert [n.identifier for n in t.expand_tree()] == [n.identifier for _, n in t.rows()]


def test_collapsed_containers_are_not_walked():
    # children of a collapsed node are never built, so an unsupported value below it is not an issue
    t = JsonTree({"a": {"unsupported": object()}})
    t.toggle(())
    assert [n.identifier for n in t.expand_tree()] == [(), ("a",)]


def test_containers_and_set_all():
    t = JsonTree(get_rich_document())
    assert [n.identifier for n in t.containers()] == [
        (),
        ("tags",),
        ("meta",),
        ("meta", "empty"),
        ("meta", "list"),
    ]
    assert [n.identifier for n in t.containers(("meta",))] == [
        ("meta",),
        ("meta", "empty"),
        ("meta", "list"),
    ]
    assert list(t.containers(("name",))) == []

    assert t.set_all(True) == 5
    assert all(t.expansion.is_expanded(n.identifier) for n in t.containers())
    assert t.set_all(False) == 5
    assert t.show() == "▶ Root\n"


def test_set_all_only_touches_displayed_subtree():
    d = get_sample_document()
    expansion = ExpansionState()
    sub = JsonTree(d["a"], root_path=("a",), expansion=expansion)
    assert sub.set_all(True) == 2
    assert expansion.snapshot() == {("a",): True, ("a", "2"): True}
