"""Tests for translation tree flattening and lookup."""

from __future__ import annotations

from i18n_missing_keys.tree import Leaf, Node, build_tree, flatten, lookup


def test_build_tree_wraps_scalars_and_mappings() -> None:
    tree = build_tree({"a": {"b": "x"}, "c": 1})
    assert tree == Node({"a": Node({"b": Leaf("x")}), "c": Leaf(1)})


def test_build_tree_stringifies_yaml_keys() -> None:
    tree = build_tree({True: "yes", 404: {"title": "Not found"}})
    assert flatten(tree) == {"True", "404.title"}


def test_flatten_nested() -> None:
    tree = build_tree({"greetings": {"hi": "Hi", "hello": "Hello"}})
    assert flatten(tree) == {"greetings.hi", "greetings.hello"}


def test_flatten_deeply_nested() -> None:
    tree = build_tree(
        {
            "messages": {
                "inclusion": "is not included in the list",
                "models": {"user": {"email": "should look like an email address"}},
            },
            "label_messages": {"validates_acceptance_of": "Must be accepted"},
        }
    )
    assert sorted(flatten(tree)) == [
        "label_messages.validates_acceptance_of",
        "messages.inclusion",
        "messages.models.user.email",
    ]


def test_flatten_empty_subtree_contributes_nothing() -> None:
    tree = build_tree({"activerecord": {}, "missing": {"one": "uno"}})
    assert flatten(tree) == {"missing.one"}


def test_flatten_keeps_non_string_leaves() -> None:
    tree = build_tree({"plural": ["one", "other"], "count": 3, "blank": None})
    assert flatten(tree) == {"plural", "count", "blank"}


def test_lookup_resolves_leaf_and_node() -> None:
    tree = build_tree({"greetings": {"hi": "Hi"}})
    assert lookup(tree, "greetings.hi") == Leaf("Hi")
    assert lookup(tree, "greetings") == Node({"hi": Leaf("Hi")})


def test_lookup_misses() -> None:
    tree = build_tree({"greetings": {"hi": "Hi"}})
    assert lookup(tree, "omg") is None
    assert lookup(tree, "greetings.hello") is None
    # descending into a leaf
    assert lookup(tree, "greetings.hi.formal") is None


def test_presence() -> None:
    assert Leaf("Hi").is_present()
    assert Leaf(0).is_present()
    assert not Leaf(None).is_present()
    assert not Leaf("").is_present()
    assert not Node({}).is_present()
    assert Node({"a": Leaf("x")}).is_present()


def test_lookup_dotted_catalogue_keys() -> None:
    tree = build_tree({"a.b": "flat", "errors": {"messages.blank": "can't be blank"}})
    assert lookup(tree, "a.b") == Leaf("flat")
    assert lookup(tree, "errors.messages.blank") == Leaf("can't be blank")
    assert lookup(tree, "a") is None


def test_lookup_falls_back_to_nested_path() -> None:
    tree = build_tree({"a.b": {"c": "x"}, "a": {"b": {"d": "y"}}})
    assert lookup(tree, "a.b.c") == Leaf("x")
    assert lookup(tree, "a.b.d") == Leaf("y")
