# -*- coding: utf-8 -*-

"""
Translation trees.

A locale's catalogue is held as a small tagged union: a ``Leaf`` wraps one
translated value, a ``Node`` maps nesting keys to further trees. Flattening
and lookup walk this structure explicitly instead of sniffing raw dicts at
every step.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Mapping, Optional, Set, Tuple, Union

SEPARATOR = "."


@dataclass(frozen=True)
class Leaf:
    value: Any

    def is_present(self) -> bool:
        return self.value is not None and self.value != ""


@dataclass(frozen=True)
class Node:
    children: Dict[str, "Tree"] = field(default_factory=dict)

    def items(self) -> Iterator[Tuple[str, "Tree"]]:
        return iter(self.children.items())

    def get(self, key: str) -> Optional["Tree"]:
        return self.children.get(key)

    def is_present(self) -> bool:
        return bool(self.children)


Tree = Union[Leaf, Node]


def build_tree(data: Any) -> Tree:
    """Convert a parsed catalogue (nested dicts) into a tree.

    Args:
        data: Mapping loaded from YAML/JSON, or any scalar

    Returns:
        A ``Node`` for mappings, a ``Leaf`` for everything else
    """
    if isinstance(data, Mapping):
        # YAML happily produces int and bool keys (``yes:``, ``404:``)
        return Node({str(key): build_tree(value) for key, value in data.items()})
    return Leaf(data)


def flatten(tree: Tree, prefix: str = "") -> Set[str]:
    """Recursively collect the dotted path of every leaf in a tree.

    Args:
        tree: Tree to walk
        prefix: Current key prefix for building the full key path

    Returns:
        A set containing all keys
    """
    if isinstance(tree, Leaf):
        return {prefix} if prefix else set()

    keys = set()
    for key, child in tree.items():
        full_key = f"{prefix}{SEPARATOR}{key}" if prefix else key
        keys.update(flatten(child, full_key))
    return keys


def split_path(path: str) -> List[str]:
    return path.split(SEPARATOR)


def _resolve(tree: Tree, segments: List[str]) -> Optional[Tree]:
    if not segments:
        return tree
    if not isinstance(tree, Node):
        return None
    # Catalogue keys may themselves contain dots ("a.b": ...), longest first
    for size in range(len(segments), 0, -1):
        child = tree.get(SEPARATOR.join(segments[:size]))
        if child is None:
            continue
        resolved = _resolve(child, segments[size:])
        if resolved is not None:
            return resolved
    return None


def lookup(tree: Tree, path: str) -> Optional[Tree]:
    """Resolve a dotted path, or return None when it leads nowhere."""
    return _resolve(tree, split_path(path))
