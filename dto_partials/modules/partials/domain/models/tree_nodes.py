# 📄 File: dto_partials/modules/partials/domain/models/tree_nodes.py
# 🧭 Purpose (Layman Explanation):
# Describes, field by field, which parts of a response a client asked for (or is allowed to ask for),
# as a small tree: "everything here", "just this field", "only some children", or "no say at all".
#
# 🧪 Purpose (Technical Summary):
# Immutable tree node variants (All, Excluded, Partial, Disabled) with structural equality,
# union (merge) and reconciliation (intersect) used by the partials resolution engine.
#
# 🔗 Dependencies:
# - types.MappingProxyType for read-only children
#
# 🔄 Connected Modules / Calls From:
# - dto_partials.modules.partials.domain.services (parsing, allow-lists, resolution)
# - dto_partials.modules.partials.application.transformers (lookup during serialization)

"""
Partial Tree Nodes

A tree node answers, for one level of a data object, which fields are selected:

- AllTreeNode: every field at this level and below
- ExcludedTreeNode: the field owning this node is selected, with no nested detail
- PartialTreeNode: only the named children, each refined by its own node
- DisabledTreeNode: no opinion at all, default visibility applies

Nodes never change after construction; merge and intersect return new nodes.
"""

from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple


class TreeNode(ABC):
    """Base class for the closed set of partial tree variants."""

    __slots__ = ()

    @abstractmethod
    def merge(self, other: "TreeNode") -> "TreeNode":
        """Union of two trees."""

    @abstractmethod
    def intersect(self, other: "TreeNode") -> "TreeNode":
        """Restrict this (requested) tree to what ``other`` (allowed) permits."""

    def get_child(self, name: str) -> Optional["TreeNode"]:
        """Child node for a field name, if this node records one."""
        return None

    def nested(self, name: str) -> "TreeNode":
        """Sub-tree handed to a nested data object stored under ``name``."""
        return DisabledTreeNode()

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self).__name__)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class AllTreeNode(TreeNode):
    """Wildcard: every field at this level and below."""

    __slots__ = ()

    def merge(self, other: TreeNode) -> TreeNode:
        return self

    def intersect(self, other: TreeNode) -> TreeNode:
        if isinstance(other, DisabledTreeNode):
            return ExcludedTreeNode()
        return other

    def nested(self, name: str) -> TreeNode:
        return self


class ExcludedTreeNode(TreeNode):
    """Terminal selection without nested detail."""

    __slots__ = ()

    def merge(self, other: TreeNode) -> TreeNode:
        if isinstance(other, DisabledTreeNode):
            return self
        return other

    def intersect(self, other: TreeNode) -> TreeNode:
        return self


class DisabledTreeNode(TreeNode):
    """No client-side control at this level."""

    __slots__ = ()

    def merge(self, other: TreeNode) -> TreeNode:
        return other

    def intersect(self, other: TreeNode) -> TreeNode:
        return self


class PartialTreeNode(TreeNode):
    """Only the named children are selected, each refined by its own node."""

    __slots__ = ("_children",)

    def __init__(self, children: Optional[Mapping[str, TreeNode]] = None):
        children = dict(children or {})
        for name, child in children.items():
            if not isinstance(child, TreeNode):
                raise ValueError(f"Child '{name}' must be a TreeNode, got {child!r}")
        self._children = MappingProxyType(children)

    @property
    def children(self) -> Mapping[str, TreeNode]:
        return self._children

    def merge(self, other: TreeNode) -> TreeNode:
        if isinstance(other, AllTreeNode):
            return other
        if not isinstance(other, PartialTreeNode):
            return self

        merged: Dict[str, TreeNode] = dict(self._children)
        for name, child in other.children.items():
            merged[name] = merged[name].merge(child) if name in merged else child
        return PartialTreeNode(merged)

    def intersect(self, other: TreeNode) -> TreeNode:
        if isinstance(other, AllTreeNode):
            return self
        if not isinstance(other, PartialTreeNode):
            return ExcludedTreeNode()

        return PartialTreeNode({
            name: child.intersect(other.children[name])
            for name, child in self._children.items()
            if name in other.children
        })

    def get_child(self, name: str) -> Optional[TreeNode]:
        return self._children.get(name)

    def nested(self, name: str) -> TreeNode:
        return self._children.get(name, DisabledTreeNode())

    def items(self) -> Iterator[Tuple[str, TreeNode]]:
        return iter(self._children.items())

    def __contains__(self, name: object) -> bool:
        return name in self._children

    def __len__(self) -> int:
        return len(self._children)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PartialTreeNode) and dict(self._children) == dict(other.children)

    def __hash__(self) -> int:
        return hash(frozenset(self._children.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{name!r}: {child!r}" for name, child in self._children.items())
        return f"PartialTreeNode({{{inner}}})"
