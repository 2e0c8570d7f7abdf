# 📄 File: dto_partials/modules/partials/domain/models/partial_trees.py
# 🧭 Purpose (Layman Explanation):
# Bundles the four "what should the response contain" trees (include, exclude, only, except)
# so they can be passed around and handed down to nested objects together.
#
# 🧪 Purpose (Technical Summary):
# Immutable container of the per-direction decision trees with merging and
# per-field sub-tree lookup for recursive serialization.
#
# 🔗 Dependencies:
# - dataclasses, enum
# - dto_partials.modules.partials.domain.models.tree_nodes
#
# 🔄 Connected Modules / Calls From:
# - dto_partials.modules.partials.domain.services.partials_tree_resolver (result type)
# - dto_partials.modules.partials.application.dto.base_data (manual partials)
# - dto_partials.modules.partials.application.transformers.data_transformer

from dataclasses import dataclass, field, replace
from enum import Enum

from dto_partials.modules.partials.domain.models.tree_nodes import DisabledTreeNode, TreeNode


class PartialDirection(str, Enum):
    """Kinds of partials a client or the server can apply."""
    INCLUDE = "include"
    EXCLUDE = "exclude"
    ONLY = "only"
    EXCEPT = "except"

    @property
    def attribute(self) -> str:
        """Name of the matching PartialTrees attribute."""
        return _ATTRIBUTES[self]


_ATTRIBUTES = {
    PartialDirection.INCLUDE: "included",
    PartialDirection.EXCLUDE: "excluded",
    PartialDirection.ONLY: "only",
    PartialDirection.EXCEPT: "excepted",
}


@dataclass(frozen=True)
class PartialTrees:
    """
    Decision trees for one data object.

    ``included``/``excluded`` drive lazy field visibility, ``only``/``excepted``
    restrict the output fields regardless of laziness.
    """

    included: TreeNode = field(default_factory=DisabledTreeNode)
    excluded: TreeNode = field(default_factory=DisabledTreeNode)
    only: TreeNode = field(default_factory=DisabledTreeNode)
    excepted: TreeNode = field(default_factory=DisabledTreeNode)

    def get(self, direction: PartialDirection) -> TreeNode:
        return getattr(self, direction.attribute)

    def with_tree(self, direction: PartialDirection, tree: TreeNode) -> "PartialTrees":
        return replace(self, **{direction.attribute: tree})

    def merge(self, other: "PartialTrees") -> "PartialTrees":
        return PartialTrees(
            included=self.included.merge(other.included),
            excluded=self.excluded.merge(other.excluded),
            only=self.only.merge(other.only),
            excepted=self.excepted.merge(other.excepted),
        )

    def nested(self, name: str) -> "PartialTrees":
        """Trees handed to the nested data object stored in field ``name``."""
        return PartialTrees(
            included=self.included.nested(name),
            excluded=self.excluded.nested(name),
            only=self.only.nested(name),
            excepted=self.excepted.nested(name),
        )
