# 📄 File: dto_partials/modules/partials/application/transformers/data_transformer.py
# 🧭 Purpose (Layman Explanation):
# Turns a data object into plain JSON, field by field, leaving out optional fields nobody asked
# for and adding the ones the client requested.
#
# 🧪 Purpose (Technical Summary):
# Applies resolved partial trees while serializing data objects: combines each field's default
# visibility with the include/exclude trees, enforces only/except, resolves visible lazy values
# and recurses into nested data, collections and lists with the matching sub-trees.
#
# 🔗 Dependencies:
# - pydantic_core.to_jsonable_python for leaf values
# - dto_partials.modules.partials.domain.models (trees, lazy values)
# - dto_partials.modules.partials.application.dto.base_data
#
# 🔄 Connected Modules / Calls From:
# - Data.transform(), DataCollection.transform()
# - dto_partials.modules.partials.presentation.api.responses

from typing import Any, Dict, Mapping, Optional

from pydantic_core import to_jsonable_python

from dto_partials.modules.partials.application.dto.base_data import Data, DataCollection
from dto_partials.modules.partials.domain.models.lazy import ConditionalLazy, Lazy, Visibility, visibility_of
from dto_partials.modules.partials.domain.models.partial_trees import PartialTrees
from dto_partials.modules.partials.domain.models.tree_nodes import (
    AllTreeNode,
    ExcludedTreeNode,
    PartialTreeNode,
    TreeNode,
)


class DataTransformer:
    """Serialize data objects against partial trees."""

    def transform(self, data: Any, trees: Optional[PartialTrees] = None) -> Any:
        trees = trees or PartialTrees()

        if isinstance(data, DataCollection):
            trees = data.partial_trees.merge(trees)
            return [self.transform(item, trees) for item in data]

        if not isinstance(data, Data):
            return self.transform_value(data, trees)

        trees = data.partial_trees.merge(trees)
        payload: Dict[str, Any] = {}

        for field in data.declared_fields():
            value = getattr(data, field.name)

            if not self.should_include(field.name, value, trees):
                continue

            if isinstance(value, Lazy):
                value = value.resolve()

            payload[field.name] = self.transform_value(value, trees.nested(field.name))

        return payload

    def transform_value(self, value: Any, trees: PartialTrees) -> Any:
        if isinstance(value, (Data, DataCollection)):
            return self.transform(value, trees)
        if isinstance(value, (list, tuple)):
            return [self.transform_value(item, trees) for item in value]
        if isinstance(value, Mapping):
            return {key: self.transform_value(item, trees) for key, item in value.items()}
        return to_jsonable_python(value)

    # =========================================================================
    # VISIBILITY
    # =========================================================================

    def should_include(self, name: str, value: Any, trees: PartialTrees) -> bool:
        """
        Decide whether a field is part of the output.

        only/except apply to every field. Lazy fields combine their default
        visibility with the include tree (OR) and the exclude tree (AND NOT).
        Conditional lazies only listen to their condition.
        """
        if self.is_hidden_by_only(name, trees.only) or self.is_hidden_by_except(name, trees.excepted):
            return False

        if isinstance(value, ConditionalLazy):
            return value.should_be_included()

        visibility = visibility_of(value)
        if visibility == Visibility.EAGER:
            return True

        included = (
            visibility == Visibility.INCLUDED_BY_DEFAULT
            or self.is_lazy_included(name, trees.included, visibility)
        )
        return included and not self.is_lazy_excluded(name, trees.excluded)

    @staticmethod
    def is_lazy_included(name: str, tree: TreeNode, visibility: Visibility) -> bool:
        if isinstance(tree, AllTreeNode):
            return visibility != Visibility.ONLY_WHEN_REQUESTED
        return isinstance(tree, PartialTreeNode) and name in tree

    @staticmethod
    def is_lazy_excluded(name: str, tree: TreeNode) -> bool:
        if isinstance(tree, AllTreeNode):
            return True
        return isinstance(tree, PartialTreeNode) and isinstance(tree.get_child(name), ExcludedTreeNode)

    @staticmethod
    def is_hidden_by_only(name: str, tree: TreeNode) -> bool:
        return isinstance(tree, PartialTreeNode) and name not in tree

    @staticmethod
    def is_hidden_by_except(name: str, tree: TreeNode) -> bool:
        if isinstance(tree, AllTreeNode):
            return True
        return isinstance(tree, PartialTreeNode) and isinstance(tree.get_child(name), ExcludedTreeNode)
