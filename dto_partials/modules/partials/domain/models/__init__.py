# 📄 File: dto_partials/modules/partials/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Collects the basic building blocks of the partials engine: trees, lazy values and schemas.
#
# 🧪 Purpose (Technical Summary):
# Domain model exports for tree nodes, partial trees, lazy values and schema descriptors.
#
# 🔗 Dependencies:
# - dto_partials.modules.partials.domain.models.*
#
# 🔄 Connected Modules / Calls From:
# - Domain services, application layer, tests

from dto_partials.modules.partials.domain.models.data_schema import (
    WILDCARD,
    AllowListLookup,
    DataField,
    DescribedDataClass,
    FieldsLookup,
    class_allow_list,
    class_declared_fields,
)
from dto_partials.modules.partials.domain.models.lazy import (
    ConditionalLazy,
    Lazy,
    Visibility,
    visibility_of,
)
from dto_partials.modules.partials.domain.models.partial_trees import PartialDirection, PartialTrees
from dto_partials.modules.partials.domain.models.tree_nodes import (
    AllTreeNode,
    DisabledTreeNode,
    ExcludedTreeNode,
    PartialTreeNode,
    TreeNode,
)

__all__ = [
    "TreeNode",
    "AllTreeNode",
    "ExcludedTreeNode",
    "PartialTreeNode",
    "DisabledTreeNode",
    "PartialDirection",
    "PartialTrees",
    "Lazy",
    "ConditionalLazy",
    "Visibility",
    "visibility_of",
    "WILDCARD",
    "DataField",
    "DescribedDataClass",
    "AllowListLookup",
    "FieldsLookup",
    "class_allow_list",
    "class_declared_fields",
]
