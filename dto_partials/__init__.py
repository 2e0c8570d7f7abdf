# 📄 File: dto_partials/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# The main entry point of the data layer: response data classes whose optional fields
# clients can switch on and off with include/exclude query parameters.
#
# 🧪 Purpose (Technical Summary):
# Package initialization with version info and the public API of the data transfer
# object layer and its partials resolution engine.
#
# 🔗 Dependencies:
# - dto_partials.modules.partials (domain, application, presentation layers)
#
# 🔄 Connected Modules / Calls From:
# - FastAPI applications declaring response data classes

"""
DTO Partials - Data Transfer Objects with Request-Driven Partial Output

Declare data classes, mark expensive fields as lazy, and let clients choose
which nested fields to include or exclude, within server-declared allow-lists.
"""

from dto_partials.modules.partials.application.dto.base_data import Data, DataCollection, DataCollectionOf
from dto_partials.modules.partials.application.transformers.data_transformer import DataTransformer
from dto_partials.modules.partials.domain.models.lazy import ConditionalLazy, Lazy, Visibility
from dto_partials.modules.partials.domain.models.partial_trees import PartialDirection, PartialTrees
from dto_partials.modules.partials.domain.models.tree_nodes import (
    AllTreeNode,
    DisabledTreeNode,
    ExcludedTreeNode,
    PartialTreeNode,
    TreeNode,
)
from dto_partials.modules.partials.domain.services.partials_tree_resolver import PartialsTreeFromRequestResolver
from dto_partials.modules.partials.presentation.api.responses import data_response

__version__ = "1.0.0"
__title__ = "DTO Partials"

__all__ = [
    "Data",
    "DataCollection",
    "DataCollectionOf",
    "DataTransformer",
    "Lazy",
    "ConditionalLazy",
    "Visibility",
    "PartialDirection",
    "PartialTrees",
    "TreeNode",
    "AllTreeNode",
    "ExcludedTreeNode",
    "PartialTreeNode",
    "DisabledTreeNode",
    "PartialsTreeFromRequestResolver",
    "data_response",
]
