# 📄 File: dto_partials/modules/partials/domain/services/partials_tree_resolver.py
# 🧭 Purpose (Layman Explanation):
# Decides, for one response, which optional fields end up in it: it combines what the client
# asked for, what the data class allows, and what the code already asked for by hand.
#
# 🧪 Purpose (Technical Summary):
# Partials resolution engine. Parses request partials per direction, reconciles them against the
# demand-driven allowed tree of the data class, and merges the result with the data object's
# manually declared partial trees.
#
# 🔗 Dependencies:
# - dto_partials.modules.partials.domain.services.partials_parser
# - dto_partials.modules.partials.domain.services.allowed_partials_parser
# - dto_partials.modules.partials.domain.models (trees, lookups)
# - dto_partials.shared.utils.logging
#
# 🔄 Connected Modules / Calls From:
# - dto_partials.modules.partials.presentation.api.responses (per-request resolution)
# - Any caller serializing a data object against a request

"""
Partials Tree Resolver

Per direction (include, exclude, only, except), independently:

1. parse the request parameter into a requested tree
2. build the allowed tree of the data class, bounded by the requested tree
3. intersect requested with allowed
4. merge the outcome into the data object's own manual trees

A missing request parameter yields DisabledTreeNode, which leaves default visibility
alone. A parameter that resolves to nothing allowed yields ExcludedTreeNode or an
empty PartialTreeNode instead.
"""

import logging
from typing import Any, Optional, Protocol, Type

from dto_partials.modules.partials.domain.models.data_schema import (
    AllowListLookup,
    FieldsLookup,
    class_allow_list,
    class_declared_fields,
)
from dto_partials.modules.partials.domain.models.partial_trees import PartialDirection, PartialTrees
from dto_partials.modules.partials.domain.models.tree_nodes import DisabledTreeNode, TreeNode
from dto_partials.modules.partials.domain.services.allowed_partials_parser import AllowedPartialsParser
from dto_partials.modules.partials.domain.services.partials_parser import PartialsParser
from dto_partials.shared.config.settings import Settings, get_settings
from dto_partials.shared.utils.logging import get_logger

logger = get_logger(__name__)


class PartialsRequest(Protocol):
    """Request-like collaborator exposing raw partials parameters."""

    def get_include_param(self) -> Any:
        ...

    def get_exclude_param(self) -> Any:
        ...

    def get_only_param(self) -> Any:
        ...

    def get_except_param(self) -> Any:
        ...


_PARAM_GETTERS = {
    PartialDirection.INCLUDE: "get_include_param",
    PartialDirection.EXCLUDE: "get_exclude_param",
    PartialDirection.ONLY: "get_only_param",
    PartialDirection.EXCEPT: "get_except_param",
}


def request_param(request: Any, direction: PartialDirection) -> Any:
    """Raw parameter for a direction; requests without the getter have none."""
    getter = getattr(request, _PARAM_GETTERS[direction], None)
    if getter is None:
        return None
    return getter()


class PartialsTreeFromRequestResolver:
    """Resolve the decision trees of a data object for one request."""

    def __init__(
        self,
        allow_list_lookup: AllowListLookup = class_allow_list,
        fields_lookup: FieldsLookup = class_declared_fields,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.partials_parser = PartialsParser(settings)
        self.allowed_partials_parser = AllowedPartialsParser(allow_list_lookup, fields_lookup, settings)

    def execute(self, data: Any, request: Any) -> PartialTrees:
        """
        Resolve partial trees for a data object or collection.

        Args:
            data: Data object or data collection being serialized
            request: Object exposing get_include_param() and friends

        Returns:
            PartialTrees: request trees merged into the object's manual trees
        """
        data_class = self.data_class_of(data)
        resolved = PartialTrees()

        for direction in PartialDirection:
            requested = self.partials_parser.execute(request_param(request, direction))
            resolved = resolved.with_tree(direction, self.reconcile(direction, data_class, requested))

        manual = getattr(data, "partial_trees", None)
        trees = manual.merge(resolved) if isinstance(manual, PartialTrees) else resolved

        if logger.is_enabled_for(logging.DEBUG):
            logger.debug(
                "Resolved partial trees",
                extra={
                    "data_class": data_class.__name__,
                    "included": repr(trees.included),
                    "excluded": repr(trees.excluded),
                    "only": repr(trees.only),
                    "except": repr(trees.excepted),
                }
            )
        return trees

    def resolve(self, data: Any, request: Any) -> PartialTrees:
        """Alias of execute()."""
        return self.execute(data, request)

    def reconcile(self, direction: PartialDirection, data_class: Type, requested: TreeNode) -> TreeNode:
        """Restrict a requested tree to what ``data_class`` allows in ``direction``."""
        if isinstance(requested, DisabledTreeNode):
            return requested

        allowed = self.allowed_partials_parser.execute(direction, data_class, requested)
        return requested.intersect(allowed)

    @staticmethod
    def data_class_of(data: Any) -> Type:
        data_class = getattr(data, "data_class", None)
        if isinstance(data_class, type):
            return data_class
        return type(data)
