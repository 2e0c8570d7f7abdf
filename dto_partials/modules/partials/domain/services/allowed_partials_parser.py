# 📄 File: dto_partials/modules/partials/domain/services/allowed_partials_parser.py
# 🧭 Purpose (Layman Explanation):
# Asks a data class which fields clients may include or exclude, and follows that question down
# into nested objects, but only as far as the client actually asked.
#
# 🧪 Purpose (Technical Summary):
# Builds the allowed tree for one partial direction by combining a class's allow-list with its
# declared fields, recursing into nested data classes on demand (bounded by the requested tree)
# so self-referencing class graphs terminate.
#
# 🔗 Dependencies:
# - dto_partials.modules.partials.domain.models (tree nodes, schema lookups)
# - dto_partials.shared.config.settings (PARTIALS_MAX_DEPTH)
# - dto_partials.shared.utils.logging
#
# 🔄 Connected Modules / Calls From:
# - dto_partials.modules.partials.domain.services.partials_tree_resolver

"""
Allowed Partials Parser

Allow-list semantics per class and direction:

- ``None`` or a list containing ``*``: every field at this level may be requested;
  nested data fields still ask their own class
- ``[]``: nothing may be requested below the field owning this class (ExcludedTreeNode)
- ``["a", "b"]``: only the declared fields named here

Nested classes are only consulted for fields the requested tree descends into.
A wildcard request expands through the allow-lists, stopping at ``PARTIALS_MAX_DEPTH``.
Reaching a class already on the expansion path yields AllTreeNode when no class reachable
from it restricts the direction, ExcludedTreeNode otherwise. Under a wildcard, plain
fields of an unrestricted level are ExcludedTreeNode leaves.
"""

from typing import Dict, Optional, Sequence, Tuple, Type

from dto_partials.modules.partials.domain.models.data_schema import (
    WILDCARD,
    AllowListLookup,
    DataField,
    FieldsLookup,
    class_allow_list,
    class_declared_fields,
)
from dto_partials.modules.partials.domain.models.partial_trees import PartialDirection
from dto_partials.modules.partials.domain.models.tree_nodes import (
    AllTreeNode,
    ExcludedTreeNode,
    PartialTreeNode,
    TreeNode,
)
from dto_partials.shared.config.settings import Settings, get_settings
from dto_partials.shared.utils.logging import get_logger

logger = get_logger(__name__)


class AllowedPartialsParser:
    """Resolve the allowed tree of a data class, demand-driven by a requested tree."""

    def __init__(
        self,
        allow_list_lookup: AllowListLookup = class_allow_list,
        fields_lookup: FieldsLookup = class_declared_fields,
        settings: Optional[Settings] = None,
        max_depth: Optional[int] = None,
    ):
        settings = settings or get_settings()
        self.allow_list_lookup = allow_list_lookup
        self.fields_lookup = fields_lookup
        self.max_depth = max_depth or settings.PARTIALS_MAX_DEPTH

    def execute(self, direction: PartialDirection, data_class: Type, requested: TreeNode) -> TreeNode:
        """
        Build the allowed tree of ``data_class`` for ``direction``.

        Args:
            direction: Partial direction whose allow-list is consulted
            data_class: Root data class
            requested: Requested tree bounding how deep nested classes are consulted

        Returns:
            Allowed tree (AllTreeNode, ExcludedTreeNode or PartialTreeNode)
        """
        return self._allowed(direction, data_class, requested, 1, ())

    def _allowed(
        self,
        direction: PartialDirection,
        data_class: Type,
        requested: TreeNode,
        depth: int,
        expanding: Tuple[Type, ...],
    ) -> TreeNode:
        allowed = self.allow_list_lookup(data_class, direction)
        fields = {field.name: field for field in self.fields_lookup(data_class)}

        if isinstance(requested, AllTreeNode):
            expanding = expanding + (data_class,)

        if allowed is None or WILDCARD in allowed:
            return self._unrestricted(direction, fields, requested, depth, expanding)

        names = self._declared_names(data_class, allowed, fields)
        if not names:
            return ExcludedTreeNode()

        children: Dict[str, TreeNode] = {}
        for name in names:
            children[name] = self._child(direction, fields[name], self._wanted(requested, name), depth, expanding)
        return PartialTreeNode(children)

    def _unrestricted(
        self,
        direction: PartialDirection,
        fields: Dict[str, DataField],
        requested: TreeNode,
        depth: int,
        expanding: Tuple[Type, ...],
    ) -> TreeNode:
        if isinstance(requested, AllTreeNode):
            children = {
                name: self._child(direction, field, requested, depth, expanding)
                for name, field in fields.items()
            }
            nested = [children[name] for name, field in fields.items() if field.is_nested]
            if all(isinstance(node, AllTreeNode) for node in nested):
                return AllTreeNode()
            return PartialTreeNode({
                name: node if fields[name].is_nested else ExcludedTreeNode()
                for name, node in children.items()
            })

        if not isinstance(requested, PartialTreeNode):
            return AllTreeNode()

        children = {}
        for name, wanted in requested.items():
            field = fields.get(name)
            if field is None or not field.is_nested:
                children[name] = AllTreeNode()
            else:
                children[name] = self._child(direction, field, wanted, depth, expanding)
        return PartialTreeNode(children)

    def _child(
        self,
        direction: PartialDirection,
        field: DataField,
        wanted: Optional[TreeNode],
        depth: int,
        expanding: Tuple[Type, ...],
    ) -> TreeNode:
        if not field.is_nested or not isinstance(wanted, (AllTreeNode, PartialTreeNode)):
            return ExcludedTreeNode()

        if depth >= self.max_depth:
            logger.warning(
                "Allowed partials exceed maximum depth, stopping expansion",
                extra={"field": field.name, "max_depth": self.max_depth}
            )
            return ExcludedTreeNode()

        if isinstance(wanted, AllTreeNode) and field.nested_class in expanding:
            if self._unrestricted_below(direction, field.nested_class):
                return AllTreeNode()
            return ExcludedTreeNode()

        return self._allowed(direction, field.nested_class, wanted, depth + 1, expanding)

    def _unrestricted_below(self, direction: PartialDirection, data_class: Type) -> bool:
        """Whether no class reachable from ``data_class`` restricts ``direction``."""
        pending = [data_class]
        seen = set()

        while pending:
            current = pending.pop()
            if current in seen:
                continue
            seen.add(current)

            allowed = self.allow_list_lookup(current, direction)
            if allowed is not None and WILDCARD not in allowed:
                return False
            pending.extend(field.nested_class for field in self.fields_lookup(current) if field.is_nested)

        return True

    @staticmethod
    def _wanted(requested: TreeNode, name: str) -> Optional[TreeNode]:
        if isinstance(requested, AllTreeNode):
            return requested
        return requested.get_child(name)

    @staticmethod
    def _declared_names(data_class: Type, allowed: Sequence[str], fields: Dict[str, DataField]) -> Sequence[str]:
        names = [name for name in allowed if name in fields]
        unknown = [name for name in allowed if name not in fields]
        if unknown:
            logger.warning(
                "Allow-list names undeclared fields, ignoring them",
                extra={"data_class": data_class.__name__, "fields": unknown}
            )
        return list(dict.fromkeys(names))
