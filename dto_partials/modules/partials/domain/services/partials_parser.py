# 📄 File: dto_partials/modules/partials/domain/services/partials_parser.py
# 🧭 Purpose (Layman Explanation):
# Reads what a client typed in the URL, like "include=artist,album.tracks", and turns it into
# a tree of the fields they want.
#
# 🧪 Purpose (Technical Summary):
# Dotted-path parser for include/exclude/only/except input given as comma-separated strings,
# sequences of paths, or structured mappings. Supports wildcards (`*`) and groups (`{a,b}`).
#
# 🔗 Dependencies:
# - dto_partials.modules.partials.domain.models.tree_nodes
# - dto_partials.shared.config.settings (PARTIALS_MAX_DEPTH)
# - dto_partials.shared.utils.logging
#
# 🔄 Connected Modules / Calls From:
# - dto_partials.modules.partials.domain.services.partials_tree_resolver (request input)
# - dto_partials.modules.partials.application.dto.base_data (manual partials)

"""
Partials Parser

Grammar of a single directive::

    directive := segment ("." segment)*
    segment   := name | "*" | "{" name ("," name)* "}"

A directive ending in a name selects that field (ExcludedTreeNode leaf), one ending in
``*`` selects everything below (AllTreeNode), a group selects several leaves at once.
Directives sharing a prefix are merged into one PartialTreeNode. Empty or missing input
parses to DisabledTreeNode so "nothing requested" stays distinct from any selection.
"""

from typing import Any, Iterable, List, Mapping, Optional

from dto_partials.modules.partials.domain.models.data_schema import WILDCARD
from dto_partials.modules.partials.domain.models.tree_nodes import (
    AllTreeNode,
    DisabledTreeNode,
    ExcludedTreeNode,
    PartialTreeNode,
    TreeNode,
)
from dto_partials.shared.config.settings import Settings, get_settings
from dto_partials.shared.utils.logging import get_logger

logger = get_logger(__name__)


def split_directives(value: str) -> List[str]:
    """Split a comma-separated directive string, keeping `{a,b}` groups intact."""
    directives: List[str] = []
    current: List[str] = []
    depth = 0

    for char in value:
        if char == "{":
            depth += 1
        elif char == "}":
            depth = max(depth - 1, 0)
        elif char == "," and depth == 0:
            directives.append("".join(current))
            current = []
            continue
        current.append(char)

    directives.append("".join(current))
    return [directive for directive in directives if directive.strip()]


def normalize_partials(raw: Any) -> Optional[List[str]]:
    """
    Flatten raw request input into a list of dotted directives.

    Args:
        raw: None, a comma-separated string, a sequence of directives,
            or a mapping of field name to nested specification

    Returns:
        List of directives, or None when the input carries nothing
    """
    if raw is None:
        return None

    if isinstance(raw, str):
        directives = split_directives(raw)
    elif isinstance(raw, Mapping):
        directives = _directives_from_mapping(raw)
    elif isinstance(raw, Iterable):
        directives = []
        for item in raw:
            if isinstance(item, str):
                directives.extend(split_directives(item))
            elif isinstance(item, Mapping):
                directives.extend(_directives_from_mapping(item))
    else:
        return None

    return directives or None


def _directives_from_mapping(raw: Mapping) -> List[str]:
    directives: List[str] = []

    for key, value in raw.items():
        key = str(key).strip()

        # array-style input with positional keys: include[0]=artist
        if key.isdigit() or key == "":
            nested = normalize_partials(value) or []
            directives.extend(nested)
            continue

        if value is None or value is True or value == "":
            directives.append(key)
            continue

        if value is False:
            continue

        nested = normalize_partials(value)
        if not nested:
            directives.append(key)
            continue

        directives.extend(f"{key}.{directive}" for directive in nested)

    return directives


class PartialsParser:
    """
    Parser turning raw partials input into a requested tree.

    Paths nested deeper than ``PARTIALS_MAX_DEPTH`` are cut off at the limit and
    end in a plain leaf.
    """

    def __init__(self, settings: Optional[Settings] = None, max_depth: Optional[int] = None):
        settings = settings or get_settings()
        self.max_depth = max_depth or settings.PARTIALS_MAX_DEPTH

    def execute(self, raw: Any) -> TreeNode:
        """Parse raw input (string, sequence or mapping) into a tree."""
        directives = normalize_partials(raw)
        if directives is None:
            return DisabledTreeNode()
        return self.parse_directives(directives)

    def parse_directives(self, directives: Iterable[str], depth: int = 1) -> TreeNode:
        nodes: TreeNode = DisabledTreeNode()

        for directive in directives:
            directive = directive.replace(" ", "")
            if not directive:
                continue

            field, _, nested = directive.partition(".")

            if field == WILDCARD:
                return AllTreeNode()

            if field.startswith("{") and field.endswith("}"):
                names = [name for name in field[1:-1].split(",") if name]
                if names:
                    nodes = nodes.merge(PartialTreeNode({name: ExcludedTreeNode() for name in names}))
                continue

            if not field:
                continue

            nodes = nodes.merge(PartialTreeNode({field: self._nested_node(nested, depth, directive)}))

        return nodes

    def _nested_node(self, nested: str, depth: int, directive: str) -> TreeNode:
        if not nested:
            return ExcludedTreeNode()

        if depth >= self.max_depth:
            logger.warning(
                "Partial path exceeds maximum depth, truncating",
                extra={"directive": directive, "max_depth": self.max_depth}
            )
            return ExcludedTreeNode()

        node = self.parse_directives([nested], depth + 1)
        if isinstance(node, DisabledTreeNode):
            return ExcludedTreeNode()
        return node
