"""Tests for resolving request partials against allow-lists."""

import pytest

from dto_partials.modules.partials.domain.models.partial_trees import PartialDirection, PartialTrees
from dto_partials.modules.partials.domain.models.tree_nodes import (
    AllTreeNode,
    DisabledTreeNode,
    ExcludedTreeNode,
    PartialTreeNode,
)
from dto_partials.modules.partials.domain.services.partials_tree_resolver import (
    PartialsTreeFromRequestResolver,
    request_param,
)
from dto_partials.modules.partials.presentation.api.request_partials import MappingRequestPartials
from tests.fakes import (
    ArtistData,
    AuthorData,
    CategoryData,
    LazyData,
    NestingData,
    UnrestrictedMultiLazyData,
    WildcardMultiLazyData,
    nesting_data,
    node_tree,
)


def include_lookup(lazy_allowed, data_allowed):
    def lookup(data_class, direction):
        if direction is not PartialDirection.INCLUDE:
            return None
        if data_class is LazyData:
            return lazy_allowed
        if data_class is NestingData:
            return data_allowed
        return None
    return lookup


def request_with(settings, **params):
    return MappingRequestPartials(params, settings)


REDUCTION_CASES = {
    "disallowed property inclusion": (
        [], [], "property",
        ExcludedTreeNode(),
    ),
    "allowed property inclusion": (
        [], ["property"], "property",
        PartialTreeNode({"property": ExcludedTreeNode()}),
    ),
    "allowed data property inclusion without nesting": (
        [], ["nested"], "nested.name",
        PartialTreeNode({"nested": ExcludedTreeNode()}),
    ),
    "allowed data property inclusion with nesting": (
        ["name"], ["nested"], "nested.name",
        PartialTreeNode({"nested": PartialTreeNode({"name": ExcludedTreeNode()})}),
    ),
    "allowed data collection property inclusion without nesting": (
        [], ["collection"], "collection.name",
        PartialTreeNode({"collection": ExcludedTreeNode()}),
    ),
    "allowed data collection property inclusion with nesting": (
        ["name"], ["collection"], "collection.name",
        PartialTreeNode({"collection": PartialTreeNode({"name": ExcludedTreeNode()})}),
    ),
    "allowed nested data property inclusion without allow-list on nested": (
        None, ["nested"], "nested.name",
        PartialTreeNode({"nested": PartialTreeNode({"name": ExcludedTreeNode()})}),
    ),
    "allowed all nested data property inclusion without allow-list on nested": (
        None, ["nested"], "nested.*",
        PartialTreeNode({"nested": AllTreeNode()}),
    ),
    "disallowed all nested data property inclusion": (
        [], ["nested"], "nested.*",
        PartialTreeNode({"nested": ExcludedTreeNode()}),
    ),
    "wildcard narrowed to nested allow-list": (
        ["name"], ["nested"], "nested.*",
        PartialTreeNode({"nested": PartialTreeNode({"name": ExcludedTreeNode()})}),
    ),
    "multi property inclusion": (
        None, ["nested", "property"], "nested.*,property",
        PartialTreeNode({"property": ExcludedTreeNode(), "nested": AllTreeNode()}),
    ),
    "disallowed field is dropped": (
        None, ["property"], "nested.name",
        PartialTreeNode(),
    ),
    "without property inclusion": (
        None, ["nested", "property"], None,
        DisabledTreeNode(),
    ),
}


@pytest.mark.parametrize(
    "lazy_allowed, data_allowed, requested, expected",
    list(REDUCTION_CASES.values()),
    ids=list(REDUCTION_CASES.keys()),
)
def test_reduces_tree_based_upon_allowed_includes(settings, lazy_allowed, data_allowed, requested, expected):
    resolver = PartialsTreeFromRequestResolver(include_lookup(lazy_allowed, data_allowed), settings=settings)
    params = {} if requested is None else {"include": requested}

    trees = resolver.execute(nesting_data(), request_with(settings, **params))

    assert trees.included == expected


class TestDirections:
    """Every direction is resolved independently."""

    def test_missing_parameters_are_disabled(self, settings):
        resolver = PartialsTreeFromRequestResolver(settings=settings)
        trees = resolver.execute(nesting_data(), request_with(settings))
        assert trees == PartialTrees()

    def test_exclude_resolved_symmetrically(self, settings):
        resolver = PartialsTreeFromRequestResolver(settings=settings)
        trees = resolver.execute(nesting_data(), request_with(settings, exclude="nested.name"))

        assert trees.included == DisabledTreeNode()
        assert trees.excluded == PartialTreeNode({
            "nested": PartialTreeNode({"name": ExcludedTreeNode()}),
        })

    def test_only_and_except(self, settings):
        resolver = PartialsTreeFromRequestResolver(settings=settings)
        params = {"only": "property,nested", "except": ["collection"]}
        trees = resolver.execute(nesting_data(), request_with(settings, **params))

        assert trees.only == PartialTreeNode({"property": ExcludedTreeNode(), "nested": ExcludedTreeNode()})
        assert trees.excepted == PartialTreeNode({"collection": ExcludedTreeNode()})

    def test_default_include_allow_list_is_empty(self, settings):
        resolver = PartialsTreeFromRequestResolver(settings=settings)
        trees = resolver.execute(nesting_data(), request_with(settings, include="property"))
        assert trees.included == ExcludedTreeNode()

    def test_empty_parameter_is_disabled(self, settings):
        resolver = PartialsTreeFromRequestResolver(settings=settings)
        trees = resolver.execute(nesting_data(), request_with(settings, include=""))
        assert trees.included == DisabledTreeNode()


class TestClassAllowLists:
    """Allow-lists declared on the data classes themselves."""

    def test_wildcard_allow_list(self, settings):
        resolver = PartialsTreeFromRequestResolver(settings=settings)
        trees = resolver.execute(WildcardMultiLazyData.lazy(), request_with(settings, include=["artist", "name"]))
        assert trees.included == PartialTreeNode({"artist": ExcludedTreeNode(), "name": ExcludedTreeNode()})

    def test_manual_includes_are_merged(self, settings):
        resolver = PartialsTreeFromRequestResolver(settings=settings)
        data = UnrestrictedMultiLazyData.lazy().include("name")
        trees = resolver.execute(data, request_with(settings, include="artist"))
        assert trees.included == PartialTreeNode({"artist": ExcludedTreeNode(), "name": ExcludedTreeNode()})

    def test_collection_uses_item_class(self, settings):
        resolver = PartialsTreeFromRequestResolver(settings=settings)
        collection = ArtistData.collect([{"name": "Rick Astley"}])
        trees = resolver.execute(collection, request_with(settings, include="songs,name"))
        assert trees.included == PartialTreeNode({"songs": ExcludedTreeNode()})

    def test_cyclic_graph_terminates(self, settings):
        resolver = PartialsTreeFromRequestResolver(settings=settings)
        data = CategoryData(name="root")
        trees = resolver.execute(data, request_with(settings, include="children.children.parent.*"))
        assert trees.included == PartialTreeNode({
            "children": PartialTreeNode({
                "children": PartialTreeNode({
                    "parent": AllTreeNode(),
                }),
            }),
        })


def test_request_without_getters_has_no_params():
    assert request_param(object(), PartialDirection.INCLUDE) is None


class TestWildcardRequests:
    """``*`` on classes without an allow-list for the direction."""

    @pytest.mark.parametrize("direction, param", [
        (PartialDirection.EXCLUDE, "exclude"),
        (PartialDirection.EXCEPT, "except"),
    ])
    def test_plain_fields_become_leaves_next_to_restricted_nested_class(self, settings, direction, param):
        resolver = PartialsTreeFromRequestResolver(settings=settings)
        trees = resolver.execute(AuthorData.default(), request_with(settings, **{param: "*"}))

        assert trees.get(direction) == PartialTreeNode({
            "title": ExcludedTreeNode(),
            "bio": ExcludedTreeNode(),
            "contact": ExcludedTreeNode(),
        })

    def test_include_wildcard_through_unrestricted_self_reference(self, settings):
        resolver = PartialsTreeFromRequestResolver(settings=settings)
        trees = resolver.execute(node_tree(), request_with(settings, include="*"))
        assert trees.included == AllTreeNode()

    def test_include_wildcard_under_a_path(self, settings):
        resolver = PartialsTreeFromRequestResolver(settings=settings)
        trees = resolver.execute(node_tree(), request_with(settings, include="children.*"))
        assert trees.included == PartialTreeNode({"children": AllTreeNode()})
