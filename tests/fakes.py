"""Data classes shared by the test suite."""

from typing import Annotated, List, Optional, Union

from dto_partials import Data, DataCollection, DataCollectionOf, Lazy


class SimpleData(Data):
    string: str


class LazyData(Data):
    name: Union[Lazy, str]

    @classmethod
    def from_str(cls, name: str) -> "LazyData":
        return cls(name=Lazy.create(lambda: name))


class NestingData(Data):
    property: str
    nested: LazyData
    collection: Annotated[DataCollection, DataCollectionOf(LazyData)]


class MultiLazyData(Data):
    artist: Union[Lazy, str]
    name: Union[Lazy, str]
    year: Union[Lazy, int]

    @classmethod
    def lazy(cls) -> "MultiLazyData":
        return cls(
            artist=Lazy.create(lambda: "Rick Astley"),
            name=Lazy.create(lambda: "Never gonna give you up"),
            year=Lazy.create(lambda: 1987),
        )


class UnrestrictedMultiLazyData(MultiLazyData):
    @classmethod
    def allowed_request_includes(cls):
        return None


class WildcardMultiLazyData(MultiLazyData):
    @classmethod
    def allowed_request_includes(cls):
        return ["*"]


class ChildData(Data):
    id: int
    amount: int


class ParentData(Data):
    id: int
    amount: int
    any_string: str
    child: ChildData


class CategoryData(Data):
    name: str
    parent: Optional["CategoryData"] = None
    children: List["CategoryData"] = []

    @classmethod
    def allowed_request_includes(cls):
        return None


CategoryData.model_rebuild()


class ArtistData(Data):
    name: str
    songs: Union[Lazy, List["SongData"]] = []

    @classmethod
    def allowed_request_includes(cls):
        return ["songs"]


class SongData(Data):
    title: str
    artist: Union[Lazy, ArtistData, None] = None

    @classmethod
    def allowed_request_includes(cls):
        return ["artist"]


ArtistData.model_rebuild()


def nesting_data() -> NestingData:
    return NestingData(
        property="Hello",
        nested=LazyData.from_("Hello"),
        collection=LazyData.collect(["Hello", "World"]),
    )


class ContactData(Data):
    id: int

    @classmethod
    def allowed_request_excludes(cls):
        return []

    @classmethod
    def allowed_request_except(cls):
        return []


class AuthorData(Data):
    title: str
    bio: Union[Lazy, str]
    contact: ContactData

    @classmethod
    def default(cls) -> "AuthorData":
        return cls(
            title="Biography",
            bio=Lazy.create(lambda: "Born in Newton-le-Willows").default_included(),
            contact=ContactData(id=1),
        )


class NodeData(Data):
    label: Union[Lazy, str]
    children: List["NodeData"] = []

    @classmethod
    def allowed_request_includes(cls):
        return None


NodeData.model_rebuild()


def node_tree() -> NodeData:
    leaf = NodeData(label=Lazy.create(lambda: "leaf"))
    return NodeData(label=Lazy.create(lambda: "root"), children=[leaf])
