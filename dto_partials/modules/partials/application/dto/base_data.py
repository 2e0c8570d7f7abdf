# 📄 File: dto_partials/modules/partials/application/dto/base_data.py
# 🧭 Purpose (Layman Explanation):
# The base class every response package is built from. It knows its own fields, which of them
# hold other packages, which optional fields clients may ask for, and how to turn itself into JSON.
#
# 🧪 Purpose (Technical Summary):
# Pydantic-based data objects and collections providing the schema description and allow-list
# capabilities consumed by the partials resolver, manual partials, and transformation entry points.
#
# 🔗 Dependencies:
# - pydantic for model declaration and validation
# - dto_partials.modules.partials.domain (trees, lazy values, schema descriptors, parser)
# - dto_partials.shared.core.exceptions (configuration and creation errors)
#
# 🔄 Connected Modules / Calls From:
# - dto_partials.modules.partials.application.transformers.data_transformer
# - dto_partials.modules.partials.presentation.api.responses
# - Application code declaring response data classes

"""
Data Objects

Declaring a data class::

    class SongData(Data):
        title: str
        artist: Union[Lazy, ArtistData]
        tracks: List[TrackData] = []

        @classmethod
        def allowed_request_includes(cls):
            return ["artist"]

Nested data is detected from annotations: a Data subclass, a list/tuple of them,
``Optional``/``Union`` members (including ``Lazy``), or
``Annotated[DataCollection, DataCollectionOf(TrackData)]``.

Allow-list defaults: lazy includes must be allowed explicitly (``[]``), every other
direction is unrestricted (``None``).
"""

import collections.abc
import sys
import types
from dataclasses import dataclass
from functools import lru_cache
from typing import (
    Annotated,
    Any,
    Dict,
    ForwardRef,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    Type,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from pydantic import BaseModel, ConfigDict, PrivateAttr

from dto_partials.modules.partials.domain.models.data_schema import DataField
from dto_partials.modules.partials.domain.models.lazy import Lazy
from dto_partials.modules.partials.domain.models.partial_trees import PartialDirection, PartialTrees
from dto_partials.modules.partials.domain.services.partials_parser import PartialsParser
from dto_partials.shared.core.exceptions import CannotCreateDataError, DataConfigurationError

_SEQUENCE_ORIGINS = (
    list,
    tuple,
    set,
    frozenset,
    collections.abc.Sequence,
    collections.abc.Iterable,
    collections.abc.Collection,
)


@dataclass(frozen=True)
class DataCollectionOf:
    """Annotation metadata naming the item class of a DataCollection field."""
    data_class: type


class PartialsMixin:
    """
    Manual include/exclude/only/except handling shared by data objects and collections.

    Subclasses store their trees in ``_partial_trees``.
    """

    __slots__ = ()

    @property
    def partial_trees(self) -> PartialTrees:
        return self._partial_trees

    def include(self, *paths: str):
        return self._add_partials(PartialDirection.INCLUDE, paths)

    def exclude(self, *paths: str):
        return self._add_partials(PartialDirection.EXCLUDE, paths)

    def only(self, *paths: str):
        return self._add_partials(PartialDirection.ONLY, paths)

    def except_(self, *paths: str):
        return self._add_partials(PartialDirection.EXCEPT, paths)

    def _add_partials(self, direction: PartialDirection, paths: Sequence[str]):
        tree = PartialsParser().execute(list(paths))
        trees = self._partial_trees
        self._partial_trees = trees.with_tree(direction, trees.get(direction).merge(tree))
        return self


class Data(PartialsMixin, BaseModel):
    """
    Base data object.

    Subclasses declare fields like any pydantic model. Lazy values are allowed for
    every field, they are resolved only when the field ends up in the output.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    _partial_trees: PartialTrees = PrivateAttr(default_factory=PartialTrees)

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        for name, field_info in cls.model_fields.items():
            for item in field_info.metadata:
                if isinstance(item, DataCollectionOf) and not _is_data_class(item.data_class):
                    raise DataConfigurationError(
                        f"DataCollectionOf on {cls.__name__}.{name} must name a Data subclass",
                        data_class=cls.__name__,
                        field_name=name,
                    )

    # =========================================================================
    # SCHEMA AND ALLOW-LISTS
    # =========================================================================

    @classmethod
    def declared_fields(cls) -> Tuple[DataField, ...]:
        """Declared fields of this class, in declaration order."""
        return _declared_fields(cls)

    @classmethod
    def allowed_request_includes(cls) -> Optional[List[str]]:
        return []

    @classmethod
    def allowed_request_excludes(cls) -> Optional[List[str]]:
        return None

    @classmethod
    def allowed_request_only(cls) -> Optional[List[str]]:
        return None

    @classmethod
    def allowed_request_except(cls) -> Optional[List[str]]:
        return None

    # =========================================================================
    # CREATION
    # =========================================================================

    @classmethod
    def from_(cls, payload: Any) -> "Data":
        """
        Create a data object from a payload.

        Dispatches on the payload type: an instance is returned as is, a
        ``from_<type name>`` classmethod handles custom payloads (``from_str``,
        ``from_int``...), mappings and other models are validated.

        Raises:
            CannotCreateDataError: If no creation method accepts the payload
        """
        if isinstance(payload, cls):
            return payload

        creator = getattr(cls, f"from_{type(payload).__name__.lower()}", None)
        if creator is not None:
            return creator(payload)

        if isinstance(payload, collections.abc.Mapping):
            return cls.model_validate(dict(payload))

        if isinstance(payload, BaseModel):
            return cls.model_validate(payload.model_dump())

        raise CannotCreateDataError(cls.__name__, type(payload).__name__)

    @classmethod
    def collect(cls, items: Iterable[Any]) -> "DataCollection":
        return DataCollection(cls, items)

    # =========================================================================
    # OUTPUT
    # =========================================================================

    def transform(self, trees: Optional[PartialTrees] = None) -> Dict[str, Any]:
        """Transform into a JSON-ready dictionary applying partial trees."""
        from dto_partials.modules.partials.application.transformers.data_transformer import DataTransformer

        return DataTransformer().transform(self, trees)

    def to_response(self, request: Any, status_code: int = 200):
        """Resolve request partials and build a JSON response."""
        from dto_partials.modules.partials.presentation.api.responses import data_response

        return data_response(self, request, status_code=status_code)


class DataCollection(PartialsMixin):
    """A list of data objects of one class sharing partial trees."""

    def __init__(self, data_class: Type[Data], items: Iterable[Any] = ()):
        if not _is_data_class(data_class):
            raise DataConfigurationError(
                "DataCollection needs a Data subclass",
                data_class=getattr(data_class, "__name__", repr(data_class)),
            )
        self.data_class = data_class
        self.items: List[Data] = [data_class.from_(item) for item in items]
        self._partial_trees = PartialTrees()

    def transform(self, trees: Optional[PartialTrees] = None) -> List[Dict[str, Any]]:
        from dto_partials.modules.partials.application.transformers.data_transformer import DataTransformer

        return DataTransformer().transform(self, trees)

    def to_response(self, request: Any, status_code: int = 200):
        from dto_partials.modules.partials.presentation.api.responses import data_response

        return data_response(self, request, status_code=status_code)

    def __iter__(self) -> Iterator[Data]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Data:
        return self.items[index]

    def __repr__(self) -> str:
        return f"DataCollection({self.data_class.__name__}, {len(self.items)} items)"


# =============================================================================
# SCHEMA DISCOVERY
# =============================================================================

def _is_data_class(value: Any) -> bool:
    return isinstance(value, type) and issubclass(value, Data)


@lru_cache(maxsize=None)
def _declared_fields(data_class: Type[Data]) -> Tuple[DataField, ...]:
    fields = []
    for name, field_info in data_class.model_fields.items():
        annotation = _resolve_annotation(data_class, name, field_info.annotation)
        fields.append(_describe_field(data_class, name, annotation, field_info.metadata))
    return tuple(fields)


def _describe_field(owner: Type[Data], name: str, annotation: Any, metadata: Sequence[Any]) -> DataField:
    for item in metadata:
        if isinstance(item, DataCollectionOf):
            return DataField(name, is_nested_collection=True, nested_class=item.data_class)

    nested_class, is_collection = _nested_from_annotation(owner, name, annotation)
    if nested_class is None:
        return DataField(name)
    if is_collection:
        return DataField(name, is_nested_collection=True, nested_class=nested_class)
    return DataField(name, is_nested_data=True, nested_class=nested_class)


def _nested_from_annotation(owner: Type[Data], name: str, annotation: Any) -> Tuple[Optional[type], bool]:
    if isinstance(annotation, (str, ForwardRef)):
        raise DataConfigurationError(
            f"Cannot resolve the type of {owner.__name__}.{name}, call model_rebuild() once it is defined",
            data_class=owner.__name__,
            field_name=name,
        )

    if _is_data_class(annotation):
        return annotation, False

    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is Annotated:
        for item in args[1:]:
            if isinstance(item, DataCollectionOf):
                return item.data_class, True
        return _nested_from_annotation(owner, name, args[0])

    if origin is Union or origin is types.UnionType:
        for arg in args:
            nested_class, is_collection = _nested_from_annotation(owner, name, arg)
            if nested_class is not None:
                return nested_class, is_collection
        return None, False

    if origin is Lazy and args:
        return _nested_from_annotation(owner, name, args[0])

    if origin in _SEQUENCE_ORIGINS and args:
        nested_class, _ = _nested_from_annotation(owner, name, args[0])
        if nested_class is not None:
            return nested_class, True

    return None, False


def _has_forward_ref(annotation: Any) -> bool:
    if isinstance(annotation, (str, ForwardRef)):
        return True
    return any(_has_forward_ref(arg) for arg in get_args(annotation))


def _resolve_annotation(owner: Type[Data], name: str, annotation: Any) -> Any:
    """Evaluate forward references left in a field annotation against the owner's module."""
    if not _has_forward_ref(annotation):
        return annotation

    module = sys.modules.get(owner.__module__)
    namespace = dict(vars(module)) if module is not None else {}
    namespace.setdefault(owner.__name__, owner)

    raw = owner.__dict__.get("__annotations__", {}).get(name, annotation)
    holder = type("AnnotationHolder", (), {"__annotations__": {name: raw}})
    try:
        return get_type_hints(holder, globalns=namespace, include_extras=True)[name]
    except NameError as e:
        raise DataConfigurationError(
            f"Cannot resolve the type of {owner.__name__}.{name}: {e}",
            data_class=owner.__name__,
            field_name=name,
        ) from e
