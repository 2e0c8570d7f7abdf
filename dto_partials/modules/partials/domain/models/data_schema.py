# 📄 File: dto_partials/modules/partials/domain/models/data_schema.py
# 🧭 Purpose (Layman Explanation):
# Describes the shape of a data class (its fields and which of them hold other data objects)
# and which fields clients may ask to include or exclude, without caring how that is discovered.
#
# 🧪 Purpose (Technical Summary):
# Schema descriptor types and the two read-only lookup capabilities the resolver depends on:
# declared fields per class and allow-lists per class and direction.
#
# 🔗 Dependencies:
# - dataclasses, typing
# - dto_partials.modules.partials.domain.models.partial_trees (PartialDirection)
#
# 🔄 Connected Modules / Calls From:
# - dto_partials.modules.partials.domain.services.allowed_partials_parser
# - dto_partials.modules.partials.application.dto.base_data (schema provider)

from dataclasses import dataclass
from typing import Callable, Optional, Protocol, Sequence, Tuple, Type, runtime_checkable

from dto_partials.modules.partials.domain.models.partial_trees import PartialDirection

WILDCARD = "*"


@dataclass(frozen=True)
class DataField:
    """One declared field of a data class."""
    name: str
    is_nested_data: bool = False
    is_nested_collection: bool = False
    nested_class: Optional[type] = None

    @property
    def is_nested(self) -> bool:
        return (self.is_nested_data or self.is_nested_collection) and self.nested_class is not None


@runtime_checkable
class DescribedDataClass(Protocol):
    """What the resolver needs from a data class."""

    @classmethod
    def declared_fields(cls) -> Tuple[DataField, ...]:
        ...

    @classmethod
    def allowed_request_includes(cls) -> Optional[Sequence[str]]:
        ...

    @classmethod
    def allowed_request_excludes(cls) -> Optional[Sequence[str]]:
        ...

    @classmethod
    def allowed_request_only(cls) -> Optional[Sequence[str]]:
        ...

    @classmethod
    def allowed_request_except(cls) -> Optional[Sequence[str]]:
        ...


AllowListLookup = Callable[[Type, PartialDirection], Optional[Sequence[str]]]
FieldsLookup = Callable[[Type], Sequence[DataField]]

_ALLOW_LIST_METHODS = {
    PartialDirection.INCLUDE: "allowed_request_includes",
    PartialDirection.EXCLUDE: "allowed_request_excludes",
    PartialDirection.ONLY: "allowed_request_only",
    PartialDirection.EXCEPT: "allowed_request_except",
}


def class_allow_list(data_class: Type, direction: PartialDirection) -> Optional[Sequence[str]]:
    """
    Ask a data class for its allow-list in one direction.

    Returns None for "unrestricted", an empty sequence for "nothing allowed".
    Classes without the hook are unrestricted.
    """
    method = getattr(data_class, _ALLOW_LIST_METHODS[direction], None)
    if method is None:
        return None
    return method()


def class_declared_fields(data_class: Type) -> Sequence[DataField]:
    """Ask a data class for its declared fields."""
    method = getattr(data_class, "declared_fields", None)
    if method is None:
        return ()
    return method()
