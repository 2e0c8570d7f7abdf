# 📄 File: dto_partials/modules/partials/domain/models/lazy.py
# 🧭 Purpose (Layman Explanation):
# A "lazy" value is only computed when it really ends up in a response. Each lazy value also
# says whether it shows up by default or only when a client asks for it.
#
# 🧪 Purpose (Technical Summary):
# Lazy value wrappers tagged with a default visibility, used by the transformer to decide
# field visibility together with the include/exclude decision trees.
#
# 🔗 Dependencies:
# - enum, typing
#
# 🔄 Connected Modules / Calls From:
# - dto_partials.modules.partials.application.dto.base_data (field values)
# - dto_partials.modules.partials.application.transformers.data_transformer

"""
Lazy Values

Visibility kinds:
- EAGER: plain value, always part of the output (only/except aside)
- INCLUDED_BY_DEFAULT: visible unless excluded
- EXCLUDED_BY_DEFAULT: hidden unless included, a wildcard include is enough
- ONLY_WHEN_REQUESTED: hidden unless included by name, wildcards do not count
"""

from enum import Enum
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")

_UNRESOLVED = object()


class Visibility(str, Enum):
    """Default visibility of a field value."""
    EAGER = "eager"
    INCLUDED_BY_DEFAULT = "included_by_default"
    EXCLUDED_BY_DEFAULT = "excluded_by_default"
    ONLY_WHEN_REQUESTED = "only_when_requested"


class Lazy(Generic[T]):
    """A value computed on demand, hidden unless included."""

    def __init__(self, resolver: Callable[[], T], visibility: Visibility = Visibility.EXCLUDED_BY_DEFAULT):
        self._resolver = resolver
        self._visibility = visibility
        self._value: Any = _UNRESOLVED

    @classmethod
    def create(cls, resolver: Callable[[], T]) -> "Lazy[T]":
        return cls(resolver)

    @classmethod
    def when(cls, condition: Callable[[], bool], resolver: Callable[[], T]) -> "ConditionalLazy[T]":
        return ConditionalLazy(condition, resolver)

    @property
    def visibility(self) -> Visibility:
        return self._visibility

    def default_included(self, included: bool = True) -> "Lazy[T]":
        self._visibility = Visibility.INCLUDED_BY_DEFAULT if included else Visibility.EXCLUDED_BY_DEFAULT
        return self

    def only_when_requested(self) -> "Lazy[T]":
        self._visibility = Visibility.ONLY_WHEN_REQUESTED
        return self

    def resolve(self) -> T:
        """Evaluate the value once and cache it."""
        if self._value is _UNRESOLVED:
            self._value = self._resolver()
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._visibility.value})"


class ConditionalLazy(Lazy[T]):
    """A lazy value whose visibility only depends on its own condition."""

    def __init__(self, condition: Callable[[], bool], resolver: Callable[[], T]):
        super().__init__(resolver)
        self._condition = condition

    def should_be_included(self) -> bool:
        return bool(self._condition())


def visibility_of(value: Any) -> Visibility:
    """Default visibility tag of any field value."""
    if isinstance(value, Lazy):
        return value.visibility
    return Visibility.EAGER
