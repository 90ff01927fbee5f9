"""
Theme attributes that are either constants or functions of an entity.

A theme value such as the node size can be a plain number shared by every
node, or a function computing it per node. Both forms are wrapped in a small
closed union so call sites only ever call ``resolve``.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Constant(Generic[T]):
    """An attribute with the same value for every entity."""

    value: T

    def resolve(self, entity: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Derived(Generic[T]):
    """An attribute computed from the entity (a node or an edge)."""

    fn: Callable[[Any], T]

    def resolve(self, entity: Any) -> T:
        return self.fn(entity)


Attribute = Union[Constant[T], Derived[T]]


def as_attribute(value: Any) -> Attribute:
    """
    Wrap a raw theme value into an attribute.

    Attributes are returned unchanged, callables become Derived and
    anything else becomes a Constant.
    """
    if isinstance(value, (Constant, Derived)):
        return value
    if callable(value):
        return Derived(value)
    return Constant(value)


def resolve_attribute(value: Any, entity: Any) -> Any:
    """Resolve a constant, a callable or an attribute against an entity."""
    return as_attribute(value).resolve(entity)
