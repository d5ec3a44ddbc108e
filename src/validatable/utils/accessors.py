"""
Contains the default way of reading the current value of an attribute from an instance.
"""
from typing import Any

from ..types import Accessor


def read_attribute(instance: Any, attribute: str) -> Any:
    """
    Returns the current value of `attribute` on `instance`. Properties are evaluated like plain attributes.
    If the attribute does not exist, an AttributeError will be raised.
    """
    try:
        return getattr(instance, attribute)
    except AttributeError as error:
        raise AttributeError(f"{attribute}: Not found") from error


class _AttributeAccessor:
    """
    Reads a single attribute by name. Unlike a lambda it compares equal to accessors of the same attribute,
    which keeps RuleSets comparable.
    """

    __slots__ = ("attribute",)

    def __init__(self, attribute: str):
        self.attribute = attribute

    def __call__(self, instance: Any) -> Any:
        return read_attribute(instance, self.attribute)

    def __eq__(self, other):
        return isinstance(other, _AttributeAccessor) and self.attribute == other.attribute

    def __hash__(self):
        return hash(self.attribute)

    def __repr__(self):
        return f"attribute_accessor({self.attribute!r})"


def attribute_accessor(attribute: str) -> Accessor:
    """
    Returns the accessor used for attributes for which no explicit accessor got declared.
    """
    return _AttributeAccessor(attribute)
