"""
Contains the types used in the validation mixin
"""
import re
from typing import TYPE_CHECKING, Any, Callable, Protocol, TypeAlias, TypeVar

if TYPE_CHECKING:
    from .mixin import Validatable


class Accessor(Protocol):
    """
    A protocol for functions which return the current value of one attribute of an instance.
    """

    def __call__(self, instance: Any) -> Any:
        ...


InstanceT = TypeVar("InstanceT", bound="Validatable")
CheckFunction: TypeAlias = Callable[[Any, Any], bool]
Pattern: TypeAlias = str | bytes | re.Pattern
