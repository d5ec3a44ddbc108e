"""
Contains the built-in check functions and the closed table which maps every check kind onto its function.
Every check function takes the current value of an attribute and the argument of the rule and returns
whether the value passes.
"""
import re
from enum import Enum
from typing import Any, Mapping, get_origin

import typeguard

from .types import CheckFunction, Pattern


class CheckKind(str, Enum):
    """
    The kinds of checks a rule can declare. The value is the name used in declarations and error messages.
    """

    PRESENCE = "presence"
    FORMAT = "format"
    TYPE = "type"

    def __str__(self) -> str:
        return self.value


def check_presence(value: Any, _: Any = None) -> bool:
    """
    A value is absent if it is `None` or an empty string. Everything else, including `0`, `False` and empty
    collections, is present.
    """
    if value is None:
        return False
    return not (isinstance(value, str) and value == "")


def check_format(value: Any, pattern: Pattern) -> bool:
    """
    The whole string form of the value has to match the pattern, i.e. the match is anchored at both ends.
    `None` never matches. Bytes are matched as they are and only against bytes patterns.
    """
    if value is None:
        return False
    compiled = re.compile(pattern)
    subject = bytes(value) if isinstance(value, (bytes, bytearray)) else str(value)
    if isinstance(compiled.pattern, str) != isinstance(subject, str):
        return False
    return compiled.fullmatch(subject) is not None


def _is_plain_class_descriptor(descriptor: Any) -> bool:
    if isinstance(descriptor, tuple):
        return len(descriptor) > 0 and all(_is_plain_class_descriptor(item) for item in descriptor)
    return isinstance(descriptor, type) and get_origin(descriptor) is None


def check_type(value: Any, descriptor: Any) -> bool:
    """
    Classes (and tuples of classes) are matched polymorphically, so instances of subclasses pass as well.
    Any other descriptor, e.g. `Optional[int]` or `list[str]`, is checked using typeguard. Every item of a
    collection is checked, not only the first one.
    """
    if _is_plain_class_descriptor(descriptor):
        return isinstance(value, descriptor)
    try:
        typeguard.check_type(
            value, descriptor, collection_check_strategy=typeguard.CollectionCheckStrategy.ALL_ITEMS
        )
    except typeguard.TypeCheckError:
        return False
    return True


CHECKS: Mapping[CheckKind, CheckFunction] = {
    CheckKind.PRESENCE: check_presence,
    CheckKind.FORMAT: check_format,
    CheckKind.TYPE: check_type,
}
