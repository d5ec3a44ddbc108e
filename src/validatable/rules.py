"""
Contains the rule registry: the immutable RuleSet of a type and the builder used to declare rules at type definition.
"""
import logging
import re
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Optional

from frozendict import frozendict

from .checks import CheckKind
from .types import Accessor
from .utils.accessors import attribute_accessor

logger = logging.getLogger(__name__)

_KNOWN_KINDS = frozenset(kind.value for kind in CheckKind)


@dataclass(frozen=True)
class Rule:
    """
    One declared check for one attribute. `kind` is kept as declared, so a rule with an unknown kind can be
    registered and will only fail once it gets evaluated.
    """

    attribute: str
    kind: str
    argument: Any

    def __str__(self):
        return f"Rule({self.attribute}, {self.kind}={self.argument!r})"


class RuleSet:
    """
    The ordered and immutable collection of rules of a type together with the accessors used to read the
    attribute values. The order of the rules is the order of declaration.
    """

    __slots__ = ("_rules", "_accessors")

    def __init__(self, rules: tuple[Rule, ...] = (), accessors: Optional[Mapping[str, Accessor]] = None):
        self._rules: tuple[Rule, ...] = tuple(rules)
        self._accessors: frozendict[str, Accessor] = frozendict(accessors or {})

    @property
    def rules(self) -> tuple[Rule, ...]:
        """All rules in order of declaration"""
        return self._rules

    @property
    def accessors(self) -> frozendict[str, Accessor]:
        """Maps attribute names onto the accessors declared for them"""
        return self._accessors

    def accessor_for(self, attribute: str) -> Accessor:
        """
        Returns the accessor declared for `attribute` or, if there is none, one that reads the attribute by name.
        """
        accessor = self._accessors.get(attribute)
        if accessor is None:
            return attribute_accessor(attribute)
        return accessor

    @property
    def attributes(self) -> tuple[str, ...]:
        """The names of all attributes with at least one rule, in order of their first declaration"""
        return tuple(dict.fromkeys(rule.attribute for rule in self._rules))

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __eq__(self, other):
        return isinstance(other, RuleSet) and self._rules == other._rules and self._accessors == other._accessors

    def __hash__(self):
        return hash(self._rules) + hash(self._accessors)

    def __repr__(self):
        return f"RuleSet({', '.join(str(rule) for rule in self._rules)})"


class RuleSetBuilder:
    """
    Accumulates declarations and builds a RuleSet from them. A builder started from an existing RuleSet extends a
    copy of it, the RuleSet itself is never changed.
    """

    def __init__(self, base: Optional[RuleSet] = None):
        self._rules: list[Rule] = list(base.rules) if base is not None else []
        self._accessors: dict[str, Accessor] = dict(base.accessors) if base is not None else {}

    def declare(
        self, attribute: str, options: Mapping[str, Any], accessor: Optional[Accessor] = None
    ) -> "RuleSetBuilder":
        """
        Appends one rule for every option with a truthy argument, in the order of `options`. Options with a falsy
        argument (e.g. `presence=False`) are skipped. Unknown kinds are registered anyway and fail on evaluation.
        Returns the builder itself to allow chaining.
        """
        if not isinstance(attribute, str) or attribute == "":
            raise TypeError(f"The attribute to validate must be a non-empty string, got {attribute!r}")
        if not isinstance(options, Mapping):
            raise TypeError(f"{attribute}: options must be a mapping of check kinds, got {type(options).__name__}")
        if accessor is not None:
            self._accessors[attribute] = accessor
        for kind, argument in options.items():
            if not argument:
                logger.debug("Skipped %s check of '%s' (argument %r)", kind, attribute, argument)
                continue
            kind_name = str(kind)
            if kind_name not in _KNOWN_KINDS:
                logger.warning("Registered rule for '%s' with unknown check kind '%s'", attribute, kind_name)
            elif kind_name == CheckKind.FORMAT.value and isinstance(argument, (str, bytes)):
                argument = re.compile(argument)
            rule = Rule(attribute=attribute, kind=kind_name, argument=argument)
            self._rules.append(rule)
            logger.debug("Registered %s", rule)
        return self

    def build(self) -> RuleSet:
        """Returns the RuleSet of all declarations so far"""
        return RuleSet(tuple(self._rules), self._accessors)
