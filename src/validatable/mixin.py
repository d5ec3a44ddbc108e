"""
Contains the `Validatable` mixin which gives a class declarative validation rules.
"""
from typing import Any, ClassVar, Mapping, Optional

from . import execution
from .errors import Invalid, Valid
from .rules import RuleSet, RuleSetBuilder
from .types import Accessor


class Validatable:
    """
    Inherit from this class to declare validation rules for the attributes of your class:
    ```
    @dataclass
    class Person(Validatable):
        first_name: Optional[str] = None
        number: str = ""
        age: Any = None

    Person.declare("first_name", presence=True)
    Person.declare("number", format=r"\\d*")
    Person.declare("age", type=int)

    Person(first_name="Harry", number="9", age=20).validate()  # returns VALID
    ```
    Declarations belong to the class on which `declare` got called. Subclasses start with the rules of their
    parent, but rules declared on a subclass never affect the parent.
    All declarations have to be done before the first instance gets validated.
    """

    validation_rules: ClassVar[Optional[RuleSet]] = None

    @classmethod
    def declare(
        cls,
        attribute: str,
        options: Optional[Mapping[str, Any]] = None,
        /,
        *,
        accessor: Optional[Accessor] = None,
        **kwargs: Any,
    ) -> None:
        """
        Declares checks for `attribute`. The checks are given as mapping and/or keyword arguments from check kind
        (`presence`, `format`, `type`) to its argument. Checks with a falsy argument are not registered.
        `accessor` replaces the default attribute lookup for this attribute.
        """
        merged: dict[str, Any] = {**(options or {}), **kwargs}
        builder = RuleSetBuilder(cls.validation_rules)
        builder.declare(attribute, merged, accessor=accessor)
        cls.validation_rules = builder.build()

    def is_valid(self) -> bool:
        """True if all rules of the class pass for this instance"""
        return execution.is_valid(self, type(self).validation_rules)

    def validate(self) -> Valid:
        """
        Returns `VALID` if all rules of the class pass, otherwise raises a ValidationError for the first failing
        rule.
        """
        return execution.validate(self, type(self).validation_rules)

    def first_failure(self) -> Optional[Invalid]:
        """Returns the first failing rule of this instance as `Invalid` or None if there is none"""
        outcome = execution.evaluate(self, type(self).validation_rules)
        if isinstance(outcome, Invalid):
            return outcome
        return None
