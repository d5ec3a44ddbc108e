"""
Contains the errors raised by the validation mixin and the outcome types of a validation.
"""
from dataclasses import dataclass
from typing import Final, TypeAlias


@dataclass(frozen=True)
class Invalid:
    """
    Describes the first rule which failed for an instance.
    """

    attribute: str
    kind: str

    @property
    def message(self) -> str:
        """The human-readable message of this failure"""
        return f"{self.attribute} failed {self.kind} validation"


class Valid:
    """
    The outcome of a validation in which no rule failed. There is only one instance: `VALID`.
    """

    _instance: "Valid | None" = None

    def __new__(cls) -> "Valid":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "VALID"


VALID: Final[Valid] = Valid()
ValidationOutcome: TypeAlias = Valid | Invalid


class ValidationError(Exception):
    """
    Raised by `validate` if a rule fails. Only the first failing rule of an instance is reported.
    """

    def __init__(self, attribute: str, kind: str):
        self.attribute = attribute
        self.kind = kind
        self.message = Invalid(attribute, kind).message
        super().__init__(self.message)

    @classmethod
    def from_outcome(cls, outcome: Invalid) -> "ValidationError":
        """Creates the error describing the given failure"""
        return cls(outcome.attribute, outcome.kind)

    @property
    def outcome(self) -> Invalid:
        """The failure this error was raised for"""
        return Invalid(self.attribute, self.kind)


class UnknownCheckKind(LookupError):
    """
    Raised during evaluation if a rule names a check kind for which no check function exists.
    This is a configuration defect of the validated type and never a statement about the data.
    """

    def __init__(self, attribute: str, kind: str):
        self.attribute = attribute
        self.kind = kind
        super().__init__(f"{attribute}: unknown check kind '{kind}'")
