"""
Contains functionality to validate many instances at once and analyze the result
"""
import itertools
import logging
from typing import Generic, Iterable, Optional

from .errors import Invalid, ValidationError
from .types import InstanceT

logger = logging.getLogger(__name__)


def _extract_error_key(validation_error: ValidationError) -> tuple[str, str]:
    return validation_error.attribute, validation_error.kind


class ValidationReport(Generic[InstanceT]):
    """
    The function `validate_all` will return an instance of this class. Every instance got evaluated exactly once,
    so each failed instance contributes exactly one ValidationError (the one of its first failing rule).
    Note that the properties are calculated only if you use them.
    """

    def __init__(self, outcomes: list[tuple[InstanceT, Optional[Invalid]]]):
        self._outcomes = outcomes

        self._succeeded: Optional[list[InstanceT]] = None
        self._failures: Optional[list[tuple[InstanceT, ValidationError]]] = None
        self._errors: Optional[list[ValidationError]] = None
        self._num_errors_per_kind: Optional[dict[str, int]] = None
        self._num_errors_per_attribute: Optional[dict[str, int]] = None

    @classmethod
    def from_instances(cls, instances: Iterable[InstanceT]) -> "ValidationReport[InstanceT]":
        """Evaluates all instances. UnknownCheckKind errors are not caught."""
        report = cls([(instance, instance.first_failure()) for instance in instances])
        logger.debug("Validated %d instance(s), %d failed", report.total, report.num_fails)
        return report

    def _determine_succeeds(self):
        """Splits the instances into succeeded ones and failed ones"""
        self._succeeded = []
        self._failures = []
        for instance, failure in self._outcomes:
            if failure is None:
                self._succeeded.append(instance)
            else:
                self._failures.append((instance, ValidationError.from_outcome(failure)))

    @property
    def succeeded(self) -> list[InstanceT]:
        """List of instances which passed all their rules"""
        if self._succeeded is None:
            self._determine_succeeds()
            assert self._succeeded is not None
        return self._succeeded

    @property
    def failures(self) -> list[tuple[InstanceT, ValidationError]]:
        """Pairs of failed instances and their ValidationError, in the order the instances were given"""
        if self._failures is None:
            self._determine_succeeds()
            assert self._failures is not None
        return self._failures

    @property
    def total(self) -> int:
        """Number of all validated instances"""
        return len(self._outcomes)

    @property
    def num_succeeds(self) -> int:
        """Number of positively validated instances (equivalent to `len(self.succeeded)`)"""
        return len(self.succeeded)

    @property
    def num_fails(self) -> int:
        """Number of negatively validated instances (equivalent to `len(self.failures)`)"""
        return len(self.failures)

    @property
    def all_errors(self) -> list[ValidationError]:
        """
        All ValidationErrors of all failed instances.
        It is sorted by attribute and check kind to enable grouping using itertools.
        """
        if self._errors is None:
            self._errors = sorted((error for _, error in self.failures), key=_extract_error_key)
        return self._errors

    @property
    def num_errors_per_kind(self) -> dict[str, int]:
        """Maps the check kind onto the number of instances which failed on it"""
        if self._num_errors_per_kind is None:
            self._num_errors_per_kind = {}
            for error in self.all_errors:
                self._num_errors_per_kind[error.kind] = self._num_errors_per_kind.get(error.kind, 0) + 1
        return self._num_errors_per_kind

    @property
    def num_errors_per_attribute(self) -> dict[str, int]:
        """Maps the attribute name onto the number of instances which failed on it"""
        if self._num_errors_per_attribute is None:
            self._num_errors_per_attribute = {
                attribute: sum(1 for _ in errors_iter)
                for attribute, errors_iter in itertools.groupby(self.all_errors, key=lambda error: error.attribute)
            }
        return self._num_errors_per_attribute


def validate_all(instances: Iterable[InstanceT]) -> ValidationReport[InstanceT]:
    """
    Validates every instance and returns a report of the outcomes.
    """
    return ValidationReport.from_instances(instances)
