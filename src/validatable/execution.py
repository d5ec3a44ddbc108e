"""
Contains the rule evaluator. It reads the attribute values of an instance, dispatches every rule to the check
function of its kind and aggregates the result.
"""
import logging
from typing import Any, Optional

from .checks import CHECKS, CheckKind
from .errors import VALID, Invalid, UnknownCheckKind, Valid, ValidationError, ValidationOutcome
from .rules import Rule, RuleSet
from .types import CheckFunction

logger = logging.getLogger(__name__)


def _check_function(rule: Rule) -> CheckFunction:
    try:
        return CHECKS[CheckKind(rule.kind)]
    except ValueError as error:
        logger.error("No check function for rule %s", rule)
        raise UnknownCheckKind(rule.attribute, rule.kind) from error


def evaluate(instance: Any, rule_set: Optional[RuleSet]) -> ValidationOutcome:
    """
    Evaluates the rules in order of declaration and stops at the first failing one. Returns `VALID` if there are
    no rules or all of them pass, otherwise the `Invalid` outcome of the first failing rule.
    Raises UnknownCheckKind if a rule with an unknown kind is reached; errors of accessors are not caught.
    """
    if rule_set is None:
        return VALID
    for rule in rule_set:
        check = _check_function(rule)
        value = rule_set.accessor_for(rule.attribute)(instance)
        if not check(value, rule.argument):
            outcome = Invalid(attribute=rule.attribute, kind=rule.kind)
            logger.debug("%s: %s (value %r)", type(instance).__name__, outcome.message, value)
            return outcome
    return VALID


def validate(instance: Any, rule_set: Optional[RuleSet]) -> Valid:
    """
    Returns `VALID` if every rule passes, otherwise raises a ValidationError describing the first failing rule.
    """
    outcome = evaluate(instance, rule_set)
    if isinstance(outcome, Invalid):
        raise ValidationError.from_outcome(outcome)
    return outcome


def is_valid(instance: Any, rule_set: Optional[RuleSet]) -> bool:
    """
    True exactly if `validate` would not raise a ValidationError. UnknownCheckKind is not swallowed.
    """
    try:
        validate(instance, rule_set)
    except ValidationError:
        return False
    return True
