"""
This package enables you to declare validation rules (presence, format, type) for the attributes of your classes
and to check instances against them. It is designed to work with arbitrary classes: just inherit from `Validatable`.
"""

from .analysis import ValidationReport, validate_all
from .checks import CheckKind
from .errors import VALID, Invalid, UnknownCheckKind, Valid, ValidationError, ValidationOutcome
from .execution import evaluate, is_valid, validate
from .mixin import Validatable
from .rules import Rule, RuleSet, RuleSetBuilder
