"""Composable password rules.

Rules are built by wrapping, innermost first::

    validator = SymbolRule(CaseRule(DigitRule(LengthRule(8))))
    validator.validate("Abc123!@#")  # True
"""

from passrules.domain.rules.base import (
    Password,
    PasswordValidationError,
    RuleDecorator,
    Validator,
)
from passrules.domain.rules.case_rule import CaseRule
from passrules.domain.rules.digit_rule import DIGITS, DigitRule
from passrules.domain.rules.exceptions import InvalidRuleError, RuleError
from passrules.domain.rules.length_rule import LengthRule
from passrules.domain.rules.symbol_rule import SYMBOLS, SymbolRule

__all__ = [
    "CaseRule",
    "DIGITS",
    "DigitRule",
    "InvalidRuleError",
    "LengthRule",
    "Password",
    "PasswordValidationError",
    "RuleDecorator",
    "RuleError",
    "SYMBOLS",
    "SymbolRule",
    "Validator",
]
