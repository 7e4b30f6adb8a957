"""passrules - composable password validation.

Build a policy by wrapping rules around a minimum length rule::

    from passrules import CaseRule, DigitRule, LengthRule, SymbolRule

    validator = SymbolRule(CaseRule(DigitRule(LengthRule(8))))
    validator.validate("Abc123!@#")
"""

__version__ = "0.1.0"

from passrules.domain.rules import (
    CaseRule,
    DigitRule,
    InvalidRuleError,
    LengthRule,
    PasswordValidationError,
    RuleDecorator,
    RuleError,
    SymbolRule,
    Validator,
)
from passrules.domain.services import (
    build_validator,
    build_validator_from_settings,
    default_password_validator,
)

__all__ = [
    "CaseRule",
    "DigitRule",
    "InvalidRuleError",
    "LengthRule",
    "PasswordValidationError",
    "RuleDecorator",
    "RuleError",
    "SymbolRule",
    "Validator",
    "__version__",
    "build_validator",
    "build_validator_from_settings",
    "default_password_validator",
]
