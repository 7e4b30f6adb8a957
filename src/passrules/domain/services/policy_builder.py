"""Password policy builder.

Assembles a rule chain from a set of flags. The resulting chain is always
``Symbol(Case(Digit(Length(n))))`` with the disabled rules left out, so the
length check runs first and the symbol check runs last.
"""

from passrules.core.config import Settings
from passrules.core.logging import get_logger
from passrules.domain.rules import (
    CaseRule,
    DigitRule,
    LengthRule,
    SymbolRule,
    Validator,
)

DEFAULT_MIN_LENGTH = 8


def build_validator(
    min_length: int = DEFAULT_MIN_LENGTH,
    require_digit: bool = True,
    require_case: bool = True,
    require_symbol: bool = True,
) -> Validator:
    """Build a rule chain from policy flags.

    Args:
        min_length: Minimum password length (default 8).
        require_digit: Require at least one digit.
        require_case: Require both lowercase and uppercase letters.
        require_symbol: Require at least one symbol.

    Returns:
        The composed validator.

    Raises:
        InvalidRuleError: If ``min_length`` is negative or not an integer.
    """
    validator: Validator = LengthRule(min_length)
    if require_digit:
        validator = DigitRule(validator)
    if require_case:
        validator = CaseRule(validator)
    if require_symbol:
        validator = SymbolRule(validator)

    get_logger(__name__).debug("Composed password policy", policy=validator.describe())
    return validator


def build_validator_from_settings(settings: Settings) -> Validator:
    """Build a rule chain from the password policy settings."""
    return build_validator(
        min_length=settings.min_length,
        require_digit=settings.require_digit,
        require_case=settings.require_case,
        require_symbol=settings.require_symbol,
    )


# Default validator instance
default_password_validator: Validator = SymbolRule(
    CaseRule(DigitRule(LengthRule(DEFAULT_MIN_LENGTH)))
)
