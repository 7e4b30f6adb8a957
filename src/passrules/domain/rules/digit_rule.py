"""Digit requirement rule."""

from dataclasses import dataclass

from passrules.domain.rules.base import Password, RuleDecorator, as_text

DIGITS = frozenset("0123456789")


@dataclass(frozen=True, slots=True)
class DigitRule(RuleDecorator):
    """Requires at least one decimal digit (``0``-``9``)."""

    NAME = "Digit"
    ERROR_CODE = "password_no_digit"
    ERROR_MESSAGE = "Password must contain at least one digit"

    def check_local(self, password: Password) -> bool:
        return any(char in DIGITS for char in as_text(password))
