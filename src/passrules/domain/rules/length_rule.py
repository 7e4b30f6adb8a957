"""Minimum length rule, the base of every rule chain."""

from dataclasses import dataclass

from passrules.domain.rules.base import (
    Password,
    PasswordValidationError,
    Validator,
    storage_length,
)
from passrules.domain.rules.exceptions import InvalidRuleError


@dataclass(frozen=True, slots=True)
class LengthRule(Validator):
    """Accepts passwords with at least ``min_length`` storage units.

    Storage units are bytes for byte input and UTF-8 bytes for text input.
    ``min_length=0`` accepts every password, including the empty one.
    """

    min_length: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a meaningful length
        if isinstance(self.min_length, bool) or not isinstance(self.min_length, int):
            raise InvalidRuleError(
                f"min_length must be an integer, got {type(self.min_length).__name__}",
                rule="LengthRule",
            )
        if self.min_length < 0:
            raise InvalidRuleError(
                f"min_length must be non-negative, got {self.min_length}",
                rule="LengthRule",
            )

    def validate(self, password: Password) -> bool:
        return storage_length(password) >= self.min_length

    def explain(self, password: Password) -> PasswordValidationError | None:
        if self.validate(password):
            return None
        return PasswordValidationError(
            field="password",
            message=f"Password must be at least {self.min_length} characters",
            code="password_too_short",
        )

    def describe(self) -> str:
        return f"Length({self.min_length})"
