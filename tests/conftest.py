"""Pytest configuration for all tests."""

import pytest
import structlog

from passrules.core.config import get_settings
from passrules.domain.rules import PasswordValidationError, Validator


@pytest.fixture(autouse=True)
def _reset_settings_and_logging():
    """Start every test with fresh settings and default structlog config."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


class ConstantValidator(Validator):
    """Validator with a fixed answer, used as an inner rule in tests."""

    __slots__ = ("result", "calls")

    def __init__(self, result: bool) -> None:
        self.result = result
        self.calls = 0

    def validate(self, password) -> bool:
        self.calls += 1
        return self.result

    def explain(self, password) -> PasswordValidationError | None:
        if self.validate(password):
            return None
        return PasswordValidationError(
            field="password", message="Constant rejection", code="constant"
        )

    def describe(self) -> str:
        return f"Constant({self.result})"


@pytest.fixture
def accept_all() -> ConstantValidator:
    """Inner validator that accepts everything."""
    return ConstantValidator(True)


@pytest.fixture
def reject_all() -> ConstantValidator:
    """Inner validator that rejects everything."""
    return ConstantValidator(False)
