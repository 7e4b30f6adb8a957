"""Exceptions for password rule construction."""


class RuleError(ValueError):
    """Base class for all rule-related errors."""

    pass


class InvalidRuleError(RuleError):
    """Raised when a rule is constructed with an invalid configuration."""

    def __init__(self, message: str, rule: str | None = None) -> None:
        self.message = message
        self.rule = rule
        super().__init__(f"{rule}: {message}" if rule is not None else message)
