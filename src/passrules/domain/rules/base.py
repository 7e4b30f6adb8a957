"""Base abstractions for password rules.

A password policy is a chain of rules. The chain always ends in a base rule
(``LengthRule``); every other rule is a decorator that owns exactly one inner
validator and adds a single check on top of it. Decorators consult their inner
validator first and reject without looking at the password when it rejects.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from passrules.domain.rules.exceptions import InvalidRuleError

Password = str | bytes | bytearray | memoryview


@dataclass(frozen=True)
class PasswordValidationError:
    """Represents a password validation error.

    Attributes:
        field: The field name (always 'password').
        message: Human-readable error message.
        code: Machine-readable error code.
    """

    field: str
    message: str
    code: str


def as_text(password: Password) -> str:
    """Return a character view of ``password``.

    Byte sequences are mapped one byte to one character (latin-1), so ASCII
    membership tests behave the same for ``str`` and ``bytes`` input.
    """
    if isinstance(password, str):
        return password
    return bytes(password).decode("latin-1")


def storage_length(password: Password) -> int:
    """Return the number of storage units in ``password``.

    Byte sequences count bytes. Strings count the bytes of their UTF-8
    encoding, which equals ``len(password)`` for ASCII input.
    """
    if isinstance(password, str):
        if password.isascii():
            return len(password)
        return len(password.encode("utf-8", "surrogatepass"))
    return memoryview(password).nbytes


class Validator(ABC):
    """A predicate over passwords."""

    __slots__ = ()

    @abstractmethod
    def validate(self, password: Password) -> bool:
        """Return True if the password satisfies this policy."""
        ...

    @abstractmethod
    def explain(self, password: Password) -> PasswordValidationError | None:
        """Return the first rule failure in evaluation order, or None."""
        ...

    @abstractmethod
    def describe(self) -> str:
        """Return a compact description of the rule chain."""
        ...

    def is_valid(self, password: Password) -> bool:
        """Alias for :meth:`validate`."""
        return self.validate(password)


@dataclass(frozen=True, slots=True)
class RuleDecorator(Validator):
    """A rule that wraps an inner validator and adds one check.

    Subclasses implement :meth:`check_local` and set ``NAME``, ``ERROR_CODE``
    and ``ERROR_MESSAGE``.
    """

    inner: Validator

    NAME = "Rule"
    ERROR_CODE = "password_invalid"
    ERROR_MESSAGE = "Password is invalid"

    def __post_init__(self) -> None:
        if not isinstance(self.inner, Validator):
            raise InvalidRuleError(
                f"inner validator must be a Validator, got {type(self.inner).__name__}",
                rule=type(self).__name__,
            )

    @abstractmethod
    def check_local(self, password: Password) -> bool:
        """Return True if the password passes this rule's own check."""
        ...

    def validate(self, password: Password) -> bool:
        if not self.inner.validate(password):
            return False
        return self.check_local(password)

    def explain(self, password: Password) -> PasswordValidationError | None:
        error = self.inner.explain(password)
        if error is not None:
            return error
        if self.check_local(password):
            return None
        return PasswordValidationError(
            field="password",
            message=self.ERROR_MESSAGE,
            code=self.ERROR_CODE,
        )

    def describe(self) -> str:
        return f"{self.NAME}({self.inner.describe()})"
