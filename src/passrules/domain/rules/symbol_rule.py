"""Symbol requirement rule."""

from dataclasses import dataclass

from passrules.domain.rules.base import Password, RuleDecorator, as_text

# Exactly these 17 characters; punctuation such as _ - + = / \ . , ; : ~ | is not included.
SYMBOLS = frozenset("!@#$%^&*(){}[]?<>")


@dataclass(frozen=True, slots=True)
class SymbolRule(RuleDecorator):
    """Requires at least one character from :data:`SYMBOLS`."""

    NAME = "Symbol"
    ERROR_CODE = "password_no_symbol"
    ERROR_MESSAGE = "Password must contain at least one symbol from !@#$%^&*(){}[]?<>"

    def check_local(self, password: Password) -> bool:
        return any(char in SYMBOLS for char in as_text(password))
