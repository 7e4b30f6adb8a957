"""Mixed case requirement rule."""

from dataclasses import dataclass

from passrules.domain.rules.base import Password, RuleDecorator, as_text


@dataclass(frozen=True, slots=True)
class CaseRule(RuleDecorator):
    """Requires at least one ASCII lowercase and one ASCII uppercase letter.

    Only ``a``-``z`` and ``A``-``Z`` count. Letters outside ASCII, digits,
    symbols and whitespace contribute to neither class.
    """

    NAME = "Case"
    ERROR_CODE = "password_no_case"
    ERROR_MESSAGE = (
        "Password must contain at least one lowercase and one uppercase letter"
    )

    def check_local(self, password: Password) -> bool:
        has_lower = False
        has_upper = False

        for char in as_text(password):
            if "a" <= char <= "z":
                has_lower = True
            elif "A" <= char <= "Z":
                has_upper = True
            if has_lower and has_upper:
                return True

        return False
