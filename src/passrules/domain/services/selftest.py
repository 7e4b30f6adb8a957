"""Built-in self test.

Runs a fixed table of rule chains against literal passwords and reports every
result that does not match its expected outcome.
"""

from collections.abc import Callable
from dataclasses import dataclass

from passrules.domain.rules import (
    CaseRule,
    DigitRule,
    LengthRule,
    SymbolRule,
    Validator,
)


@dataclass(frozen=True)
class Scenario:
    """A rule chain, an input and the expected outcome."""

    factory: Callable[[], Validator]
    password: str
    expected: bool


@dataclass(frozen=True)
class ScenarioResult:
    """Outcome of running a single scenario."""

    policy: str
    password: str
    expected: bool
    actual: bool

    @property
    def passed(self) -> bool:
        return self.expected == self.actual


def _full_chain(min_length: int) -> Validator:
    return SymbolRule(CaseRule(DigitRule(LengthRule(min_length))))


SCENARIOS: tuple[Scenario, ...] = (
    Scenario(lambda: LengthRule(8), "abc123!@#", True),
    Scenario(lambda: LengthRule(8), "abc123", False),
    Scenario(lambda: DigitRule(LengthRule(8)), "abc123!@#", True),
    Scenario(lambda: DigitRule(LengthRule(8)), "abcde!@#", False),
    Scenario(lambda: CaseRule(DigitRule(LengthRule(8))), "Abc123!@#", True),
    Scenario(lambda: CaseRule(DigitRule(LengthRule(8))), "abc123!@#", False),
    Scenario(lambda: _full_chain(8), "Abc123!@#", True),
    Scenario(lambda: _full_chain(8), "Abc123567", False),
    Scenario(lambda: LengthRule(0), "", True),
    Scenario(lambda: SymbolRule(LengthRule(0)), "hello_world+", False),
    Scenario(lambda: SymbolRule(LengthRule(0)), "hello?", True),
)


def run_scenarios(
    scenarios: tuple[Scenario, ...] = SCENARIOS,
) -> list[ScenarioResult]:
    """Run each scenario against a freshly built rule chain."""
    results: list[ScenarioResult] = []
    for scenario in scenarios:
        validator = scenario.factory()
        results.append(
            ScenarioResult(
                policy=validator.describe(),
                password=scenario.password,
                expected=scenario.expected,
                actual=validator.validate(scenario.password),
            )
        )
    return results
