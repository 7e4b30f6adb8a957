"""Domain services for passrules.

Services build and exercise rule chains. They have no dependencies on
the CLI or on any I/O.
"""

from passrules.domain.services.policy_builder import (
    DEFAULT_MIN_LENGTH,
    build_validator,
    build_validator_from_settings,
    default_password_validator,
)
from passrules.domain.services.selftest import (
    SCENARIOS,
    Scenario,
    ScenarioResult,
    run_scenarios,
)

__all__ = [
    "DEFAULT_MIN_LENGTH",
    "SCENARIOS",
    "Scenario",
    "ScenarioResult",
    "build_validator",
    "build_validator_from_settings",
    "default_password_validator",
    "run_scenarios",
]
