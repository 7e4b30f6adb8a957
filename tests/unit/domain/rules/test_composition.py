"""Tests for composed rule chains."""

import itertools

import pytest

from passrules.domain.rules import (
    CaseRule,
    DigitRule,
    LengthRule,
    RuleDecorator,
    SymbolRule,
    Validator,
)

DECORATORS = (DigitRule, CaseRule, SymbolRule)

SAMPLE_PASSWORDS = [
    "",
    "a",
    "abc123",
    "abc123!@#",
    "Abc123!@#",
    "Abc123567",
    "ABCDEFGH",
    "hello_world+",
    "hello?",
    "Pässwörd1!",
    "        ",
    "aB3<",
]


def compose(decorators, min_length: int = 8) -> Validator:
    validator: Validator = LengthRule(min_length)
    for decorator in decorators:
        validator = decorator(validator)
    return validator


@pytest.mark.parametrize(
    ("validator", "password", "expected"),
    [
        (LengthRule(8), "abc123!@#", True),
        (LengthRule(8), "abc123", False),
        (DigitRule(LengthRule(8)), "abc123!@#", True),
        (DigitRule(LengthRule(8)), "abcde!@#", False),
        (CaseRule(DigitRule(LengthRule(8))), "Abc123!@#", True),
        (CaseRule(DigitRule(LengthRule(8))), "abc123!@#", False),
        (SymbolRule(CaseRule(DigitRule(LengthRule(8)))), "Abc123!@#", True),
        (SymbolRule(CaseRule(DigitRule(LengthRule(8)))), "Abc123567", False),
        (LengthRule(0), "", True),
        (SymbolRule(LengthRule(0)), "hello_world+", False),
        (SymbolRule(LengthRule(0)), "hello?", True),
    ],
)
def test_end_to_end_scenarios(validator, password, expected):
    assert validator.validate(password) is expected


class TestCompositionProperties:
    """Properties that hold for every chain."""

    @pytest.mark.parametrize("password", SAMPLE_PASSWORDS)
    def test_decorator_is_conjunction(self, password):
        for decorator in DECORATORS:
            for inner in (LengthRule(0), LengthRule(8), DigitRule(LengthRule(4))):
                outer = decorator(inner)
                expected = inner.validate(password) and outer.check_local(password)
                assert outer.validate(password) is expected

    @pytest.mark.parametrize("password", SAMPLE_PASSWORDS)
    def test_order_does_not_change_result(self, password):
        results = {
            compose(order).validate(password)
            for order in itertools.permutations(DECORATORS)
        }
        assert len(results) == 1

    @pytest.mark.parametrize("password", SAMPLE_PASSWORDS)
    def test_removing_a_rule_never_rejects_an_accepted_password(self, password):
        full = compose(DECORATORS, min_length=4)
        if not full.validate(password):
            return
        for size in range(len(DECORATORS)):
            for subset in itertools.combinations(DECORATORS, size):
                assert compose(subset, min_length=4).validate(password) is True

    @pytest.mark.parametrize("password", SAMPLE_PASSWORDS)
    def test_validation_is_repeatable(self, password):
        validator = compose(DECORATORS)
        first = validator.validate(password)
        assert all(validator.validate(password) is first for _ in range(3))

    def test_decorator_base_is_abstract(self):
        with pytest.raises(TypeError):
            RuleDecorator(LengthRule(1))

    def test_chains_compare_by_configuration(self):
        assert compose(DECORATORS) == compose(DECORATORS)
        assert compose(DECORATORS) != compose(DECORATORS, min_length=9)


class TestExplain:
    """Tests for failure reporting on full chains."""

    @pytest.fixture
    def validator(self) -> Validator:
        return SymbolRule(CaseRule(DigitRule(LengthRule(8))))

    @pytest.mark.parametrize(
        ("password", "code"),
        [
            ("abc", "password_too_short"),
            ("abcdefgh", "password_no_digit"),
            ("abcdefg1", "password_no_case"),
            ("Abcdefg1", "password_no_symbol"),
        ],
    )
    def test_reports_first_failure_in_evaluation_order(self, validator, password, code):
        error = validator.explain(password)
        assert error is not None
        assert error.code == code

    @pytest.mark.parametrize("password", SAMPLE_PASSWORDS)
    def test_explain_agrees_with_validate(self, validator, password):
        assert (validator.explain(password) is None) is validator.validate(password)

    def test_is_valid_alias(self, validator):
        assert validator.is_valid("Abc123!@#") is True
        assert validator.is_valid("Abc123567") is False

    def test_describe_full_chain(self, validator):
        assert validator.describe() == "Symbol(Case(Digit(Length(8))))"
