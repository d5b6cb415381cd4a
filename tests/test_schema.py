"""Tests for RuleSet construction and validation."""

import dataclasses

import pytest

from sentcheck.rules import RuleSet, RulesetError, check
from sentcheck.rules.schema import RULESET_FIELDS


def test_defaults_are_permissive():
    rules = RuleSet()

    assert rules.min_trimmed_length == 0
    assert rules.max_word_count is None
    assert rules.allowed_symbols is None
    assert rules.abbreviations == ()
    assert rules.disallowed_symbols == frozenset()
    assert rules.even_symbols == ()


def test_collections_are_coerced():
    rules = RuleSet(
        disallowed_symbols=["%", "%", "#"],
        broken_whitespace=["  "],
        abbreviation_patterns=["[A-Z]{2}"],
        even_symbols=['"'],
    )

    assert rules.disallowed_symbols == frozenset({"%", "#"})
    assert rules.broken_whitespace == ("  ",)
    assert rules.abbreviation_patterns == ("[A-Z]{2}",)
    assert rules.even_symbols == ('"',)


def test_patterns_are_compiled_once():
    rules = RuleSet(allowed_symbols_regex="[a-z ]", abbreviation_patterns=["foo", "bar"])

    assert rules.allowed_symbols is not None
    assert rules.allowed_symbols.pattern == "[a-z ]"
    assert [p.pattern for p in rules.abbreviations] == ["foo", "bar"]


def test_rules_are_frozen():
    rules = RuleSet()

    with pytest.raises(dataclasses.FrozenInstanceError):
        rules.min_word_count = 3  # type: ignore[misc]


def test_replace_recompiles_patterns():
    rules = RuleSet(abbreviation_patterns=["[A-Z]{2}"])
    relaxed = dataclasses.replace(rules, abbreviation_patterns=[])

    assert not check(rules, "Two CAPS")
    assert check(relaxed, "Two CAPS")
    assert relaxed.abbreviations == ()


def test_equality_ignores_compiled_fields():
    assert RuleSet(abbreviation_patterns=["x"]) == RuleSet(abbreviation_patterns=("x",))


def test_thresholds_are_not_validated():
    rules = RuleSet(min_word_count=5, max_word_count=1)

    assert not check(rules, "any sentence at all")


@pytest.mark.parametrize(
    "kwargs, field",
    [
        ({"allowed_symbols_regex": "[a-z"}, "allowed_symbols_regex"),
        ({"abbreviation_patterns": ["ok", "(unclosed"]}, "abbreviation_patterns"),
        ({"disallowed_symbols": ["ab"]}, "disallowed_symbols"),
        ({"disallowed_symbols": [""]}, "disallowed_symbols"),
        ({"even_symbols": ["''"]}, "even_symbols"),
        ({"broken_whitespace": [""]}, "broken_whitespace"),
        ({"broken_whitespace": "  "}, "broken_whitespace"),
        ({"disallowed_words": "blerg"}, "disallowed_words"),
        ({"disallowed_words": ["ok", 3]}, "disallowed_words"),
        ({"abbreviation_patterns": "[A-Z]{2}"}, "abbreviation_patterns"),
        ({"abbreviation_patterns": [None]}, "abbreviation_patterns"),
        ({"disallowed_symbols": "%"}, "disallowed_symbols"),
        ({"even_symbols": '"'}, "even_symbols"),
    ],
)
def test_invalid_configuration_raises(kwargs, field):
    with pytest.raises(RulesetError) as exc_info:
        RuleSet(**kwargs)

    assert exc_info.value.field == field
    assert field in str(exc_info.value)


def test_ruleset_error_is_value_error():
    with pytest.raises(ValueError):
        RuleSet(allowed_symbols_regex="(")


def test_to_dict_lists_configured_fields_only():
    rules = RuleSet(disallowed_symbols={"b", "a"}, even_symbols=['"'])
    data = rules.to_dict()

    assert tuple(data) == RULESET_FIELDS
    assert "abbreviations" not in data
    assert data["disallowed_symbols"] == ["a", "b"]
    assert data["even_symbols"] == ['"']
    assert data["max_word_count"] is None
