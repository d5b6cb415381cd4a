"""Declarative sentence rules (rules as data, gates as code)."""

from .engine import check, filter_sentences
from .load import available_presets, load_preset, load_ruleset, ruleset_from_dict
from .schema import RuleSet, RulesetError

__all__ = [
    "RuleSet",
    "RulesetError",
    "available_presets",
    "check",
    "filter_sentences",
    "load_preset",
    "load_ruleset",
    "ruleset_from_dict",
]
