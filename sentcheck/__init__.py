"""sentcheck - filter corpora down to well-formed sentences."""

from .rules import (
    RuleSet,
    RulesetError,
    available_presets,
    check,
    filter_sentences,
    load_preset,
    load_ruleset,
    ruleset_from_dict,
)

__version__ = "0.1.0"

__all__ = [
    "RuleSet",
    "RulesetError",
    "__version__",
    "available_presets",
    "check",
    "filter_sentences",
    "load_preset",
    "load_ruleset",
    "ruleset_from_dict",
]
