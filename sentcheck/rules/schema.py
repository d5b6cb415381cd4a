from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from typing import Any, Iterable


class RulesetError(ValueError):
    """A rule set is malformed (bad pattern, bad symbol, bad rule file)."""

    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(message)
        self.field = field


def _compile(pattern: str, field_name: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise RulesetError(f"{field_name}: invalid pattern {pattern!r}: {e}", field=field_name) from e


def _strings(values: Iterable[str], field_name: str) -> list[str]:
    # A bare string would otherwise be iterated character by character.
    if isinstance(values, str):
        raise RulesetError(f"{field_name}: expected a collection of strings, got {values!r}", field=field_name)
    out: list[str] = []
    for v in values:
        if not isinstance(v, str):
            raise RulesetError(f"{field_name}: expected a string, got {v!r}", field=field_name)
        out.append(v)
    return out


def _single_chars(values: Iterable[str], field_name: str) -> list[str]:
    out: list[str] = []
    for v in _strings(values, field_name):
        if len(v) != 1:
            raise RulesetError(f"{field_name}: expected a single character, got {v!r}", field=field_name)
        out.append(v)
    return out


@dataclass(frozen=True)
class RuleSet:
    """Validation parameters for one language profile.

    Every field defaults to "no restriction". Patterns are compiled when the
    instance is built, so a malformed rule set fails here and never inside
    `check`.
    """

    min_trimmed_length: int = 0
    quote_start_with_letter: bool = False
    min_characters: int = 0
    may_end_with_colon: bool = False
    needs_punctuation_end: bool = False
    needs_letter_start: bool = False
    needs_uppercase_start: bool = False
    allowed_symbols_regex: str = ""
    disallowed_symbols: frozenset[str] = frozenset()
    broken_whitespace: tuple[str, ...] = ()
    min_word_count: int = 0
    max_word_count: int | None = None
    disallowed_words: frozenset[str] = frozenset()
    abbreviation_patterns: tuple[str, ...] = ()
    even_symbols: tuple[str, ...] = ()

    # Derived from the fields above in __post_init__.
    allowed_symbols: re.Pattern[str] | None = field(default=None, init=False, repr=False, compare=False)
    abbreviations: tuple[re.Pattern[str], ...] = field(default=(), init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        symbols = _single_chars(self.disallowed_symbols, "disallowed_symbols")
        even = _single_chars(self.even_symbols, "even_symbols")

        broken = tuple(_strings(self.broken_whitespace, "broken_whitespace"))
        for b in broken:
            if not b:
                raise RulesetError(f"broken_whitespace: expected a non-empty string, got {b!r}", field="broken_whitespace")

        words = frozenset(w.lower() for w in _strings(self.disallowed_words, "disallowed_words"))
        patterns = tuple(_strings(self.abbreviation_patterns, "abbreviation_patterns"))

        object.__setattr__(self, "disallowed_symbols", frozenset(symbols))
        object.__setattr__(self, "even_symbols", tuple(even))
        object.__setattr__(self, "broken_whitespace", broken)
        object.__setattr__(self, "disallowed_words", words)
        object.__setattr__(self, "abbreviation_patterns", patterns)

        allowed = None
        if self.allowed_symbols_regex:
            allowed = _compile(self.allowed_symbols_regex, "allowed_symbols_regex")
        object.__setattr__(self, "allowed_symbols", allowed)
        object.__setattr__(
            self,
            "abbreviations",
            tuple(_compile(p, "abbreviation_patterns") for p in patterns),
        )

    def to_dict(self) -> dict[str, Any]:
        """Plain, JSON-serializable view of the configured fields."""
        out: dict[str, Any] = {}
        for f in fields(self):
            if not f.init:
                continue
            value = getattr(self, f.name)
            if isinstance(value, frozenset):
                value = sorted(value)
            elif isinstance(value, tuple):
                value = list(value)
            out[f.name] = value
        return out


RULESET_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(RuleSet) if f.init)
