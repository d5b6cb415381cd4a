from __future__ import annotations

from typing import Callable

import regex

from .schema import RuleSet


# A gate returns True when the (already trimmed) sentence must be rejected.
GateFn = Callable[[RuleSet, str], bool]

# Unicode properties, not str.isalpha()/str.isspace(): Alphabetic includes
# combining vowel signs, and White_Space excludes U+001C..U+001F.
_ALPHABETIC = regex.compile(r"\p{Alphabetic}")
_LOWERCASE = regex.compile(r"\p{Lowercase}")
_NUMERIC = regex.compile(r"\p{N}")
_NON_ALPHA_EDGES = regex.compile(r"\A\P{Alphabetic}+|\P{Alphabetic}+\Z")
_OUTER_SPACE = regex.compile(r"\A\p{White_Space}+|\p{White_Space}+\Z")
_SPACE = regex.compile(r"\p{White_Space}+")


def trim(text: str) -> str:
    return _OUTER_SPACE.sub("", text)


def split_words(text: str) -> list[str]:
    return [w for w in _SPACE.split(text) if w]


def _is_alpha(c: str) -> bool:
    return c != "" and _ALPHABETIC.match(c) is not None


def _is_lower(c: str) -> bool:
    return c != "" and _LOWERCASE.match(c) is not None


def _strip_non_alpha(word: str) -> str:
    return _NON_ALPHA_EDGES.sub("", word)


def gate_shape(rules: RuleSet, text: str) -> bool:
    first = text[:1]
    last = text[-1:]
    return (
        len(text) < rules.min_trimmed_length
        or (rules.quote_start_with_letter and first == '"' and len(text) > 1 and not _is_alpha(text[1]))
        or len(_ALPHABETIC.findall(text)) < rules.min_characters
        or (not rules.may_end_with_colon and last == ":")
        or (rules.needs_punctuation_end and _is_alpha(last))
        or (rules.needs_letter_start and first != "" and not _is_alpha(first))
        or (rules.needs_uppercase_start and _is_lower(first))
        or "\n" in text
        # Nd, Nl and No: decimal digits, letter numerals, superscripts, fractions.
        or _NUMERIC.search(text) is not None
    )


def gate_symbols(rules: RuleSet, text: str) -> bool:
    allowed = rules.allowed_symbols
    if allowed is not None:
        return any(allowed.search(c) is None for c in text)
    if not rules.disallowed_symbols:
        return False
    return any(c in rules.disallowed_symbols for c in text)


def gate_broken_whitespace(rules: RuleSet, text: str) -> bool:
    return any(broken in text for broken in rules.broken_whitespace)


def gate_words(rules: RuleSet, text: str) -> bool:
    words = split_words(text)
    if len(words) < rules.min_word_count:
        return True
    if rules.max_word_count is not None and len(words) > rules.max_word_count:
        return True
    if not rules.disallowed_words:
        return False
    return any(_strip_non_alpha(w).lower() in rules.disallowed_words for w in words)


def gate_abbreviations(rules: RuleSet, text: str) -> bool:
    return any(p.search(text) is not None for p in rules.abbreviations)


def gate_even_symbols(rules: RuleSet, text: str) -> bool:
    return any(text.count(symbol) % 2 != 0 for symbol in rules.even_symbols)


# Evaluation order matters: the first gate that fires ends the check.
GATES: tuple[tuple[str, GateFn], ...] = (
    ("shape", gate_shape),
    ("symbols", gate_symbols),
    ("broken_whitespace", gate_broken_whitespace),
    ("words", gate_words),
    ("abbreviations", gate_abbreviations),
    ("even_symbols", gate_even_symbols),
)
