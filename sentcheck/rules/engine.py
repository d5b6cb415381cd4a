from __future__ import annotations

from typing import Iterable, Iterator

from .gates import GATES, trim
from .schema import RuleSet


def check(rules: RuleSet, text: str) -> bool:
    """
    Return True if `text` satisfies every rule in `rules`.

    The sentence is trimmed of Unicode White_Space once; gates run in order
    and the first one that fires rejects. Any string is a valid input; this
    never raises.
    """
    trimmed = trim(text)
    for _name, gate in GATES:
        if gate(rules, trimmed):
            return False
    return True


def filter_sentences(rules: RuleSet, sentences: Iterable[str], *, keep: bool = True) -> Iterator[str]:
    """Lazily yield the sentences whose verdict equals `keep`, unchanged."""
    keep = bool(keep)
    for sentence in sentences:
        if check(rules, sentence) == keep:
            yield sentence
