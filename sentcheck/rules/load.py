from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from .schema import RULESET_FIELDS, RuleSet, RulesetError

logger = logging.getLogger(__name__)

PRESETS_DIR = Path(__file__).parent / "presets"

_INT_FIELDS = {"min_trimmed_length", "min_characters", "min_word_count", "max_word_count"}
_BOOL_FIELDS = {
    "quote_start_with_letter",
    "may_end_with_colon",
    "needs_punctuation_end",
    "needs_letter_start",
    "needs_uppercase_start",
}
_STR_FIELDS = {"allowed_symbols_regex"}
_LIST_FIELDS = {
    "disallowed_symbols",
    "broken_whitespace",
    "disallowed_words",
    "abbreviation_patterns",
    "even_symbols",
}

WORDS_FILE_KEY = "disallowed_words_file"


def _coerce_int(key: str, value: Any) -> int:
    # bool is an int subclass; `min_word_count = true` is a mistake, not 1.
    if isinstance(value, bool) or not isinstance(value, int):
        raise RulesetError(f"{key}: expected an integer, got {value!r}", field=key)
    return value


def _coerce_bool(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise RulesetError(f"{key}: expected true or false, got {value!r}", field=key)
    return value


def _coerce_str(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise RulesetError(f"{key}: expected a string, got {value!r}", field=key)
    return value


def _coerce_str_list(key: str, value: Any) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise RulesetError(f"{key}: expected a list of strings, got {value!r}", field=key)
    return value


def read_word_list(path: Path) -> list[str]:
    """Read a word list: one word per line, blank lines and `#` comments skipped."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise RulesetError(f"{WORDS_FILE_KEY}: cannot read {path}: {e}", field=WORDS_FILE_KEY) from e

    words = []
    for line in text.splitlines():
        word = line.strip()
        if not word or word.startswith("#"):
            continue
        words.append(word.lower())
    logger.debug("Loaded %d disallowed words from %s", len(words), path)
    return words


def ruleset_from_dict(data: dict[str, Any], *, base_dir: Path | None = None) -> RuleSet:
    """
    Build a RuleSet from parsed TOML (or any mapping of field names).

    Keys not named in RuleSet are rejected, except `disallowed_words_file`,
    which is resolved against `base_dir` and merged into `disallowed_words`.
    """
    unknown = sorted(k for k in data if k not in RULESET_FIELDS and k != WORDS_FILE_KEY)
    if unknown:
        raise RulesetError(f"Unknown rule keys: {', '.join(unknown)}", field=unknown[0])

    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key in _INT_FIELDS:
            kwargs[key] = _coerce_int(key, value)
        elif key in _BOOL_FIELDS:
            kwargs[key] = _coerce_bool(key, value)
        elif key in _STR_FIELDS:
            kwargs[key] = _coerce_str(key, value)
        elif key in _LIST_FIELDS:
            kwargs[key] = _coerce_str_list(key, value)

    words_file = data.get(WORDS_FILE_KEY)
    if words_file is not None:
        words_path = Path(_coerce_str(WORDS_FILE_KEY, words_file))
        if not words_path.is_absolute() and base_dir is not None:
            words_path = base_dir / words_path
        kwargs["disallowed_words"] = [*kwargs.get("disallowed_words", []), *read_word_list(words_path)]

    return RuleSet(**kwargs)


def load_ruleset(path: Path) -> RuleSet:
    """Load a rule set from a TOML file."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise RulesetError(f"Cannot read rule file {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise RulesetError(f"Failed to parse rule file {path}: {e}") from e

    try:
        rules = ruleset_from_dict(data, base_dir=path.parent)
    except RulesetError as e:
        raise RulesetError(f"{path}: {e}", field=e.field) from e

    logger.debug("Loaded rule set from %s", path)
    return rules


def available_presets() -> list[str]:
    """Names of the bundled presets, sorted."""
    return sorted(p.stem for p in PRESETS_DIR.glob("*.toml"))


def load_preset(name: str) -> RuleSet:
    """Load a bundled preset by name (e.g. "english")."""
    key = name.strip().lower()
    presets = available_presets()
    if key not in presets:
        raise RulesetError(f"Unknown preset: {name!r} (available: {', '.join(presets)})")
    logger.debug("Loading preset %s", key)
    return load_ruleset(PRESETS_DIR / f"{key}.toml")
