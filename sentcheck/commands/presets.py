"""Preset listing and rule-set display."""

from __future__ import annotations

import json

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..rules import RuleSet, available_presets, load_preset


def run_presets() -> int:
    """Print the bundled presets with their headline limits."""
    console = Console()

    table = Table(title="Bundled presets")
    table.add_column("Preset", style="bold")
    table.add_column("Words")
    table.add_column("Min chars", justify="right")
    table.add_column("Abbreviation patterns", justify="right")
    table.add_column("Disallowed words", justify="right")

    for name in available_presets():
        rules = load_preset(name)
        max_words = "∞" if rules.max_word_count is None else str(rules.max_word_count)
        table.add_row(
            name,
            f"{rules.min_word_count}-{max_words}",
            str(rules.min_characters),
            str(len(rules.abbreviation_patterns)),
            str(len(rules.disallowed_words)),
        )

    console.print(table)
    return 0


def _format_value(value) -> str:
    if isinstance(value, list):
        if not value:
            return "[dim]-[/]"
        return escape(", ".join(repr(v) for v in value))
    if value is None or value == "":
        return "[dim]-[/]"
    return escape(str(value))


def run_show(rules: RuleSet, label: str, output_json: bool = False) -> int:
    """Print every field of a resolved rule set."""
    data = rules.to_dict()

    if output_json:
        print(json.dumps(data, indent=2, ensure_ascii=False))
        return 0

    console = Console()
    table = Table(title=f"Rule set: {label}")
    table.add_column("Field", style="bold")
    table.add_column("Value", overflow="fold")

    for key, value in data.items():
        if key == "disallowed_words" and len(value) > 10:
            shown = escape(f"{len(value)} words ({', '.join(value[:10])}, ...)")
        else:
            shown = _format_value(value)
        table.add_row(key, shown)

    console.print(table)
    return 0
