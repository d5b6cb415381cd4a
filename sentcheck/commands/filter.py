"""Filter and check command implementations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Iterable

from rich.console import Console

from ..rules import RuleSet, check


@dataclass
class FilterStats:
    """Counts from one pass over a corpus."""

    accepted: int = 0
    rejected: int = 0

    @property
    def total(self) -> int:
        return self.accepted + self.rejected


def _sentences(lines: Iterable[str]) -> Iterable[str]:
    for line in lines:
        yield line.rstrip("\r\n")


def run_filter(
    rules: RuleSet,
    source: IO[str],
    sink: IO[str],
    *,
    rejected: bool = False,
    quiet: bool = False,
) -> int:
    """Stream `source` line by line and write the kept sentences to `sink`.

    Args:
        rules: Rule set every line is checked against
        source: Input, one sentence per line
        sink: Where kept sentences are written, one per line
        rejected: Keep the rejected sentences instead of the accepted ones
        quiet: Do not print the summary line

    Returns:
        Exit code (always 0; rejections are not failures)
    """
    console = Console(stderr=True)
    stats = FilterStats()

    for sentence in _sentences(source):
        ok = check(rules, sentence)
        if ok:
            stats.accepted += 1
        else:
            stats.rejected += 1
        if ok is not rejected:
            sink.write(sentence + "\n")

    if not quiet:
        _print_summary(console, stats)
    return 0


def _print_summary(console: Console, stats: FilterStats) -> None:
    if stats.total == 0:
        console.print("No sentences read.", style="dim")
        return
    ratio = stats.accepted / stats.total
    style = "bold green" if stats.rejected == 0 else "yellow"
    console.print(
        f"✓ {stats.accepted} accepted, ✗ {stats.rejected} rejected "
        f"({stats.total} total, {ratio:.1%} kept)",
        style=style,
    )


def run_check(rules: RuleSet, text: str) -> int:
    """Check a single sentence. Returns 0 when accepted, 1 when rejected."""
    if check(rules, text):
        print("accepted")
        return 0
    print("rejected")
    return 1
