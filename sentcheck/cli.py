"""CLI entrypoint for sentcheck."""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .rules import RuleSet, RulesetError, load_preset, load_ruleset


def _configure_logging(verbose: bool) -> None:
    from rich.console import Console
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _resolve_rules(preset: str | None, rules_path: Path | None) -> tuple[RuleSet, str]:
    """Load the rule set named by --preset or --rules."""
    if preset and rules_path:
        raise click.UsageError("Pass either --preset or --rules, not both.")
    if not preset and not rules_path:
        raise click.UsageError("A rule set is required: pass --preset NAME or --rules PATH.")

    try:
        if rules_path is not None:
            return load_ruleset(rules_path), str(rules_path)
        return load_preset(preset), preset
    except RulesetError as e:
        raise click.ClickException(str(e)) from e


def _rules_options(fn):
    fn = click.option(
        "--rules",
        "-r",
        "rules_path",
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help="Path to a TOML rule file",
    )(fn)
    fn = click.option(
        "--preset",
        "-p",
        type=str,
        default=None,
        envvar="SENTCHECK_PRESET",
        metavar="NAME",
        help="Bundled rule set to use (e.g. english, french, german)",
    )(fn)
    return fn


@click.group()
@click.version_option(__version__, prog_name="sentcheck")
@click.option("--verbose", is_flag=True, help="Log rule loading details to stderr")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """sentcheck - Keep only well-formed sentences.

    Checks sentences against a language rule set and filters corpora.
    """
    ctx.ensure_object(dict)
    _configure_logging(verbose)
    ctx.obj["verbose"] = verbose


@cli.command("filter")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@_rules_options
@click.option(
    "--output",
    "-o",
    "sink",
    type=click.File("w", encoding="utf-8"),
    default="-",
    help="Where to write kept sentences (defaults to stdout)",
)
@click.option(
    "--rejected",
    is_flag=True,
    help="Write the rejected sentences instead of the accepted ones",
)
@click.option("--quiet", "-q", is_flag=True, help="Do not print the summary")
def filter_cmd(source, preset: str | None, rules_path: Path | None, sink, rejected: bool, quiet: bool) -> None:
    """Filter a corpus, one sentence per line.

    Examples:

        sentcheck filter sentences.txt --preset english -o clean.txt

        cat raw.txt | sentcheck filter -p german --rejected
    """
    from .commands.filter import run_filter

    rules, _label = _resolve_rules(preset, rules_path)
    exit_code = run_filter(rules, source, sink, rejected=rejected, quiet=quiet)
    sys.exit(exit_code)


@cli.command("check")
@click.argument("text")
@_rules_options
def check_cmd(text: str, preset: str | None, rules_path: Path | None) -> None:
    """Check one sentence. Exits 0 if accepted, 1 if rejected."""
    from .commands.filter import run_check

    rules, _label = _resolve_rules(preset, rules_path)
    sys.exit(run_check(rules, text))


@cli.command("presets")
def presets_cmd() -> None:
    """List the bundled presets."""
    from .commands.presets import run_presets

    sys.exit(run_presets())


@cli.command("show")
@_rules_options
@click.option("--json", "output_json", is_flag=True, help="Output the rule set as JSON")
def show_cmd(preset: str | None, rules_path: Path | None, output_json: bool) -> None:
    """Show every field of a rule set."""
    from .commands.presets import run_show

    rules, label = _resolve_rules(preset, rules_path)
    sys.exit(run_show(rules, label, output_json))


def main() -> None:
    """Main entrypoint."""
    cli()


if __name__ == "__main__":
    main()
