"""Click CLI entry point for nanoprompt.

Provides the `nanoprompt analyze`, `enhance`, `vary`, and `premium-url`
commands. Options can also be set through NANOPROMPT_* environment
variables (e.g. NANOPROMPT_VERBOSE=1).
"""

from __future__ import annotations

import logging
import sys
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from nanoprompt import __version__
from nanoprompt.analyzer import analyze
from nanoprompt.enhancer import enhance, rank_enhancements
from nanoprompt.exceptions import InvalidArgumentError
from nanoprompt.reporter import (
    render_json,
    render_markdown,
    render_ranking_json,
    render_ranking_text,
    render_text,
    render_variations_json,
    render_variations_text,
)
from nanoprompt.resources import get_premium_url
from nanoprompt.variations import generate_variations

console = Console()


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logger = logging.getLogger("nanoprompt")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


def _fail(message: str) -> NoReturn:
    console.print(f"[red]Error:[/] {escape(message)}")
    raise SystemExit(1)


def _read_prompt(prompt_text: str | None, file: str | None) -> str:
    """Resolve the prompt from the argument, a file, or stdin."""
    if prompt_text:
        return prompt_text

    if file:
        try:
            with open(file, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            _fail(f"File not found: {file}")
        except OSError as e:
            _fail(f"Could not read file: {e}")

    # Try reading from stdin (piped input)
    if not sys.stdin.isatty():
        return sys.stdin.read()

    console.print("[red]Error:[/] No prompt provided.")
    console.print("Pass a prompt as an argument, use --file, or pipe via stdin.")
    console.print()
    console.print("  nanoprompt analyze \"Your prompt here\"")
    console.print("  nanoprompt analyze --file prompt.txt")
    console.print("  echo \"Your prompt\" | nanoprompt analyze")
    raise SystemExit(1)


def _parse_substitutions(ctx, param, values: tuple[str, ...]) -> dict[str, list[str]]:
    """Collect KEYWORD=REPLACEMENT pairs; repeated keywords accumulate."""
    substitutions: dict[str, list[str]] = {}
    for item in values:
        keyword, sep, replacement = item.partition("=")
        if not sep or not keyword:
            raise click.BadParameter(f"expected KEYWORD=REPLACEMENT, got {item!r}")
        substitutions.setdefault(keyword, []).append(replacement)
    return substitutions


@click.group()
@click.version_option(version=__version__, prog_name="nanoprompt")
@click.option("--verbose", "-v", is_flag=True, help="Log debug details to stderr.")
def cli(verbose: bool) -> None:
    """nanoprompt -- Enhance, analyze, and vary your prompts."""
    _configure_logging(verbose)


@cli.command("analyze")
@click.argument("prompt_text", required=False, default=None)
@click.option("--file", "-f", type=str, help="Read prompt from a file.")
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON.")
@click.option("--markdown", "output_md", is_flag=True, help="Output results as Markdown.")
def analyze_cmd(
    prompt_text: str | None,
    file: str | None,
    output_json: bool,
    output_md: bool,
) -> None:
    """Score a prompt's clarity and get improvement suggestions.

    \b
    Examples:
        nanoprompt analyze "fix it"
        nanoprompt analyze --file my_prompt.txt --json
        echo "Draw a cat" | nanoprompt analyze --markdown
    """
    prompt = _read_prompt(prompt_text, file)

    if not prompt.strip():
        _fail("Prompt is empty.")

    result = analyze(prompt)

    if output_json:
        click.echo(render_json(result))
    elif output_md:
        click.echo(render_markdown(result))
    else:
        render_text(result, console=console)


@cli.command("enhance")
@click.argument("base_prompt")
@click.option(
    "--enhancement", "-e", "enhancements", multiple=True,
    help="Candidate text to append (repeatable).",
)
@click.option(
    "--weight", "-w", "weights", multiple=True, type=float,
    help="Weight of the matching --enhancement (repeatable, same order).",
)
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON.")
def enhance_cmd(
    base_prompt: str,
    enhancements: tuple[str, ...],
    weights: tuple[float, ...],
    output_json: bool,
) -> None:
    """Append the highest-weighted enhancement to BASE_PROMPT.

    \b
    Example:
        nanoprompt enhance "Draw a cat" -e "in vivid color" -w 1 -e "with fine detail" -w 3
    """
    try:
        ranking = rank_enhancements(enhancements, weights)
        enhanced = enhance(base_prompt, enhancements, weights)
    except InvalidArgumentError as e:
        _fail(str(e))

    if output_json:
        click.echo(render_ranking_json(enhanced, ranking))
    else:
        render_ranking_text(enhanced, ranking, console=console)


@cli.command("vary")
@click.argument("seed_prompt")
@click.option(
    "--sub", "-s", "substitutions", multiple=True, callback=_parse_substitutions,
    help="KEYWORD=REPLACEMENT (repeatable; repeat a keyword to add replacements).",
)
@click.option("--json", "output_json", is_flag=True, help="Output results as JSON.")
def vary_cmd(seed_prompt: str, substitutions: dict[str, list[str]], output_json: bool) -> None:
    """Generate variations of SEED_PROMPT by keyword substitution.

    \b
    Example:
        nanoprompt vary "a cat on a mat" -s cat=dog -s cat=fox -s mat=rug
    """
    try:
        variations = generate_variations(seed_prompt, substitutions)
    except InvalidArgumentError as e:
        _fail(str(e))

    if output_json:
        click.echo(render_variations_json(seed_prompt, variations))
    else:
        render_variations_text(seed_prompt, variations, console=console)


@cli.command("premium-url")
def premium_url_cmd() -> None:
    """Print the URL of the premium prompt collection."""
    click.echo(get_premium_url())


def main() -> None:
    """Entry point for the CLI."""
    cli(auto_envvar_prefix="NANOPROMPT")


if __name__ == "__main__":
    main()
