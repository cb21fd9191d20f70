"""Output formatting for nanoprompt results.

Analysis results support three output modes:
    - text     Rich terminal output with colors, panels, and a score bar
    - json     Machine-readable JSON
    - markdown Markdown-formatted report (good for pasting into docs)

Enhancement rankings and variation sets render as text or JSON.
"""

from __future__ import annotations

import json
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from nanoprompt.analyzer import AnalysisResult
from nanoprompt.enhancer import WeightedEnhancement


def _score_color(score: int) -> str:
    """Return a Rich color name based on a 0-100 score."""
    if score >= 90:
        return "green"
    if score >= 75:
        return "yellow"
    if score >= 60:
        return "dark_orange"
    return "red"


def _score_bar(score: int, width: int = 20) -> str:
    """Build a text-based progress bar for a score (0-100)."""
    filled = round((score / 100) * width)
    empty = width - filled
    return f"[{'=' * filled}{'-' * empty}]"


def _severity_color(severity_value: str) -> str:
    """Map severity level to a color."""
    return {"high": "red", "medium": "yellow", "low": "blue"}.get(severity_value, "white")


# ---------------------------------------------------------------------------
# Analysis: Rich (text) output
# ---------------------------------------------------------------------------

def render_text(result: AnalysisResult, console: Optional[Console] = None) -> None:
    """Print a formatted analysis report to the terminal using Rich."""
    if console is None:
        console = Console()

    console.print()
    console.print(
        Panel(
            Text("Prompt Analysis Report", style="bold cyan", justify="center"),
            border_style="cyan",
        )
    )
    console.print()

    # Prompt preview (truncated if long)
    preview = result.prompt[:200]
    if len(result.prompt) > 200:
        preview += "..."
    console.print(Panel(Text(preview), title="Prompt", border_style="dim"))
    console.print()

    color = _score_color(result.clarity_score)
    console.print(
        f"  [bold]Clarity Score:[/] [{color} bold]{result.clarity_score}/100[/] ({result.label})"
    )
    console.print(f"  {_score_bar(result.clarity_score, 30)}")
    console.print()

    if result.findings:
        console.print("[bold red]Issues Found[/]")
        console.print()
        for finding in result.findings:
            check = finding.check
            sev_color = _severity_color(check.severity.value)
            console.print(
                f"  [{sev_color}]\\[{check.severity.value.upper()}][/] "
                f"[bold]{check.name}[/] [dim](-{check.penalty})[/]"
            )
            console.print(f"      {check.description}")
            if finding.evidence:
                console.print(f"      [dim]Evidence: {escape(finding.evidence)}[/]")
            console.print()

    if result.suggestions:
        console.print("[bold green]Suggestions for Improvement[/]")
        console.print()
        for i, suggestion in enumerate(result.suggestions, 1):
            console.print(f"  {i}. {suggestion}")
            console.print()
    else:
        console.print("[green]No issues found.[/]")
        console.print()


# ---------------------------------------------------------------------------
# Analysis: JSON output
# ---------------------------------------------------------------------------

def render_json(result: AnalysisResult) -> str:
    """Return the analysis as a JSON string."""
    data = {
        "prompt": result.prompt,
        "clarity_score": result.clarity_score,
        "label": result.label,
        "findings": [
            {
                "id": f.check.id,
                "name": f.check.name,
                "severity": f.check.severity.value,
                "penalty": f.check.penalty,
                "description": f.check.description,
                "evidence": f.evidence,
            }
            for f in result.findings
        ],
        "suggestions": result.suggestions,
    }
    return json.dumps(data, indent=2)


# ---------------------------------------------------------------------------
# Analysis: Markdown output
# ---------------------------------------------------------------------------

def render_markdown(result: AnalysisResult) -> str:
    """Return the analysis as a Markdown-formatted string."""
    lines: list[str] = []

    lines.append("# Prompt Analysis Report")
    lines.append("")

    lines.append("## Prompt")
    lines.append("")
    lines.append(f"> {result.prompt}")
    lines.append("")

    lines.append(f"## Clarity Score: {result.clarity_score}/100 ({result.label})")
    lines.append("")

    if result.findings:
        lines.append("## Findings")
        lines.append("")
        lines.append("| Check | Severity | Penalty | Evidence |")
        lines.append("|-------|----------|---------|----------|")
        for f in result.findings:
            lines.append(
                f"| {f.check.name} | {f.check.severity.value.upper()} "
                f"| -{f.check.penalty} | {f.evidence} |"
            )
        lines.append("")

    if result.suggestions:
        lines.append("## Suggestions")
        lines.append("")
        for i, suggestion in enumerate(result.suggestions, 1):
            lines.append(f"{i}. {suggestion}")
        lines.append("")

    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Enhancement ranking
# ---------------------------------------------------------------------------

def render_ranking_text(
    enhanced_prompt: str,
    ranking: Sequence[WeightedEnhancement],
    console: Optional[Console] = None,
) -> None:
    """Print the enhanced prompt and the full candidate ranking."""
    if console is None:
        console = Console()

    console.print(Panel(Text(enhanced_prompt), title="Enhanced Prompt", border_style="magenta"))

    table = Table(title="Candidate Ranking", show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Enhancement", min_width=20)
    table.add_column("Weight", justify="right")
    for i, candidate in enumerate(ranking, 1):
        style = "green" if i == 1 else ""
        table.add_row(str(i), Text(candidate.text, style=style), f"{candidate.weight:.3f}")
    console.print(table)


def render_ranking_json(enhanced_prompt: str, ranking: Sequence[WeightedEnhancement]) -> str:
    """Return the enhanced prompt and ranking as a JSON string."""
    data = {
        "enhanced_prompt": enhanced_prompt,
        "ranking": [{"text": c.text, "weight": c.weight} for c in ranking],
    }
    return json.dumps(data, indent=2)


# ---------------------------------------------------------------------------
# Variations
# ---------------------------------------------------------------------------

def render_variations_text(
    seed_prompt: str,
    variations: Sequence[str],
    console: Optional[Console] = None,
) -> None:
    """Print each generated variation on its own numbered line."""
    if console is None:
        console = Console()

    console.print(Panel(Text(seed_prompt), title="Seed Prompt", border_style="dim"))
    if not variations:
        console.print("[yellow]No variations generated.[/]")
        return
    for i, variation in enumerate(variations, 1):
        console.print(f"  {i}. {escape(variation)}")


def render_variations_json(seed_prompt: str, variations: Sequence[str]) -> str:
    """Return the seed prompt and its variations as a JSON string."""
    return json.dumps({"seed_prompt": seed_prompt, "variations": list(variations)}, indent=2)
