"""
demo_report.py – Console demo: score a sample student and print the report

Run:
    python demo_report.py

Reads THINKING_STYLES_* settings from .env if present (see .env.example).
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Optional

# ── make src/ importable without installing the package ──────────────────────
sys.path.insert(0, str(Path(__file__).parent / "src"))

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from thinking_styles.config import get_settings
from thinking_styles.errors import ThinkingStylesError
from thinking_styles.guardrails import GuardrailLevel, GuardrailResult, GuardrailsPipeline
from thinking_styles.models import AssessmentReport
from thinking_styles.pipeline import ThinkingStylesPipeline

console = Console()


# ─── Sample student ──────────────────────────────────────────────────────────

def _answers(prefix: str, scores: list[int]) -> list[dict[str, Any]]:
    return [{"questionId": f"{prefix}_{i}", "score": s} for i, s in enumerate(scores, start=1)]


SAMPLE_SUBMISSIONS: dict[str, list[dict[str, Any]]] = {
    "kolb":         _answers("kolb",      [3, 4, 4, 2, 3, 4, 4, 2, 4, 4, 5, 3]),
    "sternberg":    _answers("sternberg", [5, 3, 4, 5, 2, 4, 4, 3, 3, 5, 2, 4]),
    "dual_process": _answers("dual",      [2, 5, 2, 4, 3, 5, 2, 5, 3, 4, 2, 5]),
}

LEVEL_STYLE = {
    GuardrailLevel.BLOCK: "bold red",
    GuardrailLevel.WARN:  "bold yellow",
    GuardrailLevel.INFO:  "cyan",
}


# ─── Display helpers ─────────────────────────────────────────────────────────

def _bar(mean: float, width: int = 20) -> str:
    filled = round((mean / 5) * width)
    return "█" * filled + "░" * (width - filled) + f" {mean:.1f}"


def _label(name: str) -> str:
    return name.replace("_", " ").title() if name else "[dim]n/a[/dim]"


def _bullets(items: list[str]) -> str:
    return "\n".join(f"• {x}" for x in items) if items else "[dim]None[/dim]"


def show_guardrails(result: GuardrailResult, out: Optional[Console] = None) -> None:
    out = out or console
    if not result.violations:
        out.print("[green]✅ All guardrails passed.[/green]")
        return
    table = Table(box=box.SIMPLE_HEAD, header_style="bold", padding=(0, 1))
    table.add_column("Code")
    table.add_column("Level")
    table.add_column("Message", style="white")
    for v in result.violations:
        style = LEVEL_STYLE[v.level]
        table.add_row(v.code, f"[{style}]{v.level.value}[/{style}]", v.message)
    out.print(Panel(table, title="[bold]Guardrails[/bold]", border_style="yellow"))


def show_report(report: AssessmentReport, out: Optional[Console] = None) -> None:
    """Render an AssessmentReport in a rich multi-panel layout."""
    out = out or console

    out.print()
    out.rule(f"[bold magenta]Thinking Styles Report — {report.country}[/bold magenta]")
    out.print()

    # ── Category scores ──────────────────────────────────────────────────────
    scores = Table(box=box.SIMPLE_HEAD, header_style="bold white on dark_violet", padding=(0, 1))
    scores.add_column("Assessment", style="cyan", no_wrap=True)
    scores.add_column("Category",   style="white", min_width=28)
    scores.add_column("Mean (1–5)", min_width=26)
    for a_type, cat_scores in report.category_scores.items():
        for category, mean in cat_scores.items():
            scores.add_row(_label(a_type), _label(category), _bar(mean))
    out.print(Panel(scores, title="[bold]Category Scores[/bold]", border_style="blue"))

    # ── Profile ──────────────────────────────────────────────────────────────
    profile = Table(box=box.ROUNDED, show_header=False, padding=(0, 1))
    profile.add_column("Key",   style="bold cyan", no_wrap=True)
    profile.add_column("Value", style="white")
    profile.add_row("Primary style",   _label(report.profile.primary_style))
    profile.add_row("Secondary style", _label(report.profile.secondary_style))
    profile.add_row("Strengths",       _bullets(report.profile.strengths))
    profile.add_row("Weaknesses",      _bullets(report.profile.weaknesses))
    profile.add_row("Recommendations", _bullets(report.profile.recommendations))
    profile.add_row("Learning style",  report.insights.learning_style)
    profile.add_row("Communication",   report.insights.communication_style)
    out.print(Panel(profile, title="[bold]Thinking Style Profile[/bold]", border_style="magenta"))

    # ── Education mapping ────────────────────────────────────────────────────
    edu = report.education
    if edu.is_empty():
        out.print(Panel(
            "[dim]No specific track matches this profile; speak to a career guidance counsellor.[/dim]",
            title="[bold]Education Pathways[/bold]", border_style="green",
        ))
    else:
        mapping = Table(box=box.ROUNDED, show_header=False, padding=(0, 1))
        mapping.add_column("Key",   style="bold green", no_wrap=True)
        mapping.add_column("Value", style="white")
        mapping.add_row("SHS tracks", _bullets(edu.shs_tracks))
        mapping.add_row("Tertiary programmes", "\n".join(
            f"• {p} [dim]({', '.join(report.program_institutions.get(p, [])) or 'no listed institution'})[/dim]"
            for p in edu.tertiary_programs
        ) or "[dim]None[/dim]")
        mapping.add_row("Careers",         _bullets(edu.career_suggestions))
        mapping.add_row("Learning tips",   _bullets(edu.learning_recommendations))
        out.print(Panel(mapping, title="[bold]Education Pathways[/bold]", border_style="green"))

    # ── Insights ─────────────────────────────────────────────────────────────
    out.print(Panel(
        f"[bold]Study strategies[/bold]\n{_bullets(report.insights.study_strategies)}\n\n"
        f"[bold]Career alignment[/bold]\n{_bullets(report.insights.career_alignment)}\n\n"
        f"[bold]Development areas[/bold]\n{_bullets(report.insights.development_areas)}",
        title="[bold]Insights[/bold]", border_style="cyan",
    ))

    out.print()
    out.rule("[bold green]Report complete[/bold green]")
    out.print()


# ─── Main ────────────────────────────────────────────────────────────────────

def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.logging.level_number,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    console.print()
    console.print(Panel(
        "[bold]Thinking Styles Assessment[/bold]\n"
        "[dim]" + "  •  ".join(f"{k}: {v}" for k, v in settings.status_summary().items()) + "[/dim]",
        style="on dark_violet",
        expand=False,
    ))

    pipeline = ThinkingStylesPipeline.from_settings(settings)
    guards   = GuardrailsPipeline(bank=pipeline.bank, strict=pipeline.strict)

    try:
        checks = guards.merge(*(
            guards.check_responses(a_type, responses)
            for a_type, responses in SAMPLE_SUBMISSIONS.items()
        ))
        show_guardrails(checks)
        if checks.blocked:
            sys.exit(1)

        report = pipeline.assess(SAMPLE_SUBMISSIONS)
        show_guardrails(guards.check_mapping(report.education))
        show_report(report)

    except ThinkingStylesError as e:
        console.print(f"\n[bold red]Assessment error:[/bold red] {e}")
        sys.exit(1)

    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
