"""Rich terminal output for a search session."""

from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import RepoAggregate
from .session import SearchSession

console = Console()


def count_color(count: int) -> str:
    if count >= 10:
        return "green"
    if count >= 3:
        return "yellow"
    return "white"


def display_banner(out: Optional[Console] = None):
    out = out or console
    out.print(Panel(
        "[bold cyan]GitHub Issue Finder[/bold cyan]\n"
        "[dim]Search for GitHub issues by multiple labels[/dim]",
        border_style="cyan",
        expand=False,
    ))


def label_badges(labels: list[str]) -> Text:
    badges = Text()
    for i, label in enumerate(labels):
        if i:
            badges.append(" ")
        badges.append(f" {label} ", style="black on bright_white")
    return badges


def display_trending_topics(topics: tuple[str, ...], out: Optional[Console] = None):
    out = out or console
    line = Text("Trending Topics: ", style="bold")
    for i, topic in enumerate(topics, 1):
        line.append(f"[{i}] ", style="dim")
        line.append(topic, style="cyan")
        line.append("  ")
    out.print(line)


def results_table(rows: list[RepoAggregate], first_row: int = 1) -> Table:
    table = Table(box=box.ROUNDED, show_lines=False)
    table.add_column("#", justify="right", style="bold white", width=4)
    table.add_column("Repository", style="cyan")
    table.add_column("Issue Count", justify="right")

    for i, repo in enumerate(rows, first_row):
        table.add_row(
            str(i),
            f"[link={repo.url}]{escape(repo.repo)}[/link]",
            Text(str(repo.count), style=count_color(repo.count)),
        )
    return table


def pager_line(current: int, total: int) -> Text:
    can_prev = current > 1
    can_next = current < total
    line = Text()
    line.append("< Previous", style="bold" if can_prev else "dim")
    line.append(f"   Page {current} of {total}   ")
    line.append("Next >", style="bold" if can_next else "dim")
    return line


def display_session(session: SearchSession, out: Optional[Console] = None):
    """Render labels, error, the current page of results and the pager."""
    out = out or console

    if session.label_text:
        out.print(label_badges(session.labels))

    if session.loading:
        out.print("[dim]Searching...[/dim]")
        return

    if session.error:
        out.print(f"[red]{escape(session.error)}[/red]")
        return

    if not session.results:
        if session.label_text:
            out.print("[yellow]No repositories found.[/yellow]")
        return

    out.print(results_table(session.visible_results, session.first_row_number))
    if session.show_pager:
        out.print(pager_line(session.page.current, session.total_pages))
