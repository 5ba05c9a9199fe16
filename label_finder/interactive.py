"""Interactive CLI for Label Finder: edit labels, click topics, page through results."""

from __future__ import annotations

import contextlib
import webbrowser

try:
    import readline  # noqa: F401 - enables arrow keys / history in input()
except ImportError:
    pass

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from .config import DEFAULT_SETTINGS, SearchSettings
from .display import display_banner, display_session, display_trending_topics
from .github_client import SearchClient
from .output import write_csv, write_json
from .session import SearchSession

console = Console()


class InteractiveSession:
    """Stateful interactive CLI session."""

    def __init__(self, session: SearchSession, out: Console | None = None):
        self.session = session
        self.console = out or console

    # ── Main loop ───────────────────────────────────────────────

    def run(self) -> int:
        display_banner(self.console)
        display_trending_topics(self.session.settings.trending_topics, self.console)
        self.console.print("Type [bold]help[/bold] for available commands.")
        while True:
            try:
                line = input("\033[1;36mlabel-finder\033[0m> ").strip()
                if not line:
                    continue
                self._dispatch(line)
            except KeyboardInterrupt:
                self.console.print()
                continue
            except EOFError:
                self.console.print("\n[dim]Goodbye![/dim]")
                return 0

    # ── Dispatch ────────────────────────────────────────────────

    def _dispatch(self, raw: str):
        parts = raw.split(maxsplit=1)
        cmd = parts[0].lower()
        args = parts[1].strip() if len(parts) > 1 else ""

        handlers = {
            "labels":   self._cmd_labels,
            "search":   self._cmd_search,
            "topics":   self._cmd_topics,
            "topic":    self._cmd_topic,
            "next":     self._cmd_next,
            "n":        self._cmd_next,
            "prev":     self._cmd_prev,
            "previous": self._cmd_prev,
            "p":        self._cmd_prev,
            "page":     self._cmd_page,
            "show":     self._cmd_show,
            "open":     self._cmd_open,
            "export":   self._cmd_export,
            "clear":    self._cmd_clear,
            "help":     self._cmd_help,
            "quit":     self._cmd_quit,
            "exit":     self._cmd_quit,
        }

        handler = handlers.get(cmd)
        if handler:
            try:
                handler(args)
            except KeyboardInterrupt:
                self.console.print("\n[dim]Cancelled.[/dim]")
        else:
            self.console.print(
                f"[red]Unknown command:[/red] {escape(cmd)}. Type [bold]help[/bold] for commands."
            )

    # ── Label commands ──────────────────────────────────────────

    def _cmd_labels(self, text: str):
        """Edit the label input. A non-empty label set is searched immediately."""
        if not text:
            if self.session.label_text:
                self.console.print(f"Labels: [cyan]{escape(self.session.label_text)}[/cyan]")
            else:
                self.console.print("[yellow]Usage:[/yellow] labels <label[,label...]>")
            return
        with self._searching():
            self.session.set_label_text(text)
        self._show()

    def _cmd_search(self, text: str):
        if not text and not self.session.labels:
            self.console.print("[yellow]Usage:[/yellow] search <label[,label...]>")
            self.console.print("[dim]  Examples: search bug · search hacktoberfest, good-first-issue[/dim]")
            return
        with self._searching():
            self.session.submit(text or None)
        self._show()

    def _cmd_topics(self, _args: str):
        display_trending_topics(self.session.settings.trending_topics, self.console)

    def _cmd_topic(self, args: str):
        topics = self.session.settings.trending_topics
        if not args:
            self.console.print("[yellow]Usage:[/yellow] topic <name|number>")
            display_trending_topics(topics, self.console)
            return
        if args.isdigit():
            idx = int(args)
            if idx < 1 or idx > len(topics):
                self.console.print(f"[red]Choose 1–{len(topics)}.[/red]")
                return
            topic = topics[idx - 1]
        elif args in topics:
            topic = args
        else:
            self.console.print(f"[red]Unknown topic: {escape(args)}[/red]")
            display_trending_topics(topics, self.console)
            return
        with self._searching():
            self.session.click_topic(topic)
        self._show()

    def _cmd_clear(self, _args: str):
        self.session.set_label_text("")
        self.console.print("[dim]Labels cleared.[/dim]")

    # ── Paging commands ─────────────────────────────────────────

    def _cmd_next(self, _args: str):
        if not self._require_results():
            return
        if not self.session.next_page():
            self.console.print("[dim]Already on the last page.[/dim]")
            return
        self._show()

    def _cmd_prev(self, _args: str):
        if not self._require_results():
            return
        if not self.session.previous_page():
            self.console.print("[dim]Already on the first page.[/dim]")
            return
        self._show()

    def _cmd_page(self, args: str):
        if not self._require_results():
            return
        if args:
            try:
                page = int(args)
            except ValueError:
                self.console.print("[red]Please provide a page number.[/red]")
                return
            self.session.go_to_page(page)
        self._show()

    def _cmd_show(self, _args: str):
        self._show()

    # ── Result commands ─────────────────────────────────────────

    def _cmd_open(self, args: str):
        if not self._require_results():
            return
        try:
            row = int(args)
        except ValueError:
            self.console.print("[yellow]Usage:[/yellow] open <row>")
            return
        results = self.session.results
        if row < 1 or row > len(results):
            self.console.print(f"[red]Choose 1–{len(results)}.[/red]")
            return
        repo = results[row - 1]
        webbrowser.open_new_tab(repo.url)
        self.console.print(f"[dim]Opened {escape(repo.url)}[/dim]")

    def _cmd_export(self, args: str):
        if not self.session.results:
            self.console.print("[yellow]Nothing to export.[/yellow]")
            return
        parts = args.split(maxsplit=1)
        if len(parts) < 2 or parts[0].lower() not in ("json", "csv"):
            self.console.print("[yellow]Usage:[/yellow] export json <file>  or  export csv <file>")
            return
        fmt, path = parts[0].lower(), parts[1]
        try:
            if fmt == "json":
                write_json(path, self.session.results)
            else:
                write_csv(path, self.session.results)
        except OSError as e:
            self.console.print(f"[red]Export failed: {escape(str(e))}[/red]")
            return
        self.console.print(f"[green]Saved {len(self.session.results)} repos to {escape(path)}[/green]")

    # ── Help ────────────────────────────────────────────────────

    def _cmd_help(self, _args: str):
        tbl = Table(title="Commands", show_header=True, border_style="cyan", pad_edge=False)
        tbl.add_column("Command", style="bold cyan", min_width=26)
        tbl.add_column("Description")

        rows = [
            ("labels <a,b,...>",       "Set the labels and search right away"),
            ("search [a,b,...]",      "Search (again) and go back to page 1"),
            ("topics",                 "List trending topics"),
            ("topic <name|n>",        "Add a trending topic to the labels"),
            ("next / prev",           "Next / previous page"),
            ("page [n]",              "Show current page, or jump to page n"),
            ("show",                   "Re-display results"),
            ("open <row>",            "Open a repository in the browser"),
            ("export json|csv <file>", "Export ranked results to file"),
            ("clear",                  "Clear the labels"),
            ("help",                   "This message"),
            ("quit / exit",           "Leave interactive mode"),
        ]
        for cmd, desc in rows:
            tbl.add_row(cmd, desc)
        self.console.print(tbl)

    def _cmd_quit(self, _args: str):
        self.console.print("[dim]Goodbye![/dim]")
        raise SystemExit(0)

    # ── Helpers ─────────────────────────────────────────────────

    @contextlib.contextmanager
    def _searching(self):
        with Progress(
            SpinnerColumn(), TextColumn("[progress.description]{task.description}"),
            console=self.console, transient=True,
        ) as prog:
            prog.add_task("Searching...", total=None)
            yield

    def _show(self):
        display_session(self.session, self.console)

    def _require_results(self) -> bool:
        if self.session.results:
            return True
        self.console.print(
            "[yellow]No results. Use [bold]labels <a,b>[/bold] or [bold]search <a,b>[/bold] first.[/yellow]"
        )
        return False


def run_interactive(settings: SearchSettings = DEFAULT_SETTINGS, labels: str | None = None) -> int:
    client = SearchClient(settings.token, api_url=settings.api_url, timeout_s=settings.timeout_s)
    shell = InteractiveSession(SearchSession(client, settings))
    try:
        if labels:
            shell._cmd_labels(labels)
        return shell.run()
    finally:
        client.close()
