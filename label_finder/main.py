#!/usr/bin/env python3
"""Label Finder CLI - rank GitHub repositories by issues matching a set of labels."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from rich.console import Console
from rich.logging import RichHandler

from .config import DEFAULT_SETTINGS, SearchSettings
from .display import display_session
from .github_client import SearchClient, resolve_token
from .output import write_csv, write_json
from .query import build_query
from .session import SearchSession

console = Console()


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search GitHub issues by labels and rank repositories by matching issues."
    )
    parser.add_argument(
        "labels", nargs="?", default=None,
        help="Comma-separated labels, e.g. 'hacktoberfest, good-first-issue'",
    )
    parser.add_argument(
        "--page", type=int, default=1,
        help="Result page to show (10 repositories per page, default: 1)",
    )
    parser.add_argument(
        "--token", default=None,
        help="GitHub token (or set GITHUB_TOKEN). Higher rate limits with token.",
    )
    parser.add_argument(
        "--json", type=str, default=None,
        help="Write all ranked repositories to a JSON file",
    )
    parser.add_argument(
        "--csv", type=str, default=None,
        help="Write all ranked repositories to a CSV file",
    )
    parser.add_argument(
        "-i", "--interactive", action="store_true", default=False,
        help="Launch interactive mode (edit labels, pick topics, page through results)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", default=False,
        help="Log requests and responses",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    try:
        return _main_inner(argv)
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/yellow]")
        return 130


def _main_inner(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    settings = replace(DEFAULT_SETTINGS, token=resolve_token(args.token))

    if args.interactive or not args.labels:
        from .interactive import run_interactive
        return run_interactive(settings, labels=args.labels)

    return run_search(args.labels, settings, page=args.page, json_out=args.json, csv_out=args.csv)


def run_search(
    labels: str,
    settings: SearchSettings = DEFAULT_SETTINGS,
    *,
    page: int = 1,
    json_out: str | None = None,
    csv_out: str | None = None,
    client: SearchClient | None = None,
) -> int:
    """One-shot search: submit ``labels``, print one page, optionally export."""
    if not build_query(labels):
        console.print("[red]No labels given.[/red] Pass comma-separated labels, e.g. [bold]bug, help-wanted[/bold]")
        return 2
    owned = client is None
    client = client or SearchClient(settings.token, api_url=settings.api_url, timeout_s=settings.timeout_s)
    session = SearchSession(client, settings)

    try:
        with console.status("Searching..."):
            session.submit(labels)
    finally:
        if owned:
            client.close()
    if page != 1:
        session.go_to_page(page)
    display_session(session, console)

    if session.error:
        return 1

    if json_out:
        write_json(json_out, session.results)
        console.print(f"[green]Saved to {json_out}[/green]")
    if csv_out:
        write_csv(csv_out, session.results)
        console.print(f"[green]Saved to {csv_out}[/green]")
    return 0


if __name__ == "__main__":
    sys.exit(main())
