from __future__ import annotations

"""Smoke test against the live Qiita API.

Runs a handful of read-only operations and prints the results. An access
token is read from QIITA_ACCESS_TOKEN (or `.env`); without one the
following-check step reports the unauthorized error instead.

Usage (with uv):

    uv run python script/smoke.py --user muiscript --page 7 --per-page 50
"""

import argparse
import sys
from typing import Sequence

from loguru import logger
from rich.console import Console
from rich.table import Table

from qiita import HttpCallError, PaginationError, QiitaClient
from qiita.config import get_settings

console = Console()
log = logger.bind(module="script.smoke")


def _configure_logging(level: str) -> None:
    """Route loguru output (including the library's own) to stderr."""

    logger.remove()
    logger.add(
        sys.stderr,
        level=level.upper(),
        backtrace=False,
        diagnose=False,
    )
    logger.enable("qiita")
    log.info("Smoke logging initialised at level {}", level.upper())


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Exercise the Qiita client against the live API.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--user", default="muiscript", help="User id to fetch.")
    parser.add_argument(
        "--follow-check",
        nargs="*",
        default=["mizchi", "yaotti"],
        help="User ids to run the following-check against.",
    )
    parser.add_argument("--page", type=int, default=7, help="Page of /users to list.")
    parser.add_argument("--per-page", type=int, default=50, help="Page size of /users.")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(list(argv) if argv is not None else None)
    settings = get_settings()
    _configure_logging(args.log_level or settings.log_level)

    with QiitaClient.from_settings(settings, reuse_connections=True) as client:
        try:
            user = client.users.get(args.user)
        except HttpCallError as exc:
            console.log(f"[bold red]get user failed[/] {exc}")
            return 1
        console.log(f"[bold green]got user[/] {user.id} ({user.name or '-'})")

        for target in args.follow_check:
            try:
                following = client.users.is_following(target)
            except HttpCallError as exc:
                console.log(f"[yellow]following check skipped[/] @{target}: {exc}")
                continue
            console.log(f"following @{target}: {following}")

        try:
            users_page = client.users.list(page=args.page, per_page=args.per_page)
        except (HttpCallError, PaginationError) as exc:
            console.log(f"[bold red]list users failed[/] {exc}")
            return 1

    summary = users_page.pagination
    table = Table(title=f"users page {summary.page}/{summary.last_page} (total {summary.total_count})")
    table.add_column("id")
    table.add_column("items", justify="right")
    table.add_column("followers", justify="right")
    for row in users_page.items:
        table.add_row(row.id, str(row.items_count), str(row.followers_count))
    console.print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
