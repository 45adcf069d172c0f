from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Sequence
from typing import TextIO

from blogsum.client.clipboard import copy_to_system_clipboard
from blogsum.client.config import ClientSettings
from blogsum.client.errors import StructuredError
from blogsum.client.http import SummaryApiClient
from blogsum.client.presentation import present
from blogsum.client.session import SummarizerSession
from blogsum.client.validation import BlogUrlPolicy
from blogsum.core.logging import setup_logging
from blogsum.schemas.summaries import SummaryResult

_ANSI = {
    "red": "\x1b[31m",
    "orange": "\x1b[38;5;208m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
}
_RESET = "\x1b[0m"


def _paint(text: str, color: str, enabled: bool) -> str:
    if not enabled or color not in _ANSI:
        return text
    return f"{_ANSI[color]}{text}{_RESET}"


def render_error(error: StructuredError, *, out: TextIO, color: bool = False) -> None:
    presentation = present(error)
    out.write(_paint(f"[{presentation.icon}] {error.message}", presentation.color, color) + "\n")
    if error.details and presentation.hint:
        out.write(f"  {presentation.hint}\n")
    if error.recoverable:
        out.write("  Run the command again to retry.\n")


def render_result(result: SummaryResult, *, tab: str, out: TextIO) -> None:
    out.write(f"{result.title}\n")
    out.write(f"{result.reading_time or 'N/A'} | {result.word_count or 'N/A'}\n\n")
    if tab in ("english", "both"):
        out.write("English Summary\n")
        out.write(f"{result.english_summary}\n\n")
    if tab in ("urdu", "both"):
        out.write("Urdu Summary\n")
        out.write(f"{result.urdu_summary}\n\n")
    for point in result.key_points:
        out.write(f"- {point}\n")


async def _summarize(args: argparse.Namespace, settings: ClientSettings, out: TextIO) -> int:
    def report_retry(attempt: int, delay: float, _exc: Exception) -> None:
        out.write(f"Retry attempt {attempt}/{settings.max_retries} in {delay:g}s...\n")

    session = SummarizerSession(
        SummaryApiClient(args.api_url or settings.api_url, timeout_seconds=settings.timeout_seconds),
        policy=BlogUrlPolicy(args.blog_policy or settings.blog_url_policy),
        timeout_seconds=settings.timeout_seconds,
        max_retries=settings.max_retries,
        base_delay=settings.retry_base_delay,
        on_retry=report_retry,
    )
    session.set_url(args.url)
    color = out.isatty()

    result = await session.submit()
    if session.warning is not None:
        render_error(session.warning, out=out, color=color)
    if result is None:
        if session.error is not None:
            render_error(session.error, out=out, color=color)
        return 1

    render_result(result, tab=args.tab, out=out)
    if args.copy:
        session.select_tab("urdu" if args.tab == "urdu" else "english")
        if not session.copy_active_summary(copy_to_system_clipboard) and session.error is not None:
            render_error(session.error, out=out, color=color)
            return 1
        out.write(f"Copied {session.active_tab} summary to clipboard.\n")
    return 0


def _serve(args: argparse.Namespace) -> int:
    import uvicorn

    uvicorn.run(
        "blogsum.api.app:build_default_app",
        factory=True,
        host=args.host,
        port=args.port,
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="blogsum", description="Summarize blog posts in English and Urdu.")
    parser.add_argument("--verbose", action="store_true", help="Emit debug logs.")
    commands = parser.add_subparsers(dest="command", required=True)

    summarize = commands.add_parser("summarize", help="Summarize a blog URL via the API.")
    summarize.add_argument("url")
    summarize.add_argument("--api-url", default=None, help="Base URL of the blogsum API.")
    summarize.add_argument(
        "--blog-policy",
        choices=[policy.value for policy in BlogUrlPolicy],
        default=None,
        help="How to treat URLs that do not look like blogs.",
    )
    summarize.add_argument("--tab", choices=["english", "urdu", "both"], default="both")
    summarize.add_argument("--copy", action="store_true", help="Copy the summary to the clipboard.")

    serve = commands.add_parser("serve", help="Run the API server.")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)
    return parser


def main(argv: Sequence[str] | None = None, *, out: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    out = out or sys.stdout
    if args.verbose:
        setup_logging(log_level="DEBUG")

    if args.command == "serve":
        return _serve(args)
    return asyncio.run(_summarize(args, ClientSettings(), out))


if __name__ == "__main__":
    sys.exit(main())
