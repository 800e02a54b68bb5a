#!/usr/bin/env python3
"""
Daily Quotes - random quotes with tag filters and a short history.

Command-line entry point:
  - Fetch a random quote (optionally for one tag) and print it
  - Fetch several in a row and show the in-memory history
  - Print the share text for the last quote
  - Start the web view

Usage:
    python main.py                      # One random quote
    python main.py --tag wisdom         # One quote tagged "wisdom"
    python main.py --count 5 --history  # Five quotes, then the history
    python main.py --share              # Print share text for the quote
    python main.py --serve              # Start the web view

Examples:
    # Three life quotes, verbose logging
    python main.py -t life -c 3 -v

    # Web view on another port
    python main.py --serve --port 8080
"""

import argparse
import sys

from daily_quotes import __version__
from daily_quotes.config import (
    QUOTE_TAGS,
    REQUEST_TIMEOUT,
    WEB_PORT,
    print_config_summary,
    validate_config,
)
from daily_quotes.controller import QuoteController, inline_runner
from daily_quotes.log import configure_logging
from daily_quotes.models.quote import Quote
from daily_quotes.providers import QuotableProvider, QuoteProvider
from daily_quotes.share import ConsoleShare
from daily_quotes.state import Lifecycle


def create_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="daily-quotes",
        description="Fetch random quotes, optionally filtered by tag.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                           One random quote
  %(prog)s --tag wisdom              One quote tagged "wisdom"
  %(prog)s --count 5 --history       Five quotes, then print the history
  %(prog)s --share                   Print the share text of the quote
  %(prog)s --serve --port 8080       Start the web view on port 8080
        """,
    )

    parser.add_argument(
        "--tag", "-t",
        choices=list(QUOTE_TAGS),
        default=None,
        help="Only fetch quotes with this tag",
    )

    parser.add_argument(
        "--count", "-c",
        type=int,
        default=1,
        metavar="N",
        help="Number of quotes to fetch (default: 1)",
    )

    parser.add_argument(
        "--history",
        action="store_true",
        help="Print the quote history after fetching",
    )

    parser.add_argument(
        "--share", "-s",
        action="store_true",
        help="Print the share text of the last quote",
    )

    # Web options
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Start the web view instead of printing quotes",
    )

    parser.add_argument(
        "--port", "-p",
        type=int,
        default=WEB_PORT,
        help=f"Port for --serve (default: {WEB_PORT})",
    )

    # Output options
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging",
    )

    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print quotes",
    )

    # Info options
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Show current configuration and exit",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def show_config() -> None:
    """Display current configuration."""
    print("=" * 60)
    print("Daily Quotes Configuration")
    print("=" * 60)
    print_config_summary()

    errors = validate_config()
    if errors:
        print("\nConfiguration warnings:")
        for error in errors:
            print(f"  ⚠️  {error}")
    else:
        print("\n✓ Configuration valid")
    print("=" * 60)


def format_quote(quote: Quote) -> str:
    """Render a quote for the terminal."""
    lines = [f'"{quote.content}"', f"    - {quote.author}"]
    if quote.tags:
        lines.append(f"    [{', '.join(quote.tags)}]")
    return "\n".join(lines)


def fetch_quotes(controller: QuoteController, count: int, tag: str = None) -> int:
    """
    Issue ``count`` requests and wait for each to settle.

    Returns:
        Number of requests that produced a quote.
    """
    succeeded = 0
    for _ in range(count):
        controller.request_quote(tag)
        controller.wait_idle(timeout=REQUEST_TIMEOUT + 5)
        if controller.state.lifecycle is Lifecycle.LOADED:
            succeeded += 1
    return succeeded


def main(argv: list = None, provider: QuoteProvider = None) -> int:
    """
    Main entry point.

    Args:
        argv: Command-line arguments (default: sys.argv[1:]).
        provider: Quote provider override (default: QuotableProvider).

    Returns:
        Exit code (0 = success, 1 = no quote fetched).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.count < 1:
        parser.error("--count must be at least 1")

    if args.show_config:
        show_config()
        return 0

    configure_logging("DEBUG" if args.verbose else ("ERROR" if args.quiet else None))

    if args.serve:
        from web.app import run
        run(port=args.port)
        return 0

    controller = QuoteController(
        provider or QuotableProvider(),
        share_fallback=ConsoleShare(),
        runner=inline_runner,
    )

    try:
        succeeded = fetch_quotes(controller, args.count, args.tag)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        return 130

    state = controller.state
    if state.current_quote is None:
        print("❌ Could not fetch a quote")
        return 1

    print(format_quote(state.current_quote))

    if not args.quiet and succeeded < args.count:
        print(f"\n⚠️  {args.count - succeeded} of {args.count} requests failed")

    if args.history:
        print("\nHistory:")
        for index, quote in enumerate(state.history):
            print(f"  {index}. {quote.share_text}")

    if args.share:
        controller.share()
        outcome = controller.last_share
        if not args.quiet and outcome and outcome.notice:
            print(outcome.notice)

    return 0


if __name__ == "__main__":
    sys.exit(main())
