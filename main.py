"""
TWN Weather: Command-Line Weather Lookup

Reads a delimiter-separated list of cities, looks each one up on
The Weather Network in parallel, and prints current conditions per city.

Source: www.theweathernetwork.com
Search page: static HTML (curl_cffi)
Result page: JavaScript-rendered (headless Chrome)

Usage:
    python main.py                         # prompts for cities
    python main.py "Atlanta; Chicago"      # cities on the command line
    python main.py "Atlanta,Chicago" --delimiter ,
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from colorama import init, Fore, Style
from dotenv import load_dotenv

from twn_weather import __version__
from twn_weather.errors import EmptyQueryError
from twn_weather.orchestrator import run_queries
from twn_weather.providers.metrics import MetricsExtractor
from twn_weather.providers.search import SearchResolver, SITE_HOST
from twn_weather.query import DEFAULT_DELIMITER, parse_queries

# Load environment variables
load_dotenv()

LOG_DIR = "logs"
LOG_FILE = os.path.join(LOG_DIR, "twn_weather.log")

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    """argparse type for counts that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description='Look up current weather for one or more cities on The Weather Network'
    )
    parser.add_argument(
        'cities', nargs='?', default=None,
        help='Delimiter-separated list of cities (prompted for when omitted)'
    )
    parser.add_argument(
        '--delimiter', default=DEFAULT_DELIMITER,
        help=f'Separator between cities (default: "{DEFAULT_DELIMITER}")'
    )
    parser.add_argument(
        '--plain', action='store_true',
        help='Print "label: value unit" lines instead of a table'
    )
    parser.add_argument(
        '--workers', type=positive_int, default=None,
        help='Worker pool size (default: number of CPUs)'
    )
    parser.add_argument(
        '--include-airports', action='store_true',
        help='Accept airport pages as search results'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser.parse_args(argv)


def configure_logging() -> None:
    """File log gets everything at LOG_LEVEL; the console only warnings and up."""
    os.makedirs(LOG_DIR, exist_ok=True)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(os.getenv("LOG_CONSOLE_LEVEL", "WARNING"))

    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO"),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(LOG_FILE, mode='a', encoding='utf-8'),
            console
        ]
    )


def print_banner():
    """Print the source banner."""
    print(f"\n{Fore.CYAN}--> Source of information: The Weather Network, URL: {SITE_HOST}{Style.RESET_ALL}\n")


def read_query_line(args: argparse.Namespace) -> str:
    if args.cities is not None:
        return args.cities
    label = "semicolon" if args.delimiter == ";" else f'"{args.delimiter}"'
    try:
        return input(f"Enter cities in {label} separated list: ")
    except EOFError:
        return ""


def main(args: argparse.Namespace) -> int:
    """
    Run one lookup session.

    Returns:
        0 if every query completed (found or not found), 1 otherwise
    """
    print_banner()

    try:
        queries = parse_queries(read_query_line(args), delimiter=args.delimiter)
    except EmptyQueryError as e:
        print(f"{Fore.RED}{e}{Style.RESET_ALL}")
        logger.warning("[main] Empty input, nothing to look up")
        return 1

    logger.info(f"[main] Looking up {len(queries)} locations: {queries}")

    outcomes = run_queries(
        queries,
        resolver=SearchResolver(reject_airports=not args.include_airports),
        extractor=MetricsExtractor(),
        plain=args.plain,
        max_workers=args.workers
    )

    failed = [o.query for o in outcomes if o.failed]
    print()
    if failed:
        print(f"{Fore.RED}Completed {len(outcomes)} lookups, {len(failed)} failed: {', '.join(failed)}{Style.RESET_ALL}")
        print(f"See {LOG_FILE} for details.")
        return 1

    print(f"{Fore.GREEN}Completed {len(outcomes)} lookups.{Style.RESET_ALL}")
    return 0


def cli() -> None:
    """Console script entry point."""
    init()
    args = parse_args()
    configure_logging()
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
