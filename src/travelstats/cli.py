"""Command line entry point for travelstats."""

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from pydantic import ValidationError

from travelstats.adapters.config import AppConfig, JsonOperatorDefinitionRepository
from travelstats.adapters.terminal import TerminalReportRenderer
from travelstats.adapters.traewelling import JsonExportRepository
from travelstats.application.operator_rules import DeclarativeRuleSet
from travelstats.application.services import OperatorClassificationService, StatisticsService
from travelstats.domain.contracts import ReportRendererProtocol
from travelstats.domain.models.dataset import Dataset
from travelstats.domain.models.errors import TravelstatsError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_INPUT = 1
EXIT_LOAD_ERROR = 3

Step = Callable[[StatisticsService, ReportRendererProtocol, Dataset], None]

# Report steps in output order: (flag destination, step)
STEPS: tuple[tuple[str, Step], ...] = (
    ("metadata", lambda s, r, d: r.render_metadata(s.metadata(d))),
    ("checkins", lambda s, r, d: r.render_check_ins(s.check_ins(d))),
    ("events", lambda s, r, d: r.render_count_table(s.events(d))),
    ("modes", lambda s, r, d: r.render_count_table(s.modes(d))),
    ("mode_stats", lambda s, r, d: r.render_mode_stats(s.mode_stats(d))),
    ("lines", lambda s, r, d: r.render_count_table(s.lines(d))),
    ("all_lines", lambda s, r, d: r.render_all_lines(s.all_lines(d))),
    ("operators", lambda s, r, d: r.render_count_table(s.operators(d))),
    ("seen_stations", lambda s, r, d: r.render_seen_stations(s.seen_stations(d))),
)

DEFAULT_STEPS = ("metadata", "operators")


def positive_int(value: str) -> int:
    """argparse type for limits that must be at least 1."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="travelstats",
        description="Statistics for Träwelling check-in exports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Input files are JSON exports from Träwelling (https://traewelling.de/export).
Several exports can be merged; check-ins present in more than one are counted once.

Without report options, the metadata and operators reports are shown.

Examples:
  # Operators of a year of check-ins, top 10
  travelstats --operators --top-limit 10 export-2023.json

  # Everything, merging two exports
  travelstats --all export-2023-h1.json export-2023-h2.json
        """,
    )

    parser.add_argument("files", nargs="+", type=Path, help="Träwelling export JSON file(s)")

    reports = parser.add_argument_group("reports")
    reports.add_argument(
        "--metadata",
        action="store_true",
        help="Time range, total distance and duration, current and total points",
    )
    reports.add_argument(
        "--checkins",
        action="store_true",
        help="Every check-in with times, delays, distance and speed",
    )
    reports.add_argument("--events", action="store_true", help="Check-ins per event")
    reports.add_argument("--modes", action="store_true", help="Check-ins per transit mode")
    reports.add_argument(
        "--mode-stats",
        action="store_true",
        help="Check-ins, distance, duration and speed for Fernverkehr, Regional, "
        "S-Bahn, U-Bahn, Tram and Bus",
    )
    reports.add_argument("--lines", action="store_true", help="Check-ins per line")
    reports.add_argument(
        "--all-lines",
        action="store_true",
        help="Every unique line with its endpoints and (possibly guessed) operator",
    )
    reports.add_argument("--operators", action="store_true", help="Check-ins per operator")
    reports.add_argument(
        "--seen-stations",
        action="store_true",
        help="Origin and destination stations by number of visits",
    )
    reports.add_argument("--all", action="store_true", help="Show every report")

    parser.add_argument(
        "--top-limit",
        type=positive_int,
        default=None,
        metavar="N",
        help="Maximum rows for the modes, lines and operators reports (default: all)",
    )
    parser.add_argument(
        "--operators-file",
        type=Path,
        default=None,
        metavar="PATH",
        help="Operator definitions JSON file (default: OPERATORS_FILE or operators.json)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def selected_steps(args: argparse.Namespace) -> list[tuple[str, Step]]:
    """Return the report steps to run, in output order."""
    if args.all:
        return list(STEPS)
    chosen = {name for name, _ in STEPS if getattr(args, name)}
    if not chosen:
        chosen = set(DEFAULT_STEPS)
    return [(name, step) for name, step in STEPS if name in chosen]


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = AppConfig()
    except ValidationError as e:
        print(f"error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_NO_INPUT

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.get_log_level(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    paths = []
    for path in args.files:
        if path.is_file():
            paths.append(path)
        else:
            print(f"error: file does not exist: '{path}'", file=sys.stderr)
    if not paths:
        print("error: no input file", file=sys.stderr)
        return EXIT_NO_INPUT

    top_limit = args.top_limit if args.top_limit is not None else config.top_limit
    operators_file = args.operators_file or Path(config.operators_file)

    try:
        dataset = JsonExportRepository().load(paths)
        definitions = JsonOperatorDefinitionRepository(operators_file).get_definitions()
    except TravelstatsError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_LOAD_ERROR

    classifier = OperatorClassificationService(DeclarativeRuleSet(definitions))
    statistics = StatisticsService(classifier, top_limit=top_limit)
    renderer = TerminalReportRenderer()

    for name, step in selected_steps(args):
        logger.debug(f"Running report step '{name}'")
        step(statistics, renderer, dataset)

    return EXIT_OK


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(main())


if __name__ == "__main__":
    cli_main()
