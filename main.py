# main.py
"""Command line entry point for the sentiment classifier."""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from dotenv import load_dotenv
from pydantic import ValidationError

from src.analyzers import SentimentAnalyzer
from src.config import AnalysisSettings, RuntimeEnvironment, configure_logging, load_settings
from src.config.logging_setup import bootstrap_logging
from src.inputs import InputFileError, from_file, from_text
from src.notifications import ConsoleReporter
from src.orchestrator import SentimentRunner

logger = logging.getLogger(__name__)

VERSION = "1.0"
SUBCOMMANDS = ("analyze", "analyze-file")
THRESHOLD_ORDER_ERROR = "Error: Positive threshold must be greater than negative threshold"


def _add_common_options(parser: argparse.ArgumentParser, default_config: str) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(default_config),
        help=f"YAML configuration file (default: {default_config}, or set SENTIMENT_CONFIG)",
    )
    parser.add_argument(
        "--pos-threshold",
        type=float,
        default=None,
        help="Compound score at or above which text is Positive (default: 0.05)",
    )
    parser.add_argument(
        "--neg-threshold",
        type=float,
        default=None,
        help="Compound score at or below which text is Negative (default: -0.05)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show the pos/neg/neu breakdown",
    )


def build_parser(default_config: str) -> argparse.ArgumentParser:
    """Parser for the `analyze` / `analyze-file` subcommands."""
    parser = argparse.ArgumentParser(
        prog="sentiment",
        description="Classify the sentiment of text as Positive, Negative or Neutral",
    )
    parser.add_argument("--version", action="version", version=f"sentiment {VERSION}")
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Analyze a single text")
    analyze.add_argument("input", metavar="text", help="Text to analyze")
    _add_common_options(analyze, default_config)

    analyze_file = sub.add_parser("analyze-file", help="Analyze a file line by line")
    analyze_file.add_argument("input", metavar="file", help="Path of the file to analyze")
    _add_common_options(analyze_file, default_config)

    return parser


def build_legacy_parser(default_config: str) -> argparse.ArgumentParser:
    """Parser for the flat form: sentiment <input> [--file]."""
    parser = argparse.ArgumentParser(
        prog="sentiment",
        description="Classify the sentiment of text as Positive, Negative or Neutral",
        epilog=f"Subcommands are also available: {', '.join(SUBCOMMANDS)}",
    )
    parser.add_argument("--version", action="version", version=f"sentiment {VERSION}")
    parser.add_argument("input", help="Text to analyze, or a file path with --file")
    parser.add_argument(
        "--file",
        dest="file_mode",
        action="store_true",
        help="Treat input as a file path and analyze it line by line",
    )
    _add_common_options(parser, default_config)
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments.

    Both forms produce a namespace with `command` set to one of SUBCOMMANDS.
    """
    argv = list(sys.argv[1:] if argv is None else argv)

    load_dotenv()
    default_config = RuntimeEnvironment().config

    if argv and argv[0] in SUBCOMMANDS:
        return build_parser(default_config).parse_args(argv)

    args = build_legacy_parser(default_config).parse_args(argv)
    args.command = "analyze-file" if args.file_mode else "analyze"
    return args


def resolve_analysis_settings(
    settings: AnalysisSettings, args: argparse.Namespace
) -> Optional[AnalysisSettings]:
    """Apply command line overrides and validate the threshold order.

    Returns:
        The effective settings, or None if the positive threshold is not
        above the negative one.
    """
    effective = settings.with_overrides(
        positive_threshold=args.pos_threshold,
        negative_threshold=args.neg_threshold,
        verbose=args.verbose,
    )
    try:
        _ = effective.thresholds
    except ValidationError:
        logger.debug(
            f"Rejected thresholds: positive={effective.positive_threshold} "
            f"negative={effective.negative_threshold}"
        )
        return None
    return effective


def build_analyzer(settings: AnalysisSettings) -> SentimentAnalyzer:
    return SentimentAnalyzer(
        thresholds=settings.thresholds,
        include_compound=settings.include_compound,
        include_individual=settings.include_individual,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the classifier and return the process exit code."""
    bootstrap_logging()
    args = parse_args(argv)

    settings = load_settings(args.config)
    configure_logging(settings.logging)
    analysis = resolve_analysis_settings(settings.analysis, args)
    if analysis is None:
        print(THRESHOLD_ORDER_ERROR, file=sys.stderr)
        return 1

    runner = SentimentRunner(analyzer=build_analyzer(analysis), reporter=ConsoleReporter())

    if args.command == "analyze-file":
        units = from_file(Path(args.input))
    else:
        units = from_text(args.input)

    try:
        runner.run(units)
    except InputFileError as e:
        logger.debug(f"Input file failure: {e.cause!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.debug(f"I/O failure while reading {args.input}: {e!r}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
