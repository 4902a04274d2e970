"""Command-line interface for the segmentation pipelines."""

import argparse
import logging
import sys
from pathlib import Path

from .api import configure
from .batch import TOKEN_DELIMITER, BatchSegmenter
from .config import Config
from .models import Language
from .profiles import DEFAULT_PROFILES, list_profiles

LANGUAGE_CHOICES = [language.code for language in Language]


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ftparser",
        description="Segment Japanese, Korean and Thai text for full-text indexing",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Segment text given on the command line
  ftparser segment --language ja "私は学生です"

  # Segment a file line by line into results/jp_<timestamp>.txt
  ftparser batch --language ja data/input.txt

  # Use a config file selecting other profiles
  ftparser batch --language th --config config.yaml data/thai.txt

  # Show the profile table
  ftparser profiles
        """,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    segment_parser = subparsers.add_parser("segment", help="Segment text arguments")
    setup_common_arguments(segment_parser)
    segment_parser.add_argument("text", nargs="+", help="Text to segment")

    batch_parser = subparsers.add_parser("batch", help="Segment a text file line by line")
    setup_common_arguments(batch_parser)
    batch_parser.add_argument("input", type=Path, help="Path to UTF-8 input file")
    batch_parser.add_argument(
        "--results-dir",
        type=Path,
        help="Output directory for result files (default: results)",
    )
    batch_parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar",
    )

    profiles_parser = subparsers.add_parser("profiles", help="List segmentation profiles")
    profiles_parser.add_argument(
        "--language",
        "-l",
        choices=LANGUAGE_CHOICES,
        help="Only list profiles of this language",
    )

    return parser


def setup_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Setup arguments shared by segment and batch."""
    parser.add_argument(
        "--language",
        "-l",
        choices=LANGUAGE_CHOICES,
        required=True,
        help="Language of the text",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--profile",
        help="Profile to use instead of the configured one",
    )


def build_config(args: argparse.Namespace) -> Config:
    """Build configuration from arguments."""
    if getattr(args, "config", None):
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    if getattr(args, "profile", None):
        language = Language.parse(args.language)
        data = config.model_dump()
        data[language.name.lower()]["profile"] = args.profile
        config = Config(**data)
    if getattr(args, "results_dir", None):
        config.batch.results_dir = args.results_dir
    if getattr(args, "no_progress", False):
        config.batch.progress = False

    return config


def handle_segment(args: argparse.Namespace, config: Config) -> int:
    """Handle segment command."""
    registry = configure(config)
    language = Language.parse(args.language)
    for text in args.text:
        result = registry.get_pipeline(language).run(text)
        print(TOKEN_DELIMITER.join(result.tokens))
    return 0


def handle_batch(args: argparse.Namespace, config: Config) -> int:
    """Handle batch command."""
    registry = configure(config)
    segmenter = BatchSegmenter(
        args.language,
        results_dir=config.batch.results_dir,
        registry=registry,
        show_progress=config.batch.progress,
    )
    report = segmenter.process_file(args.input)
    if report is None:
        print("Batch processing failed", file=sys.stderr)
        return 1

    print("Processing completed:")
    print(f"  - Total lines processed: {report.lines_processed}")
    print(f"  - Total tokens generated: {report.tokens_emitted}")
    print(f"  - Lines written as original text: {len(report.passthrough_lines)}")
    print(f"  - Output file: {report.output_path}")
    return 0


def handle_profiles(args: argparse.Namespace) -> int:
    """Handle profiles command."""
    for profile in list_profiles(args.language):
        marker = "*" if DEFAULT_PROFILES[profile.language] == profile.name else " "
        print(f"{marker} {profile.language.code}/{profile.name:<10} {profile.describe()}")
        if profile.description:
            print(f"    {profile.description}")
    return 0


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.command is None:
        parser.print_help()
        return 1
    if args.command == "profiles":
        return handle_profiles(args)

    try:
        config = build_config(args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        if args.command == "segment":
            return handle_segment(args, config)
        return handle_batch(args, config)
    except Exception as e:
        logging.exception("Segmentation failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
