"""Command-line interface for the site analyzer."""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from sitescore.analyzer import SiteAnalyzer
from sitescore.config import Config, WeightTable
from sitescore.constants import STEP_DESCRIPTIONS
from sitescore.logging_config import get_logger, setup_logging
from sitescore.models import AnalysisReport, CompleteEvent, ErrorEvent, ProgressEvent

logger = get_logger(__name__)

STATUS_ICONS = {
    "passed": "✅",
    "warning": "⚠️ ",
    "failed": "❌",
}

GROUP_TITLES = {
    "seo": "SEO",
    "requiredPages": "Required Pages",
    "security": "Security",
    "domain": "Domain",
    "content": "Content",
    "images": "Images",
    "meta": "Meta Tags",
    "performance": "Performance",
    "accessibility": "Accessibility",
}


def print_report(url: str, report: AnalysisReport):
    """Print a report in a formatted way.

    Args:
        url: The analyzed URL
        report: AnalysisReport to print
    """
    print(f"\n{'=' * 60}")
    print(f"Eligibility Analysis for: {url}")
    print(f"{'=' * 60}")
    print(f"\n📊 Overall Score: {report.score}/100")

    sub_scores = report.sub_scores.to_dict()
    print("\nCategory Scores:")
    for name, value in sub_scores.items():
        print(f"  • {name.replace('_', ' ').title()}: {value}/100")

    for group, items in report.details.items():
        print(f"\n{GROUP_TITLES.get(group, group)}:")
        for name, item in items.items():
            icon = STATUS_ICONS[item.status.value]
            print(f"  {icon} {name}: {item.value}")

    print(f"\n{'=' * 60}\n")


def print_progress(event: ProgressEvent):
    description = STEP_DESCRIPTIONS.get(event.step, f"Step {event.step}")
    print(f"[{event.progress:3d}%] {description}...", file=sys.stderr)


async def run_analysis(url: str, analyzer: SiteAnalyzer, output: str) -> int:
    """Analyze a URL and print the outcome.

    Args:
        url: The URL to analyze
        analyzer: Configured SiteAnalyzer
        output: 'text', 'json' or 'events'

    Returns:
        Process exit code
    """
    exit_code = 1

    async for event in analyzer.stream(url):
        if output == "events":
            sys.stdout.write(event.to_sse())
            sys.stdout.flush()
        elif isinstance(event, ProgressEvent):
            print_progress(event)
        elif isinstance(event, CompleteEvent):
            if output == "json":
                print(event.result.to_json(indent=2))
            else:
                print_report(url, event.result)
        elif isinstance(event, ErrorEvent):
            print(f"\n❌ {event.message}", file=sys.stderr)

        if isinstance(event, CompleteEvent):
            exit_code = 0

    return exit_code


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sitescore",
        description="Score a single web page for site eligibility",
    )
    parser.add_argument("url", help="URL or domain to analyze")

    output = parser.add_mutually_exclusive_group()
    output.add_argument(
        "--json", dest="output", action="store_const", const="json",
        help="Print the report as JSON",
    )
    output.add_argument(
        "--events", dest="output", action="store_const", const="events",
        help="Print the raw event stream as Server-Sent Events frames",
    )
    parser.set_defaults(output="text")

    parser.add_argument(
        "--weights",
        help="JSON file with category weights (default: stock weights or SITESCORE_WEIGHT_* env)",
    )
    parser.add_argument("--timeout", type=float, help="Fetch timeout in seconds")
    parser.add_argument("--log-level", help="Log level (default: LOG_LEVEL env or INFO)")
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    config = Config.from_env()
    if args.timeout is not None:
        config.timeout = args.timeout
    if args.log_level:
        config.log_level = args.log_level

    setup_logging(level=config.log_level, log_file=args.log_file)

    if args.weights and not Path(args.weights).is_file():
        logger.error(f"Weights file not found: {args.weights}")
        return 2

    try:
        weights = WeightTable.from_file(args.weights) if args.weights else WeightTable.from_env()
    except ValueError as e:
        logger.error(f"Invalid weights: {e}")
        return 2

    analyzer = SiteAnalyzer(config=config, weights=weights)
    return asyncio.run(run_analysis(args.url, analyzer, args.output))


if __name__ == "__main__":
    sys.exit(main())
