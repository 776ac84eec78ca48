"""Command-line interface for RedditPulse."""

import argparse
import json
import logging
import subprocess
import sys
from pathlib import Path

from .core.config import settings
from .core.constants import FetchConstants, FileConstants
from .core.models import AnalysisRequest, FetchFailure
from .core.text import parse_entities
from .services.pipeline import run_analysis
from .services.reddit_client import RedditService
from .services.sentiment import VADERSentimentAnalyzer
from .ui.charts import format_sentiment
from .utils.data_prep import export_to_csv, export_to_json, prepare_export

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def cmd_analyze(args):
    """Analyze command."""
    request = AnalysisRequest(
        channel=args.channel,
        leaders=parse_entities(args.leaders),
        countries=parse_entities(args.countries),
        sort=args.sort,
        period=args.period,
        max_threads=args.max_threads,
    )

    print(f"Analyzing r/{request.channel} ({request.sort}, {request.period}, {request.max_threads} threads)...")
    outcome = run_analysis(request, RedditService(), VADERSentimentAnalyzer())

    if isinstance(outcome, FetchFailure):
        print(f"No data: {outcome.reason}")
        return 1

    print(f"\n{outcome.summary}")
    print("\nEntity sentiment:")
    for r in outcome.entity_results:
        print(f"  {r.entity} ({r.kind}): {format_sentiment(r.average_sentiment)} [{r.mentions} mentions]")

    print("\nTop words:")
    for w in outcome.word_frequencies:
        print(f"  {w.word}: {w.count}")

    top = outcome.top_comments
    print("\nMost positive comment:")
    print(f"  {top.positive[0].text[:200]}" if top.positive else "  (none)")
    print("Most negative comment:")
    print(f"  {top.negative[0].text[:200]}" if top.negative else "  (none)")

    if args.out:
        export_to_json(prepare_export(outcome), args.out)
        print(f"\nResults exported to {args.out}")
    if args.csv:
        path = export_to_csv(outcome, args.csv)
        print(f"Entity table written to {path}")
    return 0


def cmd_export(args):
    """Export command."""
    try:
        with open(args.input_file, 'r', encoding='utf-8') as f:
            data = json.load(f)

        if args.pretty:
            print(json.dumps(data, indent=2))
        else:
            output_file = args.output or args.input_file.replace('.json', '_export.json')
            with open(output_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
            print(f"Exported to {output_file}")

    except FileNotFoundError:
        print(f"Input file {args.input_file} not found")
        return 1
    except json.JSONDecodeError as e:
        print(f"Invalid JSON in input file: {e}")
        return 1
    return 0


def cmd_ui(args):
    """UI command."""
    app_path = Path(__file__).parent / "ui" / "streamlit_app.py"

    print("Launching RedditPulse UI...")
    try:
        subprocess.run([
            sys.executable, "-m", "streamlit", "run", str(app_path)
        ], check=True)
    except subprocess.CalledProcessError as e:
        print(f"Failed to launch UI: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nUI stopped by user")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="RedditPulse - sentiment toward leaders and countries on Reddit")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Analyze command
    analyze_parser = subparsers.add_parser('analyze', help='Fetch and analyze a subreddit')
    analyze_parser.add_argument('channel', nargs='?', default=settings.default_channel, help='Subreddit name')
    analyze_parser.add_argument('--leaders', default='', help='Comma-separated leader names')
    analyze_parser.add_argument('--countries', default='', help='Comma-separated country names')
    analyze_parser.add_argument('--sort', choices=FetchConstants.SORT_ORDERS, default=settings.default_sort)
    analyze_parser.add_argument('--period', choices=FetchConstants.PERIODS, default=settings.default_period)
    analyze_parser.add_argument('--max-threads', type=int, default=settings.default_max_threads,
                                help='Maximum number of threads to fetch')
    analyze_parser.add_argument('--out', help='Output JSON report file')
    analyze_parser.add_argument('--csv', metavar='DIR', help='Write the dated entity CSV into DIR')

    # Export command
    export_parser = subparsers.add_parser('export', help='Re-export a JSON report')
    export_parser.add_argument('--in', dest='input_file', required=True, help='Input JSON file')
    export_parser.add_argument('--out', dest='output', help='Output file (optional)')
    export_parser.add_argument('--pretty', action='store_true', help='Pretty print to stdout')

    # UI command
    subparsers.add_parser('ui', help='Launch web UI')

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return

    setup_logging()

    commands = {'analyze': cmd_analyze, 'export': cmd_export, 'ui': cmd_ui}
    try:
        status = commands[args.command](args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        return
    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
