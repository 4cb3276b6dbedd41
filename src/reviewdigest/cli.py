"""Command-line interface for ReviewDigest."""

import argparse
import json
import logging
import sys

from .core.config import settings
from .core.constants import FileConstants
from .services.summarizer import ReviewSummarizer
from .utils.data_prep import load_reviews, prepare_export, export_to_json

logger = logging.getLogger(__name__)


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )


def cmd_summarize(args):
    """Summarize command."""
    try:
        reviews = load_reviews(args.input_file)
    except FileNotFoundError:
        print(f"Input file {args.input_file} not found")
        return 1
    except (json.JSONDecodeError, ValueError) as e:
        print(f"Invalid review file: {e}")
        return 1
    
    run_settings = settings
    if args.no_ai:
        run_settings = settings.model_copy(update={"openai_api_key": ""})
    
    summarizer = ReviewSummarizer(settings=run_settings)
    result = summarizer.summarize(reviews)
    data = prepare_export(result)
    
    if args.out:
        export_to_json(data, args.out)
        print(f"Summarized {result.total_reviews} reviews -> {args.out}")
    else:
        data.pop("metadata", None)
        print(json.dumps(data, indent=2 if args.pretty else None, ensure_ascii=False))
    return 0


def cmd_export(args):
    """Export command."""
    try:
        with open(args.input_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"Input file {args.input_file} not found")
        return 1
    except json.JSONDecodeError as e:
        print(f"Invalid JSON in input file: {e}")
        return 1
    
    if args.pretty:
        print(json.dumps(data, indent=2, ensure_ascii=False))
    
    if args.output:
        export_to_json(data, args.output)
        print(f"Exported to {args.output}")
    return 0


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description="ReviewDigest - Review Summarization Engine")
    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    
    # Summarize command
    summarize_parser = subparsers.add_parser('summarize', help='Summarize a JSON file of reviews')
    summarize_parser.add_argument('input_file', help='JSON file with review records')
    summarize_parser.add_argument('--out', help='Output JSON file')
    summarize_parser.add_argument('--no-ai', action='store_true', help='Use the rule-based narrative only')
    summarize_parser.add_argument('--pretty', action='store_true', help='Pretty print to stdout')
    
    # Export command
    export_parser = subparsers.add_parser('export', help='Export a summary result')
    export_parser.add_argument('--in', dest='input_file', required=True, help='Input JSON file')
    export_parser.add_argument('--out', dest='output', help='Output file (optional)')
    export_parser.add_argument('--pretty', action='store_true', help='Pretty print to stdout')
    
    args = parser.parse_args()
    
    if not args.command:
        parser.print_help()
        return
    
    setup_logging()
    
    try:
        if args.command == 'summarize':
            status = cmd_summarize(args)
        else:
            status = cmd_export(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled by user")
        status = 1
    except Exception as e:
        logger.error(f"Command failed: {e}")
        status = 1
    
    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
