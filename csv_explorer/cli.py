#!/usr/bin/env python3

"""
cli.py

Command line entry point for csv_explorer: detects the dialect of a
delimited text file and prints the inferred column schema.
"""

import argparse
import json
import logging
import sys

from .inference.csv_core import InvalidInputError
from .inference.settings import AnalyzerSettings
from .stats.analyzer import CsvStatsAnalyzer


def build_parser():
    parser = argparse.ArgumentParser(
        prog="csv-explorer",
        description="Detect the separator and column types of delimited text",
        epilog="Examples:\n"
        "  csv-explorer data.csv\n"
        "  csv-explorer data.csv.gz --json\n"
        "  cat data.txt | csv-explorer - --separators ';|'\n"
        "  csv-explorer big.csv --max-lines 5000\n",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", help='File to analyze, or "-" for stdin')
    parser.add_argument(
        "--config", "-c", help="YAML file with analyzer settings"
    )
    parser.add_argument(
        "--separators",
        "-s",
        help='Preferred separator characters (use "\\t" for tab)',
    )
    header_group = parser.add_mutually_exclusive_group()
    header_group.add_argument(
        "--header", action="store_true", help="Treat the first row as a header"
    )
    header_group.add_argument(
        "--no-header", action="store_true", help="Treat the first row as data"
    )
    parser.add_argument(
        "--allow-leading-zeros",
        action="store_true",
        default=None,
        help="Classify numbers like 007 as integers",
    )
    parser.add_argument(
        "--max-integer-length",
        type=int,
        help="Longest text that may still be classified as an integer",
    )
    parser.add_argument(
        "--skip-blank-lines",
        action="store_true",
        default=None,
        help="Leave empty and whitespace-only lines out of the analysis",
    )
    parser.add_argument(
        "--max-lines",
        type=int,
        default=1000,
        help="Read at most this many lines of the file (default: 1000)",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Show debug logging"
    )
    return parser


def load_settings(args):
    settings = AnalyzerSettings.from_yaml(args.config) if args.config else AnalyzerSettings()
    return settings.with_overrides(
        separators=args.separators,
        allow_leading_zeros=args.allow_leading_zeros,
        max_integer_length=args.max_integer_length,
        skip_blank_lines=args.skip_blank_lines,
    )


def format_report(report):
    lines = []
    if report.source:
        lines.append(f"Source:  {report.source}")
    lines.append(f"Dialect: {report.dialect.describe()}")
    truncated = ", file truncated" if report.truncated else ""
    lines.append(
        f"Lines:   {report.total_lines} ({report.rows_analyzed} rows analyzed{truncated})"
    )

    if report.schema:
        schema = report.schema
        lines.append(f"Header:  {'yes' if schema.has_header else 'no'}")
        lines.append("")
        lines.append(f"{'#':>3}  {'name':<20} {'type':<8} {'size':>5}  nullable")
        for i, column in enumerate(schema.columns):
            name = schema.header_names[i] if i < len(schema.header_names) else ""
            lines.append(
                f"{i + 1:>3}  {name[:20]:<20} {column.data_type.label:<8} "
                f"{column.size:>5}  {'yes' if column.nullable else 'no'}"
            )

    if report.recommendations:
        lines.append("")
        lines.append("Recommendations:")
        for recommendation in report.recommendations:
            lines.append(f"  - {recommendation}")

    return "\n".join(lines)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.max_lines < 1:
        parser.error("--max-lines must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.header:
        has_header = True
    elif args.no_header:
        has_header = False
    else:
        has_header = None

    try:
        analyzer = CsvStatsAnalyzer(load_settings(args), max_file_lines=args.max_lines)

        if args.path == "-":
            text = sys.stdin.read()
            if not text.strip():
                raise InvalidInputError("No input data received")
            report = analyzer.analyze_text(text, has_header, source="<stdin>")
        else:
            report = analyzer.analyze_file(args.path, has_header)

    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print(format_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
