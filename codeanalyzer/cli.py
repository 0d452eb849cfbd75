#!/usr/bin/env python3
"""
Entry point for the CodeAnalyzer CLI.

Supports scanning:
  - A local directory (every .cs file below it, build output excluded)
  - A single .cs file or glob pattern

Usage examples:
  codeanalyzer path/to/solution -f text
  codeanalyzer src/ --checks naming,dead-code -f json -o report.json
  codeanalyzer "src/**/*.cs" --threshold 30 --fail-on-findings

Exit status: 0 on success, 1 with --fail-on-findings when anything was
found, 2 on usage or configuration errors.
"""

import argparse
import glob
import os
import sys

from colorama import init

from codeanalyzer.analyzer import CodeAnalyzer
from codeanalyzer.banner import colors_enabled, print_banner
from codeanalyzer.config import validate_threshold
from codeanalyzer.errors import ConfigError
from codeanalyzer.loader import load_config
from codeanalyzer.reporter.csv_reporter import CsvReporter
from codeanalyzer.reporter.html_reporter import HtmlReporter
from codeanalyzer.reporter.json_reporter import JSONReporter
from codeanalyzer.reporter.text_reporter import TextReporter
from codeanalyzer.utils.file_utils import ensure_directory, write_text_file
from codeanalyzer.utils.logger import get_logger
from codeanalyzer.utils.settings import ALL_CHECKS, DEFAULT_HTML_REPORT

LOG = get_logger(__name__)

EXIT_OK = 0
EXIT_FINDINGS = 1
EXIT_USAGE = 2


def _parse_checks(value: str):
    """
    argparse type for --checks: a comma-separated subset of the known checks.
    """
    checks = [c.strip() for c in value.split(",") if c.strip()]
    unknown = [c for c in checks if c not in ALL_CHECKS]
    if unknown or not checks:
        raise argparse.ArgumentTypeError(
            f"invalid check list {value!r}; choose from {', '.join(ALL_CHECKS)}"
        )
    return checks


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codeanalyzer",
        description=(
            "Static code-quality analysis of C# sources.\n\n"
            "TARGET can be:\n"
            "  • A local directory path\n"
            "  • A single .cs file path or glob pattern"
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        "target",
        help="Directory, or .cs file/glob to scan"
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to config file (TOML/YAML/INI). If omitted, will search in cwd for codeanalyzer.toml, etc."
    )
    parser.add_argument(
        "-f", "--format",
        choices=["json", "html", "csv", "text"],
        default="text",
        help="Output format (default: text)"
    )
    parser.add_argument(
        "-o", "--output",
        help=(
            "Write report to file.\n"
            "• For text, JSON or CSV: if omitted, prints to stdout.\n"
            f"• For HTML: if omitted, writes to ./{DEFAULT_HTML_REPORT}."
        )
    )
    parser.add_argument(
        "--checks",
        type=_parse_checks,
        help=f"Comma-separated checks to run (default: all of {','.join(ALL_CHECKS)})"
    )
    parser.add_argument(
        "--threshold",
        type=int,
        help="Statement count at which a method counts as long (overrides config)"
    )
    parser.add_argument(
        "--no-banner",
        action="store_true",
        help="Do not print the banner"
    )
    parser.add_argument(
        "--fail-on-findings",
        action="store_true",
        help="Exit with status 1 when anything was found (for CI)"
    )
    return parser


def _write_report(report: str, output: str) -> None:
    LOG.info("Writing report to %s", output)
    parent = os.path.dirname(output)
    if parent:
        ensure_directory(parent)
    write_text_file(output, report)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.no_banner:
        print_banner()

    # 1) Load configuration; CLI options override it
    try:
        config = load_config(args.config)
        if args.threshold is not None:
            config.long_method_threshold = validate_threshold(args.threshold)
    except ConfigError as e:
        LOG.error("Invalid configuration: %s", e)
        parser.error(str(e))

    # 2) Check the target exists before doing any work
    if not os.path.exists(args.target) and not glob.glob(args.target, recursive=True):
        parser.error(f"target does not exist: {args.target}")

    # 3) Run analysis
    analyzer = CodeAnalyzer(config)
    findings = list(analyzer.analyze_path(args.target, checks=args.checks))
    LOG.info("Analysis complete: %d finding(s) total", len(findings))

    # 4) Emit report in chosen format
    if args.format == "json":
        report = JSONReporter().format(findings)
    elif args.format == "csv":
        report = CsvReporter().format(findings)
    elif args.format == "html":
        report = HtmlReporter().format(findings)
    else:
        color = not args.output and colors_enabled(sys.stdout)
        if color:
            init()
        report = TextReporter(color=color).format(findings)

    if args.format == "html":
        output_path = args.output or DEFAULT_HTML_REPORT
        _write_report(report, output_path)
        print(f"HTML report written to {os.path.abspath(output_path)}")
    elif args.output:
        _write_report(report, args.output)
    else:
        print(report)

    if args.fail_on_findings and findings:
        sys.exit(EXIT_FINDINGS)
    sys.exit(EXIT_OK)


if __name__ == "__main__":
    main()
