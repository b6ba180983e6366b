"""Command-line interface for the rrparse recurrence parser."""

import sys
import argparse
from datetime import datetime
from itertools import islice
from typing import Any, Optional, Union
from .config import find_default_config, load_config
from .constants import DEFAULT_OCCURRENCE_COUNT
from .dates import parse_timestamp
from .engine import Rule, RuleSet
from .errors import RRuleParseError
from .parser import parse


def format_timestamp(dt: datetime) -> str:
    return dt.isoformat()


def describe_rule(rule: Rule, indent: str = "") -> list[str]:
    """
    Describe the options of a parsed rule, one field per line.

    Args:
        rule: Parsed rule
        indent: Prefix for every line

    Returns:
        Lines of ``name: value`` text
    """
    lines: list[str] = []
    for name, value in rule.options.set_fields().items():
        if name == "freq":
            text = value.name
        elif name == "byweekday":
            text = ",".join(str(wd) for wd in value)
        elif isinstance(value, datetime):
            text = format_timestamp(value)
        elif isinstance(value, tuple):
            text = ",".join(str(v) for v in value)
        else:
            text = str(value)
        lines.append(f"{indent}{name}: {text}")
    return lines


def describe(result: Union[Rule, RuleSet]) -> list[str]:
    if isinstance(result, Rule):
        return ["Rule:"] + describe_rule(result, "  ")

    lines = ["RuleSet:"]
    for i, rule in enumerate(result.rules, 1):
        lines.append(f"  rule {i}:")
        lines += describe_rule(rule, "    ")
    for i, rule in enumerate(result.exclusion_rules, 1):
        lines.append(f"  exclusion rule {i}:")
        lines += describe_rule(rule, "    ")
    for dt in result.dates:
        lines.append(f"  date: {format_timestamp(dt)}")
    for dt in result.exclusion_dates:
        lines.append(f"  exclusion date: {format_timestamp(dt)}")
    return lines


def read_content(args: argparse.Namespace) -> str:
    if args.file:
        with open(args.file, encoding="utf-8") as f:
            return f.read()
    if args.text:
        return "\n".join(args.text)
    return sys.stdin.read()


def build_options(args: argparse.Namespace, base: dict[str, Any]) -> dict[str, Any]:
    """Overlay command-line flags on options loaded from a config file."""
    options = dict(base)
    for flag in ("cache", "unfold", "forceset", "compatible"):
        if getattr(args, flag):
            options[flag] = True
    if args.dtstart:
        options["dtstart"] = parse_timestamp(args.dtstart)
    if args.tzid:
        options["tzid"] = args.tzid
    return options


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point for the rrparse CLI application."""
    parser = argparse.ArgumentParser(
        prog="rrparse",
        description="Parse RFC 5545 recurrence strings and list their occurrences",
        epilog="""
Examples:
  %(prog)s "FREQ=DAILY;COUNT=10"                        # Parse a single rule
  %(prog)s -n 5 "FREQ=WEEKLY;BYDAY=MO,WE;DTSTART=20250106T090000Z"
  %(prog)s --unfold -f schedule.txt                      # Parse a multi-line document
  printf 'RRULE:FREQ=DAILY\\nEXDATE:20250102' | %(prog)s --unfold

Config file format (rrparse.json or .rrparse.json):
  {
    "unfold": true,
    "dtstart": "20250101T090000Z",
    "tzid": "Europe/Paris"
  }
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "text",
        nargs="*",
        metavar="TEXT",
        help="Recurrence text. Several arguments are joined as separate lines. "
        "Read from stdin when neither TEXT nor --file is given.",
    )
    parser.add_argument("-f", "--file", metavar="FILE", help="Read the document from FILE.")
    parser.add_argument(
        "-c",
        "--config",
        metavar="FILE",
        help="Path to JSON configuration file containing parse options. "
        "If not specified, looks for 'rrparse.json' or '.rrparse.json'.",
    )
    parser.add_argument(
        "--unfold", action="store_true", help="Join RFC 5545 continuation lines."
    )
    parser.add_argument(
        "--forceset", action="store_true", help="Always build a rule set."
    )
    parser.add_argument(
        "--compatible",
        action="store_true",
        help="Same as --forceset --unfold, and keep the document DTSTART as an occurrence.",
    )
    parser.add_argument(
        "--cache", action="store_true", help="Let rules cache their occurrences."
    )
    parser.add_argument(
        "--dtstart",
        metavar="TIMESTAMP",
        help="Default start, e.g. 20250101T090000Z. Overrides the document DTSTART.",
    )
    parser.add_argument("--tzid", metavar="TZID", help="Default timezone identifier.")
    parser.add_argument(
        "-n",
        "--occurrences",
        metavar="COUNT",
        type=int,
        default=DEFAULT_OCCURRENCE_COUNT,
        help="List the first COUNT occurrences. Default: %(default)s.",
    )
    args = parser.parse_args(argv)

    base: dict[str, Any] = {}
    config_path = args.config or find_default_config()
    if config_path:
        try:
            base = load_config(config_path)
        except FileNotFoundError:
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        except PermissionError:
            print(
                f"Error: Permission denied reading config file: {config_path}",
                file=sys.stderr,
            )
            sys.exit(1)
        except ValueError as e:
            print(f"Error: Invalid config file: {e}", file=sys.stderr)
            sys.exit(1)

    try:
        content = read_content(args)
    except OSError as e:
        print(f"Error: Failed to read {args.file}: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        result = parse(content, **build_options(args, base))
    except RRuleParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    for line in describe(result):
        print(line)

    if args.occurrences > 0:
        try:
            occurrences = list(islice(result, args.occurrences))
        except (TypeError, ValueError) as e:
            print(f"Error: Failed to compute occurrences: {e}", file=sys.stderr)
            sys.exit(1)
        print("Occurrences:")
        for dt in occurrences:
            print(f"  {format_timestamp(dt)}")


if __name__ == "__main__":
    main()
