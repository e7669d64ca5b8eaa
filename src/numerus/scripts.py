import argparse
import logging
import pathlib
import re
import sys

import cattrs

from .counttypes import CountType
from .settings import Settings
from .wordcount import count, count_markdown, format_count

logger = logging.getLogger(__name__)

count_parser = argparse.ArgumentParser(description="Count the words or characters in HTML or Markdown text.")
count_parser.add_argument("files", nargs="*", type=pathlib.Path, help="files to count; reads stdin if omitted or -")
count_parser.add_argument("--settings", type=pathlib.Path, help="JSON settings file with count type, rules and shortcodes")
count_parser.add_argument(
    "--type",
    dest="count_type",
    help="words (default), charsExcludingSpaces or charsIncludingSpaces; anything else counts words",
)
count_parser.add_argument("--shortcode", dest="shortcodes", action="append", help="shortcode name to strip (repeatable)")
count_parser.add_argument("--markdown", action="store_true", help="render the input as Markdown before counting")
count_parser.add_argument("--human", action="store_true", help="print counts as '1,234 words'")
count_parser.add_argument("--verbose", "-v", action="store_true")


def read_input(path: pathlib.Path) -> str:
    if str(path) == "-":
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def count_cli(argv=None):
    args = count_parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    logging.getLogger("markdown_it").setLevel(logging.ERROR)

    try:
        settings = Settings.load(args.settings) if args.settings is not None else Settings()
        count_type = CountType.coerce(args.count_type if args.count_type is not None else settings.count_type)
        rules = settings.resolve_rules(args.shortcodes)
        counter = count_markdown if args.markdown else count
        paths = args.files or [pathlib.Path("-")]
        totals = []
        for path in paths:
            result = counter(read_input(path), count_type, rules)
            logger.debug("%s: %d", path, result)
            totals.append(result)
            shown = format_count(result, count_type) if args.human else str(result)
            print(f"{path}: {shown}" if len(paths) > 1 else shown)
    except (OSError, ValueError, re.error, cattrs.BaseValidationError) as e:
        count_parser.error(str(e))

    if len(totals) > 1:
        total = sum(totals)
        print("total: " + (format_count(total, count_type) if args.human else str(total)))
    return 0
