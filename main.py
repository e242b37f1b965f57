import argparse
import logging
import sys

from config import EXIT_FAILURE, EXIT_MATCHED, EXIT_NO_MATCH
from linegrep.errors import LineGrepError, UnknownOption
from linegrep.models import MatchConfig, MatchMode, SearchOptions, WindowSpec
from linegrep.scanner_engine import SearchEngine
from utils.logger import setup_logger
from utils.result_writer import ResultWriter

logger = logging.getLogger("linegrep")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="linegrep",
        description="Print lines of a text source that contain a pattern",
        epilog="Patterns starting with '-' go after --: linegrep -- -foo file.txt",
    )
    parser.add_argument("pattern", help="Text to search for")
    parser.add_argument("source", help="File to search, or - for standard input")
    # A bare -A/-B/-C means 0
    parser.add_argument("-A", dest="after", nargs="?", const="", metavar="N", help="Print N lines after each match")
    parser.add_argument("-B", dest="before", nargs="?", const="", metavar="N", help="Print N lines before each match")
    parser.add_argument("-C", dest="context", nargs="?", const="", metavar="N", help="Print N lines around each match")
    parser.add_argument("-c", dest="count", action="store_true", help="Print only the number of matching lines")
    parser.add_argument("-i", dest="ignore_case", action="store_true", help="Ignore case")
    parser.add_argument("-v", dest="invert", action="store_true", help="Select non-matching lines")
    parser.add_argument("-F", dest="fixed", action="store_true", help="Match the pattern as a fixed string")
    parser.add_argument("-n", dest="number", action="store_true", help="Prefix each line with its line number")
    parser.add_argument("-o", "--output", metavar="FILE", help="Also save the result to FILE (csv or json)")
    return parser


def parse_context_value(raw, flag):
    """Returns the line count for -A/-B/-C, None when the flag is absent."""
    if raw is None:
        return None
    try:
        value = int(raw)
    except ValueError:
        logger.warning(f"Invalid value for {flag}: {raw!r}, using 0")
        return 0
    if value < 0:
        logger.warning(f"Negative value for {flag}: {value}, using 0")
        return 0
    return value


def build_options(args):
    match = MatchConfig(
        pattern=args.pattern,
        mode=MatchMode.LITERAL if args.fixed else MatchMode.PATTERN,
        case_insensitive=args.ignore_case,
        invert=args.invert,
    )
    window = WindowSpec.from_flags(
        after=parse_context_value(args.after, "-A"),
        before=parse_context_value(args.before, "-B"),
        context=parse_context_value(args.context, "-C"),
    )
    return SearchOptions(match=match, window=window, count=args.count, number=args.number)


FLAG_LETTERS = "civFnh"
VALUE_LETTERS = "ABCo"


def is_known_option(token):
    """
    True for tokens argparse accepts as options: -c, -nA2, -C3, --output=x.
    A bundle with any letter outside the known set is unknown as a whole.
    """
    if token.startswith("--"):
        name = token.split("=", 1)[0]
        return name in ("--output", "--help")
    for letter in token[1:]:
        if letter in VALUE_LETTERS:
            return True
        if letter not in FLAG_LETTERS:
            return False
    return True


def split_unknown(argv):
    """Moves unknown option tokens out of argv so argparse never rejects them."""
    known, unknown = [], []
    tokens = iter(argv)
    for token in tokens:
        if token == "--":
            known.append(token)
            known.extend(tokens)
            break
        if token.startswith("-") and token != "-" and not is_known_option(token):
            unknown.append(token)
            continue
        known.append(token)
    return known, unknown


def report_unknown(extras):
    for extra in extras:
        if extra.startswith("-") and extra != "-":
            logger.warning(str(UnknownOption(extra)))
        else:
            logger.warning(f"Ignoring extra argument: {extra}")


def main(argv=None):
    setup_logger()

    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    argv, unknown = split_unknown(argv)
    args, extras = parser.parse_known_args(argv)
    report_unknown(unknown + extras)

    options = build_options(args)
    logger.debug(f"Options: {options}")

    try:
        engine = SearchEngine(options)
        result = engine.run(args.source)
    except LineGrepError as e:
        logger.error(f"Error: {e}")
        return EXIT_FAILURE

    if args.output:
        ResultWriter().save(result, args.output)

    return EXIT_MATCHED if result.hit_count else EXIT_NO_MATCH


if __name__ == "__main__":
    sys.exit(main())
