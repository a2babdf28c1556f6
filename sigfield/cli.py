import argparse
import logging
import sys
from typing import List, Optional

from sigfield import __version__
from sigfield.config import DEFAULT_CONFIG_PATH, load_settings, parse_log_level
from sigfield.errors import (
    ExitCode,
    OutputFileCreationError,
    SigFieldToolError,
    SignatureFieldError,
)
from sigfield.field import SigFieldAdder, parse_box
from sigfield.logs import setup_logging

logger = logging.getLogger(__name__)

PROG = "add-sigfield"
USAGE = f"{PROG} <input.pdf> <output.pdf> <fieldName> <x1> <y1> <x2> <y2>"


class ArgumentParser(argparse.ArgumentParser):
    """Report usage errors as exceptions so they map to our own exit code."""

    def error(self, message):
        raise UsageError(message)


class UsageError(SigFieldToolError):
    exit_code = ExitCode.INVALID_ARGUMENTS


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog=PROG,
        usage=USAGE,
        description="Add an empty visible signature field to page 1 of a PDF file",
        epilog=(
            "Coordinates are the field rectangle corners in PDF user space units. "
            "Any token that is not one of the options above is read as a "
            "positional argument, including negative numbers such as -1e2."
        ),
        allow_abbrev=False,
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        help=f"Path to config file (default: {DEFAULT_CONFIG_PATH})",
        default=DEFAULT_CONFIG_PATH,
    )
    parser.add_argument(
        "--log-level",
        "-l",
        type=str,
        help="Logging level, overrides the config file",
        default=None,
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def build_positional_parser() -> ArgumentParser:
    parser = ArgumentParser(prog=PROG, usage=USAGE, add_help=False)
    parser.add_argument("input_pdf")
    parser.add_argument("output_pdf")
    parser.add_argument("field_name")
    parser.add_argument("coords", nargs=4)
    parser.add_argument("extra", nargs="*")
    return parser


def parse_args(argv: Optional[List[str]] = None):
    # options first, then whatever is left is read strictly as positionals
    options, rest = build_parser().parse_known_args(argv)
    positionals = build_positional_parser().parse_args(["--", *rest])
    return argparse.Namespace(**vars(options), **vars(positionals))


def run(argv: Optional[List[str]] = None):
    args = parse_args(argv)

    settings = load_settings(args.config)
    log_level = (
        parse_log_level(args.log_level) if args.log_level else settings.log_level
    )
    setup_logging(log_level)
    logger.debug(f"Settings from {args.config}: {settings}")

    if args.extra:
        logger.warning(f"Ignoring extra arguments: {' '.join(args.extra)}")

    adder = SigFieldAdder(settings)
    # existence is checked before the coordinates are looked at
    adder.check_input(args.input_pdf)
    box = parse_box(args.coords)
    adder.add_one(args.input_pdf, args.output_pdf, args.field_name, box)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        run(argv)
    except UsageError as e:
        print(f"Usage: {USAGE}", file=sys.stderr)
        print(e, file=sys.stderr)
        return int(e.exit_code)
    except OutputFileCreationError as e:
        print(f"File IO Error: {e}", file=sys.stderr)
        return int(e.exit_code)
    except SignatureFieldError as e:
        print(f"Signature field error: {e}", file=sys.stderr)
        return int(e.exit_code)
    except SigFieldToolError as e:
        print(e, file=sys.stderr)
        return int(e.exit_code)
    except Exception as e:
        logger.debug("Unhandled exception", exc_info=True)
        print(f"Unhandled Exception: {e}", file=sys.stderr)
        return int(ExitCode.UNKNOWN_ERROR)
    return int(ExitCode.SUCCESS)


if __name__ == "__main__":
    sys.exit(main())
