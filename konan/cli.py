"""Command line entry point for printing on the receipt printer."""

from __future__ import annotations

import argparse
import sys

from konan.files import read_file
from konan.printer import (
    PrinterConnectionError,
    Template,
    TemplateVariation,
    establish_rongta_printer,
    print_template,
)

_VERSION = "0.1.0"


def _non_empty(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("value must not be empty")
    return value


def _u8(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid digit found in string: {value!r}") from None
    if not 0 <= number <= 255:
        raise argparse.ArgumentTypeError(f"{number} is not in 0..=255")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="konan", description="Print text on a networked receipt printer."
    )
    parser.add_argument("--version", "-V", action="version", version=f"konan {_VERSION}")
    parser.add_argument("content", nargs="+", type=_non_empty,
                        help="Content that will be printed")
    parser.add_argument("--link", "-l", action="store_true",
                        help="A flag identifying the content as a link")
    parser.add_argument("--file", "-f", action="store_true",
                        help="A flag identifying the content as a file path")
    parser.add_argument("--min_lines", "-m", type=_u8, default=0,
                        help="Set the min number of lines to print")
    parser.add_argument("--template", "-t", default=TemplateVariation.RAW.value,
                        choices=[variation.value for variation in TemplateVariation],
                        help="Templates add styles to the print")
    return parser


def _print(template: Template) -> None:
    try:
        printer = establish_rongta_printer()
    except PrinterConnectionError as error:
        print(error)
        return
    with printer:
        try:
            print_template(template, printer)
        except (ValueError, OSError) as error:
            print(error, file=sys.stderr)
        else:
            print("Succesfully printed")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    variation = TemplateVariation(args.template)

    if args.link:
        parser.error("printing links is not supported")

    if args.file:
        try:
            content = [read_file(args.content[0])]
        except OSError as error:
            print(f"Failed to open file: {error}", file=sys.stderr)
            return 1
    else:
        content = list(args.content)

    _print(Template(content=content, min_lines=args.min_lines, variation=variation))
    return 0


if __name__ == "__main__":
    sys.exit(main())