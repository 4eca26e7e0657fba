"""
lessondeck command line interface.

Usage:
  lessondeck list
  lessondeck show "03. Collection" --format markdown
  lessondeck next 03-collection
  lessondeck --source "Book.playground" export out/ --format html

Exit codes:
  0  success (including reaching either end of the deck)
  1  deck could not be built
  2  unit id not found
  3  unsupported render format
  4  export output could not be written
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from lessondeck import __version__
from lessondeck.config import DeckSettings, configure_logging
from lessondeck.deck import Boundary, DeckIndex, DeckNavigator, load_deck
from lessondeck.errors import DeckError, NotFoundError, UnsupportedFormatError
from lessondeck.viewer import DeckRenderer, parse_format, supported_formats


logger = logging.getLogger(__name__)


EXIT_OK = 0
EXIT_BUILD_FAILED = 1
EXIT_NOT_FOUND = 2
EXIT_UNSUPPORTED_FORMAT = 3
EXIT_WRITE_FAILED = 4


def _error(message: str) -> None:
    print(f"error: {message}", file=sys.stderr)


# -----------------------------------------------------------------------------
# Commands
# -----------------------------------------------------------------------------

def cmd_list(index: DeckIndex, args: argparse.Namespace, settings: DeckSettings) -> int:
    units = index.all()
    width = max(len(unit.id) for unit in units)
    for unit in units:
        print(f"{unit.id:<{width}}  {unit.title}")
    return EXIT_OK


def cmd_show(index: DeckIndex, args: argparse.Namespace, settings: DeckSettings) -> int:
    unit = index.get(args.id)
    renderer = DeckRenderer(total=len(index))
    output = renderer.render(unit, args.format or settings.default_format)
    sys.stdout.write(output.content)
    return EXIT_OK


def cmd_next(index: DeckIndex, args: argparse.Namespace, settings: DeckSettings) -> int:
    result = DeckNavigator(index).next(args.id)
    print(result.value if isinstance(result, Boundary) else result.id)
    return EXIT_OK


def cmd_prev(index: DeckIndex, args: argparse.Namespace, settings: DeckSettings) -> int:
    result = DeckNavigator(index).previous(args.id)
    print(result.value if isinstance(result, Boundary) else result.id)
    return EXIT_OK


def cmd_info(index: DeckIndex, args: argparse.Namespace, settings: DeckSettings) -> int:
    unit = index.get(args.id)
    current, total = DeckNavigator(index).position(unit.id)
    print(f"id:       {unit.id}")
    print(f"name:     {unit.name}")
    print(f"title:    {unit.title}")
    print(f"order:    {unit.order if unit.order is not None else '-'}")
    print(f"position: {current}/{total}")
    print(f"language: {unit.language or '-'}")
    print(f"origin:   {unit.origin or '-'}")
    return EXIT_OK


def cmd_export(index: DeckIndex, args: argparse.Namespace, settings: DeckSettings) -> int:
    fmt = parse_format(args.format or settings.default_format)
    renderer = DeckRenderer(total=len(index))
    rendered = [(unit, renderer.render(unit, fmt)) for unit in index.all()]

    try:
        args.output.mkdir(parents=True, exist_ok=True)
        for unit, output in rendered:
            target = args.output / f"{unit.position:02d}-{unit.id}{output.extension}"
            target.write_text(output.content, encoding="utf-8")
            logger.debug(f"Wrote {target}")
    except OSError as e:
        logger.debug(f"Export to {args.output} failed", exc_info=True)
        _error(f"cannot write export to '{args.output}': {e.strerror or e}")
        return EXIT_WRITE_FAILED

    print(f"Exported {len(index)} units to {args.output}")
    return EXIT_OK


# -----------------------------------------------------------------------------
# Parser
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lessondeck",
        description="Browse an ordered deck of lesson pages.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List a playground book in deck order
  lessondeck --source "Swift Programming Book.playground" list

  # Show one lesson as Markdown (by id or by its original name)
  lessondeck show 03-collection --format markdown
  lessondeck show "03. Collection"

  # Walk the deck
  lessondeck next 1-basic
  lessondeck prev 1-basic        # prints <start>

  # Export every lesson as HTML
  lessondeck export site/ --format html
        """,
    )
    parser.add_argument(
        "--source",
        type=Path,
        default=None,
        help="Lesson directory, playground bundle or deck.yaml (default: $LESSONDECK_SOURCE or ./lessons)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Increase log output (-v info, -vv debug)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)
    format_help = f"Output format: {', '.join(supported_formats())} (default: $LESSONDECK_FORMAT or plain)"

    list_parser = subparsers.add_parser("list", help="List units in deck order")
    list_parser.set_defaults(func=cmd_list)

    show_parser = subparsers.add_parser("show", help="Render one unit")
    show_parser.add_argument("id", help="Unit id or source name")
    show_parser.add_argument("--format", default=None, help=format_help)
    show_parser.set_defaults(func=cmd_show)

    next_parser = subparsers.add_parser("next", help="Print the id of the following unit")
    next_parser.add_argument("id", help="Unit id or source name")
    next_parser.set_defaults(func=cmd_next)

    prev_parser = subparsers.add_parser("prev", help="Print the id of the preceding unit")
    prev_parser.add_argument("id", help="Unit id or source name")
    prev_parser.set_defaults(func=cmd_prev)

    info_parser = subparsers.add_parser("info", help="Show metadata for one unit")
    info_parser.add_argument("id", help="Unit id or source name")
    info_parser.set_defaults(func=cmd_info)

    export_parser = subparsers.add_parser("export", help="Render every unit into a directory")
    export_parser.add_argument("output", type=Path, help="Output directory")
    export_parser.add_argument("--format", default=None, help=format_help)
    export_parser.set_defaults(func=cmd_export)

    return parser


def _log_level(verbose: int, settings: DeckSettings) -> str:
    """Pick the more verbose of the -v flags and the configured level."""
    if verbose >= 2:
        requested = logging.DEBUG
    elif verbose == 1:
        requested = logging.INFO
    else:
        return settings.log_level
    return logging.getLevelName(min(requested, logging.getLevelName(settings.log_level)))


def main(argv: Optional[list[str]] = None) -> int:
    """Run the CLI and return its exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = DeckSettings.from_env()
    except ValidationError as e:
        _error(f"invalid settings: {e.errors()[0]['msg']}")
        return EXIT_BUILD_FAILED
    if args.source is not None:
        settings = settings.model_copy(update={"source": args.source})

    configure_logging(_log_level(args.verbose, settings))

    try:
        index = load_deck(settings.source)
    except DeckError as e:
        logger.debug(f"Deck build failed for {settings.source}", exc_info=True)
        _error(str(e))
        return EXIT_BUILD_FAILED

    try:
        return args.func(index, args, settings)
    except NotFoundError as e:
        _error(str(e))
        return EXIT_NOT_FOUND
    except UnsupportedFormatError as e:
        _error(str(e))
        return EXIT_UNSUPPORTED_FORMAT


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
