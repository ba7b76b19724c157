import argparse
import logging
import sys
from pathlib import Path

from pixeltext.charsets import ASCII_RAMPS, BLOCK_RAMPS
from pixeltext.converter import image_to_ascii, image_to_spreadsheet, spreadsheet_to_assembly
from pixeltext.errors import ConversionError
from pixeltext.settings import MAX_WIDTH, MIN_WIDTH, ConversionSettings, DosMode, SpreadsheetFormat
from pixeltext.terminal import default_width

logger = logging.getLogger("pixeltext")


def setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False


def _width(value: str) -> int:
    width = int(value)
    if not MIN_WIDTH <= width <= MAX_WIDTH:
        raise argparse.ArgumentTypeError(f"width must be between {MIN_WIDTH} and {MAX_WIDTH}")
    return width


def default_filename(command: str, fmt: str) -> str:
    if command == "ascii":
        return "ascii-art.txt"
    if command == "csv":
        return f"pixel-art-{fmt}.csv"
    return "dos-art.asm"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert an image to ASCII art, spreadsheet CSV or DOS assembly")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug information to stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("-o", "--output", default=None, help="Write to this file or directory instead of stdout")
    common.add_argument(
        "--no-invert", dest="invert", action="store_false", default=True, help="Do not invert brightness"
    )

    image_opts = argparse.ArgumentParser(add_help=False)
    image_opts.add_argument(
        "-s",
        "--size",
        type=_width,
        default=None,
        help=f"Output width in columns, {MIN_WIDTH}-{MAX_WIDTH} (default: terminal width)",
    )

    block_opts = argparse.ArgumentParser(add_help=False)
    block_opts.add_argument(
        "-l", "--levels", type=int, default=5, choices=sorted(BLOCK_RAMPS), help="Block shade levels (default: 5)"
    )

    p_ascii = sub.add_parser("ascii", parents=[common, image_opts], help="Render an image as ASCII art")
    p_ascii.add_argument("image", help="Path to input image")
    p_ascii.add_argument(
        "-c", "--charset", default="simple", choices=sorted(ASCII_RAMPS), help="Character ramp (default: simple)"
    )

    p_csv = sub.add_parser("csv", parents=[common, image_opts, block_opts], help="Encode an image as spreadsheet CSV")
    p_csv.add_argument("image", help="Path to input image")
    p_csv.add_argument(
        "-f",
        "--format",
        default=SpreadsheetFormat.BLOCKS.value,
        choices=[f.value for f in SpreadsheetFormat],
        help="Cell encoding (default: blocks)",
    )

    p_asm = sub.add_parser(
        "asm", parents=[common, image_opts, block_opts], help="Generate DOS assembly from block CSV"
    )
    p_asm.add_argument("csv", nargs="?", default="-", help="Path to block CSV, or - for stdin (default)")
    p_asm.add_argument("--from-image", default=None, help="Encode this image as block CSV first")
    p_asm.add_argument(
        "-d",
        "--dos-mode",
        default=DosMode.AUTO.value,
        choices=[m.value for m in DosMode],
        help="Glyph to byte mapping (default: auto)",
    )
    return parser


def _read_input(path: str) -> str:
    if path == "-":
        return sys.stdin.buffer.read().decode("utf-8-sig", "replace")
    # Drop a leading BOM, replace undecodable bytes with U+FFFD
    return Path(path).read_text(encoding="utf-8-sig", errors="replace")


def _write_output(text: str, output: str | None, filename: str) -> None:
    if output is None:
        sys.stdout.write(text if text.endswith("\n") else text + "\n")
        return
    target = Path(output)
    if target.is_dir():
        target = target / filename
    target.write_text(text, encoding="utf-8")
    logger.info("wrote %s", target)


def run(args: argparse.Namespace) -> str:
    width = args.size if args.size is not None else default_width()

    if args.command == "ascii":
        settings = ConversionSettings(width=width, charset=args.charset, invert=args.invert)
        return image_to_ascii(args.image, settings)

    if args.command == "csv":
        settings = ConversionSettings(
            width=width,
            spreadsheet_format=args.format,
            block_levels=args.levels,
            invert_spreadsheet=args.invert,
        )
        return image_to_spreadsheet(args.image, settings)

    settings = ConversionSettings(
        width=width,
        block_levels=args.levels,
        dos_mode=args.dos_mode,
        invert_assembly=args.invert,
    )
    if args.from_image is not None:
        text = image_to_spreadsheet(args.from_image, settings)
    else:
        text = _read_input(args.csv)
    return spreadsheet_to_assembly(text, settings)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    for name in ("image", "from_image", "csv"):
        value = getattr(args, name, None)
        if value not in (None, "-") and not Path(value).exists():
            print(f"File not found: {value}", file=sys.stderr)
            return 1

    try:
        text = run(args)
    except ConversionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    _write_output(text, args.output, default_filename(args.command, getattr(args, "format", "")))
    return 0


if __name__ == "__main__":
    sys.exit(main())
