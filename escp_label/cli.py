"""
Command-line front end: build an ESC/P job from textual tokens and write it to a file.

Usage:
    escp-label OUTPUT [TOKENS...] [OPTIONS]

Tokens:
    text:<text1>,<text2>,<fontSize>,<fontType>,<bold>,<italic>,<underline>,<alignment>[,<spacing>]
    barcode:<data>,<barcodeType>,<height>,<width>,<ratio>,<printCharsBelow>,<alignment>

Parameters are separated by commas; wrap a parameter in double quotes to
keep commas inside it. Surrounding whitespace and single quotes are trimmed.
Nothing is written when any token or option is invalid.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from escp_label import __version__, get_logger, load_config, resolve_log_level
from escp_label.escp import (
    DEFAULT_TEXT_ENCODING,
    BarcodeEncoder,
    PrintJobAssembler,
    TextEncoder,
    escape_non_printable,
    hex_dump,
)
from escp_label.model import (
    Alignment,
    BarcodeOptions,
    BarcodeRatio,
    BarcodeType,
    BarcodeWidth,
    Bold,
    FontType,
    InvalidArgumentError,
    Italic,
    JobOptions,
    Spacing,
    StyleOptions,
    Underline,
)
from escp_label.model.validation import coerce_enum

logger = get_logger(__name__)

__all__ = ["main", "build_parser", "split_parameters", "build_job"]

TEXT_PREFIX = "text:"
BARCODE_PREFIX = "barcode:"
TEXT_MIN_PARAMS = 8
BARCODE_PARAMS = 7

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_INVALID_ARGUMENT = 2

_TRUE_TOKENS = {"true", "yes", "on", "1"}
_FALSE_TOKENS = {"false", "no", "off", "0"}


def split_parameters(raw: str) -> List[str]:
    """
    Split a token body on commas that are outside double quotes.

    Example:
        >>> split_parameters('"Hello, you",World, 24')
        ['Hello, you', 'World', '24']
    """
    parameters: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in raw:
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            parameters.append("".join(current).strip().strip("'").strip())
            current = []
        else:
            current.append(char)

    if current:
        parameters.append("".join(current).strip().strip("'").strip())

    logger.debug("Split parameters: %s", parameters)
    return parameters


def _parse_bool(token: str, field: str) -> bool:
    lowered = token.strip().lower()
    if lowered in _TRUE_TOKENS:
        return True
    if lowered in _FALSE_TOKENS:
        return False
    raise InvalidArgumentError(f"{field}: expected true/false, got {token!r}", field=field)


def _parse_int(token: str, field: str) -> int:
    try:
        return int(token.strip())
    except ValueError:
        raise InvalidArgumentError(f"{field}: expected an integer, got {token!r}", field=field) from None


def _text_fragment(parameters: List[str], encoder: TextEncoder, carriage_return: bool) -> bytes:
    if len(parameters) < TEXT_MIN_PARAMS:
        raise InvalidArgumentError(
            f"Insufficient parameters for text command: expected at least "
            f"{TEXT_MIN_PARAMS}, got {len(parameters)}",
            field="text",
        )
    text1, text2 = parameters[0], parameters[1]
    style = StyleOptions(
        font_size=_parse_int(parameters[2], "font_size"),
        font_type=coerce_enum(FontType, parameters[3], "font_type"),
        bold=Bold.ON if _parse_bool(parameters[4], "bold") else Bold.OFF,
        italic=Italic.ON if _parse_bool(parameters[5], "italic") else Italic.OFF,
        underline=coerce_enum(Underline, parameters[6], "underline"),
        alignment=coerce_enum(Alignment, parameters[7], "alignment"),
        spacing=(
            coerce_enum(Spacing, parameters[8], "spacing")
            if len(parameters) > TEXT_MIN_PARAMS
            else Spacing.NORMAL
        ),
    )
    return encoder.encode_columns(text1, text2, style, carriage_return=carriage_return)


def _barcode_fragment(parameters: List[str], encoder: BarcodeEncoder) -> bytes:
    if len(parameters) < BARCODE_PARAMS:
        raise InvalidArgumentError(
            f"Insufficient parameters for barcode command: expected "
            f"{BARCODE_PARAMS}, got {len(parameters)}",
            field="barcode",
        )
    opts = BarcodeOptions(
        symbology=coerce_enum(BarcodeType, parameters[1], "symbology"),
        height=_parse_int(parameters[2], "height"),
        width=coerce_enum(BarcodeWidth, parameters[3], "width"),
        ratio=coerce_enum(BarcodeRatio, parameters[4], "ratio"),
        print_human_readable=_parse_bool(parameters[5], "print_human_readable"),
        alignment=coerce_enum(Alignment, parameters[6], "alignment"),
    )
    return encoder.encode(parameters[0], opts)


def build_job(
    tokens: Sequence[str],
    job_options: JobOptions,
    *,
    text_encoding: str = DEFAULT_TEXT_ENCODING,
    carriage_return: bool = False,
) -> bytes:
    """
    Encode every token in order and assemble the job.

    Raises:
        InvalidArgumentError: On the first malformed token; nothing is
            returned in that case.
    """
    text_encoder = TextEncoder(text_encoding)
    barcode_encoder = BarcodeEncoder()
    fragments: List[bytes] = []

    for token in tokens:
        logger.info("Processing argument: %s", token)
        if token.startswith(TEXT_PREFIX):
            parameters = split_parameters(token[len(TEXT_PREFIX) :])
            fragments.append(_text_fragment(parameters, text_encoder, carriage_return))
        elif token.startswith(BARCODE_PREFIX):
            parameters = split_parameters(token[len(BARCODE_PREFIX) :])
            fragments.append(_barcode_fragment(parameters, barcode_encoder))
        else:
            raise InvalidArgumentError(
                f"Unknown command {token!r}: expected '{TEXT_PREFIX}...' or '{BARCODE_PREFIX}...'",
                field="token",
            )

    return PrintJobAssembler().assemble(fragments, job_options)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="escp-label",
        description="Encode text and barcodes into an ESC/P print job file.",
        epilog=(
            "Commands:\n"
            "  text:<text1>,<text2>,<fontSize>,<fontType>,<bold>,<italic>,"
            "<underline>,<alignment>[,<spacing>]\n"
            "  barcode:<data>,<barcodeType>,<height>,<width>,<ratio>,"
            "<printCharsBelow>,<alignment>\n\n"
            f"Font types: {', '.join(m.name for m in FontType)}\n"
            "Barcode types:\n"
            + "\n".join(f"  {m.name:<16}{m.display_name}" for m in BarcodeType)
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("output", type=Path, help="File to write the print job to")
    parser.add_argument("tokens", nargs="*", help="text:... and barcode:... commands")
    parser.add_argument(
        "--cut-paper", action="store_true", default=None, help="Cut the paper after printing"
    )
    parser.add_argument(
        "--landscape", action="store_true", default=None, help="Print in landscape orientation"
    )
    parser.add_argument(
        "--carriage-return",
        action="store_true",
        default=None,
        help="Terminate every text command with CR",
    )
    parser.add_argument("--page-format-width", type=int, metavar="N", help="Page format width")
    parser.add_argument("--page-format-height", type=int, metavar="N", help="Page format height")
    parser.add_argument("--page-length", type=int, metavar="N", help="Page length")
    parser.add_argument("--left-margin", type=int, metavar="N", help="Left margin")
    parser.add_argument("--right-margin", type=int, metavar="N", help="Right margin")
    parser.add_argument(
        "--horizontal-position", type=int, metavar="N", help="Absolute horizontal position"
    )
    parser.add_argument(
        "--vertical-position", type=int, metavar="N", help="Absolute vertical position"
    )
    parser.add_argument("--config", type=Path, metavar="PATH", help="JSON configuration file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _job_options(args: argparse.Namespace, config: Dict[str, Any]) -> JobOptions:
    page_format = None
    if args.page_format_width is not None and args.page_format_height is not None:
        page_format = (args.page_format_width, args.page_format_height)
    elif args.page_format_width is not None or args.page_format_height is not None:
        logger.warning("Page format needs both width and height; ignoring the single value")

    return JobOptions(
        cut_paper=args.cut_paper if args.cut_paper is not None else config["cut_paper"],
        landscape=args.landscape if args.landscape is not None else config["landscape"],
        page_format=page_format,
        page_length=args.page_length,
        left_margin=args.left_margin,
        right_margin=args.right_margin,
        horizontal_position=args.horizontal_position,
        vertical_position=args.vertical_position,
    )


def _configure_logging(level: int) -> None:
    package_logger = logging.getLogger("escp_label")
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        # exact type: rotating file handlers keep their own level
        if type(handler) is logging.StreamHandler:
            handler.setLevel(min(handler.level, level))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    config = load_config(args.config)
    if args.verbose:
        _configure_logging(logging.DEBUG)
    else:
        logging.getLogger("escp_label").setLevel(resolve_log_level(config.get("log_level")))

    carriage_return = (
        args.carriage_return if args.carriage_return is not None else config["carriage_return"]
    )

    try:
        job = build_job(
            args.tokens,
            _job_options(args, config),
            text_encoding=config["text_encoding"],
            carriage_return=carriage_return,
        )
    except InvalidArgumentError as e:
        logger.error("Invalid argument provided: %s", e)
        parser.print_usage(sys.stderr)
        print(f"escp-label: error: {e}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENT

    logger.info("Final print command: %s", escape_non_printable(job))
    if args.verbose:
        logger.debug("Hex dump: %s", hex_dump(job))

    try:
        args.output.write_bytes(job)
    except OSError as e:
        logger.error("Could not write %s: %s", args.output, e)
        return EXIT_IO_ERROR

    logger.info("Print command written to %s (%d bytes)", args.output, len(job))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
