"""
Encoder for barcode blocks.

Layout:
    ESC i type | ESC r hri | ESC h nn | ESC w width | ESC z ratio |
    ESC a align | 'B' | data | terminator [| CR]

The terminator is a doubled backslash for CODE128 and GS1-128 and a single
backslash for every other symbology.
"""

from __future__ import annotations

import logging
from typing import Final

from escp_label.escp.commands import (
    BARCODE_DATA_MARKER,
    CR,
    barcode_terminator,
    select_barcode_type,
    set_alignment,
    set_barcode_height,
    set_barcode_ratio,
    set_barcode_width,
    set_human_readable,
)
from escp_label.escp.display import escape_non_printable
from escp_label.model.options import BarcodeOptions
from escp_label.model.validation import InvalidArgumentError, require_text

logger: Final = logging.getLogger(__name__)

__all__ = ["BarcodeEncoder"]


class BarcodeEncoder:
    """
    Builds ESC/P byte sequences for barcode blocks.

    Stateless; encode() is a pure function of its arguments.

    Example:
        >>> opts = BarcodeOptions(BarcodeType.CODE128, height=70, alignment=Alignment.CENTER)
        >>> BarcodeEncoder().encode("123456789", opts)[-12:]
        b'B123456789\\\\\\\\'
    """

    def encode(self, data: str, opts: BarcodeOptions, *, carriage_return: bool = False) -> bytes:
        """
        Encode one barcode block.

        Args:
            data: Non-empty ASCII barcode payload, sent verbatim.
            opts: Symbology and geometry.
            carriage_return: Append CR after the terminator.

        Raises:
            InvalidArgumentError: On empty or non-ASCII data or when opts is
                not a BarcodeOptions.
        """
        require_text(data, "data")
        if not isinstance(opts, BarcodeOptions):
            raise InvalidArgumentError(
                f"opts must be BarcodeOptions, got {type(opts).__name__}", field="opts"
            )
        try:
            payload = data.encode("ascii")
        except UnicodeEncodeError:
            raise InvalidArgumentError(
                f"data: barcode data must be ASCII, got {data!r}", field="data"
            ) from None

        logger.debug(
            "Encoding %s barcode: %s", opts.symbology.display_name, opts
        )
        result = b"".join(
            (
                select_barcode_type(opts.symbology),
                set_human_readable(opts.print_human_readable),
                set_barcode_height(opts.height),
                set_barcode_width(opts.width),
                set_barcode_ratio(opts.ratio),
                set_alignment(opts.alignment),
                BARCODE_DATA_MARKER,
                payload,
                barcode_terminator(opts.symbology),
                CR if carriage_return else b"",
            )
        )

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Resulting barcode command: %s", escape_non_printable(result))
        return result
