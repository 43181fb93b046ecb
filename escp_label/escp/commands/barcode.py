"""
Barcode commands for Brother QL ESC/P mode.

A barcode block is a chain of one-parameter commands followed by the
literal 'B', the data and a backslash terminator:

    ESC i t  ESC r f  ESC h nn  ESC w w  ESC z r  ESC a a  B <data> \\

Reference: Brother QL-800/810W/820NWB ESC/P Command Reference
IMPORTANT: CODE128 and GS1-128 use the backslash as an escape character
           inside their data, so their terminator is a doubled backslash.
"""

from typing import Final, Mapping

from escp_label.escp.commands.positioning import ESC
from escp_label.model.enums import (
    MAX_BARCODE_HEIGHT,
    MIN_BARCODE_HEIGHT,
    BarcodeRatio,
    BarcodeType,
    BarcodeWidth,
)
from escp_label.model.validation import coerce_enum, lookup_code, require_int_range

__all__ = [
    "BARCODE_TYPE_CODES",
    "BARCODE_WIDTH_CODES",
    "BARCODE_RATIO_CODES",
    "BARCODE_DATA_MARKER",
    "END_OF_BARCODE",
    "END_OF_BARCODE_ESCAPED",
    "select_barcode_type",
    "set_human_readable",
    "set_barcode_height",
    "set_barcode_width",
    "set_barcode_ratio",
    "barcode_terminator",
]

# =============================================================================
# PARAMETER TABLES
# =============================================================================

# EAN-8, EAN-13 and UPC-A share code '5'; the printer picks by data length.
BARCODE_TYPE_CODES: Final[Mapping[BarcodeType, bytes]] = {
    BarcodeType.CODE39: b"0",
    BarcodeType.ITF: b"1",
    BarcodeType.EAN8: b"5",
    BarcodeType.EAN13: b"5",
    BarcodeType.UPCA: b"5",
    BarcodeType.UPCE: b"6",
    BarcodeType.CODABAR: b"9",
    BarcodeType.CODE128: b"a",
    BarcodeType.GS1_128: b"b",
    BarcodeType.RSS: b"c",
    BarcodeType.CODE93: b"d",
    BarcodeType.POSTNET: b"e",
    BarcodeType.UPCE_EXTENSION: b"f",
    BarcodeType.MSI: b"g",
}

BARCODE_WIDTH_CODES: Final[Mapping[BarcodeWidth, bytes]] = {
    BarcodeWidth.EXTRA_SMALL: b"0",
    BarcodeWidth.SMALL: b"1",
    BarcodeWidth.MEDIUM: b"2",
    BarcodeWidth.LARGE: b"3",
}

BARCODE_RATIO_CODES: Final[Mapping[BarcodeRatio, bytes]] = {
    BarcodeRatio.THREE_TO_ONE: b"0",
    BarcodeRatio.TWO_POINT_FIVE_TO_ONE: b"1",
    BarcodeRatio.TWO_TO_ONE: b"2",
}

BARCODE_DATA_MARKER: Final[bytes] = b"B"
END_OF_BARCODE: Final[bytes] = b"\\"
END_OF_BARCODE_ESCAPED: Final[bytes] = b"\\\\"

# =============================================================================
# COMMAND BUILDERS
# =============================================================================


def select_barcode_type(barcode_type: BarcodeType) -> bytes:
    """
    Select barcode symbology.

    Command: ESC i t
    Hex: 1B 69 t (t is an ASCII code from BARCODE_TYPE_CODES)
    """
    return ESC + b"i" + lookup_code(BARCODE_TYPE_CODES, barcode_type, "symbology")


def set_human_readable(enabled: bool) -> bytes:
    """ESC r '1' prints the data characters below the bars, '0' omits them."""
    return ESC + b"r" + (b"1" if enabled else b"0")


def set_barcode_height(height: int) -> bytes:
    """
    Set bar height.

    Command: ESC h nn
    Hex: 1B 68 d1 d2

    Args:
        height: 1-99, always sent as exactly two ASCII digits.

    Raises:
        InvalidArgumentError: If height is out of range.

    Example:
        >>> set_barcode_height(7)
        b'\\x1bh07'
    """
    require_int_range(height, MIN_BARCODE_HEIGHT, MAX_BARCODE_HEIGHT, "height")
    return ESC + b"h" + f"{height:02d}".encode("ascii")


def set_barcode_width(width: BarcodeWidth) -> bytes:
    """ESC w w, narrow bar width."""
    return ESC + b"w" + lookup_code(BARCODE_WIDTH_CODES, width, "width")


def set_barcode_ratio(ratio: BarcodeRatio) -> bytes:
    """ESC z r, wide-to-narrow bar ratio."""
    return ESC + b"z" + lookup_code(BARCODE_RATIO_CODES, ratio, "ratio")


def barcode_terminator(barcode_type: BarcodeType) -> bytes:
    resolved = coerce_enum(BarcodeType, barcode_type, "symbology")
    if resolved.uses_escaped_backslash:
        return END_OF_BARCODE_ESCAPED
    return END_OF_BARCODE
