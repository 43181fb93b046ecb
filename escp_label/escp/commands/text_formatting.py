"""
Text formatting ESC/P commands for Brother QL ESC/P mode.

Contains the mode marker, font size and typeface selection, bold, italic,
underline, alignment and character spacing commands, together with the
explicit enum-to-parameter tables they use.

Reference: Brother QL-800/810W/820NWB ESC/P Command Reference
"""

from typing import Final, Mapping

from escp_label.escp.commands.positioning import ESC
from escp_label.model.enums import (
    MAX_FONT_SIZE,
    MIN_FONT_SIZE,
    Alignment,
    Bold,
    FontType,
    Italic,
    Spacing,
    Underline,
)
from escp_label.model.validation import lookup_code, require_int_range

__all__ = [
    "ESC_MODE_MARKER",
    "FONT_TYPE_CODES",
    "BOLD_CODES",
    "ITALIC_CODES",
    "UNDERLINE_CODES",
    "ALIGNMENT_CODES",
    "SPACING_CODES",
    "set_font_size",
    "set_font_type",
    "set_bold",
    "set_italic",
    "set_underline",
    "set_alignment",
    "set_spacing",
]

# =============================================================================
# MODE MARKER
# =============================================================================

ESC_MODE_MARKER: Final[bytes] = ESC + b"SOH"
"""
Start-of-heading marker that opens every styled text run.

Hex: 1B 53 4F 48
Note: The three letters are sent literally, not as the SOH control byte.
"""

# =============================================================================
# PARAMETER TABLES
# =============================================================================

# ESC k n takes the raw typeface number.
FONT_TYPE_CODES: Final[Mapping[FontType, bytes]] = {
    FontType.BROUGHAM: b"\x00",
    FontType.LETTER_GOTHIC_BOLD: b"\x01",
    FontType.BRUSSELS: b"\x02",
    FontType.HELSINKI: b"\x03",
    FontType.SAN_DIEGO: b"\x04",
    FontType.LETTER_GOTHIC: b"\x09",
    FontType.BROUGHAM_OCR_B: b"\x0a",
}

# Bold and italic are separate commands, not a parameter.
BOLD_CODES: Final[Mapping[Bold, bytes]] = {
    Bold.ON: b"E",
    Bold.OFF: b"F",
}

ITALIC_CODES: Final[Mapping[Italic, bytes]] = {
    Italic.ON: b"4",
    Italic.OFF: b"5",
}

UNDERLINE_CODES: Final[Mapping[Underline, bytes]] = {
    Underline.NONE: b"0",
    Underline.SINGLE: b"1",
    Underline.DOUBLE: b"2",
}

ALIGNMENT_CODES: Final[Mapping[Alignment, bytes]] = {
    Alignment.LEFT: b"0",
    Alignment.CENTER: b"1",
    Alignment.RIGHT: b"2",
}

SPACING_CODES: Final[Mapping[Spacing, bytes]] = {
    Spacing.NORMAL: b"0",
    Spacing.WIDE: b"1",
}

# =============================================================================
# COMMAND BUILDERS
# =============================================================================


def set_font_size(size: int) -> bytes:
    """
    Select character size.

    Command: ESC X <digits>
    Hex: 1B 58 d1 [d2 [d3]]

    Args:
        size: Size in dots (1-999), sent as decimal ASCII digits.

    Raises:
        InvalidArgumentError: If size is out of range.

    Example:
        >>> set_font_size(24)
        b'\\x1bX24'
    """
    require_int_range(size, MIN_FONT_SIZE, MAX_FONT_SIZE, "font_size")
    return ESC + b"X" + str(size).encode("ascii")


def set_font_type(font_type: FontType) -> bytes:
    """
    Select typeface.

    Command: ESC k n
    Hex: 1B 6B n
    """
    return ESC + b"k" + lookup_code(FONT_TYPE_CODES, font_type, "font_type")


def set_bold(bold: Bold) -> bytes:
    """ESC E (on) / ESC F (off)."""
    return ESC + lookup_code(BOLD_CODES, bold, "bold")


def set_italic(italic: Italic) -> bytes:
    """ESC 4 (on) / ESC 5 (off)."""
    return ESC + lookup_code(ITALIC_CODES, italic, "italic")


def set_underline(underline: Underline) -> bytes:
    """ESC - n, n in ASCII '0'/'1'/'2'."""
    return ESC + b"-" + lookup_code(UNDERLINE_CODES, underline, "underline")


def set_alignment(alignment: Alignment) -> bytes:
    """
    Select justification.

    Command: ESC a n
    Hex: 1B 61 n (n = '0' left, '1' center, '2' right)
    Note: Shared by text runs and barcode blocks.
    """
    return ESC + b"a" + lookup_code(ALIGNMENT_CODES, alignment, "alignment")


def set_spacing(spacing: Spacing) -> bytes:
    """ESC SP n, n in ASCII '0' (normal) / '1' (wide)."""
    return ESC + b" " + lookup_code(SPACING_CODES, spacing, "spacing")
