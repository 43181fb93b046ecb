"""
ESC/P command constants for Brother QL label printers (ESC/P mode).

This package contains the low-level command constants and one-parameter
command builders the encoders are made of. Every builder validates its
argument and raises InvalidArgumentError instead of truncating.

Module Structure:
    commands/
    ├── __init__.py             # This file (public API exports)
    ├── positioning.py          # Control chars, line feed setup, positions
    ├── page_control.py         # Init, landscape, cut, page format, margins
    ├── text_formatting.py      # Mode marker, font, bold, italic, underline
    └── barcode.py              # Barcode type, height, width, ratio, terminator

Usage:
    >>> from escp_label.escp.commands import ESC_INIT_PRINTER, set_left_margin
    >>> command = ESC_INIT_PRINTER + set_left_margin(4)

Public API:
    All command constants are re-exported from this module for convenience.
    Import either from specific modules or from this package root.
"""

# Barcode commands
from escp_label.escp.commands.barcode import (
    BARCODE_DATA_MARKER,
    BARCODE_RATIO_CODES,
    BARCODE_TYPE_CODES,
    BARCODE_WIDTH_CODES,
    END_OF_BARCODE,
    END_OF_BARCODE_ESCAPED,
    barcode_terminator,
    select_barcode_type,
    set_barcode_height,
    set_barcode_ratio,
    set_barcode_width,
    set_human_readable,
)

# Page control commands
from escp_label.escp.commands.page_control import (
    ESC_CUT,
    ESC_INIT_PRINTER,
    ESC_LANDSCAPE,
    set_left_margin,
    set_page_format,
    set_page_length,
    set_right_margin,
)

# Positioning commands
from escp_label.escp.commands.positioning import (
    CR,
    ESC,
    FF,
    HT,
    LF,
    NEW_LINE,
    margin_and_line_feed_setup,
    set_line_feed_amount,
    set_horizontal_position,
    set_vertical_position,
)

# Text formatting commands
from escp_label.escp.commands.text_formatting import (
    ALIGNMENT_CODES,
    BOLD_CODES,
    ESC_MODE_MARKER,
    FONT_TYPE_CODES,
    ITALIC_CODES,
    SPACING_CODES,
    UNDERLINE_CODES,
    set_alignment,
    set_bold,
    set_font_size,
    set_font_type,
    set_italic,
    set_spacing,
    set_underline,
)

__all__ = [
    # Positioning
    "ESC",
    "HT",
    "LF",
    "FF",
    "CR",
    "NEW_LINE",
    "set_line_feed_amount",
    "margin_and_line_feed_setup",
    "set_horizontal_position",
    "set_vertical_position",
    # Page control
    "ESC_INIT_PRINTER",
    "ESC_LANDSCAPE",
    "ESC_CUT",
    "set_page_format",
    "set_page_length",
    "set_left_margin",
    "set_right_margin",
    # Text formatting
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
    # Barcode
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
