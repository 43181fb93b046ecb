"""
Page layout and job control commands for Brother QL ESC/P mode.

Contains initialization, orientation, paper cut, page format, page length
and margin commands. Every numeric parameter is a single raw byte, never
ASCII digits.

Reference: Brother QL-800/810W/820NWB ESC/P Command Reference
"""

from typing import Final

from escp_label.escp.commands.positioning import ESC
from escp_label.model.validation import BYTE_MAX, BYTE_MIN, require_int_range

__all__ = [
    "ESC_INIT_PRINTER",
    "ESC_LANDSCAPE",
    "ESC_CUT",
    "set_page_format",
    "set_page_length",
    "set_left_margin",
    "set_right_margin",
]

# =============================================================================
# JOB CONTROL
# =============================================================================

ESC_INIT_PRINTER: Final[bytes] = ESC + b"@"
"""
Initialize printer.

Command: ESC @
Hex: 1B 40
Effect: Clears the print buffer and restores default settings.
Note: First command of every assembled job.
"""

ESC_LANDSCAPE: Final[bytes] = ESC + b"iL"
"""
Select landscape orientation.

Command: ESC i L
Hex: 1B 69 4C
Note: Sent without the optional orientation byte; the printer treats the
      bare command as "landscape on".
"""

ESC_CUT: Final[bytes] = ESC + b"iC"
"""
Cut paper after printing.

Command: ESC i C
Hex: 1B 69 43
Note: Placed immediately before the closing form feed.
"""

# =============================================================================
# PAGE FORMAT
# =============================================================================


def set_page_format(width: int, height: int) -> bytes:
    """
    Specify page format.

    Command: ESC ( c w h
    Hex: 1B 28 63 w h

    Args:
        width: Page width (0-255), one raw byte.
        height: Page height (0-255), one raw byte.

    Raises:
        InvalidArgumentError: If either value is out of range.

    Example:
        >>> set_page_format(62, 100)
        b'\\x1b(c>d'
    """
    require_int_range(width, BYTE_MIN, BYTE_MAX, "page_format.width")
    require_int_range(height, BYTE_MIN, BYTE_MAX, "page_format.height")
    return ESC + b"(c" + bytes([width, height])


def set_page_length(length: int) -> bytes:
    """
    Specify page length.

    Command: ESC ( C n
    Hex: 1B 28 43 n
    """
    require_int_range(length, BYTE_MIN, BYTE_MAX, "page_length")
    return ESC + b"(C" + bytes([length])


# =============================================================================
# MARGIN CONTROL
# =============================================================================


def set_left_margin(columns: int) -> bytes:
    """
    Set left margin position.

    Command: ESC l n
    Hex: 1B 6C n

    Args:
        columns: Left margin in characters (0-255). 0 = no margin.

    Raises:
        InvalidArgumentError: If columns is out of range.
    """
    require_int_range(columns, BYTE_MIN, BYTE_MAX, "left_margin")
    return ESC + b"l" + bytes([columns])


def set_right_margin(columns: int) -> bytes:
    """
    Set right margin position.

    Command: ESC Q n
    Hex: 1B 51 n

    Args:
        columns: Right margin measured from the left edge (0-255).

    Raises:
        InvalidArgumentError: If columns is out of range.
    """
    require_int_range(columns, BYTE_MIN, BYTE_MAX, "right_margin")
    return ESC + b"Q" + bytes([columns])
