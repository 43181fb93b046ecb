"""
Control characters and absolute positioning commands for Brother QL ESC/P mode.

Contains the single-byte control characters used by the encoders and the
one-byte horizontal/vertical position commands used by the job assembler.

Reference: Brother QL-800/810W/820NWB ESC/P Command Reference
"""

from typing import Final

from escp_label.model.validation import BYTE_MAX, BYTE_MIN, require_int_range

__all__ = [
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
]

# =============================================================================
# BASIC CONTROL CHARACTERS
# =============================================================================

ESC: Final[bytes] = b"\x1b"
"""
Escape, the prefix of every ESC/P command.

Hex: 1B
"""

HT: Final[bytes] = b"\t"
"""
Horizontal Tab.

Hex: 09
Effect: Moves to the next horizontal tab stop.
Use: Separates the two columns of a two-part text run.
"""

LF: Final[bytes] = b"\n"
"""
Line Feed.

Hex: 0A
Effect: Advances paper by the current line spacing.
Use: Terminator of single-text runs.
"""

FF: Final[bytes] = b"\x0c"
"""
Form Feed.

Hex: 0C
Effect: Prints the page buffer and feeds to the next label.
Use: Always the last byte of an assembled job.
"""

CR: Final[bytes] = b"\r"
"""
Carriage Return.

Hex: 0D
Effect: Returns to the left margin.
Use: Terminator of two-part text runs and optional barcode terminator.
"""

NEW_LINE: Final[bytes] = LF + LF
"""
Blank line.

Hex: 0A 0A
Effect: Ends the current line and leaves one empty line below it.
"""

# =============================================================================
# LINE FEED SETUP
# =============================================================================


def set_line_feed_amount(amount: int) -> bytes:
    """
    Specify the line feed amount.

    Command: ESC 3 n
    Hex: 1B 33 n

    Args:
        amount: Feed per LF in printer units (0-255), one raw byte.

    Raises:
        InvalidArgumentError: If amount is out of range.
    """
    require_int_range(amount, BYTE_MIN, BYTE_MAX, "line_feed_amount")
    return ESC + b"3" + bytes([amount])


def margin_and_line_feed_setup() -> bytes:
    """
    Standard label setup: ESC U 02 followed by a line feed amount of 4.

    Hex: 1B 55 02 1B 33 04
    """
    return ESC + b"U\x02" + set_line_feed_amount(4)


# =============================================================================
# ABSOLUTE POSITIONING
# =============================================================================


def set_horizontal_position(position: int) -> bytes:
    """
    Set absolute horizontal print position.

    Command: ESC $ n
    Hex: 1B 24 n

    Args:
        position: Position from the left margin (0-255), sent as one raw byte.

    Raises:
        InvalidArgumentError: If position is out of range.

    Example:
        >>> set_horizontal_position(10)
        b'\\x1b$\\n'
    """
    require_int_range(position, BYTE_MIN, BYTE_MAX, "horizontal_position")
    return ESC + b"$" + bytes([position])


def set_vertical_position(position: int) -> bytes:
    """
    Set absolute vertical print position.

    Command: ESC ( V n
    Hex: 1B 28 56 n

    Args:
        position: Position from the top of the label (0-255), one raw byte.

    Raises:
        InvalidArgumentError: If position is out of range.
    """
    require_int_range(position, BYTE_MIN, BYTE_MAX, "vertical_position")
    return ESC + b"(V" + bytes([position])
