"""
Human-readable rendering of ESC/P buffers for logs and diagnostics.

Kept apart from the encoders: nothing here is ever part of an encoded
command.
"""

from typing import Final, Union

__all__ = ["escape_non_printable", "hex_dump"]

_PRINTABLE_MIN: Final[int] = 0x20
_PRINTABLE_MAX: Final[int] = 0x7E


def escape_non_printable(data: Union[bytes, bytearray]) -> str:
    """
    Render data as text, escaping control and high bytes as \\xNN.

    Example:
        >>> escape_non_printable(b"\\x1b@Hi\\x0c")
        '\\\\x1b@Hi\\\\x0c'
    """
    parts = []
    for byte in data:
        if byte < _PRINTABLE_MIN or byte > _PRINTABLE_MAX:
            parts.append(f"\\x{byte:02x}")
        else:
            parts.append(chr(byte))
    return "".join(parts)


def hex_dump(data: Union[bytes, bytearray]) -> str:
    """Space separated upper-case hex, e.g. '1B 40 0C'."""
    return " ".join(f"{byte:02X}" for byte in data)
