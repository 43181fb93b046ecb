"""
Encoder for styled text runs.

A text run is the style prefix followed by the payload and an optional
terminator:

    ESC SOH | ESC X size | ESC k font | ESC E/F | ESC 4/5 | ESC - u |
    ESC a align | ESC SP spacing | payload | [terminator]

The single-text variant terminates with LF, the two-part variant (two
columns separated by HT) terminates with CR.
"""

from __future__ import annotations

import logging
from typing import Final

from escp_label.escp.commands import (
    CR,
    ESC_MODE_MARKER,
    HT,
    LF,
    set_alignment,
    set_bold,
    set_font_size,
    set_font_type,
    set_italic,
    set_spacing,
    set_underline,
)
from escp_label.escp.display import escape_non_printable
from escp_label.model.enums import DEFAULT_TEXT_ENCODING
from escp_label.model.options import StyleOptions
from escp_label.model.validation import InvalidArgumentError, require_text

logger: Final = logging.getLogger(__name__)

__all__ = ["TextEncoder", "insert_tab", "DEFAULT_TEXT_ENCODING"]


def _encode_payload(text: str, encoding: str, field: str) -> bytes:
    try:
        return text.encode(encoding)
    except UnicodeEncodeError as exc:
        raise InvalidArgumentError(
            f"{field}: {text!r} cannot be encoded as {encoding} ({exc.reason})",
            field=field,
        ) from None


def insert_tab(text1: str, text2: str, encoding: str = DEFAULT_TEXT_ENCODING) -> bytes:
    """
    Join two columns with a horizontal tab.

    Example:
        >>> insert_tab("Hello", "World")
        b'Hello\\tWorld'
    """
    return (
        _encode_payload(text1, encoding, "text1")
        + HT
        + _encode_payload(text2, encoding, "text2")
    )


class TextEncoder:
    """
    Builds ESC/P byte sequences for styled text runs.

    The encoder holds only its text codec, so one instance may be shared
    freely between threads.

    Args:
        encoding: Python codec used for the payload (default "ascii").

    Example:
        >>> encoder = TextEncoder()
        >>> style = StyleOptions(24, FontType.HELSINKI, bold=Bold.ON)
        >>> fragment = encoder.encode_columns("Hello", "World", style, carriage_return=True)
    """

    def __init__(self, encoding: str = DEFAULT_TEXT_ENCODING) -> None:
        try:
            "".encode(encoding)
        except (LookupError, TypeError):
            raise InvalidArgumentError(f"Unknown text encoding: {encoding!r}", field="encoding") from None
        self.encoding = encoding

    def encode(self, text: str, style: StyleOptions, *, line_feed: bool = False) -> bytes:
        """
        Encode a single text run.

        Args:
            text: Non-empty text.
            style: Run styling.
            line_feed: Append LF after the text.

        Raises:
            InvalidArgumentError: On empty text, a non-StyleOptions style or
                text the codec cannot represent.
        """
        require_text(text, "text")
        prefix = self._style_prefix(style)
        payload = _encode_payload(text, self.encoding, "text")

        result = prefix + payload + (LF if line_feed else b"")
        self._log_result(result)
        return result

    def encode_columns(
        self,
        text1: str,
        text2: str,
        style: StyleOptions,
        *,
        carriage_return: bool = False,
    ) -> bytes:
        """
        Encode a two-part run: text1, HT, text2.

        Both halves are required. carriage_return appends CR.
        """
        require_text(text1, "text1")
        require_text(text2, "text2")
        prefix = self._style_prefix(style)
        payload = insert_tab(text1, text2, self.encoding)

        result = prefix + payload + (CR if carriage_return else b"")
        self._log_result(result)
        return result

    @staticmethod
    def _style_prefix(style: StyleOptions) -> bytes:
        if not isinstance(style, StyleOptions):
            raise InvalidArgumentError(
                f"style must be StyleOptions, got {type(style).__name__}", field="style"
            )
        logger.debug("Encoding text run with %s", style)
        return b"".join(
            (
                ESC_MODE_MARKER,
                set_font_size(style.font_size),
                set_font_type(style.font_type),
                set_bold(style.bold),
                set_italic(style.italic),
                set_underline(style.underline),
                set_alignment(style.alignment),
                set_spacing(style.spacing),
            )
        )

    @staticmethod
    def _log_result(result: bytes) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Resulting text command: %s", escape_non_printable(result))
