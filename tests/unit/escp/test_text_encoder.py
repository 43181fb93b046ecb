"""
Tests for escp_label/escp/text_encoder.py

Covers the byte layout of single and two-part runs, terminators, payload
encoding and argument validation.
"""

import logging

import pytest

from escp_label.escp.text_encoder import TextEncoder, insert_tab
from escp_label.model.enums import (
    Alignment,
    Bold,
    FontType,
    Italic,
    Spacing,
    Underline,
)
from escp_label.model.options import StyleOptions
from escp_label.model.validation import InvalidArgumentError

STYLE_PREFIX_HEX = "1B534F48 1B583234 1B6B03 1B45 1B35 1B2D31 1B6131 1B2031"


@pytest.fixture
def style() -> StyleOptions:
    return StyleOptions(
        font_size=24,
        font_type=FontType.HELSINKI,
        bold=Bold.ON,
        italic=Italic.OFF,
        underline=Underline.SINGLE,
        alignment=Alignment.CENTER,
        spacing=Spacing.WIDE,
    )


@pytest.fixture
def encoder() -> TextEncoder:
    return TextEncoder()


class TestTwoPartVariant:
    def test_reference_sequence(self, encoder: TextEncoder, style: StyleOptions) -> None:
        """Hello/World, Helsinki 24, bold, single underline, centered, wide, CR."""
        expected = bytes.fromhex(
            STYLE_PREFIX_HEX + " 48656C6C6F 09 576F726C64 0D"
        )
        assert encoder.encode_columns("Hello", "World", style, carriage_return=True) == expected

    def test_without_carriage_return(self, encoder: TextEncoder, style: StyleOptions) -> None:
        result = encoder.encode_columns("Hello", "World", style)
        assert result.endswith(b"Hello\tWorld")

    @pytest.mark.parametrize("text1, text2", [("", "World"), ("Hello", ""), (None, "World")])
    def test_both_halves_required(
        self, encoder: TextEncoder, style: StyleOptions, text1, text2
    ) -> None:
        with pytest.raises(InvalidArgumentError):
            encoder.encode_columns(text1, text2, style)


class TestSingleVariant:
    def test_line_feed_terminator(self, encoder: TextEncoder, style: StyleOptions) -> None:
        result = encoder.encode("Hello", style, line_feed=True)
        assert result == bytes.fromhex(STYLE_PREFIX_HEX) + b"Hello\n"

    def test_no_terminator_by_default(self, encoder: TextEncoder, style: StyleOptions) -> None:
        assert encoder.encode("Hello", style).endswith(b"Hello")

    def test_default_style(self, encoder: TextEncoder) -> None:
        result = encoder.encode("A", StyleOptions(font_size=8))
        assert result == bytes.fromhex("1B534F48 1B5838 1B6B00 1B46 1B35 1B2D30 1B6130 1B2030 41")

    def test_empty_text(self, encoder: TextEncoder, style: StyleOptions) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            encoder.encode("", style)
        assert exc_info.value.field == "text"

    def test_style_type_checked(self, encoder: TextEncoder) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            encoder.encode("Hello", {"font_size": 24})  # type: ignore[arg-type]
        assert exc_info.value.field == "style"


class TestPayloadEncoding:
    def test_non_ascii_rejected_by_default(self, encoder: TextEncoder, style: StyleOptions) -> None:
        with pytest.raises(InvalidArgumentError):
            encoder.encode("Привет", style)

    def test_custom_codec(self, style: StyleOptions) -> None:
        result = TextEncoder("cp866").encode("Привет", style)
        assert result.endswith("Привет".encode("cp866"))

    def test_unknown_codec(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            TextEncoder("no-such-codec")
        assert exc_info.value.field == "encoding"

    def test_insert_tab(self) -> None:
        assert insert_tab("Name", "Value") == b"Name\x09Value"


def test_output_is_deterministic(encoder: TextEncoder, style: StyleOptions) -> None:
    first = encoder.encode_columns("Hello", "World", style, carriage_return=True)
    for _ in range(5):
        assert TextEncoder().encode_columns("Hello", "World", style, carriage_return=True) == first


def test_debug_logging_does_not_change_output(
    encoder: TextEncoder, style: StyleOptions, caplog: pytest.LogCaptureFixture
) -> None:
    quiet = encoder.encode("Hello", style)
    with caplog.at_level(logging.DEBUG, logger="escp_label"):
        loud = encoder.encode("Hello", style)
    assert loud == quiet
    assert any("\\x1bSOH" in record.getMessage() for record in caplog.records)


def test_non_string_codec_rejected() -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        TextEncoder(5)  # type: ignore[arg-type]
    assert exc_info.value.field == "encoding"
