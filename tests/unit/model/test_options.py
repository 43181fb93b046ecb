"""Tests for escp_label/model/options.py"""

import dataclasses

import pytest

from escp_label.model.enums import (
    Alignment,
    BarcodeRatio,
    BarcodeType,
    BarcodeWidth,
    Bold,
    FontType,
    Italic,
    Spacing,
    Underline,
)
from escp_label.model.options import BarcodeOptions, JobOptions, StyleOptions
from escp_label.model.validation import InvalidArgumentError


class TestStyleOptions:
    def test_defaults(self) -> None:
        style = StyleOptions(12)
        assert style.font_type is FontType.BROUGHAM
        assert style.bold is Bold.OFF
        assert style.italic is Italic.OFF
        assert style.underline is Underline.NONE
        assert style.alignment is Alignment.LEFT
        assert style.spacing is Spacing.NORMAL

    def test_coerces_names(self) -> None:
        style = StyleOptions(12, font_type="letter-gothic", bold="ON", alignment="right")
        assert style.font_type is FontType.LETTER_GOTHIC
        assert style.bold is Bold.ON
        assert style.alignment is Alignment.RIGHT

    def test_frozen(self) -> None:
        style = StyleOptions(12)
        with pytest.raises(dataclasses.FrozenInstanceError):
            style.font_size = 14  # type: ignore[misc]

    @pytest.mark.parametrize("size", [0, 1000, "12"])
    def test_font_size_range(self, size) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            StyleOptions(size)
        assert exc_info.value.field == "font_size"

    def test_unknown_font(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            StyleOptions(12, font_type="comic_sans")
        assert exc_info.value.field == "font_type"


class TestBarcodeOptions:
    def test_defaults(self) -> None:
        opts = BarcodeOptions(BarcodeType.CODE39)
        assert opts.height == 70
        assert opts.width is BarcodeWidth.MEDIUM
        assert opts.ratio is BarcodeRatio.TWO_TO_ONE
        assert opts.print_human_readable is True
        assert opts.alignment is Alignment.LEFT

    @pytest.mark.parametrize("height", [0, 100, -3])
    def test_height_range(self, height: int) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            BarcodeOptions(BarcodeType.CODE39, height=height)
        assert exc_info.value.field == "height"

    def test_human_readable_must_be_bool(self) -> None:
        with pytest.raises(InvalidArgumentError):
            BarcodeOptions(BarcodeType.CODE39, print_human_readable="yes")  # type: ignore[arg-type]

    def test_unknown_symbology(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            BarcodeOptions("qr")
        assert exc_info.value.field == "symbology"


class TestJobOptions:
    def test_defaults_emit_nothing(self) -> None:
        options = JobOptions()
        assert not options.cut_paper
        assert not options.landscape
        assert options.page_format is None
        assert options.page_length is None

    def test_page_format_normalized_to_tuple(self) -> None:
        assert JobOptions(page_format=[62, 100]).page_format == (62, 100)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        "page_format, field",
        [
            ((300, 10), "page_format.width"),
            ((10, -1), "page_format.height"),
            ((10,), "page_format"),
            (10, "page_format"),
            ((None, 10), "page_format"),
        ],
    )
    def test_page_format_invalid(self, page_format, field: str) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            JobOptions(page_format=page_format)
        assert exc_info.value.field == field

    @pytest.mark.parametrize(
        "name",
        ["page_length", "left_margin", "right_margin", "horizontal_position", "vertical_position"],
    )
    def test_byte_fields(self, name: str) -> None:
        assert getattr(JobOptions(**{name: 255}), name) == 255
        with pytest.raises(InvalidArgumentError) as exc_info:
            JobOptions(**{name: 256})
        assert exc_info.value.field == name

    def test_flags_must_be_bool(self) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            JobOptions(cut_paper=1)  # type: ignore[arg-type]
        assert exc_info.value.field == "cut_paper"


def test_style_rejects_member_of_another_enum() -> None:
    with pytest.raises(InvalidArgumentError) as exc_info:
        StyleOptions(8, bold=Italic.ON)
    assert exc_info.value.field == "bold"
