"""
Immutable option records passed to the encoders.

Each record validates and normalizes itself on construction: enum fields
accept a member, its value or its name, numeric fields are range checked.
A record that exists is therefore always encodable.

Module: escp_label/model/options.py
Project: escp-label
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .enums import (
    DEFAULT_ALIGNMENT,
    DEFAULT_BARCODE_HEIGHT,
    DEFAULT_BARCODE_RATIO,
    DEFAULT_BARCODE_WIDTH,
    DEFAULT_FONT_TYPE,
    DEFAULT_SPACING,
    MAX_BARCODE_HEIGHT,
    MAX_FONT_SIZE,
    MIN_BARCODE_HEIGHT,
    MIN_FONT_SIZE,
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
from .validation import (
    InvalidArgumentError,
    coerce_enum,
    require_int_range,
    require_optional_byte,
)

__all__ = [
    "StyleOptions",
    "BarcodeOptions",
    "JobOptions",
]


@dataclass(frozen=True, slots=True)
class StyleOptions:
    """Styling of one text run."""

    font_size: int
    font_type: FontType = DEFAULT_FONT_TYPE
    bold: Bold = Bold.OFF
    italic: Italic = Italic.OFF
    underline: Underline = Underline.NONE
    alignment: Alignment = DEFAULT_ALIGNMENT
    spacing: Spacing = DEFAULT_SPACING

    def __post_init__(self) -> None:
        require_int_range(self.font_size, MIN_FONT_SIZE, MAX_FONT_SIZE, "font_size")
        object.__setattr__(self, "font_type", coerce_enum(FontType, self.font_type, "font_type"))
        object.__setattr__(self, "bold", coerce_enum(Bold, self.bold, "bold"))
        object.__setattr__(self, "italic", coerce_enum(Italic, self.italic, "italic"))
        object.__setattr__(self, "underline", coerce_enum(Underline, self.underline, "underline"))
        object.__setattr__(self, "alignment", coerce_enum(Alignment, self.alignment, "alignment"))
        object.__setattr__(self, "spacing", coerce_enum(Spacing, self.spacing, "spacing"))


@dataclass(frozen=True, slots=True)
class BarcodeOptions:
    """Parameters of one barcode block."""

    symbology: BarcodeType
    height: int = DEFAULT_BARCODE_HEIGHT
    width: BarcodeWidth = DEFAULT_BARCODE_WIDTH
    ratio: BarcodeRatio = DEFAULT_BARCODE_RATIO
    print_human_readable: bool = True
    alignment: Alignment = DEFAULT_ALIGNMENT

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "symbology", coerce_enum(BarcodeType, self.symbology, "symbology")
        )
        require_int_range(self.height, MIN_BARCODE_HEIGHT, MAX_BARCODE_HEIGHT, "height")
        object.__setattr__(self, "width", coerce_enum(BarcodeWidth, self.width, "width"))
        object.__setattr__(self, "ratio", coerce_enum(BarcodeRatio, self.ratio, "ratio"))
        if not isinstance(self.print_human_readable, bool):
            raise InvalidArgumentError(
                "print_human_readable must be a bool", field="print_human_readable"
            )
        object.__setattr__(self, "alignment", coerce_enum(Alignment, self.alignment, "alignment"))


@dataclass(frozen=True, slots=True)
class JobOptions:
    """
    Document-level setup of a print job.

    Attributes:
        cut_paper: Emit ESC i C before the closing form feed.
        landscape: Emit ESC i L after initialization.
        page_format: (width, height) pair, each 0-255; None to omit.
        page_length: 0-255 or None.
        left_margin, right_margin: 0-255 or None.
        horizontal_position, vertical_position: 0-255 or None.

    None always means "emit nothing"; there are no sentinel values.
    """

    cut_paper: bool = False
    landscape: bool = False
    page_format: Optional[Tuple[int, int]] = None
    page_length: Optional[int] = None
    left_margin: Optional[int] = None
    right_margin: Optional[int] = None
    horizontal_position: Optional[int] = None
    vertical_position: Optional[int] = None

    def __post_init__(self) -> None:
        for flag in ("cut_paper", "landscape"):
            if not isinstance(getattr(self, flag), bool):
                raise InvalidArgumentError(f"{flag} must be a bool", field=flag)

        if self.page_format is not None:
            try:
                width, height = self.page_format
            except (TypeError, ValueError):
                raise InvalidArgumentError(
                    f"page_format must be a (width, height) pair, got {self.page_format!r}",
                    field="page_format",
                ) from None
            object.__setattr__(
                self,
                "page_format",
                (
                    require_optional_byte(width, "page_format.width"),
                    require_optional_byte(height, "page_format.height"),
                ),
            )
            if None in self.page_format:
                raise InvalidArgumentError(
                    "page_format needs both width and height", field="page_format"
                )

        for name in (
            "page_length",
            "left_margin",
            "right_margin",
            "horizontal_position",
            "vertical_position",
        ):
            require_optional_byte(getattr(self, name), name)
