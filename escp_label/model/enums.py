"""
model/enums.py

(Краткое RU: Перечисления параметров текста и штрихкодов для ESC/P режима Brother QL.)

EN: Domain enums for the label encoder. Values are stable semantic names;
the wire byte of every member lives in an explicit table in
escp_label.escp.commands, never in the enum value itself.

See Also:
    - escp_label.escp.commands (for protocol bytes)
"""

from __future__ import annotations

from enum import Enum
from typing import Final

# === HARDWARE CONSTANTS ===
MIN_FONT_SIZE: Final[int] = 1
MAX_FONT_SIZE: Final[int] = 999  # sent as up to three ASCII digits
MIN_BARCODE_HEIGHT: Final[int] = 1
MAX_BARCODE_HEIGHT: Final[int] = 99  # firmware reads exactly two digits


# === TEXT ===


class FontType(str, Enum):
    BROUGHAM = "brougham"
    LETTER_GOTHIC_BOLD = "letter_gothic_bold"
    BRUSSELS = "brussels"
    HELSINKI = "helsinki"
    SAN_DIEGO = "san_diego"
    LETTER_GOTHIC = "letter_gothic"
    BROUGHAM_OCR_B = "brougham_ocr_b"


class Bold(str, Enum):
    ON = "on"
    OFF = "off"


class Italic(str, Enum):
    ON = "on"
    OFF = "off"


class Underline(str, Enum):
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"


class Alignment(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Spacing(str, Enum):
    NORMAL = "normal"
    WIDE = "wide"


# === BARCODES ===


class BarcodeType(str, Enum):
    CODE39 = "code39"
    ITF = "itf"
    EAN8 = "ean8"
    EAN13 = "ean13"
    UPCA = "upca"
    UPCE = "upce"
    UPCE_EXTENSION = "upce_extension"
    CODABAR = "codabar"
    CODE128 = "code128"
    GS1_128 = "gs1_128"
    RSS = "rss"
    CODE93 = "code93"
    POSTNET = "postnet"
    MSI = "msi"

    @property
    def uses_escaped_backslash(self) -> bool:
        """Backslash is the escape character inside CODE128/GS1-128 data."""
        return self in {BarcodeType.CODE128, BarcodeType.GS1_128}

    @property
    def display_name(self) -> str:
        """Human-readable symbology name for logs and help output."""
        names = {
            BarcodeType.CODE39: "Code 39",
            BarcodeType.ITF: "Interleaved 2 of 5",
            BarcodeType.EAN8: "EAN-8",
            BarcodeType.EAN13: "EAN-13",
            BarcodeType.UPCA: "UPC-A",
            BarcodeType.UPCE: "UPC-E",
            BarcodeType.UPCE_EXTENSION: "UPC-E (extension)",
            BarcodeType.CODABAR: "Codabar",
            BarcodeType.CODE128: "Code 128",
            BarcodeType.GS1_128: "GS1-128 (EAN-128)",
            BarcodeType.RSS: "GS1 DataBar (RSS)",
            BarcodeType.CODE93: "Code 93",
            BarcodeType.POSTNET: "POSTNET",
            BarcodeType.MSI: "MSI Plessey",
        }
        return names[self]


class BarcodeWidth(str, Enum):
    EXTRA_SMALL = "extra_small"
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class BarcodeRatio(str, Enum):
    THREE_TO_ONE = "3:1"
    TWO_POINT_FIVE_TO_ONE = "2.5:1"
    TWO_TO_ONE = "2:1"


# === DEFAULTS ===
DEFAULT_FONT_TYPE: Final[FontType] = FontType.BROUGHAM
DEFAULT_ALIGNMENT: Final[Alignment] = Alignment.LEFT
DEFAULT_SPACING: Final[Spacing] = Spacing.NORMAL
DEFAULT_BARCODE_HEIGHT: Final[int] = 70
DEFAULT_BARCODE_WIDTH: Final[BarcodeWidth] = BarcodeWidth.MEDIUM
DEFAULT_BARCODE_RATIO: Final[BarcodeRatio] = BarcodeRatio.TWO_TO_ONE
DEFAULT_TEXT_ENCODING: Final[str] = "ascii"  # Python codec name


__all__ = [
    "FontType",
    "Bold",
    "Italic",
    "Underline",
    "Alignment",
    "Spacing",
    "BarcodeType",
    "BarcodeWidth",
    "BarcodeRatio",
    "MIN_FONT_SIZE",
    "MAX_FONT_SIZE",
    "MIN_BARCODE_HEIGHT",
    "MAX_BARCODE_HEIGHT",
    "DEFAULT_FONT_TYPE",
    "DEFAULT_ALIGNMENT",
    "DEFAULT_SPACING",
    "DEFAULT_BARCODE_HEIGHT",
    "DEFAULT_BARCODE_WIDTH",
    "DEFAULT_BARCODE_RATIO",
    "DEFAULT_TEXT_ENCODING",
]
