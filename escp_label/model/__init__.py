"""
model

Типизированные параметры для кодировщиков ESC/P.

Public API:
    - StyleOptions, BarcodeOptions, JobOptions: неизменяемые записи параметров
    - InvalidArgumentError: ошибка недопустимого аргумента
    - перечисления шрифтов, выравнивания и штрихкодов
"""

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

__all__ = [
    "Alignment",
    "BarcodeRatio",
    "BarcodeType",
    "BarcodeWidth",
    "Bold",
    "FontType",
    "Italic",
    "Spacing",
    "Underline",
    "StyleOptions",
    "BarcodeOptions",
    "JobOptions",
    "InvalidArgumentError",
]
