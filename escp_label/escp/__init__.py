"""
escp

Кодировщики ESC/P: текст, штрихкоды и сборка задания печати.

Public API:
    - TextEncoder: styled text runs (single and two-column variants)
    - BarcodeEncoder: barcode blocks
    - PrintJobAssembler: job setup/teardown around encoded fragments
    - escape_non_printable, hex_dump: diagnostics rendering

Example:
    >>> from escp_label.escp import TextEncoder, PrintJobAssembler
    >>> from escp_label.model import StyleOptions, JobOptions
    >>> fragment = TextEncoder().encode("Hi", StyleOptions(24), line_feed=True)
    >>> job = PrintJobAssembler().assemble([fragment], JobOptions(cut_paper=True))
"""

from escp_label.escp.barcode_encoder import BarcodeEncoder
from escp_label.escp.display import escape_non_printable, hex_dump
from escp_label.escp.job_assembler import PrintJobAssembler
from escp_label.escp.text_encoder import DEFAULT_TEXT_ENCODING, TextEncoder, insert_tab

__all__ = [
    "BarcodeEncoder",
    "PrintJobAssembler",
    "TextEncoder",
    "DEFAULT_TEXT_ENCODING",
    "insert_tab",
    "escape_non_printable",
    "hex_dump",
]
