"""
Print job assembly.

Wraps already encoded fragments with document-level setup and teardown:

    1. ESC @                        always
    2. ESC i L                      landscape
    3. ESC ( c w h                  page format
    4. ESC ( C n                    page length
    5. ESC l / ESC Q / ESC $ / ESC ( V   margins and positions
    6. fragments, verbatim, in order
    7. ESC i C                      cut paper
    8. FF                           always

Options are validated by JobOptions itself; fragments are checked here
before the first byte is produced.
"""

from __future__ import annotations

import logging
from typing import Final, Iterable, List, Optional

from escp_label.escp.commands import (
    ESC_CUT,
    ESC_INIT_PRINTER,
    ESC_LANDSCAPE,
    FF,
    set_horizontal_position,
    set_left_margin,
    set_page_format,
    set_page_length,
    set_right_margin,
    set_vertical_position,
)
from escp_label.escp.display import escape_non_printable
from escp_label.model.options import JobOptions
from escp_label.model.validation import InvalidArgumentError

logger: Final = logging.getLogger(__name__)

__all__ = ["PrintJobAssembler"]


class PrintJobAssembler:
    """Concatenates fragments into one finished ESC/P buffer."""

    def assemble(
        self,
        fragments: Iterable[bytes],
        options: Optional[JobOptions] = None,
    ) -> bytes:
        """
        Build the full print command.

        Args:
            fragments: Encoded text/barcode fragments in print order.
            options: Job options; None means JobOptions() (no optional codes).

        Returns:
            The buffer to write verbatim to the printer.

        Raises:
            InvalidArgumentError: If a fragment is not bytes-like or options
                is not a JobOptions.
        """
        if options is None:
            options = JobOptions()
        elif not isinstance(options, JobOptions):
            raise InvalidArgumentError(
                f"options must be JobOptions, got {type(options).__name__}", field="options"
            )
        body = self._collect_fragments(fragments)

        logger.debug("Assembling %d fragment(s) with %s", len(body), options)

        parts: List[bytes] = [ESC_INIT_PRINTER]
        parts.extend(self._setup(options))
        parts.extend(body)
        if options.cut_paper:
            parts.append(ESC_CUT)
        parts.append(FF)

        result = b"".join(parts)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Final print command: %s", escape_non_printable(result))
        return result

    @staticmethod
    def _collect_fragments(fragments: Iterable[bytes]) -> List[bytes]:
        if isinstance(fragments, (bytes, bytearray, str)):
            raise InvalidArgumentError(
                "fragments must be a sequence of byte strings, not a single value",
                field="fragments",
            )
        try:
            collected = list(fragments)
        except TypeError:
            raise InvalidArgumentError(
                f"fragments must be iterable, got {type(fragments).__name__}",
                field="fragments",
            ) from None

        for index, fragment in enumerate(collected):
            if not isinstance(fragment, (bytes, bytearray, memoryview)):
                raise InvalidArgumentError(
                    f"fragment #{index} must be bytes, got {type(fragment).__name__}",
                    field="fragments",
                )
        return [bytes(fragment) for fragment in collected]

    @staticmethod
    def _setup(options: JobOptions) -> List[bytes]:
        setup: List[bytes] = []
        if options.landscape:
            setup.append(ESC_LANDSCAPE)
        if options.page_format is not None:
            width, height = options.page_format
            setup.append(set_page_format(width, height))
        if options.page_length is not None:
            setup.append(set_page_length(options.page_length))
        if options.left_margin is not None:
            setup.append(set_left_margin(options.left_margin))
        if options.right_margin is not None:
            setup.append(set_right_margin(options.right_margin))
        if options.horizontal_position is not None:
            setup.append(set_horizontal_position(options.horizontal_position))
        if options.vertical_position is not None:
            setup.append(set_vertical_position(options.vertical_position))
        return setup
