#!/usr/bin/env python3

"""Global offsets parsing.

OffsetsInfo carries ``[name, value]`` pairs, e.g. ``["OFFSET_GWORLD", 348399680]``.
"""

from ....errors import SchemaError
from ....infrastructure.logging import get_logger, log_timing
from .document_loader import load_document
from .records import ParsedOffsets, expect_int, expect_list

logger = get_logger(__name__)


class OffsetsParser:
    """Parses global offsets documents."""

    @log_timing
    def parse(self, text: str, document: str) -> ParsedOffsets:
        """Parse an OffsetsInfo document.

        Raises:
            SchemaError: If an entry is not a ``[string, unsigned int]`` pair
        """
        root = load_document(text, document)
        parsed = ParsedOffsets(document=document)

        for index, entry in enumerate(root["data"]):
            where = f"data[{index}]"
            pair = expect_list(entry, document, where)
            if len(pair) != 2:
                raise SchemaError(document, f"{where}: expected [name, value], got {len(pair)} elements")

            name, value = pair
            if not isinstance(name, str):
                raise SchemaError(document, f"{where}: offset name must be a string, got {name!r}")
            value = expect_int(value, document, f"{where} ({name})")
            if value < 0:
                raise SchemaError(document, f"{where} ({name}): offset must be unsigned, got {value}")

            parsed.offsets.append((name, value))

        logger.debug(f"{document}: {len(parsed.offsets)} global offsets")
        return parsed
