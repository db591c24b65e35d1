#!/usr/bin/env python3

"""Enum layout parsing.

EnumsInfo groups map an enum name to an array whose first element lists the
values as single-key records::

    {"EFortRarity": [[{"EFortRarity__Common": 0}, {"EFortRarity__Uncommon": 1}], "uint8"]}

Elements after the first (the underlying type) are not used. A ``version``
tag, when present, must be a known schema version.
"""

from ....errors import SchemaError
from ....infrastructure.logging import get_logger, log_timing
from ...models.layout import EnumKey, SchemaVersion
from .document_loader import load_document
from .records import ParsedEnums, expect_int, expect_list, expect_object, single_entry

logger = get_logger(__name__)


class EnumParser:
    """Parses enum layout documents into value-name entries."""

    @log_timing
    def parse(self, text: str, document: str) -> ParsedEnums:
        """Parse an EnumsInfo document.

        Raises:
            SchemaError: On an unknown version tag or malformed groups
        """
        root = load_document(text, document)
        if "version" in root:
            SchemaVersion.from_tag(root["version"], document)
        parsed = ParsedEnums(document=document)

        for index, group in enumerate(root["data"]):
            group = expect_object(group, document, f"data[{index}]")
            for enum_name, body in group.items():
                body = expect_list(body, document, enum_name)
                if not body:
                    raise SchemaError(document, f"{enum_name}: empty enum body")

                for entry in expect_list(body[0], document, f"{enum_name} values"):
                    value_name, value = single_entry(entry, document, f"{enum_name} value")
                    value = expect_int(value, document, f"{enum_name}.{value_name}")
                    parsed.values.append((EnumKey(enum_name=enum_name, value=value), value_name))

        logger.debug(f"{document}: {len(parsed.values)} enum values")
        return parsed
