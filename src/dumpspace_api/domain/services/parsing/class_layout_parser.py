#!/usr/bin/env python3

"""Class and struct layout parsing.

ClassesInfo and StructsInfo documents share one shape::

    {"version": 10202,
     "data": [{"AActor": [{"__MDKClassSize": 656},
                          {"__InheritInfo": ["UObject"]},
                          {"RootComponent": ["USceneComponent", 408, 8, 0]},
                          ...]},
              ...]}

Each member array is decoded against the schema selected by ``version``.
"""

from typing import Any

from ....errors import SchemaError
from ....infrastructure.logging import get_logger, log_timing
from ...models.layout import MemberKey, MemberOffset, SchemaVersion
from ...models.layout.schema_version import BITFIELD_SUFFIX_LENGTH
from .document_loader import load_document
from .records import (
    MemberRecord,
    ParsedClassLayout,
    SizeRecord,
    decode_type_record,
    expect_list,
    expect_object,
)

logger = get_logger(__name__)


class ClassLayoutParser:
    """Parses class/struct layout documents into member and size entries.

    The whole document is decoded before anything is returned, so a schema
    error leaves no partial result behind.
    """

    @log_timing
    def parse(self, text: str, document: str) -> ParsedClassLayout:
        """Parse a ClassesInfo or StructsInfo document.

        Args:
            text: Decompressed document text
            document: Document name used in log and error messages

        Returns:
            ParsedClassLayout with every member and type size

        Raises:
            SchemaError: On unknown versions or malformed entries
        """
        root = load_document(text, document)
        version = SchemaVersion.from_tag(root.get("version"), document)
        logger.debug(f"{document}: schema version {version.value} ({version.name})")

        parsed = ParsedClassLayout(document=document, version=version)
        for index, group in enumerate(root["data"]):
            group = expect_object(group, document, f"data[{index}]")
            for type_name, entries in group.items():
                self._parse_type(type_name, entries, version, parsed)

        logger.debug(
            f"{document}: {len(parsed.members)} members, {len(parsed.type_sizes)} type sizes"
        )
        return parsed

    def _parse_type(
        self,
        type_name: str,
        entries: Any,
        version: SchemaVersion,
        parsed: ParsedClassLayout,
    ) -> None:
        for entry in expect_list(entries, parsed.document, type_name):
            record = decode_type_record(type_name, entry, version, parsed.document)

            if record is None:
                continue
            if isinstance(record, SizeRecord):
                parsed.type_sizes.append((record.type_name, record.size))
                continue

            parsed.members.append(self._to_member(record, version, parsed.document))

    def _to_member(
        self,
        record: MemberRecord,
        version: SchemaVersion,
        document: str,
    ) -> tuple[MemberKey, MemberOffset]:
        if (
            record.is_bitfield
            and version.strips_bitfield_suffix
            and len(record.raw_name) <= BITFIELD_SUFFIX_LENGTH
        ):
            raise SchemaError(
                document,
                f"{record.type_name}.{record.raw_name}: bitfield name too short "
                f"for its {BITFIELD_SUFFIX_LENGTH} character suffix",
            )

        key = MemberKey(
            type_name=record.type_name,
            member_name=version.member_name(record.raw_name, record.is_bitfield),
        )
        info = MemberOffset(
            offset=record.offset,
            size=record.size,
            is_bitfield=record.is_bitfield,
            bit_offset=record.bit_offset,
            is_resolved=True,
        )
        return key, info
