#!/usr/bin/env python3

"""Known schema versions of class and struct layout documents.

The version tag decides how a member array is read:

    V1 (10201): [type, offset, size]             plain
                [type, offset, size, bit]        bitfield, name carries a
                                                 4 character suffix
    V2 (10202): [type, offset, size, x]          plain
                [type, offset, size, x, bit]     bitfield, name as-is
"""

from enum import Enum

from ....errors import SchemaError

BITFIELD_SUFFIX_LENGTH = 4


class SchemaVersion(Enum):
    """Closed set of supported layout schemas."""

    V1 = 10201
    V2 = 10202

    @classmethod
    def from_tag(cls, tag: object, document: str) -> "SchemaVersion":
        """Resolve a document's version tag.

        Args:
            tag: Raw ``version`` value from the document
            document: Document name used in the error message

        Raises:
            SchemaError: If the tag is not a known version
        """
        if isinstance(tag, int) and not isinstance(tag, bool):
            for version in cls:
                if version.value == tag:
                    return version
        raise SchemaError(document, f"unsupported schema version {tag!r}")

    @property
    def plain_length(self) -> int:
        """Length of a non-bitfield member array."""
        return 3 if self is SchemaVersion.V1 else 4

    @property
    def bitfield_length(self) -> int:
        """Length of a bitfield member array."""
        return self.plain_length + 1

    @property
    def bit_offset_index(self) -> int:
        return self.bitfield_length - 1

    @property
    def strips_bitfield_suffix(self) -> bool:
        return self is SchemaVersion.V1

    def member_name(self, raw_name: str, is_bitfield: bool) -> str:
        """Name under which a member is stored."""
        if is_bitfield and self.strips_bitfield_suffix:
            return raw_name[:-BITFIELD_SUFFIX_LENGTH]
        return raw_name
