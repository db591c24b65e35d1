#!/usr/bin/env python3

"""Typed intermediate records decoded from raw layout JSON.

Raw JSON values are validated here, once, so the parsers that map records to
lookup entries never index into untyped data.
"""

from dataclasses import dataclass, field
from typing import Any

from ....errors import SchemaError
from ...models.layout import EnumKey, MemberKey, MemberOffset, SchemaVersion

SIZE_MARKER = "__MDKClassSize"
INHERIT_MARKER = "__InheritInfo"


@dataclass(frozen=True)
class SizeRecord:
    """``{"__MDKClassSize": n}`` entry of a type group."""

    type_name: str
    size: int


@dataclass(frozen=True)
class MemberRecord:
    """One member entry of a type group, already checked against its schema."""

    type_name: str
    raw_name: str
    offset: int
    size: int
    is_bitfield: bool
    bit_offset: int


@dataclass
class ParsedClassLayout:
    """Everything one class or struct document contributes to the tables."""

    document: str
    version: SchemaVersion
    members: list[tuple[MemberKey, MemberOffset]] = field(default_factory=list)
    type_sizes: list[tuple[str, int]] = field(default_factory=list)


@dataclass
class ParsedEnums:
    """Everything one enum document contributes to the tables."""

    document: str
    values: list[tuple[EnumKey, str]] = field(default_factory=list)


@dataclass
class ParsedOffsets:
    """Everything one offsets document contributes to the tables."""

    document: str
    offsets: list[tuple[str, int]] = field(default_factory=list)


def expect_int(value: Any, document: str, where: str) -> int:
    """Return value if it is a JSON integer (booleans excluded)."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaError(document, f"{where}: expected integer, got {value!r}")
    return value


def expect_list(value: Any, document: str, where: str) -> list[Any]:
    if not isinstance(value, list):
        raise SchemaError(document, f"{where}: expected array, got {type(value).__name__}")
    return value


def expect_object(value: Any, document: str, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise SchemaError(document, f"{where}: expected object, got {type(value).__name__}")
    return value


def single_entry(value: Any, document: str, where: str) -> tuple[str, Any]:
    """Unpack a single-key record ``{key: value}``."""
    record = expect_object(value, document, where)
    if len(record) != 1:
        raise SchemaError(
            document, f"{where}: expected exactly one key, got {sorted(record) or 'none'}"
        )
    return next(iter(record.items()))


def decode_type_record(
    type_name: str,
    record: Any,
    version: SchemaVersion,
    document: str,
) -> SizeRecord | MemberRecord | None:
    """Decode one entry of a type group.

    Args:
        type_name: Owning class or struct
        record: Raw ``{key: value}`` entry
        version: Schema the document declared
        document: Document name used in error messages

    Returns:
        SizeRecord, MemberRecord, or None for inheritance metadata

    Raises:
        SchemaError: If the entry does not match the schema
    """
    key, value = single_entry(record, document, f"{type_name} entry")

    if key == SIZE_MARKER:
        where = f"{type_name}.{SIZE_MARKER}"
        if isinstance(value, list):
            if len(value) != 1:
                raise SchemaError(document, f"{where}: expected one element, got {len(value)}")
            value = value[0]
        return SizeRecord(type_name=type_name, size=expect_int(value, document, where))

    if key == INHERIT_MARKER:
        return None

    where = f"{type_name}.{key}"
    fields = expect_list(value, document, where)

    if len(fields) == version.plain_length:
        is_bitfield = False
    elif len(fields) == version.bitfield_length:
        is_bitfield = True
    else:
        raise SchemaError(
            document,
            f"{where}: member array of length {len(fields)} is invalid for version "
            f"{version.value} (expected {version.plain_length} or {version.bitfield_length})",
        )

    bit_offset = 0
    if is_bitfield:
        bit_offset = expect_int(fields[version.bit_offset_index], document, f"{where} bit offset")

    return MemberRecord(
        type_name=type_name,
        raw_name=key,
        offset=expect_int(fields[1], document, f"{where} offset"),
        size=expect_int(fields[2], document, f"{where} size"),
        is_bitfield=is_bitfield,
        bit_offset=bit_offset,
    )
