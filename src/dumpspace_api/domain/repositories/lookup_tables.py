#!/usr/bin/env python3

"""Lookup tables built from parsed layout documents.

Tables are assembled by LayoutTablesBuilder and frozen into LayoutTables.
Member and enum lookups keep the historical concatenated string keys
(``"UWorld" + "OwningGameInstance"``) and additionally index every entry by
its composite key, so callers hit by a concatenation collision can use the
``*_exact`` lookups.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from ...errors import MemberNotFoundError
from ...infrastructure.logging import get_logger
from ..models.layout import EnumKey, MemberKey, MemberOffset
from ..services.parsing import ParsedClassLayout, ParsedEnums, ParsedOffsets

logger = get_logger(__name__)


class LayoutTables:
    """Read-only member, size, enum and global offset lookups."""

    def __init__(
        self,
        members: Mapping[str, MemberOffset],
        members_exact: Mapping[MemberKey, MemberOffset],
        type_sizes: Mapping[str, int],
        enum_names: Mapping[str, str],
        enum_names_exact: Mapping[EnumKey, str],
        global_offsets: Mapping[str, int],
    ):
        self._members = MappingProxyType(dict(members))
        self._members_exact = MappingProxyType(dict(members_exact))
        self._type_sizes = MappingProxyType(dict(type_sizes))
        self._enum_names = MappingProxyType(dict(enum_names))
        self._enum_names_exact = MappingProxyType(dict(enum_names_exact))
        self._global_offsets = MappingProxyType(dict(global_offsets))
        # FunctionsInfo is never decoded, so this table stays empty
        self._function_offsets: Mapping[str, int] = MappingProxyType({})

    def member_offset(self, type_name: str, member_name: str) -> MemberOffset | None:
        """Look up a member by the concatenated ``type_name + member_name`` key."""
        return self._members.get(type_name + member_name)

    def member_offset_exact(self, type_name: str, member_name: str) -> MemberOffset | None:
        """Look up a member by (type, member) without concatenation collisions."""
        return self._members_exact.get(MemberKey(type_name, member_name))

    def member_offset_or_fail(self, type_name: str, member_name: str) -> int:
        """Return the byte offset of a member that must exist.

        Raises:
            MemberNotFoundError: If the member has no layout entry
        """
        info = self.member_offset(type_name, member_name)
        if info is None:
            raise MemberNotFoundError(type_name, member_name)
        return info.offset

    def type_size(self, type_name: str) -> int | None:
        return self._type_sizes.get(type_name)

    def enum_value_name(self, enum_name: str, value: int) -> str | None:
        """Look up an enum value name by the ``enum_name + str(value)`` key."""
        return self._enum_names.get(enum_name + str(value))

    def enum_value_name_exact(self, enum_name: str, value: int) -> str | None:
        return self._enum_names_exact.get(EnumKey(enum_name, value))

    def global_offset(self, name: str) -> int | None:
        return self._global_offsets.get(name)

    def function_offset(self, class_name: str, function_name: str) -> int | None:
        """Function offsets are not published in decoded form; always None."""
        return self._function_offsets.get(class_name + function_name)

    def statistics(self) -> dict[str, int]:
        """Entry counts per table."""
        return {
            "members": len(self._members_exact),
            "type_sizes": len(self._type_sizes),
            "enum_values": len(self._enum_names_exact),
            "global_offsets": len(self._global_offsets),
        }

    def __repr__(self) -> str:
        stats = ", ".join(f"{name}={count}" for name, count in self.statistics().items())
        return f"LayoutTables({stats})"


class LayoutTablesBuilder:
    """Merges parsed documents into one set of tables.

    Class and struct documents share the member and size namespaces. Later
    entries replace earlier ones; replacements that change a value, and
    concatenated keys claimed by two different composite keys, are logged.
    """

    def __init__(self) -> None:
        self._members: dict[str, MemberOffset] = {}
        self._member_owners: dict[str, MemberKey] = {}
        self._members_exact: dict[MemberKey, MemberOffset] = {}
        self._type_sizes: dict[str, int] = {}
        self._enum_names: dict[str, str] = {}
        self._enum_owners: dict[str, EnumKey] = {}
        self._enum_names_exact: dict[EnumKey, str] = {}
        self._global_offsets: dict[str, int] = {}
        self.collisions: list[tuple[Any, Any]] = []

    def add_class_layout(self, parsed: ParsedClassLayout) -> None:
        for key, info in parsed.members:
            self._add_member(key, info)

        for type_name, size in parsed.type_sizes:
            previous = self._type_sizes.get(type_name)
            if previous is not None and previous != size:
                logger.warning(
                    f"{parsed.document}: size of {type_name} changes from {previous} to {size}"
                )
            self._type_sizes[type_name] = size

    def add_enums(self, parsed: ParsedEnums) -> None:
        for key, name in parsed.values:
            concatenated = key.concatenated
            owner = self._enum_owners.get(concatenated)
            if owner is not None and owner != key:
                self._record_collision(owner, key)
            self._enum_owners[concatenated] = key
            self._enum_names[concatenated] = name
            self._enum_names_exact[key] = name

    def add_offsets(self, parsed: ParsedOffsets) -> None:
        for name, value in parsed.offsets:
            self._global_offsets[name] = value

    def build(self) -> LayoutTables:
        """Freeze the merged entries into LayoutTables."""
        tables = LayoutTables(
            members=self._members,
            members_exact=self._members_exact,
            type_sizes=self._type_sizes,
            enum_names=self._enum_names,
            enum_names_exact=self._enum_names_exact,
            global_offsets=self._global_offsets,
        )
        if self.collisions:
            logger.warning(f"{len(self.collisions)} concatenated lookup keys are ambiguous")
        logger.debug(f"Built {tables!r}")
        return tables

    def _add_member(self, key: MemberKey, info: MemberOffset) -> None:
        concatenated = key.concatenated
        owner = self._member_owners.get(concatenated)
        if owner is not None and owner != key:
            self._record_collision(owner, key)
        self._member_owners[concatenated] = key
        self._members[concatenated] = info
        self._members_exact[key] = info

    def _record_collision(self, first: Any, second: Any) -> None:
        self.collisions.append((first, second))
        logger.warning(
            f"Lookup key {second.concatenated!r} is shared by {first} and {second}; "
            f"the concatenated lookup now returns the latter"
        )
