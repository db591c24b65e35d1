#!/usr/bin/env python3

"""Lookup keys for the layout tables.

Two key schemes coexist. The concatenated string keys are what existing
callers query with and are ambiguous ("AB" + "C" == "A" + "BC"); the
composite keys are compared field by field and never collide.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class MemberKey:
    """Composite key of a member: owning type and member name."""

    type_name: str
    member_name: str

    @property
    def concatenated(self) -> str:
        return self.type_name + self.member_name


@dataclass(frozen=True)
class EnumKey:
    """Composite key of an enum value: enum type and integer constant."""

    enum_name: str
    value: int

    @property
    def concatenated(self) -> str:
        return self.enum_name + str(self.value)
