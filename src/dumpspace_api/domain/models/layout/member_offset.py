#!/usr/bin/env python3

"""Member offset model for layout lookups."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MemberOffset:
    """Resolved location of one class or struct member."""

    offset: int
    size: int  # storage unit size for bitfields, not the bit width
    is_bitfield: bool = False
    bit_offset: int = 0  # only meaningful when is_bitfield
    is_resolved: bool = False

    def __bool__(self) -> bool:
        return self.is_resolved
