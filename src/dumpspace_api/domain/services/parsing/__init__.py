#!/usr/bin/env python3

"""Layout document parsing services."""

from .class_layout_parser import ClassLayoutParser
from .enum_parser import EnumParser
from .offsets_parser import OffsetsParser
from .records import ParsedClassLayout, ParsedEnums, ParsedOffsets

__all__ = [
    "ClassLayoutParser",
    "EnumParser",
    "OffsetsParser",
    "ParsedClassLayout",
    "ParsedEnums",
    "ParsedOffsets",
]
