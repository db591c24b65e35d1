#!/usr/bin/env python3

"""Domain services for layout retrieval."""

from .catalog_resolver import GameCatalog
from .parsing import ClassLayoutParser, EnumParser, OffsetsParser

__all__ = [
    "ClassLayoutParser",
    "EnumParser",
    "GameCatalog",
    "OffsetsParser",
]
