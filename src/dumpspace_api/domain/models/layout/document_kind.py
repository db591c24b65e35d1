#!/usr/bin/env python3

"""Documents published by the Dumpspace service."""

from enum import Enum


class DocumentKind(Enum):
    """Remote document kinds, valued by their file stem."""

    GAME_LIST = "GameList"
    CLASSES_INFO = "ClassesInfo"
    STRUCTS_INFO = "StructsInfo"
    ENUMS_INFO = "EnumsInfo"
    OFFSETS_INFO = "OffsetsInfo"
    FUNCTIONS_INFO = "FunctionsInfo"  # published, never decoded

    def __str__(self) -> str:
        return self.value

    @property
    def is_layout(self) -> bool:
        """True for the per-game documents addressed by engine and location."""
        return self is not DocumentKind.GAME_LIST
