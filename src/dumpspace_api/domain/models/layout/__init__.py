#!/usr/bin/env python3

"""Layout document domain models."""

from .document_kind import DocumentKind
from .game_info import Game, GameTarget, Uploader
from .layout_keys import EnumKey, MemberKey
from .member_offset import MemberOffset
from .schema_version import SchemaVersion

__all__ = [
    "DocumentKind",
    "EnumKey",
    "Game",
    "GameTarget",
    "MemberKey",
    "MemberOffset",
    "SchemaVersion",
    "Uploader",
]
