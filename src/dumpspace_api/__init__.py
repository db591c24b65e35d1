"""Dumpspace API - offset, size and enum lookups from Dumpspace layout dumps."""

from .application import DumpspaceAPI
from .domain.models.layout import GameTarget, MemberOffset
from .domain.repositories import LayoutTables
from .infrastructure.config import Config
from .infrastructure.document_source import DirectoryDocumentSource, HttpDocumentSource
from .main import main

__all__ = [
    "Config",
    "DirectoryDocumentSource",
    "DumpspaceAPI",
    "GameTarget",
    "HttpDocumentSource",
    "LayoutTables",
    "MemberOffset",
    "main",
]
