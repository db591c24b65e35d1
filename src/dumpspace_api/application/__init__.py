"""Application layer: orchestration of catalog, retrieval and parsing."""

from .dumpspace_api import LAYOUT_DOCUMENTS, DumpspaceAPI

__all__ = ["DumpspaceAPI", "LAYOUT_DOCUMENTS"]
