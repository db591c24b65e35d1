#!/usr/bin/env python3

"""Query-ready storage for parsed layout documents."""

from .lookup_tables import LayoutTables, LayoutTablesBuilder

__all__ = [
    "LayoutTables",
    "LayoutTablesBuilder",
]
