#!/usr/bin/env python3

"""Infrastructure layer for technical concerns."""

from . import config, document_source, logging

__all__ = [
    "config",
    "document_source",
    "logging",
]
