#!/usr/bin/env python3

"""Domain models for the Dumpspace layout client."""

from . import layout

__all__ = [
    "layout",
]
