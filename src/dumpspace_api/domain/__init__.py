#!/usr/bin/env python3

"""Domain layer: layout models, parsing services and lookup tables."""

from . import models, repositories, services

__all__ = [
    "models",
    "repositories",
    "services",
]
