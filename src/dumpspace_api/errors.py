#!/usr/bin/env python3

"""Exception hierarchy for layout retrieval and lookup."""


class DumpspaceError(Exception):
    """Base class for all errors raised by this package."""


class TransportError(DumpspaceError):
    """A document could not be fetched, decompressed or decoded."""

    def __init__(self, document: str, reason: str):
        self.document = document
        self.reason = reason
        super().__init__(f"Failed to retrieve {document}: {reason}")


class SchemaError(DumpspaceError, ValueError):
    """A document does not match the shape expected for its kind."""

    def __init__(self, document: str, reason: str):
        self.document = document
        self.reason = reason
        super().__init__(f"Malformed {document}: {reason}")


class CatalogMissError(DumpspaceError, LookupError):
    """A game identifier or display name is not listed in the catalog."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"No game with {field} {value!r} in the catalog")


class LayoutNotReadyError(DumpspaceError):
    """Lookups were attempted before the layout documents were downloaded."""


class MemberNotFoundError(DumpspaceError, KeyError):
    """A member asserted to exist has no layout entry."""

    def __init__(self, type_name: str, member_name: str):
        self.type_name = type_name
        self.member_name = member_name
        super().__init__(f"{type_name}::{member_name}")

    def __str__(self) -> str:
        return f"No layout entry for member {self.type_name}::{self.member_name}"
