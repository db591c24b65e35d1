#!/usr/bin/env python3

"""Retrieval of Dumpspace documents.

A document source maps a relative document name such as
``Unreal-Engine-5/Fortnite/ClassesInfo.json.gz`` to its decompressed text.
Names ending in ``.gz`` are gunzipped after retrieval.
"""

import gzip
import zlib
from pathlib import Path
from types import TracebackType
from typing import Protocol

import requests

from ..errors import TransportError
from .logging import get_logger

logger = get_logger(__name__)


class DocumentSource(Protocol):
    """Anything that can produce document text by name."""

    def fetch(self, name: str) -> str:
        """Return the decompressed text of a document.

        Raises:
            TransportError: If the document cannot be retrieved or decoded
        """
        ...


def decode_payload(name: str, payload: bytes) -> str:
    """Gunzip (for ``.gz`` names) and UTF-8 decode a retrieved payload."""
    if name.endswith(".gz"):
        try:
            payload = gzip.decompress(payload)
        except (OSError, EOFError, zlib.error) as e:
            raise TransportError(name, f"failed to decompress: {e}") from e

    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as e:
        raise TransportError(name, f"payload is not valid UTF-8: {e}") from e


class HttpDocumentSource:
    """Fetches documents from the Dumpspace web service."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        session: requests.Session | None = None,
        verify_tls: bool = True,
    ):
        """
        Args:
            base_url: Root URL, e.g. ``https://dumpspace.spuckwaffel.com/Games``
            timeout: Per-request timeout in seconds
            session: Session to reuse; one is created when omitted
            verify_tls: Verify server certificates
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verify_tls = verify_tls
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def url_for(self, name: str) -> str:
        return f"{self.base_url}/{name.lstrip('/')}"

    def fetch(self, name: str) -> str:
        url = self.url_for(name)
        logger.debug(f"GET {url}")

        try:
            response = self.session.get(url, timeout=self.timeout, verify=self.verify_tls)
        except requests.exceptions.RequestException as e:
            raise TransportError(name, f"request to {url} failed: {e}") from e

        if not response.ok:
            raise TransportError(name, f"request failed with status {response.status_code}")

        text = decode_payload(name, response.content)
        logger.debug(f"Fetched {name} ({len(response.content)} bytes, {len(text)} chars)")
        return text

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "HttpDocumentSource":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()


class DirectoryDocumentSource:
    """Reads documents from a local mirror of the remote directory tree."""

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def fetch(self, name: str) -> str:
        path = self.root / name
        try:
            payload = path.read_bytes()
        except OSError as e:
            raise TransportError(name, f"cannot read {path}: {e}") from e

        logger.debug(f"Read {name} from {path} ({len(payload)} bytes)")
        return decode_payload(name, payload)
