#!/usr/bin/env python3

"""Progress tracking for layout document ingestion."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import time


class ProgressTracker:
    """
    Track and report document ingestion progress.

    Provides contextual timing, per-document record counts, and operation
    logging for debugging slow or failing downloads.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = time()
        self.document_count = 0
        self.record_count = 0

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track a high-level operation with timing.

        Args:
            operation_name: Name of the operation being tracked
        """
        start_time = time()
        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            elapsed = time() - start_time
            self.logger.debug(f"Completed operation: {operation_name} in {elapsed:.3f}s")
        except Exception as e:
            elapsed = time() - start_time
            self.logger.error(f"Failed operation: {operation_name} after {elapsed:.3f}s: {e}")
            raise

    @contextmanager
    def track_document(self, document_name: str) -> Iterator[None]:
        """
        Track fetching and parsing of a single document.

        Args:
            document_name: Name of the document being ingested
        """
        self.document_count += 1
        doc_start = time()
        initial_record_count = self.record_count

        self.logger.debug(f"Ingesting document #{self.document_count}: {document_name}")

        try:
            yield
        except Exception as e:
            elapsed = time() - doc_start
            self.logger.error(f"Document {document_name} failed after {elapsed:.3f}s: {e}")
            raise

        elapsed = time() - doc_start
        records = self.record_count - initial_record_count
        self.logger.debug(f"Document {document_name} ingested in {elapsed:.3f}s ({records} records)")

    def count_record(self, count: int = 1) -> None:
        """Increment record counter for statistics."""
        self.record_count += count

    def report_summary(self) -> None:
        """Report final ingestion statistics."""
        total_time = time() - self.start_time
        avg_doc_time = total_time / self.document_count if self.document_count > 0 else 0

        self.logger.info(
            f"Ingestion complete: {self.document_count} documents, "
            f"{self.record_count} records in {total_time:.2f}s "
            f"(avg: {avg_doc_time:.3f}s/document)"
        )
