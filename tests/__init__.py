"""Test suite for the Dumpspace API.

Test Structure:
- config/: Tests for configuration management
- domain/: Tests for layout models, parsers, catalog and lookup tables
- infrastructure/: Tests for document retrieval and logging
- application/: End-to-end tests over fixture documents

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m integration     # Run end-to-end tests only
"""
