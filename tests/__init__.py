"""Test suite for agentstring.

Test Structure:
- unit/: Tests for parsing, formatting, configuration, HTTP helpers and the CLI
- unit/conftest.py: Shared fixtures and pytest configuration

Run tests with:
    pytest tests/
    pytest tests/ -v  # verbose output
"""
