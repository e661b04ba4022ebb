"""Unit tests for agentstring.

These tests exercise individual components in isolation. They do not require
environment variables or network access; outbound HTTP is mocked with respx.
"""
