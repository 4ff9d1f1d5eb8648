"""Unit tests for utilities."""
