"""Unit tests for app module."""
