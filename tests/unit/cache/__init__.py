"""Unit tests for prompt history implementations."""
