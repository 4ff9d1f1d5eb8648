"""Prompt history implementations."""
