"""Utilities used by the playground service."""
