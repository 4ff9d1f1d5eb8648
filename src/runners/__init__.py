"""Runners for the playground service."""
