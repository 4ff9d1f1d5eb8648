"""Unit tests for all endpoints."""
