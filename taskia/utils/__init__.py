"""Shared helpers (datetime handling, credentials)."""
