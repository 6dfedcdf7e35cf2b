"""Outcome envelope shared by all layers."""
from .result import Result

__all__ = ["Result"]
