"""Async client for the notas notes API."""

__version__ = "0.1.0"
