"""Pydantic schemas shared across the client."""

from .notes import Note, NoteList

__all__ = ["Note", "NoteList"]
