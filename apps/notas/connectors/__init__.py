from .notes_client import NotesClient, NotesClientConfig

__all__ = ["NotesClient", "NotesClientConfig"]
