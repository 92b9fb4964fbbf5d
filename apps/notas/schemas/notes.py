from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Note(BaseModel):
    """A note as exchanged with the notes service.

    The service speaks Spanish field names (`titulo`, `contenido`); both those
    and the Python names are accepted on input, and the wire names are used
    on output.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: Optional[str] = None
    title: str = Field(alias="titulo")
    content: str = Field(alias="contenido")

    def create_payload(self) -> Dict[str, Any]:
        """Body for a create request; the service assigns the id."""

        return self.model_dump(by_alias=True, exclude={"id"})

    def update_payload(self) -> Dict[str, Any]:
        """Full replacement body for an update request."""

        if not self.id:
            raise ValueError("Updating a note requires its id")
        return self.model_dump(by_alias=True)


NoteList = TypeAdapter(List[Note])


__all__ = ["Note", "NoteList"]
