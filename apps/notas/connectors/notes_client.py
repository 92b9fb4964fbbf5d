"""Async client for the remote notes API.

Every operation is one request against the same root resource:

    list    GET     /
    create  POST    /           {"titulo", "contenido"}
    delete  DELETE  /?id=<id>
    update  PUT     /           {"id", "titulo", "contenido"}

Transport errors, non-2xx statuses and undecodable bodies are raised to the
caller as-is (httpx / json / pydantic exceptions). Nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx
from pydantic import BaseModel, Field, field_validator

from notas.core.exceptions import ConfigurationError
from notas.core.settings import DEFAULT_NOTAS_API_URL, Settings
from notas.schemas.notes import Note, NoteList

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


def _default_headers() -> Dict[str, str]:
    return {"Content-Type": JSON_CONTENT_TYPE}


class NotesClientConfig(BaseModel):
    base_url: str = DEFAULT_NOTAS_API_URL
    headers: Dict[str, str] = Field(default_factory=_default_headers)
    # None keeps the httpx default timeout
    timeout: Optional[float] = Field(default=None, gt=0)

    @field_validator("base_url")
    @classmethod
    def base_url_must_be_set(cls, value: str) -> str:
        trimmed = (value or "").strip().rstrip("/")
        if not trimmed:
            raise ValueError("base_url must not be empty")
        return trimmed

    @field_validator("headers")
    @classmethod
    def headers_send_json(cls, value: Dict[str, str]) -> Dict[str, str]:
        headers = dict(value)
        if not any(key.lower() == "content-type" for key in headers):
            headers["Content-Type"] = JSON_CONTENT_TYPE
        return headers

    @property
    def root_url(self) -> str:
        return f"{self.base_url}/"

    @classmethod
    def from_settings(cls, settings: Settings) -> "NotesClientConfig":
        base_url = (settings.notas_api_url or "").strip()
        if not base_url:
            raise ConfigurationError(
                "Notes API URL is not configured. Set NOTAS_API_URL or pass base_url explicitly.",
                code="missing_base_url",
            )
        return cls(
            base_url=base_url,
            headers=dict(settings.notas_api_headers),
            timeout=settings.notas_api_timeout,
        )


class NotesClient:
    """Thin async wrapper mapping note operations onto HTTP verbs.

    The client keeps no note state. It owns its `httpx.AsyncClient` unless one
    is injected through `http_client`, in which case the caller closes it.
    """

    def __init__(
        self,
        config: NotesClientConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or NotesClientConfig()
        if http_client is not None:
            self._http = http_client
            self._owns_http = False
        else:
            kwargs: Dict[str, Any] = {"transport": transport}
            if self.config.timeout is not None:
                kwargs["timeout"] = self.config.timeout
            self._http = httpx.AsyncClient(**kwargs)
            self._owns_http = True

    async def __aenter__(self) -> "NotesClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    # Public API -----------------------------------------------------------------

    async def list_notes(self) -> List[Note]:
        response = await self._request("GET")
        return NoteList.validate_python(self._decode(response))

    async def create_note(self, note: Note | Mapping[str, Any]) -> Any:
        payload = self._as_note(note).create_payload()
        response = await self._request("POST", json=payload)
        return self._decode(response)

    async def delete_note(self, note_id: str) -> Any:
        if not note_id:
            raise ValueError("Deleting a note requires a non-empty id")
        response = await self._request("DELETE", params={"id": note_id})
        return self._decode(response)

    async def update_note(self, note: Note | Mapping[str, Any]) -> Any:
        payload = self._as_note(note).update_payload()
        response = await self._request("PUT", json=payload)
        return self._decode(response)

    # Helpers --------------------------------------------------------------------

    async def _request(
        self,
        method: str,
        *,
        params: Dict[str, str] | None = None,
        json: Dict[str, Any] | None = None,
    ) -> httpx.Response:
        url = self.config.root_url
        logger.debug("Notes API %s %s params=%s", method, url, params)
        response = await self._http.request(
            method, url, params=params, json=json, headers=self.config.headers
        )
        logger.debug("Notes API %s %s -> %s", method, url, response.status_code)
        response.raise_for_status()
        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        if not response.content:
            return None
        return response.json()

    @staticmethod
    def _as_note(note: Note | Mapping[str, Any]) -> Note:
        if isinstance(note, Note):
            return note
        return Note.model_validate(dict(note))


__all__ = ["NotesClient", "NotesClientConfig"]
