"""
Command-line access to the notes API.

Examples:
    notas list
    notas create --title "Compra" --content "pan, leche"
    notas update 42 --title "Compra" --content "pan"
    notas delete 42

Uses NOTAS_API_URL (or --base-url) for the service root. Exits 1 on HTTP or
transport failures and 2 on configuration errors.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Sequence

import httpx
from pydantic import ValidationError

from notas.connectors.notes_client import NotesClient, NotesClientConfig
from notas.core.exceptions import ConfigurationError
from notas.core.logging import setup_logging
from notas.core.settings import get_settings
from notas.schemas.notes import Note

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="notas", description="Notes API client")
    parser.add_argument("--base-url", dest="base_url", default=None, help="Notes API root URL")
    parser.add_argument("--log-level", dest="log_level", default=None, help="Log level name")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List all notes")

    create = sub.add_parser("create", help="Create a note")
    create.add_argument("--title", required=True)
    create.add_argument("--content", default="")

    delete = sub.add_parser("delete", help="Delete a note by id")
    delete.add_argument("note_id")

    update = sub.add_parser("update", help="Replace a note's title and content")
    update.add_argument("note_id")
    update.add_argument("--title", required=True)
    update.add_argument("--content", default="")

    return parser


def _config(base_url: str | None) -> NotesClientConfig:
    settings = get_settings()
    if base_url:
        settings = settings.model_copy(update={"notas_api_url": base_url})
    return NotesClientConfig.from_settings(settings)


async def run_command(client: NotesClient, args: argparse.Namespace) -> Any:
    if args.command == "list":
        notes = await client.list_notes()
        return [note.model_dump(by_alias=True) for note in notes]
    if args.command == "create":
        return await client.create_note(Note(title=args.title, content=args.content))
    if args.command == "delete":
        return await client.delete_note(args.note_id)
    return await client.update_note(Note(id=args.note_id, title=args.title, content=args.content))


async def _run(config: NotesClientConfig, args: argparse.Namespace) -> Any:
    async with NotesClient(config) as client:
        return await run_command(client, args)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, stream=sys.stderr)

    try:
        config = _config(args.base_url)
    except (ConfigurationError, ValidationError) as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    try:
        result = asyncio.run(_run(config, args))
    except httpx.HTTPStatusError as exc:
        logger.debug("Notes API returned %s", exc.response.status_code, exc_info=True)
        print(
            f"Request failed with status code {exc.response.status_code}: {exc.response.text}",
            file=sys.stderr,
        )
        return 1
    except (httpx.HTTPError, ValueError) as exc:
        logger.debug("Notes API call failed", exc_info=True)
        print(f"Request failed: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
