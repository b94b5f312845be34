"""
Command-line interface tools for the Mood Service.
"""

import asyncio
import json
from collections.abc import Coroutine
from typing import Any
from urllib.parse import quote

import httpx
import typer

from .models import MOOD_NOT_SET_HEADER, MoodRecord

DEFAULT_BASE_URL = "http://localhost:8000"

app = typer.Typer(help="Mood Service CLI tools")


# MARK: - CLI Entry Points


def cli_set_mood() -> None:
    """Entry point for mood-set CLI command."""
    typer.run(set_mood)


def cli_get_mood() -> None:
    """Entry point for mood-get CLI command."""
    typer.run(get_mood)


def cli_serve() -> None:
    """Entry point for mood-serve CLI command."""
    from .server import main

    main()


# MARK: - Commands


@app.command()
def set_mood(
    user: str = typer.Argument(..., help="The user whose mood to set"),
    mood: str = typer.Argument(..., help="The mood value to set"),
    base_url: str = typer.Option(
        DEFAULT_BASE_URL, "--url", "-u", help="Base URL of the Mood Service"
    ),
) -> None:
    """Set a user's mood on the Mood Service."""

    async def _set_mood() -> None:
        async with httpx.AsyncClient() as client:
            response = await client.put(
                _mood_url(base_url, user),
                content=mood.encode("utf-8"),
                headers={"Content-Type": "text/plain; charset=utf-8"},
            )
            response.raise_for_status()
            print(f"Mood for {user} set to: {mood}")

    _run_with_error_handling(_set_mood(), base_url)


@app.command()
def get_mood(
    user: str = typer.Argument(..., help="The user whose mood to fetch"),
    base_url: str = typer.Option(
        DEFAULT_BASE_URL, "--url", "-u", help="Base URL of the Mood Service"
    ),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output raw JSON"),
) -> None:
    """Get a user's mood from the Mood Service."""

    async def _get_mood() -> None:
        async with httpx.AsyncClient() as client:
            response = await client.get(_mood_url(base_url, user))
            if MOOD_NOT_SET_HEADER in response.headers:
                print(f"No mood: {_error_detail(response)}")
                raise typer.Exit(1)
            response.raise_for_status()
            result = response.json()

            if json_output:
                print(json.dumps(result, indent=2))
                return

            record = MoodRecord.model_validate(result)
            print(record.mood)

    _run_with_error_handling(_get_mood(), base_url)


# MARK: - Private Helpers


def _mood_url(base_url: str, user: str) -> str:
    return f"{base_url.rstrip('/')}/user/{quote(user, safe='')}/mood"


def _error_detail(response: httpx.Response) -> str:
    """Pull the error message out of an error response."""
    try:
        return response.json().get("detail", response.text)
    except json.JSONDecodeError:
        return response.text


def _run_with_error_handling(coro: Coroutine[Any, Any, Any], base_url: str) -> None:
    """Run an async coroutine with standardized error handling."""
    try:
        asyncio.run(coro)
    except typer.Exit:
        raise
    except KeyboardInterrupt:
        print("\nStopped")
        raise typer.Exit(0)
    except httpx.ConnectError:
        print(f"Error: Could not connect to {base_url}")
        raise typer.Exit(1)
    except httpx.HTTPStatusError as e:
        print(f"Error: HTTP {e.response.status_code}")
        raise typer.Exit(1)
    except Exception as e:
        error_msg = str(e) if str(e) else f"Unknown error of type {type(e).__name__}"
        print(f"Error: {error_msg}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
