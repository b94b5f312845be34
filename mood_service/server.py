"""
FastAPI server for the Mood Service.

This module implements the HTTP API for reading and updating a user's mood.
Lookups for unknown users are answered according to the store's policy;
under the strict policy the store's MoodNotSet error is turned into a 404.
"""

import logging

from fastapi import FastAPI, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from .config import Settings, build_store
from .logging_config import setup_logging
from .models import MOOD_NOT_SET_HEADER, MoodRecord
from .store import MoodNotSet, MoodStore

logger = logging.getLogger(__name__)


def _require_name(name: str) -> None:
    if not name:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")


def create_app(mood_store: MoodStore) -> FastAPI:
    """
    Create a FastAPI application with the given mood store.

    Args:
        mood_store: The MoodStore instance to use for the application

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Mood Service",
        description="Per-user mood values over HTTP",
        version="0.1.0",
    )

    @app.exception_handler(MoodNotSet)
    async def mood_not_set_handler(request: Request, exc: MoodNotSet) -> JSONResponse:
        logger.info("No mood recorded for %s", request.path_params.get("name"))
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": exc.message},
            headers={MOOD_NOT_SET_HEADER: "1"},
        )

    @app.get("/")
    async def root() -> dict[str, str]:
        """Health check endpoint."""
        return {
            "status": "ok",
            "service": "mood-service",
            "policy": mood_store.policy.value,
        }

    # User names may contain "/", so the name segment is matched as a path
    @app.get("/user/{name:path}/mood")
    async def get_mood(name: str) -> MoodRecord:
        """
        Get the mood recorded for a user.

        Returns:
            The user's mood record; unknown users follow the store's policy
        """
        _require_name(name)
        return MoodRecord(user=name, mood=mood_store.get_mood(name))

    @app.put("/user/{name:path}/mood", status_code=status.HTTP_204_NO_CONTENT)
    async def set_mood(name: str, request: Request) -> Response:
        """
        Set the mood for a user.

        The request body is taken as the new mood verbatim, as UTF-8 text.
        """
        _require_name(name)
        mood = (await request.body()).decode("utf-8", errors="replace")
        mood_store.set_mood(name, mood)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return app


settings = Settings.from_env()

# Default app instance used by the ASGI server
app = create_app(build_store(settings))


def main() -> None:
    """Main entry point for the server."""
    import uvicorn

    setup_logging(settings.log_level)
    logger.info(
        "Starting mood service on %s:%d (policy=%s)",
        settings.host,
        settings.port,
        settings.policy.value,
    )
    uvicorn.run(
        "mood_service.server:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
