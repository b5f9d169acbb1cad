"""FastAPI adapter for cachedql."""

from cachedql.adapters.fastapi.app import create_app, to_starlette_response

__all__ = ["create_app", "to_starlette_response"]
