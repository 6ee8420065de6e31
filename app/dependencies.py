"""Dependency providers for the FastAPI application."""

import httpx
from fastapi import Depends
from starlette.requests import HTTPConnection

from app.config import Settings
from app.services.chat_service import ChatRelayService


async def get_http_client(connection: HTTPConnection) -> httpx.AsyncClient:
    """Retrieve the shared AsyncClient from application state."""

    return connection.app.state.http_client  # type: ignore[return-value]


async def get_app_settings(connection: HTTPConnection) -> Settings:
    """Settings the application was built with."""

    return connection.app.state.settings  # type: ignore[return-value]


async def get_chat_service(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_app_settings),
) -> ChatRelayService:
    """Dependency provider for ChatRelayService."""

    return ChatRelayService(client=client, settings=settings)
