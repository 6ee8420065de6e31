"""Pydantic models shared across application layers."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _CamelModel(BaseModel):
    """Response bodies, built in code by field name and dumped by alias."""

    model_config = ConfigDict(populate_by_name=True)


class LinkRequest(BaseModel):
    """Body of ``POST /generate-link``; field checks happen in the link service."""

    scenes: Any = Field(default=None, description="Non-empty list of scene objects.")
    viewer_url: Any = Field(
        default=None, alias="viewerUrl", description="Base URL of the scene viewer."
    )


class LinkResponse(_CamelModel):
    success: bool = True
    share_link: str = Field(alias="shareLink")


class ChatRequest(BaseModel):
    """Body of ``POST /chat``."""

    question: Any = Field(default=None, description="Question to ask the character.")
    character: Any = Field(default=None, description="Character answering the question.")


class ChatResponse(_CamelModel):
    success: bool = True
    answer: str


class ErrorResponse(_CamelModel):
    """Error body; ``success`` is only present on server-side failures."""

    error: str
    success: bool | None = None
