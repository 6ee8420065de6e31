"""HTTP handlers for link generation and the chat relay."""

from __future__ import annotations

import logging
from typing import Annotated, TypeVar

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel

from app.dependencies import get_chat_service
from app.exceptions import LinkEncodingError, RelayError, ServiceError
from app.models import ChatRequest, ChatResponse, LinkRequest, LinkResponse
from app.services.chat_service import RELAY_FAILED, ChatRelayService
from app.services.link_service import generate_link

logger = logging.getLogger(__name__)

router = APIRouter()

ModelT = TypeVar("ModelT", bound=BaseModel)


@router.post("/generate-link", response_model=LinkResponse)
async def create_share_link(request: Request) -> LinkResponse:
    """Encode the posted scenes into a viewer link."""

    payload = await _read_body(request, LinkRequest)
    try:
        share_link = generate_link(payload.scenes, payload.viewer_url)
    except ServiceError:
        raise
    except Exception as exc:
        logger.exception("Link generation failed")
        raise LinkEncodingError() from exc

    return LinkResponse(share_link=share_link)


@router.post("/chat", response_model=ChatResponse)
async def chat(
    request: Request,
    chat_service: Annotated[ChatRelayService, Depends(get_chat_service)],
) -> ChatResponse:
    """Relay a question to the LLM and return its answer."""

    payload = await _read_body(request, ChatRequest)
    try:
        answer = await chat_service.relay(payload.question, payload.character)
    except ServiceError:
        raise
    except Exception as exc:
        logger.exception("Chat relay failed")
        raise RelayError(RELAY_FAILED) from exc

    return ChatResponse(answer=answer)


async def _read_body(request: Request, model: type[ModelT]) -> ModelT:
    """Parse the JSON body; anything that is not a JSON object counts as empty."""

    body = await request.body()
    try:
        return model.model_validate_json(body)
    except ValueError:
        return model()
