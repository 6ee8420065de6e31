"""Relay chat questions to the configured LLM endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from app.config import Settings
from app.exceptions import ConfigurationError, RelayError, ValidationError
from app.services.answer_extractors import (
    AnswerExtractor,
    MalformedResponse,
    get_extractor,
)

logger = logging.getLogger(__name__)

QUESTION_REQUIRED = "'question' required"
ENDPOINT_NOT_CONFIGURED = "LLM endpoint not configured"
RELAY_FAILED = "AI failed to generate answer"


def build_prompt(question: str, character: Any) -> str:
    """Render the prompt sent upstream; both values are embedded verbatim."""

    return f"Character '{character}' should answer the following question: \"{question}\""


class ChatRelayService:
    """Forwards a question to an external text-generation endpoint."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        settings: Settings,
        extractor: AnswerExtractor | None = None,
    ) -> None:
        self._client = client
        self._settings = settings
        self._extractor = extractor or get_extractor(settings.llm_response_format)

    async def relay(self, question: Any, character: Any = None) -> str:
        """Ask the LLM ``question`` in the voice of ``character`` and return its answer."""

        if not isinstance(question, str) or not question:
            raise ValidationError(QUESTION_REQUIRED)

        endpoint = self._settings.llm_api_url
        if not endpoint:
            raise ConfigurationError(ENDPOINT_NOT_CONFIGURED)

        payload = {"prompt": build_prompt(question, character)}
        headers = {"Content-Type": "application/json"}
        if self._settings.llm_api_key:
            headers["Authorization"] = f"Bearer {self._settings.llm_api_key}"

        try:
            response = await self._client.post(endpoint, headers=headers, json=payload)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            logger.warning("LLM request timed out", exc_info=exc)
            raise RelayError(RELAY_FAILED) from exc
        except httpx.HTTPStatusError as exc:
            logger.error(
                "LLM request failed",
                extra={
                    "status_code": exc.response.status_code,
                    "response_text": exc.response.text,
                },
            )
            raise RelayError(RELAY_FAILED) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.exception("Unexpected LLM HTTP error")
            raise RelayError(RELAY_FAILED) from exc

        try:
            answer = self._extractor(response.json())
            if not isinstance(answer, str):
                raise MalformedResponse("answer is not a string")
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            logger.error(
                "Malformed LLM response",
                extra={"response_text": response.text, "reason": str(exc)},
            )
            raise RelayError(RELAY_FAILED) from exc

        answer = answer.strip()
        logger.info("LLM answer relayed", extra={"answer_length": len(answer)})
        return answer
