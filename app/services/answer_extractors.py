"""Adapters that pull the answer text out of an upstream LLM response."""

from __future__ import annotations

from typing import Any, Callable, Mapping

AnswerExtractor = Callable[[Any], str]


class MalformedResponse(ValueError):
    """Raised when an upstream payload does not have the expected shape."""


def _first_choice(data: Any) -> Mapping[str, Any]:
    try:
        choice = data["choices"][0]
    except (KeyError, IndexError, TypeError) as exc:
        raise MalformedResponse("missing choices[0]") from exc
    if not isinstance(choice, Mapping):
        raise MalformedResponse("choices[0] is not an object")
    return choice


def completion_text(data: Any) -> str:
    """Completion-style payloads: ``choices[0].text``."""

    text = _first_choice(data).get("text")
    if not isinstance(text, str):
        raise MalformedResponse("missing choices[0].text")
    return text


def chat_message_content(data: Any) -> str:
    """Chat-completion payloads: ``choices[0].message.content``."""

    message = _first_choice(data).get("message")
    content = message.get("content") if isinstance(message, Mapping) else None
    if not isinstance(content, str):
        raise MalformedResponse("missing choices[0].message.content")
    return content


EXTRACTORS: dict[str, AnswerExtractor] = {
    "completion": completion_text,
    "chat": chat_message_content,
}


def get_extractor(response_format: str) -> AnswerExtractor:
    try:
        return EXTRACTORS[response_format]
    except KeyError as exc:
        raise ValueError(f"Unknown LLM response format: {response_format}") from exc
