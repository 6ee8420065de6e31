"""Encode scene lists into shareable viewer links."""

from __future__ import annotations

import base64
import binascii
import json
import logging
from typing import Any
from urllib.parse import quote, unquote

from app.exceptions import LinkEncodingError, ValidationError

logger = logging.getLogger(__name__)

SCENES_REQUIRED = "'scenes' array required"
VIEWER_URL_REQUIRED = "'viewerUrl' string required"
INVALID_DATA = "'data' is not a valid scene payload"


def generate_link(scenes: Any, viewer_url: Any) -> str:
    """Build ``<viewer_url>?data=<encoded scenes>`` for the supplied scenes."""

    if not isinstance(scenes, list) or len(scenes) == 0:
        raise ValidationError(SCENES_REQUIRED)
    if not isinstance(viewer_url, str) or not viewer_url:
        raise ValidationError(VIEWER_URL_REQUIRED)

    share_link = f"{viewer_url}?data={encode_scenes(scenes)}"
    logger.info("Share link generated", extra={"share_link": share_link})
    return share_link


def encode_scenes(scenes: list[Any]) -> str:
    """Serialize scenes to compact JSON, base64 it and percent-encode the result."""

    try:
        payload = json.dumps(
            {"scenes": scenes},
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf-8")
    except (TypeError, ValueError) as exc:
        logger.error("Scene serialization failed", exc_info=exc)
        raise LinkEncodingError() from exc

    encoded = base64.b64encode(payload).decode("ascii")
    return quote(encoded, safe="")


def decode_scenes(data: str) -> list[Any]:
    """Inverse of :func:`encode_scenes`."""

    try:
        raw = base64.b64decode(unquote(data), validate=True)
        payload = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as exc:
        raise ValidationError(INVALID_DATA) from exc

    if not isinstance(payload, dict) or not isinstance(payload.get("scenes"), list):
        raise ValidationError(INVALID_DATA)

    return payload["scenes"]
