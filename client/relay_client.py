"""Command-line client for manual testing of the relay service."""

from __future__ import annotations

import argparse
import json
import logging
import pathlib
import sys
import time
from typing import Any
from urllib.parse import parse_qs, urlsplit

import httpx

from app.exceptions import ValidationError
from app.services.link_service import decode_scenes

DEFAULT_URL = "http://127.0.0.1:3000"

logger = logging.getLogger("relay_client")


def _post(base_url: str, path: str, body: dict[str, Any], timeout: float) -> dict[str, Any]:
    start = time.perf_counter()
    response = httpx.post(f"{base_url.rstrip('/')}{path}", json=body, timeout=timeout)
    elapsed = time.perf_counter() - start
    logger.info("POST %s -> %d in %.2fs", path, response.status_code, elapsed)

    data = response.json()
    if response.is_error:
        logger.error("Server returned an error: %s", data.get("error"))
        raise SystemExit(1)
    return data


def request_link(base_url: str, viewer_url: str, scenes_path: pathlib.Path, timeout: float) -> str:
    scenes = json.loads(scenes_path.read_text(encoding="utf-8"))
    data = _post(base_url, "/generate-link", {"scenes": scenes, "viewerUrl": viewer_url}, timeout)
    return data["shareLink"]


def request_answer(base_url: str, question: str, character: str | None, timeout: float) -> str:
    body: dict[str, Any] = {"question": question}
    if character is not None:
        body["character"] = character
    data = _post(base_url, "/chat", body, timeout)
    return data["answer"]


def decode_link(link: str) -> list[Any]:
    """Recover the scenes embedded in a share link without contacting the server."""

    # parse_qs would turn the '+' of an unescaped link into a space
    query = urlsplit(link).query.replace("+", "%2B")
    values = parse_qs(query).get("data")
    if not values:
        raise ValidationError("link has no 'data' parameter")
    return decode_scenes(values[0])


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Test client for the scene relay service.")
    parser.add_argument("--url", default=DEFAULT_URL, help="Server base URL (default: %(default)s)")
    parser.add_argument(
        "--timeout", type=float, default=60.0, help="Seconds to wait for the server."
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level.")
    commands = parser.add_subparsers(dest="command", required=True)

    link = commands.add_parser("link", help="Generate a share link for a scenes file.")
    link.add_argument("--viewer-url", required=True, help="Base URL of the scene viewer.")
    link.add_argument("--scenes", type=pathlib.Path, required=True, help="JSON file with a scenes array.")

    chat = commands.add_parser("chat", help="Ask a character a question.")
    chat.add_argument("--question", required=True)
    chat.add_argument("--character", help="Character answering the question.")

    decode = commands.add_parser("decode", help="Print the scenes stored in a share link.")
    decode.add_argument("link")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    try:
        if args.command == "link":
            print(request_link(args.url, args.viewer_url, args.scenes, args.timeout))
        elif args.command == "chat":
            print(request_answer(args.url, args.question, args.character, args.timeout))
        else:
            print(json.dumps(decode_link(args.link), indent=2, ensure_ascii=False))
    except ValidationError as exc:
        logger.error("%s", exc.message)
        sys.exit(1)
    except httpx.HTTPError as exc:
        logger.error("Request failed: %s", exc)
        sys.exit(1)


if __name__ == "__main__":  # pragma: no cover
    main()
