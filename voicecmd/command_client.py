"""Chat-completions client that turns a spoken request into one Bash command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from voicecmd.errors import ResponseFormatError
from voicecmd.http_client import bearer_headers, get_shared_client, raise_for_non_200

if TYPE_CHECKING:
    from voicecmd.app_config import AppConfig

logger = logging.getLogger(__name__)


class CommandClient:
    """Single-shot chat completion with a fixed system instruction."""

    def __init__(self, config: "AppConfig", api_key=None, client: httpx.Client | None = None):
        self.api_key = api_key or config.api_key
        self.chat_url = config.chat_url
        self.model = config.chat_model
        self.system_prompt = config.system_prompt
        self.temperature = config.temperature
        self._client = client

    def build_payload(self, user_text: str) -> dict:
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": self.system_prompt},
                {"role": "user", "content": user_text},
            ],
            "temperature": self.temperature,
        }

    def generate_command(self, user_text: str) -> str:
        """Return the first choice's content as sent by the API (untrimmed)."""
        payload = self.build_payload(user_text)
        client = self._client or get_shared_client()
        logger.debug("Chat request -> %s | model=%s", self.chat_url, self.model)
        resp = client.post(self.chat_url, headers=bearer_headers(self.api_key), json=payload)
        raise_for_non_200(resp)
        return self._extract_command(resp.json())

    @staticmethod
    def _extract_command(payload) -> str:
        if not isinstance(payload, dict):
            raise ResponseFormatError("Chat response payload is not a JSON object.")
        choices = payload.get("choices")
        if not isinstance(choices, list):
            raise ResponseFormatError("Chat response is missing a 'choices' list.")
        if not choices:
            raise ResponseFormatError("no choices returned from chat completion")

        first = choices[0]
        message = first.get("message") if isinstance(first, dict) else None
        if not isinstance(message, dict):
            raise ResponseFormatError("Chat response choice is missing 'message'.")
        content = message.get("content")
        if content is None:
            return ""
        if not isinstance(content, str):
            raise ResponseFormatError("Chat response message content is not text.")
        return content
