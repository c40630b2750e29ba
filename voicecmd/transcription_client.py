from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import httpx

from voicecmd.errors import ResponseFormatError
from voicecmd.http_client import bearer_headers, get_shared_client, raise_for_non_200

if TYPE_CHECKING:
    from voicecmd.app_config import AppConfig

logger = logging.getLogger(__name__)


class TranscriptionClient:
    """Wrapper for the OpenAI audio transcription endpoint."""

    def __init__(self, config: "AppConfig", api_key=None, client: httpx.Client | None = None):
        self.api_key = api_key or config.api_key
        self.api_url = config.transcription_url
        self.model = config.transcription_model
        self._client = client

    def transcribe_file(self, file_path: str) -> str:
        """Upload a WAV file and return the transcribed text verbatim."""
        filename = os.path.basename(file_path)
        with open(file_path, "rb") as f:
            client = self._client or get_shared_client()
            logger.debug("STT request -> %s | model=%s file=%s", self.api_url, self.model, filename)
            resp = client.post(
                self.api_url,
                headers=bearer_headers(self.api_key),
                data={"model": self.model},
                files={"file": (filename, f, "audio/wav")},
            )
        raise_for_non_200(resp)
        return self._extract_text(resp.json())

    @staticmethod
    def _extract_text(payload) -> str:
        if not isinstance(payload, dict):
            raise ResponseFormatError("Transcription response payload is not a JSON object.")
        text = payload.get("text")
        if not isinstance(text, str):
            raise ResponseFormatError("Transcription response is missing a 'text' field.")
        return text
