"""Application configuration as an injectable dataclass."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from voicecmd.errors import ConfigurationError

DEFAULT_TRANSCRIPTION_URL = "https://api.openai.com/v1/audio/transcriptions"
DEFAULT_TRANSCRIPTION_MODEL = "whisper-1"
DEFAULT_CHAT_URL = "https://api.openai.com/v1/chat/completions"
DEFAULT_CHAT_MODEL = "gpt-4"
DEFAULT_SYSTEM_PROMPT = (
    "You convert natural language instructions into a single valid Bash command. "
    "Print the command in plain text without any formatting"
)
DEFAULT_TEMP_WAV_PATH = "temp.wav"

MISSING_API_KEY_MESSAGE = (
    "OpenAI API key not found. Please set OPENAI_API_KEY in your environment or .env file"
)


@dataclass
class AppConfig:
    """Application configuration loaded from environment variables."""

    # API
    api_key: str = ""

    # Transcription
    transcription_url: str = DEFAULT_TRANSCRIPTION_URL
    transcription_model: str = DEFAULT_TRANSCRIPTION_MODEL

    # Command generation
    chat_url: str = DEFAULT_CHAT_URL
    chat_model: str = DEFAULT_CHAT_MODEL
    system_prompt: str = DEFAULT_SYSTEM_PROMPT
    temperature: float = 0.0

    # Recording
    temp_wav_path: str = DEFAULT_TEMP_WAV_PATH

    # Logging
    log_level: str = "WARNING"
    log_file: str = ""

    def require_api_key(self) -> str:
        """Return the API key or fail before any device is touched."""
        key = (self.api_key or "").strip()
        if not key:
            raise ConfigurationError(MISSING_API_KEY_MESSAGE)
        return key

    @staticmethod
    def from_env() -> "AppConfig":
        """Load config from .env file and environment variables."""
        load_dotenv()
        return AppConfig(
            api_key=os.getenv("OPENAI_API_KEY", ""),
            transcription_url=os.getenv("OPENAI_TRANSCRIPTION_URL", DEFAULT_TRANSCRIPTION_URL),
            chat_url=os.getenv("OPENAI_CHAT_URL", DEFAULT_CHAT_URL),
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
            log_file=os.getenv("LOG_FILE", "").strip(),
        )
