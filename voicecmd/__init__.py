"""Public voicecmd APIs for composition roots and external integrations."""

from voicecmd.app_config import AppConfig
from voicecmd.audio_recorder import AudioRecorder
from voicecmd.command_client import CommandClient
from voicecmd.errors import (
    ApiError,
    ConfigurationError,
    DeviceError,
    PipelineError,
    ResponseFormatError,
    VoiceCommandError,
)
from voicecmd.http_client import close_shared_client, get_shared_client
from voicecmd.pipeline import CommandPipeline, Stage
from voicecmd.stop_signal import StopSignal
from voicecmd.transcription_client import TranscriptionClient
from voicecmd.wav_writer import write_wav

__all__ = [
    "AppConfig",
    "AudioRecorder",
    "CommandClient",
    "CommandPipeline",
    "Stage",
    "StopSignal",
    "TranscriptionClient",
    "ApiError",
    "ConfigurationError",
    "DeviceError",
    "PipelineError",
    "ResponseFormatError",
    "VoiceCommandError",
    "get_shared_client",
    "close_shared_client",
    "write_wav",
]
