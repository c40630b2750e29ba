"""Record → transcribe → generate pipeline.

Stages run strictly in order. Any failure moves the pipeline to `Stage.ERROR`
and is re-raised as `PipelineError` naming the step that failed; nothing is
retried. The spinner is stopped and the temporary WAV removed on every path.
"""

from __future__ import annotations

import enum
import logging
import os
from typing import TYPE_CHECKING, Callable, Optional

from voicecmd.audio_recorder import AudioRecorder
from voicecmd.command_client import CommandClient
from voicecmd.errors import ConfigurationError, PipelineError
from voicecmd.progress import Spinner
from voicecmd.stop_signal import StopSignal
from voicecmd.transcription_client import TranscriptionClient
from voicecmd.wav_writer import write_wav

if TYPE_CHECKING:
    from voicecmd.app_config import AppConfig

logger = logging.getLogger(__name__)


class Stage(enum.Enum):
    INIT = "init"
    RECORDING = "recording"
    TRANSCRIBING = "transcribing"
    GENERATING = "generating"
    DONE = "done"
    ERROR = "error"


CAPTIONS = {
    Stage.RECORDING: "Recording",
    Stage.TRANSCRIBING: "Transcribing audio...",
    Stage.GENERATING: "Generating command...",
}


class CommandPipeline:
    """Runs one voice-to-command round trip and returns the trimmed command."""

    def __init__(
        self,
        config: AppConfig,
        recorder_factory: Optional[Callable[[], AudioRecorder]] = None,
        transcriber: Optional[TranscriptionClient] = None,
        command_client: Optional[CommandClient] = None,
        spinner: Optional[Spinner] = None,
        stop_signal: Optional[StopSignal] = None,
        stdin=None,
    ):
        self.config = config
        self._recorder_factory = recorder_factory or AudioRecorder
        self._transcriber = transcriber
        self._command_client = command_client
        self.spinner = spinner or Spinner()
        self.stop_signal = stop_signal or StopSignal()
        self._stdin = stdin
        self.stage = Stage.INIT

    def _enter(self, stage: Stage):
        logger.info("Stage %s -> %s", self.stage.value, stage.value)
        self.stage = stage
        caption = CAPTIONS.get(stage)
        if caption:
            self.spinner.update(caption)

    def run(self) -> str:
        wav_path = self.config.temp_wav_path
        wav_written = False
        context = "initialization failed"
        try:
            self.config.require_api_key()
            recorder = self._recorder_factory()

            self._enter(Stage.RECORDING)
            context = "audio capture failed"
            with self.stop_signal.watch_signals():
                self.stop_signal.watch_stdin(self._stdin)
                samples = recorder.record(self.stop_signal)
            logger.info("Recording stopped (%s)", self.stop_signal.reason or "unspecified")

            self._enter(Stage.TRANSCRIBING)
            context = "failed to write wav file"
            wav_written = True
            write_wav(wav_path, samples, recorder.channels, recorder.sample_rate)
            context = "error transcribing audio"
            text = self._get_transcriber().transcribe_file(wav_path)
            logger.info("Transcribed %d characters", len(text))

            self._enter(Stage.GENERATING)
            context = "error generating command"
            command = self._get_command_client().generate_command(text)

            self.spinner.stop()
            self._enter(Stage.DONE)
            return command.strip()
        except ConfigurationError:
            self.stage = Stage.ERROR
            raise
        except Exception as e:
            failed = self.stage
            self.stage = Stage.ERROR
            self.spinner.stop()
            logger.debug("Pipeline failed during %s: %s", failed.value, e)
            raise PipelineError(failed, context, e) from e
        finally:
            self.spinner.stop()
            if wav_written:
                _remove_quietly(wav_path)

    def _get_transcriber(self) -> TranscriptionClient:
        if self._transcriber is None:
            self._transcriber = TranscriptionClient(self.config)
        return self._transcriber

    def _get_command_client(self) -> CommandClient:
        if self._command_client is None:
            self._command_client = CommandClient(self.config)
        return self._command_client


def _remove_quietly(path: str):
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning("Could not remove temporary file %s: %s", path, e)
