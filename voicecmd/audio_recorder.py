import logging

import numpy as np

from voicecmd.errors import DeviceError

logger = logging.getLogger(__name__)


SAMPLE_RATE = 44100
CHANNELS = 1
CHUNK_FRAMES = 1024
DTYPE = "int16"


def _open_default_stream(sample_rate: int, channels: int, blocksize: int):
    # Imported here: sounddevice needs PortAudio at import time.
    import sounddevice as sd

    return sd.InputStream(
        samplerate=sample_rate,
        channels=channels,
        dtype=DTYPE,
        blocksize=blocksize,
    )


class AudioRecorder:
    """Records mono 16-bit audio from the default mic until told to stop."""

    def __init__(self, stream_factory=None):
        """
        Args:
            stream_factory: callable(sample_rate, channels, blocksize) returning an
                unstarted input stream with start/read/stop/close. Defaults to
                sounddevice.InputStream on the default device.
        """
        self.sample_rate = SAMPLE_RATE
        self.channels = CHANNELS
        self.chunk_frames = CHUNK_FRAMES
        self._stream_factory = stream_factory or _open_default_stream

    def record(self, stop) -> np.ndarray:
        """Capture chunks until `stop.is_set()` and return the samples.

        The returned length is a multiple of `chunk_frames`. The stream is
        stopped and closed before returning, also when a read fails.
        """
        try:
            stream = self._stream_factory(self.sample_rate, self.channels, self.chunk_frames)
        except Exception as e:
            raise DeviceError(f"failed to open audio stream: {e}") from e
        try:
            stream.start()
        except Exception as e:
            stream.close()
            raise DeviceError(f"failed to start audio stream: {e}") from e

        chunks: list[np.ndarray] = []
        try:
            while not stop.is_set():
                try:
                    data, overflowed = stream.read(self.chunk_frames)
                except Exception as e:
                    raise DeviceError(f"error reading from audio stream: {e}") from e
                if overflowed:
                    logger.debug("Input overflow while reading chunk %d", len(chunks))
                chunks.append(np.asarray(data, dtype=np.int16).reshape(-1).copy())
        except BaseException:
            self._abort(stream)
            raise
        self._close(stream)

        logger.info("Captured %d chunks (%d samples)", len(chunks), len(chunks) * self.chunk_frames)
        if not chunks:
            return np.zeros(0, dtype=np.int16)
        return np.concatenate(chunks)

    @staticmethod
    def _close(stream):
        try:
            stream.stop()
        except Exception as e:
            raise DeviceError(f"failed to stop audio stream: {e}") from e
        finally:
            stream.close()

    @staticmethod
    def _abort(stream):
        """Release the stream while another error is already propagating."""
        try:
            stream.stop()
            stream.close()
        except Exception as e:
            logger.debug("Failed to release audio stream after error: %s", e)
