"""16-bit PCM WAV encoding for captured samples."""

from __future__ import annotations

import wave
from collections.abc import Sequence

import numpy as np

SAMPLE_WIDTH = 2  # 16-bit


def _as_pcm16(samples: np.ndarray | Sequence[int]) -> bytes:
    # '<i2' pins little-endian regardless of host byte order.
    return np.asarray(samples, dtype=np.int16).astype("<i2", copy=False).tobytes()


def _check_format(channels: int, sample_rate: int):
    if int(channels) < 1:
        raise ValueError(f"Channel count must be >= 1, got {channels}")
    if int(sample_rate) <= 0:
        raise ValueError(f"Sample rate must be > 0, got {sample_rate}")


def _write(target, pcm: bytes, channels: int, sample_rate: int):
    with wave.open(target, "wb") as wf:
        wf.setnchannels(int(channels))
        wf.setsampwidth(SAMPLE_WIDTH)
        wf.setframerate(int(sample_rate))
        wf.writeframes(pcm)


def write_wav(
    path: str,
    samples: np.ndarray | Sequence[int],
    channels: int,
    sample_rate: int,
):
    """Write samples to `path` as a PCM WAV file, truncating any existing file.

    Filesystem errors propagate to the caller unchanged.
    """
    _check_format(channels, sample_rate)
    pcm = _as_pcm16(samples)
    with open(path, "wb") as f:
        _write(f, pcm, channels, sample_rate)
