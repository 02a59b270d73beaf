"""Audio loading and the sample views the renderer works on."""
from dataclasses import dataclass

import numpy as np
import soundfile as sf

from .errors import CorruptInputError, InputOutputError, UnsupportedFormatError


@dataclass(frozen=True)
class SampleDomain:
    """Bounds of a signed integer sample type."""
    name: str
    dtype: np.dtype
    min: int
    zero: int
    max: int

    @classmethod
    def for_dtype(cls, dtype) -> 'SampleDomain':
        """Look up the bounds of a signed integer dtype."""
        dtype = np.dtype(dtype)
        if dtype.kind == 'u':
            raise UnsupportedFormatError(f"Unsigned samples ({dtype}) are not supported")
        if dtype.kind != 'i':
            raise UnsupportedFormatError(f"Samples must be signed integers, got {dtype}")
        info = np.iinfo(dtype)
        return cls(name=dtype.name, dtype=dtype, min=int(info.min), zero=0, max=int(info.max))


# Decoder subtypes we can render, keyed by soundfile subtype name
SAMPLE_DOMAINS = {
    'PCM_16': SampleDomain.for_dtype(np.int16),
}


class Wave:
    """Read-only view over interleaved samples (sample i belongs to channel i % channel_count)."""

    def __init__(self, samples, channel_count: int, domain: SampleDomain = None):
        if channel_count < 1:
            raise CorruptInputError(f"Channel count must be at least 1, got {channel_count}")

        samples = np.asarray(samples)
        if samples.ndim != 1:
            raise CorruptInputError(f"Expected a flat sample buffer, got shape {samples.shape}")
        if samples.size % channel_count != 0:
            raise CorruptInputError(
                f"{samples.size} samples do not divide into {channel_count} channels"
            )

        # Fresh view so the caller's buffer flags stay untouched
        self.data = samples.view()
        self.data.flags.writeable = False
        self.channel_count = channel_count
        if domain is None:
            domain = SampleDomain.for_dtype(samples.dtype)
        elif samples.dtype.kind != 'i' or samples.dtype != domain.dtype:
            raise UnsupportedFormatError(
                f"{samples.dtype} samples do not match the {domain.name} sample domain"
            )
        self.domain = domain

    @property
    def sample_count(self) -> int:
        return self.data.size

    @property
    def frame_count(self) -> int:
        return self.data.size // self.channel_count

    def window(self, start: int, stop: int) -> np.ndarray:
        """Samples [start, stop) of the flat buffer, without copying."""
        return self.data[start:stop]

    def __repr__(self):
        return (f"Wave(frames={self.frame_count}, channels={self.channel_count}, "
                f"domain={self.domain.name})")


def load_wave(path: str) -> Wave:
    """Decode an audio file into a Wave of 16-bit signed samples."""
    try:
        info = sf.info(path)
    except (OSError, sf.LibsndfileError) as e:
        raise InputOutputError(f"Could not open {path}: {e}") from e

    domain = SAMPLE_DOMAINS.get(info.subtype)
    if domain is None:
        raise UnsupportedFormatError(
            f"{path}: unsupported sample format {info.subtype} "
            f"(supported: {', '.join(SAMPLE_DOMAINS)})"
        )

    try:
        data, _ = sf.read(path, dtype=domain.dtype.name, always_2d=True)
    except (OSError, sf.LibsndfileError) as e:
        raise InputOutputError(f"Could not read {path}: {e}") from e

    # (frames, channels) in C order is already interleaved
    return Wave(data.reshape(-1), info.channels, domain)
