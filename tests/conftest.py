import numpy as np
import pytest
import soundfile as sf


@pytest.fixture
def write_wav(tmp_path):
    """Factory writing a (frames, channels) array to a WAV file in tmp_path."""
    def _write(data, name='input.wav', subtype='PCM_16', samplerate=8000):
        path = tmp_path / name
        sf.write(str(path), np.asarray(data), samplerate, subtype=subtype)
        return path
    return _write


@pytest.fixture
def stereo_sine():
    """One second of a 440 Hz int16 stereo sine, shape (8000, 2)."""
    t = np.arange(8000) / 8000
    tone = (np.sin(2 * np.pi * 440 * t) * 16000).astype(np.int16)
    return np.stack([tone, tone // 2], axis=1)
