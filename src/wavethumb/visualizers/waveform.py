"""Min/max envelope waveform visualizer."""
from PIL import Image
import numpy as np

from ..audio import SampleDomain, Wave
from ..errors import DegenerateGeometryError
from ..scaling import clamp_scale
from .base import BaseVisualizer


def column_envelopes(wave: Wave, columns: int) -> tuple[np.ndarray, np.ndarray]:
    """Min and max of each of `columns` equal windows over the flat sample buffer.

    Channels are not separated: a window may span samples of several channels.
    Samples left over after columns * samples_per_pixel are ignored.
    """
    samples_per_pixel = wave.sample_count // columns if columns > 0 else 0
    if samples_per_pixel < 1:
        raise DegenerateGeometryError(
            f"Cannot split {wave.sample_count} samples into {columns} columns"
        )

    windows = wave.window(0, columns * samples_per_pixel).reshape(columns, samples_per_pixel)
    return windows.min(axis=1), windows.max(axis=1)


def envelope_to_rows(mins: np.ndarray, maxs: np.ndarray, domain: SampleDomain,
                     height: int) -> tuple[np.ndarray, np.ndarray]:
    """Pixel rows (bottom, top) bounding the foreground band of each column."""
    half = height / 2
    top = clamp_scale(maxs, 0, domain.max, half, height)
    bottom = clamp_scale(mins, domain.min, domain.zero, 0, half)

    # Round half away from zero; values are already clamped to [0, height]
    top = np.floor(top + 0.5).astype(np.intp)
    bottom = np.floor(bottom + 0.5).astype(np.intp)
    return np.clip(bottom, 0, height), np.clip(top, 0, height)


class WaveformVisualizer(BaseVisualizer):
    """Filled min/max amplitude band, one column per sample window."""

    def render_native(self, wave: Wave) -> Image.Image:
        """Render without upscaling: frame_count columns for a small wave, else self.width."""
        image_width = min(wave.frame_count, self.width)
        mins, maxs = column_envelopes(wave, image_width)
        bottom, top = envelope_to_rows(mins, maxs, wave.domain, self.height)

        # Foreground where bottom <= row < top; empty when bottom >= top
        rows = np.arange(self.height)[:, np.newaxis]
        band = (rows >= bottom) & (rows < top)

        pixels = np.empty((self.height, image_width, 3), dtype=np.uint8)
        pixels[:] = self.bg_color
        pixels[band] = self.fg_color
        return Image.fromarray(pixels)
