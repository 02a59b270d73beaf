"""Waveform thumbnail images from audio files."""
from .audio import SampleDomain, Wave, load_wave
from .renderer import draw_waveform, render_thumbnail

__version__ = '0.1.0'

__all__ = ['SampleDomain', 'Wave', 'load_wave', 'draw_waveform', 'render_thumbnail']
