"""Visualizer modules."""
from .base import BaseVisualizer, upscale_image
from .waveform import WaveformVisualizer, column_envelopes, envelope_to_rows
