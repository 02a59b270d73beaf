"""Thumbnail rendering and image output via Pillow."""
from PIL import Image

from .audio import Wave, load_wave
from .colors import hex_to_rgb
from .errors import DegenerateGeometryError, InputOutputError
from .visualizers import WaveformVisualizer

DEFAULT_WIDTH = 1000
DEFAULT_HEIGHT = 250
DEFAULT_FG_COLOR = '#000000'
DEFAULT_BG_COLOR = '#ffffff'
DEFAULT_OUTPUT = 'out.png'


def draw_waveform(
    width: int,
    height: int,
    wave: Wave,
    fg_color: tuple[int, int, int],
    bg_color: tuple[int, int, int],
) -> Image.Image:
    """Render wave as a width x height RGB image.

    Waves with fewer frames than width are drawn one column per frame and
    stretched to width afterwards.
    """
    if wave.frame_count < 1:
        raise DegenerateGeometryError("Wave has no frames to draw")

    visualizer = WaveformVisualizer(width, height, fg_color, bg_color)
    return visualizer.render(wave)


def save_image(img: Image.Image, path: str) -> None:
    """Write img to path, format chosen from the file extension."""
    try:
        img.save(path)
    except (OSError, ValueError) as e:
        raise InputOutputError(f"Could not write {path}: {e}") from e


def render_thumbnail(
    input_audio: str,
    output_image: str = DEFAULT_OUTPUT,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    fg_color: str = DEFAULT_FG_COLOR,
    bg_color: str = DEFAULT_BG_COLOR,
    progress_callback=None
) -> Image.Image:
    """Render a waveform thumbnail of input_audio into output_image."""
    # Parse colors and check geometry before touching the input file
    fg = hex_to_rgb(fg_color)
    bg = hex_to_rgb(bg_color)
    if width < 1 or height < 1:
        raise DegenerateGeometryError(f"Image size must be at least 1x1, got {width}x{height}")

    if progress_callback:
        progress_callback("Loading audio...")
    wave = load_wave(input_audio)

    if progress_callback:
        progress_callback(f"Audio: {wave.frame_count} frames, {wave.channel_count} channel(s)")
        if wave.frame_count < width:
            progress_callback(f"Short audio, drawing {wave.frame_count} columns and stretching to {width}")

    img = draw_waveform(width, height, wave, fg, bg)

    if progress_callback:
        progress_callback(f"Saving {img.width}x{img.height} image...")
    save_image(img, output_image)

    if progress_callback:
        progress_callback("Done!")
    return img
