"""Base visualizer class."""
from abc import ABC, abstractmethod
from PIL import Image
import numpy as np

from ..audio import Wave
from ..errors import DegenerateGeometryError


def upscale_image(image: Image.Image, new_width: int) -> Image.Image:
    """Stretch image horizontally to new_width by repeating columns (nearest neighbor)."""
    if image.width < 1:
        raise DegenerateGeometryError("Cannot upscale an image with no columns")
    if new_width < image.width:
        raise DegenerateGeometryError(
            f"Upscale target width {new_width} is narrower than source width {image.width}"
        )

    pixels = np.asarray(image)
    source_columns = np.arange(new_width) * image.width // new_width
    return Image.fromarray(np.ascontiguousarray(pixels[:, source_columns]))


class BaseVisualizer(ABC):
    """Abstract base class for visualizers."""

    def __init__(self, width: int, height: int, fg_color: tuple[int, int, int],
                 bg_color: tuple[int, int, int]):
        if width < 1 or height < 1:
            raise DegenerateGeometryError(f"Image size must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self.fg_color = fg_color
        self.bg_color = bg_color

    @abstractmethod
    def render_native(self, wave: Wave) -> Image.Image:
        """Render at the widest resolution the wave supports, at most self.width."""
        pass

    def render(self, wave: Wave) -> Image.Image:
        """Render wave into a self.width x self.height image."""
        img = self.render_native(wave)
        if img.width < self.width:
            img = upscale_image(img, self.width)
        return img
