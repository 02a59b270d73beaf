"""Color string parsing."""
import string

from .errors import InvalidConfigError

HEX_DIGITS = set(string.hexdigits)


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Convert a '#RRGGBB' string to an RGB tuple."""
    if len(hex_color) != 7 or not hex_color.startswith('#') or not set(hex_color[1:]) <= HEX_DIGITS:
        raise InvalidConfigError(f"Invalid color {hex_color!r}, expected '#RRGGBB'")
    hex_color = hex_color[1:]
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))
