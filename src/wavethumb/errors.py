"""Errors raised while turning audio into a thumbnail."""


class WavethumbError(Exception):
    """Base class for all wavethumb failures."""


class UnsupportedFormatError(WavethumbError):
    """Decoded audio is not in a supported sample format."""


class CorruptInputError(WavethumbError):
    """Sample buffer does not line up with its channel count."""


class DegenerateGeometryError(WavethumbError):
    """Requested image size cannot be rendered from the available samples."""


class InvalidConfigError(WavethumbError, ValueError):
    """A configuration value (e.g. a color string) could not be parsed."""


class InputOutputError(WavethumbError):
    """Reading the audio or writing the image failed."""
