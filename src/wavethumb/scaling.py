"""Affine rescaling between value ranges."""
import numpy as np


def _as_float(value):
    # Integer samples would wrap around in their own dtype
    if isinstance(value, np.ndarray):
        return value.astype(np.float64)
    return float(value)


def scale_to_range(value, in_begin, in_end, out_begin, out_end):
    """Map value linearly from [in_begin, in_end] onto [out_begin, out_end].

    Works on scalars and numpy arrays alike; integer inputs are computed in
    float64. in_begin must differ from in_end.
    """
    value, in_begin, in_end, out_begin, out_end = (
        _as_float(v) for v in (value, in_begin, in_end, out_begin, out_end)
    )
    return out_begin + (value - in_begin) / (in_end - in_begin) * (out_end - out_begin)


def clamp_scale(value, in_begin, in_end, out_begin, out_end):
    """scale_to_range, clipped into [out_begin, out_end] (out_begin <= out_end)."""
    scaled = scale_to_range(value, in_begin, in_end, out_begin, out_end)
    if isinstance(scaled, np.ndarray):
        return np.clip(scaled, out_begin, out_end)
    return min(max(scaled, out_begin), out_end)
