"""Tests for range scaling."""
import numpy as np
import pytest

from wavethumb.scaling import clamp_scale, scale_to_range


@pytest.mark.parametrize("in_begin,in_end,out_begin,out_end", [
    (0, 32767, 125, 250),
    (-32768, 0, 0, 125),
    (-1.0, 1.0, 0.0, 1.0),
    (10, -10, 3, 7),
])
def test_endpoints_map_to_endpoints(in_begin, in_end, out_begin, out_end):
    """in_begin maps to out_begin, in_end maps to out_end."""
    assert scale_to_range(in_begin, in_begin, in_end, out_begin, out_end) == pytest.approx(out_begin)
    assert scale_to_range(in_end, in_begin, in_end, out_begin, out_end) == pytest.approx(out_end)


def test_linear_between_endpoints():
    """Midpoint of input maps to midpoint of output."""
    assert scale_to_range(5, 0, 10, 100, 200) == pytest.approx(150)
    assert scale_to_range(-16384, -32768, 0, 0, 2) == pytest.approx(1.0)


def test_scale_extrapolates_outside_input_range():
    """Without clamping, values outside the input range land outside the output range."""
    assert scale_to_range(20, 0, 10, 0, 1) == pytest.approx(2.0)


def test_clamp_scalar_far_outside():
    """Clamped output stays inside the output range for extreme inputs."""
    assert clamp_scale(1e12, 0, 10, 0, 1) == 1
    assert clamp_scale(-1e12, 0, 10, 0, 1) == 0
    assert clamp_scale(5, 0, 10, 0, 1) == pytest.approx(0.5)


def test_clamp_array_bounded():
    """Clamped arrays stay within [out_begin, out_end] element-wise."""
    values = np.random.uniform(-1e6, 1e6, 10000)
    result = clamp_scale(values, -32768.0, 0.0, 0.0, 125.0)
    assert isinstance(result, np.ndarray)
    assert result.shape == values.shape
    assert result.min() >= 0.0
    assert result.max() <= 125.0


def test_clamp_degenerate_output_range():
    """A zero-width output range pins every value to it."""
    values = np.array([-5.0, 0.0, 5.0])
    np.testing.assert_array_equal(clamp_scale(values, 0.0, 1.0, 3.0, 3.0), [3.0, 3.0, 3.0])


def test_int16_scalar_does_not_wrap():
    """Sample-typed scalars are scaled in floating point."""
    assert scale_to_range(np.int16(100), -32768, 0, 0, 125) == pytest.approx(32868 / 32768 * 125)
    assert scale_to_range(np.int16(-32768), np.int16(-32768), np.int16(0), 0, 125) == pytest.approx(0)
    assert clamp_scale(np.int16(100), -32768, 0, 0, 125) == pytest.approx(125)
    assert clamp_scale(np.int16(-16384), -32768, 0, 0, 125) == pytest.approx(62.5)


def test_int16_array_does_not_wrap():
    """int16 arrays scale linearly across the whole sample range."""
    values = np.array([-32768, -16384, 0, 100, 32767], dtype=np.int16)
    expected = (values.astype(np.float64) + 32768) / 32768 * 125
    np.testing.assert_allclose(scale_to_range(values, -32768, 0, 0, 125), expected)
    np.testing.assert_allclose(clamp_scale(values, -32768, 0, 0, 125), np.minimum(expected, 125))
    # Input array is left in its own dtype
    assert values.dtype == np.int16
