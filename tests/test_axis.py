import numpy as np
import pytest

from am_analysis.axis import time_axis, frequency_axis, frequency_range, AxisBuilder


def test_time_axis_spans_one_second():
    t = time_axis(4096, 4096)
    assert t.shape == (4096,)
    assert t[0] == 0.0
    assert t[-1] == 4095 / 4096


def test_frequency_axis_is_bin_index_when_rate_equals_length():
    f = frequency_axis(4096, 4096)
    assert f.shape == (2048,)
    np.testing.assert_allclose(f, np.arange(2048))


def test_frequency_axis_scales_with_rate():
    f = frequency_axis(1024, 2048.0)
    assert f.shape == (512,)
    np.testing.assert_allclose(f, 2.0 * np.arange(512))
    np.testing.assert_allclose(f, np.fft.rfftfreq(1024, 1 / 2048.0)[:512])


def test_frequency_range_inclusive():
    f = frequency_axis(4096, 4096)
    sl = frequency_range(f, 0, 200)
    assert f[sl][0] == 0.0
    assert f[sl][-1] == 200.0
    assert len(f[sl]) == 201


def test_frequency_range_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        frequency_range(np.arange(10), 5, 1)


def test_axis_builder_pairs_time_and_frequency():
    axes = AxisBuilder(1024, 2048.0)
    assert axes.time().shape == (1024,)
    assert axes.time()[-1] == 1023 / 2048.0
    assert axes.frequency().shape == (512,)
    assert axes.frequency()[50] == 100.0
