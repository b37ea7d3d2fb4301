"""
Tests for the notch, low-pass and high-pass filter stages.

All tests use small hand-built or seeded signals.
"""
import numpy as np
import pytest

from src.signal_processing import filters
from src.signal_processing.filters import (
    frequency_axis,
    notch_filter,
    low_pass_filter,
    high_pass_filter,
)
from src.signal_processing.validation import InvalidParameterError, EmptySignalError


# ===================================================================
# Notch filter
# ===================================================================

class TestNotchFilter:

    def test_preserves_length(self, noise_signal):
        out = notch_filter(noise_signal, 10.0, 60.0, 2.0)
        assert out.shape == noise_signal.shape

    def test_preserves_length_of_constant_signal(self):
        out = notch_filter(np.full(17, 3.5), 10.0, 2.0, 4.0)
        assert len(out) == 17

    def test_zero_bandwidth_is_identity(self, noise_signal):
        out = notch_filter(noise_signal, 10.0, 5.0, 0.0)
        np.testing.assert_allclose(out, noise_signal, atol=1e-12)

    def test_hum_outside_axis_passes_signal(self, noise_signal):
        # Axis only reaches the sample rate, so 60 Hz never lands on a bin
        out = notch_filter(noise_signal, 10.0, 60.0, 2.0)
        np.testing.assert_allclose(out, noise_signal, atol=1e-12)

    def test_zeroes_only_bins_inside_stop_band(self):
        n = 11
        k = np.arange(n)
        x = np.cos(2 * np.pi * 3 * k / n)
        # Axis is 0, 1, ..., 10: only bin 3 falls inside |f - 3| < 0.5,
        # its mirror bin 8 survives and half of the cosine remains
        out = notch_filter(x, 10.0, 3.0, 1.0)
        np.testing.assert_allclose(out, 0.5 * x, atol=1e-12)

    def test_stop_band_edge_is_exclusive(self):
        n = 11
        k = np.arange(n)
        x = np.cos(2 * np.pi * 3 * k / n)
        # |3 - 3.5| == 0.5 is not strictly less than bandwidth / 2
        out = notch_filter(x, 10.0, 3.5, 1.0)
        np.testing.assert_allclose(out, x, atol=1e-12)

    def test_single_sample_at_zero_frequency(self):
        assert frequency_axis(1, 10.0).tolist() == [0.0]
        np.testing.assert_allclose(notch_filter([2.0], 10.0, 0.0, 2.0), [0.0], atol=1e-12)
        np.testing.assert_allclose(notch_filter([2.0], 10.0, 60.0, 2.0), [2.0])

    def test_output_is_real(self, noise_signal):
        out = notch_filter(noise_signal, 10.0, 4.0, 2.0)
        assert out.dtype == np.float64

    def test_conventional_axis(self, monkeypatch):
        monkeypatch.setattr(filters, 'NOTCH_AXIS_SPANS_SAMPLE_RATE', False)
        n = 11
        k = np.arange(n)
        x = np.cos(2 * np.pi * 3 * k / n)
        # Bins 3 and 8 both map to 30/11 Hz on the |fftfreq| axis
        out = notch_filter(x, 10.0, 30.0 / 11.0, 0.5)
        np.testing.assert_allclose(out, np.zeros(n), atol=1e-12)

    def test_rejects_empty_signal(self):
        with pytest.raises(EmptySignalError):
            notch_filter([], 10.0, 60.0, 2.0)

    def test_rejects_negative_bandwidth(self):
        with pytest.raises(InvalidParameterError):
            notch_filter([1.0, 2.0], 10.0, 60.0, -1.0)

    def test_rejects_non_positive_sample_rate(self):
        with pytest.raises(InvalidParameterError):
            notch_filter([1.0, 2.0], 0.0, 60.0, 2.0)

    def test_rejects_non_finite_samples(self):
        with pytest.raises(InvalidParameterError):
            notch_filter([1.0, np.nan], 10.0, 60.0, 2.0)


# ===================================================================
# Low-pass filter
# ===================================================================

class TestLowPassFilter:

    def test_window_of_one_is_exact_identity(self, noise_signal):
        np.testing.assert_array_equal(low_pass_filter(noise_signal, 1), noise_signal)

    def test_odd_window_averages_centered_segment(self):
        out = low_pass_filter([0.0, 3.0, 0.0, 3.0, 0.0], 3)
        np.testing.assert_array_equal(out, [0.0, 1.0, 2.0, 1.0, 0.0])

    def test_even_window_spans_one_extra_sample(self):
        out = low_pass_filter([0.0, 3.0, 0.0, 3.0, 0.0], 2)
        np.testing.assert_array_equal(out, [0.0, 1.0, 2.0, 1.0, 0.0])

    def test_window_of_four(self):
        out = low_pass_filter([6.0, 0.0, 0.0, 0.0, 0.0, 6.0], 4)
        np.testing.assert_allclose(out, [6.0, 0.0, 1.2, 1.2, 0.0, 6.0])

    def test_edges_copied_from_input(self):
        x = np.array([5.0, 1.0, 2.0, 3.0, 4.0, 9.0])
        out = low_pass_filter(x, 3)
        assert out[0] == 5.0
        assert out[-1] == 9.0

    @pytest.mark.parametrize('window_size', [5, 6, 50])
    def test_window_covering_signal_returns_input(self, window_size):
        x = [4.0, -1.0, 7.0, 2.0, 0.5]
        np.testing.assert_array_equal(low_pass_filter(x, window_size), x)

    def test_constant_signal_unchanged(self):
        np.testing.assert_array_equal(low_pass_filter([1.0] * 5, 3), [1.0] * 5)

    def test_does_not_mutate_input(self):
        x = np.array([0.0, 3.0, 0.0, 3.0, 0.0])
        low_pass_filter(x, 3)
        np.testing.assert_array_equal(x, [0.0, 3.0, 0.0, 3.0, 0.0])

    def test_exact_window_span(self, monkeypatch):
        monkeypatch.setattr(filters, 'LOW_PASS_CENTERED_SPAN', False)
        out = low_pass_filter([0.0, 4.0, 0.0, 4.0, 0.0], 2)
        np.testing.assert_array_equal(out, [0.0, 2.0, 2.0, 2.0, 2.0])

    @pytest.mark.parametrize('window_size', [0, -3, 2.5, True, '3'])
    def test_rejects_invalid_window(self, window_size):
        with pytest.raises(InvalidParameterError):
            low_pass_filter([1.0, 2.0, 3.0], window_size)

    def test_rejects_empty_signal(self):
        with pytest.raises(EmptySignalError):
            low_pass_filter([], 3)


# ===================================================================
# High-pass filter
# ===================================================================

class TestHighPassFilter:

    @pytest.mark.parametrize('window_size', [1, 2, 3, 7, 100])
    def test_high_plus_low_reconstructs_signal(self, noise_signal, window_size):
        total = high_pass_filter(noise_signal, window_size) + low_pass_filter(noise_signal, window_size)
        np.testing.assert_allclose(total, noise_signal, rtol=0, atol=1e-12)

    def test_removes_local_mean(self):
        out = high_pass_filter([0.0, 3.0, 0.0, 3.0, 0.0], 3)
        np.testing.assert_array_equal(out, [0.0, 2.0, -2.0, 2.0, 0.0])

    def test_constant_signal_gives_zeros(self):
        np.testing.assert_array_equal(high_pass_filter([1.0] * 5, 3), [0.0] * 5)

    def test_preserves_length(self, noise_signal):
        assert len(high_pass_filter(noise_signal, 5)) == len(noise_signal)

    def test_rejects_invalid_window(self):
        with pytest.raises(InvalidParameterError):
            high_pass_filter([1.0, 2.0], 0)
