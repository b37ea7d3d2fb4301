"""
EMG Signal Filters

This module conditions a raw EMG signal before feature extraction:
- Notch filtering to reject powerline hum
- Low-pass smoothing with a moving average
- High-pass filtering derived from the low-pass output

Every filter is a pure function: it takes a signal and parameters and
returns a new array of the same length. Nothing is cached between calls.
"""
import numpy as np

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
from config import NOTCH_AXIS_SPANS_SAMPLE_RATE, LOW_PASS_CENTERED_SPAN

from .validation import (
    validate_signal,
    validate_window_size,
    validate_sample_rate,
    validate_band,
)


def frequency_axis(num_points: int, sample_rate: float) -> np.ndarray:
    """
    Map FFT bin indices to frequencies.

    Args:
        num_points: Number of FFT bins (equal to the signal length)
        sample_rate: Sampling rate in Hz

    Returns:
        Array of num_points frequencies

    With NOTCH_AXIS_SPANS_SAMPLE_RATE the bins are spread evenly from 0
    to sample_rate inclusive, which is how recorded pipelines have always
    placed the notch. A single bin sits at 0.
    """
    if NOTCH_AXIS_SPANS_SAMPLE_RATE:
        return np.linspace(0.0, sample_rate, num_points)
    return np.abs(np.fft.fftfreq(num_points, d=1.0 / sample_rate))


def notch_filter(signal, sample_rate: float, center_frequency: float,
                 bandwidth: float) -> np.ndarray:
    """
    Remove a narrow frequency band from a signal.

    Args:
        signal: 1-D sequence of samples
        sample_rate: Sampling rate in Hz
        center_frequency: Center of the stop-band (e.g. 60 Hz hum)
        bandwidth: Full width of the stop-band

    Returns:
        Filtered signal with the same length as the input

    Every FFT coefficient whose frequency lies strictly closer than
    bandwidth / 2 to the center is zeroed; all others pass unchanged.
    A bandwidth of 0 therefore leaves the signal untouched apart from
    FFT round-trip error.
    """
    data = validate_signal(signal)
    sample_rate = validate_sample_rate(sample_rate)
    center_frequency, bandwidth = validate_band(center_frequency, bandwidth)

    frequencies = frequency_axis(len(data), sample_rate)

    # Binary stop-band transfer function
    stop_band = np.abs(frequencies - center_frequency) < bandwidth / 2
    transfer_function = np.where(stop_band, 0.0, 1.0)

    spectrum = np.fft.fft(data)
    filtered = np.fft.ifft(spectrum * transfer_function)

    return np.real(filtered)


def low_pass_filter(signal, window_size: int) -> np.ndarray:
    """
    Smooth a signal with a moving average.

    Args:
        signal: 1-D sequence of samples
        window_size: Width of the averaging window in samples (>= 1)

    Returns:
        Smoothed signal with the same length as the input

    Each index i with half <= i < len - half (half = window_size // 2)
    becomes the unweighted mean of the segment centered on it. Samples
    too close to either edge to hold a full segment are copied from the
    input. A window at least as long as the signal returns it unchanged.
    """
    data = validate_signal(signal)
    window_size = validate_window_size(window_size)

    filtered = data.copy()
    n = len(data)
    if window_size == 1 or window_size >= n:
        return filtered

    half = window_size // 2
    if LOW_PASS_CENTERED_SPAN:
        span = 2 * half + 1
    else:
        span = window_size
    # Samples to the right of i that the segment covers
    right = span - half - 1

    # Sum first, divide once, so locally constant stretches stay exact
    sums = np.convolve(data, np.ones(span), mode='valid')
    filtered[half:n - right] = sums / span

    return filtered


def high_pass_filter(signal, window_size: int) -> np.ndarray:
    """
    Keep the high-frequency content of a signal.

    Args:
        signal: 1-D sequence of samples
        window_size: Window passed to the low-pass stage

    Returns:
        signal - low_pass_filter(signal, window_size)
    """
    data = validate_signal(signal)
    return data - low_pass_filter(data, window_size)
