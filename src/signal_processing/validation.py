"""
Boundary Validation for the Filtering Pipeline

Every filter stage is a total function over well-formed input. The only
failures are malformed inputs, and those are rejected here before any
computation runs, so no stage ever returns partial or NaN-filled output.

Error taxonomy:
- InvalidParameterError: bad window size, sample rate, bandwidth,
  non-finite samples, or a gesture selection outside the menu
- EmptySignalError: a zero-length signal reaching an averaging step
"""
import numbers

import numpy as np


class PipelineError(ValueError):
    """Base class for all pipeline input errors."""


class InvalidParameterError(PipelineError):
    """A parameter is outside the range the pipeline accepts."""


class EmptySignalError(PipelineError, ZeroDivisionError):
    """
    A signal with no samples was passed to a stage that averages.

    Also a ZeroDivisionError, since that is what the mean over zero
    samples would otherwise produce.
    """


def validate_signal(signal) -> np.ndarray:
    """
    Convert input to a 1-D float64 signal and check it.

    Args:
        signal: Any sequence of real numbers

    Returns:
        A new float64 array (the caller's data is never aliased)

    Raises:
        EmptySignalError: if the signal has no samples
        InvalidParameterError: if it is not 1-D or holds NaN/inf
    """
    try:
        data = np.array(signal, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidParameterError(f"Signal must contain real numbers: {e}") from e

    if data.ndim != 1:
        raise InvalidParameterError(f"Signal must be 1-D, got shape {data.shape}")
    if data.size == 0:
        raise EmptySignalError("Signal must contain at least one sample")
    # NaN or inf would silently propagate through the FFT and the averages
    if not np.isfinite(data).all():
        raise InvalidParameterError("Signal contains non-finite samples")
    return data


def validate_window_size(window_size) -> int:
    """
    Check that a moving-average window size is a positive integer.

    Returns:
        The window size as a plain int
    """
    if isinstance(window_size, bool) or not isinstance(window_size, numbers.Integral):
        raise InvalidParameterError(f"Window size must be an integer, got {window_size!r}")
    if window_size < 1:
        raise InvalidParameterError(f"Window size must be >= 1, got {window_size}")
    return int(window_size)


def validate_sample_rate(sample_rate) -> float:
    """Check that the sample rate is a positive finite number."""
    if isinstance(sample_rate, bool) or not isinstance(sample_rate, numbers.Real):
        raise InvalidParameterError(f"Sample rate must be a number, got {sample_rate!r}")
    if not np.isfinite(sample_rate) or sample_rate <= 0:
        raise InvalidParameterError(f"Sample rate must be > 0, got {sample_rate}")
    return float(sample_rate)


def validate_band(center_frequency, bandwidth):
    """Check a notch stop-band; returns (center_frequency, bandwidth) as floats."""
    for name, value in (('Center frequency', center_frequency), ('Bandwidth', bandwidth)):
        if isinstance(value, bool) or not isinstance(value, numbers.Real) or not np.isfinite(value):
            raise InvalidParameterError(f"{name} must be a finite number, got {value!r}")
    if bandwidth < 0:
        raise InvalidParameterError(f"Bandwidth must be >= 0, got {bandwidth}")
    return float(center_frequency), float(bandwidth)
