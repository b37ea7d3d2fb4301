"""
Fixed-Array Signal Source

Serves samples from an in-memory array. Used for deterministic fixture
signals in tests and for replaying data already loaded elsewhere.
"""
import numpy as np

from .base_source import SignalSource
from ..signal_processing.validation import validate_signal, InvalidParameterError


class ArraySource(SignalSource):
    """
    Signal source backed by a fixed 1-D array.

    Attributes:
        data: The samples this source serves (a private copy)
    """

    def __init__(self, values):
        self.data = validate_signal(values)

    def get_signal(self, num_samples: int, gesture=None) -> np.ndarray:
        """
        Return the first num_samples samples.

        Raises:
            InvalidParameterError: if more samples are requested than held
        """
        num_samples = self._check_num_samples(num_samples)
        if num_samples > len(self.data):
            raise InvalidParameterError(
                f"Requested {num_samples} samples but only {len(self.data)} are available"
            )
        return self.data[:num_samples].copy()

    def available_samples(self) -> int:
        return len(self.data)
