"""
Abstract Base Class for EMG Signal Sources

This module defines the contract every signal source implements. The
filtering pipeline only ever sees the 1-D signal a source returns, so
it behaves identically whether samples come from:
- A seeded random generator (simulated recordings)
- A fixed array (deterministic test fixtures)
- A recorded CSV file

To add a new acquisition device, subclass SignalSource and implement
get_signal().
"""
from abc import ABC, abstractmethod
from typing import Optional
import numpy as np

from ..signal_processing.validation import InvalidParameterError


class SignalSource(ABC):
    """
    Abstract base class defining the interface for all signal sources.

    A source produces a single-channel signal: a 1-D float64 array of
    at least one sample.
    """

    @abstractmethod
    def get_signal(self, num_samples: int, gesture=None) -> np.ndarray:
        """
        Produce a signal of num_samples samples.

        Args:
            num_samples: Number of samples requested (>= 1)
            gesture: Optional Gesture the signal is recorded for. Sources
                     that cannot tell gestures apart may ignore it.

        Returns:
            numpy array of shape (num_samples,)
        """
        pass

    def available_samples(self) -> Optional[int]:
        """
        Number of samples this source can deliver, or None if unbounded.
        """
        return None

    def get_source_info(self) -> dict:
        """
        Get metadata about this source.

        Returns:
            Dictionary containing source type and capacity.
        """
        return {
            'source_type': self.__class__.__name__,
            'available_samples': self.available_samples()
        }

    @staticmethod
    def _check_num_samples(num_samples) -> int:
        if isinstance(num_samples, bool) or not isinstance(num_samples, (int, np.integer)):
            raise InvalidParameterError(f"Sample count must be an integer, got {num_samples!r}")
        if num_samples < 1:
            raise InvalidParameterError(f"Sample count must be >= 1, got {num_samples}")
        return int(num_samples)
