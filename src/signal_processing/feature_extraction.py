"""
EMG Feature Extraction

This module reduces a filtered EMG signal to time-domain descriptors
that a downstream gesture classifier can consume.

Features extracted (in this order):
- Root Mean Square (RMS): magnitude/power-related measure
- Mean Absolute Value (MAV): average amplitude of activation
"""
import numpy as np
from typing import Dict, List

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
from config import FEATURE_NAMES, RMS_USES_ABSOLUTE_MEAN

from .validation import validate_signal


class FeatureExtractor:
    """
    Extracts time-domain features from a filtered EMG signal.

    The feature vector always has the layout [rms, mav]. Both features
    are cheap to compute and robust once hum and drift are filtered out.

    Attributes:
        feature_names: Names of the features, in vector order
    """

    def __init__(self):
        self.feature_names: List[str] = list(FEATURE_NAMES)

    def extract(self, signal) -> np.ndarray:
        """
        Extract the feature vector from one signal.

        Args:
            signal: 1-D sequence of filtered samples (non-empty)

        Returns:
            Array of shape (2,) holding [rms, mav]

        Raises:
            EmptySignalError: if the signal has no samples
        """
        data = validate_signal(signal)
        return np.array([self._compute_rms(data), self._compute_mav(data)])

    def extract_batch(self, signals) -> np.ndarray:
        """
        Extract features from several independent signals.

        Args:
            signals: Iterable of 1-D signals (lengths may differ)

        Returns:
            Feature matrix of shape (n_signals, 2)
        """
        rows = [self.extract(signal) for signal in signals]
        if not rows:
            return np.empty((0, len(self.feature_names)))
        return np.vstack(rows)

    def to_dict(self, features: np.ndarray) -> Dict[str, float]:
        """
        Label a feature vector with its feature names.

        Returns:
            Dictionary like {'rms': ..., 'mav': ...}
        """
        return {name: float(value) for name, value in zip(self.feature_names, features)}

    def _compute_rms(self, signal: np.ndarray) -> float:
        """
        Compute the RMS of a signal.

        With RMS_USES_ABSOLUTE_MEAN this is sqrt(mean(|x|)), the formula
        recorded feature sets were built with, rather than the textbook
        sqrt(mean(x ** 2)).
        """
        if RMS_USES_ABSOLUTE_MEAN:
            return float(np.sqrt(np.mean(np.abs(signal))))
        return float(np.sqrt(np.mean(signal ** 2)))

    def _compute_mav(self, signal: np.ndarray) -> float:
        # MAV = (1/N) * sum(|x_i|)
        return float(np.mean(np.abs(signal)))


def extract_features(signal) -> np.ndarray:
    """
    Convenience function returning [rms, mav] for one signal.
    """
    return FeatureExtractor().extract(signal)
