"""
Simulated EMG Source

This module generates synthetic EMG-like signals as a stand-in for a real
acquisition device. Every gesture currently draws from the same normal
distribution, so the signal is pure noise: useful for exercising the
filters, not for training a classifier.

Each source owns its own numpy Generator. Seeding it makes a run fully
reproducible and keeps the pipeline itself free of random state.
"""
import numpy as np
from typing import Optional

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
from config import SIMULATED_MEAN, SIMULATED_STD, RANDOM_SEED

from .base_source import SignalSource


class SimulatedSource(SignalSource):
    """
    Signal source that draws normally distributed samples.

    Attributes:
        seed: Seed the generator was created with (None for fresh entropy)
        mean: Mean of the sample distribution
        std: Standard deviation of the sample distribution
        last_gesture: Gesture requested by the most recent call
    """

    def __init__(self, seed: Optional[int] = RANDOM_SEED,
                 mean: float = SIMULATED_MEAN, std: float = SIMULATED_STD):
        self.seed = seed
        self.mean = mean
        self.std = std
        self.last_gesture = None
        self._rng = np.random.default_rng(seed)

    def get_signal(self, num_samples: int, gesture=None) -> np.ndarray:
        """
        Draw a simulated signal.

        Args:
            num_samples: Number of samples to draw
            gesture: Gesture being simulated (recorded, not yet modelled)

        Returns:
            numpy array of shape (num_samples,)
        """
        num_samples = self._check_num_samples(num_samples)
        self.last_gesture = gesture
        return self._rng.normal(self.mean, self.std, num_samples)

    def reset(self) -> None:
        """
        Restart the generator from its seed.

        With a seed set, the next get_signal() repeats the first one.
        """
        self._rng = np.random.default_rng(self.seed)

    def get_source_info(self) -> dict:
        info = super().get_source_info()
        info.update({'seed': self.seed, 'mean': self.mean, 'std': self.std})
        return info
