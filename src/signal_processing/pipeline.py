"""
EMG Filtering Pipeline

Composes the filter stages and the feature extractor in a fixed order:

    raw -> notch -> low-pass -> high-pass -> [rms, mav]

Parameters are validated once when the pipeline is built, so a bad
window size or sample rate is rejected before any signal is touched.
"""
import numpy as np
from typing import Any, Dict, Iterable, List

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
from config import (
    SAMPLE_RATE,
    HUM_FREQUENCY,
    NOTCH_BANDWIDTH,
    DEFAULT_WINDOW_SIZE
)

from .filters import notch_filter, low_pass_filter, high_pass_filter
from .feature_extraction import FeatureExtractor
from .validation import (
    validate_signal,
    validate_window_size,
    validate_sample_rate,
    validate_band,
)


class EMGPipeline:
    """
    Filtering and feature-extraction pipeline for a single EMG channel.

    The pipeline holds only its parameters; every call to process()
    works on fresh arrays, so one instance can serve any number of
    independent signals.

    Attributes:
        sample_rate: Sampling rate in Hz
        hum_frequency: Center of the notch stop-band
        bandwidth: Width of the notch stop-band
        window_size: Moving-average window for the low/high-pass stages
        stage_timer: Optional StageTimer that records per-stage latency
    """

    def __init__(self, sample_rate: float = SAMPLE_RATE,
                 hum_frequency: float = HUM_FREQUENCY,
                 bandwidth: float = NOTCH_BANDWIDTH,
                 window_size: int = DEFAULT_WINDOW_SIZE,
                 stage_timer=None):
        self.sample_rate = validate_sample_rate(sample_rate)
        self.hum_frequency, self.bandwidth = validate_band(hum_frequency, bandwidth)
        self.window_size = validate_window_size(window_size)
        self.stage_timer = stage_timer
        self.feature_extractor = FeatureExtractor()

    def process(self, signal) -> Dict[str, Any]:
        """
        Run one signal through every stage.

        Args:
            signal: Non-empty 1-D sequence of raw samples

        Returns:
            Dictionary with the intermediate signals ('raw', 'notched',
            'low_passed', 'high_passed'), the labelled 'features' and the
            ordered 'feature_vector'. When a stage timer is attached the
            run's timings are included under 'timing_ms'.
        """
        raw = validate_signal(signal)
        timer = self.stage_timer

        if timer is not None:
            timer.start_run()

        notched = notch_filter(raw, self.sample_rate, self.hum_frequency, self.bandwidth)
        if timer is not None:
            timer.mark_stage('notch')

        low_passed = low_pass_filter(notched, self.window_size)
        if timer is not None:
            timer.mark_stage('low_pass')

        high_passed = high_pass_filter(low_passed, self.window_size)
        if timer is not None:
            timer.mark_stage('high_pass')

        feature_vector = self.feature_extractor.extract(high_passed)
        if timer is not None:
            timer.mark_stage('features')

        result = {
            'raw': raw,
            'notched': notched,
            'low_passed': low_passed,
            'high_passed': high_passed,
            'feature_vector': feature_vector,
            'features': self.feature_extractor.to_dict(feature_vector)
        }
        if timer is not None:
            result['timing_ms'] = timer.end_run()
        return result

    def process_batch(self, signals: Iterable) -> List[Dict[str, Any]]:
        """
        Process several independent signals one after another.

        All signals are validated before the first one is processed,
        so a malformed entry never leaves a half-finished batch.
        """
        validated = [validate_signal(signal) for signal in signals]
        return [self.process(signal) for signal in validated]

    def get_params(self) -> Dict[str, float]:
        """Get the pipeline parameters (for display and API responses)."""
        return {
            'sample_rate': self.sample_rate,
            'hum_frequency': self.hum_frequency,
            'bandwidth': self.bandwidth,
            'window_size': self.window_size
        }


def run_pipeline(signal, sample_rate: float = SAMPLE_RATE,
                 hum_frequency: float = HUM_FREQUENCY,
                 bandwidth: float = NOTCH_BANDWIDTH,
                 window_size: int = DEFAULT_WINDOW_SIZE,
                 stage_timer=None) -> Dict[str, Any]:
    """
    Convenience function to build a pipeline and process one signal.
    """
    pipeline = EMGPipeline(sample_rate, hum_frequency, bandwidth, window_size, stage_timer)
    return pipeline.process(signal)


def to_serializable(result: Dict[str, Any]) -> Dict[str, Any]:
    """
    Convert a process() result into JSON-friendly lists and floats.
    """
    serializable = {}
    for key, value in result.items():
        if isinstance(value, np.ndarray):
            serializable[key] = value.tolist()
        else:
            serializable[key] = value
    return serializable
