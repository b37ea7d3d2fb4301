"""
Signal Processing Package

This package contains the EMG filter stages, the feature extractor and
the pipeline that composes them. Every stage is a pure function of its
input signal and parameters.
"""
from .filters import notch_filter, low_pass_filter, high_pass_filter
from .feature_extraction import FeatureExtractor, extract_features
from .pipeline import EMGPipeline, run_pipeline
from .validation import PipelineError, InvalidParameterError, EmptySignalError

__all__ = [
    'notch_filter', 'low_pass_filter', 'high_pass_filter',
    'FeatureExtractor', 'extract_features',
    'EMGPipeline', 'run_pipeline',
    'PipelineError', 'InvalidParameterError', 'EmptySignalError'
]
