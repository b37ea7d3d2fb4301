"""
EMG Filtering Pipeline - Source Package

This package contains all core modules of the EMG filtering pipeline:
- emg_sources: Signal sources (simulated, fixed-array, CSV)
- signal_processing: Notch/low-pass/high-pass filters and feature extraction
- gestures: Gesture catalogue and display names
- monitoring: Per-stage timing of pipeline runs
"""
