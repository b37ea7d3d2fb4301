"""
Configuration settings for the EMG Filtering and Feature-Extraction Pipeline.

This module centralizes all configurable parameters so the filters,
signal sources and front ends share the same defaults.
"""
# =============================================================================
# EMG SIGNAL CONFIGURATION
# =============================================================================
# Sampling rate in Hz. Higher rates push the hum band out of the
# frequency axis, so the notch stage stops removing anything.
SAMPLE_RATE = 10.0

# Default number of samples drawn for a generated signal
DEFAULT_NUM_SAMPLES = 100

# =============================================================================
# FILTER CONFIGURATION
# =============================================================================
# Powerline hum to reject (60 Hz mains; use 50.0 for European grids)
HUM_FREQUENCY = 60.0

# Width of the notch stop-band, centered on HUM_FREQUENCY
NOTCH_BANDWIDTH = 2.0

# Moving-average window used by the low-pass and high-pass stages
DEFAULT_WINDOW_SIZE = 3

# =============================================================================
# FIDELITY SWITCHES
# =============================================================================
# Frequency axis of the notch runs linearly from 0 to SAMPLE_RATE over the
# FFT bins. False uses the conventional |fftfreq| axis instead.
NOTCH_AXIS_SPANS_SAMPLE_RATE = True

# Low-pass averages the 2 * (window // 2) + 1 samples centered on each index,
# one wider than requested for even windows. False averages exactly
# window_size samples.
LOW_PASS_CENTERED_SPAN = True

# RMS is sqrt(mean(|x|)). False gives the textbook sqrt(mean(x ** 2)).
RMS_USES_ABSOLUTE_MEAN = True

# =============================================================================
# FEATURE EXTRACTION CONFIGURATION
# =============================================================================
# Order of the feature vector
FEATURE_NAMES = ['rms', 'mav']

# =============================================================================
# SIMULATED EMG CONFIGURATION
# =============================================================================
# Parameters of the normal distribution the simulated source draws from
SIMULATED_MEAN = 0.0
SIMULATED_STD = 1.0

# Seed for reproducible simulated signals (None draws fresh entropy)
RANDOM_SEED = None

# =============================================================================
# MONITORING CONFIGURATION
# =============================================================================
# Number of recent pipeline runs kept for stage timing statistics
STAGE_HISTORY_SIZE = 100

# =============================================================================
# FLASK SERVER CONFIGURATION
# =============================================================================
FLASK_HOST = '0.0.0.0'
FLASK_PORT = 5000
FLASK_DEBUG = False

# Maximum file upload size (16 MB)
MAX_UPLOAD_SIZE_MB = 16
