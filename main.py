"""
EMG Filtering Pipeline - Console Menu

Interactive front end: lists the gestures, asks for a sample count, a
window size and a gesture, generates a signal for it, filters it and
prints the extracted features.

Usage:
    python main.py
"""
import os
import sys
from typing import Callable, Optional

import numpy as np

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import SAMPLE_RATE, HUM_FREQUENCY, NOTCH_BANDWIDTH, RANDOM_SEED
from src.emg_sources import SignalSource, SimulatedSource
from src.gestures import Gesture, gesture_menu
from src.signal_processing import EMGPipeline, PipelineError


def _read_int(prompt: str, input_fn: Callable[[str], str], output: Callable[[str], None]) -> int:
    output(prompt)
    try:
        raw = input_fn('').strip()
    except EOFError:
        raise PipelineError("Input ended before all answers were given") from None
    try:
        return int(raw)
    except ValueError:
        raise PipelineError(f"Expected a whole number, got {raw!r}") from None


def run_menu(input_fn: Callable[[str], str] = input,
             output: Callable[[str], None] = print,
             source: Optional[SignalSource] = None) -> int:
    """
    Run the interactive menu once.

    Args:
        input_fn: Function reading one line of user input
        output: Function writing one line of output
        source: Signal source (defaults to a SimulatedSource)

    Returns:
        Process exit code: 0 on success, 1 on invalid input
    """
    source = source if source is not None else SimulatedSource(seed=RANDOM_SEED)

    output("Loading Gestures.....")
    output("-" * 22)
    output("")
    output("Hand Gestures are classified as follows: ")
    output("-" * 22)
    for line in gesture_menu():
        output(line)
    output("")
    output("Ready to generate EMGs.....")
    output("-" * 23)

    try:
        num_samples = _read_int("Please enter a sample size to generate an EMG signal....",
                                input_fn, output)
        window_size = _read_int("Please enter a window size.....", input_fn, output)
        output("-" * 24)
        gesture_number = _read_int("Please choose a gesture....", input_fn, output)
        gesture = Gesture.from_number(gesture_number)

        # Reject a bad window before generating anything
        pipeline = EMGPipeline(SAMPLE_RATE, HUM_FREQUENCY, NOTCH_BANDWIDTH, window_size)
        signal = source.get_signal(num_samples, gesture)
    except PipelineError as e:
        output(f"[X] Invalid input: {e}")
        return 1

    with np.printoptions(precision=4, suppress=True):
        output(f"EMG Signal generated for {gesture.display_name} gesture:")
        output(str(signal))
        output("Filtering EMG signal...")

        result = pipeline.process(signal)

        output(f"Filtered EMG signal for {gesture.display_name} gesture:")
        output(str(result['high_passed']))

    output("Ready to extract features...")
    output("Extracted Features....")
    output(f"RMS: {result['features']['rms']:.6f}")
    output(f"MAV: {result['features']['mav']:.6f}")
    return 0


if __name__ == '__main__':
    sys.exit(run_menu())
