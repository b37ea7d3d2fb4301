"""
Pipeline Stage Timing

This module records how long each filtering stage takes:
- Notch filtering (FFT round trip, the asymptotic bottleneck)
- Low-pass filtering
- High-pass filtering
- Feature extraction

Timing only observes the pipeline; it never changes its output.
"""
import time
from typing import Dict, List, Optional
from collections import deque
import statistics

import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))
from config import STAGE_HISTORY_SIZE

PIPELINE_STAGES = ['notch', 'low_pass', 'high_pass', 'features']


class StageTimer:
    """
    Tracks per-stage timings for recent pipeline runs.

    Attributes:
        history_size: Number of recent runs kept per stage
        stages: Names of the tracked stages, in pipeline order
    """

    def __init__(self, history_size: int = STAGE_HISTORY_SIZE,
                 stages: Optional[List[str]] = None):
        self.history_size = history_size
        self.stages = list(stages) if stages is not None else list(PIPELINE_STAGES)

        # Fixed-size history per stage plus the run total
        self._history: Dict[str, deque] = {
            stage: deque(maxlen=history_size) for stage in self.stages + ['total']
        }

        self._run_start: Optional[float] = None
        self._last_mark: Optional[float] = None
        self._current: Dict[str, float] = {}
        self._run_count = 0

    def start_run(self) -> None:
        """Start timing a new pipeline run."""
        self._run_start = time.perf_counter()
        self._last_mark = self._run_start
        self._current = {}

    def mark_stage(self, stage: str) -> float:
        """
        Mark the completion of a stage.

        Args:
            stage: Name of the completed stage

        Returns:
            Milliseconds since the previous mark (or the run start)
        """
        if self._last_mark is None:
            raise RuntimeError("start_run() must be called before mark_stage()")
        if stage not in self.stages:
            raise KeyError(f"Unknown stage: {stage}")

        now = time.perf_counter()
        elapsed_ms = (now - self._last_mark) * 1000
        self._last_mark = now
        self._current[stage] = elapsed_ms
        return elapsed_ms

    def end_run(self) -> Dict[str, float]:
        """
        Finish the current run and record its timings.

        Returns:
            Dictionary of stage -> ms, including 'total'
        """
        if self._run_start is None:
            raise RuntimeError("start_run() must be called before end_run()")

        total_ms = (time.perf_counter() - self._run_start) * 1000
        for stage, elapsed_ms in self._current.items():
            self._history[stage].append(elapsed_ms)
        self._history['total'].append(total_ms)
        self._run_count += 1

        result = {stage: round(ms, 3) for stage, ms in self._current.items()}
        result['total'] = round(total_ms, 3)

        self._run_start = None
        self._last_mark = None
        return result

    def get_breakdown_stats(self) -> Dict[str, Dict[str, float]]:
        """
        Get timing statistics by stage.

        Returns:
            Nested dictionary {stage: {'mean', 'median', 'max'}}
        """
        def calc_stats(values: deque) -> Dict[str, float]:
            if not values:
                return {'mean': 0.0, 'median': 0.0, 'max': 0.0}
            vals = list(values)
            return {
                'mean': round(statistics.mean(vals), 3),
                'median': round(statistics.median(vals), 3),
                'max': round(max(vals), 3)
            }

        return {stage: calc_stats(values) for stage, values in self._history.items()}

    def get_latest(self) -> Dict[str, float]:
        """Get the timings of the most recent run (0.0 where none recorded)."""
        return {
            stage: values[-1] if values else 0.0
            for stage, values in self._history.items()
        }

    @property
    def run_count(self) -> int:
        return self._run_count

    def reset(self) -> None:
        """Reset all tracking data."""
        for values in self._history.values():
            values.clear()
        self._run_count = 0


# Global timer instance
_global_timer: Optional[StageTimer] = None


def get_stage_timer() -> StageTimer:
    """
    Get or create the global stage timer.

    Returns:
        StageTimer instance (singleton pattern)
    """
    global _global_timer
    if _global_timer is None:
        _global_timer = StageTimer()
    return _global_timer
