"""
Monitoring Package - Pipeline Stage Timing
"""
from .stage_timer import StageTimer, get_stage_timer, PIPELINE_STAGES

__all__ = ['StageTimer', 'get_stage_timer', 'PIPELINE_STAGES']
