"""Derived statistics and heatmap density for recorded shots."""

from boxlax_tracker.stats.aggregation import (
    ControlledSaveStats,
    OverallStats,
    PenaltyKillStats,
    PeriodStats,
    SituationalStats,
    controlled_save_stats,
    overall_stats,
    penalty_kill_stats,
    per_period_stats,
    percentage,
    situational_stats,
)
from boxlax_tracker.stats.density import DensityBand, estimate_goal_density
from boxlax_tracker.stats.frames import events_to_frame

__all__ = [
    "ControlledSaveStats",
    "OverallStats",
    "PenaltyKillStats",
    "PeriodStats",
    "SituationalStats",
    "controlled_save_stats",
    "overall_stats",
    "penalty_kill_stats",
    "per_period_stats",
    "percentage",
    "situational_stats",
    "DensityBand",
    "estimate_goal_density",
    "events_to_frame",
]
