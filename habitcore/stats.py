"""Aggregate dashboard statistics over enriched habits."""

from __future__ import annotations

from datetime import date

from habitcore.dates import days_difference
from habitcore.models import DashboardStats, EnrichedHabit
from habitcore.streaks import round_half_up


def compute_dashboard_stats(habits: list[EnrichedHabit], today: date) -> DashboardStats:
    """Totals for the dashboard header.

    The overall rate divides every completion by the days each habit has
    existed (at least one day per habit), regardless of schedule.
    """
    stats = DashboardStats(total_habits=len(habits))
    if not habits:
        return stats

    stats.completed_today = sum(1 for h in habits if h.is_completed_today)
    stats.active_streaks = sum(1 for h in habits if h.current_streak > 0)
    stats.total_completions = sum(len(h.completions) for h in habits)

    total_days = sum(max(1, days_difference(h.habit.start_date, today)) for h in habits)
    stats.completion_rate = round_half_up(stats.total_completions / total_days * 100)
    return stats
