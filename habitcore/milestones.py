"""Streak milestones, colour tiers and celebration text."""

from __future__ import annotations

STREAK_MILESTONES = (7, 14, 21, 30, 60, 90, 100, 365)
CONFETTI_MILESTONES = (7, 30, 100, 365)


def crossed_milestones(old_streak: int, new_streak: int) -> list[int]:
    """Milestones reached by going from *old_streak* to *new_streak*."""
    return [m for m in STREAK_MILESTONES if old_streak < m <= new_streak]


def should_show_confetti(old_streak: int, new_streak: int) -> bool:
    return any(old_streak < m <= new_streak for m in CONFETTI_MILESTONES)


def streak_color(streak: int) -> str:
    if streak == 0:
        return "gray"
    if streak < 7:
        return "orange"
    if streak < 30:
        return "yellow"
    if streak < 100:
        return "green"
    return "purple"


def milestone_message(title: str, milestone: int) -> str:
    """Build the celebration line for a habit reaching *milestone* days."""
    messages = {
        7: f'One week strong! "{title}" is becoming a real habit.',
        14: f'Two weeks! You\'re building something permanent with "{title}".',
        21: f'21 days of "{title}". The routine is sticking.',
        30: f'One month! "{title}" is now part of who you are.',
        60: f'Two months of "{title}". Champion pace.',
        90: f'90 days! "{title}" has transformed your routine.',
        100: f'100 days of "{title}". Incredible.',
        365: f'One year! 365 days of "{title}".',
    }
    return messages.get(milestone, f'{milestone} days of "{title}"! Keep going.')
