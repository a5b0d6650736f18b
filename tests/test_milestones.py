"""Tests for habitcore/milestones.py."""

from habitcore.milestones import (
    STREAK_MILESTONES,
    crossed_milestones,
    milestone_message,
    should_show_confetti,
    streak_color,
)


def test_milestone_thresholds():
    assert STREAK_MILESTONES == (7, 14, 21, 30, 60, 90, 100, 365)


def test_crossed_milestones():
    assert crossed_milestones(6, 7) == [7]
    assert crossed_milestones(7, 8) == []
    assert crossed_milestones(0, 30) == [7, 14, 21, 30]
    assert crossed_milestones(8, 7) == []


def test_should_show_confetti():
    assert should_show_confetti(29, 30) is True
    assert should_show_confetti(13, 14) is False
    assert should_show_confetti(100, 101) is False


def test_streak_color():
    assert streak_color(0) == "gray"
    assert streak_color(6) == "orange"
    assert streak_color(7) == "yellow"
    assert streak_color(30) == "green"
    assert streak_color(100) == "purple"


def test_milestone_message():
    assert "Meditate" in milestone_message("Meditate", 7)
    assert "One week" in milestone_message("Meditate", 7)
    assert milestone_message("Meditate", 50).startswith("50 days")
