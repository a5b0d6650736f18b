#!/usr/bin/env python3
"""Habit dashboard TUI powered by Textual."""

from __future__ import annotations

import sys

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import DataTable, Footer, Header, Label, Static

from habitcore import (
    workspace_root,
    today_date,
    load_enriched_habits,
    toggle_and_save,
    compute_dashboard_stats,
    crossed_milestones,
    milestone_message,
    frequency_days,
    export_workspace,
    EnrichedHabit,
)


CSS = """
Screen {
    background: $surface;
}

.section-title {
    text-style: bold;
    color: $accent;
    padding: 0 1;
    margin: 1 0 0 0;
}

#stats-info {
    padding: 0 1;
    height: auto;
}

#habits-table {
    height: 1fr;
}
"""


def _row(h: EnrichedHabit) -> tuple[str, ...]:
    if h.is_completed_today:
        today = "[green]done[/]"
    elif h.is_due_today:
        today = "[yellow]due[/]"
    else:
        today = ""
    return (
        f"{h.habit.icon} {h.habit.title}".strip(),
        ", ".join(frequency_days(h.habit.frequency)),
        str(h.current_streak),
        str(h.longest_streak),
        f"{h.completion_rate}%",
        today,
    )


class StatsScreen(Vertical):
    """Dashboard totals for today."""

    def __init__(self, habits: list[EnrichedHabit], **kwargs) -> None:
        super().__init__(**kwargs)
        self._habits = habits

    def compose(self) -> ComposeResult:
        yield Label("Stats", classes="section-title")
        yield Static(id="stats-info")

    def on_mount(self) -> None:
        stats = compute_dashboard_stats(self._habits, today_date())
        best = max(self._habits, key=lambda h: h.longest_streak, default=None)
        lines = [
            f"Habits: {stats.total_habits}",
            f"Completed today: {stats.completed_today}",
            f"Active streaks: {stats.active_streaks}",
            f"Total completions: {stats.total_completions}",
            f"Overall rate: {stats.completion_rate}%",
        ]
        if best and best.longest_streak:
            lines.append(f"Best streak: {best.longest_streak} days ({best.habit.title})")
        self.query_one("#stats-info", Static).update("\n".join(lines))


class HabitsApp(App):
    """Today's habits with streaks; toggle completions from the keyboard."""

    TITLE = "Habits"
    CSS = CSS

    BINDINGS = [
        Binding("space", "toggle_selected", "Done/Undo"),
        Binding("s", "toggle_stats", "Stats"),
        Binding("x", "export", "Export"),
        Binding("r", "refresh", "Refresh"),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self._habits: list[EnrichedHabit] = []
        self._show_stats = False

    def compose(self) -> ComposeResult:
        yield Header()
        yield Vertical(
            Label("Today", classes="section-title", id="today-label"),
            DataTable(id="habits-table", cursor_type="row"),
            id="main-layout",
        )
        yield Footer()

    def on_mount(self) -> None:
        table = self.query_one("#habits-table", DataTable)
        table.add_columns("Habit", "Days", "Streak", "Best", "Rate", "Today")
        self._load_data()

    def _load_data(self) -> None:
        today = today_date()
        self._habits = load_enriched_habits(today=today)
        self.query_one("#today-label", Label).update(f"Today: {today.isoformat()}")

        table = self.query_one("#habits-table", DataTable)
        table.clear()
        for h in self._habits:
            table.add_row(*_row(h), key=h.id)
        if not self._habits:
            self.notify("No habits yet. Add some to data/habits.yaml.", severity="information")

    def _selected(self) -> EnrichedHabit | None:
        table = self.query_one("#habits-table", DataTable)
        if not self._habits or table.cursor_row is None:
            return None
        if 0 <= table.cursor_row < len(self._habits):
            return self._habits[table.cursor_row]
        return None

    def action_toggle_selected(self) -> None:
        habit = self._selected()
        if habit is None:
            return
        before = habit.current_streak
        done, errors = toggle_and_save(habit.id, today_date())
        if errors:
            self.notify(errors[0], title="Toggle failed", severity="error")
            return

        cursor = self.query_one("#habits-table", DataTable).cursor_row
        self._load_data()
        self.query_one("#habits-table", DataTable).move_cursor(row=cursor)

        after = next((h for h in self._habits if h.id == habit.id), None)
        if done and after:
            for m in crossed_milestones(before, after.current_streak):
                self.notify(milestone_message(habit.title, m), title=f"{m}-day milestone")

    def action_refresh(self) -> None:
        self._load_data()

    def action_toggle_stats(self) -> None:
        self._show_stats = not self._show_stats
        main = self.query_one("#main-layout", Vertical)
        for old in self.query(".overlay-screen"):
            old.remove()
        if self._show_stats:
            main.mount(StatsScreen(self._habits, classes="overlay-screen"))

    def action_export(self) -> None:
        self._do_export()

    @work(thread=True)
    def _do_export(self) -> None:
        try:
            path = export_workspace()
            self.call_from_thread(self.notify, f"Saved {path}", title="Exported")
        except OSError as e:
            self.call_from_thread(self.notify, f"Error: {e}", title="Export failed", severity="error")


# ── Entry point ────────────────────────────────────────────────


def main() -> None:
    root = workspace_root()
    if not root.exists():
        print(f"Workspace not found: {root}")
        print("Set HABITS_ROOT to your habits directory.")
        sys.exit(1)

    app = HabitsApp()
    app.run()


if __name__ == "__main__":
    main()
