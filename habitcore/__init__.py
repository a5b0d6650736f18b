"""habitcore: habit streak engine and its data layer.

Public API re-exports for convenient imports:
    from habitcore import enrich_habit, Habit, Completion, DAILY, ...
"""

# Dates
from habitcore.dates import (
    format_date,
    parse_date,
    is_today,
    is_yesterday,
    days_difference,
    add_days,
)

# Frequency
from habitcore.frequency import (
    MONDAY,
    TUESDAY,
    WEDNESDAY,
    THURSDAY,
    FRIDAY,
    SATURDAY,
    SUNDAY,
    DAILY,
    WEEKDAYS,
    WEEKENDS,
    FREQUENCY_DAYS,
    FREQUENCY_PRESETS,
    day_of_week_index,
    is_day_included_in_frequency,
    is_habit_due_on_date,
    frequency_days,
    frequency_from_days,
)

# Streaks
from habitcore.streaks import (
    current_streak,
    longest_streak,
    calculate_streak,
    calculate_completion_rate,
    enrich_habit,
    enrich_habits,
)

# Validation
from habitcore.validation import (
    validate_habit_title,
    validate_frequency,
    validate_habit,
)

# Milestones & stats
from habitcore.milestones import (
    STREAK_MILESTONES,
    CONFETTI_MILESTONES,
    crossed_milestones,
    should_show_confetti,
    streak_color,
    milestone_message,
)
from habitcore.stats import compute_dashboard_stats

# Export
from habitcore.export import (
    export_habits_to_csv,
    export_habits_to_json,
    write_export,
    export_workspace,
)

# Workspace & paths
from habitcore.workspace import (
    workspace_root,
    load_settings,
    get_user_timezone,
    today_date,
    today_str,
    settings_path,
    habits_path,
    completions_path,
    exports_dir,
)

# Storage
from habitcore.store import (
    load_habits,
    save_habits,
    load_completions,
    save_completions,
    load_enriched_habits,
    find_habit,
    create_habit,
    update_habit,
    delete_habit,
    toggle_completion,
    toggle_and_save,
)

# Models
from habitcore.models import (
    Habit,
    Completion,
    StreakResult,
    EnrichedHabit,
    DashboardStats,
    Settings,
)
