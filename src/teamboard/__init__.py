"""
teamboard - Team, project and task selection for a work management header.

This package tracks which team and project are selected, which teams have
their project row expanded, and how far along each project is:
Team → Project → Task
"""

from .version import VERSION, BOARD_SCHEMA_VERSION
from .models import (
    ALL,
    Team,
    Project,
    Task,
    ProgressSnapshot,
    Selection,
    NotificationPreferences,
    Board,
)
from .selection import SelectionState
from .progress import (
    projects_for_team,
    team_project_count,
    is_task_completed,
    progress_for_project,
)
from .header import HeaderView, TeamChip, ProjectChip, build_header
from .notifications import enabled_notification_labels, has_enabled_notifications

__version__ = VERSION

__all__ = [
    "VERSION",
    "BOARD_SCHEMA_VERSION",
    "ALL",
    "Team",
    "Project",
    "Task",
    "ProgressSnapshot",
    "Selection",
    "NotificationPreferences",
    "Board",
    "SelectionState",
    "projects_for_team",
    "team_project_count",
    "is_task_completed",
    "progress_for_project",
    "HeaderView",
    "TeamChip",
    "ProjectChip",
    "build_header",
    "enabled_notification_labels",
    "has_enabled_notifications",
]
