"""
Selection state for the teams/projects header.

Tracks the selected team, the selected project and which teams have their
project row expanded. Expansion is independent of selection, except that
selecting a team toggles that team's expansion.
"""
from typing import FrozenSet, Iterable, Optional

from .models import ALL, Selection
from .logs import get_logger

log = get_logger("selection")

class SelectionState:
    """Holds the header selection and keeps it consistent across transitions."""

    def __init__(self, expanded: Optional[Iterable[str]] = None):
        self.selected_team_id: str = ALL
        self.selected_project_id: str = ALL
        self._expanded = set(expanded) if expanded is not None else {ALL}

    def select_team(self, team_id: str) -> None:
        """Select a team, clear the project selection and toggle the team's expansion."""
        self.selected_team_id = team_id
        # The old project may not belong to the new team
        self.selected_project_id = ALL
        if team_id in self._expanded:
            self._expanded.remove(team_id)
        else:
            self._expanded.add(team_id)
        log.debug(f"Selected team {team_id!r}; expanded={sorted(self._expanded)}")

    def select_project(self, project_id: str) -> None:
        """Select a project. The team selection and expansion are left alone."""
        self.selected_project_id = project_id
        log.debug(f"Selected project {project_id!r} in team {self.selected_team_id!r}")

    def is_expanded(self, team_id: str) -> bool:
        return team_id in self._expanded

    @property
    def expanded_teams(self) -> FrozenSet[str]:
        return frozenset(self._expanded)

    def project_row_visible(self) -> bool:
        """Whether the project row for the current team selection is shown.

        The "all" pseudo-team always shows its row, even when collapsed.
        """
        return self.is_expanded(self.selected_team_id) or self.selected_team_id == ALL

    def snapshot(self) -> Selection:
        return Selection(
            selected_team_id=self.selected_team_id,
            selected_project_id=self.selected_project_id,
            expanded=self.expanded_teams
        )

    def __repr__(self) -> str:
        return (f"SelectionState(team={self.selected_team_id!r}, "
                f"project={self.selected_project_id!r}, expanded={sorted(self._expanded)})")
