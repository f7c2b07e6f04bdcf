"""
Plain-data view of the teams/projects header.

Combines the selection state with the aggregation functions into the rows a
rendering layer draws: a team row that is always present and a project row
that is gated by the selected team's expansion.
"""
from pydantic import BaseModel, Field
from typing import Optional, List

from .models import ALL, Board, ProgressSnapshot
from .progress import projects_for_team, team_project_count, progress_for_project
from .selection import SelectionState
from .logs import get_logger

log = get_logger("header")

class TeamChip(BaseModel):
    id: str = Field(description="Team id, or 'all' for the All chip")
    name: str = Field(description="Label shown on the chip")
    color: Optional[str] = Field(default=None, description="Team color; None for the All chip")
    project_count: Optional[int] = Field(default=None, description="Projects owned by the team")
    selected: bool = Field(default=False, description="Whether this chip is the selected team")

class ProjectChip(BaseModel):
    id: str = Field(description="Project id, or 'all' for the All Projects chip")
    name: str = Field(description="Label shown on the chip")
    color: Optional[str] = Field(default=None, description="Project color; None for the All Projects chip")
    selected: bool = Field(default=False, description="Whether this chip is the selected project")
    progress: Optional[ProgressSnapshot] = Field(default=None, description="Completion; None for the All Projects chip")

class HeaderView(BaseModel):
    teams: List[TeamChip] = Field(default_factory=list, description="The team row")
    projects: Optional[List[ProjectChip]] = Field(
        default=None,
        description="The project row, or None while it is collapsed"
    )

def build_header(board: Board, state: SelectionState, completed_status_id: Optional[str] = None) -> HeaderView:
    """Derive the header rows for the current selection.

    Args:
        board: Teams, projects and tasks to show
        state: Current selection state
        completed_status_id: Overrides the board's completed status id when given
    """
    status_id = completed_status_id or board.completed_status_id

    teams = [TeamChip(id=ALL, name="All", selected=state.selected_team_id == ALL)]
    for team in board.teams:
        teams.append(TeamChip(
            id=team.id,
            name=team.name,
            color=team.color,
            project_count=team_project_count(board.projects, team.id),
            selected=state.selected_team_id == team.id
        ))

    if not state.project_row_visible():
        log.debug(f"Project row collapsed for team {state.selected_team_id!r}")
        return HeaderView(teams=teams, projects=None)

    projects = [ProjectChip(id=ALL, name="All Projects", selected=state.selected_project_id == ALL)]
    for project in projects_for_team(board.projects, state.selected_team_id):
        projects.append(ProjectChip(
            id=project.id,
            name=project.name,
            color=project.color,
            selected=state.selected_project_id == project.id,
            progress=progress_for_project(board.tasks, project.id, status_id)
        ))

    return HeaderView(teams=teams, projects=projects)
