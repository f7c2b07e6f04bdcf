"""
Progress aggregation over the task collection.

Everything here is a pure function of its arguments; nothing is cached, since
task completion changes outside of this package.
"""
from typing import List, Sequence

from .models import ALL, Project, Task, ProgressSnapshot

def projects_for_team(projects: Sequence[Project], team_id: str) -> List[Project]:
    """Projects owned by a team, in input order. "all" yields every project."""
    if team_id == ALL:
        return list(projects)
    return [p for p in projects if p.team_id == team_id]

def team_project_count(projects: Sequence[Project], team_id: str) -> int:
    return len(projects_for_team(projects, team_id))

def is_task_completed(task: Task, completed_status_id: str) -> bool:
    """A task is done if it has the completed status or a completion time; either is enough."""
    return task.status == completed_status_id or task.completed_at is not None

def progress_for_project(tasks: Sequence[Task], project_id: str, completed_status_id: str) -> ProgressSnapshot:
    """Compute completion for one project.

    Args:
        tasks: The full task collection
        project_id: Project to aggregate; unknown ids give the zero snapshot
        completed_status_id: Status id that marks a task as done

    Returns:
        A ProgressSnapshot with the rounded percentage and the raw counts
    """
    project_tasks = [t for t in tasks if t.project_id == project_id]
    if not project_tasks:
        return ProgressSnapshot(progress=0, completed=0, total=0)

    total = len(project_tasks)
    completed = sum(1 for t in project_tasks if is_task_completed(t, completed_status_id))
    return ProgressSnapshot(
        # Halves round up
        progress=(200 * completed + total) // (2 * total),
        completed=completed,
        total=total
    )
