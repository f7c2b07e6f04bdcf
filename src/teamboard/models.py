from pydantic import BaseModel, Field, field_validator, model_validator
from datetime import datetime
from typing import Optional, List, FrozenSet
import yaml

# Sentinel id for the "every team" / "every project" selection.
ALL = "all"

class BaseYAMLModel(BaseModel):
    """A model that can be read from and written to YAML documents."""

    def to_yaml(self) -> str:
        return yaml.safe_dump(self.model_dump(mode="json"), default_flow_style=False,
                              sort_keys=False, indent=2, allow_unicode=True)

    @classmethod
    def from_yaml(cls, text: str):
        data = yaml.safe_load(text) or {}
        return cls.model_validate(data)

class Team(BaseModel):
    """A top-level organizational grouping that owns projects."""

    id: str = Field(description="Unique identifier of the team")
    name: str = Field(description="Display name of the team")
    color: str = Field(description="Accent color used for the team, such as #3b82f6")
    description: Optional[str] = Field(default=None, description="What the team is for")

    @field_validator('id')
    @classmethod
    def validate_id(cls, v):
        if v == ALL:
            raise ValueError(f"'{ALL}' is reserved and cannot be used as a team id")
        return v

class Project(BaseModel):
    """A unit of work grouping tasks; belongs to exactly one team."""

    id: str = Field(description="Unique identifier of the project")
    name: str = Field(description="Display name of the project")
    color: str = Field(description="Accent color used for the project")
    team_id: str = Field(description="The team that owns this project")
    description: Optional[str] = Field(default=None, description="What the project is for")

    @field_validator('id')
    @classmethod
    def validate_id(cls, v):
        if v == ALL:
            raise ValueError(f"'{ALL}' is reserved and cannot be used as a project id")
        return v

class Task(BaseModel):
    """An atomic work item. Only the fields progress aggregation reads are required."""

    id: str = Field(description="Unique identifier of the task")
    project_id: Optional[str] = Field(default=None, description="The project this task belongs to")
    status: str = Field(description="Identifier of the task's (admin-configured) status")
    completed_at: Optional[datetime] = Field(default=None, description="When the task was marked complete")
    title: Optional[str] = Field(default=None, description="Human readable title of the task")

class ProgressSnapshot(BaseModel):
    """Completion of a single project, derived from its tasks on every read."""

    progress: int = Field(default=0, ge=0, le=100, description="Completion percentage, rounded")
    completed: int = Field(default=0, ge=0, description="Number of completed tasks")
    total: int = Field(default=0, ge=0, description="Number of tasks in the project")

    @model_validator(mode='after')
    def validate_counts(self):
        if self.completed > self.total:
            raise ValueError("completed must not exceed total")
        return self

class Selection(BaseModel):
    """Immutable view of the header selection state."""

    selected_team_id: str = Field(default=ALL, description="Selected team id, or 'all'")
    selected_project_id: str = Field(default=ALL, description="Selected project id, or 'all'")
    expanded: FrozenSet[str] = Field(
        default_factory=lambda: frozenset({ALL}),
        description="Team ids (and 'all') whose project row is expanded"
    )

    model_config = {"frozen": True}

class NotificationPreferences(BaseYAMLModel):
    """Per-user notification channel switches."""

    email_notifications: bool = Field(default=False, description="Send email notifications")
    push_notifications: bool = Field(default=False, description="Send push notifications")
    task_reminders: bool = Field(default=False, description="Remind about upcoming tasks")
    calendar_alerts: bool = Field(default=False, description="Alert on calendar events")
    chat_messages: bool = Field(default=False, description="Notify on new chat messages")
    request_updates: bool = Field(default=False, description="Notify when requests change")

class Board(BaseYAMLModel):
    """A fully materialized snapshot of the teams, projects and tasks shown in the header."""

    completed_status_id: str = Field(description="The status id that marks a task as done")
    teams: List[Team] = Field(default_factory=list, description="Teams in display order")
    projects: List[Project] = Field(default_factory=list, description="Projects in display order")
    tasks: List[Task] = Field(default_factory=list, description="Tasks across all projects")

    def find_team(self, team_id: str) -> Optional[Team]:
        """Find a team by id."""
        return next((t for t in self.teams if t.id == team_id), None)

    def find_project(self, project_id: str) -> Optional[Project]:
        """Find a project by id."""
        return next((p for p in self.projects if p.id == project_id), None)
