"""
Command Line Interface for teamboard.
"""

import click
import json
import os
import sys
from .version import VERSION
from .data import DATA_JSON, atomic_write, board_schema, load_board, load_data_file, load_model, validate_board_data
from .header import build_header
from .models import NotificationPreferences
from .notifications import enabled_notification_labels
from .progress import progress_for_project
from .recovery import TeamboardError
from .selection import SelectionState
from .logs import get_logger

log = get_logger("cli")

COMPLETED_STATUS_ENV = "TEAMBOARD_COMPLETED_STATUS"


def _completed_status(option_value, board):
    return option_value or os.getenv(COMPLETED_STATUS_ENV) or board.completed_status_id


def _fail(message):
    click.echo(f"❌ {message}", err=True)
    sys.exit(1)


def _bar(percent, width=12):
    filled = round(percent / 100 * width)
    return "█" * filled + "░" * (width - filled)


@click.group()
@click.version_option(version=VERSION, prog_name="teamboard")
def main():
    """
    teamboard - team and project selection with live progress.
    """
    pass


@main.command()
@click.argument('board_file', type=click.Path(dir_okay=False))
@click.option('-t', '--team', 'teams', multiple=True, help='Click a team chip (repeatable, applied in order)')
@click.option('-p', '--project', help='Click a project chip after the team clicks')
@click.option('--completed-status', help='Status id that marks a task as done')
def show(board_file, teams, project, completed_status):
    """Show the teams and projects header for a sequence of clicks."""
    try:
        board = load_board(board_file)
    except TeamboardError as e:
        _fail(f"Error loading board: {e}")

    state = SelectionState()
    for team_id in teams:
        state.select_team(team_id)
    if project:
        state.select_project(project)
    log.debug(f"Header state after clicks: {state!r}")

    view = build_header(board, state, _completed_status(completed_status, board))

    click.echo("👥 Teams:")
    for chip in view.teams:
        marker = "▶" if chip.selected else " "
        count = "" if chip.project_count is None else f" ({chip.project_count})"
        click.echo(f"  {marker} {chip.name}{count}")

    click.echo("")
    if view.projects is None:
        click.echo("📁 Projects: collapsed")
        click.echo(f"💡 Select '{state.selected_team_id}' again to expand its projects")
        return

    click.echo("📁 Projects:")
    for chip in view.projects:
        marker = "▶" if chip.selected else " "
        if chip.progress is None:
            click.echo(f"  {marker} {chip.name}")
        else:
            snap = chip.progress
            click.echo(f"  {marker} {chip.name}  {_bar(snap.progress)} {snap.progress}% "
                       f"({snap.completed}/{snap.total})")


@main.command()
@click.argument('board_file', type=click.Path(dir_okay=False))
@click.argument('project_id')
@click.option('--completed-status', help='Status id that marks a task as done')
def progress(board_file, project_id, completed_status):
    """Show completion for a single project."""
    try:
        board = load_board(board_file)
    except TeamboardError as e:
        _fail(f"Error loading board: {e}")

    project = board.find_project(project_id)
    if project is None:
        click.echo(f"⚠️  Unknown project '{project_id}'")

    snap = progress_for_project(board.tasks, project_id, _completed_status(completed_status, board))
    name = project.name if project else project_id
    click.echo(f"📊 {name}: {snap.progress}% ({snap.completed}/{snap.total} tasks completed)")


@main.command()
@click.argument('board_file', type=click.Path(dir_okay=False))
def validate(board_file):
    """Check a board file against the board schema."""
    try:
        data = load_data_file(board_file)
    except TeamboardError as e:
        _fail(f"Error reading board: {e}")

    errors = validate_board_data(data)
    if errors:
        click.echo(f"❌ {board_file} is invalid:")
        for error in errors:
            click.echo(f"   • {error}")
        sys.exit(1)

    click.echo(f"✅ {board_file} is valid")


@main.command()
@click.option('-o', '--output', type=click.Path(dir_okay=False), help='Write the schema to this file')
def schema(output):
    """Print or save the JSON schema of board files."""
    document = board_schema()
    if not output:
        click.echo(json.dumps(document, indent=2))
        return

    try:
        atomic_write(DATA_JSON, output, document, create_dirs=True)
    except TeamboardError as e:
        _fail(f"Error writing schema: {e}")
    click.echo(f"✅ Schema written to {output}")


@main.command()
@click.argument('prefs_file', type=click.Path(dir_okay=False))
def notifications(prefs_file):
    """List the enabled notification channels in a preferences file."""
    try:
        preferences = load_model(NotificationPreferences, prefs_file)
    except TeamboardError as e:
        _fail(f"Error loading preferences: {e}")

    labels = enabled_notification_labels(preferences)
    if not labels:
        click.echo("🔕 No notifications enabled")
        return

    click.echo("🔔 Enabled notifications:")
    for label in labels:
        click.echo(f"   • {label}")


if __name__ == "__main__":
    main()
