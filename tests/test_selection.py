"""Unit tests for the header selection state."""

import pytest
from teamboard.models import ALL
from teamboard.selection import SelectionState


@pytest.fixture
def state():
    return SelectionState()


class TestInitialState:
    """Test the state at mount."""

    def test_defaults(self, state):
        """Nothing selected and only 'all' expanded."""
        assert state.selected_team_id == ALL
        assert state.selected_project_id == ALL
        assert state.expanded_teams == frozenset({ALL})

    def test_all_starts_expanded(self, state):
        assert state.is_expanded(ALL)
        assert not state.is_expanded("t1")

    def test_project_row_visible(self, state):
        assert state.project_row_visible()


class TestSelectTeam:
    """Test the select_team transition."""

    def test_select_from_initial_state(self, state):
        """Selecting t1 expands t1 and leaves 'all' alone."""
        state.select_team("t1")
        assert state.selected_team_id == "t1"
        assert state.selected_project_id == ALL
        assert state.expanded_teams == frozenset({ALL, "t1"})

    def test_resets_project_selection(self, state):
        """Any prior project selection is dropped."""
        state.select_team("t1")
        state.select_project("p1")
        state.select_team("t2")
        assert state.selected_project_id == ALL

    def test_reselecting_same_team_resets_project(self, state):
        state.select_team("t1")
        state.select_project("p1")
        state.select_team("t1")
        assert state.selected_team_id == "t1"
        assert state.selected_project_id == ALL

    def test_toggle_is_its_own_inverse(self, state):
        """Two clicks on the same team restore its expansion."""
        before = state.is_expanded("t1")
        state.select_team("t1")
        state.select_team("t1")
        assert state.is_expanded("t1") == before
        assert state.expanded_teams == frozenset({ALL})

    def test_selecting_all_collapses_all(self, state):
        """'all' is toggled like any other team."""
        state.select_team(ALL)
        assert not state.is_expanded(ALL)
        state.select_team(ALL)
        assert state.is_expanded(ALL)

    def test_switching_teams_keeps_other_expansions(self, state):
        """Expansion is tracked per team, independently of selection."""
        state.select_team("t1")
        state.select_team("t2")
        assert state.selected_team_id == "t2"
        assert state.expanded_teams == frozenset({ALL, "t1", "t2"})

    def test_unknown_team_is_accepted(self, state):
        """Unknown ids are not an error."""
        state.select_team("nope")
        assert state.selected_team_id == "nope"
        assert state.is_expanded("nope")


class TestSelectProject:
    """Test the select_project transition."""

    def test_select_project(self, state):
        state.select_team("t1")
        state.select_project("p1")
        assert state.selected_project_id == "p1"
        assert state.selected_team_id == "t1"
        assert state.expanded_teams == frozenset({ALL, "t1"})

    def test_no_validity_guard(self, state):
        """A project from another team is accepted as-is."""
        state.select_team("t1")
        state.select_project("p-from-t2")
        assert state.selected_project_id == "p-from-t2"


class TestProjectRowVisibility:
    """Test the project row gate."""

    def test_collapsed_team_hides_row(self, state):
        state.select_team("t1")
        state.select_team("t1")
        assert state.selected_team_id == "t1"
        assert not state.project_row_visible()

    def test_expanded_team_shows_row(self, state):
        state.select_team("t1")
        assert state.project_row_visible()

    def test_all_row_always_visible(self, state):
        """The 'all' row shows even when 'all' itself is collapsed."""
        state.select_team(ALL)
        assert not state.is_expanded(ALL)
        assert state.project_row_visible()


class TestSnapshot:
    """Test immutable snapshots of the state."""

    def test_snapshot_matches_state(self, state):
        state.select_team("t1")
        state.select_project("p1")
        snap = state.snapshot()
        assert snap.selected_team_id == "t1"
        assert snap.selected_project_id == "p1"
        assert snap.expanded == frozenset({ALL, "t1"})

    def test_snapshot_is_detached(self, state):
        """Later transitions don't leak into an earlier snapshot."""
        snap = state.snapshot()
        state.select_team("t1")
        assert snap.selected_team_id == ALL
        assert snap.expanded == frozenset({ALL})
