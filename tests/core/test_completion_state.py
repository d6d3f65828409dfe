"""
Tests for CompletionTracker - the per-completion state machine.
"""

import pytest

from file_completion.core.completion_state import TERMINAL_STATES, CompletionTracker
from file_completion.core.exceptions import InvalidTransitionError
from file_completion.models import CompletionState


def test_starts_received():
    tracker = CompletionTracker("a.txt")

    assert tracker.state == CompletionState.RECEIVED
    assert not tracker.is_terminal


def test_commit_path():
    tracker = CompletionTracker("a.txt")

    tracker.transition(CompletionState.COMMIT_ATTEMPTED)
    tracker.transition(CompletionState.COMMITTED)

    assert tracker.committed
    assert tracker.is_terminal
    assert tracker.history == [
        CompletionState.RECEIVED,
        CompletionState.COMMIT_ATTEMPTED,
        CompletionState.COMMITTED,
    ]


def test_commit_falls_back_to_rollback():
    tracker = CompletionTracker("a.txt")

    tracker.transition(CompletionState.COMMIT_ATTEMPTED)
    tracker.transition(CompletionState.ROLLBACK_ATTEMPTED)

    assert tracker.is_terminal
    assert not tracker.committed


def test_failure_goes_straight_to_rollback():
    tracker = CompletionTracker("a.txt")

    tracker.transition(CompletionState.ROLLBACK_ATTEMPTED)

    assert tracker.state == CompletionState.ROLLBACK_ATTEMPTED


def test_cannot_commit_without_attempt():
    tracker = CompletionTracker("a.txt")

    with pytest.raises(InvalidTransitionError, match="'Received' to 'Committed'"):
        tracker.transition(CompletionState.COMMITTED)


@pytest.mark.parametrize("terminal", sorted(TERMINAL_STATES))
def test_terminal_states_are_final(terminal):
    tracker = CompletionTracker("a.txt")
    if terminal == CompletionState.COMMITTED:
        tracker.transition(CompletionState.COMMIT_ATTEMPTED)
    tracker.transition(terminal)

    with pytest.raises(InvalidTransitionError):
        tracker.transition(CompletionState.ROLLBACK_ATTEMPTED)


def test_terminal_states():
    assert TERMINAL_STATES == {CompletionState.COMMITTED, CompletionState.ROLLBACK_ATTEMPTED}
