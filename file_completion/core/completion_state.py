import logging
from typing import Dict, List, Set

from file_completion.core.exceptions import InvalidTransitionError
from file_completion.models import CompletionState


# Allowed transitions within one completion
_TRANSITIONS: Dict[CompletionState, Set[CompletionState]] = {
    CompletionState.RECEIVED: {
        CompletionState.COMMIT_ATTEMPTED,
        CompletionState.ROLLBACK_ATTEMPTED,
    },
    CompletionState.COMMIT_ATTEMPTED: {
        CompletionState.COMMITTED,
        CompletionState.ROLLBACK_ATTEMPTED,
    },
    CompletionState.COMMITTED: set(),
    CompletionState.ROLLBACK_ATTEMPTED: set(),
}

TERMINAL_STATES = frozenset(
    state for state, targets in _TRANSITIONS.items() if not targets
)


class CompletionTracker:
    """
    Tracks the disposition of a single completion call.

    One tracker exists per completion; it is never shared between files, so
    it needs no locking.
    """

    def __init__(self, file_name: str):
        self.file_name = file_name
        self.state = CompletionState.RECEIVED
        self.history: List[CompletionState] = [CompletionState.RECEIVED]

    def transition(self, new_state: CompletionState) -> None:
        """
        Move to a new state.

        Raises:
            InvalidTransitionError: If the move is not in the transition table.
        """
        if new_state not in _TRANSITIONS[self.state]:
            raise InvalidTransitionError(
                self.file_name, self.state.value, new_state.value
            )
        logging.debug(
            f"Completion: {self.file_name} | {self.state.value} -> {new_state.value}"
        )
        self.state = new_state
        self.history.append(new_state)

    @property
    def is_terminal(self) -> bool:
        return self.state in TERMINAL_STATES

    @property
    def committed(self) -> bool:
        return self.state == CompletionState.COMMITTED

    def __str__(self) -> str:
        return f"CompletionTracker({self.file_name}, state={self.state.value})"
