"""Legacy config migration state machine."""

from enum import Enum, auto
from typing import ClassVar


class MigrationState(Enum):
    """Legacy config migration states.

    State transitions:
        DETECTED -> SAVING: Start writing the new-format files
        SAVING -> SAVED: General config and env file written
        SAVED -> LEGACY_REMOVED: Legacy file deleted
        LEGACY_REMOVED -> COMPLETE: Migration finished
        Any non-terminal -> FAILED: Error occurred at any stage
    """

    DETECTED = auto()
    SAVING = auto()
    SAVED = auto()
    LEGACY_REMOVED = auto()
    COMPLETE = auto()
    FAILED = auto()


class MigrationStateError(Exception):
    """Raised when an invalid state transition is attempted."""

    def __init__(self, from_state: MigrationState, to_state: MigrationState) -> None:
        """Initialize the error.

        Args:
            from_state: The current state.
            to_state: The attempted target state.
        """
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Invalid state transition: {from_state.name} -> {to_state.name}"
        )


class MigrationStateMachine:
    """State machine for a single legacy config migration.

    The legacy file may only be removed from the SAVED state, so a failed
    save can never be followed by a delete.
    """

    VALID_TRANSITIONS: ClassVar[dict[MigrationState, set[MigrationState]]] = {
        MigrationState.DETECTED: {MigrationState.SAVING, MigrationState.FAILED},
        MigrationState.SAVING: {MigrationState.SAVED, MigrationState.FAILED},
        MigrationState.SAVED: {MigrationState.LEGACY_REMOVED, MigrationState.FAILED},
        MigrationState.LEGACY_REMOVED: {
            MigrationState.COMPLETE,
            MigrationState.FAILED,
        },
        MigrationState.COMPLETE: set(),
        MigrationState.FAILED: set(),
    }

    def __init__(self) -> None:
        """Initialize the state machine in DETECTED state."""
        self._state = MigrationState.DETECTED

    @property
    def state(self) -> MigrationState:
        """Get the current state."""
        return self._state

    def can_transition(self, to_state: MigrationState) -> bool:
        """Check if a transition to the given state is valid.

        Args:
            to_state: The target state.

        Returns:
            True if the transition is valid, False otherwise.
        """
        return to_state in self.VALID_TRANSITIONS.get(self._state, set())

    def transition(self, to_state: MigrationState) -> None:
        """Transition to a new state.

        Args:
            to_state: The target state.

        Raises:
            MigrationStateError: If the transition is invalid.
        """
        if not self.can_transition(to_state):
            raise MigrationStateError(self._state, to_state)
        self._state = to_state

    def is_terminal(self) -> bool:
        """Check if the current state is terminal."""
        return self._state in (MigrationState.COMPLETE, MigrationState.FAILED)

    def is_complete(self) -> bool:
        """Check if the migration finished successfully."""
        return self._state == MigrationState.COMPLETE

    def is_failed(self) -> bool:
        """Check if the migration has failed."""
        return self._state == MigrationState.FAILED
