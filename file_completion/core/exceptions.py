# file_completion/core/exceptions.py


class CompletionError(Exception):
    """Base exception for failures raised while completing a processed file."""


class GenericFileOperationFailedError(CompletionError):
    """Raised when a file operation (delete, move) could not be carried out."""

    def __init__(self, message: str, file_path: str = ""):
        self.file_path = file_path
        super().__init__(message)


class IdempotentRepositoryError(CompletionError):
    """Raised when the idempotent repository cannot read or write its store."""


class InvalidTransitionError(CompletionError):
    """Raised when a completion state transition is not allowed."""

    def __init__(self, file_name: str, from_state: str, to_state: str):
        self.file_name = file_name
        self.from_state = from_state
        self.to_state = to_state
        super().__init__(
            f"Invalid completion transition for {file_name}: "
            f"Cannot move from '{from_state}' to '{to_state}'."
        )
