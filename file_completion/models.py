from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from file_completion.operations.path_utils import calculate_relative_path


class CompletionState(str, Enum):
    """
    Disposition of a single completion of a processed file.

    Commit Workflow: Received -> CommitAttempted -> Committed
    Fallback: CommitAttempted -> RollbackAttempted (commit failed)
    Failure Workflow: Received -> RollbackAttempted
    """

    RECEIVED = "Received"  # Outcome received, nothing decided yet
    COMMIT_ATTEMPTED = "CommitAttempted"  # Idempotent registration + strategy commit tried
    COMMITTED = "Committed"  # Both commit steps succeeded
    ROLLBACK_ATTEMPTED = "RollbackAttempted"  # Rollback tried, whatever its result


class GenericFile(BaseModel):
    """
    Opaque handle to a file that has been processed.

    The completion layer never looks at the file's contents, only at its
    identity (resource_key) and its location (for the strategies).
    """

    absolute_file_path: str = Field(..., description="Absolute path to the file")
    relative_file_path: str = Field(
        ..., description="Path relative to the endpoint directory"
    )
    endpoint_path: str = Field(..., description="Endpoint directory the file was found in")
    file_length: int = Field(default=0, description="File size in bytes")
    last_modified: Optional[datetime] = Field(
        default=None, description="Last modification time"
    )

    @classmethod
    def from_path(cls, path: Path, endpoint_path: Path) -> "GenericFile":
        """Build a handle for a file found under the endpoint directory."""
        relative = calculate_relative_path(path, endpoint_path)
        file_length = 0
        last_modified = None
        if path.exists():
            stat_result = path.stat()
            file_length = stat_result.st_size
            last_modified = datetime.fromtimestamp(stat_result.st_mtime)
        return cls(
            absolute_file_path=str(path),
            relative_file_path=relative.as_posix(),
            endpoint_path=str(endpoint_path),
            file_length=file_length,
            last_modified=last_modified,
        )

    @property
    def file_name(self) -> str:
        """Relative file name; stable across moves done by commit."""
        return self.relative_file_path

    @property
    def file_name_only(self) -> str:
        return Path(self.relative_file_path).name

    @property
    def resource_key(self) -> str:
        """Key used for idempotent consumption tracking."""
        return self.file_name

    def __str__(self) -> str:
        return f"GenericFile[{self.absolute_file_path}]"


@dataclass(frozen=True)
class ProcessingOutcome:
    """
    Result of having processed one file.

    Created by the processing pipeline and handed to the CompletionHandler
    exactly once. A failed outcome may carry no error when the failure was
    already handled upstream.
    """

    resource: GenericFile
    failed: bool = False
    error: Optional[BaseException] = None
    properties: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.error is not None and not self.failed:
            raise ValueError(
                f"Outcome for {self.resource.file_name} carries an error but is not failed"
            )

    @classmethod
    def success(cls, resource: GenericFile, **properties: Any) -> "ProcessingOutcome":
        return cls(resource=resource, properties=dict(properties))

    @classmethod
    def failure(
        cls,
        resource: GenericFile,
        error: Optional[BaseException] = None,
        **properties: Any,
    ) -> "ProcessingOutcome":
        return cls(resource=resource, failed=True, error=error, properties=dict(properties))

    def __str__(self) -> str:
        status = "FAILED" if self.failed else "SUCCESS"
        error_str = f", error={self.error.__class__.__name__}" if self.error else ""
        return f"ProcessingOutcome({status}, file={self.resource.file_name}{error_str})"
