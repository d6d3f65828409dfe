from pathlib import Path
from typing import Awaitable, Callable

MAX_CONFLICT_ATTEMPTS = 9999

# Async existence check supplied by the transport (FileOperations.exists)
ExistsCheck = Callable[[str], Awaitable[bool]]


def calculate_relative_path(file_path: Path, endpoint_path: Path) -> Path:
    try:
        return file_path.relative_to(endpoint_path)
    except ValueError:
        # Outside the endpoint directory - only the name is stable
        return Path(file_path.name)


def resolve_target_directory(directory: str, endpoint_path: Path) -> Path:
    """Relative directories are taken relative to the endpoint directory."""
    target = Path(directory)
    if target.is_absolute():
        return target
    return endpoint_path / target


def build_destination_path(relative_file_path: str, target_directory: Path) -> Path:
    return target_directory / Path(relative_file_path)


def conflict_candidate(dest_path: Path, counter: int) -> Path:
    """Name for the counter'th attempt: name.ext -> name_<counter>.ext."""
    # Split on the first dot so .tar.gz stays together
    name = dest_path.name
    if "." in name:
        base_name, extensions = name.split(".", 1)
        extensions = "." + extensions
    else:
        base_name, extensions = name, ""
    return dest_path.parent / f"{base_name}_{counter}{extensions}"


async def generate_conflict_free_path(dest_path: Path, exists: ExistsCheck) -> Path:
    """
    Return dest_path, or the first numbered variant the transport reports as free.

    Args:
        dest_path: Preferred target path.
        exists: Transport existence check, awaited for every candidate.

    Raises:
        RuntimeError: If no free name is found within MAX_CONFLICT_ATTEMPTS.
    """
    if not await exists(str(dest_path)):
        return dest_path

    for counter in range(1, MAX_CONFLICT_ATTEMPTS + 1):
        candidate = conflict_candidate(dest_path, counter)
        if not await exists(str(candidate)):
            return candidate

    raise RuntimeError(
        f"Could not resolve name conflict after {MAX_CONFLICT_ATTEMPTS} attempts: {dest_path}"
    )
