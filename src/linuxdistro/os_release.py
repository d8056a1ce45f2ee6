"""os-release metadata file lookup and parsing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from linuxdistro.config import ID_PREFIX, OS_RELEASE_PATHS, PRETTY_NAME_PREFIX
from linuxdistro.status import ResolutionRequest, ResolutionResult, StatusCode

if TYPE_CHECKING:
    from linuxdistro.environment import HostEnvironment

# Fields readable from the file, by request
_FIELD_PREFIXES = {
    ResolutionRequest.ID: ID_PREFIX,
    ResolutionRequest.PRETTY_NAME: PRETTY_NAME_PREFIX,
}


def find_os_release(
    environment: HostEnvironment,
    paths: Sequence[str] = OS_RELEASE_PATHS,
) -> tuple[bool, int]:
    """Find the first existing os-release file.

    Only existence is tested; contents are not read.

    Args:
        environment: Host to probe
        paths: Candidate paths in priority order

    Returns:
        Tuple of (found, index into paths), or (False, -1) if none exist.
    """
    for index, path in enumerate(paths):
        if environment.path_exists(path):
            return (True, index)
    return (False, -1)


def read_os_release_field(
    path: str,
    request: ResolutionRequest,
    environment: HostEnvironment,
) -> ResolutionResult:
    """Read the ID or PRETTY_NAME field from an os-release file.

    The first line carrying the field wins. A quoted ID is unwrapped by
    taking the text between the first two quote characters; no further
    shell-style unquoting is attempted.

    Args:
        path: os-release file to read
        request: ResolutionRequest.ID or ResolutionRequest.PRETTY_NAME
        environment: Host to read from

    Returns:
        ResolutionResult with the field value, or METADATA_FILE_UNREADABLE /
        METADATA_FIELD_MISSING.
    """
    prefix = _FIELD_PREFIXES[request]

    try:
        content = environment.read_text(path)
    except OSError:
        return ResolutionResult.invalid(StatusCode.METADATA_FILE_UNREADABLE)

    line = next((line for line in content.splitlines() if line.startswith(prefix)), None)
    if line is None:
        return ResolutionResult.invalid(StatusCode.METADATA_FIELD_MISSING)

    value = line[len(prefix):]
    if request is ResolutionRequest.PRETTY_NAME:
        value = value.removesuffix('"')
    elif '"' in value:
        # '"alpine"' -> ['', 'alpine', '']
        value = value.split('"')[1]

    if not value:
        return ResolutionResult.invalid(StatusCode.METADATA_FIELD_MISSING)
    return ResolutionResult(value, StatusCode.SUCCESS)
