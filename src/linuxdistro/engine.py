"""Distribution resolution entry point."""

from __future__ import annotations

from linuxdistro.config import DEFAULT, ENGINE_VERSION, OS_RELEASE_PATHS
from linuxdistro.environment import HostEnvironment, SystemEnvironment
from linuxdistro.kernel import query_kernel_release
from linuxdistro.os_release import find_os_release, read_os_release_field
from linuxdistro.package_manager import detect_family
from linuxdistro.status import ResolutionRequest, ResolutionResult, StatusCode


def resolve(option: str, environment: HostEnvironment | None = None) -> ResolutionResult:
    """Resolve distribution information for the running host.

    Every call probes the host afresh. Failures are reported through the
    status of the result, never raised.

    Args:
        option: "id", "pretty-name", "kernel" or "engine-version"
            (case-insensitive)
        environment: Host to probe (defaults to the live system)

    Returns:
        ResolutionResult holding (value, status).
    """
    if environment is None:
        environment = SystemEnvironment()

    if not environment.is_linux():
        return ResolutionResult.invalid(StatusCode.NOT_LINUX)

    request = ResolutionRequest.parse(option)
    if request is None:
        return ResolutionResult.invalid(StatusCode.BAD_ARGUMENT)

    if request is ResolutionRequest.KERNEL:
        return query_kernel_release(environment)
    if request is ResolutionRequest.ENGINE_VERSION:
        return ResolutionResult(ENGINE_VERSION, StatusCode.SUCCESS)
    return _resolve_distro(request, environment)


def _resolve_distro(request: ResolutionRequest, environment: HostEnvironment) -> ResolutionResult:
    """Resolve ID or PRETTY_NAME, falling back to package-manager probing."""
    found, index = find_os_release(environment)
    if found:
        result = read_os_release_field(OS_RELEASE_PATHS[index], request, environment)
    else:
        result = ResolutionResult(detect_family(environment), StatusCode.SUCCESS)

    # A placeholder value is never a successful identification
    if result.value == DEFAULT:
        result.status = StatusCode.DISTRO_UNIDENTIFIED
    return result
