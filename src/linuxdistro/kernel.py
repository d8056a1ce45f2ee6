"""Kernel release query."""

from __future__ import annotations

from typing import TYPE_CHECKING

from linuxdistro.config import KERNEL_RELEASE_COMMAND
from linuxdistro.environment import CommandError
from linuxdistro.status import ResolutionResult, StatusCode

if TYPE_CHECKING:
    from linuxdistro.environment import HostEnvironment


def query_kernel_release(environment: HostEnvironment) -> ResolutionResult:
    """Return the output of `uname -r` without its trailing newline."""
    try:
        output = environment.run(KERNEL_RELEASE_COMMAND)
    except CommandError:
        return ResolutionResult.invalid(StatusCode.KERNEL_QUERY_FAILED)

    release = output.removesuffix("\n")
    if not release:
        return ResolutionResult.invalid(StatusCode.KERNEL_QUERY_FAILED)
    return ResolutionResult(release, StatusCode.SUCCESS)
