"""Linux distribution identification.

Resolves the running distribution from os-release metadata, falling back
to package-manager probing when no metadata file exists.

Usage:
    from linuxdistro import resolve, StatusCode

    value, status = resolve("id")
    if status is StatusCode.SUCCESS:
        print(f"Detected: {value}")
"""

from linuxdistro.config import DEFAULT, ENGINE_VERSION, INVALID
from linuxdistro.engine import resolve
from linuxdistro.environment import CommandError, HostEnvironment, SystemEnvironment
from linuxdistro.status import ResolutionRequest, ResolutionResult, StatusCode

__version__ = ENGINE_VERSION

__all__ = [
    "CommandError",
    "DEFAULT",
    "ENGINE_VERSION",
    "HostEnvironment",
    "INVALID",
    "ResolutionRequest",
    "ResolutionResult",
    "StatusCode",
    "SystemEnvironment",
    "resolve",
    "__version__",
]
