"""Distribution family detection from installed package managers.

Used only when no os-release file exists. This is a coarse heuristic: it
tells the Debian family (with an Ubuntu check) from the RPM family and
nothing more.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from linuxdistro.config import DEFAULT, LSB_RELEASE_COMMAND, PACKAGE_MANAGER_PROBES
from linuxdistro.environment import CommandError

if TYPE_CHECKING:
    from linuxdistro.environment import HostEnvironment


def detect_package_manager(environment: HostEnvironment) -> str | None:
    """Return the first package manager whose probe runs cleanly.

    Returns:
        "dpkg", "rpm", or None if no probe succeeds.
    """
    for argv, name in PACKAGE_MANAGER_PROBES:
        try:
            environment.run(argv)
        except CommandError:
            continue
        return name
    return None


def _debian_or_ubuntu(environment: HostEnvironment) -> str:
    try:
        output = environment.run(LSB_RELEASE_COMMAND)
    except CommandError:
        return "Debian"
    # Exact-case substring match
    return "Ubuntu" if "ubuntu" in output else "Debian"


def detect_family(environment: HostEnvironment) -> str:
    """Guess the distribution family.

    Returns:
        "Ubuntu", "Debian", "RedHat", or the DEFAULT sentinel.
    """
    package_manager = detect_package_manager(environment)
    if package_manager == "dpkg":
        return _debian_or_ubuntu(environment)
    elif package_manager == "rpm":
        return "RedHat"
    return DEFAULT
