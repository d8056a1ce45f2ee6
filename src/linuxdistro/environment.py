"""Access to the host operating system.

The resolution engine reaches the outside world only through a
HostEnvironment: platform check, path existence, file reads and command
execution. SystemEnvironment probes the live machine; tests supply fakes.
"""

from __future__ import annotations

import logging
import platform
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Sequence

log = logging.getLogger(__name__)


class CommandError(Exception):
    """Raised when a command cannot be started or exits non-zero."""

    def __init__(self, argv: Sequence[str], reason: str, returncode: int | None = None):
        self.argv = tuple(argv)
        self.returncode = returncode
        super().__init__(f"{' '.join(self.argv)}: {reason}")


class HostEnvironment(ABC):
    """Abstract view of the host the engine is probing."""

    @abstractmethod
    def is_linux(self) -> bool:
        """Return True if the running kernel is Linux."""
        ...

    @abstractmethod
    def path_exists(self, path: str) -> bool:
        """Check whether a path exists without reading it."""
        ...

    @abstractmethod
    def read_text(self, path: str) -> str:
        """Read a whole file.

        Raises:
            OSError: If the file cannot be opened or read
        """
        ...

    @abstractmethod
    def run(self, argv: Sequence[str]) -> str:
        """Run a command and return its stdout.

        Raises:
            CommandError: If the command is missing or exits non-zero
        """
        ...


class SystemEnvironment(HostEnvironment):
    """HostEnvironment backed by the real machine."""

    def is_linux(self) -> bool:
        return platform.system() == "Linux"

    def path_exists(self, path: str) -> bool:
        try:
            return Path(path).exists()
        except OSError:
            # Unsearchable parent directories count as missing
            return False

    def read_text(self, path: str) -> str:
        log.debug("Reading %s", path)
        return Path(path).read_text(encoding="utf-8", errors="replace")

    def run(self, argv: Sequence[str]) -> str:
        log.debug("Running %s", " ".join(argv))
        try:
            result = subprocess.run(list(argv), capture_output=True, text=True, errors="replace")
        except OSError as e:
            log.debug("Could not start %s: %s", argv[0], e)
            raise CommandError(argv, str(e))

        if result.returncode != 0:
            log.debug("%s exited with %d", argv[0], result.returncode)
            raise CommandError(argv, f"exited with {result.returncode}", result.returncode)
        return result.stdout
