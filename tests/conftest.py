"""Shared fixtures for linuxdistro tests."""

from typing import Sequence

import pytest

from linuxdistro.environment import CommandError, HostEnvironment


class FakeEnvironment(HostEnvironment):
    """In-memory host.

    files maps path -> content (or an OSError instance to raise on read).
    commands maps argv tuple -> stdout; commands not listed fail with
    CommandError, as if not installed.
    """

    def __init__(self, linux=True, files=None, commands=None):
        self.linux = linux
        self.files = files or {}
        self.commands = commands or {}
        self.calls: list[tuple] = []

    def is_linux(self) -> bool:
        return self.linux

    def path_exists(self, path: str) -> bool:
        self.calls.append(("exists", path))
        return path in self.files

    def read_text(self, path: str) -> str:
        self.calls.append(("read", path))
        content = self.files.get(path)
        if content is None:
            raise FileNotFoundError(path)
        if isinstance(content, OSError):
            raise content
        return content

    def run(self, argv: Sequence[str]) -> str:
        argv = tuple(argv)
        self.calls.append(("run", argv))
        if argv not in self.commands:
            raise CommandError(argv, "No such file or directory")
        return self.commands[argv]


class NoProbeEnvironment(HostEnvironment):
    """Non-Linux host that fails the test if anything beyond is_linux() is used."""

    def is_linux(self) -> bool:
        return False

    def path_exists(self, path: str) -> bool:
        pytest.fail(f"unexpected existence check of {path}")

    def read_text(self, path: str) -> str:
        pytest.fail(f"unexpected read of {path}")

    def run(self, argv: Sequence[str]) -> str:
        pytest.fail(f"unexpected command {argv}")


@pytest.fixture
def make_env():
    """Factory for FakeEnvironment instances."""
    return FakeEnvironment


@pytest.fixture
def no_probe_env():
    """Non-Linux environment that forbids probing."""
    return NoProbeEnvironment()


@pytest.fixture
def ubuntu_os_release():
    """os-release contents of an Ubuntu host."""
    return (
        'NAME="Ubuntu"\n'
        'VERSION_ID="24.04"\n'
        "ID=ubuntu\n"
        "ID_LIKE=debian\n"
        'PRETTY_NAME="Ubuntu 24.04 LTS"\n'
    )
