"""Request and result types for distribution resolution."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from linuxdistro.config import INVALID


class ResolutionRequest(Enum):
    """What the caller wants resolved."""

    ID = "id"
    PRETTY_NAME = "pretty-name"
    KERNEL = "kernel"
    ENGINE_VERSION = "engine-version"

    @classmethod
    def parse(cls, option: str) -> ResolutionRequest | None:
        """Map an option string to a request.

        Matching is case-insensitive. The short forms "pn" and "k" are
        accepted for pretty-name and kernel.

        Args:
            option: Option string supplied by the caller

        Returns:
            The matching ResolutionRequest, or None if the option is unknown.
        """
        normalized = option.lower()
        normalized = _ALIASES.get(normalized, normalized)
        for request in cls:
            if request.value == normalized:
                return request
        return None


_ALIASES = {
    "pn": ResolutionRequest.PRETTY_NAME.value,
    "k": ResolutionRequest.KERNEL.value,
}


class StatusCode(Enum):
    """Outcome of a resolution. Each failure has exactly one cause."""

    SUCCESS = "success"
    NOT_LINUX = "not-linux"
    KERNEL_QUERY_FAILED = "kernel-query-failed"
    METADATA_FILE_UNREADABLE = "metadata-file-unreadable"
    METADATA_FIELD_MISSING = "metadata-field-missing"
    BAD_ARGUMENT = "bad-argument"
    DISTRO_UNIDENTIFIED = "distro-unidentified"


@dataclass
class ResolutionResult:
    """Resolved value together with its status.

    Unpacks as a (value, status) pair.
    """

    value: str
    status: StatusCode

    @classmethod
    def invalid(cls, status: StatusCode) -> ResolutionResult:
        return cls(INVALID, status)

    @property
    def ok(self) -> bool:
        return self.status is StatusCode.SUCCESS

    def __iter__(self):
        return iter((self.value, self.status))
