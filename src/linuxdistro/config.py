"""Fixed settings for the distribution resolution engine."""

ENGINE_VERSION = "0.0.1"
DEV_VERSION = "-release"
VERSION_NAME = "July 11th 2024"
LONG_VERSION = f"v{ENGINE_VERSION}{DEV_VERSION} ({VERSION_NAME})"

# Sentinels
INVALID = "INVALID_OPERATION"
DEFAULT = "UNKNOWN_DISTRO"

# Candidate os-release locations, searched in order (first existing file wins)
OS_RELEASE_PATHS = (
    "/etc/os-release",
    "/usr/lib/os-release",
    "/lib/os-release",
)

# Line prefixes selecting each os-release field
ID_PREFIX = "ID="
PRETTY_NAME_PREFIX = 'PRETTY_NAME="'

KERNEL_RELEASE_COMMAND = ("uname", "-r")
LSB_RELEASE_COMMAND = ("lsb_release", "-a")

# (probe command, family) pairs in priority order
PACKAGE_MANAGER_PROBES = (
    (("dpkg", "--help"), "dpkg"),
    (("rpm", "--help"), "rpm"),
)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
