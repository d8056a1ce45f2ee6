"""Tests for package-manager family detection."""

from linuxdistro.config import DEFAULT, LSB_RELEASE_COMMAND
from linuxdistro.package_manager import detect_family, detect_package_manager

DPKG = ("dpkg", "--help")
RPM = ("rpm", "--help")


class TestDetectPackageManager:
    """Test detect_package_manager() function."""

    def test_none(self, make_env):
        """No probe succeeds."""
        assert detect_package_manager(make_env()) is None

    def test_dpkg_preferred(self, make_env):
        """dpkg is probed before rpm and wins."""
        env = make_env(commands={DPKG: "", RPM: ""})
        assert detect_package_manager(env) == "dpkg"
        assert ("run", RPM) not in env.calls

    def test_rpm(self, make_env):
        """rpm detected when dpkg is absent."""
        env = make_env(commands={RPM: ""})
        assert detect_package_manager(env) == "rpm"


class TestDetectFamily:
    """Test detect_family() function."""

    def test_ubuntu(self, make_env):
        """lsb_release output containing 'ubuntu' means Ubuntu."""
        env = make_env(commands={DPKG: "", LSB_RELEASE_COMMAND: "Codename: noble\nubuntu\n"})
        assert detect_family(env) == "Ubuntu"

    def test_debian(self, make_env):
        """Other lsb_release output means Debian."""
        env = make_env(commands={DPKG: "", LSB_RELEASE_COMMAND: "Distributor ID: Debian\n"})
        assert detect_family(env) == "Debian"

    def test_match_is_case_sensitive(self, make_env):
        """Capitalized 'Ubuntu' alone does not match."""
        env = make_env(commands={DPKG: "", LSB_RELEASE_COMMAND: "Distributor ID: Ubuntu\n"})
        assert detect_family(env) == "Debian"

    def test_debian_without_lsb_release(self, make_env):
        """dpkg without lsb_release still reports Debian."""
        env = make_env(commands={DPKG: ""})
        assert detect_family(env) == "Debian"

    def test_redhat(self, make_env):
        """rpm means RedHat, without further probing."""
        env = make_env(commands={RPM: ""})
        assert detect_family(env) == "RedHat"
        assert ("run", LSB_RELEASE_COMMAND) not in env.calls

    def test_unknown(self, make_env):
        """No package manager gives the DEFAULT sentinel."""
        assert detect_family(make_env()) == DEFAULT
