"""Tests for the kernel release query."""

from linuxdistro.config import INVALID, KERNEL_RELEASE_COMMAND
from linuxdistro.kernel import query_kernel_release
from linuxdistro.status import StatusCode


class TestQueryKernelRelease:
    """Test query_kernel_release() function."""

    def test_strips_trailing_newline(self, make_env):
        """Trailing newline is removed."""
        env = make_env(commands={KERNEL_RELEASE_COMMAND: "6.8.0-generic\n"})
        assert tuple(query_kernel_release(env)) == ("6.8.0-generic", StatusCode.SUCCESS)

    def test_no_other_parsing(self, make_env):
        """Output is otherwise passed through."""
        env = make_env(commands={KERNEL_RELEASE_COMMAND: "6.1.0-18-amd64 \n"})
        assert query_kernel_release(env).value == "6.1.0-18-amd64 "

    def test_command_failure(self, make_env):
        """Missing or failing uname reports KERNEL_QUERY_FAILED."""
        assert tuple(query_kernel_release(make_env())) == (INVALID, StatusCode.KERNEL_QUERY_FAILED)

    def test_empty_output(self, make_env):
        """Empty output is a failure, not an empty success."""
        env = make_env(commands={KERNEL_RELEASE_COMMAND: "\n"})
        assert query_kernel_release(env).status is StatusCode.KERNEL_QUERY_FAILED
