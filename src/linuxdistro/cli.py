"""Command-line interface for linuxdistro."""

import argparse
import logging
import sys
from dataclasses import dataclass

from linuxdistro.config import LOG_FORMAT, LONG_VERSION
from linuxdistro.engine import resolve
from linuxdistro.status import ResolutionRequest, StatusCode

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_UNIDENTIFIED = 44
EXIT_INTERNAL_ERROR = 254

STATUS_MESSAGES = {
    StatusCode.NOT_LINUX: "This program is intended to run on Linux",
    StatusCode.KERNEL_QUERY_FAILED: "Querying the kernel release failed",
    StatusCode.METADATA_FILE_UNREADABLE: "Reading [*/os-release] file failed",
    StatusCode.METADATA_FIELD_MISSING: "Requested field is missing from the os-release file",
    StatusCode.BAD_ARGUMENT: "Unrecognized option",
    StatusCode.DISTRO_UNIDENTIFIED: "Unidentifiable distro, not even family identified",
}


@dataclass
class ParsedArgs:
    """Parsed command-line arguments."""

    request: ResolutionRequest
    verbose: bool


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for the linuxdistro CLI."""
    parser = argparse.ArgumentParser(
        prog="linuxdistro",
        description="Print the ID of the running Linux distribution, or its family.",
    )
    parser.add_argument(
        "-pn", "--pretty-name", action="store_true",
        help="print the full 'Pretty Name' of the distro, if applicable",
    )
    parser.add_argument("-k", "--kernel", action="store_true", help="print the kernel release")
    parser.add_argument("-v", "--version", action="store_true", help="print the engine version")
    parser.add_argument("-vb", "--verbose", action="store_true", help="log probes to stderr")
    return parser


def parse_args(argv: list[str] | None = None) -> ParsedArgs:
    """Parse command line arguments.

    Exits with status 1 when incompatible flags are combined.
    """
    args = create_parser().parse_args(argv)

    if args.version:
        request = ResolutionRequest.ENGINE_VERSION
    elif args.pretty_name and args.kernel:
        print("-pn & -k flags are incompatible", file=sys.stderr)
        sys.exit(EXIT_FAILURE)
    elif args.pretty_name:
        request = ResolutionRequest.PRETTY_NAME
    elif args.kernel:
        request = ResolutionRequest.KERNEL
    else:
        request = ResolutionRequest.ID

    return ParsedArgs(request=request, verbose=args.verbose)


def setup_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG when verbose and WARNING otherwise."""
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )


def exit_code_for(status: StatusCode) -> int:
    """Map a resolution status to a process exit code.

    Statuses without a known mapping get EXIT_INTERNAL_ERROR.
    """
    if status is StatusCode.SUCCESS:
        return EXIT_OK
    if status is StatusCode.DISTRO_UNIDENTIFIED:
        return EXIT_UNIDENTIFIED
    if status in STATUS_MESSAGES:
        return EXIT_FAILURE
    return EXIT_INTERNAL_ERROR


def report(value: str, status: StatusCode, request: ResolutionRequest) -> int:
    """Print a resolution result and return the exit code for it."""
    code = exit_code_for(status)

    if status is StatusCode.SUCCESS:
        if request is ResolutionRequest.ENGINE_VERSION:
            value = f"linuxdistro {LONG_VERSION}"
        print(value)
    elif status is StatusCode.DISTRO_UNIDENTIFIED:
        print(value)
        print(STATUS_MESSAGES[status], file=sys.stderr)
    else:
        print(STATUS_MESSAGES.get(status, "ERROR MESSAGE NOT COMPLETE"), file=sys.stderr)

    return code


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    value, status = resolve(args.request.value)
    log.debug("Resolved %s: %r (%s)", args.request.value, value, status.value)
    sys.exit(report(value, status, args.request))


if __name__ == "__main__":
    main()
