"""Command-line interface for the MIME Base64 encoder.

WHY: The common use is "encode this file for a mail body": one path in,
wrapped Base64 on stdout, ready to be piped or redirected.

HOW: Uses argparse to accept exactly one input file path plus optional
--verbose/--version flags. Opens the file in binary mode, runs the
stream driver with stdout's binary buffer as the sink, and closes the
file explicitly so a failing close can be reported on its own. Status
messages and errors go to stderr.

RULES:
- Positional argument: exactly one input file path
- Encoded bytes go to stdout (binary buffer), nothing else does
- Exit codes: 0 success, 1 usage/config error, 2 open failure,
  3 close failure, 4 read failure, 5 output write failure
- A closed pipe on stdout (`| head`) ends the run quietly with status 5
- Output already written before a close failure is not rolled back
- Python 3.9 compatible — no match/case, no X | Y unions at runtime
"""

from __future__ import annotations

import argparse
import io
import logging
import os
import sys
from typing import List, NoReturn, Optional

from mime_base64 import __version__
from mime_base64.config import (
    EXIT_CLOSE_FAILED,
    EXIT_OPEN_FAILED,
    EXIT_READ_FAILED,
    EXIT_USAGE,
    EXIT_WRITE_FAILED,
    load_blocks_per_line,
    load_log_level,
)
from mime_base64.core.stream import encode_stream


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str, code: int) -> NoReturn:
    print("Error: {}".format(msg), file=sys.stderr, flush=True)
    sys.exit(code)


def _reason(exc: OSError) -> str:
    """Human-readable reason for an OS error, like perror() prints."""
    return exc.strerror or str(exc)


class _OutputError(Exception):
    """A write to stdout failed. Carries the original OSError as ``cause``."""

    def __init__(self, cause: OSError):
        super().__init__(str(cause))
        self.cause = cause


class _StdoutSink:
    """Binary sink that tags stdout write errors so they are not mistaken
    for errors reading the input file.
    """

    def __init__(self, stream):
        self._stream = stream

    def write(self, data: bytes) -> int:
        try:
            return self._stream.write(data)
        except OSError as e:
            raise _OutputError(e) from e

    def flush(self) -> None:
        try:
            self._stream.flush()
        except OSError as e:
            raise _OutputError(e) from e


def _stdout_buffer():
    return sys.stdout.buffer


def _detach_stdout() -> None:
    """Point stdout's fd at devnull so the interpreter's exit flush cannot fail again."""
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, io.UnsupportedOperation):
        # In-memory stdout (embedding, test capture) has no fd to redirect
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)


def _output_failed(exc: OSError) -> NoReturn:
    _detach_stdout()
    if isinstance(exc, BrokenPipeError):
        # Reader went away (e.g. `| head`); stay quiet like other filters
        sys.exit(EXIT_WRITE_FAILED)
    _fail("Failed to write output: {}".format(_reason(exc)), EXIT_WRITE_FAILED)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with EXIT_USAGE instead of argparse's 2.

    Exit status 2 is reserved for "file cannot be opened".
    """

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, "Error: {}\n".format(message))


def _configure_logging(verbose: bool) -> None:
    try:
        level = logging.DEBUG if verbose else load_log_level()
    except ValueError as e:
        _fail(str(e), EXIT_USAGE)
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("mime_base64").setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable — tests can inspect the parser without encoding anything.

    RULES:
    - Positional: file (required, exactly one)
    - Optional: -v/--verbose, --version
    """
    parser = _ArgumentParser(
        prog="mime-base64",
        description="Encode a file as MIME Base64 (RFC 2045) with CRLF line "
                    "breaks every 76 characters, writing the result to stdout.",
    )

    parser.add_argument(
        "file",
        help="Path to the file to encode.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print a summary and debug logging to stderr.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def run(path: str, verbose: bool = False) -> None:
    """Encode ``path`` to stdout, exiting with the matching code on failure.

    WHY: Keeps the open → encode → close sequence and its distinct
    failure modes in one place, separate from argument parsing.

    HOW: The file is opened and closed explicitly (not via ``with``) so a
    close failure after a successful encode gets its own exit status.

    RULES:
    - Open failure → EXIT_OPEN_FAILED, nothing written to stdout
    - Read failure mid-stream → EXIT_READ_FAILED
    - Close failure → EXIT_CLOSE_FAILED, already written output stays
    - Stdout write failure → EXIT_WRITE_FAILED, silent on a broken pipe
    """
    try:
        blocks_per_line = load_blocks_per_line()
    except ValueError as e:
        _fail(str(e), EXIT_USAGE)

    try:
        source = open(path, "rb")
    except OSError as e:
        _fail("Failed to open file: {}".format(_reason(e)), EXIT_OPEN_FAILED)

    sink = _StdoutSink(_stdout_buffer())
    try:
        stats = encode_stream(source, sink, blocks_per_line=blocks_per_line)
        sink.flush()
    except _OutputError as e:
        source.close()
        _output_failed(e.cause)
    except OSError as e:
        source.close()
        _fail("Failed to read file: {}".format(_reason(e)), EXIT_READ_FAILED)
    except BaseException:
        source.close()
        raise

    try:
        source.close()
    except OSError as e:
        _fail("Failed to close file: {}".format(_reason(e)), EXIT_CLOSE_FAILED)

    if verbose:
        _status("Encoded {}: {} bytes in, {} bytes out, {} line(s)".format(
            path, stats.bytes_read, stats.chars_written, stats.lines,
        ))


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    run(args.file, verbose=args.verbose)


if __name__ == "__main__":
    main()
