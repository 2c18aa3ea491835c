"""
CLI Output Formatting Module (SSOT)

All terminal output of the versionsync CLI goes through CLIOutput so the
report, notices and errors keep one fixed format:

    Cargo.toml: 1.2.3 -> 1.3.0      (stdout)
    Notice: ...                     (stderr)
    Error: ...                      (stderr)

Usage:
    from versionsync.cli_output import CLIOutput

    out = CLIOutput()
    out.report(report.lines())
    out.error("cannot bump minor beyond 9.")
"""

import sys
from typing import Iterable, Optional, TextIO

from versionsync.constants import Messages


class CLIOutput:
    """
    SSOT for consistent CLI output formatting.

    Streams are resolved at print time so that replacing sys.stdout and
    sys.stderr (as test capture does) is honored.
    """

    NOTICE_PREFIX = "Notice:"

    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None):
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def _print(self, msg: str, file: TextIO):
        """Print with safe encoding fallback."""
        try:
            print(msg, file=file)
        except UnicodeEncodeError:
            safe_msg = msg.encode("ascii", errors="replace").decode("ascii")
            print(safe_msg, file=file)

    def report(self, lines: Iterable[str]):
        """Print report lines to stdout."""
        for line in lines:
            self._print(line, self.stdout)

    def notice(self, message: str):
        """Print an advisory message to stderr."""
        self._print(f"{self.NOTICE_PREFIX} {message}", self.stderr)

    def error(self, message: str):
        """Print an error message to stderr."""
        self._print(f"{Messages.ERROR_PREFIX} {message}", self.stderr)

    def usage(self, prog: str = Messages.PROG):
        """Print the usage text for prog to stderr."""
        self.stderr.write(Messages.USAGE.format(prog=prog))
        self.stderr.flush()
