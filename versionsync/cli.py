# versionsync/cli.py - Command line entry point
"""
versionsync <major|minor|subminor|sync>

Exit codes:
    0 - Both manifests updated
    1 - Usage error, missing or malformed version, overflow, or write failure
"""

import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from versionsync.cli_output import CLIOutput
from versionsync.config import Settings
from versionsync.constants import Messages
from versionsync.errors import UsageError, VersionSyncError
from versionsync.limits import Limits
from versionsync.modes import Action
from versionsync.sync import sync_versions

_cli_logger = logging.getLogger("versionsync.cli")

EXIT_OK = 0
EXIT_FAILURE = 1


# =============================================================================
# Logging
# =============================================================================


def setup_logging(settings: Settings) -> logging.Logger:
    """
    Configure the "versionsync" logger from settings.

    Logs go to stderr and, when VERSIONSYNC_LOG_FILE is set, to a rotating
    log file. Calling this again replaces the handlers of the previous call.

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("versionsync")
    logger.setLevel(settings.log_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(stderr_handler)

    if settings.log_file is not None:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            str(settings.log_file),
            maxBytes=Limits.MAX_LOG_FILE_SIZE,
            backupCount=Limits.LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(file_handler)

    return logger


# =============================================================================
# Argument parsing
# =============================================================================


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message):
        raise UsageError(message)


def build_parser(prog: str = Messages.PROG) -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=prog, add_help=False)
    parser.add_argument("action", choices=Action.names())
    return parser


def parse_action(argv: List[str], prog: str = Messages.PROG) -> Action:
    """
    Parse exactly one action name.

    Raises:
        UsageError: For zero, several, or unknown arguments (including -h)
    """
    # argparse would accept "-- sync", so the count is checked first
    if len(argv) != 1:
        raise UsageError(f"expected exactly one action, got {len(argv)} arguments")
    args = build_parser(prog).parse_args(argv)
    return Action.from_string(args.action)


# =============================================================================
# Entry point
# =============================================================================


def main(argv: Optional[List[str]] = None, repo_root: Optional[Path] = None, prog: Optional[str] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])
        repo_root: Repository root used when VERSIONSYNC_REPO_ROOT is unset
        prog: Command name shown in the usage text (default: versionsync)

    Returns:
        Process exit code
    """
    argv = sys.argv[1:] if argv is None else list(argv)
    prog = prog or Messages.PROG
    out = CLIOutput()

    try:
        action = parse_action(argv, prog)
    except UsageError as e:
        _cli_logger.debug(f"Usage error: {e}")
        out.usage(prog)
        return EXIT_FAILURE

    settings = Settings.from_env(repo_root=repo_root)
    setup_logging(settings)
    _cli_logger.debug(f"Running {action.value} in {settings.repo_root}")

    try:
        report = sync_versions(action, settings.repo_root, notify=lambda notice: out.notice(notice.message))
    except VersionSyncError as e:
        _cli_logger.debug(f"{type(e).__name__}: {e}")
        out.error(str(e))
        return EXIT_FAILURE
    except Exception as e:
        _cli_logger.exception("Unexpected failure")
        out.error(f"unexpected failure: {e}")
        return EXIT_FAILURE

    out.report(report.lines())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
