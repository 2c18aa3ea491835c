# versionsync/atomic.py - Staged atomic file replacement
"""
Atomic file replacement split into two phases.

stage_text() writes the new content to a temp file in the target's directory
(same filesystem, so the later rename is atomic) and fsyncs it.
commit_staged() renames the staging file over the target.
discard_staged() removes a staging file that will not be committed.

Callers stage every file first and commit only once all staging succeeded,
so a failure while staging never leaves a target modified.
"""

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass
from pathlib import Path

from versionsync.constants import FileNames

_atomic_logger = logging.getLogger("versionsync.atomic")


@dataclass(frozen=True)
class StagedFile:
    """A staging file waiting to replace its target."""

    target: Path
    staging: Path


def stage_text(target: Path, content: str, encoding: str = "utf-8") -> StagedFile:
    """
    Write content to a staging file next to target.

    Line endings in content are written verbatim (no newline translation).
    The staging file copies the target's permission bits when the target exists.

    Args:
        target: File that the staging file will eventually replace
        content: Full new text of the file
        encoding: Text encoding (default: utf-8)

    Returns:
        StagedFile describing the pending replacement

    Raises:
        OSError: If the staging file cannot be written. Nothing is left behind.
    """
    target = Path(target)

    temp_fd = None
    temp_path = None

    try:
        temp_fd, temp_path = tempfile.mkstemp(
            suffix=FileNames.STAGING_SUFFIX,
            prefix=f"{FileNames.STAGING_PREFIX}{target.name}_",
            dir=str(target.parent),
        )

        with os.fdopen(temp_fd, "w", encoding=encoding, newline="") as f:
            temp_fd = None  # Prevent double-close
            f.write(content)
            f.flush()
            os.fsync(f.fileno())

        if target.exists():
            shutil.copymode(str(target), temp_path)

        staged = StagedFile(target=target, staging=Path(temp_path))
        temp_path = None  # Ownership passes to the caller
        _atomic_logger.debug(f"Staged {staged.target} at {staged.staging}")
        return staged

    finally:
        if temp_fd is not None:
            try:
                os.close(temp_fd)
            except OSError:
                pass

        if temp_path is not None:
            try:
                os.unlink(temp_path)
            except OSError as e:
                _atomic_logger.warning(f"Could not remove staging file {temp_path}: {e}")


def commit_staged(staged: StagedFile) -> None:
    """
    Atomically replace the target with its staging file.

    Raises:
        OSError: If the rename fails. The target keeps its previous content.
    """
    staged.staging.replace(staged.target)
    _atomic_logger.info(f"Replaced {staged.target} atomically")


def discard_staged(staged: StagedFile) -> None:
    """Remove a staging file. Never raises."""
    try:
        staged.staging.unlink()
        _atomic_logger.debug(f"Discarded staging file {staged.staging}")
    except FileNotFoundError:
        pass
    except OSError as e:
        _atomic_logger.warning(f"Could not remove staging file {staged.staging}: {e}")
