# versionsync/config.py - Settings loaded from the environment
"""
SINGLE SOURCE OF TRUTH for runtime settings.

Settings come from environment variables (see EnvVars). There is no config
file: the manifest locations are fixed by Paths.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from versionsync.constants import Defaults, EnvVars
from versionsync.paths import Paths

_config_logger = logging.getLogger("versionsync.config")


def parse_log_level(value: Optional[str]) -> int:
    """
    Convert a level name such as "info" to a logging level.

    Unknown or empty names fall back to Defaults.LOG_LEVEL.
    """
    default = logging.getLevelName(Defaults.LOG_LEVEL)
    if not value:
        return default
    level = logging.getLevelName(value.strip().upper())
    if isinstance(level, int):
        return level
    return default


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    repo_root: Path
    log_level: int = logging.WARNING
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, repo_root: Optional[Path] = None) -> "Settings":
        """
        Build settings from environment variables.

        Repository root precedence:
        1. VERSIONSYNC_REPO_ROOT
        2. repo_root argument (the wrapper script passes its checkout)
        3. nearest ancestor of cwd holding both manifests
        4. cwd
        """
        environ = os.environ if environ is None else environ

        env_root = environ.get(EnvVars.REPO_ROOT)
        if env_root:
            root = Path(env_root).expanduser()
        elif repo_root is not None:
            root = Path(repo_root)
        else:
            root = Paths.find_repo_root() or Path.cwd()

        log_file = environ.get(EnvVars.LOG_FILE)

        settings = cls(
            repo_root=root,
            log_level=parse_log_level(environ.get(EnvVars.LOG_LEVEL)),
            log_file=Path(log_file).expanduser() if log_file else None,
        )
        _config_logger.debug(f"Settings resolved: {settings}")
        return settings
