# versionsync/paths.py - SINGLE SOURCE OF TRUTH for all filesystem paths
"""
All manifest paths MUST be built here as Path objects.
No other module may construct manifest paths.

RULES:
- All paths are Path objects internally
- Convert to str() ONLY at I/O boundaries (print, logging)
- Use Path arithmetic (/) for joins, never string concatenation
"""

from pathlib import Path
from typing import Optional

from versionsync.constants import FileNames


class Paths:
    """
    Centralized path definitions. All paths are Path objects.

    Usage:
        from versionsync.paths import Paths
        cargo = Paths.package_descriptor(repo_root)
    """

    # Subdirectory holding the build descriptor
    PACKAGING_SUBDIR = "packaging"

    @classmethod
    def package_descriptor(cls, repo_root: Path) -> Path:
        """Return the Cargo.toml path."""
        return Path(repo_root) / FileNames.CARGO_TOML

    @classmethod
    def build_descriptor(cls, repo_root: Path) -> Path:
        """Return the packaging/PKGBUILD path."""
        return Path(repo_root) / cls.PACKAGING_SUBDIR / FileNames.PKGBUILD

    @classmethod
    def is_repo_root(cls, candidate: Path) -> bool:
        """Whether both manifests exist under candidate."""
        return cls.package_descriptor(candidate).is_file() and cls.build_descriptor(candidate).is_file()

    @classmethod
    def find_repo_root(cls, start: Optional[Path] = None) -> Optional[Path]:
        """
        Walk up from start (default: cwd) to the first directory holding both manifests.

        Returns:
            The repository root, or None if no ancestor qualifies
        """
        start = Path(start) if start is not None else Path.cwd()
        start = start.resolve()
        for candidate in (start, *start.parents):
            if cls.is_repo_root(candidate):
                return candidate
        return None
