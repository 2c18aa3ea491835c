# versionsync/sync.py - Orchestration: read, resolve, bump, stage, commit
"""
Keeps Cargo.toml and packaging/PKGBUILD on one version.

The new version is computed once, before any file is written. Both manifests
are then staged, and only when both staging files exist are they renamed over
the originals. Any error before the commit phase leaves both files untouched.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from versionsync.atomic import StagedFile, commit_staged, discard_staged
from versionsync.constants import Messages
from versionsync.errors import WriteFailure
from versionsync.manifest import VersionedManifest, build_descriptor, package_descriptor
from versionsync.modes import Action
from versionsync.triplet import VersionTriplet, bump_triplet, parse_triplet

_sync_logger = logging.getLogger("versionsync.sync")


# =============================================================================
# Authority resolution
# =============================================================================


@dataclass(frozen=True)
class DivergenceNotice:
    """Advisory: the manifests disagree and the build descriptor wins."""

    package_name: str
    package_version: VersionTriplet
    build_name: str
    build_version: VersionTriplet

    @property
    def message(self) -> str:
        return Messages.DIVERGENCE.format(
            package_name=self.package_name,
            package=self.package_version,
            build_name=self.build_name,
            build=self.build_version,
        )


def resolve_authority(
    package_version: VersionTriplet,
    build_version: VersionTriplet,
    package_name: str = "package descriptor",
    build_name: str = "build descriptor",
) -> Tuple[VersionTriplet, Optional[DivergenceNotice]]:
    """
    Pick the value to propagate.

    Never fails: divergence is reported, and the build descriptor's value is used.

    Returns:
        Tuple of (authoritative version, notice or None)
    """
    if build_version == package_version:
        return build_version, None

    notice = DivergenceNotice(package_name, package_version, build_name, build_version)
    _sync_logger.info(f"Divergence: {notice.message}")
    return build_version, notice


# =============================================================================
# Reporting
# =============================================================================


@dataclass(frozen=True)
class ManifestChange:
    """Old and new version of one manifest."""

    name: str
    path: Path
    old: str
    new: str

    def __str__(self) -> str:
        return Messages.REPORT_LINE.format(name=self.name, old=self.old, new=self.new)


@dataclass
class SyncReport:
    """Outcome of a successful run."""

    action: Action
    version: VersionTriplet
    changes: List[ManifestChange] = field(default_factory=list)
    notice: Optional[DivergenceNotice] = None

    def lines(self) -> List[str]:
        return [str(change) for change in self.changes]


# =============================================================================
# Orchestration
# =============================================================================


def manifests_for(repo_root: Path) -> Tuple[VersionedManifest, VersionedManifest]:
    """Return (package descriptor, build descriptor) for a repository."""
    return package_descriptor(repo_root), build_descriptor(repo_root)


def read_versions(repo_root: Path) -> Tuple[VersionTriplet, VersionTriplet]:
    """
    Read and validate both manifests.

    Both raw values are read before either is validated, so a missing version
    anywhere is reported ahead of a malformed one.

    Returns:
        Tuple of (package descriptor version, build descriptor version)

    Raises:
        MissingVersionError: If either manifest has no version line
        FormatError: If either value is not a single-digit triplet
    """
    package, build = manifests_for(repo_root)
    raw_package = package.read_raw_version()
    raw_build = build.read_raw_version()
    return (
        parse_triplet(raw_package, package.name, package.path),
        parse_triplet(raw_build, build.name, build.path),
    )


def _commit_all(staged: List[StagedFile]) -> None:
    pending = list(staged)
    try:
        while pending:
            commit_staged(pending[0])
            pending.pop(0)
    except OSError as e:
        failed = pending[0]
        for leftover in pending:
            discard_staged(leftover)
        raise WriteFailure(failed.target, str(e))


def sync_versions(
    action,
    repo_root: Path,
    notify: Optional[Callable[[DivergenceNotice], None]] = None,
) -> SyncReport:
    """
    Apply an action to both manifests of a repository.

    Args:
        action: Action or action name (major, minor, subminor, sync)
        repo_root: Directory holding Cargo.toml and packaging/PKGBUILD
        notify: Called with the DivergenceNotice as soon as divergence is found

    Returns:
        SyncReport listing the package descriptor first, then the build descriptor

    Raises:
        MissingVersionError, FormatError, VersionOverflowError: before any write
        WriteFailure: if staging or committing fails
    """
    action = Action(action)
    package, build = manifests_for(repo_root)

    package_version, build_version = read_versions(repo_root)
    authoritative, notice = resolve_authority(package_version, build_version, package.name, build.name)
    if notice is not None and notify is not None:
        notify(notice)

    new_version = bump_triplet(authoritative, action)
    _sync_logger.info(f"Action {action.value}: {authoritative} -> {new_version}")

    staged: List[StagedFile] = []
    try:
        for manifest in (package, build):
            staged.append(manifest.stage(new_version))
    except WriteFailure:
        for pending in staged:
            discard_staged(pending)
        raise

    _commit_all(staged)

    return SyncReport(
        action=action,
        version=new_version,
        changes=[
            ManifestChange(package.name, package.path, str(package_version), str(new_version)),
            ManifestChange(build.name, build.path, str(build_version), str(new_version)),
        ],
        notice=notice,
    )
