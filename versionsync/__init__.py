# versionsync SSOT modules
# Keeps the Cargo.toml workspace version and the PKGBUILD pkgver on one X.Y.Z value.
# =============================================================================
# Version
# =============================================================================
from .version import VERSION

# =============================================================================
# Triplets and actions
# =============================================================================
from .modes import Action, ScanState
from .triplet import VersionTriplet, bump_triplet, is_single_digit_triplet, parse_triplet

# =============================================================================
# Manifests and orchestration
# =============================================================================
from .errors import (
    FormatError,
    MissingVersionError,
    UsageError,
    VersionOverflowError,
    VersionSyncError,
    WriteFailure,
)
from .manifest import VersionedManifest, VersionRule, build_descriptor, package_descriptor
from .sync import DivergenceNotice, SyncReport, read_versions, resolve_authority, sync_versions

# =============================================================================
# Public API
# =============================================================================
__all__ = [
    # Version
    "VERSION",
    # Triplets and actions
    "Action",
    "ScanState",
    "VersionTriplet",
    "bump_triplet",
    "is_single_digit_triplet",
    "parse_triplet",
    # Errors
    "VersionSyncError",
    "UsageError",
    "MissingVersionError",
    "FormatError",
    "VersionOverflowError",
    "WriteFailure",
    # Manifests
    "VersionedManifest",
    "VersionRule",
    "package_descriptor",
    "build_descriptor",
    # Orchestration
    "DivergenceNotice",
    "SyncReport",
    "read_versions",
    "resolve_authority",
    "sync_versions",
]
