# versionsync/constants.py - SINGLE SOURCE OF TRUTH for all shared string literals
"""
All shared string constants MUST be defined here.
No other module may define these values.

Categories:
- FileNames: manifest file names
- ManifestPatterns: scope markers and version-line patterns
- EnvVars: environment variables read by Settings
- Messages: user-facing text
"""


class FileNames:
    """Manifest file names (relative parts only, see Paths for locations)."""

    # Package descriptor at the repository root
    CARGO_TOML = "Cargo.toml"

    # Build descriptor under packaging/
    PKGBUILD = "PKGBUILD"

    # Prefix for staging files written next to a manifest
    STAGING_PREFIX = ".versionsync_"
    STAGING_SUFFIX = ".tmp"


class ManifestPatterns:
    """
    Matching rules for the version line of each manifest.

    Each version pattern exposes the raw value in the named group "value".
    A pattern may offer a fallback group "raw" for a line that names the key
    but is otherwise broken (e.g. an unterminated quote); its text is then
    handed to the validator as-is.
    The value is validated separately so that a malformed version is a
    format error rather than a missing one.
    """

    # Cargo.toml: version must appear after this exact line
    PACKAGE_SCOPE_MARKER = "[workspace.package]"
    PACKAGE_VERSION_PATTERN = r'^version = (?:"(?P<value>[^"\r\n]*)"|(?P<raw>"[^\r\n]*))'

    # PKGBUILD: top-level assignment, no scope
    BUILD_VERSION_PATTERN = r"^pkgver=(?P<value>[^\r\n]*)"

    # Single-digit triplet X.Y.Z (ASCII digits only)
    TRIPLET_PATTERN = r"[0-9]\.[0-9]\.[0-9]"


class EnvVars:
    """Environment variables consulted by Settings.from_env()."""

    REPO_ROOT = "VERSIONSYNC_REPO_ROOT"
    LOG_LEVEL = "VERSIONSYNC_LOG_LEVEL"
    LOG_FILE = "VERSIONSYNC_LOG_FILE"


class Defaults:
    """Default values for optional settings."""

    LOG_LEVEL = "WARNING"


class Messages:
    """User-facing text."""

    PROG = "versionsync"

    USAGE = """\
Usage: {prog} <major|minor|subminor|sync>

Actions:
  major     Bump X in X.Y.Z, reset Y and Z to 0
  minor     Bump Y in X.Y.Z, reset Z to 0
  subminor  Bump Z in X.Y.Z
  sync      Keep version as-is from PKGBUILD and sync Cargo.toml to it

Notes:
  - Version format is strictly one digit per component: X.Y.Z
  - Each component must be in range 0..9
  - Bumps that would exceed 9 are rejected
"""

    ERROR_PREFIX = "Error:"
    REPORT_LINE = "{name}: {old} -> {new}"
    DIVERGENCE = "{package_name} version ({package}) differs from {build_name} ({build}); using {build_name} as source."
