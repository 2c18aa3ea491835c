# versionsync/manifest.py - Versioned manifests: scoped version-line reading and rewriting
"""
A manifest is a text file holding one version line.

Reading and writing share one VersionScanner so that the line rewritten is
always the line that was read. The scanner has two states:

    BEFORE_SCOPE --(scope marker line)--> IN_SCOPE

Only lines seen while IN_SCOPE can match. A manifest without a scope marker
starts IN_SCOPE. The first matching line wins; later lines are never
inspected or modified. A byte order mark at the start of the file is
kept verbatim and ignored for matching.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from versionsync.atomic import StagedFile, stage_text
from versionsync.constants import FileNames, ManifestPatterns
from versionsync.errors import MissingVersionError, WriteFailure
from versionsync.modes import ScanState
from versionsync.paths import Paths
from versionsync.triplet import VersionTriplet, parse_triplet

_manifest_logger = logging.getLogger("versionsync.manifest")

ENCODING = "utf-8"

# A leading byte order mark is kept in the file but ignored for matching
BOM = "\ufeff"


def _strip_line_ending(line: str) -> str:
    return line.rstrip("\r\n")


# =============================================================================
# Matching rules and the two-state scanner
# =============================================================================


@dataclass(frozen=True)
class VersionRule:
    """
    How to find the version line in one manifest.

    pattern must define a named group "value" holding the raw version.
    scope_marker, when set, is the exact line that must precede the version line.
    """

    pattern: str
    scope_marker: Optional[str] = None

    def scanner(self) -> "VersionScanner":
        return VersionScanner(self)


@dataclass(frozen=True)
class VersionMatch:
    """Location of the version value inside a manifest."""

    line_index: int
    line: str
    start: int
    end: int
    well_formed: bool = True

    @property
    def value(self) -> str:
        return self.line[self.start:self.end]

    def replaced(self, new_value: str) -> str:
        """Return the line with only the version value swapped."""
        return self.line[:self.start] + new_value + self.line[self.end:]


class VersionScanner:
    """Feeds lines one at a time and reports the first in-scope version line."""

    def __init__(self, rule: VersionRule):
        self.rule = rule
        self._regex = re.compile(rule.pattern)
        self.state = ScanState.BEFORE_SCOPE if rule.scope_marker is not None else ScanState.IN_SCOPE
        self.match: Optional[VersionMatch] = None
        self._index = 0

    @property
    def done(self) -> bool:
        return self.match is not None

    def feed(self, line: str) -> Optional[VersionMatch]:
        """
        Consume one line (with its line ending).

        Returns:
            The VersionMatch if this line is the version line, else None.
            Once a match was returned, every further line returns None.
        """
        index = self._index
        self._index += 1

        if self.done:
            return None

        offset = len(BOM) if index == 0 and line.startswith(BOM) else 0
        text = line[offset:]

        if self.state is ScanState.BEFORE_SCOPE:
            if _strip_line_ending(text) == self.rule.scope_marker:
                self.state = ScanState.IN_SCOPE
            return None

        found = self._regex.match(text)
        if found is None:
            return None

        group = "value" if found.group("value") is not None else "raw"
        self.match = VersionMatch(
            line_index=index,
            line=line,
            start=offset + found.start(group),
            end=offset + found.end(group),
            well_formed=group == "value",
        )
        return self.match


def find_version_line(lines: Iterable[str], rule: VersionRule) -> Optional[VersionMatch]:
    """Return the first in-scope version line, or None."""
    scanner = rule.scanner()
    for line in lines:
        if scanner.feed(line) is not None:
            return scanner.match
    return None


# =============================================================================
# VersionedManifest
# =============================================================================


class VersionedManifest:
    """
    One of the two manifests carrying the shared version.

    Usage:
        cargo = package_descriptor(repo_root)
        current = cargo.read_version()
        staged = cargo.stage("1.3.0")
    """

    def __init__(self, name: str, path: Path, rule: VersionRule):
        self.name = name
        self.path = Path(path)
        self.rule = rule

    def __repr__(self) -> str:
        return f"VersionedManifest(name={self.name!r}, path={str(self.path)!r})"

    def read_lines(self) -> List[str]:
        """
        Read the manifest as lines, keeping original line endings.

        Raises:
            MissingVersionError: If the file cannot be read or decoded
        """
        try:
            with open(self.path, "r", encoding=ENCODING, newline="") as f:
                return f.readlines()
        except FileNotFoundError:
            raise MissingVersionError(self.path, "file not found")
        except (OSError, UnicodeDecodeError) as e:
            raise MissingVersionError(self.path, str(e))

    def read_raw_version(self) -> str:
        """
        Return the raw, unvalidated version value.

        Raises:
            MissingVersionError: If no in-scope version line exists
        """
        found = find_version_line(self.read_lines(), self.rule)
        if found is None:
            if self.rule.scope_marker is not None:
                raise MissingVersionError(self.path, f"no version line after {self.rule.scope_marker}")
            raise MissingVersionError(self.path)
        _manifest_logger.debug(f"{self.name}: line {found.line_index + 1} holds {found.value!r}")
        return found.value

    def read_version(self) -> VersionTriplet:
        """
        Read and validate the version.

        Raises:
            MissingVersionError: If no in-scope version line exists
            FormatError: If the value is not a single-digit triplet
        """
        return parse_triplet(self.read_raw_version(), self.name, self.path)

    def render(self, new_version: str) -> str:
        """
        Return the full file content with the version line rewritten.

        The file is read again so that a version line removed since the read
        pass is detected here rather than silently skipped.

        Raises:
            WriteFailure: If the version line is no longer present
        """
        try:
            lines = self.read_lines()
        except MissingVersionError as e:
            raise WriteFailure(self.path, str(e))

        scanner = self.rule.scanner()
        output = []
        for line in lines:
            found = scanner.feed(line)
            output.append(found.replaced(new_version) if found is not None else line)

        if not scanner.done:
            raise WriteFailure(self.path, "version line not found during write")
        if not scanner.match.well_formed:
            raise WriteFailure(self.path, f"version line is malformed: {_strip_line_ending(scanner.match.line)}")

        return "".join(output)

    def stage(self, new_version) -> StagedFile:
        """
        Write the updated manifest to a staging file next to the original.

        The original file is not touched; commit the returned StagedFile to
        replace it.

        Raises:
            WriteFailure: If the version line vanished or staging failed
        """
        content = self.render(str(new_version))
        try:
            return stage_text(self.path, content, encoding=ENCODING)
        except OSError as e:
            raise WriteFailure(self.path, str(e))


def package_descriptor(repo_root: Path) -> VersionedManifest:
    """Cargo.toml: version = "X.Y.Z" inside [workspace.package]."""
    return VersionedManifest(
        name=FileNames.CARGO_TOML,
        path=Paths.package_descriptor(repo_root),
        rule=VersionRule(
            pattern=ManifestPatterns.PACKAGE_VERSION_PATTERN,
            scope_marker=ManifestPatterns.PACKAGE_SCOPE_MARKER,
        ),
    )


def build_descriptor(repo_root: Path) -> VersionedManifest:
    """packaging/PKGBUILD: top-level pkgver=X.Y.Z."""
    return VersionedManifest(
        name=FileNames.PKGBUILD,
        path=Paths.build_descriptor(repo_root),
        rule=VersionRule(pattern=ManifestPatterns.BUILD_VERSION_PATTERN),
    )
