# versionsync/triplet.py - Version triplet value object, validation and bumping
"""
A version is exactly three single-digit components: X.Y.Z with each in 0..9.

No other shape is representable. Bumping a component that is already at
Limits.COMPONENT_MAX is rejected; there is never a carry into the
neighbouring component.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from versionsync.constants import ManifestPatterns
from versionsync.errors import FormatError, VersionOverflowError
from versionsync.limits import Limits
from versionsync.modes import Action

_triplet_logger = logging.getLogger("versionsync.triplet")

_TRIPLET_RE = re.compile(ManifestPatterns.TRIPLET_PATTERN)


@dataclass(frozen=True)
class VersionTriplet:
    """Immutable X.Y.Z version with single-digit components."""

    major: int
    minor: int
    subminor: int

    def __post_init__(self):
        for name in ("major", "minor", "subminor"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an int, got {value!r}")
            if not Limits.COMPONENT_MIN <= value <= Limits.COMPONENT_MAX:
                raise ValueError(
                    f"{name} must be in range {Limits.COMPONENT_MIN}..{Limits.COMPONENT_MAX}, got {value}"
                )

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.subminor}"

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.subminor)


def is_single_digit_triplet(value) -> bool:
    """Check if value is exactly D.D.D with ASCII digits and nothing else."""
    if not isinstance(value, str):
        return False
    return _TRIPLET_RE.fullmatch(value) is not None


def parse_triplet(value: str, manifest_name: str, path: Optional[Path] = None) -> VersionTriplet:
    """
    Validate a candidate version string and convert it to a VersionTriplet.

    Args:
        value: Raw version string as read from the manifest
        manifest_name: Display name of the manifest, used in the error
        path: Manifest path, used in the error

    Returns:
        The parsed VersionTriplet

    Raises:
        FormatError: If value is not a single-digit triplet
    """
    if not is_single_digit_triplet(value):
        raise FormatError(value, manifest_name, path)
    parts = value.split(".")
    if len(parts) != Limits.COMPONENT_COUNT:
        raise FormatError(value, manifest_name, path)
    return VersionTriplet(*(int(part) for part in parts))


def bump_triplet(current: VersionTriplet, action: Action) -> VersionTriplet:
    """
    Compute the next version for an action.

    major:    (X+1, 0, 0)
    minor:    (X, Y+1, 0)
    subminor: (X, Y, Z+1)
    sync:     unchanged

    Raises:
        VersionOverflowError: If the targeted component is already at the ceiling
    """
    action = Action(action)
    ceiling = Limits.COMPONENT_MAX

    if not action.is_bump:
        return current

    if action is Action.MAJOR:
        target = current.major
        result = (current.major + 1, 0, 0)
    elif action is Action.MINOR:
        target = current.minor
        result = (current.major, current.minor + 1, 0)
    else:
        target = current.subminor
        result = (current.major, current.minor, current.subminor + 1)

    if target >= ceiling:
        raise VersionOverflowError(action.value, ceiling)

    bumped = VersionTriplet(*result)
    _triplet_logger.debug(f"Bump {action.value}: {current} -> {bumped}")
    return bumped
