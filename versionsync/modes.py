# versionsync/modes.py - SINGLE SOURCE OF TRUTH for enums and state definitions
"""
All action enums and scanner states MUST be defined here.
No other module may define these values.
"""

from enum import Enum, auto


class Action(str, Enum):
    """
    Requested operation. Exactly one is supplied per invocation.

    MAJOR/MINOR/SUBMINOR bump the named component of X.Y.Z.
    SYNC leaves the authoritative value unchanged and rewrites both manifests.
    """

    MAJOR = "major"
    MINOR = "minor"
    SUBMINOR = "subminor"
    SYNC = "sync"

    @classmethod
    def from_string(cls, value: str) -> "Action":
        """Parse an action name. Raises ValueError for unknown names."""
        for action in cls:
            if action.value == value:
                return action
        raise ValueError(f"Unknown action: {value!r}")

    @classmethod
    def names(cls) -> list[str]:
        """Return all action names in declaration order."""
        return [action.value for action in cls]

    @property
    def is_bump(self) -> bool:
        return self is not Action.SYNC


class ScanState(Enum):
    """
    State of the line scanner that locates a manifest's version line.

    A manifest with a scope marker starts BEFORE_SCOPE and moves to IN_SCOPE
    on the marker line. There is no transition back.
    """

    BEFORE_SCOPE = auto()
    IN_SCOPE = auto()
