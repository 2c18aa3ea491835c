# versionsync/limits.py - SINGLE SOURCE OF TRUTH for numeric limits
"""
All numeric limits and thresholds MUST be defined here.
No other module may define these values.
"""


class Limits:
    """Operational limits and thresholds."""

    # ==========================================================================
    # Version triplet shape
    # ==========================================================================

    # Number of components in X.Y.Z
    COMPONENT_COUNT = 3

    # Each component is a single digit. Reaching the maximum is a hard stop,
    # there is no carry into the next component.
    COMPONENT_MIN = 0
    COMPONENT_MAX = 9

    # ==========================================================================
    # Logging
    # ==========================================================================

    # Maximum log file size before rotation (bytes)
    MAX_LOG_FILE_SIZE = 1 * 1024 * 1024  # 1 MB
    LOG_FILE_BACKUP_COUNT = 3
