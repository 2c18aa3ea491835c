# versionsync/version.py - SINGLE SOURCE OF TRUTH for the tool's own version string
"""
This is the ONLY place where the versionsync VERSION is defined.
All other modules MUST import VERSION from here.
"""

VERSION = "0.1.0"
