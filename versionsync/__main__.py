"""Allow running versionsync as a module: python -m versionsync <action>."""

import sys

from versionsync.cli import main

if __name__ == "__main__":
    sys.exit(main())
