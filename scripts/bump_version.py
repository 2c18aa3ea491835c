#!/usr/bin/env python3
"""
DEV-ONLY WRAPPER: Forwards to versionsync.cli

Allows running `python scripts/bump_version.py <major|minor|subminor|sync>`
from a checkout without installing the package. The checkout this wrapper
lives in is used as the repository root unless VERSIONSYNC_REPO_ROOT is set.
"""

import sys
from pathlib import Path

_wrapper_dir = Path(__file__).resolve().parent
_repo_root = _wrapper_dir.parent

if not (_repo_root / "versionsync").exists():
    print(f"ERROR: versionsync/ not found at {_repo_root}", file=sys.stderr)
    sys.exit(1)

sys.path.insert(0, str(_repo_root))

from versionsync.cli import main

sys.exit(main(repo_root=_repo_root, prog=sys.argv[0]))
