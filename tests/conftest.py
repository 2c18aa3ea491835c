#!/usr/bin/env python3
"""
Pytest configuration and shared fixtures for versionsync tests.

This module sets up the Python path so tests run against the checkout
without installing the package.
"""

import sys
from pathlib import Path

# =============================================================================
# Path Setup - Execute BEFORE any test imports
# =============================================================================

# tests/conftest.py -> tests/ -> repository root
_tests_dir = Path(__file__).resolve().parent
_repo_root = _tests_dir.parent

if str(_repo_root) not in sys.path:
    sys.path.insert(0, str(_repo_root))

REPO_ROOT = _repo_root
PACKAGE_DIR = _repo_root / "versionsync"
SCRIPTS_DIR = _repo_root / "scripts"
TESTS_DIR = _tests_dir


# =============================================================================
# Manifest templates
# =============================================================================

# The [package] section carries a decoy version line ahead of the scope marker.
CARGO_TEMPLATE = """\
[package]
name = "demo-app"
version = "0.0.1"

[workspace]
members = ["gui", "cli"]

[workspace.package]
version = "{version}"
edition = "2021"
license = "MIT"

[dependencies]
anyhow = "1"
"""

PKGBUILD_TEMPLATE = """\
# Maintainer: Demo Maintainer <demo@example.com>
pkgname=demo-app
pkgver={version}
pkgrel=1
pkgdesc="Demo application"
arch=('x86_64')

build() {{
  cargo build --release
}}
"""


# =============================================================================
# Shared Fixtures
# =============================================================================

import pytest


@pytest.fixture
def repo_root():
    """Return the versionsync checkout root."""
    return REPO_ROOT


@pytest.fixture
def scripts_dir():
    """Return the scripts directory path."""
    return SCRIPTS_DIR


@pytest.fixture
def make_repo(tmp_path):
    """
    Factory fixture building a fake product checkout.

    Usage:
        root = make_repo(package="1.2.3", build="1.5.0")
    """

    def _make(package="1.2.3", build="1.2.3", cargo_text=None, pkgbuild_text=None):
        root = tmp_path / "checkout"
        (root / "packaging").mkdir(parents=True, exist_ok=True)
        cargo = cargo_text if cargo_text is not None else CARGO_TEMPLATE.format(version=package)
        pkgbuild = pkgbuild_text if pkgbuild_text is not None else PKGBUILD_TEMPLATE.format(version=build)
        (root / "Cargo.toml").write_bytes(cargo.encode("utf-8"))
        (root / "packaging" / "PKGBUILD").write_bytes(pkgbuild.encode("utf-8"))
        return root

    return _make


@pytest.fixture
def snapshot():
    """Return a callable capturing the raw bytes of both manifests."""

    def _snapshot(root: Path):
        return (
            (root / "Cargo.toml").read_bytes(),
            (root / "packaging" / "PKGBUILD").read_bytes(),
        )

    return _snapshot
