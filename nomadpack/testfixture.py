"""Locating and copying test fixtures within the repository."""

from __future__ import annotations

import os
import shutil
import subprocess

REL_FIXTURE_DIR = "fixtures"


def repo_root() -> str:
    """Return the top-level directory of the enclosing git repository."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError) as exc:
        raise RuntimeError(f"unable to locate repository root: {exc}") from exc
    return result.stdout.strip()


def abs_path(fixture_name: str) -> str:
    """Return the absolute path of a fixture inside the fixtures directory."""
    return os.path.join(repo_root(), REL_FIXTURE_DIR, fixture_name)


def clone(dst: str, f_path: str) -> str:
    """Copy the fixture ``f_path`` into ``dst`` and return the copy's path."""
    source = abs_path(f_path)
    target = os.path.join(dst, f_path.split("/")[-1])
    try:
        if os.path.isdir(source):
            shutil.copytree(source, target, symlinks=True, dirs_exist_ok=True)
        else:
            shutil.copy2(source, target)
    except OSError as exc:
        raise RuntimeError(f"clone of {f_path} failed: {exc}") from exc
    return target