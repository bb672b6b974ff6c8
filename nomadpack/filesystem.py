"""File and directory copying helpers."""

from __future__ import annotations

import errno
import os
import shutil
import stat
from dataclasses import dataclass
from typing import Callable

from nomadpack.logger import Logger


@dataclass
class _CreateOptions:
    err_on_exists: bool = False
    perms: int = 0o755


CreateOption = Callable[[_CreateOptions], None]


def copy_file(source_path: str, destination_path: str, logger: Logger) -> None:
    """Copy a file's contents and permission bits to ``destination_path``."""
    try:
        source = open(source_path, "rb")
    except OSError as exc:
        logger.debug(f"error opening source file: {exc}")
        raise
    with source:
        try:
            destination = open(destination_path, "wb")
        except OSError as exc:
            logger.debug(f"error opening destination file: {exc}")
            raise
        with destination:
            try:
                shutil.copyfileobj(source, destination)
                destination.flush()
                os.fsync(destination.fileno())
            except OSError as exc:
                logger.debug(f"error copying file: {exc}")
                raise

    try:
        mode = os.stat(source_path).st_mode
    except OSError as exc:
        logger.debug(f"error getting source file info: {exc}")
        raise

    try:
        os.chmod(destination_path, stat.S_IMODE(mode))
    except OSError as exc:
        logger.debug(f"error setting destination file permissions: {exc}")
        raise


def copy_dir(source_dir: str, destination_dir: str, overwrite: bool, logger: Logger) -> None:
    """Recursively copy a directory, skipping symlinked files.

    Without ``overwrite`` the destination must not exist; it is created with
    the source directory's permissions.
    """
    source_dir = os.path.normpath(os.fspath(source_dir))
    destination_dir = os.path.normpath(os.fspath(destination_dir))

    try:
        source_info = os.stat(source_dir)
    except OSError as exc:
        logger.debug(f"error getting source directory info: {exc}")
        raise

    if not stat.S_ISDIR(source_info.st_mode):
        message = "source is not a directory"
        logger.debug(message)
        raise NotADirectoryError(message)

    try:
        os.stat(destination_dir)
        exists = True
    except FileNotFoundError:
        exists = False
    except OSError as exc:
        logger.debug(f"error getting destination file info: {exc}")
        raise

    if not overwrite:
        if exists:
            message = "destination already exists"
            logger.debug(message)
            raise FileExistsError(message)
        try:
            maybe_create_destination_dir(
                destination_dir,
                with_file_mode(stat.S_IMODE(source_info.st_mode)),
                err_on_exists(),
            )
        except OSError as exc:
            logger.debug(f"error creating destination directory: {exc}")
            raise

    try:
        with os.scandir(source_dir) as iterator:
            entries = sorted(iterator, key=lambda entry: entry.name)
    except OSError as exc:
        logger.debug(f"error reading source directory entries: {exc}")
        raise

    for entry in entries:
        source_path = os.path.join(source_dir, entry.name)
        destination_path = os.path.join(destination_dir, entry.name)
        if entry.is_dir(follow_symlinks=False):
            copy_dir(source_path, destination_path, overwrite, logger)
        elif not entry.is_symlink():
            copy_file(source_path, destination_path, logger)


def maybe_create_destination_dir(path: str, *args: CreateOption) -> None:
    """Create ``path`` and its parents if it does not exist yet."""
    options = _CreateOptions()
    for option in args:
        option(options)

    try:
        os.stat(path)
    except FileNotFoundError:
        os.makedirs(path, options.perms)
        return
    except OSError:
        return

    if options.err_on_exists:
        raise FileExistsError(errno.EEXIST, os.strerror(errno.EEXIST), path)


def with_file_mode(mode: int) -> CreateOption:
    """Option setting the permissions of a created directory."""

    def _apply(options: _CreateOptions) -> None:
        options.perms = mode

    return _apply


def err_on_exists() -> CreateOption:
    """Option making an existing directory an error."""

    def _apply(options: _CreateOptions) -> None:
        options.err_on_exists = True

    return _apply