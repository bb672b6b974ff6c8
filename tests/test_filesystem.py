import os
import stat

import pytest

from nomadpack import logger as logging_mod
from nomadpack.filesystem import (
    copy_dir,
    copy_file,
    err_on_exists,
    maybe_create_destination_dir,
    with_file_mode,
)


@pytest.fixture
def messages():
    return []


@pytest.fixture
def log(messages):
    return logging_mod.TestLogger(messages.append)


def test_rename_all(tmp_path, log):
    old_dir = tmp_path / "old"
    new_dir = tmp_path / "new"
    old_dir.mkdir()
    new_dir.mkdir()
    (old_dir / "test").mkdir()
    (old_dir / "test" / "test.txt").write_bytes(b"test")

    copy_dir(str(old_dir), str(new_dir / "test"), False, log)

    assert os.listdir(new_dir) == ["test"]
    assert os.listdir(new_dir / "test") == ["test"]
    assert os.listdir(new_dir / "test" / "test") == ["test.txt"]
    assert (new_dir / "test" / "test" / "test.txt").read_bytes() == b"test"


def test_copy_file_copies_content_and_mode(tmp_path, log):
    source = tmp_path / "src.txt"
    source.write_bytes(b"payload")
    os.chmod(source, 0o640)
    destination = tmp_path / "dst.txt"

    copy_file(str(source), str(destination), log)

    assert destination.read_bytes() == b"payload"
    assert stat.S_IMODE(os.stat(destination).st_mode) == 0o640


def test_copy_file_missing_source_logs_and_raises(tmp_path, log, messages):
    with pytest.raises(FileNotFoundError):
        copy_file(str(tmp_path / "missing"), str(tmp_path / "out"), log)
    assert messages and messages[0].startswith("error opening source file:")


def test_copy_dir_rejects_file_source(tmp_path, log, messages):
    source = tmp_path / "file.txt"
    source.write_text("x")
    with pytest.raises(NotADirectoryError, match="source is not a directory"):
        copy_dir(str(source), str(tmp_path / "dest"), False, log)
    assert messages == ["source is not a directory"]


def test_copy_dir_rejects_existing_destination(tmp_path, log, messages):
    source = tmp_path / "src"
    destination = tmp_path / "dest"
    source.mkdir()
    destination.mkdir()
    with pytest.raises(FileExistsError, match="destination already exists"):
        copy_dir(str(source), str(destination), False, log)
    assert messages == ["destination already exists"]


def test_copy_dir_overwrites_existing_destination(tmp_path, log):
    source = tmp_path / "src"
    destination = tmp_path / "dest"
    source.mkdir()
    destination.mkdir()
    (source / "a.txt").write_text("new")
    (destination / "a.txt").write_text("old")

    copy_dir(str(source), str(destination), True, log)

    assert (destination / "a.txt").read_text() == "new"


def test_copy_dir_skips_symlinked_files(tmp_path, log):
    source = tmp_path / "src"
    source.mkdir()
    (source / "real.txt").write_text("real")
    os.symlink(source / "real.txt", source / "link.txt")
    destination = tmp_path / "dest"

    copy_dir(str(source), str(destination), False, log)

    assert sorted(os.listdir(destination)) == ["real.txt"]


def test_copy_dir_copies_nested_tree(tmp_path, log):
    source = tmp_path / "src"
    (source / "a" / "b").mkdir(parents=True)
    (source / "a" / "b" / "deep.txt").write_text("deep")
    destination = tmp_path / "dest"

    copy_dir(str(source), str(destination), False, log)

    assert (destination / "a" / "b" / "deep.txt").read_text() == "deep"


def test_maybe_create_creates_missing_directory(tmp_path):
    target = tmp_path / "x" / "y"
    maybe_create_destination_dir(str(target))
    assert target.is_dir()


def test_maybe_create_existing_without_option_is_fine(tmp_path):
    maybe_create_destination_dir(str(tmp_path))
    assert tmp_path.is_dir()


def test_maybe_create_err_on_exists(tmp_path):
    with pytest.raises(FileExistsError) as info:
        maybe_create_destination_dir(str(tmp_path), err_on_exists())
    assert info.value.filename == str(tmp_path)


def test_maybe_create_with_file_mode(tmp_path):
    target = tmp_path / "moded"
    old_umask = os.umask(0)
    try:
        maybe_create_destination_dir(str(target), with_file_mode(0o700))
    finally:
        os.umask(old_umask)
    assert stat.S_IMODE(os.stat(target).st_mode) == 0o700