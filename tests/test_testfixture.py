import os
import subprocess
from unittest import mock

import pytest

from nomadpack import testfixture


def _git_output(root):
    return subprocess.CompletedProcess(args=[], returncode=0, stdout=f"{root}\n")


@pytest.fixture
def repo(tmp_path):
    root = tmp_path / "repo"
    pack = root / testfixture.REL_FIXTURE_DIR / "packs" / "mypack"
    (pack / "templates").mkdir(parents=True)
    (pack / "metadata.hcl").write_text("content")
    (pack / "templates" / "job.nomad.tpl").write_text("job")
    with mock.patch.object(subprocess, "run", return_value=_git_output(root)):
        yield root


def test_repo_root_strips_output(repo):
    assert testfixture.repo_root() == str(repo)


def test_abs_path_joins_fixture_dir(repo):
    assert testfixture.abs_path("packs/mypack") == os.path.join(
        str(repo), testfixture.REL_FIXTURE_DIR, "packs/mypack"
    )


def test_clone_copies_directory(repo, tmp_path):
    dst = tmp_path / "dst"
    dst.mkdir()
    result = testfixture.clone(str(dst), "packs/mypack")
    assert result == os.path.join(str(dst), "mypack")
    assert (dst / "mypack" / "metadata.hcl").read_text() == "content"
    assert (dst / "mypack" / "templates" / "job.nomad.tpl").read_text() == "job"


def test_clone_copies_single_file(repo, tmp_path):
    dst = tmp_path / "dst"
    dst.mkdir()
    result = testfixture.clone(str(dst), "packs/mypack/metadata.hcl")
    assert result == os.path.join(str(dst), "metadata.hcl")
    assert (dst / "metadata.hcl").read_text() == "content"


def test_clone_missing_fixture_raises(repo, tmp_path):
    with pytest.raises(RuntimeError):
        testfixture.clone(str(tmp_path), "packs/absent")


def test_repo_root_failure_raises():
    error = subprocess.CalledProcessError(128, ["git"])
    with mock.patch.object(subprocess, "run", side_effect=error):
        with pytest.raises(RuntimeError, match="unable to locate repository root"):
            testfixture.repo_root()


def test_repo_root_missing_git_raises():
    with mock.patch.object(subprocess, "run", side_effect=FileNotFoundError("git")):
        with pytest.raises(RuntimeError):
            testfixture.repo_root()