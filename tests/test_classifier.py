import os
from pathlib import Path

import pytest

from hashname.classifier import FileClassifier
from hashname.errors import AlreadyProcessedError, NotAFileError
from hashname.models import Options

from conftest import HELLO_DIGEST


def test_regular_file_is_eligible(hello: Path):
    rec = FileClassifier(Options()).classify(str(hello))
    assert rec.path == hello
    assert (rec.stem, rec.ext) == ("hello", "txt")


def test_symlink_is_not_a_file(hello: Path, tmp_path: Path):
    link = tmp_path / "link.txt"
    os.symlink(hello, link)
    with pytest.raises(NotAFileError, match="Not a file"):
        FileClassifier(Options()).classify(str(link))


def test_directory_is_not_a_file(tmp_path: Path):
    with pytest.raises(NotAFileError):
        FileClassifier(Options()).classify(str(tmp_path))


def test_vanished_file_raises_os_error(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        FileClassifier(Options()).classify(str(tmp_path / "gone.txt"))


def test_digest_named_file_already_processed(tmp_path: Path):
    p = tmp_path / f"{HELLO_DIGEST}.png"
    p.write_bytes(b"hello")
    with pytest.raises(AlreadyProcessedError, match="Already processed"):
        FileClassifier(Options()).classify(str(p))


def test_force_rehash_accepts_digest_named_file(tmp_path: Path):
    p = tmp_path / HELLO_DIGEST
    p.write_bytes(b"hello")
    rec = FileClassifier(Options(force_rehash=True)).classify(str(p))
    assert (rec.stem, rec.ext) == (HELLO_DIGEST, "")


def test_uppercase_digest_is_not_already_processed(tmp_path: Path):
    p = tmp_path / f"{HELLO_DIGEST.upper()}.txt"
    p.write_bytes(b"hello")
    assert FileClassifier(Options()).classify(str(p)).stem == HELLO_DIGEST.upper()
