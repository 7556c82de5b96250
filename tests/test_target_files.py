import os
import stat
from pathlib import Path

import pytest

from buffered_target import (
    BufferedTarget,
    InvalidFilename,
    Mode,
    ReadError,
    WriteError,
)
from buffered_target.target import RealFile


def make_file(tmp_path: Path, data: bytes, name: str = "sample.txt") -> Path:
    path = tmp_path / name
    path.write_bytes(data)
    return path


def test_binary_mode_keeps_content_untouched(tmp_path: Path) -> None:
    path = make_file(tmp_path, b"x\r\ny")

    target = BufferedTarget(str(path), Mode.READ | Mode.BINARY)

    assert target.read_all() == b"x\r\ny"
    assert target.size() == 4
    assert target.pos() == 0


def test_text_mode_normalizes_on_load(tmp_path: Path) -> None:
    path = make_file(tmp_path, b"a\r\nb\rc\nd")

    target = BufferedTarget(path, Mode.READ, newline="\n")

    assert target.read_all() == "a\nb\nc\nd"
    assert target.size() == 7
    assert target.readln() == "a"


def test_identity_splits_directory_and_name(tmp_path: Path) -> None:
    path = make_file(tmp_path, b"")

    target = BufferedTarget(str(path))

    assert target.identity == RealFile(path=str(tmp_path), name="sample.txt")
    assert target.path == str(path)


def test_bare_name_resolves_against_cwd(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)

    target = BufferedTarget("fresh.txt", Mode.WRITE)

    assert target.identity == RealFile(path=os.getcwd(), name="fresh.txt")


@pytest.mark.parametrize("designator", ["", "some/dir/", os.sep])
def test_designator_without_name_is_rejected(designator: str) -> None:
    with pytest.raises(InvalidFilename) as excinfo:
        BufferedTarget(designator, Mode.WRITE)

    assert excinfo.value.designator == designator


def test_missing_file_raises_read_error(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"

    with pytest.raises(ReadError) as excinfo:
        BufferedTarget(str(missing), Mode.READ)

    assert isinstance(excinfo.value.__cause__, OSError)


def test_undecodable_text_raises_read_error(tmp_path: Path) -> None:
    path = make_file(tmp_path, b"\xff\xfe\xfa")

    with pytest.raises(ReadError):
        BufferedTarget(str(path), Mode.READ, encoding="utf-8")


def test_write_mode_does_not_load_existing_content(tmp_path: Path) -> None:
    path = make_file(tmp_path, b"old content")

    target = BufferedTarget(str(path), Mode.WRITE)

    assert target.size() == 0
    assert target.read_all() == ""


def test_read_requires_read_mode(tmp_path: Path) -> None:
    path = make_file(tmp_path, b"data")
    target = BufferedTarget(str(path), Mode.WRITE)
    target.write("data").start()

    with pytest.raises(ReadError):
        target.read(1)
    with pytest.raises(ReadError):
        target.readln()


def test_write_requires_write_mode(tmp_path: Path) -> None:
    path = make_file(tmp_path, b"data")
    target = BufferedTarget(str(path), Mode.READ)

    with pytest.raises(WriteError):
        target.write("more")
    assert target.read_all() == "data"


def test_save_replaces_file_content(tmp_path: Path) -> None:
    path = make_file(tmp_path, b"line one\nline two\n")
    target = BufferedTarget(str(path), Mode.READ | Mode.WRITE, newline="\n")

    target.readln()
    target.writeln("inserted")

    assert target.save() is True
    assert path.read_bytes() == b"line one\ninserted\nline two\n"
    assert [p.name for p in tmp_path.iterdir()] == ["sample.txt"]


def test_save_creates_new_file(tmp_path: Path) -> None:
    path = tmp_path / "created.bin"
    target = BufferedTarget(str(path), Mode.WRITE | Mode.BINARY)

    target.write_bytes(1, 2, 3).save()

    assert path.read_bytes() == b"\x01\x02\x03"


def test_save_encodes_text_with_target_encoding(tmp_path: Path) -> None:
    path = tmp_path / "latin.txt"
    target = BufferedTarget(str(path), Mode.WRITE, encoding="latin-1")

    target.write("café").save()

    assert path.read_bytes() == "café".encode("latin-1")


def test_save_failure_raises_write_error(tmp_path: Path) -> None:
    target = BufferedTarget(str(tmp_path / "no_such_dir" / "file.txt"), Mode.WRITE)
    target.write("data")

    with pytest.raises(WriteError) as excinfo:
        target.save()

    assert isinstance(excinfo.value.__cause__, OSError)


def test_destroyed_target_cannot_be_saved(tmp_path: Path) -> None:
    path = make_file(tmp_path, b"content")
    target = BufferedTarget(str(path), Mode.READ | Mode.WRITE)

    target.destroy()

    with pytest.raises(WriteError):
        target.save()
    assert path.read_bytes() == b"content"


def test_saved_new_file_gets_default_permissions(tmp_path: Path) -> None:
    reference = tmp_path / "reference.txt"
    reference.write_bytes(b"x")
    path = tmp_path / "saved.txt"

    BufferedTarget(str(path), Mode.WRITE).write("x").save()

    assert stat.S_IMODE(path.stat().st_mode) == stat.S_IMODE(reference.stat().st_mode)


def test_save_keeps_permissions_of_existing_file(tmp_path: Path) -> None:
    path = make_file(tmp_path, b"old")
    path.chmod(0o640)

    BufferedTarget(str(path), Mode.READ | Mode.WRITE).end().write("er").save()

    assert stat.S_IMODE(path.stat().st_mode) == 0o640
