import errno
import os
from pathlib import Path

import pytest

from helpers import CountingWriter, RecordingSink, make_dialogs
from textfile_engine.buffer import ByteDocument
from textfile_engine.dialogs import SILENT_DIALOGS, MessageKind, Reply
from textfile_engine.editor import FileEditorState
from textfile_engine.files import rename_file


@pytest.fixture
def cross_device(monkeypatch):
    def fail_replace(src, dst):
        raise OSError(errno.EXDEV, os.strerror(errno.EXDEV), src)

    monkeypatch.setattr("textfile_engine.files.rename.os.replace", fail_replace)


def make_named_state(
    path: Path, data: bytes = b"content\n", **kwargs
) -> FileEditorState:
    path.write_bytes(b"old content\n")
    return FileEditorState(ByteDocument(data), path, **kwargs)


def test_rename_moves_file(tmp_path: Path) -> None:
    src = tmp_path / "before.txt"
    dst = tmp_path / "after.txt"
    sink = RecordingSink()
    state = make_named_state(src, parent=sink)
    dialogs, hooks = make_dialogs(paths=[dst])

    assert state.rename(dialogs) is True

    assert not src.exists()
    assert dst.read_bytes() == b"content\n"
    assert state.file_path == str(dst)
    assert sink.saved == [str(dst)]
    assert hooks.messages == []


def test_rename_to_same_path_does_nothing(tmp_path: Path, monkeypatch) -> None:
    src = tmp_path / "same.txt"
    writer = CountingWriter()
    state = make_named_state(src, writer=writer)
    removed = []
    monkeypatch.setattr("textfile_engine.files.rename.os.remove", removed.append)
    dialogs, _ = make_dialogs(paths=[src])

    assert state.rename(dialogs) is True

    assert writer.paths == []
    assert removed == []
    assert src.read_bytes() == b"old content\n"


def test_relative_path_rename_onto_itself_does_nothing(
    tmp_path: Path, monkeypatch
) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "notes.txt").write_bytes(b"old\n")
    writer = CountingWriter()
    state = FileEditorState(ByteDocument(b"new\n"), "notes.txt", writer=writer)
    dialogs, hooks = make_dialogs(paths=["notes.txt"])

    assert state.file_path == str(tmp_path / "notes.txt")
    assert state.rename(dialogs) is True

    assert writer.paths == []
    assert hooks.texts(MessageKind.CONFIRMATION) == []
    assert (tmp_path / "notes.txt").read_bytes() == b"old\n"


def test_rename_untitled_falls_back_to_save_as(tmp_path: Path) -> None:
    dst = tmp_path / "first.txt"
    dialogs, hooks = make_dialogs(paths=[dst])
    state = FileEditorState(ByteDocument(b"new\n"))

    assert state.rename(dialogs) is True

    assert hooks.requests[0].title == "Save untitled file"
    assert dst.read_bytes() == b"new\n"


def test_rename_over_existing_requires_confirmation(tmp_path: Path) -> None:
    src = tmp_path / "src.txt"
    dst = tmp_path / "dst.txt"
    dst.write_bytes(b"precious")
    state = make_named_state(src)
    dialogs, hooks = make_dialogs(replies=[Reply.NO], paths=[dst])

    assert state.rename(dialogs) is False

    assert dst.read_bytes() == b"precious"
    assert src.exists()
    assert state.file_path == str(src)
    assert hooks.texts() == [f"'{dst}' already exists. Overwrite?"]


def test_silent_rename_is_refused(tmp_path: Path) -> None:
    src = tmp_path / "src.txt"
    state = make_named_state(src)
    assert state.rename(SILENT_DIALOGS) is False
    assert state.file_path == str(src)


def test_fallback_when_atomic_rename_fails(tmp_path: Path, cross_device) -> None:
    src = tmp_path / "src.txt"
    dst = tmp_path / "dst.txt"
    src.write_bytes(b"stale")
    dialogs, hooks = make_dialogs()

    assert rename_file(dst, src, ByteDocument(b"fresh"), dialogs) is True

    assert dst.read_bytes() == b"fresh"
    assert not src.exists()
    assert hooks.messages == []


def test_leftover_source_is_only_a_warning(
    tmp_path: Path, cross_device, monkeypatch
) -> None:
    src = tmp_path / "src.txt"
    dst = tmp_path / "dst.txt"
    src.write_bytes(b"stale")

    def deny_remove(path):
        raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)

    monkeypatch.setattr("textfile_engine.files.rename.os.remove", deny_remove)
    dialogs, hooks = make_dialogs()

    assert rename_file(dst, src, ByteDocument(b"fresh"), dialogs) is True

    assert dst.read_bytes() == b"fresh"
    assert src.exists()
    assert hooks.messages == [
        (
            f"'{dst}' was created successfully, but '{src}' could not be removed: "
            f"{os.strerror(errno.EACCES)}.",
            MessageKind.WARNING,
            (Reply.YES,),
        )
    ]


def test_fallback_when_source_location_is_gone(tmp_path: Path) -> None:
    src = tmp_path / "vanished" / "src.txt"
    dst = tmp_path / "dst.txt"
    dialogs, hooks = make_dialogs()

    assert rename_file(dst, src, ByteDocument(b"fresh"), dialogs) is True

    assert dst.read_bytes() == b"fresh"
    assert hooks.messages == []


def test_rename_fails_when_destination_cannot_be_written(
    tmp_path: Path, cross_device
) -> None:
    src = tmp_path / "src.txt"
    src.write_bytes(b"stale")
    dst = tmp_path / "missing-dir" / "dst.txt"
    dialogs, hooks = make_dialogs()

    assert rename_file(dst, src, ByteDocument(b"fresh"), dialogs) is False

    # The silent first attempt already saved the content over src.
    assert src.read_bytes() == b"fresh"
    assert hooks.texts(MessageKind.ERROR) == [
        f"Unable to open file '{dst}' for write: No such file or directory."
    ]


def test_failed_rename_keeps_editor_path(tmp_path: Path, cross_device) -> None:
    src = tmp_path / "src.txt"
    dst = tmp_path / "nowhere" / "dst.txt"
    sink = RecordingSink()
    state = make_named_state(src, parent=sink)
    dialogs, _ = make_dialogs(paths=[dst])

    assert state.rename(dialogs) is False

    assert state.file_path == str(src)
    assert sink.saved == []
