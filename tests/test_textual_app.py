import asyncio
from pathlib import Path

import pytest

pytest.importorskip("textual")

from textual.widgets import TextArea

from textfile_engine.adapters.textual.app import FileEditorApp


def test_start_up_load_adopts_state_and_unlocks_editor(tmp_path: Path) -> None:
    path = tmp_path / "doc.txt"
    path.write_bytes(b"hello\n")
    app = FileEditorApp(str(path))

    async def scenario() -> None:
        async with app.run_test() as pilot:
            await app.workers.wait_for_complete()
            await pilot.pause()
            editor = app.query_one("#editor", TextArea)

            assert app.editor_state.file_path == str(path)
            assert editor.text == "hello\n"
            assert not editor.disabled
            assert app.editor_state.in_save_point()

    asyncio.run(scenario())


def test_edits_are_ignored_while_a_file_worker_owns_the_document(
    tmp_path: Path,
) -> None:
    path = tmp_path / "doc.txt"
    path.write_bytes(b"hello\n")
    app = FileEditorApp(str(path))

    async def scenario() -> None:
        async with app.run_test() as pilot:
            await app.workers.wait_for_complete()
            await pilot.pause()
            editor = app.query_one("#editor", TextArea)

            assert app._lock_editor() is True
            # A second file operation cannot start while the first runs.
            assert app._lock_editor() is False
            assert editor.disabled

            editor.load_text("typed during save")
            await pilot.pause()
            assert bytes(app.editor_state.document) == b"hello\n"

            app._unlock_editor()
            assert not editor.disabled

    asyncio.run(scenario())
