import pytest

from textfile_engine.buffer import (
    ByteDocument,
    DocumentAllocationError,
    DocumentRangeError,
    LineEndingMode,
)


def test_constructor_content_is_the_save_point() -> None:
    document = ByteDocument(b"hello")

    assert document.length() == 5
    assert document.is_at_save_point()
    assert document.can_redo() is False


def test_appended_bytes_leave_document_modified() -> None:
    document = ByteDocument()
    document.append_bytes(b"abc")
    document.append_bytes(memoryview(b"def"))

    assert bytes(document) == b"abcdef"
    assert not document.is_at_save_point()
    assert not document.can_undo()

    document.mark_save_point()
    assert document.is_at_save_point()


def test_write_range_replaces_target_and_records_undo() -> None:
    document = ByteDocument(b"hello world")

    document.write_range(6, 11, b"there")

    assert document.read_range(0, document.length()) == b"hello there"
    assert not document.is_at_save_point()
    assert document.undo()
    assert bytes(document) == b"hello world"
    assert document.is_at_save_point()
    assert document.can_redo()
    assert document.redo()
    assert bytes(document) == b"hello there"


def test_identical_write_is_not_recorded() -> None:
    document = ByteDocument(b"same")

    document.write_range(0, 4, b"same")

    assert not document.can_undo()
    assert document.is_at_save_point()


def test_grouped_edit_produces_single_undo_entry() -> None:
    document = ByteDocument(b"a b")

    document.begin_grouped_edit("two_steps")
    document.write_range(0, 1, b"x")
    document.write_range(2, 3, b"y")
    document.end_grouped_edit()

    assert bytes(document) == b"x y"
    document.undo()
    assert bytes(document) == b"a b"
    assert not document.can_undo()


def test_end_without_begin_raises() -> None:
    with pytest.raises(RuntimeError):
        ByteDocument().end_grouped_edit()


def test_reserve_honours_capacity_limit() -> None:
    document = ByteDocument(max_capacity=100)
    document.reserve(100)
    assert document.capacity == 100

    with pytest.raises(DocumentAllocationError) as excinfo:
        document.reserve(101)
    assert isinstance(excinfo.value, MemoryError)
    assert excinfo.value.requested == 101


def test_unlimited_capacity_by_default() -> None:
    document = ByteDocument(max_capacity=0)
    document.reserve(10**9)
    assert document.capacity == 10**9
    assert document.length() == 0


def test_out_of_range_access_is_rejected() -> None:
    document = ByteDocument(b"abc")

    with pytest.raises(DocumentRangeError):
        document.read_range(2, 5)
    with pytest.raises(DocumentRangeError):
        document.write_range(2, 1, b"")


def test_new_edit_after_undo_discards_redo() -> None:
    document = ByteDocument(b"")
    document.set_bytes(b"one")
    document.set_bytes(b"two")
    document.undo()
    assert document.can_redo()

    document.set_bytes(b"three")

    assert not document.can_redo()
    assert bytes(document) == b"three"


def test_line_ending_mode_defaults_to_lf() -> None:
    document = ByteDocument()
    assert document.line_ending is LineEndingMode.LF

    document.set_line_ending_mode(LineEndingMode.CRLF)
    assert document.line_ending.terminator == b"\r\n"


def test_revert_last_edit_leaves_no_redo_step() -> None:
    document = ByteDocument()
    document.append_bytes(b"draft  ")
    document.set_bytes(b"draft\n")

    assert document.revert_last_edit() is True

    assert bytes(document) == b"draft  "
    assert not document.can_undo()
    assert not document.can_redo()
    assert not document.is_at_save_point()


def test_revert_last_edit_refuses_while_redo_is_pending() -> None:
    document = ByteDocument(b"")
    document.set_bytes(b"one")
    document.set_bytes(b"two")
    document.undo()

    assert document.revert_last_edit() is False
    assert bytes(document) == b"one"
    assert document.can_redo()


def test_read_into_copies_span_into_target() -> None:
    document = ByteDocument(b"0123456789")
    target = memoryview(bytearray(8))

    assert document.read_into(2, 6, target) == 4

    assert bytes(target[:4]) == b"2345"
    with pytest.raises(DocumentRangeError):
        document.read_into(8, 12, target)
