import logging

import pytest
from behavioral.command.text_editor_command import TextBuffer, TypeCommand, DeleteCommand, EditorInvoker


@pytest.mark.unit
def test_type_and_undo():
    buf = TextBuffer()
    cmd = TypeCommand(buf, "Hi")
    cmd.execute()
    assert buf.read() == "Hi"
    cmd.undo()
    assert buf.read() == ""


@pytest.mark.unit
def test_truncate_clamps_to_empty():
    buf = TextBuffer("abc")
    assert buf.truncate(10) == "abc"
    assert buf.read() == ""
    assert buf.truncate(1) == ""


@pytest.mark.unit
def test_append_empty_is_noop():
    buf = TextBuffer("abc")
    buf.append("")
    assert buf.read() == "abc"
    assert len(buf) == 3


@pytest.mark.unit
def test_editor_sequence():
    buf = TextBuffer()
    inv = EditorInvoker()
    inv.run(TypeCommand(buf, "Hello"))
    inv.run(TypeCommand(buf, " World"))
    inv.run(DeleteCommand(buf, 6))
    assert buf.read() == "Hello"
    assert inv.undo_last() is True
    assert buf.read() == "Hello World"
    assert inv.undo_last() is True
    assert buf.read() == "Hello"
    assert inv.undo_last() is True
    assert buf.read() == ""
    assert inv.history_size == 0


@pytest.mark.unit
def test_undo_on_empty_history_is_safe(caplog):
    buf = TextBuffer("keep")
    inv = EditorInvoker()
    with caplog.at_level(logging.INFO, logger="behavioral.command.text_editor_command"):
        assert inv.undo_last() is False
    assert buf.read() == "keep"
    assert "Nothing to undo" in caplog.text


@pytest.mark.unit
def test_delete_more_than_available_restores_exactly():
    buf = TextBuffer()
    inv = EditorInvoker()
    inv.run(TypeCommand(buf, "abc"))
    delete = DeleteCommand(buf, 10)
    inv.run(delete)
    assert buf.read() == ""
    assert delete.removed == "abc"
    inv.undo_last()
    assert buf.read() == "abc"


@pytest.mark.unit
@pytest.mark.parametrize("steps", [
    [("type", "a"), ("type", "bc"), ("delete", 2), ("type", "xyz"), ("delete", 100)],
    [("delete", 3), ("type", "Hello"), ("delete", 0), ("type", "!")],
    [("type", ""), ("delete", 1), ("type", "q"), ("delete", 1), ("delete", 1)],
])
def test_undo_everything_returns_to_empty(steps):
    buf = TextBuffer()
    inv = EditorInvoker()
    for kind, arg in steps:
        inv.run(TypeCommand(buf, arg) if kind == "type" else DeleteCommand(buf, arg))
    while inv.undo_last():
        pass
    assert buf.read() == ""


@pytest.mark.unit
def test_history_limit_drops_oldest():
    buf = TextBuffer()
    inv = EditorInvoker(history_limit=2)
    for ch in "abc":
        inv.run(TypeCommand(buf, ch))
    assert inv.history_size == 2
    inv.undo_last()
    inv.undo_last()
    assert inv.undo_last() is False
    assert buf.read() == "a"


@pytest.mark.unit
def test_failed_execute_is_not_recorded():
    class Boom(TypeCommand):
        def execute(self):
            raise RuntimeError("boom")

    inv = EditorInvoker()
    with pytest.raises(RuntimeError):
        inv.run(Boom(TextBuffer(), "x"))
    assert inv.history_size == 0


@pytest.mark.unit
def test_injected_logger_receives_reports():
    messages = []

    class Collect(logging.Handler):
        def emit(self, record):
            messages.append(record.getMessage())

    log = logging.getLogger("editor-test")
    log.setLevel(logging.DEBUG)
    handler = Collect()
    log.addHandler(handler)
    try:
        EditorInvoker(log=log).undo_last()
    finally:
        log.removeHandler(handler)
    assert messages == ["Nothing to undo"]
