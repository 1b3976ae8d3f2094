from __future__ import annotations

import pytest

from blob_editor.modes import InputExhausted, InsertMode, ModeContext


def buffer_texts(context: ModeContext) -> list[str]:
    return [line.text() for line in context.state.iter_lines()]


def test_inserts_into_empty_buffer_until_interrupted(make_context) -> None:
    context = make_context(b"", b"a\n", b"b\n", b"c\n", b"ignored\n", interrupt_on=4)

    inserted = InsertMode(context).run()

    assert inserted == 3
    assert buffer_texts(context) == ["a", "b", "c"]
    assert context.state.current_line().text() == "c"
    context.state.check()


def test_line_read_after_interrupt_is_discarded(make_context) -> None:
    context = make_context(b"x\n", b"kept\n", b"dropped\n", b"never\n", interrupt_on=2)

    inserted = InsertMode(context).run()

    assert inserted == 1
    assert buffer_texts(context) == ["x", "kept"]
    assert context.source.reads == 2


def test_inserts_after_cursor_in_the_middle(make_context) -> None:
    context = make_context(b"a\nz\n", b"b\n", b"c\n", b"\n", interrupt_on=3)

    InsertMode(context).run()

    assert buffer_texts(context) == ["a", "b", "c", "z"]
    assert context.state.current_line().text() == "c"
    assert context.state.start == context.state.lines.first


def test_token_is_reset_on_entry(make_context) -> None:
    context = make_context(b"", b"a\n", b"\n", interrupt_on=2)
    context.token.cancel()

    assert InsertMode(context).run() == 1
    assert buffer_texts(context) == ["a"]


def test_input_end_is_fatal_but_keeps_inserted_lines(make_context) -> None:
    context = make_context(b"", b"a\n", b"partial")

    with pytest.raises(InputExhausted):
        InsertMode(context).run()

    assert buffer_texts(context) == ["a", "partial"]


def test_blank_lines_are_inserted_as_empty(make_context) -> None:
    context = make_context(b"", b"\n", b"x\n", b"\n", interrupt_on=3)

    InsertMode(context).run()

    assert [bytes(line) for line in context.state.iter_lines()] == [b"", b"x"]
