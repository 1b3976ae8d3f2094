from __future__ import annotations

from pathlib import Path

from blob_editor.buffer import load
from blob_editor.modes import (
    AtEndResult,
    AtStartResult,
    CommandMode,
    Continue,
    ModeContext,
    Quit,
)


def output_of(context: ModeContext) -> bytes:
    return context.output.getvalue()  # type: ignore[attr-defined]


def test_next_back_print_returns_to_first_line(make_context) -> None:
    context = make_context(b"x\ny\n")

    result = CommandMode(context).run_line("nbp\n")

    assert result == Continue(executed=3)
    assert output_of(context) == b"x\n"


def test_next_at_last_line_stops_the_chain(make_context) -> None:
    context = make_context(b"x\ny\n")

    result = CommandMode(context).run_line("npnp\n")

    assert result == AtEndResult(column=2)
    assert output_of(context) == b"y\n"
    assert context.state.current_line().text() == "y"


def test_back_at_first_line_reports_start(make_context) -> None:
    context = make_context(b"x\ny\n")

    result = CommandMode(context).run_line("bp")

    assert isinstance(result, AtStartResult)
    assert result.column == 0
    assert result.token == b"START"
    assert output_of(context) == b""


def test_navigation_on_empty_buffer_is_boundary(make_context) -> None:
    context = make_context(b"")
    interpreter = CommandMode(context)

    assert isinstance(interpreter.run_line("n"), AtEndResult)
    assert isinstance(interpreter.run_line("b"), AtStartResult)


def test_unknown_letters_are_skipped(make_context) -> None:
    context = make_context(b"x\n")

    result = CommandMode(context).run_line("z? p\n")

    assert result == Continue(executed=1)
    assert output_of(context) == b"x\n"


def test_quit_stops_the_line(make_context) -> None:
    context = make_context(b"x\n")

    result = CommandMode(context).run_line("qp\n")

    assert isinstance(result, Quit)
    assert output_of(context) == b""


def test_delete_only_line_then_print_blank(make_context) -> None:
    context = make_context(b"solo\n")

    result = CommandMode(context).run_line("dp\n")

    assert result == Continue(executed=2)
    assert context.state.start is None
    assert context.state.cursor is None
    assert output_of(context) == b"\n"


def test_list_renders_from_start_regardless_of_cursor(make_context) -> None:
    context = make_context(b"a\nb\nc")

    CommandMode(context).run_line("nnl\n")

    assert output_of(context) == b"a\nb\nc\n"


def test_list_empty_buffer_prints_nothing(make_context) -> None:
    context = make_context(b"")

    assert CommandMode(context).run_line("l") == Continue(executed=1)
    assert output_of(context) == b""


def test_write_overwrites_backing_file(make_context, tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    target.write_bytes(b"one\ntwo\nthree\n")
    context = make_context(target.read_bytes(), path=str(target))

    CommandMode(context).run_line("ndw\n")

    assert target.read_bytes() == b"one\nthree\n"
    assert [line.text() for line in load(str(target))] == ["one", "three"]


def test_help_goes_to_error_sink(make_context) -> None:
    context = make_context(b"x\n")

    CommandMode(context).run_line("h")

    usage = context.errors.getvalue().decode()
    assert "'q' (quit): quit the editor.\n" in usage
    assert output_of(context) == b""


def test_text_after_line_terminator_is_ignored(make_context) -> None:
    context = make_context(b"x\n")

    result = CommandMode(context).run_line("p\np")

    assert result == Continue(executed=1)
    assert output_of(context) == b"x\n"


def test_insert_then_list_in_one_line(make_context) -> None:
    context = make_context(b"", b"a\n", b"b\n", b"c\n", b"\n", interrupt_on=4)

    result = CommandMode(context).run_line("il\n")

    assert result == Continue(executed=2)
    assert output_of(context) == b"a\nb\nc\n"
