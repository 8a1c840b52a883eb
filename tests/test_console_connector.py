# tests/test_console_connector.py

from __future__ import annotations

from collections.abc import Iterable

import pytest

from tasklist.cli import commands
from tasklist.connectors import console_connector
from tasklist.core.state import AppState


def _feed(monkeypatch: pytest.MonkeyPatch, lines: Iterable[str]) -> None:
    it = iter(lines)

    def fake_input(prompt: str = "") -> str:
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_console_session_add_edit_delete(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _feed(
        monkeypatch,
        [
            "Buy milk",
            "/add",
            "",
            "/edit #1",
            "Buy oat milk",
            "/update",
            "/exit",
            "/add never reached",
        ],
    )

    console_connector.run_console_loop(state)

    assert [t.title for t in state.store.tasks] == ["Buy oat milk"]
    assert not state.store.is_editing
    out = capsys.readouterr().out
    assert 'Added "Buy milk".' in out
    assert 'Updated "Buy oat milk".' in out
    assert "Edit Task" in out


def test_console_stops_on_eof(state: AppState, monkeypatch: pytest.MonkeyPatch) -> None:
    _feed(monkeypatch, ["/add a"])
    console_connector.run_console_loop(state)
    assert [t.title for t in state.store.tasks] == ["a"]


def test_console_survives_crashing_handler(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    def boom(state, args):
        raise RuntimeError("boom")

    monkeypatch.setitem(commands.registry._handlers, "list", boom)
    _feed(monkeypatch, ["/list", "/add still works"])

    console_connector.run_console_loop(state)

    out = capsys.readouterr().out
    assert "Internal error while handling a command." in out
    assert [t.title for t in state.store.tasks] == ["still works"]


def test_console_keeps_typed_spacing(state: AppState, monkeypatch: pytest.MonkeyPatch) -> None:
    _feed(monkeypatch, ["Buy  oat   milk", "/desc line  with   gaps", "/add"])

    console_connector.run_console_loop(state)

    assert [(t.title, t.description) for t in state.store.tasks] == [
        ("Buy  oat   milk", "line  with   gaps")
    ]


def test_console_plain_line_reaches_draft_untouched(
    state: AppState, monkeypatch: pytest.MonkeyPatch
) -> None:
    _feed(monkeypatch, ["  padded  title "])
    console_connector.run_console_loop(state)
    assert state.store.draft.title == "  padded  title "


def test_console_draws_form_once_per_field_edit(
    state: AppState, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    _feed(monkeypatch, ["Buy milk", "/desc 2 litres"])

    console_connector.run_console_loop(state)

    out = capsys.readouterr().out
    # initial screen + one redraw per input line
    assert out.count("== Add New Task ==") == 3
