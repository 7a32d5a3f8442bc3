# tests/test_commands.py

from __future__ import annotations

from todolist.cli.bootstrap import start_screen
from todolist.cli.commands import CommandRegistry, registry
from todolist.connectors.console_connector import handle_line, run_console_loop
from todolist.core import strings
from todolist.notifications.dispatcher import PermissionState


def test_command_registry_routes_2_and_3_params(state) -> None:
    reg = CommandRegistry()
    called = {"h2": 0, "h3": 0}

    def h2(state, args):
        called["h2"] += 1
        return "h2"

    def h3(state, args, emit):
        called["h3"] += 1
        if emit is not None:
            emit("note")
        return "h3"

    reg.register("a", h2, "a")
    reg.register("b", h3, "b", aliases=["bee"])

    notes: list[str] = []
    assert reg.handle(state, "/a x") == "h2"
    assert reg.handle(state, "/BEE y", emit=notes.append) == "h3"
    assert called == {"h2": 1, "h3": 1}
    assert notes == ["note"]


def test_command_registry_unknown_and_non_command(state) -> None:
    reg = CommandRegistry()
    assert reg.handle(state, "hello") is None
    assert "Unknown command" in (reg.handle(state, "/nope") or "")
    assert "Empty command" in (reg.handle(state, "/") or "")


def test_plain_text_adds_task(state, host) -> None:
    output = handle_line(state, "call mom")

    assert output is not None and "call mom" in output
    assert [t.description for t in state.task_store.list_all()] == ["call mom"]
    assert host.posted[0].title == strings.TASK_ADDED_TITLE


def test_blank_line_is_ignored(state) -> None:
    assert handle_line(state, "   ") is None
    assert state.task_store.count() == 0


def test_delete_by_row_number(state) -> None:
    handle_line(state, "first")
    handle_line(state, "second")
    # Newest first: row 1 is "second".
    output = registry.handle(state, "/del 1")

    assert output is not None
    assert [t.description for t in state.controller.tasks] == ["first"]
    assert [t.description for t in state.task_store.list_all()] == ["first"]


def test_delete_rejects_bad_rows(state) -> None:
    handle_line(state, "only")

    assert "Usage" in (registry.handle(state, "/del") or "")
    assert "Not a row number" in (registry.handle(state, "/rm abc") or "")
    assert "No task at row 5" in (registry.handle(state, "/delete 5") or "")
    assert "No task at row 0" in (registry.handle(state, "/del 0") or "")
    assert state.task_store.count() == 1


def test_refresh_picks_up_external_rows(state) -> None:
    state.task_store.create("from elsewhere", 1)
    assert len(state.controller) == 0

    emitted: list[str] = []
    output = registry.handle(state, "/refresh", emit=emitted.append)

    assert output is not None and "from elsewhere" in output
    assert len(state.controller) == 1
    assert emitted and "Reloading" in emitted[0]


def test_list_and_status(state) -> None:
    assert registry.handle(state, "/ls") == strings.EMPTY_LIST
    handle_line(state, "thing")

    status = registry.handle(state, "/status") or ""
    assert "Tasks stored: 1" in status
    assert "task_notification_channel" in status
    assert "granted" in status


def test_help_lists_commands(state) -> None:
    text = registry.handle(state, "/help") or ""
    for name in ("/list", "/refresh", "/del", "/status", "/exit"):
        assert name in text


def test_start_screen_loads_and_requests_permission(state, host, permissions) -> None:
    state.task_store.create("A", 100)
    state.task_store.create("B", 200)
    permissions.state = PermissionState.NOT_REQUESTED

    start_screen(state)

    assert [t.description for t in state.controller.tasks] == ["B", "A"]
    assert len(host.channels) == 1
    assert permissions.requests == 1


def test_console_loop_runs_until_exit(state, capsys) -> None:
    lines = iter(["buy milk", "buy milk", "", "/del 2", "/exit", "never read"])

    run_console_loop(state, reader=lambda _: next(lines))

    assert len(state.controller) == 1
    assert state.task_store.count() == 1
    assert "buy milk" in capsys.readouterr().out


def test_console_loop_stops_on_eof(state) -> None:
    def reader(_: str) -> str:
        raise EOFError

    run_console_loop(state, reader=reader)
    assert len(state.controller) == 0
