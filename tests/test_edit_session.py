"""Tests for the XState edit-session machine."""

import json

import pytest

from contactbook.application.edit_session import (
    BEGIN_EDIT,
    CANCEL,
    EDITING,
    IDLE,
    SUBMITTED,
    TARGET_GONE,
    EditSessionMachine,
    get_machine_path,
    load_machine,
)


def _write_machine(tmp_path, states):
    path = tmp_path / "machine.json"
    path.write_text(json.dumps({"id": "m", "initial": "idle", "states": states}))
    return path


def test_load_machine():
    path = get_machine_path()
    assert path.name == "edit_session_machine.json"
    machine = load_machine(path)
    assert machine["initial"] == IDLE
    assert set(machine["states"]) == {IDLE, EDITING}


def test_load_machine_missing_state(tmp_path):
    path = _write_machine(tmp_path, {"idle": {"on": {"BEGIN_EDIT": "editing"}}})
    with pytest.raises(ValueError, match="editing"):
        load_machine(path)


def test_load_machine_missing_begin_edit_edge(tmp_path):
    path = _write_machine(
        tmp_path,
        {
            "idle": {},
            "editing": {
                "on": {
                    "BEGIN_EDIT": "editing",
                    "SUBMITTED": "idle",
                    "CANCEL": "idle",
                    "TARGET_GONE": "idle",
                }
            },
        },
    )
    with pytest.raises(ValueError, match="BEGIN_EDIT"):
        EditSessionMachine.from_path(path)


def test_machine_path_from_env(tmp_path, monkeypatch):
    target = tmp_path / "custom.json"
    monkeypatch.setenv("CONTACTBOOK_MACHINE_PATH", str(target))
    assert get_machine_path() == target.resolve()


def test_initial_state():
    assert EditSessionMachine.from_path().initial == IDLE


def test_begin_edit_from_idle():
    machine = EditSessionMachine.from_path()
    assert machine.next_state(IDLE, BEGIN_EDIT) == EDITING


@pytest.mark.parametrize("event", [SUBMITTED, CANCEL, TARGET_GONE])
def test_leaving_edit_mode(event):
    machine = EditSessionMachine.from_path()
    assert machine.next_state(EDITING, event) == IDLE


@pytest.mark.parametrize("event", [SUBMITTED, CANCEL, TARGET_GONE])
def test_idle_ignores_exit_events(event):
    machine = EditSessionMachine.from_path()
    assert machine.next_state(IDLE, event) == IDLE


def test_begin_edit_while_editing_stays_editing():
    machine = EditSessionMachine.from_path()
    assert machine.next_state(EDITING, BEGIN_EDIT) == EDITING


def test_machines_are_independent():
    first = EditSessionMachine.from_path()
    second = EditSessionMachine(load_machine(get_machine_path()))
    assert first.next_state(IDLE, BEGIN_EDIT) == EDITING
    assert second.next_state(EDITING, CANCEL) == IDLE
