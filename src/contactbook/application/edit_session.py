"""
Edit-session state machine using xstate-python.

Transitions live in edit_session_machine.json (standard XState JSON: id,
initial, states with on: { EVENT: target }), so the same definition can be
opened in Stately Studio. The controller keeps the target id; the machine
only decides idle vs editing.
"""

import json
import os
from pathlib import Path

from xstate.machine import Machine

IDLE = "idle"
EDITING = "editing"

BEGIN_EDIT = "BEGIN_EDIT"
SUBMITTED = "SUBMITTED"
CANCEL = "CANCEL"
TARGET_GONE = "TARGET_GONE"

# Edges the controller relies on: (from state, event) -> to state.
REQUIRED_EDGES = {
    (IDLE, BEGIN_EDIT): EDITING,
    (EDITING, BEGIN_EDIT): EDITING,
    (EDITING, SUBMITTED): IDLE,
    (EDITING, CANCEL): IDLE,
    (EDITING, TARGET_GONE): IDLE,
}


def get_machine_path() -> Path:
    default = Path(__file__).resolve().parent / "edit_session_machine.json"
    path = os.environ.get("CONTACTBOOK_MACHINE_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return default


def load_machine(path: Path | None = None) -> dict:
    """Read and check an edit-session machine config. Raises ValueError when an edge is missing."""
    if path is None:
        path = get_machine_path()
    config = json.loads(path.read_text(encoding="utf-8"))
    if "initial" not in config or "states" not in config:
        raise ValueError("Machine must have 'initial' and 'states'")
    if config["initial"] != IDLE:
        raise ValueError(f"Machine must start in '{IDLE}'")
    states = config["states"]
    for (source, event), target in REQUIRED_EDGES.items():
        if source not in states:
            raise ValueError(f"Machine must define state '{source}'")
        edge = (states[source].get("on") or {}).get(event)
        if edge != target:
            raise ValueError(f"Machine state '{source}' must go to '{target}' on {event}")
    return config


class EditSessionMachine:
    """One xstate Machine for one config; answers 'where does this event lead?'."""

    def __init__(self, config: dict) -> None:
        self._config = config
        self._machine = Machine(config)

    @classmethod
    def from_path(cls, path: Path | None = None) -> "EditSessionMachine":
        return cls(load_machine(path))

    @property
    def initial(self) -> str:
        return self._config["initial"]

    def next_state(self, state_value: str, event: str) -> str:
        """Return the state after event; the same state when the event does not apply."""
        state = self._machine.state_from(state_value)
        return self._machine.transition(state, event).value
