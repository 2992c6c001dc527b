"""Edit-session variants and the render model handed to the presentation layer."""

from dataclasses import dataclass, field

from contactbook.domain import Contact

SUBMIT_LABEL_ADD = "Add contact"
SUBMIT_LABEL_SAVE = "Save"


@dataclass(frozen=True)
class Idle:
    """The form represents a new contact."""

    state: str = field(default="idle", init=False)


@dataclass(frozen=True)
class Editing:
    """The form represents an in-progress edit of target_id."""

    target_id: str
    state: str = field(default="editing", init=False)


EditSession = Idle | Editing


@dataclass(frozen=True)
class RenderModel:
    """Snapshot emitted after every state-changing event."""

    contacts: list[Contact]
    error_message: str | None
    editing: EditSession
    form_name: str = ""
    form_phone: str = ""

    @property
    def is_editing(self) -> bool:
        return isinstance(self.editing, Editing)

    @property
    def submit_label(self) -> str:
        return SUBMIT_LABEL_SAVE if self.is_editing else SUBMIT_LABEL_ADD

    @property
    def show_cancel(self) -> bool:
        return self.is_editing
