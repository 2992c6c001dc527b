"""Directory controller: edit session, validation, and render model. One intent at a time."""

import logging
import threading
from collections.abc import Callable

from contactbook.application import edit_session
from contactbook.application.dto import Editing, EditSession, Idle, RenderModel
from contactbook.application.edit_session import EditSessionMachine
from contactbook.application.errors import (
    ContactNotFound,
    PersistenceError,
    ValidationError,
)
from contactbook.application.ports import ContactRepository
from contactbook.application.validation import validate_contact_input
from contactbook.domain import Contact

logger = logging.getLogger(__name__)

CONTACT_NOT_FOUND = "contact not found"
EDIT_UNAVAILABLE = "cannot edit contact"
SAVE_FAILED = "save failed: {}"
DELETE_FAILED = "delete failed: {}"


class DirectoryController:
    """UI events -> repository -> render model.

    Every public method emits (returns, and passes to on_render) a fresh RenderModel.
    Intents are serialized: a submit or delete in flight completes before the next starts.
    on_render runs after the lock is released, so a listener may call back into the controller.
    """

    def __init__(
        self,
        repository: ContactRepository,
        *,
        on_render: Callable[[RenderModel], None] | None = None,
        machine: EditSessionMachine | None = None,
    ) -> None:
        self._repo = repository
        self._on_render = on_render
        self._machine = machine if machine is not None else EditSessionMachine.from_path()
        self._lock = threading.Lock()
        self._state = self._machine.initial
        self._target_id: str | None = None
        self._contacts: list[Contact] = []
        self._error: str | None = None
        # Raw input echoed back after a rejected submit.
        self._draft: tuple[str, str] | None = None

    @property
    def session(self) -> EditSession:
        if self._state == edit_session.EDITING and self._target_id is not None:
            return Editing(target_id=self._target_id)
        return Idle()

    def load_and_render(self) -> RenderModel:
        """Reload the directory, reconcile the edit session, clear the error, emit."""
        with self._lock:
            model = self._refresh(error=None)
        return self._publish(model)

    def render(self) -> RenderModel:
        """Emit the current model without touching the repository."""
        with self._lock:
            model = self._snapshot()
        return self._publish(model)

    def submit(self, name_raw: str | None, phone_raw: str | None) -> RenderModel:
        """Validate, then update the edited contact or add a new one."""
        with self._lock:
            model = self._submit(name_raw, phone_raw)
        return self._publish(model)

    def begin_edit(self, contact_id: str) -> RenderModel:
        """Switch the form to editing contact_id, if it is in the last-known directory."""
        with self._lock:
            model = self._begin_edit(contact_id)
        return self._publish(model)

    def cancel_edit(self) -> RenderModel:
        """Back to Idle with an empty form."""
        with self._lock:
            self._fire(edit_session.CANCEL)
            self._error = None
            self._draft = None
            model = self._snapshot()
        return self._publish(model)

    def request_delete(self, contact_id: str, confirmed: bool) -> RenderModel:
        """Delete contact_id once the caller has confirmed; otherwise emit unchanged."""
        with self._lock:
            model = self._delete(contact_id, confirmed)
        return self._publish(model)

    def _submit(self, name_raw: str | None, phone_raw: str | None) -> RenderModel:
        try:
            name, phone = validate_contact_input(name_raw, phone_raw)
        except ValidationError as e:
            logger.debug("Submit rejected: %s", e.message)
            self._error = e.message
            self._draft = (name_raw or "", phone_raw or "")
            return self._snapshot()

        target_id = self._target_id if self._state == edit_session.EDITING else None
        try:
            if target_id is not None:
                self._repo.update(target_id, name, phone)
                self._fire(edit_session.SUBMITTED)
            else:
                self._repo.add(name, phone)
        except ContactNotFound:
            logger.warning("Submit: edited contact %s no longer exists", target_id)
            self._draft = (name_raw or "", phone_raw or "")
            return self._refresh(error=CONTACT_NOT_FOUND)
        except PersistenceError as e:
            logger.warning("Submit: persistence failed: %s", e)
            self._error = SAVE_FAILED.format(e)
            self._draft = (name_raw or "", phone_raw or "")
            return self._snapshot()
        self._draft = None
        return self._refresh(error=None)

    def _begin_edit(self, contact_id: str) -> RenderModel:
        if self._find(contact_id) is None:
            self._error = CONTACT_NOT_FOUND
            return self._snapshot()
        self._fire(edit_session.BEGIN_EDIT)
        if self._state != edit_session.EDITING:
            logger.error("Edit session machine did not enter '%s' on %s", edit_session.EDITING, edit_session.BEGIN_EDIT)
            self._error = EDIT_UNAVAILABLE
            return self._snapshot()
        self._target_id = contact_id
        self._error = None
        self._draft = None
        return self._snapshot()

    def _delete(self, contact_id: str, confirmed: bool) -> RenderModel:
        if not confirmed:
            return self._snapshot()
        try:
            self._repo.remove(contact_id)
        except PersistenceError as e:
            logger.warning("Delete of %s failed: %s", contact_id, e)
            self._error = DELETE_FAILED.format(e)
            return self._snapshot()
        return self._refresh(error=None)

    def _refresh(self, error: str | None) -> RenderModel:
        self._contacts = self._repo.list()
        if self._state == edit_session.EDITING and self._find(self._target_id) is None:
            self._fire(edit_session.TARGET_GONE)
        self._error = error
        return self._snapshot()

    def _fire(self, event: str) -> None:
        self._state = self._machine.next_state(self._state, event)
        if self._state == edit_session.IDLE:
            self._target_id = None

    def _find(self, contact_id: str | None) -> Contact | None:
        for contact in self._contacts:
            if contact.id == contact_id:
                return contact
        return None

    def _snapshot(self) -> RenderModel:
        session = self.session
        target = self._find(session.target_id) if isinstance(session, Editing) else None
        if self._draft is not None:
            form_name, form_phone = self._draft
        elif target is not None:
            form_name, form_phone = target.name, target.phone
        else:
            form_name, form_phone = "", ""
        return RenderModel(
            contacts=list(self._contacts),
            error_message=self._error,
            editing=session,
            form_name=form_name,
            form_phone=form_phone,
        )

    def _publish(self, model: RenderModel) -> RenderModel:
        if self._on_render is not None:
            self._on_render(model)
        return model
