"""Render a RenderModel as the HTML directory page (form, error line, contact table)."""

from html import escape

from contactbook.application import RenderModel
from contactbook.domain import Contact

EMPTY_MESSAGE = "No contacts yet, add your first contact"
DELETE_PROMPT = "Delete this contact?"

_SCRIPT = """
async function post(url, body) {
  await fetch(url, {
    method: 'POST',
    headers: {'Content-Type': 'application/json'},
    body: JSON.stringify(body || {}),
  });
  window.location.reload();
}
document.getElementById('add-form').addEventListener('submit', (e) => {
  e.preventDefault();
  const fd = new FormData(e.target);
  post('/directory/submit', {name: fd.get('name'), phone: fd.get('phone')});
});
document.querySelectorAll('button.edit').forEach((btn) => {
  btn.addEventListener('click', () => post('/directory/edit/' + encodeURIComponent(btn.dataset.id)));
});
document.querySelectorAll('button.delete').forEach((btn) => {
  btn.addEventListener('click', () => {
    const confirmed = window.confirm(btn.dataset.prompt);
    post('/directory/delete/' + encodeURIComponent(btn.dataset.id), {confirmed: confirmed});
  });
});
const cancel = document.querySelector('button.cancel');
if (cancel) { cancel.addEventListener('click', () => post('/directory/cancel')); }
"""


def avatar_initial(name: str | None) -> str:
    """First character of the trimmed name, upper-cased; '?' when there is none."""
    name = (name or "").strip()
    return name[0].upper() if name else "?"


def _row(contact: Contact) -> str:
    cid = escape(contact.id)
    return (
        f'<tr data-id="{cid}">'
        f'<td><div class="name-cell"><div class="avatar">{escape(avatar_initial(contact.name))}</div>'
        f'<div><div class="name">{escape(contact.name)}</div>'
        f'<div class="muted">{escape(contact.phone)}</div></div></div></td>'
        f"<td>{escape(contact.phone)}</td>"
        f'<td><button class="btn edit" data-id="{cid}">Edit</button> '
        f'<button class="btn delete" data-id="{cid}" data-prompt="{escape(DELETE_PROMPT)}">Delete</button></td>'
        "</tr>"
    )


def render_table(contacts: list[Contact]) -> str:
    if not contacts:
        return f'<div class="empty">{escape(EMPTY_MESSAGE)}</div>'
    rows = "".join(_row(c) for c in contacts)
    return (
        '<table class="contact-table" aria-label="Contacts">'
        "<thead><tr><th>Name</th><th>Phone</th><th>Actions</th></tr></thead>"
        f"<tbody>{rows}</tbody></table>"
    )


def render_form(model: RenderModel) -> str:
    cancel = (
        ' <button type="button" class="btn cancel">Cancel</button>' if model.show_cancel else ""
    )
    error = ""
    if model.error_message:
        error = f'<div class="error-message visible" id="form-error">{escape(model.error_message)}</div>'
    return (
        '<form id="add-form">'
        f'<input name="name" placeholder="Name" value="{escape(model.form_name)}">'
        f'<input name="phone" placeholder="Phone" value="{escape(model.form_phone)}">'
        f'<button type="submit">{escape(model.submit_label)}</button>{cancel}'
        f"</form>{error}"
    )


def render_page(model: RenderModel) -> str:
    return (
        "<!doctype html><html><head><meta charset=\"utf-8\"><title>Contacts</title></head>"
        f"<body><h1>Contacts</h1>{render_form(model)}"
        f'<div id="contact-list">{render_table(model.contacts)}</div>'
        f"<script>{_SCRIPT}</script></body></html>"
    )
