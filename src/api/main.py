"""
FastAPI backend: directory intents as JSON endpoints plus an HTML table view.
Run with uvicorn: uvicorn api.main:app --reload
"""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel

from api.render import render_page
from contactbook.application import DirectoryController, KeyValueStore, RenderModel
from contactbook.infrastructure import (
    DEFAULT_STORAGE_KEY,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    KeyValueContactRepository,
)

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)


def _get_store() -> KeyValueStore:
    path = os.environ.get("CONTACTBOOK_STORE_PATH", "").strip()
    if path:
        logger.info("Contact directory stored in %s", path)
        return JsonFileKeyValueStore(Path(path))
    logger.info("CONTACTBOOK_STORE_PATH not set; contact directory kept in memory")
    return InMemoryKeyValueStore()


def _get_storage_key() -> str:
    return os.environ.get("CONTACTBOOK_STORAGE_KEY", "").strip() or DEFAULT_STORAGE_KEY


def _build_controller() -> DirectoryController:
    repo = KeyValueContactRepository(_get_store(), storage_key=_get_storage_key())
    controller = DirectoryController(repo)
    controller.load_and_render()
    return controller


def get_controller(app: FastAPI) -> DirectoryController:
    if getattr(app.state, "controller", None) is None:
        app.state.controller = _build_controller()
    return app.state.controller


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.controller = _build_controller()
    yield


app = FastAPI(title="Contactbook API", lifespan=lifespan)


# --- REST: health ---


@app.get("/health")
def health():
    return {"status": "ok"}


# --- REST: directory ---


class SubmitBody(BaseModel):
    name: str | None = None
    phone: str | None = None


class DeleteBody(BaseModel):
    confirmed: bool = False


class ContactItem(BaseModel):
    id: str
    name: str
    phone: str


class EditingItem(BaseModel):
    state: str
    target_id: str | None = None


class RenderModelResponse(BaseModel):
    contacts: list[ContactItem]
    error_message: str | None = None
    editing: EditingItem
    form_name: str = ""
    form_phone: str = ""
    submit_label: str
    show_cancel: bool


def _to_response(model: RenderModel) -> RenderModelResponse:
    return RenderModelResponse(
        contacts=[ContactItem(id=c.id, name=c.name, phone=c.phone) for c in model.contacts],
        error_message=model.error_message,
        editing=EditingItem(
            state=model.editing.state,
            target_id=getattr(model.editing, "target_id", None),
        ),
        form_name=model.form_name,
        form_phone=model.form_phone,
        submit_label=model.submit_label,
        show_cancel=model.show_cancel,
    )


@app.get("/directory")
def get_directory(request: Request) -> RenderModelResponse:
    controller = get_controller(request.app)
    return _to_response(controller.load_and_render())


@app.post("/directory/submit")
def submit(body: SubmitBody, request: Request) -> RenderModelResponse:
    controller = get_controller(request.app)
    return _to_response(controller.submit(body.name, body.phone))


@app.post("/directory/edit/{contact_id}")
def begin_edit(contact_id: str, request: Request) -> RenderModelResponse:
    controller = get_controller(request.app)
    return _to_response(controller.begin_edit(contact_id))


@app.post("/directory/cancel")
def cancel_edit(request: Request) -> RenderModelResponse:
    controller = get_controller(request.app)
    return _to_response(controller.cancel_edit())


@app.post("/directory/delete/{contact_id}")
def request_delete(contact_id: str, body: DeleteBody, request: Request) -> RenderModelResponse:
    controller = get_controller(request.app)
    return _to_response(controller.request_delete(contact_id, body.confirmed))


# --- HTML view ---


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    controller = get_controller(request.app)
    return HTMLResponse(render_page(controller.render()))
