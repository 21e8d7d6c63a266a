"""Tests for the form view of the Django UI."""

import os

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "django_ui.settings")
django.setup(set_prefix=False)

from django.test import RequestFactory  # noqa: E402

from conftest import scenario_routes  # noqa: E402
from django_ui import views  # noqa: E402
from services.credential_store import CredentialStore  # noqa: E402


@pytest.fixture
def ui(make_service, tmp_path, monkeypatch):
    svc, gh, llm = make_service(scenario_routes(), ["Fixes null check in parser.", "Adds retry to fetch helper."])
    store = CredentialStore(tmp_path / "credentials.json")
    monkeypatch.setattr(views, "_svc", svc)
    monkeypatch.setattr(views, "_credentials", store)
    monkeypatch.setattr(views, "_busy", False)
    return store, gh, llm


def _form(**overrides):
    data = {"owner": "acme", "repo": "widget", "reference": "42", "api_key": "sk-test", "model": "fast"}
    data.update(overrides)
    return data


@pytest.mark.asyncio
async def test_get_prefills_stored_key(ui):
    store, gh, _ = ui
    store.set("sk-remembered")

    resp = await views.index(RequestFactory().get("/"))

    html = resp.content.decode()
    assert resp.status_code == 200
    assert 'value="sk-remembered"' in html
    assert gh.calls == []


@pytest.mark.asyncio
async def test_post_renders_report_and_stores_key(ui):
    store, _, llm = ui

    resp = await views.index(RequestFactory().post("/", data=_form()))

    html = resp.content.decode()
    assert "- Fixes null check in parser.\n- Adds retry to fetch helper." in html
    assert store.get() == "sk-test"
    assert len(llm.requests) == 2


@pytest.mark.asyncio
async def test_post_while_busy_is_rejected(ui, monkeypatch):
    _, gh, _ = ui
    monkeypatch.setattr(views, "_busy", True)

    resp = await views.index(RequestFactory().post("/", data=_form()))

    assert "already being processed" in resp.content.decode()
    assert gh.calls == []


@pytest.mark.asyncio
async def test_missing_fields(ui):
    _, gh, _ = ui

    resp = await views.index(RequestFactory().post("/", data=_form(reference="")))

    assert "Please fill in" in resp.content.decode()
    assert gh.calls == []
