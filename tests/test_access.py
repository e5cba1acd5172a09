# tests/test_access.py

"""The authorization stage is a pass-through that can be swapped out."""

import pytest
from fastapi import HTTPException

from conftest import image_part
from utils.access import authorize_request


@pytest.fixture
def deny_all(client):
    from main import app

    def _deny():
        raise HTTPException(status_code=403, detail="Forbidden")

    app.dependency_overrides[authorize_request] = _deny
    yield client
    app.dependency_overrides.pop(authorize_request, None)


def test_placeholder_allows_everything(client):
    assert client.get("/admin/products").status_code == 200
    r = client.post("/api/products", data={"name": "Pencil"}, files=image_part())
    assert r.status_code == 200


def test_admin_and_write_routes_go_through_access_stage(deny_all, upload_dir):
    assert deny_all.get("/admin/products").status_code == 403
    assert deny_all.get("/admin/login").status_code == 403
    assert deny_all.post("/api/products", files=image_part()).status_code == 403
    assert deny_all.put(f"/api/products/{'0' * 32}").status_code == 403
    assert deny_all.delete(f"/api/products/{'0' * 32}").status_code == 403
    # Rejected before the upload is written
    assert list(upload_dir.iterdir()) == []


def test_read_routes_stay_public(deny_all):
    assert deny_all.get("/").status_code == 200
    assert deny_all.get("/api/products").status_code == 200
