# tests/test_frontend.py

"""Front-end documents and static asset hosting."""


def test_shop_page(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert "<h1>Shop</h1>" in r.text


def test_admin_products_page(client):
    r = client.get("/admin/products")
    assert r.status_code == 200
    assert "product-form" in r.text


def test_admin_login_page(client):
    r = client.get("/admin/login")
    assert r.status_code == 200
    assert "Admin login" in r.text


def test_frontend_tree_is_served_statically(client):
    r = client.get("/adminpanel/products.html")
    assert r.status_code == 200


def test_unknown_upload_is_404(client):
    assert client.get("/uploads/missing.png").status_code == 404


def test_missing_document_is_404(client, monkeypatch, tmp_path):
    from config import settings

    monkeypatch.setattr(settings, "FRONTEND_DIR", tmp_path)
    assert client.get("/admin/login").status_code == 404
