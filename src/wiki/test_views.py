"""Tests for wiki views."""

from unittest.mock import patch

import pytest
from django.test import Client

from wiki.services.page_storage import Page, get_storage_service
from wiki.services.renderer import TemplateRenderError


@pytest.fixture
def client():
    return Client()


@pytest.fixture
def storage():
    return get_storage_service()


class TestViewPage:
    """Tests for GET /view/<title>."""

    def test_view_existing_page(self, client, storage):
        storage.save(Page(title="FrontPage", body=b"Welcome to the wiki."))

        response = client.get("/view/FrontPage")

        assert response.status_code == 200
        content = response.content.decode()
        assert "<h1>FrontPage</h1>" in content
        assert "Welcome to the wiki." in content
        assert 'href="/edit/FrontPage"' in content

    def test_view_missing_page_redirects_to_edit(self, client):
        """Viewing a page that does not exist sends the user to create it."""
        response = client.get("/view/NoSuchPage")

        assert response.status_code == 302
        assert response.url == "/edit/NoSuchPage"

    def test_view_escapes_body(self, client, storage):
        storage.save(Page(title="Xss", body=b"<b>bold</b>"))

        response = client.get("/view/Xss")
        assert b"&lt;b&gt;bold&lt;/b&gt;" in response.content

    def test_view_rejects_post(self, client, storage):
        storage.save(Page(title="FrontPage", body=b"x"))

        response = client.post("/view/FrontPage")
        assert response.status_code == 405

    def test_view_template_failure_returns_500(self, client, storage):
        storage.save(Page(title="FrontPage", body=b"x"))

        with patch("wiki.services.renderer.PageRenderer.render", side_effect=TemplateRenderError("boom")):
            response = client.get("/view/FrontPage")

        assert response.status_code == 500
        assert response.content == b"boom"
        assert response["Content-Type"].startswith("text/plain")


class TestEditPage:
    """Tests for GET /edit/<title>."""

    def test_edit_existing_page(self, client, storage):
        storage.save(Page(title="FrontPage", body=b"Old text"))

        response = client.get("/edit/FrontPage")

        assert response.status_code == 200
        content = response.content.decode()
        assert "Editing FrontPage" in content
        assert 'action="/save/FrontPage"' in content
        assert ">Old text</textarea>" in content

    def test_edit_missing_page_shows_empty_form(self, client):
        """Editing a nonexistent page renders an empty form with the title."""
        response = client.get("/edit/BrandNew")

        assert response.status_code == 200
        content = response.content.decode()
        assert "Editing BrandNew" in content
        assert 'action="/save/BrandNew"' in content
        assert '<textarea name="body" rows="20" cols="80"></textarea>' in content

    def test_edit_does_not_create_file(self, client, storage):
        client.get("/edit/BrandNew")
        assert storage.exists("BrandNew") is False

    def test_edit_template_failure_returns_500(self, client):
        with patch("wiki.services.renderer.PageRenderer.render", side_effect=TemplateRenderError("bad template")):
            response = client.get("/edit/FrontPage")

        assert response.status_code == 500
        assert response.content == b"bad template"


class TestSavePage:
    """Tests for POST /save/<title>."""

    def test_save_creates_page_and_redirects(self, client, storage):
        response = client.post("/save/NewPage", {"body": "Fresh content"})

        assert response.status_code == 302
        assert response.url == "/view/NewPage"
        assert storage.load("NewPage").body == b"Fresh content"

    def test_save_overwrites_existing_page(self, client, storage):
        storage.save(Page(title="FrontPage", body=b"First version, rather long"))

        client.post("/save/FrontPage", {"body": "Second"})

        assert storage.load("FrontPage").body == b"Second"

    def test_save_missing_body_stores_empty_page(self, client, storage):
        response = client.post("/save/Blank", {})

        assert response.status_code == 302
        assert storage.load("Blank").body == b""

    def test_save_keeps_whitespace(self, client, storage):
        client.post("/save/Spaced", {"body": "  indented\r\nline  \n"})
        assert storage.load("Spaced").body == b"  indented\r\nline  \n"

    def test_save_encodes_utf8(self, client, storage):
        client.post("/save/Unicode", {"body": "naïve café"})
        assert storage.load("Unicode").body == "naïve café".encode("utf-8")

    def test_save_then_view_shows_message(self, client):
        response = client.post("/save/FrontPage", {"body": "Hello"}, follow=True)

        assert response.status_code == 200
        assert response.redirect_chain == [("/view/FrontPage", 302)]
        content = response.content.decode()
        assert "Page saved." in content
        assert "Hello" in content

    def test_save_rejects_get(self, client, storage):
        response = client.get("/save/FrontPage")

        assert response.status_code == 405
        assert storage.exists("FrontPage") is False

    def test_save_invalid_body_returns_400(self, client, storage):
        response = client.post("/save/FrontPage", {"body": "nul\x00byte"})

        assert response.status_code == 400
        assert storage.exists("FrontPage") is False

    def test_save_io_failure_returns_500(self, client):
        with patch(
            "wiki.services.page_storage.PageStorageService.save",
            side_effect=PermissionError("Permission denied"),
        ):
            response = client.post("/save/FrontPage", {"body": "x"})

        assert response.status_code == 500
        assert b"Permission denied" in response.content


class TestInvalidPaths:
    """Paths outside the three page routes are not found."""

    @pytest.mark.parametrize(
        "path",
        [
            "/view/",
            "/view/..%2Fsecret",
            "/view/../secret",
            "/view/a/b",
            "/view/page.txt",
            "/view/dash-ed",
            "/view/Page/",
            "/edit/with%20space",
            "/delete/FrontPage",
            "/FrontPage",
        ],
    )
    def test_invalid_get_paths_404(self, client, path):
        response = client.get(path)
        assert response.status_code == 404

    @pytest.mark.parametrize("path", ["/save/..%2Fescape", "/save/a.b", "/save/"])
    def test_invalid_save_paths_404(self, client, storage, path):
        response = client.post(path, {"body": "x"})

        assert response.status_code == 404
        assert storage.list_pages() == []
