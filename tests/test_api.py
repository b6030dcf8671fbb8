import pytest
from fastapi.testclient import TestClient

from api import create_app
from core.service import GalleryService


@pytest.fixture
def service(settings, nested_tree):
    settings.config_path.write_text('{"gallery_name": "Test Gallery"}', encoding="utf-8")
    return GalleryService(settings)


@pytest.fixture
def client(service):
    return TestClient(create_app(service))


def test_service_query_surface(service):
    assert service.get_all_gallery_paths() == ["/", "/A", "/A/B"]
    assert service.get_gallery_config().gallery_name == "Test Gallery"
    assert service.get_gallery_data("/A").images_count == 1


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_config_endpoint(client):
    payload = client.get("/config").json()

    assert payload["gallery_name"] == "Test Gallery"
    assert payload["gallery_alignment"] == "center"


def test_paths_endpoint(client):
    assert client.get("/paths").json() == ["/", "/A", "/A/B"]


def test_gallery_endpoints_match_indexer(client, service):
    root = client.get("/gallery")
    nested = client.get("/gallery/A/B")

    assert root.status_code == 200
    assert root.json() == service.get_gallery_data("/").to_dict()
    assert nested.json() == service.get_gallery_data("A/B").to_dict()
    assert nested.json()["parentPath"] == "/A"


def test_missing_gallery_returns_empty_shape(client):
    response = client.get("/gallery/does/not/exist")

    assert response.status_code == 200
    payload = response.json()
    assert payload["folders"] == []
    assert payload["images"] == []
    assert payload["parentPath"] == "/does/not"
