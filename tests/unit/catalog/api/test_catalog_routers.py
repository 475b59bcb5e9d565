"""HTTP-level tests for the catalog routers."""

import pytest
from fastapi.testclient import TestClient


@pytest.fixture
def acme_api(client: TestClient) -> dict:
    response = client.post("/products", json={"name": "acme"})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def v1_api(client: TestClient, acme_api: dict) -> dict:
    response = client.post("/products/acme/releases", json={"name": "v1"})
    assert response.status_code == 201
    return response.json()


class TestProductRoutes:
    """Test the /products endpoints."""

    def test_create_and_get(self, client: TestClient, acme_api: dict):
        response = client.get("/products/acme")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == acme_api["id"]
        assert body["name"] == "acme"
        assert body["created_at"] is not None

    def test_list(self, client: TestClient, acme_api: dict):
        response = client.get("/products")

        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["acme"]

    def test_duplicate_is_409(self, client: TestClient, acme_api: dict):
        response = client.post("/products", json={"name": "acme"})

        assert response.status_code == 409
        assert "error" in response.json()

    def test_missing_name_is_400(self, client: TestClient):
        response = client.post("/products", json={})

        assert response.status_code == 400
        assert response.json() == {
            "error": 'Missing field "Name" required when creating a new product'
        }

    def test_malformed_body_is_400(self, client: TestClient):
        response = client.post(
            "/products", content="not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("Malformed request")

    def test_unknown_is_404(self, client: TestClient):
        response = client.get("/products/ghost")

        assert response.status_code == 404
        assert response.json() == {"error": 'Product "ghost" not found'}

    def test_rename(self, client: TestClient, acme_api: dict):
        response = client.put("/products/acme", json={"name": "acme-ng"})

        assert response.status_code == 200
        assert response.json()["name"] == "acme-ng"
        assert client.get("/products/acme").status_code == 404

    def test_delete_is_204(self, client: TestClient, v1_api: dict):
        response = client.delete("/products/acme")

        assert response.status_code == 204
        assert response.content == b""
        assert client.get("/releases").json() == []


class TestReleaseRoutes:
    """Test the nested release endpoints and /releases."""

    def test_create_sets_product_from_path(
        self, client: TestClient, acme_api: dict, v1_api: dict
    ):
        assert v1_api["product_id"] == acme_api["id"]
        assert v1_api["tarball_link"] is None

    def test_create_for_unknown_product(self, client: TestClient):
        response = client.post("/products/ghost/releases", json={"name": "v1"})

        assert response.status_code == 404

    def test_duplicate_is_409(self, client: TestClient, v1_api: dict):
        response = client.post("/products/acme/releases", json={"name": "v1"})

        assert response.status_code == 409

    def test_get_includes_images(self, client: TestClient, v1_api: dict):
        client.post(
            "/images",
            json={
                "image_type": "docker",
                "software_name": "acme",
                "image_name": "acme:1",
                "release_ids": [v1_api["id"]],
            },
        )

        response = client.get("/products/acme/releases/v1")

        assert response.status_code == 200
        images = response.json()["images"]
        assert [image["image_name"] for image in images] == ["acme:1"]
        assert images[0]["releases"] is None

    def test_get_unknown_release(self, client: TestClient, acme_api: dict):
        response = client.get("/products/acme/releases/ghost")

        assert response.status_code == 404
        assert response.json()["error"].startswith("Error finding release")

    def test_update_tarball(self, client: TestClient, v1_api: dict):
        response = client.put(
            "/products/acme/releases/v1", json={"tarball_link": "http://dl/v1.tgz"}
        )

        assert response.status_code == 200
        assert response.json()["tarball_link"] == "http://dl/v1.tgz"

    def test_update_without_data_is_400(self, client: TestClient, v1_api: dict):
        response = client.put("/products/acme/releases/v1", json={})

        assert response.status_code == 400
        assert response.json() == {"error": "No new data to update release with"}

    def test_list_for_product_and_all(self, client: TestClient, v1_api: dict):
        nested = client.get("/products/acme/releases")
        everything = client.get("/releases")

        assert nested.status_code == 200
        assert [r["name"] for r in nested.json()] == ["v1"]
        assert everything.json() == nested.json()

    def test_delete(self, client: TestClient, v1_api: dict):
        response = client.delete("/products/acme/releases/v1")

        assert response.status_code == 204
        assert client.get("/products/acme/releases/v1").status_code == 404


class TestImageRoutes:
    """Test the /images endpoints."""

    @pytest.fixture
    def image_api(self, client: TestClient, v1_api: dict) -> dict:
        response = client.post(
            "/images",
            json={
                "image_type": "docker",
                "software_name": "acme",
                "image_name": "acme:1",
                "release_ids": [v1_api["id"]],
            },
        )
        assert response.status_code == 201
        return response.json()

    def test_create_returns_linked_releases(self, image_api: dict, v1_api: dict):
        assert [r["id"] for r in image_api["releases"]] == [v1_api["id"]]
        assert "release_ids" not in image_api

    def test_create_missing_field_is_400(self, client: TestClient):
        response = client.post("/images", json={"image_type": "docker"})

        assert response.status_code == 400
        assert response.json() == {
            "error": 'Missing field "Software Name" required when creating a new image'
        }

    def test_create_with_unknown_release_is_404(self, client: TestClient):
        response = client.post(
            "/images",
            json={
                "image_type": "docker",
                "software_name": "acme",
                "image_name": "acme:1",
                "release_ids": [999],
            },
        )

        assert response.status_code == 404
        assert client.get("/images").json() == []

    def test_get_and_list(self, client: TestClient, image_api: dict):
        single = client.get(f"/images/{image_api['id']}")
        listing = client.get("/images")

        assert single.status_code == 200
        assert single.json()["releases"][0]["images"] is None
        assert [i["id"] for i in listing.json()] == [image_api["id"]]

    def test_get_unknown_is_404(self, client: TestClient):
        assert client.get("/images/999").status_code == 404

    def test_non_integer_id_is_400(self, client: TestClient):
        assert client.get("/images/abc").status_code == 400

    def test_update_uses_path_id(self, client: TestClient, image_api: dict):
        response = client.put(
            f"/images/{image_api['id']}", json={"id": 999, "image_name": "acme:2"}
        )

        assert response.status_code == 200
        assert response.json()["id"] == image_api["id"]
        assert response.json()["image_name"] == "acme:2"

    def test_releases_of_image(self, client: TestClient, image_api: dict, v1_api: dict):
        response = client.get(f"/images/{image_api['id']}/releases")

        assert response.status_code == 200
        assert [r["name"] for r in response.json()] == ["v1"]

    def test_delete(self, client: TestClient, image_api: dict):
        response = client.delete(f"/images/{image_api['id']}")

        assert response.status_code == 204
        assert client.get("/products/acme/releases/v1").json()["images"] == []


class TestHealthRoutes:
    def test_liveness(self, client: TestClient):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_readiness(self, client: TestClient):
        response = client.get("/health/ready")

        assert response.status_code == 200
        assert response.json()["checks"]["database"]["status"] == "healthy"

    def test_readiness_fails_when_database_down(self, client: TestClient, monkeypatch):
        deps = client.app.state.app_dependencies
        monkeypatch.setattr(deps.database_service, "health_check", lambda: False)

        response = client.get("/health/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"

    def test_request_id_is_echoed(self, client: TestClient):
        response = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"
