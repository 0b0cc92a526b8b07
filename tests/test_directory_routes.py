"""
HTTP tests for the directory blueprints.

Requests and responses use camelCase keys; the store underneath works in
snake_case.
"""

import pytest


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "healthy"}


def test_list_continents_envelope(client):
    response = client.get("/api/continents")
    body = response.get_json()

    assert response.status_code == 200
    assert body["success"] is True
    assert body["total"] == 5
    assert body["page"] == 1
    assert body["pageSize"] == 10
    assert [item["name"] for item in body["data"]][:2] == ["Afrique", "Asie"]
    assert "createdAt" in body["data"][0]


def test_list_cities_with_filter_and_limit(client):
    body = client.get("/api/cities?countryId=1&limit=2&page=2").get_json()

    assert body["total"] == 3
    assert body["pageSize"] == 2
    assert [city["name"] for city in body["data"]] == ["Marseille"]
    assert body["data"][0]["countryId"] == 1
    assert body["data"][0]["country"]["name"] == "France"


def test_list_ignores_unparseable_paging(client):
    body = client.get("/api/poles?page=abc&limit=-4").get_json()
    assert (body["page"], body["pageSize"]) == (1, 10)


def test_create_country(client):
    response = client.post("/api/countries", json={"name": "Italie", "continentId": 4})
    body = response.get_json()

    assert response.status_code == 201
    assert body["data"]["id"] == 5
    assert body["data"]["continentId"] == 4
    assert body["data"]["continent"]["name"] == "Europe"


@pytest.mark.parametrize(
    "url, payload, missing",
    [
        ("/api/continents", {"name": "   "}, ["name"]),
        ("/api/cities", {"name": "Nice"}, ["countryId"]),
        ("/api/churches", {"name": "Temple"}, ["address", "cityId"]),
        ("/api/departments", {"name": "Diaconie", "churchId": 1}, ["acronym"]),
        ("/api/poles", {"departmentId": 3}, ["name"]),
    ],
)
def test_create_requires_fields(client, url, payload, missing):
    response = client.post(url, json=payload)
    body = response.get_json()

    assert response.status_code == 400
    assert body["success"] is False
    assert body["missing_fields"] == missing


def test_create_without_body(client):
    response = client.post("/api/continents", data="not json", content_type="text/plain")
    assert response.status_code == 400
    assert response.get_json()["error"] == "No data provided"


def test_get_by_id(client):
    body = client.get("/api/departments/1").get_json()

    assert body["success"] is True
    assert body["data"]["church"]["id"] == 1
    assert body["data"]["pole"]["departmentId"] == 1


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_malformed_id(client, method):
    response = getattr(client, method)("/api/cities/abc", json={"name": "x"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Invalid city ID"


@pytest.mark.parametrize("method", ["get", "put", "delete"])
def test_unknown_id(client, method):
    response = getattr(client, method)("/api/churches/999", json={"name": "x"})
    assert response.status_code == 404
    assert response.get_json() == {"success": False, "error": "Church not found"}


def test_update_rejects_blank_name(client):
    response = client.put("/api/churches/1", json={"name": "  "})
    assert response.status_code == 400
    assert response.get_json()["error"] == "Church name cannot be empty"


def test_update_merges_fields(client):
    response = client.put("/api/churches/1", json={"latitude": 48.86})
    data = response.get_json()["data"]

    assert response.status_code == 200
    assert data["latitude"] == 48.86
    assert data["name"] == "Église Évangélique de Paris Centre"
    assert data["cityId"] == 1


def test_delete_blocked_returns_conflict(client):
    response = client.delete("/api/continents/4")

    assert response.status_code == 409
    assert response.get_json() == {
        "success": False,
        "error": "Cannot delete continent with associated countries",
    }
    assert client.get("/api/continents/4").status_code == 200


def test_duplicate_pole_returns_conflict(client):
    response = client.post("/api/poles", json={"name": "Pôle Bis", "departmentId": 1})

    assert response.status_code == 409
    assert response.get_json()["error"] == "Department already has a pole"


def test_delete_department_cascades_to_pole(client):
    response = client.delete("/api/departments/1")

    assert response.status_code == 200
    assert response.get_json() == {
        "success": True,
        "message": "Department deleted successfully",
    }
    assert client.get("/api/poles/1").status_code == 404


def test_map_churches(client):
    client.post(
        "/api/churches",
        json={"name": "Temple de Genève", "address": "Place du Bourg", "cityId": 5},
    )

    data = client.get("/api/map/churches?search=gen").get_json()["data"]

    assert data["located"] == []
    assert [church["name"] for church in data["unlocated"]] == ["Temple de Genève"]
    assert data["unlocated"][0]["city"]["name"] == "Genève"


def test_stats(client):
    data = client.get("/api/stats").get_json()["data"]
    assert data["country"] == 4
    assert data["locatedChurches"] == 3


def test_strict_app_rejects_unknown_parent(strict_app):
    client = strict_app.test_client()

    response = client.post("/api/cities", json={"name": "Nowhere", "countryId": 999})

    assert response.status_code == 400
    assert response.get_json()["error"] == "Referenced country_id 999 does not exist"


@pytest.mark.parametrize("value", ["abc", 1.5, True, [1]])
def test_create_rejects_malformed_parent_id(client, value):
    response = client.post("/api/cities", json={"name": "Weird", "countryId": value})

    assert response.status_code == 400
    assert response.get_json()["error"] == "Invalid country ID"
    assert client.get("/api/cities").get_json()["total"] == 6


def test_create_coerces_numeric_string_parent_id(client):
    response = client.post("/api/cities", json={"name": "Nice", "countryId": "1"})

    assert response.status_code == 201
    assert response.get_json()["data"]["countryId"] == 1
    assert response.get_json()["data"]["country"]["name"] == "France"


def test_update_rejects_malformed_parent_id(client):
    response = client.put("/api/poles/1", json={"departmentId": "x"})

    assert response.status_code == 400
    assert response.get_json()["error"] == "Invalid department ID"
    assert client.get("/api/poles/1").get_json()["data"]["departmentId"] == 1


def test_timestamps_are_serialized_in_utc(client):
    data = client.post("/api/continents", json={"name": "Antarctique"}).get_json()["data"]
    assert data["createdAt"].endswith("+00:00")
    assert data["updatedAt"].endswith("+00:00")
