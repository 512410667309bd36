# tests/api/test_shell.py
import pytest
from fastapi.testclient import TestClient

from api.main import app

import building_shell_generator

# Create test client
client = TestClient(app)

# Test API key
TEST_API_KEY = "dev_key"

MM = 1 / 304.8


@pytest.fixture
def api_headers():
    """Fixture for API headers with authentication."""
    return {"X-API-Key": TEST_API_KEY}


@pytest.fixture
def shell_request():
    """Fixture for a default shell with a roof on a 4 m top level."""
    return {
        "length": 10000,
        "width": 5000,
        "units": "mm",
        "top_level_elevation": 4000 * MM,
        "wall_thickness": 200 * MM,
        "roof_thickness": 400 * MM,
    }


def test_root_is_open():
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["status"] == "online"


def test_health_check():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {
        "status": "healthy",
        "version": building_shell_generator.__version__,
    }


def test_auth_required(shell_request):
    """Test that authentication is required for protected endpoints."""
    # Missing header fails request validation
    response = client.post("/shell/plan", json=shell_request)
    assert response.status_code == 422

    # Try with invalid API key
    response = client.post("/shell/plan", json=shell_request,
                           headers={"X-API-Key": "invalid_key"})
    assert response.status_code == 401


def test_plan_full_shell(api_headers, shell_request):
    response = client.post("/shell/plan", json=shell_request, headers=api_headers)
    assert response.status_code == 200

    data = response.json()
    assert len(data["outline"]) == 5
    assert len(data["walls"]) == 4
    assert [o["opening_type"] for o in data["openings"]] == ["door", "window", "window", "window"]
    assert data["roof_profile"]["ridge"]["z"] - data["roof_profile"]["corner1"]["z"] == pytest.approx(1500 * MM)
    assert data["roof_extrusion"]["start"] == pytest.approx(-100 * MM)


def test_plan_walls_only(api_headers):
    payload = {"length": 6, "width": 4, "units": "m", "include_openings": False, "include_roof": False}
    response = client.post("/shell/plan", json=payload, headers=api_headers)
    assert response.status_code == 200

    data = response.json()
    assert data["openings"] == []
    assert data["roof_profile"] is None
    assert data["outline"][2]["x"] == pytest.approx(3 / 0.3048)


def test_plan_is_deterministic(api_headers, shell_request):
    first = client.post("/shell/plan", json=shell_request, headers=api_headers).json()
    second = client.post("/shell/plan", json=shell_request, headers=api_headers).json()
    assert first == second


def test_zero_length_rejected(api_headers, shell_request):
    shell_request["length"] = 0
    response = client.post("/shell/plan", json=shell_request, headers=api_headers)

    assert response.status_code == 422
    error = response.json()["detail"]
    assert error["code"] == "invalid_dimension"
    assert error["extra"]["name"] == "length"


def test_roof_requires_top_level_elevation(api_headers):
    response = client.post("/shell/plan", json={"length": 8000, "width": 4000}, headers=api_headers)
    assert response.status_code == 422


def test_unknown_units_rejected(api_headers, shell_request):
    shell_request["units"] = "cubits"
    response = client.post("/shell/plan", json=shell_request, headers=api_headers)
    assert response.status_code == 422


@pytest.mark.parametrize("roof_height", ["Infinity", "-Infinity", "NaN"])
def test_non_finite_roof_height_rejected(api_headers, roof_height):
    # Python's json accepts these literals; build the body by hand
    body = (
        '{"length": 10000, "width": 5000, "top_level_elevation": 13.0, '
        f'"roof_height": {roof_height}}}'
    )
    response = client.post(
        "/shell/plan",
        content=body,
        headers={**api_headers, "Content-Type": "application/json"},
    )

    assert response.status_code == 422
    error = response.json()["detail"]
    assert error["code"] == "invalid_dimension"
    assert error["extra"]["name"] == "roof_height"
