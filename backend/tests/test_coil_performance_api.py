"""
API-level tests for the coil performance endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from coilcalc.main import app

client = TestClient(app)

HEATING = {
    "outside_temp": 10.0,
    "outside_humidity": 60.0,
    "volume_flow": 2000.0,
    "target_temp": 22.0,
    "supply_temp": 60.0,
    "return_temp": 40.0,
}

COOLING = {
    "outside_temp": 30.0,
    "outside_humidity": 70.0,
    "volume_flow": 2000.0,
    "target_temp": 12.0,
    "supply_temp": 6.0,
    "return_temp": 12.0,
}


class TestHealth:
    def test_health(self):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "service": "coil-calc"}


class TestCoilPerformanceEndpoint:
    def test_heating(self):
        resp = client.post("/api/v1/coil-performance", json=HEATING)
        assert resp.status_code == 200
        data = resp.json()
        assert data["operation_mode"] == "heating"
        assert data["is_heating"] is True
        assert data["latent_power"] == 0.0
        assert data["sensible_power"] == pytest.approx(8.07, abs=0.01)
        assert data["water_volume_flow"] == pytest.approx(0.347, abs=0.002)
        assert data["warnings"] == []
        assert len(data["summary"]) == 8

    def test_cooling_with_condensation(self):
        resp = client.post("/api/v1/coil-performance", json=COOLING)
        assert resp.status_code == 200
        data = resp.json()
        assert data["operation_mode"] == "cooling"
        assert data["condensation"] is True
        assert data["final_humidity"] == 100.0
        assert data["latent_power"] < 0

    def test_equal_water_temperatures_null(self):
        resp = client.post(
            "/api/v1/coil-performance",
            json={**HEATING, "supply_temp": 40.0, "return_temp": 40.0},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["water_volume_flow"] is None
        assert data["recommended_pipe_diameter"] is None
        tiles = {tile["key"]: tile for tile in data["summary"]}
        assert tiles["water_volume_flow"]["value"] == "N/A"
        assert len(data["warnings"]) == 1

    def test_no_result_is_422(self):
        resp = client.post(
            "/api/v1/coil-performance",
            json={**HEATING, "outside_humidity": 0.0},
        )
        assert resp.status_code == 422
        assert "no result" in resp.json()["detail"]

    def test_clamp_inputs(self):
        resp = client.post(
            "/api/v1/coil-performance",
            json={**HEATING, "outside_temp": 80.0, "clamp_inputs": True},
        )
        assert resp.status_code == 200
        assert resp.json()["inputs"]["outside_temp"] == 50.0

    def test_without_clamp_inputs_pass_through(self):
        resp = client.post(
            "/api/v1/coil-performance",
            json={**HEATING, "volume_flow": 500000.0},
        )
        assert resp.status_code == 200
        assert resp.json()["inputs"]["volume_flow"] == 500000.0

    def test_missing_field(self):
        body = dict(HEATING)
        del body["return_temp"]
        resp = client.post("/api/v1/coil-performance", json=body)
        assert resp.status_code == 422


class TestDefaultsAndRanges:
    def test_defaults(self):
        resp = client.get("/api/v1/coil-performance/defaults")
        assert resp.status_code == 200
        assert resp.json() == HEATING

    def test_input_ranges(self):
        resp = client.get("/api/v1/coil-performance/input-ranges")
        assert resp.status_code == 200
        data = resp.json()
        assert set(data) == set(HEATING)
        assert data["volume_flow"] == {
            "min": 100.0, "max": 150000.0, "step": 500.0, "unit": "m³/h",
        }
        assert data["outside_temp"]["min"] == -30.0


class TestInputTypes:
    def test_string_value_rejected(self):
        resp = client.post(
            "/api/v1/coil-performance",
            json={**HEATING, "outside_humidity": "60"},
        )
        assert resp.status_code == 422

    def test_bool_value_rejected(self):
        resp = client.post(
            "/api/v1/coil-performance",
            json={**HEATING, "outside_temp": True},
        )
        assert resp.status_code == 422

    def test_integer_values_accepted(self):
        body = {key: int(value) for key, value in HEATING.items()}
        resp = client.post("/api/v1/coil-performance", json=body)
        assert resp.status_code == 200
        assert resp.json()["operation_mode"] == "heating"
