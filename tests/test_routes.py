import pytest
from fastapi.testclient import TestClient

from wheelpaths.server import app


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("WHEELPATHS_UNITS", "WHEELPATHS_WHEELBASE_WIDTH", "WHEELPATHS_WHEELBASE_LENGTH"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def client():
    return TestClient(app)


def _center(n=10, **extra):
    return [
        dict({"t": 0.02 * k, "x": 0.03 * k, "y": 0.0, "heading": 0.0, "velocity": 1.5}, **extra)
        for k in range(n)
    ]


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_expand_tank(client):
    resp = client.post("/expand", json={
        "center": _center(),
        "topology": "tank",
        "geometry": {"wheelbase_width": 2.0},
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["topology"] == "tank"
    assert body["sample_count"] == 10
    assert set(body["wheels"]) == {"frontLeft", "frontRight"}

    left = body["wheels"]["frontLeft"]
    assert len(left) == 10
    assert all(s["y"] == pytest.approx(1.0) for s in left)
    assert all(s["velocity"] == pytest.approx(1.5) for s in left)
    assert [s["t"] for s in left] == [s["t"] for s in body["wheels"]["frontRight"]]


def test_expand_swerve_uses_default_geometry(client):
    resp = client.post("/expand", json={"center": _center(), "topology": "swerve"})
    assert resp.status_code == 200
    wheels = resp.json()["wheels"]
    assert set(wheels) == {"frontLeft", "frontRight", "backLeft", "backRight"}
    assert wheels["backRight"][0]["x"] == pytest.approx(-1.0)
    assert wheels["backRight"][0]["y"] == pytest.approx(-1.0)
    assert wheels["backRight"][0]["steering_angle"] == pytest.approx(0.0, abs=1e-9)


def test_expand_delta_time_samples(client):
    center = [
        {"dt": 0.05, "x": 0.1 * k, "y": 0.0, "heading": 0.0, "velocity": 2.0, "position": 0.1 * k}
        for k in range(4)
    ]
    resp = client.post("/expand", json={"center": center, "geometry": {"wheelbase_width": 1.0}})
    assert resp.status_code == 200
    times = [s["t"] for s in resp.json()["wheels"]["frontLeft"]]
    assert times == pytest.approx([0.0, 0.05, 0.1, 0.15])


def test_expand_short_center(client):
    resp = client.post("/expand", json={"center": _center(1)})
    assert resp.status_code == 200
    assert resp.json()["wheels"] == {}


def test_expand_mixed_time_shapes_rejected(client):
    center = _center(3)
    del center[1]["t"]
    center[1]["dt"] = 0.02
    resp = client.post("/expand", json={"center": center})
    assert resp.status_code == 400


def test_expand_non_increasing_time_rejected(client):
    center = _center(3)
    center[2]["t"] = 0.0
    resp = client.post("/expand", json={"center": center})
    assert resp.status_code == 400
    assert "strictly increasing" in resp.json()["detail"]


def test_expand_swerve_needs_length(client):
    resp = client.post("/expand", json={
        "center": _center(),
        "topology": "swerve",
        "geometry": {"wheelbase_width": 2.0},
    })
    assert resp.status_code == 400


def test_expand_non_positive_width_is_invalid(client):
    resp = client.post("/expand", json={"center": _center(), "geometry": {"wheelbase_width": 0.0}})
    assert resp.status_code == 422


def test_position_chart(client):
    resp = client.post("/charts/position", json={
        "waypoints": [{"x": 0.0, "y": 0.0}, {"x": 0.27, "y": 0.0}],
        "center": _center(),
        "show_center": True,
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["units"] == "feet"
    assert body["labels"]["x"] == "X-Position (ft)"
    assert body["bounds"]["x_upper"] == 32
    assert [s["name"] for s in body["series"]] == [
        "Left Trajectory", "Right Trajectory", "Center Trajectory", "Waypoints",
    ]
    assert body["series"][-1]["points"] == [[0.0, 0.0], [0.27, 0.0]]


def test_velocity_chart_in_meters(client):
    resp = client.post("/charts/velocity", json={
        "waypoints": [{"x": 0.0, "y": 0.0}, {"x": 0.27, "y": 0.0}],
        "center": _center(),
        "units": "meters",
        "topology": "swerve",
        "geometry": {"wheelbase_width": 0.5, "wheelbase_length": 0.5},
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["labels"]["velocity"] == "Velocity (m/s)"
    assert len(body["series"]) == 4
    assert body["series"][0]["points"][1] == pytest.approx([0.02, 1.5])


def test_list_units(client):
    units = {u["unit"]: u for u in client.get("/units").json()["units"]}
    assert set(units) == {"feet", "meters", "inches"}
    assert units["inches"]["granularity"] == 6.0
    assert units["meters"]["bounds"]["y_upper"] == 8.23


def test_snap(client):
    assert client.post("/units/snap", json={"value": 1.3, "units": "feet"}).json()["snapped"] == 1.5
    assert client.post("/units/snap", json={"value": 1.2}).json()["snapped"] == 1.0
    resp = client.post("/units/snap", json={"value": 1.234, "units": "cubits"})
    assert resp.json()["snapped"] == pytest.approx(1.23)


def test_place_rejects_out_of_bounds(client):
    resp = client.post("/units/place", json={"x": 40.0, "y": 5.0, "units": "feet"})
    assert resp.status_code == 200
    assert resp.json() == {"accepted": False, "waypoint": None}


def test_place_accepts_snapped_point(client):
    resp = client.post("/units/place", json={"x": 10.2, "y": 5.1})
    assert resp.json() == {"accepted": True, "waypoint": {"x": 10.0, "y": 5.0, "heading": 0.0}}


def test_place_unknown_unit_snaps_to_hundredth(client):
    resp = client.post("/units/place", json={"x": 1.234, "y": 2.346, "units": "cubits"})
    assert resp.json() == {"accepted": True, "waypoint": {"x": 1.23, "y": 2.35, "heading": 0.0}}


def test_place_unknown_unit_uses_configured_field(client, monkeypatch):
    monkeypatch.setenv("WHEELPATHS_UNITS", "meters")
    resp = client.post("/units/place", json={"x": 9.0, "y": 8.5, "units": "cubits"})
    assert resp.json() == {"accepted": False, "waypoint": None}


@pytest.mark.parametrize("path, payload", [
    ("/units/snap", {"value": 1.3}),
    ("/units/place", {"x": 1.0, "y": 1.0}),
])
def test_malformed_unit_setting_is_bad_request(client, monkeypatch, path, payload):
    monkeypatch.setenv("WHEELPATHS_UNITS", "furlongs")
    resp = client.post(path, json=payload)
    assert resp.status_code == 400
    assert "WHEELPATHS_UNITS" in resp.json()["detail"]
