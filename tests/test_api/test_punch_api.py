"""Tests for the punch session REST API and WebSocket."""

import pytest
from fastapi import WebSocketDisconnect


API = "/api/v1/punch"


def receive_until(ws, predicate, limit: int = 200) -> dict:
    """Read messages until one matches, skipping frames already in flight."""
    for _ in range(limit):
        message = ws.receive_json()
        if predicate(message):
            return message
    raise AssertionError("no matching message")


@pytest.fixture
def session(client) -> dict:
    """A freshly created session payload."""
    response = client.post(f"{API}/sessions")
    assert response.status_code == 201
    return response.json()


class TestRouterOrder:
    """Tests for how the routers are mounted."""

    def test_health_not_shadowed_by_static_file(self, client, static_dir):
        """API routes win over a static file with the same name."""
        (static_dir / "health").write_text("shadow")
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_api_not_shadowed(self, client):
        """Punch routes live under /api/v1/punch."""
        response = client.get(f"{API}/sessions")
        assert response.status_code == 200
        assert isinstance(response.json(), list)

    def test_websocket_not_shadowed(self, client):
        """The punch WebSocket is reachable past the catch-all."""
        with client.websocket_connect("/ws/punch/not-a-uuid") as ws:
            assert ws.receive_json()["type"] == "error"


class TestMetadata:
    """Tests for parameter and preset listings."""

    def test_parameters(self, client):
        """All eleven parameters are listed with their ranges."""
        data = client.get(f"{API}/parameters").json()
        assert len(data) == 11
        assert data["elbow_rotation"]["max"] == 540
        assert data["elbow_initial_angle"]["min"] == -150
        assert data["hip_length"]["group"] == "length"

    def test_presets(self, client):
        """All four presets are listed."""
        data = client.get(f"{API}/presets").json()
        assert set(data) == {"jab", "cross", "hook", "uppercut"}
        assert data["cross"]["shoulder_rotation"] == 200


class TestStatelessPose:
    """Tests for POST /punch/pose."""

    def test_straight_arm(self, client):
        """Paused at zero, the fist is 65cm past the shoulder."""
        response = client.post(f"{API}/pose", json={
            "parameters": {"upper_arm_length": 35, "forearm_length": 30},
            "animation": {"is_playing": False},
        })
        assert response.status_code == 200
        pose = response.json()
        assert pose["fist"]["x"] == pytest.approx(pose["shoulder"]["x"] + 65)
        assert pose["fist"]["y"] == pytest.approx(pose["shoulder"]["y"])

    def test_half_turn(self, client):
        """Hip at 20°/s after 9s points the other way."""
        response = client.post(f"{API}/pose", json={
            "parameters": {"hip_rotation": 20},
            "animation": {"is_playing": True, "elapsed_time": 9},
        })
        pose = response.json()
        assert pose["hip"]["end"]["x"] == pytest.approx(-10)
        assert pose["hip"]["start"]["x"] == pytest.approx(10)

    def test_center_offsets_target(self, client):
        """Target sits 50cm above the requested centre."""
        response = client.post(f"{API}/pose", json={"center": {"x": 400, "y": 300}})
        assert response.json()["target"] == {"x": 400, "y": 250}

    def test_negative_elapsed_time_rejected(self, client):
        """Elapsed time cannot be negative."""
        response = client.post(f"{API}/pose", json={"animation": {"elapsed_time": -1}})
        assert response.status_code == 422


class TestSessions:
    """Tests for session lifecycle."""

    def test_create_defaults(self, session):
        """New sessions are stopped at time zero."""
        assert session["animation"]["is_playing"] is False
        assert session["animation"]["elapsed_time"] == 0
        assert session["selected_punch"] == "jab"
        assert session["parameters"]["hip_rotation"] == 45

    def test_create_with_preset(self, client):
        """A preset can be applied at creation."""
        response = client.post(f"{API}/sessions", json={"punch": "cross"})
        assert response.status_code == 201
        params = response.json()["parameters"]
        assert (params["hip_rotation"], params["spine_spring"],
                params["shoulder_rotation"], params["elbow_rotation"]) == (40, 50, 200, 300)

    def test_create_clamps_parameters(self, client):
        """Out-of-range parameters are clamped to the slider bounds."""
        response = client.post(f"{API}/sessions", json={"parameters": {"forearm_length": 500}})
        assert response.json()["parameters"]["forearm_length"] == 50

    def test_create_unknown_preset(self, client):
        """Unknown presets are 404."""
        response = client.post(f"{API}/sessions", json={"punch": "haymaker"})
        assert response.status_code == 404

    def test_list_and_get(self, client, session):
        """Created sessions are listed and retrievable."""
        assert session["session_id"] in client.get(f"{API}/sessions").json()
        response = client.get(f"{API}/sessions/{session['session_id']}")
        assert response.status_code == 200
        assert response.json()["session_id"] == session["session_id"]

    def test_invalid_id(self, client):
        """Malformed ids are 400."""
        assert client.get(f"{API}/sessions/not-a-uuid").status_code == 400

    def test_missing_session(self, client):
        """Unknown ids are 404."""
        missing = "00000000-0000-0000-0000-000000000000"
        assert client.get(f"{API}/sessions/{missing}").status_code == 404
        assert client.post(f"{API}/sessions/{missing}/play").status_code == 404

    def test_delete(self, client, session):
        """Deleted sessions are gone."""
        url = f"{API}/sessions/{session['session_id']}"
        assert client.delete(url).status_code == 204
        assert client.get(url).status_code == 404
        assert client.delete(url).status_code == 404


class TestSessionCommands:
    """Tests for play / pause / reset / parameters / presets on a session."""

    def test_play_pause_reset(self, client, session):
        """Play advances time, pause keeps it, reset rewinds it."""
        url = f"{API}/sessions/{session['session_id']}"

        played = client.post(f"{url}/play").json()
        assert played["animation"]["is_playing"] is True
        assert played["animation"]["elapsed_time"] > 0

        paused = client.post(f"{url}/pause").json()
        assert paused["animation"]["is_playing"] is False
        held = paused["animation"]["elapsed_time"]
        assert held > 0
        assert client.get(url).json()["animation"]["elapsed_time"] == held

        reset = client.post(f"{url}/reset").json()
        assert reset["animation"]["is_playing"] is False
        assert reset["animation"]["elapsed_time"] == 0

    def test_set_parameter(self, client, session):
        """Parameter changes are applied and clamped."""
        url = f"{API}/sessions/{session['session_id']}/parameters"
        response = client.put(url, json={"name": "hip_rotation", "value": 999})
        assert response.status_code == 200
        assert response.json()["parameters"]["hip_rotation"] == 180

    def test_set_initial_angle_moves_pose(self, client, session):
        """Initial angles set the stopped angle used by the pose."""
        url = f"{API}/sessions/{session['session_id']}"
        data = client.put(f"{url}/parameters", json={"name": "shoulder_initial_angle", "value": 90}).json()
        assert data["animation"]["shoulder_angle_deg"] == 90
        pose = client.get(f"{url}/pose").json()
        assert pose["elbow"]["x"] == pytest.approx(pose["shoulder"]["x"])
        assert pose["elbow"]["y"] == pytest.approx(pose["shoulder"]["y"] + 35)

    def test_set_unknown_parameter(self, client, session):
        """Unknown parameter names fail validation."""
        url = f"{API}/sessions/{session['session_id']}/parameters"
        response = client.put(url, json={"name": "zoom", "value": 2})
        assert response.status_code == 422

    def test_apply_preset(self, client, session):
        """Presets overwrite rotations but keep angles and time."""
        url = f"{API}/sessions/{session['session_id']}"
        before = client.get(url).json()
        data = client.post(f"{url}/preset", json={"punch": "uppercut"}).json()
        assert data["selected_punch"] == "uppercut"
        assert data["parameters"]["elbow_rotation"] == 280
        assert data["animation"] == before["animation"]

    def test_apply_unknown_preset(self, client, session):
        """Unknown presets are 404."""
        url = f"{API}/sessions/{session['session_id']}/preset"
        assert client.post(url, json={"punch": "haymaker"}).status_code == 404


class TestWebSocket:
    """Tests for the /ws/punch WebSocket."""

    def test_invalid_session(self, client):
        """Malformed ids get an error message."""
        with client.websocket_connect("/ws/punch/not-a-uuid") as ws:
            message = ws.receive_json()
        assert message["type"] == "error"
        assert message["code"] == "INVALID_SESSION_ID"

    def test_missing_session(self, client):
        """Unknown sessions get an error message."""
        with client.websocket_connect("/ws/punch/00000000-0000-0000-0000-000000000000") as ws:
            message = ws.receive_json()
        assert message["code"] == "SESSION_NOT_FOUND"

    def test_sync_and_commands(self, client, session):
        """State sync on connect, frames on renders, errors on bad input."""
        with client.websocket_connect(f"/ws/punch/{session['session_id']}") as ws:
            sync = ws.receive_json()
            assert sync["type"] == "state_sync"
            assert sync["payload"]["session_id"] == session["session_id"]

            ws.send_json({"type": "set_parameter", "name": "forearm_length", "value": 40})
            frame = ws.receive_json()
            assert frame["type"] == "frame"
            assert "fist" in frame["payload"]["pose"]

            ws.send_json({"type": "apply_preset", "punch": "hook"})
            synced = ws.receive_json()
            assert synced["type"] == "state_sync"
            assert synced["payload"]["parameters"]["hip_rotation"] == 60

            ws.send_json({"type": "apply_preset", "punch": "haymaker"})
            assert ws.receive_json()["code"] == "UNKNOWN_PRESET"

            ws.send_json({"type": "kick"})
            assert ws.receive_json()["code"] == "UNKNOWN_MESSAGE"

            ws.send_text("{not json")
            assert ws.receive_json()["code"] == "INVALID_JSON"

            ws.send_json({"type": "play"})
            frame = ws.receive_json()
            assert frame["type"] == "frame"
            assert frame["payload"]["animation"]["is_playing"] is True

    def test_pause_reset_and_sync(self, client, session):
        """Pause holds time, request_sync reports it, reset rewinds with a frame."""
        with client.websocket_connect(f"/ws/punch/{session['session_id']}") as ws:
            assert ws.receive_json()["type"] == "state_sync"

            ws.send_json({"type": "play"})
            receive_until(ws, lambda m: m["type"] == "frame")

            ws.send_json({"type": "pause"})
            ws.send_json({"type": "request_sync"})
            synced = receive_until(ws, lambda m: m["type"] == "state_sync")
            assert synced["payload"]["animation"]["is_playing"] is False
            assert synced["payload"]["animation"]["elapsed_time"] > 0

            ws.send_json({"type": "reset"})
            frame = receive_until(
                ws, lambda m: m["type"] == "frame" and not m["payload"]["animation"]["is_playing"]
            )
            assert frame["payload"]["animation"]["elapsed_time"] == 0

    def test_disconnect_pauses_session(self, client, session):
        """Closing the socket stops the animation."""
        url = f"{API}/sessions/{session['session_id']}"
        with client.websocket_connect(f"/ws/punch/{session['session_id']}") as ws:
            ws.receive_json()
            ws.send_json({"type": "play"})
            receive_until(ws, lambda m: m["type"] == "frame")

        animation = client.get(url).json()["animation"]
        assert animation["is_playing"] is False
        assert animation["elapsed_time"] > 0

    def test_deleted_session_refuses_commands(self, client, session):
        """Once deleted, an open socket cannot restart the animation."""
        with client.websocket_connect(f"/ws/punch/{session['session_id']}") as ws:
            ws.receive_json()
            assert client.delete(f"{API}/sessions/{session['session_id']}").status_code == 204

            ws.send_json({"type": "play"})
            message = ws.receive_json()
            assert message["type"] == "error"
            assert message["code"] == "SESSION_NOT_FOUND"
            with pytest.raises(WebSocketDisconnect):
                ws.receive_json()

        assert session["session_id"] not in client.get(f"{API}/sessions").json()
