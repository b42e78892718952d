"""Shared pytest fixtures for Punch Calculator tests."""

import pytest
from fastapi.testclient import TestClient

from punchcalc.animation import AnimationController, ManualFrameScheduler
from punchcalc.config import AppConfig, set_config
from punchcalc.kinematics import PunchParameters, Scene


# =============================================================================
# Kinematics Fixtures
# =============================================================================


@pytest.fixture
def default_parameters() -> PunchParameters:
    """Default parameter set (hip 45, spine 45, shoulder 180, elbow 270)."""
    return PunchParameters()


@pytest.fixture
def stopped_scene(default_parameters) -> Scene:
    """Stopped scene at time zero with all angles at zero."""
    return Scene.initial(default_parameters)


# =============================================================================
# Animation Fixtures
# =============================================================================


@pytest.fixture
def scheduler() -> ManualFrameScheduler:
    """Frame scheduler stepped by the test."""
    return ManualFrameScheduler()


@pytest.fixture
def rendered() -> list:
    """Collects (pose, scene) pairs passed to the render callback."""
    return []


@pytest.fixture
def controller(stopped_scene, scheduler, rendered) -> AnimationController:
    """Controller on a manual scheduler that records every render."""
    return AnimationController(
        scene=stopped_scene,
        scheduler=scheduler,
        tick_seconds=0.016,
        on_render=lambda pose, scene: rendered.append((pose, scene)),
    )


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def static_dir(tmp_path):
    """Static directory with a few assets."""
    root = tmp_path / "static"
    root.mkdir()
    (root / "index.html").write_text("<html><body>Punch Calculator</body></html>")
    (root / "app.js").write_text("console.log('Punch Calculator loaded!');")
    (root / "style.css").write_text("body { background: #000; }")
    (root / "presets.json").write_text('{"jab": 20}')
    (root / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (root / "data.bin").write_bytes(b"\x00\x01\x02")
    (root / "assets").mkdir()
    return root


@pytest.fixture
def client(static_dir):
    """Test client with the static directory pointed at static_dir."""
    from punchcalc.api.main import app

    set_config(AppConfig(static_dir=static_dir, frame_interval=0.01))
    with TestClient(app) as test_client:
        yield test_client
    set_config(None)
