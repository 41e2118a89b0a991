import numpy as np
import pytest

from planetview import vecmath
from planetview.camera import Camera, Movement


def _apply(matrix, point):
    p = np.append(np.asarray(point, dtype=float), 1.0)
    out = matrix @ p
    return out[:3] / out[3]


def test_default_camera_looks_down_negative_z():
    cam = Camera()
    assert np.allclose(cam.front, vecmath.vec3(0.0, 0.0, -1.0))
    assert np.allclose(cam.up, vecmath.vec3(0.0, 1.0, 0.0))
    assert cam.zoom == 45.0


def test_basis_vectors_are_orthonormal():
    cam = Camera(vecmath.vec3(1.0, 2.0, 3.0), yaw=30.0, pitch=20.0)
    for v in (cam.front, cam.right, cam.up):
        assert vecmath.length(v) == pytest.approx(1.0)
    assert vecmath.dot(cam.front, cam.right) == pytest.approx(0.0)
    assert vecmath.dot(cam.front, cam.up) == pytest.approx(0.0)
    assert vecmath.dot(cam.right, cam.up) == pytest.approx(0.0)


def test_from_scalars_matches_vector_constructor():
    a = Camera.from_scalars(0.0, 1.0, 15.0, 0.0, 1.0, 0.0, -90.0, 10.0)
    b = Camera(vecmath.vec3(0.0, 1.0, 15.0), vecmath.vec3(0.0, 1.0, 0.0), -90.0, 10.0)
    assert np.allclose(a.view_matrix(), b.view_matrix())
    assert np.allclose(a.front, b.front)


def test_view_matrix_maps_position_to_origin():
    cam = Camera(vecmath.vec3(0.0, 1.0, 15.0))
    assert np.allclose(_apply(cam.view_matrix(), cam.position), 0.0)


def test_view_matrix_puts_front_on_negative_z():
    cam = Camera(vecmath.vec3(2.0, -1.0, 4.0), yaw=10.0, pitch=-25.0)
    ahead = _apply(cam.view_matrix(), cam.position + cam.front)
    assert np.allclose(ahead[:2], 0.0)
    assert ahead[2] == pytest.approx(-1.0)


@pytest.mark.parametrize(
    "direction, attr, sign",
    [
        (Movement.FORWARD, "front", 1.0),
        (Movement.BACKWARD, "front", -1.0),
        (Movement.LEFT, "right", -1.0),
        (Movement.RIGHT, "right", 1.0),
        (Movement.UP, "world_up", 1.0),
        (Movement.DOWN, "world_up", -1.0),
    ],
)
def test_keyboard_moves_along_expected_axis(direction, attr, sign):
    cam = Camera(vecmath.vec3(0.0, 1.0, 15.0), yaw=20.0, pitch=5.0)
    start = cam.position.copy()
    cam.process_keyboard(direction, 0.5)
    expected = start + sign * getattr(cam, attr) * cam.movement_speed * 0.5
    assert np.allclose(cam.position, expected)


def test_forward_then_backward_returns_home():
    cam = Camera(vecmath.vec3(3.0, 0.0, -2.0))
    start = cam.position.copy()
    cam.process_keyboard(Movement.FORWARD, 0.3)
    cam.process_keyboard(Movement.BACKWARD, 0.3)
    assert np.allclose(cam.position, start)


def test_mouse_movement_scales_by_sensitivity():
    cam = Camera()
    cam.process_mouse_movement(100.0, 50.0)
    assert cam.yaw == pytest.approx(-90.0 + 100.0 * cam.mouse_sensitivity)
    assert cam.pitch == pytest.approx(50.0 * cam.mouse_sensitivity)


def test_pitch_is_clamped():
    cam = Camera()
    cam.process_mouse_movement(0.0, 5000.0)
    assert cam.pitch == 89.0
    cam.process_mouse_movement(0.0, -50000.0)
    assert cam.pitch == -89.0


def test_pitch_unconstrained_when_asked():
    cam = Camera()
    cam.process_mouse_movement(0.0, 1000.0, constrain_pitch=False)
    assert cam.pitch == pytest.approx(1000.0 * cam.mouse_sensitivity)


def test_scroll_changes_zoom_and_clamps():
    cam = Camera()
    cam.process_mouse_scroll(5.0)
    assert cam.zoom == pytest.approx(45.0 - 5.0)
    cam.process_mouse_scroll(1000.0)
    assert cam.zoom == 1.0
    cam.process_mouse_scroll(-1000.0)
    assert cam.zoom == 60.0