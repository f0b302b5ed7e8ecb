import math

import numpy as np
import pytest

from orbitview.transforms import identity, look_at, normalize, perspective, rotate, translate


def _apply(matrix, point):
    result = matrix @ np.append(np.asarray(point, dtype=float), 1.0)
    return result[:3] / result[3]


def test_identity_leaves_points_unchanged():
    point = np.array([3.0, -2.0, 7.5, 1.0])
    np.testing.assert_allclose(identity() @ point, point)


def test_translate_moves_origin_by_offset():
    offset = [1.0, 2.0, 3.0]
    np.testing.assert_allclose(_apply(translate(identity(), offset), [0, 0, 0]), offset)


def test_translations_compose():
    a, b = np.array([1.0, -4.0, 2.0]), np.array([0.5, 3.0, -1.0])
    combined = translate(translate(identity(), a), b)
    np.testing.assert_allclose(combined, translate(identity(), a + b))


def test_rotate_quarter_turn_about_z():
    matrix = rotate(identity(), math.pi / 2, [0, 0, 1])
    np.testing.assert_allclose(_apply(matrix, [1, 0, 0]), [0, 1, 0], atol=1e-12)


def test_rotation_is_orthonormal():
    matrix = rotate(identity(), 0.7, [1.0, 2.0, -0.5])[:3, :3]
    np.testing.assert_allclose(matrix @ matrix.T, np.identity(3), atol=1e-12)
    assert np.linalg.det(matrix) == pytest.approx(1.0)


def test_rotation_preserves_axis():
    axis = normalize([0.3, -1.0, 2.0])
    matrix = rotate(identity(), 1.3, axis)
    np.testing.assert_allclose(_apply(matrix, axis), axis, atol=1e-12)


def test_rotation_and_inverse_cancel():
    axis = [0.0, -1.0, 0.0]
    matrix = rotate(rotate(identity(), 0.9, axis), -0.9, axis)
    np.testing.assert_allclose(matrix, identity(), atol=1e-12)


def test_perspective_maps_near_and_far_planes():
    near, far = 0.1, 100.0
    matrix = perspective(math.radians(45.0), 16 / 9, near, far)
    assert _apply(matrix, [0, 0, -near])[2] == pytest.approx(-1.0)
    assert _apply(matrix, [0, 0, -far])[2] == pytest.approx(1.0)


def test_perspective_invalid_arguments():
    with pytest.raises(ValueError):
        perspective(1.0, 0.0, 0.1, 100.0)
    with pytest.raises(ValueError):
        perspective(1.0, 1.0, 5.0, 5.0)


def test_look_at_puts_eye_at_origin_and_target_ahead():
    eye, center = np.array([0.0, 0.0, 50.0]), np.array([3.0, 1.0, 10.0])
    view = look_at(eye, center, [0, 1, 0])
    np.testing.assert_allclose(_apply(view, eye), np.zeros(3), atol=1e-9)
    target = _apply(view, center)
    np.testing.assert_allclose(target[:2], np.zeros(2), atol=1e-9)
    assert target[2] == pytest.approx(-np.linalg.norm(center - eye))


def test_normalize_gives_unit_vector():
    vector = [3.0, -7.0, 2.0]
    result = normalize(vector)
    assert np.linalg.norm(result) == pytest.approx(1.0)
    assert np.cross(result, vector) == pytest.approx(np.zeros(3))


def test_normalize_zero_vector_rejected():
    with pytest.raises(ValueError):
        normalize([0.0, 0.0, 0.0])


def test_translate_rejects_wrong_shape():
    with pytest.raises(ValueError):
        translate(identity(), [1.0, 2.0])