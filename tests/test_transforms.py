import math

import numpy as np
import pytest

from cgengine.transforms import (
    AnimatedRotation,
    AnimatedTranslation,
    Rotation,
    Scale,
    Transform,
    Translation,
    TRSTransform,
    rotation_matrix,
)

SQUARE = [(1, 0, 0), (0, 0, 1), (-1, 0, 0), (0, 0, -1)]


def test_base_transform_is_identity_and_static():
    transform = Transform()
    transform.update(12.0)
    assert np.allclose(transform.matrix, np.identity(4))


def test_translation_moves_origin():
    transform = Translation(1, 2, 3)
    assert np.allclose(transform.matrix @ [0, 0, 0, 1], [1, 2, 3, 1])


def test_scale_multiplies_components():
    transform = Scale(2, 3, 4)
    assert np.allclose(transform.matrix @ [1, 1, 1, 1], [2, 3, 4, 1])


def test_rotation_matrix_is_orthonormal_and_keeps_axis():
    axis = np.array([1.0, 2.0, 2.0]) / 3.0
    matrix = rotation_matrix(0.7, axis)
    r = matrix[:3, :3]
    assert np.allclose(r @ r.T, np.identity(3))
    assert np.linalg.det(r) == pytest.approx(1.0)
    assert np.allclose(r @ axis, axis)


def test_rotation_quarter_turn_about_z():
    transform = Rotation(90, (0, 0, 1))
    assert np.allclose(transform.matrix @ [1, 0, 0, 1], [0, 1, 0, 1])


def test_rotation_rejects_nan_angle():
    with pytest.raises(ValueError):
        Rotation(float("nan"), (0, 1, 0))


def test_rotation_rejects_zero_axis():
    with pytest.raises(ValueError):
        rotation_matrix(1.0, (0, 0, 0))


def test_animated_rotation_full_turn_is_identity():
    transform = AnimatedRotation(4.0, (0, 1, 0))
    transform.update(4.0)
    assert np.allclose(transform.matrix, np.identity(4))


def test_animated_rotation_matches_static_rotation():
    animated = AnimatedRotation(8.0, (0, 0, 1), time=2.0)
    assert np.allclose(animated.matrix, Rotation(90, (0, 0, 1)).matrix)


def test_animated_rotation_clockwise_is_inverse():
    ccw = AnimatedRotation(5.0, (1, 1, 0), time=1.3)
    cw = AnimatedRotation(5.0, (1, 1, 0), clockwise=True, time=1.3)
    assert np.allclose(ccw.matrix @ cw.matrix, np.identity(4))


def test_animated_rotation_requires_time():
    with pytest.raises(ValueError):
        AnimatedRotation(float("nan"), (0, 1, 0))


def test_animated_translation_needs_four_points():
    with pytest.raises(ValueError, match="too few points"):
        AnimatedTranslation(10.0, SQUARE[:3])


def test_animated_translation_requires_time():
    with pytest.raises(ValueError):
        AnimatedTranslation(float("nan"), SQUARE)


@pytest.mark.parametrize("index", range(4))
def test_curve_passes_through_control_points(index):
    transform = AnimatedTranslation(8.0, SQUARE)
    position, _ = transform.interpolate(index * 2.0)
    assert np.allclose(position, SQUARE[index])


def test_curve_derivative_at_control_point():
    transform = AnimatedTranslation(8.0, SQUARE)
    _, derivative = transform.interpolate(2.0)
    expected = (np.array(SQUARE[2]) - np.array(SQUARE[0])) / 2.0
    assert np.allclose(derivative, expected)


def test_curve_is_periodic():
    transform = AnimatedTranslation(8.0, SQUARE)
    first, _ = transform.interpolate(1.3)
    second, _ = transform.interpolate(9.3)
    assert np.allclose(first, second)


def test_update_translates_to_curve_position():
    transform = AnimatedTranslation(8.0, SQUARE)
    transform.update(3.1)
    position, _ = transform.interpolate(3.1)
    assert np.allclose(transform.matrix[:3, 3], position)
    assert np.allclose(transform.matrix[:3, :3], np.identity(3))


def test_aligned_update_faces_along_curve():
    transform = AnimatedTranslation(8.0, SQUARE, align=True)
    transform.update(1.0)
    _, derivative = transform.interpolate(1.0)
    rotation = transform.matrix[:3, :3]
    assert np.allclose(rotation.T @ rotation, np.identity(3))
    assert np.allclose(rotation[:, 0], derivative / np.linalg.norm(derivative))


def test_path_sample_count_and_start():
    transform = AnimatedTranslation(8.0, SQUARE + [(2, 0, 2)])
    path = transform.path()
    assert len(path) == (5 - 3) * 32
    assert np.allclose(path[0], SQUARE[0])


def test_trs_combines_in_order():
    translation = Translation(1, 0, 0)
    scale = Scale(2, 2, 2)
    trs = TRSTransform([translation, scale])
    assert np.allclose(trs.matrix, translation.matrix @ scale.matrix)


def test_trs_empty_is_identity():
    assert np.allclose(TRSTransform().matrix, np.identity(4))


def test_trs_update_follows_animation():
    rotation = AnimatedRotation(4.0, (0, 1, 0))
    trs = TRSTransform([Translation(0, 1, 0), rotation])
    trs.update(1.0)
    assert np.allclose(trs.matrix, Translation(0, 1, 0).matrix @ rotation.matrix)


def test_trs_rejects_repeated_kind():
    with pytest.raises(ValueError, match="multiple"):
        TRSTransform([Translation(1, 0, 0), AnimatedTranslation(2.0, SQUARE)])


def test_trs_rejects_more_than_three():
    with pytest.raises(ValueError, match="more than 3"):
        TRSTransform([Translation(1, 0, 0), Rotation(10, (0, 1, 0)), Scale(1, 1, 1), Scale(2, 2, 2)])


def test_trs_rejects_unknown_transform():
    with pytest.raises(ValueError, match="invalid"):
        TRSTransform([Transform()])


def test_rotation_half_turn_matches_cosine():
    matrix = rotation_matrix(math.pi, (0, 0, 1))
    assert matrix[0, 0] == pytest.approx(math.cos(math.pi))