"""End-to-end: build rotations from degrees, transform a mesh, upload the result."""

from array import array

import pytest

from rendermath import (
    STORAGE_FORMAT,
    Quaternion,
    Vector3,
    Vector4,
    degrees_to_radians,
    interpolate,
)

SQUARE = [Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(-1, 0, 0), Vector3(0, -1, 0)]


def _upload(vertices):
    """Pack vertices into a contiguous float buffer the way a renderer would."""
    packed = array(STORAGE_FORMAT)
    for vertex in vertices:
        with vertex.data(readonly=True) as view:
            packed.frombytes(view.tobytes())
    return packed


def test_composed_quarter_turns_make_half_turn():
    quarter = Quaternion.from_angle_axis(degrees_to_radians(90), Vector3(0, 0, 1))
    half = (quarter * quarter).normalize()

    assert half.rotate(Vector3(1, 0, 0)).astuple() == pytest.approx((-1, 0, 0), abs=1e-3)


def test_composition_order_matches_sequential_rotation():
    first = Quaternion.from_angle_axis(degrees_to_radians(90), Vector3(0, 0, 1))
    second = Quaternion.from_angle_axis(degrees_to_radians(90), Vector3(1, 0, 0))
    v = Vector3(1, 0, 0)

    sequential = second.rotate(first.rotate(v))
    combined = (second * first).rotate(v)

    assert combined.astuple() == pytest.approx(sequential.astuple(), abs=1e-4)
    assert combined.astuple() == pytest.approx((0, 0, 1), abs=1e-3)


def test_transform_and_upload_mesh():
    spin = Quaternion.from_angle_axis(degrees_to_radians(90), Vector3(0, 0, 1))
    offset = Vector3(0, 0, 5)

    transformed = [spin.rotate(vertex) + offset for vertex in SQUARE]
    buffer = _upload(transformed)

    assert len(buffer) == 3 * len(SQUARE)
    expected = [0, 1, 5, -1, 0, 5, 0, -1, 5, 1, 0, 5]
    assert buffer.tolist() == pytest.approx(expected, abs=1e-3)


def test_animation_keyframes_blend_to_target():
    start = Quaternion.identity()
    end = Quaternion.from_angle_axis(degrees_to_radians(90), Vector3(0, 1, 0))
    frames = [interpolate(start, end, step / 4) for step in range(5)]

    assert frames[0].astuple() == pytest.approx(start.astuple(), abs=1e-5)
    assert frames[-1].astuple() == pytest.approx(end.astuple(), abs=1e-5)
    angles = [frame.rotate(Vector3(1, 0, 0)).z for frame in frames]
    assert angles == sorted(angles, reverse=True)


def test_homogeneous_point_in_vector4():
    point = Vector4(2, 3, 4, 1)
    direction = Vector4(1, 1, 1, 0)

    moved = point + direction * 2
    delta = moved - point

    assert moved == Vector4(4, 5, 6, 1)
    assert delta == Vector4(2, 2, 2, 0)
