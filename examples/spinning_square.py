"""Spin a square about the z axis and pack each frame into a vertex buffer.

Run:
    python examples/spinning_square.py
"""

from array import array

from rendermath import (
    STORAGE_FORMAT,
    Quaternion,
    Vector3,
    degrees_to_radians,
    interpolate,
)

SQUARE = [Vector3(1, 0, 0), Vector3(0, 1, 0), Vector3(-1, 0, 0), Vector3(0, -1, 0)]
UP = Vector3(0, 0, 1)


def frame_buffer(rotation: Quaternion, vertices: list[Vector3]) -> array:
    """Rotate vertices and pack them as contiguous float32 x, y, z triples."""
    packed = array(STORAGE_FORMAT)
    for vertex in vertices:
        with rotation.rotate(vertex).data(readonly=True) as view:
            packed.frombytes(view.tobytes())
    return packed


def main() -> None:
    start = Quaternion.identity()
    end = Quaternion.from_angle_axis(degrees_to_radians(90), UP)

    for step in range(5):
        t = step / 4
        rotation = interpolate(start, end, t)
        buffer = frame_buffer(rotation, SQUARE)
        first = ", ".join(f"{value:+.3f}" for value in buffer[:3])
        print(f"t={t:.2f} first vertex=({first}) buffer={len(buffer)} floats")


if __name__ == "__main__":
    main()
