from __future__ import annotations

import math

import numpy as np
import pytest

from _utils.dummies import RecordingDrawOp
from engine.render.quadrant import (
    QUADRANT_SIGNS,
    RotationTransform,
    mirrored_quadrants,
    render_quadrants,
)
from shapes.superellipse import quarter_superellipse


def _quarter(s: int = 4) -> np.ndarray:
    return quarter_superellipse(100.0, 50.0, 4.0, s)


def test_sign_table_order() -> None:
    assert QUADRANT_SIGNS == ((1, 1), (-1, 1), (-1, -1), (1, -1))


def test_mirrored_quadrants_follow_sign_table() -> None:
    q = _quarter()
    mirrored = list(mirrored_quadrants(q))
    assert len(mirrored) == 4
    for (sx, sy), m in zip(QUADRANT_SIGNS, mirrored):
        np.testing.assert_array_equal(m[:, 0], sx * q[:, 0])
        np.testing.assert_array_equal(m[:, 1], sy * q[:, 1])


@pytest.mark.parametrize("s", [1, 2, 7, 85])
def test_segment_calls_are_four_times_steps(s: int) -> None:
    op = RecordingDrawOp()
    calls = render_quadrants((0.0, 0.0), _quarter(s), RotationTransform.identity(), op)
    assert calls == 4 * s
    assert len(op.segments) == 4 * s


def test_identity_rotation_places_points_by_sign_only() -> None:
    q = _quarter(3)
    op = RecordingDrawOp()
    render_quadrants((0.0, 0.0), q, RotationTransform.from_degrees(0.0), op)
    for k, (sx, sy) in enumerate(QUADRANT_SIGNS):
        chunk = op.segments[k * 3 : (k + 1) * 3]
        # 各象限の最初の「前の点」は index 0
        assert chunk[0][0] == (sx * q[0, 0], sy * q[0, 1])
        for i, (_prev, curr) in enumerate(chunk, start=1):
            assert curr == (sx * q[i, 0], sy * q[i, 1])


def test_segments_connect_consecutive_points() -> None:
    op = RecordingDrawOp()
    render_quadrants((0.0, 0.0), _quarter(5), RotationTransform.identity(), op)
    for k in range(4):
        chunk = op.segments[k * 5 : (k + 1) * 5]
        for (_, curr), (nxt_prev, _) in zip(chunk, chunk[1:]):
            assert curr == nxt_prev


def test_center_translation() -> None:
    q = _quarter(2)
    op = RecordingDrawOp()
    render_quadrants((640.0, 400.0), q, RotationTransform.identity(), op)
    prev, curr = op.segments[0]
    assert prev == (640.0 + 100.0, 400.0)
    assert curr == pytest.approx((640.0 + q[1, 0], 400.0 + q[1, 1]))


def test_ninety_degree_rotation_maps_x_axis_to_y_axis() -> None:
    q = _quarter(2)
    op = RecordingDrawOp()
    render_quadrants((0.0, 0.0), q, RotationTransform.from_degrees(90.0), op)
    prev, _ = op.segments[0]
    assert prev[0] == pytest.approx(0.0, abs=1e-9)
    assert prev[1] == pytest.approx(100.0)


def test_rotation_transform_values() -> None:
    assert RotationTransform.from_degrees(0.0) == RotationTransform.identity()
    r = RotationTransform.from_degrees(30.0)
    assert r.sin == pytest.approx(0.5)
    assert r.cos == pytest.approx(math.sqrt(3) / 2)
    x, y = r.apply(1.0, 0.0)
    assert (x, y) == pytest.approx((math.sqrt(3) / 2, 0.5))


@pytest.mark.parametrize("shape", [(1, 2), (4, 3), (5,)])
def test_rejects_malformed_buffers(shape) -> None:
    with pytest.raises(ValueError):
        render_quadrants((0.0, 0.0), np.zeros(shape), RotationTransform.identity(), RecordingDrawOp())
