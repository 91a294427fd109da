# SPDX-License-Identifier: MIT
"""Unit tests for 2-D affine transforms."""

from __future__ import annotations

import math

import numpy as np
import pytest

from component_foundry.geom.primitives import Line
from component_foundry.geom.transform import Transform


class TestTransform:
    """Tests for Transform composition and application."""

    def test_identity(self) -> None:
        transform = Transform()
        assert transform.is_identity
        assert transform.apply(2.0, -3.0) == (2.0, -3.0)

    def test_operations_apply_in_call_order(self) -> None:
        """Each operation applies after the ones already present."""
        transform = Transform().scale(2.0, 2.0).translate(1.0, 0.0)
        assert transform.apply(0.0, 0.0) == pytest.approx((1.0, 0.0))
        assert transform.apply(1.0, 0.0) == pytest.approx((3.0, 0.0))

    def test_translate_then_scale(self) -> None:
        transform = Transform().translate(1.0, 0.0).scale(2.0, 2.0)
        assert transform.apply(0.0, 0.0) == pytest.approx((2.0, 0.0))

    def test_then(self) -> None:
        first = Transform().translate(1.0, 2.0)
        second = Transform().scale(3.0, -1.0)
        combined = first.then(second)
        assert combined.apply(1.0, 1.0) == pytest.approx(second.apply(*first.apply(1.0, 1.0)))

    def test_axis_scales(self) -> None:
        transform = Transform().scale(3.0, -4.0)
        assert transform.scale_x == pytest.approx(3.0)
        assert transform.scale_y == pytest.approx(4.0)

    def test_effective_scale_uniform(self) -> None:
        assert Transform().scale(2.0, -2.0).effective_scale == pytest.approx(2.0)

    def test_effective_scale_anisotropic(self) -> None:
        """Unequal axis scales combine as their RMS."""
        transform = Transform().scale(3.0, 4.0)
        assert transform.effective_scale == pytest.approx(math.sqrt(12.5))

    def test_line_width_under_anisotropic_scale(self) -> None:
        line = Line.from_coords(0.0, 0.0, 1.0, 0.0, width=0.2)
        assert line.transform(Transform().scale(2.0, 1.0)).width == pytest.approx(0.2 * math.sqrt(2.5))
        assert line.transform(Transform().scale(3.0, 3.0)).width == pytest.approx(0.6)

    def test_equality_and_hash(self) -> None:
        first = Transform().translate(1.0, 1.0)
        second = Transform().translate(1.0, 1.0)
        assert first == second
        assert hash(first) == hash(second)
        assert first != Transform()

    def test_matrix_is_read_only(self) -> None:
        transform = Transform()
        with pytest.raises(ValueError):
            transform.matrix[0, 0] = 5.0

    def test_rejects_wrong_shape(self) -> None:
        with pytest.raises(ValueError):
            Transform(np.identity(2))

    def test_rejects_projective_row(self) -> None:
        matrix = np.identity(3)
        matrix[2, 0] = 1.0
        with pytest.raises(ValueError):
            Transform(matrix)
