"""2-D affine transforms over homogeneous 3x3 matrices.

Operations compose by pre-multiplication: each new operation is applied after
the ones already in the transform. ``Transform().scale(2, 2).translate(1, 0)``
maps ``(0, 0)`` to ``(1, 0)`` and ``(1, 0)`` to ``(3, 0)``.

Scalar quantities such as stroke width and font size cannot be transformed as
vectors, so the transform exposes :attr:`Transform.effective_scale`: the x
scale when both axis scales agree, otherwise the RMS of the two.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

__all__ = ["Transform"]


def _identity() -> NDArray[np.float64]:
    return np.identity(3, dtype=np.float64)


@dataclass(frozen=True, slots=True, eq=False)
class Transform:
    """Immutable affine transform.

    Attributes:
        matrix: 3x3 homogeneous matrix; the last row is always ``[0, 0, 1]``.
    """

    matrix: NDArray[np.float64] = field(default_factory=_identity)

    def __post_init__(self) -> None:
        matrix = np.array(self.matrix, dtype=np.float64)
        if matrix.shape != (3, 3):
            raise ValueError(f"Transform matrix must be 3x3, got shape {matrix.shape}")
        if not np.array_equal(matrix[2], [0.0, 0.0, 1.0]):
            raise ValueError("Transform matrix must be affine (last row [0, 0, 1])")
        matrix.setflags(write=False)
        object.__setattr__(self, "matrix", matrix)

    def then(self, other: Transform) -> Transform:
        """Return a transform applying ``self`` first and ``other`` second."""
        return Transform(other.matrix @ self.matrix)

    def scale(self, sx: float, sy: float) -> Transform:
        scaling = np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])
        return Transform(scaling @ self.matrix)

    def translate(self, dx: float, dy: float) -> Transform:
        translation = np.array([[1.0, 0.0, dx], [0.0, 1.0, dy], [0.0, 0.0, 1.0]])
        return Transform(translation @ self.matrix)

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Map the point ``(x, y)``."""
        m = self.matrix
        return (
            float(m[0, 0] * x + m[0, 1] * y + m[0, 2]),
            float(m[1, 0] * x + m[1, 1] * y + m[1, 2]),
        )

    @property
    def scale_x(self) -> float:
        return math.hypot(self.matrix[0, 0], self.matrix[1, 0])

    @property
    def scale_y(self) -> float:
        return math.hypot(self.matrix[0, 1], self.matrix[1, 1])

    @property
    def effective_scale(self) -> float:
        """Uniform-equivalent scale used for widths and font sizes."""
        sx, sy = self.scale_x, self.scale_y
        if sx == sy:
            return sx
        return math.sqrt((sx * sx + sy * sy) / 2.0)

    @property
    def is_identity(self) -> bool:
        return bool(np.array_equal(self.matrix, _identity()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Transform):
            return NotImplemented
        return bool(np.array_equal(self.matrix, other.matrix))

    def __hash__(self) -> int:
        return hash(self.matrix.tobytes())

    def __repr__(self) -> str:
        rows = ", ".join(str(list(map(float, row))) for row in self.matrix[:2])
        return f"Transform([{rows}])"
