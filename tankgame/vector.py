"""Fixed-dimension vector math for the tank game.

Every dimension is its own frozen dataclass so the constructor arity is
part of the signature, and every binary operation takes ``Self`` so a
type checker refuses to mix dimensions or scalar domains. The cross
product only exists on :class:`Vector3`.
"""
from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, fields
from typing import ClassVar, Generic, Iterable, Iterator, Optional, Self, TypeVar

import numpy as np

from .config import coerce_precision, load_render_settings

Scalar = float
Angle = float

S = TypeVar("S", int, float)


def _format_component(value: float, precision: int) -> str:
    # Integers keep their plain decimal form, floats use fixed precision.
    if isinstance(value, numbers.Integral):
        return str(int(value))
    return f"{float(value):.{precision}f}"


@dataclass(frozen=True)
class Vector(Generic[S]):
    """Immutable fixed-size numeric tuple.

    Concrete dimensions subclass this with one field per component; the
    base class itself has no dimension and cannot be instantiated.
    Specializations pin ``SCALAR`` to coerce every component on
    construction.
    """

    DIM: ClassVar[int] = 0
    SCALAR: ClassVar[Optional[type]] = None

    # numpy scalars on the left defer to __rmul__ instead of broadcasting.
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        if self.DIM <= 0:
            raise TypeError(f"{type(self).__name__} has no dimension; use Vector2, Vector3 or Vector4")
        if self.SCALAR is None:
            return
        for field in fields(self):
            object.__setattr__(self, field.name, self.SCALAR(getattr(self, field.name)))

    @classmethod
    def zero(cls) -> Self:
        return cls(*([0] * cls.DIM))  # type: ignore[call-arg]

    @classmethod
    def from_iter(cls, values: Iterable[S]) -> Self:
        """Build a vector from any iterable, numpy arrays included."""

        if isinstance(values, np.ndarray):
            values = values.tolist()
        return cls(*values)  # type: ignore[call-arg]

    def _rebuild(self, values: Iterable[S]) -> Self:
        return type(self)(*values)  # type: ignore[call-arg]

    @property
    def components(self) -> tuple[S, ...]:
        return tuple(getattr(self, field.name) for field in fields(self))

    def __len__(self) -> int:
        return self.DIM

    def __iter__(self) -> Iterator[S]:
        return iter(self.components)

    def __getitem__(self, index: int) -> S:
        return self.components[index]

    def __add__(self, other: Self) -> Self:
        return self._rebuild(a + b for a, b in zip(self, other, strict=True))

    def __sub__(self, other: Self) -> Self:
        return self._rebuild(a - b for a, b in zip(self, other, strict=True))

    def __mul__(self, scalar: S) -> Self:
        return self._rebuild(scalar * component for component in self)

    __rmul__ = __mul__

    def __truediv__(self, scalar: S) -> Self:
        return self._rebuild(component / scalar for component in self)

    def __neg__(self) -> Self:
        return self._rebuild(-component for component in self)

    def dot(self, other: Self) -> S:
        return sum(a * b for a, b in zip(self, other, strict=True))

    __matmul__ = dot

    def length(self) -> float:
        return math.sqrt(float(self.dot(self)))

    def normalized(self) -> Self:
        length = self.length()
        if length == 0.0:
            raise ValueError("Cannot normalize zero-length vector")
        return self._rebuild(component / length for component in self)

    def distance_to(self, other: Self) -> float:
        return (self - other).length()

    def angle_to(self, other: Self) -> Angle:
        """Return the angle in radians between ``self`` and ``other``.

        The cosine is clamped to [-1, 1] so rounding on nearly parallel
        vectors cannot push ``acos`` out of its domain.
        """

        denominator = self.length() * other.length()
        if denominator == 0.0:
            raise ValueError("Angle is undefined for zero-length vectors")
        cosine = float(self.dot(other)) / denominator
        return math.acos(max(-1.0, min(1.0, cosine)))

    def is_close(self, other: Self, *, rel_tol: float = 1e-9, abs_tol: float = 0.0) -> bool:
        return all(
            math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
            for a, b in zip(self, other, strict=True)
        )

    def to_array(self) -> np.ndarray:
        return np.array(self.components)

    def to_string(self, precision: Optional[int] = None) -> str:
        """Render as ``"[ c0, c1, ..., cN ]"``."""

        if precision is None:
            precision = load_render_settings().precision
        else:
            precision = coerce_precision(precision)
        rendered = ", ".join(_format_component(component, precision) for component in self)
        return f"[ {rendered} ]"

    def __str__(self) -> str:
        return self.to_string()

    def __format__(self, format_spec: str) -> str:
        return format(self.to_string(), format_spec)


@dataclass(frozen=True)
class Vector2(Vector[S]):
    """Two-component vector for planar movement."""

    DIM: ClassVar[int] = 2

    x: S
    y: S


@dataclass(frozen=True)
class Vector3(Vector[S]):
    """Three-component vector; the only dimension with a cross product."""

    DIM: ClassVar[int] = 3

    x: S
    y: S
    z: S

    def cross(self, other: Self) -> Self:
        return type(self)(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


@dataclass(frozen=True)
class Vector4(Vector[S]):
    """Four-component vector, used for homogeneous coordinates."""

    DIM: ClassVar[int] = 4

    x: S
    y: S
    z: S
    w: S


@dataclass(frozen=True)
class Vector2d(Vector2[float]):
    SCALAR: ClassVar[Optional[type]] = float


@dataclass(frozen=True)
class Vector3d(Vector3[float]):
    SCALAR: ClassVar[Optional[type]] = float


__all__ = [
    "Angle",
    "Scalar",
    "Vector",
    "Vector2",
    "Vector2d",
    "Vector3",
    "Vector3d",
    "Vector4",
]
