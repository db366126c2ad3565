# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Immutable engine value types held by value nodes."""

from __future__ import annotations

import math
from dataclasses import dataclass

# Largest integer a double holds without losing precision.
MAX_SAFE_INTEGER = 2 ** 53


@dataclass(frozen=True)
class Vector3:
    """A 3D vector.

    Example:
        >>> Vector3(1, 2, 3) + Vector3(1, 1, 1)
        Vector3(x=2, y=3, z=4)
    """

    x: float = 0
    y: float = 0
    z: float = 0

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    @property
    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


@dataclass(frozen=True)
class Color3:
    """An RGB color with components in the 0..1 range."""

    r: float = 0
    g: float = 0
    b: float = 0

    def __post_init__(self) -> None:
        for name in ('r', 'g', 'b'):
            component = getattr(self, name)
            if not 0 <= component <= 1:
                raise ValueError(f"Color3.{name} must be between 0 and 1, got {component}")

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> Color3:
        """Build a color from 0..255 components."""
        return cls(r / 255, g / 255, b / 255)

    def to_hex(self) -> str:
        """Return the color as a 6 digit hex string (no leading '#')."""
        return ''.join(f"{round(c * 255):02x}" for c in (self.r, self.g, self.b))


@dataclass(frozen=True)
class Ray:
    """A half-line defined by an origin and a direction."""

    origin: Vector3 = Vector3()
    direction: Vector3 = Vector3()

    def point_at(self, distance: float) -> Vector3:
        """Return the point reached after travelling distance along the ray."""
        return self.origin + self.direction * distance


# number -> (name, (r, g, b)) for the supported part of the brick palette.
BRICK_PALETTE: dict[int, tuple[str, tuple[int, int, int]]] = {
    1: ('White', (242, 243, 243)),
    21: ('Bright red', (196, 40, 28)),
    23: ('Bright blue', (13, 105, 172)),
    24: ('Bright yellow', (245, 205, 48)),
    26: ('Black', (27, 42, 53)),
    37: ('Bright green', (75, 151, 75)),
    194: ('Medium stone grey', (163, 162, 165)),
    1001: ('Institutional white', (248, 248, 248)),
    1003: ('Really black', (17, 17, 17)),
}


@dataclass(frozen=True)
class BrickColor:
    """A named color of the brick palette, identified by its number.

    Example:
        >>> BrickColor.by_name('Bright red').number
        21
    """

    number: int = 194

    def __post_init__(self) -> None:
        if self.number not in BRICK_PALETTE:
            raise ValueError(f"Unknown BrickColor number {self.number}")

    @classmethod
    def by_name(cls, name: str) -> BrickColor:
        """Return the palette entry called name."""
        for number, (entry_name, _) in BRICK_PALETTE.items():
            if entry_name == name:
                return cls(number)
        raise ValueError(f"Unknown BrickColor name {name!r}")

    @property
    def name(self) -> str:
        return BRICK_PALETTE[self.number][0]

    @property
    def color(self) -> Color3:
        """The palette color as a Color3."""
        return Color3.from_rgb(*BRICK_PALETTE[self.number][1])


_IDENTITY = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class CFrame:
    """A coordinate frame: a position and a row-major 3x3 rotation matrix.

    Multiplying two frames composes them; multiplying a frame by a Vector3
    transforms the point into world space.
    """

    position: Vector3 = Vector3()
    rotation: tuple[float, ...] = _IDENTITY

    def __post_init__(self) -> None:
        if len(self.rotation) != 9:
            raise ValueError(f"CFrame.rotation needs 9 components, got {len(self.rotation)}")

    @classmethod
    def from_euler_xyz(cls, rx: float, ry: float, rz: float,
                       position: Vector3 = Vector3()) -> CFrame:
        """Build a frame rotated by rx, ry, rz radians (applied Z, then Y, then X)."""
        cx, sx = math.cos(rx), math.sin(rx)
        cy, sy = math.cos(ry), math.sin(ry)
        cz, sz = math.cos(rz), math.sin(rz)
        rot_x = (1, 0, 0, 0, cx, -sx, 0, sx, cx)
        rot_y = (cy, 0, sy, 0, 1, 0, -sy, 0, cy)
        rot_z = (cz, -sz, 0, sz, cz, 0, 0, 0, 1)
        return cls(position, _matmul(_matmul(rot_x, rot_y), rot_z))

    def __mul__(self, other: CFrame | Vector3) -> CFrame | Vector3:
        if isinstance(other, Vector3):
            return self.position + self._rotate(other)
        if isinstance(other, CFrame):
            return CFrame(self * other.position, _matmul(self.rotation, other.rotation))
        return NotImplemented

    def inverse(self) -> CFrame:
        """Return the frame undoing this one."""
        r = self.rotation
        transposed = (r[0], r[3], r[6], r[1], r[4], r[7], r[2], r[5], r[8])
        inv = CFrame(Vector3(), transposed)
        return CFrame(inv._rotate(self.position) * -1, transposed)

    @property
    def look_vector(self) -> Vector3:
        """Forward direction (negated Z column)."""
        r = self.rotation
        return Vector3(-r[2], -r[5], -r[8])

    def _rotate(self, v: Vector3) -> Vector3:
        r = self.rotation
        return Vector3(
            r[0] * v.x + r[1] * v.y + r[2] * v.z,
            r[3] * v.x + r[4] * v.y + r[5] * v.z,
            r[6] * v.x + r[7] * v.y + r[8] * v.z,
        )


def _matmul(a: tuple[float, ...], b: tuple[float, ...]) -> tuple[float, ...]:
    return tuple(
        sum(a[row * 3 + k] * b[k * 3 + col] for k in range(3))
        for row in range(3) for col in range(3)
    )
