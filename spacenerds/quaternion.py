"""Quaternions for orientations and rotations of 3D vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from spacenerds.vec3 import (
    ZERO_TOLERANCE,
    Vec3,
    normalize_euler_0_2pi,
    vec3_to_heading_mark,
)


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


@dataclass(frozen=True)
class Euler:
    """Euler angles in radians."""

    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0


@dataclass(frozen=True)
class Quat:
    """An immutable quaternion w + xi + yj + zk."""

    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.w
        yield self.x
        yield self.y
        yield self.z

    @classmethod
    def from_axis_angle(cls, x: float, y: float, z: float, angle: float) -> Quat:
        """Rotation of angle radians about the axis (x, y, z)."""
        half = angle * 0.5
        s = math.sin(half)
        return cls(math.cos(half), x * s, y * s, z * s)

    @classmethod
    def from_measurements(cls, acc: Vec3, mag: Vec3) -> Quat:
        """Orientation from accelerometer and magnetometer readings."""
        ax, ay, az = acc
        mx, my, mz = mag

        init_roll = math.atan2(-ay, -az)
        init_pitch = math.atan2(ax, -az)

        cos_roll = math.cos(init_roll)
        sin_roll = math.sin(init_roll)
        cos_pitch = math.cos(init_pitch)
        sin_pitch = math.sin(init_pitch)

        mag_x = mx * cos_pitch + my * sin_roll * sin_pitch + mz * cos_roll * sin_pitch
        mag_y = my * cos_roll - mz * sin_roll
        init_yaw = math.atan2(-mag_y, mag_x)

        cos_roll = math.cos(init_roll * 0.5)
        sin_roll = math.sin(init_roll * 0.5)
        cos_pitch = math.cos(init_pitch * 0.5)
        sin_pitch = math.sin(init_pitch * 0.5)
        cos_heading = math.cos(init_yaw * 0.5)
        sin_heading = math.sin(init_yaw * 0.5)

        return cls(
            cos_roll * cos_pitch * cos_heading + sin_roll * sin_pitch * sin_heading,
            sin_roll * cos_pitch * cos_heading - cos_roll * sin_pitch * sin_heading,
            cos_roll * sin_pitch * cos_heading + sin_roll * cos_pitch * sin_heading,
            cos_roll * cos_pitch * sin_heading - sin_roll * sin_pitch * cos_heading,
        )

    def to_axis_angle(self) -> Tuple[Vec3, float]:
        """Return (axis, angle); a near-zero rotation gives axis (1, 0, 0) and angle 0."""
        w = _clamp_unit(self.w)
        angle = 2 * math.acos(w)
        s = math.sqrt(1.0 - w * w)
        if s < ZERO_TOLERANCE:
            return Vec3(1.0, 0.0, 0.0), 0.0
        return Vec3(self.x / s, self.y / s, self.z / s), angle

    def dot(self, other: Quat) -> float:
        return self.w * other.w + self.x * other.x + self.y * other.y + self.z * other.z

    def rotate_vec(self, v: Vec3) -> Vec3:
        """Rotate v by this (unit) quaternion."""
        vx, vy, vz = v
        qw, qx, qy, qz = self
        qww, qxx, qyy, qzz = qw * qw, qx * qx, qy * qy, qz * qz
        qwx, qwy, qwz, qxy = qw * qx, qw * qy, qw * qz, qx * qy
        qxz, qyz = qx * qz, qy * qz
        return Vec3(
            (qww + qxx - qyy - qzz) * vx + 2 * ((qxy - qwz) * vy + (qxz + qwy) * vz),
            (qww - qxx + qyy - qzz) * vy + 2 * ((qxy + qwz) * vx + (qyz - qwx) * vz),
            (qww - qxx - qyy + qzz) * vz + 2 * ((qxz - qwy) * vx + (qyz + qwx) * vy),
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def conjugate(self) -> Quat:
        return Quat(self.w, -self.x, -self.y, -self.z)

    def __mul__(self, other: Quat) -> Quat:
        q1, q2 = self, other
        return Quat(
            -q1.x * q2.x - q1.y * q2.y - q1.z * q2.z + q1.w * q2.w,
            q1.x * q2.w + q1.y * q2.z - q1.z * q2.y + q1.w * q2.x,
            -q1.x * q2.z + q1.y * q2.w + q1.z * q2.x + q1.w * q2.y,
            q1.x * q2.y - q1.y * q2.x + q1.z * q2.w + q1.w * q2.z,
        )

    def __add__(self, other: Quat) -> Quat:
        return Quat(self.w + other.w, self.x + other.x, self.y + other.y, self.z + other.z)

    def scale(self, f: float) -> Quat:
        return Quat(self.w * f, self.x * f, self.y * f, self.z * f)

    def normalized(self) -> Quat:
        """Unit quaternion; raises ZeroDivisionError for the zero quaternion."""
        return self.scale(1.0 / self.length())

    def to_euler(self) -> Euler:
        x, y, z, w = self.x, self.y, self.z, self.w
        ww, xx, yy, zz = w * w, x * x, y * y, z * z
        return Euler(
            yaw=normalize_euler_0_2pi(math.atan2(2.0 * (x * y + z * w), xx - yy - zz + ww)),
            pitch=math.asin(_clamp_unit(-2.0 * (x * z - y * w))),
            roll=math.atan2(2.0 * (y * z + x * w), -xx - yy + zz + ww),
        )

    def to_heading_mark(self) -> Tuple[float, float]:
        """Heading and mark of the +x axis after rotation by this quaternion."""
        _, heading, mark = vec3_to_heading_mark(self.rotate_vec(Vec3(1.0, 0.0, 0.0)))
        return heading, mark

    def _matrix_terms(self) -> Tuple[float, float, float, float]:
        qn = self.normalized()
        return qn.w, qn.x, qn.y, qn.z

    def to_rh_rot_matrix(self) -> Tuple[float, ...]:
        """Right-handed 4x4 rotation matrix as 16 floats."""
        qw, qx, qy, qz = self._matrix_terms()
        return (
            1.0 - 2.0 * qy * qy - 2.0 * qz * qz,
            2.0 * qx * qy + 2.0 * qz * qw,
            2.0 * qx * qz - 2.0 * qy * qw,
            0.0,
            2.0 * qx * qy - 2.0 * qz * qw,
            1.0 - 2.0 * qx * qx - 2.0 * qz * qz,
            2.0 * qy * qz + 2.0 * qx * qw,
            0.0,
            2.0 * qx * qz + 2.0 * qy * qw,
            2.0 * qy * qz - 2.0 * qx * qw,
            1.0 - 2.0 * qx * qx - 2.0 * qy * qy,
            0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    def to_lh_rot_matrix(self) -> Tuple[float, ...]:
        """Left-handed 4x4 rotation matrix as 16 floats."""
        qw, qx, qy, qz = self._matrix_terms()
        return (
            1.0 - 2.0 * qy * qy - 2.0 * qz * qz,
            2.0 * qx * qy - 2.0 * qz * qw,
            2.0 * qx * qz + 2.0 * qy * qw,
            0.0,
            2.0 * qx * qy + 2.0 * qz * qw,
            1.0 - 2.0 * qx * qx - 2.0 * qz * qz,
            2.0 * qy * qz - 2.0 * qx * qw,
            0.0,
            2.0 * qx * qz - 2.0 * qy * qw,
            2.0 * qy * qz + 2.0 * qx * qw,
            1.0 - 2.0 * qx * qx - 2.0 * qy * qy,
            0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    def _blend(self, other: Quat, scale0: float, scale1: float) -> Quat:
        return self.scale(scale0) + other.scale(scale1)

    def lerp(self, other: Quat, t: float) -> Quat:
        """Linear interpolation along the shortest path (not normalized)."""
        cosom = self.dot(other)
        if cosom >= 1.0:
            return self
        to1 = other.scale(-1.0) if cosom < 0.0 else other
        return self._blend(to1, 1.0 - t, t)

    def nlerp(self, other: Quat, t: float) -> Quat:
        return self.lerp(other, t).normalized()

    def slerp(self, other: Quat, t: float) -> Quat:
        """Spherical linear interpolation along the shortest path."""
        cosom = self.dot(other)
        if cosom >= 1.0:
            return self
        if cosom < 0.0:
            cosom = -cosom
            to1 = other.scale(-1.0)
        else:
            to1 = other
        if cosom < 0.99995:
            omega = math.acos(cosom)
            sinom = math.sin(omega)
            scale0 = math.sin((1.0 - t) * omega) / sinom
            scale1 = math.sin(t * omega) / sinom
        else:
            scale0 = 1.0 - t
            scale1 = t
        return self._blend(to1, scale0, scale1)

    def apply_relative_yaw_pitch_roll(self, yaw: float, pitch: float, roll: float) -> Quat:
        """Apply yaw, pitch and roll in this orientation's local frame."""
        qyaw = Quat.from_axis_angle(0.0, 1.0, 0.0, yaw)
        qpitch = Quat.from_axis_angle(0.0, 0.0, 1.0, pitch)
        qroll = Quat.from_axis_angle(1.0, 0.0, 0.0, roll)
        qrot = qyaw * qpitch * qroll
        local = self * qrot * self.conjugate()
        return (local * self).normalized()

    def apply_relative_yaw_pitch(self, yaw: float, pitch: float) -> Quat:
        """Apply yaw about the world axis and pitch locally, so no roll accumulates."""
        qyaw = Quat.from_axis_angle(0.0, 1.0, 0.0, yaw)
        qpitch = Quat.from_axis_angle(0.0, 0.0, 1.0, pitch)
        return qyaw * self * qpitch

    def _swing(self, v: Vec3) -> Quat:
        return quat_from_u2v(v, self.rotate_vec(v))

    def decompose_twist_swing(self, v: Vec3) -> Tuple[Quat, Quat]:
        """Return (twist, swing) with twist * swing equal to this rotation."""
        swing = self._swing(v)
        return self * swing.conjugate(), swing

    def decompose_swing_twist(self, v: Vec3) -> Tuple[Quat, Quat]:
        """Return (swing, twist) with swing * twist equal to this rotation."""
        swing = self._swing(v)
        return swing, swing.conjugate() * self


IDENTITY = Quat(1.0, 0.0, 0.0, 0.0)


def quat_from_u2v(u: Vec3, v: Vec3, up: Optional[Vec3] = None) -> Quat:
    """Quaternion rotating the direction of u onto the direction of v.

    Opposite vectors give a half turn about up, which defaults to +y.
    """
    un = u.normalized()
    vn = v.normalized()
    dot = un.dot(vn)
    if abs(dot + 1.0) < ZERO_TOLERANCE:
        axis = up if up is not None else Vec3(0.0, 1.0, 0.0)
        return Quat.from_axis_angle(axis.x, axis.y, axis.z, math.pi)
    if abs(dot - 1.0) < ZERO_TOLERANCE:
        return IDENTITY
    angle = math.acos(_clamp_unit(dot))
    axis = un.cross(vn).normalized()
    return Quat.from_axis_angle(axis.x, axis.y, axis.z, angle)


def vec3_rot_axis(v: Vec3, x: float, y: float, z: float, angle: float) -> Vec3:
    """Rotate v by angle radians about the axis (x, y, z)."""
    return Quat.from_axis_angle(x, y, z, angle).rotate_vec(v)