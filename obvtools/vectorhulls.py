"""Plane geometry for part outlines: hulls, rotations and bounding boxes."""

from __future__ import annotations

import math
import sys
from collections.abc import Sequence
from dataclasses import dataclass

_DBL_MAX = sys.float_info.max
_DBL_MIN = sys.float_info.min


@dataclass(frozen=True)
class Vec2:
    """A point or vector in the plane."""

    x: float = 0.0
    y: float = 0.0


def rotate_point(point: Vec2, origin: Vec2, theta: float) -> Vec2:
    """Rotate ``point`` by ``theta`` radians around ``origin``."""
    tx = point.x - origin.x
    ty = point.y - origin.y
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    return Vec2(tx * cos_t - ty * sin_t + origin.x, tx * sin_t + ty * cos_t + origin.y)


def rotate_vector(vector: Vec2, theta: float) -> Vec2:
    """Rotate ``vector`` by ``theta`` radians around the origin."""
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    return Vec2(vector.x * cos_t - vector.y * sin_t, vector.x * sin_t + vector.y * cos_t)


def angle_to_x(a: Vec2, b: Vec2) -> float:
    """Angle between the segment from ``a`` to ``b`` and the x axis."""
    return math.atan2(b.y - a.y, b.x - a.x)


def convex_hull_orientation(p: Vec2, q: Vec2, r: Vec2) -> int:
    """Orientation of the triplet: 0 colinear, 1 clockwise, 2 counterclockwise."""
    val = math.trunc((q.y - p.y) * (r.x - q.x) - (q.x - p.x) * (r.y - q.y))
    if val == 0:
        return 0
    return 1 if val > 0 else 2


def convex_hull(points: Sequence[Vec2]) -> list[Vec2]:
    """Convex hull by gift wrapping; empty for fewer than three points."""
    count = len(points)
    if count < 3:
        return []

    leftmost = min(range(count), key=lambda index: points[index].x)
    hull: list[Vec2] = []
    p = leftmost
    while True:
        hull.append(points[p])
        q = (p + 1) % count
        for i, candidate in enumerate(points):
            if convex_hull_orientation(points[p], candidate, points[q]) == 2:
                q = i
        p = q
        if p == leftmost or len(hull) >= count:
            break
    return hull


def tighten_hull(hull: Sequence[Vec2], threshold: float) -> list[Vec2]:
    """Drop hull points whose neighbouring segments turn by less than ``threshold``."""
    points = list(hull)
    n = len(points)
    for i in range(n):
        a = points[i]
        b = points[(i + 1) % n]
        c = points[(i + 2) % n]
        if abs(angle_to_x(a, b) - angle_to_x(b, c)) < threshold:
            points[(i + 1) % n] = a

    return [point for i, point in enumerate(points) if point != points[(i + 1) % n]]


def minimum_bounding_box(hull: Sequence[Vec2], pad: float) -> tuple[Vec2, Vec2, Vec2, Vec2]:
    """Smallest-area rectangle around a hull, grown by ``pad`` on each side.

    The rectangle is tried aligned with each hull edge in turn.
    """
    origin_x = min((point.x for point in hull), default=_DBL_MAX)
    origin_y = min((point.y for point in hull), default=_DBL_MAX)
    points = [Vec2(point.x - origin_x, point.y - origin_y) for point in hull]

    best_angle = 0.0
    cumulative = 0.0
    best_area = _DBL_MAX
    low = Vec2()
    high = Vec2()

    count = len(points)
    for i in range(count):
        angle = angle_to_x(points[i], points[(i + 1) % count])
        cumulative += angle

        top = right = _DBL_MIN
        bottom = left = _DBL_MAX
        points = [rotate_vector(point, -angle) for point in points]
        for point in points:
            top = max(top, point.y)
            bottom = min(bottom, point.y)
            right = max(right, point.x)
            left = min(left, point.x)

        area = (right - left) * (top - bottom)
        if area < best_area:
            best_area = area
            best_angle = cumulative
            low = Vec2(left, bottom)
            high = Vec2(right, top)

    low = Vec2(low.x - pad, low.y - pad)
    high = Vec2(high.x + pad, high.y + pad)

    corners = (low, Vec2(high.x, low.y), high, Vec2(low.x, high.y))
    rotated = [rotate_vector(corner, best_angle) for corner in corners]
    shifted = [Vec2(corner.x + origin_x, corner.y + origin_y) for corner in rotated]
    return shifted[0], shifted[1], shifted[2], shifted[3]


def get_intersection(p0: Vec2, p1: Vec2, p2: Vec2, p3: Vec2) -> Vec2 | None:
    """Crossing point of segments p0-p1 and p2-p3, or None when they do not cross."""
    s1x, s1y = p1.x - p0.x, p1.y - p0.y
    s2x, s2y = p3.x - p2.x, p3.y - p2.y
    denominator = -s2x * s1y + s1x * s2y
    if denominator == 0:
        return None
    s = (-s1y * (p0.x - p2.x) + s1x * (p0.y - p2.y)) / denominator
    t = (s2x * (p0.y - p2.y) - s2y * (p0.x - p2.x)) / denominator
    if 0 <= s <= 1 and 0 <= t <= 1:
        return Vec2(p0.x + t * s1x, p0.y + t * s1y)
    return None