"""Scene objects and the overlap test used for picking up cookies."""

from __future__ import annotations

from dataclasses import dataclass

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class TextureInfo:
    """A loaded texture's handle and its width-to-height ratio."""

    id: int = 0
    aspect_ratio: float = 0.0


@dataclass
class GameObject:
    """A textured quad centred on ``position``, ``size`` units tall."""

    position: Vec3
    size: float
    texture_id: int
    is_visible: bool = True
    aspect_ratio: float = 1.0

    def min(self) -> Vec2:
        """Lower-left corner of the object's bounding box in the XY plane."""
        x, y, _ = self.position
        return (x - self.size * self.aspect_ratio * 0.5, y - self.size * 0.5)

    def max(self) -> Vec2:
        """Upper-right corner of the object's bounding box in the XY plane."""
        x, y, _ = self.position
        return (x + self.size * self.aspect_ratio * 0.5, y + self.size * 0.5)


def check_collision(one: GameObject, two: GameObject) -> bool:
    """Return True when the two boxes overlap or touch in the XY plane."""
    one_min, one_max = one.min(), one.max()
    two_min, two_max = two.min(), two.max()
    overlap_x = one_max[0] >= two_min[0] and two_max[0] >= one_min[0]
    overlap_y = one_max[1] >= two_min[1] and two_max[1] >= one_min[1]
    return overlap_x and overlap_y