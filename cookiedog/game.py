"""The cookie-eating dog game: scene set-up, update step, projection and main loop."""

from __future__ import annotations

import argparse
import json
import math
import os
import sys
from dataclasses import dataclass, field

import pygame

from cookiedog.gameobject import GameObject, TextureInfo, Vec3, check_collision
from cookiedog.resources import ResourceManager
from cookiedog.sound import SoundManager

_FOV_DEGREES = 45.0
_NEAR = 0.1
_FAR = 100.0
_WORLD_UP: Vec3 = (0.0, 1.0, 0.0)
_CLEAR_COLOR = (25, 25, 25)
_COOKIE_POSITIONS: tuple[Vec3, ...] = (
    (2.5, 2.0, 0.0),
    (-2.0, -1.5, 0.0),
    (1.5, -2.5, 0.0),
)


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v: Vec3) -> Vec3:
    length = math.sqrt(_dot(v, v))
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return (v[0] / length, v[1] / length, v[2] / length)


@dataclass
class Scene:
    """Everything the game tracks between frames."""

    dog: GameObject
    cookies: list[GameObject]
    background: GameObject
    camera_position: Vec3 = (0.0, 0.0, 8.0)
    camera_center: Vec3 = (0.0, 0.0, 0.0)
    ambient_intensity: float = 0.8
    light_position: Vec3 = (0.0, 0.0, 10.0)
    move_speed: float = 4.0
    objects: list[GameObject] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.objects = [self.background, self.dog, *self.cookies]

    def update(self, dt: float, up: bool, down: bool, left: bool, right: bool) -> list[GameObject]:
        """Move the dog for ``dt`` seconds and return the cookies it ate this step."""
        step = self.move_speed * dt
        x, y, z = self.dog.position
        if up:
            y += step
        if down:
            y -= step
        if left:
            x -= step
        if right:
            x += step
        self.dog.position = (x, y, z)

        eaten = [c for c in self.cookies if c.is_visible and check_collision(self.dog, c)]
        for cookie in eaten:
            cookie.is_visible = False
        return eaten

    def brightness(self, obj: GameObject) -> float:
        """Ambient plus diffuse light falling on the front face of ``obj``, capped at 1."""
        direction = _normalize(_sub(self.light_position, obj.position))
        diffuse = max(direction[2], 0.0)
        return min(1.0, self.ambient_intensity + diffuse)


def load_config(path: str | os.PathLike) -> dict:
    """Read the JSON configuration file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return json.load(handle)


def build_scene(
    dog_texture: TextureInfo,
    cookie_texture: TextureInfo,
    background_texture: TextureInfo,
) -> Scene:
    """Lay out the dog, three cookies and the backdrop."""
    dog = GameObject((0.0, 0.0, 0.0), 1.5, dog_texture.id, True, dog_texture.aspect_ratio)
    cookies = [
        GameObject(pos, 0.5, cookie_texture.id, True, cookie_texture.aspect_ratio)
        for pos in _COOKIE_POSITIONS
    ]
    background = GameObject(
        (0.0, 0.0, -5.0), 10.0, background_texture.id, True, background_texture.aspect_ratio
    )
    return Scene(dog=dog, cookies=cookies, background=background)


def project(
    point: Vec3,
    camera_position: Vec3,
    camera_center: Vec3,
    width: float,
    height: float,
) -> tuple[float, float] | None:
    """Map a world point to window pixels, or None if it lies outside the depth range.

    The camera looks from ``camera_position`` at ``camera_center`` with Y up and
    a 45 degree vertical field of view; pixel Y grows downwards.
    """
    forward = _normalize(_sub(camera_center, camera_position))
    side = _normalize(_cross(forward, _WORLD_UP))
    up = _cross(side, forward)
    rel = _sub(point, camera_position)
    depth = _dot(forward, rel)
    if depth <= _NEAR or depth >= _FAR:
        return None
    tan_half = math.tan(math.radians(_FOV_DEGREES) / 2)
    aspect = width / height
    ndc_x = _dot(side, rel) / (depth * tan_half * aspect)
    ndc_y = _dot(up, rel) / (depth * tan_half)
    return ((ndc_x + 1.0) * 0.5 * width, (1.0 - ndc_y) * 0.5 * height)


def _draw(
    screen: pygame.Surface,
    obj: GameObject,
    scene: Scene,
    resources: ResourceManager,
) -> None:
    if not obj.is_visible:
        return
    surface = resources.surfaces.get(obj.texture_id)
    if surface is None:
        return
    width, height = screen.get_size()
    z = obj.position[2]
    (min_x, min_y), (max_x, max_y) = obj.min(), obj.max()
    a = project((min_x, min_y, z), scene.camera_position, scene.camera_center, width, height)
    b = project((max_x, max_y, z), scene.camera_position, scene.camera_center, width, height)
    if a is None or b is None:
        return
    left, right = sorted((a[0], b[0]))
    top, bottom = sorted((a[1], b[1]))
    size = (round(right - left), round(bottom - top))
    if size[0] <= 0 or size[1] <= 0:
        return
    image = pygame.transform.scale(surface, size)
    light = scene.brightness(obj)
    if light < 1.0:
        level = round(255 * light)
        image.fill((level, level, level), special_flags=pygame.BLEND_RGB_MULT)
    screen.blit(image, (round(left), round(top)))


def main(argv: list[str] | None = None) -> int:
    """Run the game window until it is closed."""
    parser = argparse.ArgumentParser(prog="cookiedog", description="Guide the dog to the cookies.")
    parser.add_argument("config", nargs="?", default="config.json", help="path of the JSON config")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as exc:
        print(f"Failed to load or parse {args.config}: {exc}", file=sys.stderr)
        return -1

    window = config["window"]
    assets = config["assets"]
    width, height = int(window["width"]), int(window["height"])

    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode((width, height))
        except pygame.error as exc:
            print(f"Failed to create window: {exc}")
            return -1
        pygame.display.set_caption(str(window["title"]))

        sound = SoundManager()
        try:
            sound.init()
        except RuntimeError:
            print("sound init is unsuccessful")
            return -1

        with sound:
            sound.play_music(assets["background_music"])
            resources = ResourceManager()
            resources.load_texture(assets["dog_texture"], "dog")
            resources.load_texture(assets["cookie_texture"], "cookie")
            resources.load_texture(assets["bg_texture"], "background")
            eat_sound = assets["eat_sound"]

            scene = build_scene(
                resources.get_texture("dog"),
                resources.get_texture("cookie"),
                resources.get_texture("background"),
            )

            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                dt = clock.tick(120) / 1000.0
                keys = pygame.key.get_pressed()
                eaten = scene.update(
                    dt, keys[pygame.K_w], keys[pygame.K_s], keys[pygame.K_a], keys[pygame.K_d]
                )
                for _ in eaten:
                    sound.play_sound_effect(eat_sound)

                screen.fill(_CLEAR_COLOR)
                for obj in scene.objects:
                    _draw(screen, obj, scene, resources)
                pygame.display.flip()

            resources.clear()
    finally:
        pygame.quit()
    return 0