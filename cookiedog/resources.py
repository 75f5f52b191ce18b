"""Texture loading and lookup by name."""

from __future__ import annotations

import itertools
import os

import pygame

from cookiedog.gameobject import TextureInfo


class ResourceManager:
    """Loads images once per name and hands out their texture info."""

    def __init__(self) -> None:
        self._textures: dict[str, TextureInfo] = {}
        self._ids = itertools.count(1)
        self.surfaces: dict[int, pygame.Surface] = {}

    def load_texture(self, file_path: str | os.PathLike, name: str) -> TextureInfo:
        """Load the image at ``file_path`` under ``name`` unless that name is taken.

        A file that cannot be read is reported on stdout and leaves an empty
        texture registered under the name.
        """
        if name not in self._textures:
            try:
                surface = pygame.image.load(os.fspath(file_path))
            except (pygame.error, OSError):
                print(f"Texture failed to load at path: {file_path}")
            else:
                width, height = surface.get_size()
                aspect = width / height if height > 0 else 1.0
                info = TextureInfo(next(self._ids), aspect)
                self._textures[name] = info
                self.surfaces[info.id] = surface
        return self.get_texture(name)

    def get_texture(self, name: str) -> TextureInfo:
        """Return the texture registered under ``name``, registering an empty one if absent."""
        return self._textures.setdefault(name, TextureInfo())

    def clear(self) -> None:
        """Forget every loaded texture."""
        self._textures.clear()
        self.surfaces.clear()