"""A small pygame arcade game about a dog that eats cookies."""

__version__ = "0.1.0"
__all__ = ["gameobject", "resources", "sound", "game"]