# cookiedog

A small arcade game built on pygame. You steer a dog around a scene in front
of a background picture. When the dog touches a cookie, the dog eats the
cookie and a sound effect plays.

## Installing

```
pip install .
```

To install the test suite as well and run it:

```
pip install ".[test]"
pytest
```

## Running

```
cookiedog [CONFIG]
```

`CONFIG` is the path of a JSON settings file. If you leave it out, the game
uses `config.json` in the current directory. The file names the window and
the assets:

```json
{
  "window": {"width": 1280, "height": 720, "title": "Cookie Dog"},
  "assets": {
    "background_music": "assets/music.mp3",
    "eat_sound": "assets/eat.wav",
    "dog_texture": "assets/dog.png",
    "cookie_texture": "assets/cookie.png",
    "bg_texture": "assets/background.png"
  }
}
```

- If the file cannot be read or is not valid JSON, the game prints the error
  to stderr and returns a non-zero status.
- The game also returns a non-zero status if it cannot open the window or
  start the audio mixer.
- If an image fails to load, the game prints
  `Texture failed to load at path: ...` and does not draw that object.
- If the music file or the eat sound cannot be played, the game stays silent
  and keeps running.

The game runs until you close the window. It caps the frame rate at 120
frames per second.

## Controls

| Key | Action     |
|-----|------------|
| W   | move up    |
| S   | move down  |
| A   | move left  |
| D   | move right |

The dog moves at 4 units per second. The scene holds the dog (1.5 units
tall) at the origin, three cookies (0.5 units tall) at (2.5, 2), (-2, -1.5)
and (1.5, -2.5), and a backdrop 10 units tall set back at z = -5. The camera
looks from (0, 0, 8) toward the origin with a 45 degree vertical field of
view. Each object is shaded by a fixed ambient level of 0.8 plus the light
from a point at (0, 0, 10), capped at full brightness.

## Using the pieces as a library

- `cookiedog.gameobject`
  - `TextureInfo(id, aspect_ratio)`: a texture handle and its width/height
    ratio.
  - `GameObject(position, size, texture_id, is_visible, aspect_ratio)`:
    - `min()` and `max()` give the corners of its box in the XY plane.
    - The box is `size * aspect_ratio` wide and `size` tall.
  - `check_collision(one, two)`: true when the two boxes overlap or touch.
- `cookiedog.resources.ResourceManager`
  - `load_texture(file_path, name)` loads an image once per name.
  - `get_texture(name)` returns the `TextureInfo` for a name. An unknown
    name gets an empty one, with id 0.
  - `surfaces` maps texture ids to the loaded pygame surfaces.
  - `clear()` forgets every texture.
- `cookiedog.sound.SoundManager`
  - `init()` starts the mixer. It raises `RuntimeError` if the mixer fails.
  - `play_music(file_path)` returns whether playback started.
  - `play_sound_effect(file_path)` returns the pygame channel, or `None`.
  - `close()` stops the mixer. The class also works as a context manager.
  - `play_music` and `play_sound_effect` raise `RuntimeError` if called
    before `init()`.
- `cookiedog.game`
  - `load_config(path)` reads a JSON settings file.
  - `build_scene(dog_texture, cookie_texture, background_texture)` returns a
    `Scene`. `Scene` has these members:
    - `update(dt, up, down, left, right)` moves the dog, hides each cookie
      it touches, and returns the cookies eaten in that step.
    - `brightness(obj)` returns the shading level of an object.
  - `project(point, camera_position, camera_center, width, height)` maps a
    world point to window pixels. It returns `None` when the point lies
    outside the camera's depth range.
  - `main(argv=None)` runs the game.

```python
from cookiedog.gameobject import TextureInfo
from cookiedog.game import build_scene

scene = build_scene(TextureInfo(1, 1.0), TextureInfo(2, 1.0), TextureInfo(3, 1.6))
eaten = scene.update(0.5, up=False, down=False, left=False, right=True)
```

## What it does not do

- The game has no on-screen inspector. You cannot change the dog's position
  or size, the camera, or the ambient light while the game runs. These are
  fixed values, or you set them on a `Scene` in your own code.
- The game draws each object as a flat, scaled image placed by the camera
  projection. It has no 3D renderer and no shaders.
- It keeps no score, has no win or game-over screen, and saves nothing.