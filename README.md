# indiegame

A small 2D game engine built on pygame, with a sample game that uses it.

## How the engine is organised

- **Game objects** (`indiegame.game_object.GameObject`) hold **components**,
  at most one per `ComponentType` slot. Every object starts with a `Transform`
  and a `SpriteRenderer`. It can also gain an `Animator`, a `Camera` or a
  `Script`, such as `PlayerScript`. `add_component(cls)` creates a component and
  attaches it. `get_component(cls)` returns the first attached component of
  that class.
- A `Transform` has a `position` and a `velocity`. On each update it moves by
  `velocity * delta_time`.
- A `Camera` centres the view on its owner. The renderers draw through
  `Camera.main`.
- An `Animator` keeps named `Animation`s. Each animation is a row of frames cut
  from a sprite sheet. Frames are drawn at five times their size.
  `play_animation(name, loop=True)` starts an animation from its first frame.
- A **scene** (`indiegame.scene.Scene`) holds sixteen **layers**, one for each
  index up to `LayerType.MAX`. Each layer updates and renders its game objects
  in order, and the scene works through its layers from the lowest to the
  highest.
- `SceneManager` keeps named scenes and one active scene. `load_scene(name)`
  switches the active scene and raises `KeyError` for an unknown name.
- `ResourceManager.load(engine, key, path, Texture)` loads a texture once and
  returns the cached copy on later calls. `Texture` reads `.bmp` files, drawn
  with magenta as the transparent colour, and `.png` files. A file that cannot
  be read raises `OSError`.
- `InputManager.get_instance()` maps action names to keys. Each frame
  `update(is_down)` moves every binding through the states `DOWN`, `PRESSED`,
  `UP` and `NONE`. `get_key_down`, `get_key_pressed` and `get_key_up` report
  these states.
- `Vector2` in `indiegame.vector` is an immutable 2D vector. It supports `+`,
  `-`, `*` and `/` by a scalar, `dot`, `length` and `normalized`.

## Installing

```
pip install .
```

## Running the sample game

```
indiegame
```

This opens a 672×846 window and starts in the play scene. The play scene holds
a camera and the player character, which plays the four-frame `CatFrontMove`
animation. Keys:

| Key | Action                                   |
|-----|------------------------------------------|
| W   | move up                                  |
| S   | move down                                |
| A   | move left                                |
| D   | move right                               |
| N   | switch between the play and title scenes |

A movement key takes effect from the second frame it is held. The player then
moves at 300 pixels per second along each axis that has a key held.

Options:

- `--resources DIR`: the directory that holds the images. The default is
  `../resources`. The game loads `blue_sky.png` and `Sprites/ChickenAlpha.bmp`
  from it and stops with `OSError` if either cannot be read.
- `--frames N`: stop after `N` frames. Without it the game runs until the
  window is closed.

## Using the engine

Subclass `indiegame.engine.Engine` and implement `on_create`, `on_destroy`,
`on_update`, `on_late_update` and `render`. Call `create()` to open the window
and `run(max_frames=None)` to drive the loop. Each frame calls `step(delta_time)`,
which reads input, updates and late-updates. Draw into the back buffer with
`clear(r, g, b)` and show it with `present()`. The `key_source` attribute is the
function that `step` asks whether a key is held. `indiegame.game.GameEngine` is
a complete example.

`indiegame.objects.instantiate(game_object_cls, layer_type, position=None)`
creates a game object on a layer of the active scene. It raises `RuntimeError`
if no scene is active.

## What it does not do

- The title scene and the ending scene are empty. The ending scene is created
  but nothing switches to it.
- The play scene's background draws the texture registered as `BG`, and the
  game never loads one, so no background appears. The `blue_sky.png` image is
  loaded under the key `MAP` but is not used.
- There is no sound, no collision handling and no saving of any kind.

## Tests

```
pip install .[test]
pytest
```