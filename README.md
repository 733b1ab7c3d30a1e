# cartengine

A small 2D game framework built on pygame, with a demo game on top.

What it offers:

- `cartengine.application.Application` opens the window and runs the main
  loop; `cartengine.world.World` holds the actors and one HUD, updates and
  draws them, and every few seconds releases the actors that were destroyed.
- `cartengine.actor.Actor` is the base of everything placed on screen;
  `cartengine.sprite.Sprite` draws an image and `cartengine.shape.Shape`
  draws a filled rectangle or circle.
- UI widgets: `cartengine.uielement.UIElement` (a coloured or textured panel
  that holds child elements), `cartengine.text.Text` (a single aligned line
  of text), `cartengine.uibutton.UIButton` (hover, press and click, with an
  optional caption) and `cartengine.hud.HUD`.
- `cartengine.textbox.draw_text_boxed` lays out text inside a rectangle with
  optional word wrapping and a selected range; it returns the placed glyphs,
  and with `surface=None` it only computes the layout.
- `cartengine.assets.AssetManager` loads each texture and font once and
  shares it; `clean_cycle()` forgets the assets that only the cache still
  holds.
- `cartengine.clock.Clock` for frame timing, `cartengine.objects.Delegate`
  for event callbacks, vector and colour helpers in `cartengine.mathutil`,
  value types, enumerations and property records in
  `cartengine.properties`, and easing curves in `cartengine.easing`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running the demo game

```
cartgame
```

This opens an 800×600 window titled "Puzzle Maker". It shows the image
`cartengine.png` with a "Welcome to" caption, and a small "X" button near
the top-right corner. Clicking the button quits, and so does closing the
window.

The game reads its files from an `assets` folder in the working directory:
`assets/cartengine.png` and the font `assets/fonts/framd.ttf`. A missing
image is simply not drawn; a missing font stops start-up with
`FileNotFoundError`.

## Using the framework

Build a game by subclassing `Application`:

```python
from cartengine.application import Application
from cartengine.world import World
from cartengine.properties import Vector2, Color, ShapeType
from cartengine.shape import Shape


class MyGame(Application):
    def init(self):
        super().init()
        world = self.load_world(World)
        world.init()
        world.spawn_actor(
            Shape, "box", Vector2(100, 100), 40, 40,
            Color(200, 40, 40, 255), ShapeType.RECTANGLE,
        )


game = MyGame(800, 600, "My game")
game.init()
game.begin_play()
game.run()
```

`run()` must follow `init()`; otherwise it raises `RuntimeError`. When the
loop ends it marks the world's actors for destruction, empties the asset
cache and closes pygame.

## Easing curves

```python
from cartengine.easing import Easing, get_easing_function

ease = get_easing_function(Easing.EASE_OUT_QUAD)
ease(0.5)  # 0.75
```

An unknown curve number raises `ValueError`.

## Events

A `Delegate` keeps callbacks bound to objects without keeping those
objects alive. Each call to `broadcast` calls the callbacks whose object
still exists and drops the others:

```python
button.on_button_clicked.bind_action(hud, hud.quit_button_clicked)
```

## What it does not do

The demo game stays on its title screen: it has no levels and no gameplay
beyond the welcome panel and the exit button. `cartengine.properties`
defines records for particles and emitters (`ParticleProperties`,
`ParticleSystemProperties`, `EmitterBox` and the like), but the package
has no particle system that uses them.