# vaniaengine

A small component-based 2D engine for side-scrolling games, built on pygame.

## What is in it

- **Game objects and components** (`vaniaengine.gameobject`,
  `vaniaengine.component`). A `GameObject` holds components and always has a
  `Transform` (position and an `is_static` flag) and an `InstanceId` (a number
  unique within the process). `add_component` attaches a component of a given
  type, or returns the one already attached; `get_component` finds one.
  Components take part in the `awake`, `start`, `update` and `late_update`
  stages of the frame.
- **Sprites** (`vaniaengine.sprite`). `Sprite` draws a region of a texture at
  its owner's position, with scaling; a negative rectangle width or height
  mirrors the image.
- **Animation** (`vaniaengine.animation`, `vaniaengine.animator`). `Animation`
  plays a looping list of `FrameData` entries and mirrors its frames when
  `face` is given a new `FacingDirection`. `Animator` holds one animation per
  `AnimationState`, makes the first one added current, and feeds each new
  frame to the owner's `Sprite`.
- **Input** (`vaniaengine.input`). `Input` samples the arrow keys, WASD and
  Escape once per frame as `Key` values and answers `is_key_pressed`,
  `is_key_down` (just pressed) and `is_key_up` (just released). It reads
  `pygame.key.get_pressed` unless given another `read_keys` function.
- **Movement** (`vaniaengine.movement`). `KeyboardMovement` moves its owner at
  `move_speed` units per second while keys are held and switches the
  `Animator` between idle and walk.
- **Resources** (`vaniaengine.resources`). `ResourceAllocator` loads each path
  once, gives it an integer id, and returns the same id when the path is
  asked for again. `load_texture` loads an image and raises `OSError` if it
  cannot.
- **Tile maps** (`vaniaengine.tilemap`). `TileMapParser.parse` reads a TMX map
  (tilesets plus comma-separated layers) and turns every tile into a
  `GameObject` with a scaled `Sprite` (for visible layers). Tiles on a layer
  named `Collisions` also get a `BoxCollider` on `CollisionLayer.TILE`.
- **Collision** (`vaniaengine.geometry`, `vaniaengine.collider`,
  `vaniaengine.quadtree`, `vaniaengine.collidable_system`). `BoxCollider`
  keeps an axis-aligned `Rect` centred on its owner, tests overlaps, and
  pushes a non-static owner out along the axis on which the two box centres
  are further apart. `CollidableSystem` rebuilds a `QuadTree` each frame and
  uses a `CollisionLayer` → `BitMask` table (`collision_layers`) to decide
  which layers may collide.
- **Drawing and object lifetime** (`vaniaengine.drawable_system`,
  `vaniaengine.object_collection`). `DrawableSystem` draws objects in order of
  their `sort_order`. `ObjectCollection` brings newly added objects to life in
  `process_new_objects` and drops objects queued for removal in
  `process_removals`.
- **Scenes** (`vaniaengine.scene`, `vaniaengine.splash`,
  `vaniaengine.game_scene`). `SceneStateMachine` holds `Scene` instances by
  id and forwards the frame to the current one. `SplashScreen` shows
  `SplashTest.png` for three seconds and then switches to another scene.
  `GameScene` builds a keyboard-controlled player from `viking.png` and loads
  `testMap.tmx` as the level.
- **Window and game** (`vaniaengine.window`, `vaniaengine.game`). `Window`
  opens a 1920×1080 pygame display, clears it to white each frame and closes
  on a quit event. `Game` sets up the splash screen and the game scene and
  measures the time between frames.

## Running a game

`Game` opens the window and sets up the scenes. Your own loop drives it:

```python
from vaniaengine.game import Game

game = Game()
while game.is_running():
    game.capture_input()
    game.update()
    game.late_update()
    game.draw()
    game.calculate_delta_time()
```

Files are looked up by joining their names to `WorkingDirectory.path`
(`"./"` by default). `Game` also accepts its own window, working directory,
texture allocator, `Input` and clock, which makes it possible to run it
without a display.

## Writing your own scene

Subclass `Scene` and implement `on_create` and `on_destroy`; override any of
`on_activate`, `on_deactivate`, `process_input`, `update`, `late_update` and
`draw` as needed. `SceneStateMachine.add` calls `on_create` and returns the
new scene's id; `SceneStateMachine.switch_to` makes it current, and
`SceneStateMachine.remove` calls `on_destroy` and forgets it.

## What it does not do

- There is no command to start a game; run a loop like the one above.
- No images or maps are included. If `SplashTest.png` cannot be loaded the
  splash screen draws nothing, and if `viking.png` is missing the player has
  no texture, but a missing or malformed `testMap.tmx` makes
  `GameScene.on_create` raise.
- There is no sound, no physics beyond pushing boxes apart, and no way to
  save or load game state.

## Tests

The test suite uses pytest; install the `test` extra and run `pytest`.