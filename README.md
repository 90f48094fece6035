# hollowzero

The beginnings of a side-scrolling action game on pygame. It has a
window and a main loop that draws a background through a camera, and a set
of building blocks for the game itself: 2D vectors, timers, sprite
animations, texture atlases, layered collision boxes, a state machine, an
asset manager and a keyboard-driven player character.

## Installing

```
pip install .
```

## Running

```
hollowzero [--assets DIR]
```

This opens a 1280×720 window titled "Atlas", hides the mouse cursor and runs
frames until the window is closed. Each frame updates the camera and draws
the texture named `background` centred in the window.

Assets are read from `--assets` (default: `assets` in the current directory):

- every `.png` under it becomes a texture, keyed by its path relative to the
  asset directory with forward slashes and no extension (for example
  `player/idle`);
- every `.mp3` becomes a sound, keyed the same way;
- every sub-directory of `enemy/` that holds `.png` files becomes an atlas
  named after the directory, built from `1.png`, `2.png`, … up to the number
  of `.png` files it holds.

If the asset directory or its `enemy/` sub-directory is missing, or a file
cannot be loaded, the message is printed to standard error (and kept in
`Game.load_error`) and the window opens anyway; with no `background`
texture nothing is drawn.

## What the game does not do yet

The running game shows only the background. The player, the collision
manager and the state machine are not part of the main loop: no character
is updated, drawn or controlled from the window, there are no enemies and no
player states are registered, and the camera is never asked to shake.

## Using the pieces

- `hollowzero.vector2.Vector2` — a mutable 2D vector. `a + b`, `a - b`,
  `a * k` scale; `a * b` between vectors is the dot product, while
  `a *= b` multiplies component-wise. `length()` and `normalize()` (a zero
  vector normalises to zero).
- `hollowzero.timer.Timer` — accumulates time in `update(delta_time)` and
  calls `on_timeout` whenever `duration` is reached; a `one_shot` timer fires
  once until `restart()`. `pause()` and `resume()`.
- `hollowzero.atlas.Atlas` — an ordered list of textures;
  `get_texture(idx)` returns `None` out of range.
- `hollowzero.animation.Animation` — frames from a horizontal strip
  (`add_frames_from_strip`) or an atlas (`add_frames_from_atlas`), advanced
  every `interval` seconds, looping or stopping on the last frame and then
  calling `on_finished`. `render(camera)` draws the current frame centred on
  `position`; `AnchorMode` is stored but does not change the drawing.
- `hollowzero.camera.Camera` — draws textures onto a surface offset by its
  position; `shake(strength, duration)` jitters the position until the
  duration runs out.
- `hollowzero.collision` — `CollisionLayer`, `CollisionBox` and
  `CollisionManager`. `handle_collision()` calls `on_collide` of every
  enabled box whose `layer_src` matches an enabled box's `layer_dst` and
  overlaps it; `debug_render(camera)` outlines every box.
- `hollowzero.state_machine` — `StateNode` with `on_enter`, `on_update` and
  `on_exit` hooks, and `StateMachine` with `register_state`, `set_entry`,
  `switch_to` and `on_update`.
- `hollowzero.asset_manager.AssetManager` — `load(root)`, `find_texture`,
  `find_audio`, `find_atlas`, `create_atlas`, `create_atlas_by_pattern`;
  errors are raised as `AssetError`. Also `play_audio(name, should_loop)` and
  `random_int(min_value, max_value)`.
- `hollowzero.character.Character` — hit points, gravity, a floor at
  y = 620, horizontal bounds 0–1280, hit and hurt boxes, one second of
  blinking invulnerability after a hit, and left/right `AnimationGroup`s.
- `hollowzero.player.Player` — reads A/D or ←/→ to run, J to attack, Space
  to jump, K or Left Shift to roll, and offers `can_jump`, `can_roll`,
  `can_attack`, `on_jump`, `on_landing`, `on_roll`, `on_attack` and
  `update_attack_direction(x, y)`. `on_attack` always uses the right-hand
  slash, a roll stays unavailable after the first one, and the attack is
  re-armed when the roll cooldown expires.
- `hollowzero.character_manager.CharacterManager` — holds the player and an
  optional enemy and forwards input, update and render to the player.
- `hollowzero.game.Game` — the window and main loop; pass a `surface` to
  draw off-screen without opening a window.

## Running the tests

```
pip install .[test]
pytest
```