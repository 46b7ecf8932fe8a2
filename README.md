# friendlyjam

The window-free core of a small two-player cooperative puzzle game. One
player is the *dispatcher*, who looks around a room; the other is the
*solver*. The package holds the game's logic, layout and UI bookkeeping as
plain Python with no dependencies beyond the standard library.

## Modules

- `friendlyjam.layout`: `Vec2` (immutable, element-wise arithmetic,
  `length`, `rotate`) and `Aabb`, an axis-aligned box with corner and size
  helpers, `contains` (half-open), `extend_*`, and layout helpers:
  `cut_left` / `cut_right` / `cut_top` / `cut_bottom` and their `split_*`
  ratio forms (these shrink the box in place and return the cut-off part),
  `split_rows`, `split_columns`, `stack`, `stack_aligned`, `with_width`,
  `with_height`, `align_pos`, `align_aabb`, `fit_aabb`, `fit_aabb_width`,
  `fit_aabb_height`, `square_longside`, `square_shortside`, `zero_size`.
- `friendlyjam.model`: `GameRole`, `DispatcherState`, `RoomInfo`, and the
  `ServerMessage` (`Ping`, `Error`, `RoomJoined`, `StartGame`) and
  `ClientMessage` (`Pong`, `CreateRoom`, `JoinRoom`, `SelectRole`) messages.
  Messages convert to and from externally tagged dictionaries with
  `to_dict` / `from_dict`; malformed data raises `ValueError`.
- `friendlyjam.atlas`: `TextureAtlas` lays texture sizes out left to right
  with a one-pixel gap and gives each a `SubTexture` (normalised `uv` box,
  `pixel_size`). `flatten_atlas_fields` expands names and
  `(folder, children)` pairs into paths; `SpritesAtlas` looks entries up by
  their underscore-joined path; `atlas_texture_paths` gives the `.png` file
  for each entry.
- `friendlyjam.dispatcher`: `DispatcherViewSide` (with `cycle_left` /
  `cycle_right`), `DispatcherItem`, `DispatcherItemPosition`,
  `DispatcherView`, `DispatcherLevel` (views load from dictionaries with
  `from_dict`), and `GameDispatcher`, which maps window cursor positions to
  the fixed 1920x1080 game space, places items (`layout_items`), turns the
  view with the side arrows and toggles the door sign (`cursor_press`).
- `friendlyjam.rendering`: `Color`, `TextRenderOptions` and
  `get_pixel_scale` (scale relative to a 640x360 target).
- `friendlyjam.ui`: `CursorContext`, `MouseButtonContext`, `WidgetState`
  and `WidgetMouseState` with press, release and click detection (a click
  must end within 5 pixels of where it started), `WidgetSfxConfig`,
  `TextEdit` edit sessions, and `UiContext`, which ties them together for
  one frame. Sounds are played through an optional `play_sound(name,
  volume)` callback.
- `friendlyjam.ui_state`: `UiState`, an immediate-mode widget store keyed by
  caller-chosen keys, and `WidgetId`. `iter_widgets` walks the frame's
  widget tree depth first.
- `friendlyjam.geometry`: `Geometry` (triangles, text runs, masked groups)
  and `GeometryContext`, which builds quads, stretched textures, nine-slice
  textures, text and masks with increasing z indices.
- `friendlyjam.widgets`: `Widget`, `TextWidget`, `ButtonWidget`,
  `InputWidget` and `InputFormat` (`ANY`, `INTEGER`, `FLOAT`, `RATIO`,
  each with `fix` to drop disallowed characters).
- `friendlyjam.menus`: `MainMenuUi` with `MainMenuState` and its
  `CreateRoom` / `JoinRoom` actions, and `LobbyUi` with `LobbyState`, which
  sends role choices and answers server messages through a `send` callback.

## Installing

```
pip install .
```

## Examples

```python
from friendlyjam.layout import Aabb, Vec2

screen = Aabb.point(Vec2(0, 0)).extend_positive(Vec2(1920, 1080))
left = screen.split_left(0.5)   # screen now holds the right half
rows = screen.split_rows(3)     # ordered from the top down
```

```python
from friendlyjam.dispatcher import DispatcherViewSide

DispatcherViewSide.FRONT.cycle_left()  # DispatcherViewSide.LEFT
```

```python
from friendlyjam.model import ClientMessage, ServerMessage

ClientMessage.join_room("ABCD").to_dict()   # {"JoinRoom": "ABCD"}
ServerMessage.from_dict("Ping").kind        # "Ping"
```

## What it does not do

The package opens no window and draws nothing: `Geometry` is a
description that a renderer would consume, and text measurement needs a
font object supplied on `UiContext.font`. It loads no image, sound or font
files, and it has no network client or game server; messages are only
encoded and decoded, and `LobbyState` hands outgoing messages to the
callback it is given. There is no command to run.

## Running the tests

```
pip install .[test]
pytest
```