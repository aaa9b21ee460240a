# raygui

Interactive navigation and input handling for a render viewer: camera
models that turn keyboard and mouse input into camera-to-world matrices,
and a remappable table of key bindings that turns key presses into
viewer actions.

Matrices are 4x4 `numpy` arrays in row-vector convention: a point `p` is
transformed as `p @ m`, the last row holds the camera position, and the
third row points away from the view direction.

## Installation

```
pip install .
pip install ".[test]"   # with pytest, to run the tests
```

## What is in the package

- `raygui.gui_types` – the viewer's enumerations (`Action`, `Key`,
  `MouseButton`, `Mod`, `CameraType`, `DebugMode`, `InspectorMode`,
  `FrameType`, `DenoisingBufferMode`) and human-readable names for them:
  `action_name`, `key_name`, `modifier_name`.
- `raygui.mouse_timer` – `MouseTimer`, which tells a quick click
  (under 300 ms) from a held button. Its `clock` can be replaced by any
  function returning monotonic nanoseconds.
- `raygui.navigation` – the `NavigationCam` base class, the
  `HalfOpenViewport` rectangle, and small matrix helpers: `rotation`,
  `translation`, `transform_vector`, `format_matrix`.
- `raygui.free_cam` – `FreeCam`, a fly-through camera with yaw, pitch,
  roll, velocity and dampening, plus `camera_matrix` to build its matrix.
- `raygui.orbit_cam` – `OrbitCam`, a camera that tumbles around a focus
  point, tracks, dollies and rolls; `OrbitCamera` holds its state.
- `raygui.bindings` – `KeyboardBindings` with the default layout, and the
  `MayaKeyboardBindings` and `HoudiniKeyboardBindings` variants.
- `raygui.keyboard` – `Keyboard`, which switches between layouts
  (`KeyboardMode`) while keeping custom bindings, detects conflicts
  (`BindingConflictError`), and saves and loads custom bindings.

## Driving a camera

A camera is reset to a starting transform, fed input events, and asked
for a new matrix once per frame with the elapsed time in seconds:

```python
import numpy as np

from raygui.free_cam import FreeCam
from raygui.gui_types import Action

cam = FreeCam()
xform = cam.reset_transform(np.eye(4), True)

cam.process_key_press(Action.CAM_FORWARD, (0, 0))
xform = cam.update(1 / 24)
cam.process_key_release(Action.CAM_FORWARD)

print(cam.camera_matrices_text())
```

`reset_camera()` returns to the first transform the camera was given, or
to the last one passed with `make_default` set. `print_camera_matrices()`
writes the same text as `camera_matrices_text()` to standard output, in a
form that can be pasted into a scene file as a node xform.

`OrbitCam` works the same way. After a rotate, track, dolly or roll
action is pressed, mouse movement moves the camera around its focus
point. To pick a focus point in the scene, give it a render context with
`set_render_context`; the context must provide `rezed_region_window()`
and `rezed_aperture_window()` (each returning a `HalfOpenViewport`) and
`handle_pick_location(x, y)` returning the hit point or `None`. Without a
context, the focus stays one unit in front of the camera and
recentering does nothing.

## Key bindings

```python
from raygui.gui_types import Action, Key, Mod, action_name
from raygui.keyboard import BindingConflictError, Keyboard

keyboard = Keyboard()
action = keyboard.action_from_input(Key.W, 0, ())
print(action_name(action))             # Camera Forward

try:
    keyboard.add_custom_binding(Key.S, Mod.CONTROL, Action.CAM_RESET, False)
except BindingConflictError as err:
    print(err)                         # Ctrl+S is bound to SAVE_IMAGE

keyboard.set_maya_keyboard_mode()      # custom bindings are kept
keyboard.save_key_bindings("bindings.txt")
keyboard.load_key_bindings("bindings.txt")
print(keyboard.format_key_bindings())
```

A binding is a `(key, modifier)` pair, and each action has at most one.
Binding an action to a new pair drops its old pair. With
`force_override=True`, `add_custom_binding` takes the pair from whatever
action held it and returns that action. `reset_binding_to_default`
restores one action's default pair and `reset_to_defaults` drops every
custom binding.

Besides Shift, Control and Alt, an ordinary key held down can act as a
modifier (for example `X` with the left mouse button adjusts exposure).
Pass the keys currently held in `pressed_keys` so they are taken into
account. Scroll input is always `Action.IMAGE2D_ZOOM`.

The saved file holds one custom binding per line as `key,modifier,action`
in integer codes, after `#` comment lines. Only bindings that differ from
the layout's defaults are written. Loading first resets to the current
layout's defaults and skips lines it cannot parse.

## What the package does not do

This package holds no window, event loop, renderer or image display, and
it installs no command. It does not read input devices itself. The
application feeds it actions, cursor positions and held keys, and uses
the matrices and actions it returns.