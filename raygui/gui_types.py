"""Shared enumerations, key codes and human-readable names for the viewer."""

from __future__ import annotations

from enum import IntEnum, IntFlag


class CameraType(IntEnum):
    """Navigation camera models available in the viewport."""

    ORBIT_CAM = 0
    FREE_CAM = 1


class DebugMode(IntEnum):
    """Channel display modes for the rendered image."""

    RGB = 0
    RED = 1
    GREEN = 2
    BLUE = 3
    ALPHA = 4
    LUMINANCE = 5
    SATURATION = 6
    RGB_NORMALIZED = 7
    NUM_SAMPLES = 8


class InspectorMode(IntEnum):
    """What the scene inspector reports for a picked pixel."""

    INSPECT_NONE = 0
    INSPECT_LIGHT_CONTRIBUTIONS = 1
    INSPECT_GEOMETRY = 2
    INSPECT_GEOMETRY_PART = 3
    INSPECT_MATERIAL = 4


class FrameType(IntEnum):
    """Pixel layout of a frame handed to the display."""

    RGB8 = 0
    XYZW32 = 1
    XYZ32 = 2


class DenoisingBufferMode(IntEnum):
    """Which additional buffers are fed to the denoiser."""

    BEAUTY = 0
    BEAUTY_ALBEDO = 1
    BEAUTY_ALBEDO_NORMALS = 2


class Action(IntEnum):
    """Every action that can be bound to keyboard or mouse input."""

    NONE = 0

    # Camera movement
    CAM_TOGGLE_ACTIVE_TYPE = 1
    CAM_FORWARD = 2
    CAM_BACKWARD = 3
    CAM_LEFT = 4
    CAM_RIGHT = 5
    CAM_UP = 6
    CAM_DOWN = 7
    CAM_SLOW_DOWN = 8
    CAM_SPEED_UP = 9
    CAM_RESET = 10
    CAM_RECENTER = 11
    CAM_PRINT_MATRICES = 12
    CAM_SET_UP_VECTOR = 13
    CAM_ROTATE = 14
    CAM_DOLLY = 15
    CAM_TRACK = 16
    CAM_ROLL = 17

    # Image 2D navigation
    IMAGE2D_PAN = 18
    IMAGE2D_ZOOM = 19

    # Denoising
    DENOISE_TOGGLE_ON_OFF = 20
    DENOISE_TOGGLE_MODE = 21
    DENOISE_SELECT_BUFFERS = 22

    # Channels
    CHANNEL_TOGGLE_RGB = 23
    CHANNEL_TOGGLE_RED = 24
    CHANNEL_TOGGLE_GREEN = 25
    CHANNEL_TOGGLE_BLUE = 26
    CHANNEL_TOGGLE_ALPHA = 27
    CHANNEL_TOGGLE_LUMINANCE = 28
    CHANNEL_TOGGLE_RGB_NORMALIZED = 29
    CHANNEL_TOGGLE_NUM_SAMPLES = 30

    # Image adjustment
    EXPOSURE_INCREASE = 31
    EXPOSURE_DECREASE = 32
    EXPOSURE_ADJUST = 33
    EXPOSURE_RESET = 34
    GAMMA_ADJUST = 35
    GAMMA_RESET = 36

    # Fast progressive mode
    FAST_PROGRESSIVE_TOGGLE = 37
    FAST_PROGRESSIVE_NEXT_MODE = 38
    FAST_PROGRESSIVE_PREV_MODE = 39

    # Window toggles
    WINDOW_TOGGLE_EXPOSURE = 40
    WINDOW_TOGGLE_GAMMA = 41
    WINDOW_TOGGLE_KEY_BINDINGS = 42
    WINDOW_TOGGLE_SCENE_INSPECTOR = 43
    WINDOW_TOGGLE_PATH_VISUALIZER = 44
    WINDOW_TOGGLE_PIXEL_INSPECTOR = 45
    WINDOW_TOGGLE_SNAPSHOT = 46
    WINDOW_TOGGLE_STATUS = 47

    # Output
    RENDER_OUTPUT_PREV = 48
    RENDER_OUTPUT_NEXT = 49
    SAVE_IMAGE = 50
    SNAPSHOT_TAKE = 51
    SNAPSHOT_PREV = 52
    SNAPSHOT_NEXT = 53

    # Misc
    PICK_PATH_VISUALIZER_PIXEL = 54
    TILE_PROGRESS_TOGGLE = 55
    PRINT_KEY_BINDINGS = 56


class Key(IntEnum):
    """Keyboard key codes."""

    SPACE = 32
    APOSTROPHE = 39
    COMMA = 44
    MINUS = 45
    PERIOD = 46
    SLASH = 47
    DIGIT_0 = 48
    DIGIT_1 = 49
    DIGIT_2 = 50
    DIGIT_3 = 51
    DIGIT_4 = 52
    DIGIT_5 = 53
    DIGIT_6 = 54
    DIGIT_7 = 55
    DIGIT_8 = 56
    DIGIT_9 = 57
    SEMICOLON = 59
    EQUAL = 61
    A = 65
    B = 66
    C = 67
    D = 68
    E = 69
    F = 70
    G = 71
    H = 72
    I = 73  # noqa: E741
    J = 74
    K = 75
    L = 76
    M = 77
    N = 78
    O = 79  # noqa: E741
    P = 80
    Q = 81
    R = 82
    S = 83
    T = 84
    U = 85
    V = 86
    W = 87
    X = 88
    Y = 89
    Z = 90
    LEFT_BRACKET = 91
    BACKSLASH = 92
    RIGHT_BRACKET = 93
    GRAVE_ACCENT = 96
    ESCAPE = 256
    ENTER = 257
    TAB = 258
    BACKSPACE = 259
    INSERT = 260
    DELETE = 261
    RIGHT = 262
    LEFT = 263
    DOWN = 264
    UP = 265
    PAGE_UP = 266
    PAGE_DOWN = 267
    HOME = 268
    END = 269
    CAPS_LOCK = 280
    SCROLL_LOCK = 281
    NUM_LOCK = 282
    PRINT_SCREEN = 283
    PAUSE = 284
    F1 = 290
    F2 = 291
    F3 = 292
    F4 = 293
    F5 = 294
    F6 = 295
    F7 = 296
    F8 = 297
    F9 = 298
    F10 = 299
    F11 = 300
    F12 = 301
    LEFT_SHIFT = 340
    LEFT_CONTROL = 341
    LEFT_ALT = 342
    LEFT_SUPER = 343
    RIGHT_SHIFT = 344
    RIGHT_CONTROL = 345
    RIGHT_ALT = 346
    RIGHT_SUPER = 347


class MouseButton(IntEnum):
    """Mouse button codes; they share the integer space of key codes."""

    LEFT = 0
    RIGHT = 1
    MIDDLE = 2


class Mod(IntFlag):
    """Standard modifier bits."""

    SHIFT = 0x0001
    CONTROL = 0x0002
    ALT = 0x0004
    SUPER = 0x0008
    CAPS_LOCK = 0x0010
    NUM_LOCK = 0x0020


_ACTION_NAMES: dict[Action, str] = {
    Action.CAM_FORWARD: "Camera Forward",
    Action.CAM_BACKWARD: "Camera Backward",
    Action.CAM_LEFT: "Camera Left",
    Action.CAM_RIGHT: "Camera Right",
    Action.CAM_UP: "Camera Up",
    Action.CAM_DOWN: "Camera Down",
    Action.CAM_SLOW_DOWN: "Camera Slow Down",
    Action.CAM_SPEED_UP: "Camera Speed Up",
    Action.CAM_RESET: "Camera Reset",
    Action.CAM_RECENTER: "Camera Recenter",
    Action.CAM_PRINT_MATRICES: "Camera Print Matrices",
    Action.CAM_SET_UP_VECTOR: "Camera Set Up Vector",
    Action.CAM_ROTATE: "Camera Rotation",
    Action.CAM_DOLLY: "Camera Dolly",
    Action.CAM_TRACK: "Camera Track",
    Action.CAM_ROLL: "Camera Roll",
    Action.IMAGE2D_PAN: "Image 2D Pan",
    Action.IMAGE2D_ZOOM: "Image 2D Zoom",
    Action.DENOISE_TOGGLE_ON_OFF: "Denoise Toggle On/Off",
    Action.DENOISE_TOGGLE_MODE: "Denoise Toggle Mode",
    Action.DENOISE_SELECT_BUFFERS: "Denoise Select Buffers",
    Action.SNAPSHOT_TAKE: "Snapshot Take",
    Action.SNAPSHOT_PREV: "Snapshot Previous",
    Action.SNAPSHOT_NEXT: "Snapshot Next",
    Action.CHANNEL_TOGGLE_RGB: "Channel Toggle RGB",
    Action.CHANNEL_TOGGLE_RED: "Channel Toggle Red",
    Action.CHANNEL_TOGGLE_GREEN: "Channel Toggle Green",
    Action.CHANNEL_TOGGLE_BLUE: "Channel Toggle Blue",
    Action.CHANNEL_TOGGLE_ALPHA: "Channel Toggle Alpha",
    Action.CHANNEL_TOGGLE_LUMINANCE: "Channel Toggle Luminance",
    Action.CHANNEL_TOGGLE_RGB_NORMALIZED: "Channel Toggle RGB Normalized",
    Action.CHANNEL_TOGGLE_NUM_SAMPLES: "Channel Toggle Num Samples",
    Action.EXPOSURE_INCREASE: "Exposure Increase",
    Action.EXPOSURE_DECREASE: "Exposure Decrease",
    Action.EXPOSURE_ADJUST: "Exposure Adjust",
    Action.EXPOSURE_RESET: "Exposure Reset",
    Action.GAMMA_ADJUST: "Gamma Adjust",
    Action.GAMMA_RESET: "Gamma Reset",
    Action.FAST_PROGRESSIVE_TOGGLE: "Fast Progressive Toggle",
    Action.FAST_PROGRESSIVE_NEXT_MODE: "Fast Progressive Next Mode",
    Action.FAST_PROGRESSIVE_PREV_MODE: "Fast Progressive Previous Mode",
    Action.WINDOW_TOGGLE_EXPOSURE: "Window Toggle Exposure",
    Action.WINDOW_TOGGLE_GAMMA: "Window Toggle Gamma",
    Action.WINDOW_TOGGLE_KEY_BINDINGS: "Window Toggle Key Bindings",
    Action.WINDOW_TOGGLE_SCENE_INSPECTOR: "Window Toggle Scene Inspector",
    Action.WINDOW_TOGGLE_PATH_VISUALIZER: "Window Toggle Path Visualizer",
    Action.WINDOW_TOGGLE_PIXEL_INSPECTOR: "Window Toggle Pixel Inspector",
    Action.WINDOW_TOGGLE_SNAPSHOT: "Window Toggle Snapshot",
    Action.WINDOW_TOGGLE_STATUS: "Window Toggle Status",
    Action.SAVE_IMAGE: "Save Image",
    Action.PICK_PATH_VISUALIZER_PIXEL: "Pick Path Visualizer Pixel",
    Action.CAM_TOGGLE_ACTIVE_TYPE: "Camera Toggle Active Type",
    Action.TILE_PROGRESS_TOGGLE: "Tile Progress Toggle",
    Action.RENDER_OUTPUT_PREV: "Render Output Previous",
    Action.RENDER_OUTPUT_NEXT: "Render Output Next",
    Action.PRINT_KEY_BINDINGS: "Print Key Bindings",
}

_SPECIAL_KEY_NAMES: dict[int, str] = {
    MouseButton.LEFT: "LMB",
    MouseButton.RIGHT: "RMB",
    MouseButton.MIDDLE: "MMB",
    Key.SPACE: "SPACE",
    Key.APOSTROPHE: "'",
    Key.COMMA: ",",
    Key.MINUS: "-",
    Key.PERIOD: ".",
    Key.SLASH: "/",
    Key.SEMICOLON: ";",
    Key.EQUAL: "=",
    Key.LEFT_BRACKET: "[",
    Key.BACKSLASH: "\\",
    Key.RIGHT_BRACKET: "]",
    Key.GRAVE_ACCENT: "`",
    Key.ESCAPE: "ESC",
    Key.ENTER: "ENTER",
    Key.TAB: "TAB",
    Key.BACKSPACE: "BACKSPACE",
    Key.INSERT: "INSERT",
    Key.DELETE: "DELETE",
    Key.RIGHT: "RIGHT",
    Key.LEFT: "LEFT",
    Key.DOWN: "DOWN",
    Key.UP: "UP",
    Key.PAGE_UP: "PAGE_UP",
    Key.PAGE_DOWN: "PAGE_DOWN",
    Key.HOME: "HOME",
    Key.END: "END",
    Key.CAPS_LOCK: "CAPS_LOCK",
    Key.SCROLL_LOCK: "SCROLL_LOCK",
    Key.NUM_LOCK: "NUM_LOCK",
    Key.PRINT_SCREEN: "PRINT_SCREEN",
    Key.PAUSE: "PAUSE",
    **{Key.F1 + i: f"F{i + 1}" for i in range(12)},
    Key.LEFT_SHIFT: "LEFT_SHIFT",
    Key.LEFT_CONTROL: "LEFT_CTRL",
    Key.LEFT_ALT: "LEFT_ALT",
    Key.LEFT_SUPER: "LEFT_SUPER",
    Key.RIGHT_SHIFT: "RIGHT_SHIFT",
    Key.RIGHT_CONTROL: "RIGHT_CTRL",
    Key.RIGHT_ALT: "RIGHT_ALT",
    Key.RIGHT_SUPER: "RIGHT_SUPER",
}

_MOUSE_NAMES = frozenset({"LMB", "RMB", "MMB"})


def action_name(action: int) -> str:
    """Return the human-readable name of an action, or "" if it has none."""
    try:
        return _ACTION_NAMES.get(Action(action), "")
    except ValueError:
        return ""


def key_name(key: int) -> str:
    """Return the human-readable name of a key or mouse button code."""
    if Key.A <= key <= Key.Z or Key.DIGIT_0 <= key <= Key.DIGIT_9:
        return chr(key).upper()
    return _SPECIAL_KEY_NAMES.get(key, "UNKNOWN")


def modifier_name(mod: int) -> str:
    """Return the modifier as "NAME+", or "" when there is none."""
    if mod == 0:
        return ""

    # Secondary keys acting as modifiers; mouse buttons overlap real mod bits.
    name = key_name(mod)
    if name != "UNKNOWN" and name not in _MOUSE_NAMES:
        return name + "+"

    if mod & Mod.CONTROL:
        return "CTRL+"
    if mod & Mod.SHIFT:
        return "SHIFT+"
    if mod & Mod.ALT:
        return "ALT+"
    return ""