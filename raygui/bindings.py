"""Key and mouse bindings mapping key/modifier pairs to actions."""

from __future__ import annotations

import sys
from typing import Collection, Iterator

from raygui.gui_types import (
    Action,
    Key,
    Mod,
    MouseButton,
    action_name,
    key_name,
    modifier_name,
)

KeyModPair = tuple[int, int]

INVALID_KEYMOD: KeyModPair = (-1, -1)
MOD_NONE = 0


class _BijectiveMap:
    """One-to-one map between key/mod pairs and actions.

    Inserting a pair or an action that is already present drops its old partner.
    """

    def __init__(self) -> None:
        self._forward: dict[KeyModPair, Action] = {}
        self._backward: dict[Action, KeyModPair] = {}

    def copy(self) -> _BijectiveMap:
        other = _BijectiveMap()
        other._forward = dict(self._forward)
        other._backward = dict(self._backward)
        return other

    def insert(self, pair: KeyModPair, action: Action) -> None:
        pair = (int(pair[0]), int(pair[1]))
        action = Action(action)
        old_action = self._forward.pop(pair, None)
        if old_action is not None:
            self._backward.pop(old_action, None)
        old_pair = self._backward.pop(action, None)
        if old_pair is not None:
            self._forward.pop(old_pair, None)
        self._forward[pair] = action
        self._backward[action] = pair

    def has_key(self, pair: KeyModPair) -> bool:
        return (int(pair[0]), int(pair[1])) in self._forward

    def has_value(self, action: Action) -> bool:
        return action in self._backward

    def value(self, pair: KeyModPair) -> Action:
        return self._forward[(int(pair[0]), int(pair[1]))]

    def key(self, action: Action) -> KeyModPair:
        return self._backward[action]

    def remove_by_value(self, action: Action) -> None:
        pair = self._backward.pop(action, None)
        if pair is not None:
            self._forward.pop(pair, None)

    def items(self) -> Iterator[tuple[KeyModPair, Action]]:
        return iter(list(self._forward.items()))


def _binding_line(pair: KeyModPair, action: Action) -> str:
    key, mod = pair
    return f"{action_name(action)}: {modifier_name(mod)}{key_name(key)}\n"


class KeyboardBindings:
    """The default bindings, plus any custom bindings added at runtime."""

    def __init__(self) -> None:
        self._scroll_action = Action.IMAGE2D_ZOOM
        self._bindings = _BijectiveMap()
        self._special_mods: set[int] = set()

        insert = self._bindings.insert
        # Keys
        insert((Key.DIGIT_1, MOD_NONE), Action.CHANNEL_TOGGLE_RED)
        insert((Key.DIGIT_2, MOD_NONE), Action.CHANNEL_TOGGLE_GREEN)
        insert((Key.DIGIT_3, MOD_NONE), Action.CHANNEL_TOGGLE_BLUE)
        insert((Key.DIGIT_4, MOD_NONE), Action.CHANNEL_TOGGLE_ALPHA)
        insert((Key.DIGIT_5, MOD_NONE), Action.CHANNEL_TOGGLE_LUMINANCE)
        insert((Key.DIGIT_6, MOD_NONE), Action.CHANNEL_TOGGLE_RGB_NORMALIZED)
        insert((Key.DIGIT_7, MOD_NONE), Action.CHANNEL_TOGGLE_NUM_SAMPLES)

        insert((Key.A, MOD_NONE), Action.CAM_LEFT)
        insert((Key.B, MOD_NONE), Action.DENOISE_SELECT_BUFFERS)
        insert((Key.C, MOD_NONE), Action.CAM_DOWN)
        insert((Key.D, MOD_NONE), Action.CAM_RIGHT)
        insert((Key.E, MOD_NONE), Action.CAM_SPEED_UP)
        insert((Key.F, MOD_NONE), Action.CAM_RECENTER)
        insert((Key.G, MOD_NONE), Action.WINDOW_TOGGLE_KEY_BINDINGS)
        insert((Key.H, MOD_NONE), Action.PRINT_KEY_BINDINGS)
        insert((Key.I, MOD_NONE), Action.WINDOW_TOGGLE_SCENE_INSPECTOR)
        insert((Key.K, MOD_NONE), Action.SNAPSHOT_TAKE)
        insert((Key.L, MOD_NONE), Action.FAST_PROGRESSIVE_TOGGLE)
        insert((Key.M, MOD_NONE), Action.CAM_PRINT_MATRICES)
        insert((Key.N, MOD_NONE), Action.DENOISE_TOGGLE_ON_OFF)
        insert((Key.O, MOD_NONE), Action.CAM_TOGGLE_ACTIVE_TYPE)
        insert((Key.P, MOD_NONE), Action.WINDOW_TOGGLE_PIXEL_INSPECTOR)
        insert((Key.Q, MOD_NONE), Action.CAM_SLOW_DOWN)
        insert((Key.R, MOD_NONE), Action.CAM_RESET)
        insert((Key.S, MOD_NONE), Action.CAM_BACKWARD)
        insert((Key.T, MOD_NONE), Action.TILE_PROGRESS_TOGGLE)
        insert((Key.U, MOD_NONE), Action.CAM_SET_UP_VECTOR)
        insert((Key.V, MOD_NONE), Action.WINDOW_TOGGLE_PATH_VISUALIZER)
        insert((Key.W, MOD_NONE), Action.CAM_FORWARD)

        insert((Key.PERIOD, MOD_NONE), Action.RENDER_OUTPUT_NEXT)
        insert((Key.COMMA, MOD_NONE), Action.RENDER_OUTPUT_PREV)
        insert((Key.GRAVE_ACCENT, MOD_NONE), Action.CHANNEL_TOGGLE_RGB)
        insert((Key.LEFT, MOD_NONE), Action.SNAPSHOT_PREV)
        insert((Key.RIGHT, MOD_NONE), Action.SNAPSHOT_NEXT)
        insert((Key.UP, MOD_NONE), Action.EXPOSURE_INCREASE)
        insert((Key.DOWN, MOD_NONE), Action.EXPOSURE_DECREASE)
        insert((Key.SPACE, MOD_NONE), Action.CAM_UP)

        insert((Key.N, Mod.SHIFT), Action.DENOISE_TOGGLE_MODE)
        insert((Key.X, Mod.SHIFT), Action.EXPOSURE_RESET)
        insert((Key.Y, Mod.SHIFT), Action.GAMMA_RESET)
        insert((Key.UP, Mod.ALT), Action.FAST_PROGRESSIVE_NEXT_MODE)
        insert((Key.DOWN, Mod.ALT), Action.FAST_PROGRESSIVE_PREV_MODE)
        insert((Key.K, Mod.ALT), Action.WINDOW_TOGGLE_SNAPSHOT)
        insert((Key.S, Mod.ALT), Action.WINDOW_TOGGLE_STATUS)
        insert((Key.X, Mod.ALT), Action.WINDOW_TOGGLE_EXPOSURE)
        insert((Key.Y, Mod.ALT), Action.WINDOW_TOGGLE_GAMMA)

        insert((Key.S, Mod.CONTROL), Action.SAVE_IMAGE)

        # Mouse
        insert((MouseButton.LEFT, MOD_NONE), Action.PICK_PATH_VISUALIZER_PIXEL)
        insert((MouseButton.MIDDLE, MOD_NONE), Action.IMAGE2D_PAN)

        insert((MouseButton.LEFT, Mod.ALT), Action.CAM_ROTATE)
        insert((MouseButton.MIDDLE, Mod.ALT), Action.CAM_TRACK)
        insert((MouseButton.RIGHT, Mod.ALT), Action.CAM_DOLLY)
        insert((MouseButton.LEFT, Mod.CONTROL), Action.CAM_ROLL)

        insert((MouseButton.LEFT, Key.X), Action.EXPOSURE_ADJUST)
        insert((MouseButton.LEFT, Key.Y), Action.GAMMA_ADJUST)
        # Keys acting as modifiers are tracked separately.
        self._special_mods.update((Key.X, Key.Y))

        self._defaults = self._bindings.copy()

    # ------------------------------------------------------------ lookup

    def key_mod_pair(self, action: Action) -> KeyModPair:
        """The pair bound to ``action``, or INVALID_KEYMOD if unbound."""
        if self._bindings.has_value(action):
            return self._bindings.key(action)
        return INVALID_KEYMOD

    def action_from_input(
        self, key_mod_pair: KeyModPair, pressed_keys: Collection[int] = ()
    ) -> Action:
        """The action for the input, letting pressed special keys act as modifiers."""
        key = key_mod_pair[0]
        for special in sorted(self._special_mods):
            if special in pressed_keys and self._bindings.has_key((key, special)):
                return self._bindings.value((key, special))
        return self.action(key_mod_pair)

    def action(self, key_mod_pair: KeyModPair) -> Action:
        """The action bound to exactly this pair, or Action.NONE."""
        if self._bindings.has_key(key_mod_pair):
            return self._bindings.value(key_mod_pair)
        return Action.NONE

    def scroll_action(self) -> Action:
        """The action bound to scroll input."""
        return self._scroll_action

    def default_key_mod_pair(self, action: Action) -> KeyModPair:
        """The default pair for ``action``, or INVALID_KEYMOD if it has none."""
        if self._defaults.has_value(action):
            return self._defaults.key(action)
        return INVALID_KEYMOD

    def is_default_binding(self, action: Action, key_mod_pair: KeyModPair) -> bool:
        """True if ``key_mod_pair`` is the default binding of ``action``."""
        return self.default_key_mod_pair(action) == tuple(key_mod_pair)

    def is_standard_modifier(self, key: int) -> bool:
        """True if ``key`` is a Shift, Ctrl, Alt or Super modifier combination."""
        standard = Mod.SHIFT | Mod.CONTROL | Mod.ALT | Mod.SUPER
        return key < Key.SPACE and bool(key & standard)

    def custom_bindings(self) -> dict[KeyModPair, Action]:
        """The bindings that differ from the defaults."""
        return {
            pair: action
            for pair, action in self._bindings.items()
            if pair != self.default_key_mod_pair(action)
        }

    # ----------------------------------------------------------- changes

    def _remove_binding(self, action: Action) -> None:
        self._bindings.remove_by_value(action)

    def add_custom_binding(self, key_mod_pair: KeyModPair, action: Action) -> None:
        """Bind ``key_mod_pair`` to ``action``, replacing its earlier binding."""
        self._remove_binding(action)
        self._bindings.insert(key_mod_pair, action)
        mod = int(key_mod_pair[1])
        if mod != 0 and not self.is_standard_modifier(mod):
            self._special_mods.add(mod)

    def reset_binding_to_default(self, action: Action) -> None:
        """Restore the default binding of ``action``, if it has one."""
        if self._defaults.has_value(action):
            self._remove_binding(action)
            self._bindings.insert(self._defaults.key(action), action)

    # ------------------------------------------------------------ output

    def format_custom_bindings(self) -> str:
        """The custom bindings as text."""
        lines = ["Custom Bindings:\n", "----------------\n"]
        lines.extend(_binding_line(p, a) for p, a in self.custom_bindings().items())
        return "".join(lines)

    def format_key_bindings(self) -> str:
        """All bindings as text, ordered by action."""
        entries = sorted(self._bindings.items(), key=lambda item: item[1])
        lines = ["\nKey Bindings:\n", "-------------\n"]
        lines.extend(_binding_line(p, a) for p, a in entries)
        lines.append(" ----------------------------\n")
        return "".join(lines)

    def print_custom_bindings(self) -> None:
        """Write the custom bindings to standard output."""
        sys.stdout.write(self.format_custom_bindings())
        sys.stdout.flush()

    def print_key_bindings(self) -> None:
        """Write all bindings to standard output."""
        sys.stdout.write(self.format_key_bindings())
        sys.stdout.flush()


class MayaKeyboardBindings(KeyboardBindings):
    """Defaults overridden for Maya-style navigation."""

    def __init__(self) -> None:
        super().__init__()
        self._bindings.insert((Key.HOME, Mod.ALT), Action.CAM_RESET)
        self._bindings.insert((MouseButton.MIDDLE, Key.BACKSLASH), Action.IMAGE2D_PAN)
        self._bindings.insert((MouseButton.RIGHT, Key.BACKSLASH), Action.IMAGE2D_ZOOM)
        self._special_mods.add(Key.BACKSLASH)
        self._defaults = self._bindings.copy()


class HoudiniKeyboardBindings(KeyboardBindings):
    """Defaults overridden for Houdini-style navigation."""

    def __init__(self) -> None:
        super().__init__()
        self._bindings.insert((Key.H, Key.SPACE), Action.CAM_RESET)
        self._bindings.insert((Key.Z, Key.SPACE), Action.CAM_RECENTER)
        self._bindings.insert((MouseButton.LEFT, Key.SPACE), Action.CAM_ROTATE)
        self._bindings.insert((MouseButton.MIDDLE, Key.SPACE), Action.CAM_TRACK)
        self._bindings.insert((MouseButton.RIGHT, Key.SPACE), Action.CAM_DOLLY)
        self._special_mods.add(Key.SPACE)
        self._defaults = self._bindings.copy()