"""Keyboard mode management, binding conflicts and binding persistence."""

from __future__ import annotations

import re
import sys
from enum import Enum
from os import PathLike
from typing import Collection, Union

from raygui.bindings import (
    HoudiniKeyboardBindings,
    KeyboardBindings,
    KeyModPair,
    MayaKeyboardBindings,
)
from raygui.gui_types import Action

_HEADER = "# MoonRay GUI Key Bindings\n# Format: key,modifier,action\n"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

FilePath = Union[str, "PathLike[str]"]


class BindingConflictError(Exception):
    """A binding would take a key/mod pair already bound to another action."""

    def __init__(self, key_mod_pair: KeyModPair, action: Action) -> None:
        self.key_mod_pair = tuple(key_mod_pair)
        self.action = Action(action)
        super().__init__(f"key/mod pair {self.key_mod_pair} is already bound to {self.action.name}")


class KeyboardMode(Enum):
    """Families of default bindings."""

    DEFAULT = "default"
    MAYA = "maya"
    HOUDINI = "houdini"


_MODE_BINDINGS: dict[KeyboardMode, type[KeyboardBindings]] = {
    KeyboardMode.DEFAULT: KeyboardBindings,
    KeyboardMode.MAYA: MayaKeyboardBindings,
    KeyboardMode.HOUDINI: HoudiniKeyboardBindings,
}


def _parse_int(text: str) -> int | None:
    """Parse a leading integer, ignoring trailing characters; None on failure."""
    match = _LEADING_INT.match(text)
    if match is None:
        return None
    return int(match.group(1))


class Keyboard:
    """Current keyboard mode and its bindings, with custom bindings kept across modes."""

    def __init__(self) -> None:
        self._mode = KeyboardMode.DEFAULT
        self._bindings: KeyboardBindings = KeyboardBindings()

    @property
    def mode(self) -> KeyboardMode:
        """The active keyboard mode."""
        return self._mode

    # ------------------------------------------------------------ lookup

    def key_mod_pair(self, action: Action) -> KeyModPair:
        """The pair bound to ``action``, or INVALID_KEYMOD if unbound."""
        return self._bindings.key_mod_pair(action)

    def action_from_input(self, key: int, mod: int, pressed_keys: Collection[int] = ()) -> Action:
        """The action for ``key`` and ``mod``, with pressed special keys acting as modifiers."""
        return self._bindings.action_from_input((key, mod), pressed_keys)

    def scroll_action(self) -> Action:
        """The action bound to scroll input."""
        return self._bindings.scroll_action()

    def binding_conflict(self, key: int, mod: int, target_action: Action) -> Action:
        """The other action bound to ``(key, mod)``, or Action.NONE if there is none."""
        bound = self._bindings.action((key, mod))
        if bound != target_action:
            return bound
        return Action.NONE

    def has_binding_conflict(self, key: int, mod: int, target_action: Action) -> bool:
        """True if binding ``(key, mod)`` to ``target_action`` would displace another action."""
        bound = self._bindings.action((key, mod))
        return bound != Action.NONE and bound != target_action

    def is_default_binding(self, action: Action, key_mod_pair: KeyModPair) -> bool:
        """True if ``key_mod_pair`` is the default binding of ``action``."""
        return self._bindings.is_default_binding(action, key_mod_pair)

    # ------------------------------------------------------------- modes

    def set_default_keyboard_mode(self) -> None:
        """Switch to the default bindings, keeping custom bindings."""
        self._change_keyboard_mode(KeyboardMode.DEFAULT)

    def set_maya_keyboard_mode(self) -> None:
        """Switch to Maya-style bindings, keeping custom bindings."""
        self._change_keyboard_mode(KeyboardMode.MAYA)

    def set_houdini_keyboard_mode(self) -> None:
        """Switch to Houdini-style bindings, keeping custom bindings."""
        self._change_keyboard_mode(KeyboardMode.HOUDINI)

    def _change_keyboard_mode(self, mode: KeyboardMode) -> None:
        custom = self._bindings.custom_bindings()
        self._mode = mode
        self.reset_to_defaults()
        for pair, action in custom.items():
            self._bindings.add_custom_binding(pair, action)

    # ----------------------------------------------------------- changes

    def add_custom_binding(
        self, key: int, mod: int, action: Action, force_override: bool = False
    ) -> Action:
        """Bind ``(key, mod)`` to ``action``.

        Returns the action that was displaced (Action.NONE if none). Without
        ``force_override`` a displacement raises BindingConflictError instead.
        """
        conflicting = self.binding_conflict(key, mod, action)
        if not force_override and conflicting != Action.NONE:
            raise BindingConflictError((key, mod), conflicting)
        self._bindings.add_custom_binding((key, mod), action)
        return conflicting

    def reset_binding_to_default(self, action: Action, force_override: bool = False) -> KeyModPair:
        """Restore the default binding of ``action`` and return that pair.

        Raises BindingConflictError if the default pair is now bound to another
        action, unless ``force_override`` is set.
        """
        default = self._bindings.default_key_mod_pair(action)
        conflicting = self.binding_conflict(default[0], default[1], action)
        if not force_override and conflicting != Action.NONE:
            raise BindingConflictError(default, conflicting)
        self._bindings.reset_binding_to_default(action)
        return default

    def reset_to_defaults(self) -> None:
        """Drop every custom binding, restoring the current mode's defaults."""
        self._bindings = _MODE_BINDINGS[self._mode]()

    # ------------------------------------------------------- persistence

    def save_key_bindings(self, filename: FilePath) -> None:
        """Write the custom bindings to ``filename``."""
        with open(filename, "w", encoding="utf-8") as file:
            file.write(_HEADER)
            for (key, mod), action in self._bindings.custom_bindings().items():
                file.write(f"{int(key)},{int(mod)},{int(action)}\n")

    def load_key_bindings(self, filename: FilePath) -> None:
        """Reset to the defaults and apply the custom bindings stored in ``filename``."""
        with open(filename, encoding="utf-8") as file:
            lines = file.read().splitlines()

        self.reset_to_defaults()

        for line in lines:
            if not line or line.startswith("#"):
                continue
            tokens = line.split(",")
            if len(tokens) < 3:
                continue
            values = []
            for token in tokens[:3]:
                value = _parse_int(token)
                if value is None:
                    print(f"Error parsing key binding: {token!r}", file=sys.stderr)
                    value = -1
                if value == -1:
                    break
                values.append(value)
            if len(values) != 3:
                continue
            key, mod, action_value = values
            try:
                action = Action(action_value)
            except ValueError:
                print(f"Error parsing key binding: unknown action {action_value}", file=sys.stderr)
                continue
            self._bindings.add_custom_binding((key, mod), action)

    # ------------------------------------------------------------ output

    def format_key_bindings(self) -> str:
        """All current bindings as text."""
        return self._bindings.format_key_bindings()

    def print_key_bindings(self) -> None:
        """Write all current bindings to standard output."""
        self._bindings.print_key_bindings()